"""Exception hierarchy for liquidfan.

Errors carry a message only. Entry lookup and parsing problems are
recovered inside the entities; DeviceNotRespondingError is the one
failure that leaves Device.refresh().
"""


class LiquidfanError(Exception):
    """Base class for all liquidfan errors."""


class DeviceNotRespondingError(LiquidfanError):
    """The status source returned no report for a device address."""


class LiquidctlError(LiquidfanError):
    """Running or decoding the liquidctl utility failed."""


class StatusEntryError(LiquidfanError, LookupError):
    """A status report lookup did not resolve to a single entry."""


class MissingStatusEntryError(StatusEntryError):
    """No entry in the status report carries the requested key."""


class AmbiguousStatusEntryError(StatusEntryError):
    """More than one entry in the status report carries the key."""
