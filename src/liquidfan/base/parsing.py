"""Parsers for free-form status keys and values."""

import logging
import math
import re

# Channel index for a capability that only has one, unnumbered unit
NO_CHANNEL = -1

_INDEX_TOKEN = re.compile(r"[+-]?\d+")


def parse_channel(key: str, kind: str, logger: logging.Logger) -> int:
    """Extract the channel index embedded in a status key.

    The key is split on whitespace and must contain exactly one integer
    token. Firmware labels vary ("Fan 2 speed", "Fan speed"), so a key
    with no index token, or with several, is treated as the single
    unnumbered channel.

    Args:
        key: Status entry key, e.g. "Fan 2 speed"
        kind: Capability name used in the diagnostic, e.g. "Fan"
        logger: Receives the diagnostic for unindexed keys

    Returns:
        The channel index, or NO_CHANNEL
    """
    tokens = [token for token in key.split() if _INDEX_TOKEN.fullmatch(token)]
    if len(tokens) == 1:
        return int(tokens[0])

    if tokens:
        logger.warning(
            "%s contains %d index identifiers. Setting for only one %s channel",
            key,
            len(tokens),
            kind,
        )
    else:
        logger.warning(
            "%s does not contain any index identifier. "
            "Setting for only one %s channel",
            key,
            kind,
        )
    return NO_CHANNEL


def parse_reading(raw: str) -> float | None:
    """Parse a raw status value as a float, returning None on failure.

    Digit separators ("1_000") and non-finite results ("inf", "nan")
    count as failures.
    """
    if "_" in raw:
        return None
    try:
        reading = float(raw)
    except ValueError:
        return None
    if not math.isfinite(reading):
        return None
    return reading
