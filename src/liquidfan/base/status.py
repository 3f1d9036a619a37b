"""Status report snapshots returned by the device-control utility."""

import json
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    TypeAdapter,
    field_validator,
)

from .errors import AmbiguousStatusEntryError, MissingStatusEntryError


class StatusEntry(BaseModel):
    """One key/value/unit triple of a status report.

    liquidctl emits values as JSON numbers, strings or booleans; they are
    kept as strings here and parsed by whichever entity reads the key.
    Any other JSON value (list, object) is kept as its JSON text, so it
    fails to parse on the entity that reads it instead of rejecting the
    whole report. A missing value is None, which is not the same thing as a value that
    fails to parse.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1, description="Status label, e.g. 'Fan 1 speed'")
    value: str | None = Field(default=None, description="Raw reading")
    unit: str | None = Field(default=None, description="Unit label, may be empty")

    @field_validator("value", "unit", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, (int, float)):
            return str(value)
        return json.dumps(value)


class StatusReport(BaseModel):
    """A snapshot of one device's telemetry for one poll.

    Reports are immutable and discarded after every entity has consumed
    them. Entries keep their original order; a key index is built once
    at construction for the per-entity lookups.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bus: str | None = Field(default=None, description="Bus the device sits on")
    address: str = Field(description="Device address as reported by liquidctl")
    description: str = Field(default="", description="Device model description")
    entries: tuple[StatusEntry, ...] = Field(
        default=(),
        alias="status",
        description="Ordered status entries",
    )

    _index: dict[str, list[StatusEntry]] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        index: dict[str, list[StatusEntry]] = {}
        for entry in self.entries:
            index.setdefault(entry.key, []).append(entry)
        self._index = index

    def entry(self, key: str) -> StatusEntry:
        """Return the single entry carrying key.

        Raises:
            MissingStatusEntryError: no entry has this key
            AmbiguousStatusEntryError: several entries have this key
        """
        matches = self._index.get(key)
        if not matches:
            raise MissingStatusEntryError(f"No status entry for '{key}'")
        if len(matches) > 1:
            raise AmbiguousStatusEntryError(
                f"{len(matches)} status entries for '{key}'"
            )
        return matches[0]

    def has_value(self, key: str) -> bool:
        """Check whether an entry with this exact key carries a value."""
        return any(entry.value is not None for entry in self._index.get(key, ()))

    def keys(self) -> list[str]:
        """Return entry keys in report order."""
        return [entry.key for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)


_REPORTS_ADAPTER = TypeAdapter(list[StatusReport])


def parse_status_reports(payload: str | bytes) -> list[StatusReport]:
    """Decode the output of ``liquidctl --json status``.

    Raises:
        pydantic.ValidationError: payload is not a list of reports
    """
    return _REPORTS_ADAPTER.validate_json(payload)
