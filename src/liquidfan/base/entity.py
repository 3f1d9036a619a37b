"""Base entity class for objects the host application addresses."""

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """Base class for every sensor, control, device and plugin.

    The host keys saved fan curves on id, so it must be derived from
    stable facts (device address plus role) and never change between
    restarts. name is only shown to the user.

    Unknown fields are rejected, so a misspelled keyword fails at
    construction instead of being carried along silently.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(min_length=1, description="Stable host identifier")
    name: str = Field(min_length=1, description="Human-readable label")

    def __str__(self) -> str:
        return f"{self.name} [{self.id}]"
