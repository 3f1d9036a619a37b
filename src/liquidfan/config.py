"""YAML configuration with dotted boolean flags."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

# Gates the quieter parse warnings of control entities
DEBUG_FLAG = "app.debug"

CONFIG_PATH_ENV = "LIQUIDFAN_CONFIG"

_BOOL_ADAPTER = TypeAdapter(bool)


class Config(BaseModel):
    """Read-only settings loaded once at startup.

    Settings are a nested mapping, e.g.::

        app:
          debug: true

    which get_bool() reads as "app.debug". A flat key spelled with dots
    is accepted as well.
    """

    model_config = ConfigDict(frozen=True)

    settings: dict[str, Any] = Field(
        default_factory=dict, description="Nested settings mapping"
    )

    @classmethod
    def load(cls, path: str | Path) -> "Config":
        """Load settings from a YAML file; a missing file is empty."""
        path = Path(path)
        if not path.exists():
            return cls()
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(settings=data)

    @classmethod
    def from_env(cls) -> "Config":
        """Load settings from the file named by LIQUIDFAN_CONFIG."""
        path = os.environ.get(CONFIG_PATH_ENV)
        if not path:
            return cls()
        return cls.load(path)

    def get(self, key: str, default: Any = None) -> Any:
        """Resolve a dotted key through the nested settings."""
        if key in self.settings:
            return self.settings[key]

        node: Any = self.settings
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return a flag, coercing "true"/"yes"/"1" style values."""
        value = self.get(key)
        if value is None:
            return default
        try:
            return _BOOL_ADAPTER.validate_python(value)
        except ValidationError:
            return default
