"""JSON settings loading utilities."""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from compactmath.constants import (
    DEFAULT_FLOAT_PRECISION,
    DEFAULT_TOLERANCE,
    default_config_path,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Process-wide knobs that do not affect the algebra itself."""
    # Absolute tolerance used by is_close() when none is passed
    tolerance: float = DEFAULT_TOLERANCE
    # Decimal places for str(); None prints the shortest float32 repr
    float_precision: Optional[int] = DEFAULT_FLOAT_PRECISION

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown settings keys: {', '.join(unknown)}")
        settings = cls(**data)
        if settings.tolerance < 0.0:
            raise ValueError("tolerance must be non-negative")
        if settings.float_precision is not None and settings.float_precision < 0:
            raise ValueError("float_precision must be non-negative")
        return settings

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_json(path: Path) -> Any:
    """Load and return parsed JSON from a file."""
    with open(path) as f:
        return json.load(f)


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from a JSON file.

    Without a path the file named by $COMPACTMATH_CONFIG is used; when that is
    unset too, the built-in defaults are returned.
    """
    if path is None:
        path = default_config_path()
    if path is None:
        return Settings()
    data = load_json(Path(path))
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")
    settings = Settings.from_dict(data)
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings


_active: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the active settings, loading them on first use."""
    global _active
    if _active is None:
        _active = load_settings()
    return _active


def set_settings(settings: Optional[Settings] = None, **overrides: Any) -> Settings:
    """Replace the active settings; ``None`` reloads from the environment."""
    global _active
    base = settings if settings is not None else load_settings()
    _active = Settings.from_dict({**base.to_dict(), **overrides}) if overrides else base
    return _active
