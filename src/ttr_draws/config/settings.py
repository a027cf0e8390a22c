"""Draw settings loaded from an optional JSON file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import orjson
from pydantic import BaseModel, Field, ValidationError, model_validator

from ..core.drivers import SWEEP_PICKS, SWEEP_ROWS, TRAIN_CARDS
from ..core.sampler import UniformScheme

DEFAULT_SETTINGS_PATH = Path("config/draws.json")


class ConfigError(ValueError):
    """Raised when a settings file cannot be read or validated."""


class DrawSettings(BaseModel):
    """Knobs shared by every draw command.

    ``scheme`` stays ``None`` unless a file or flag sets it, so each command
    can fall back to its own folding rule.
    """

    scheme: Optional[UniformScheme] = None
    sweep_rows: int = Field(SWEEP_ROWS, ge=0)
    sweep_picks: int = Field(SWEEP_PICKS, ge=0)
    sweep_pool: int = Field(TRAIN_CARDS, ge=1)

    @model_validator(mode="after")
    def _picks_fit_pool(self) -> "DrawSettings":
        if self.sweep_picks > self.sweep_pool:
            raise ValueError(f"sweep_picks ({self.sweep_picks}) cannot exceed sweep_pool ({self.sweep_pool})")
        return self

    def scheme_or(self, default: UniformScheme) -> UniformScheme:
        return default if self.scheme is None else self.scheme

    def with_overrides(self, **overrides: Optional[Any]) -> "DrawSettings":
        """Return a copy with every non-``None`` override applied and re-validated."""
        updates: Dict[str, Any] = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        try:
            return DrawSettings.model_validate({**self.model_dump(), **updates})
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


def load_settings(path: Path = DEFAULT_SETTINGS_PATH) -> DrawSettings:
    """Load settings from disk, falling back to defaults when the file is absent."""

    if not path.exists():
        return DrawSettings()

    try:
        data = orjson.loads(path.read_bytes())
    except orjson.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")

    try:
        return DrawSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
