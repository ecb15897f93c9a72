from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator


class ConfigError(ValueError):
    """Raised when a settings file cannot be turned into :class:`Settings`."""


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    show_location: bool = True
    max_value_length: int = 200
    log_file: str | None = None
    verbose: bool = False

    @field_validator("max_value_length")
    @classmethod
    def max_value_length_must_fit_ellipsis(cls, v: int) -> int:
        if v < 8:
            raise ValueError("max_value_length must be at least 8")
        return v

    @field_validator("log_file")
    @classmethod
    def expand_log_file(cls, v: str | None) -> str | None:
        """Expand ``${VAR}`` references, failing on unset ones without a default."""
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"log_file '{v}' references a missing environment variable: {e}")


_settings = Settings()


def get_settings() -> Settings:
    return _settings


def configure(settings: Settings | None = None, **overrides: Any) -> Settings:
    """Install process-wide settings and return them.

    ``overrides`` are applied on top of ``settings`` (or of the current
    settings when none are given) and validated like a settings file.
    """
    global _settings
    base = settings if settings is not None else _settings
    if overrides:
        base = Settings(**{**base.model_dump(), **overrides})
    _settings = base
    return _settings


@contextmanager
def override(**changes: Any) -> Iterator[Settings]:
    previous = get_settings()
    try:
        yield configure(**changes)
    finally:
        configure(previous)


def load_config(path: Path) -> Settings:
    """Load and validate settings from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ConfigError(
            f"{path}: expected a mapping of settings, got {type(raw).__name__}"
        )

    settings = Settings(**raw)

    # Resolve a relative log_file against the config file location
    if settings.log_file and not Path(settings.log_file).is_absolute():
        log_path = (path.parent.resolve() / settings.log_file).resolve()
        settings = settings.model_copy(update={"log_file": str(log_path)})

    return settings
