"""Tolerances and formatting settings for spacegeom."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, fields
from math import pi
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional

## constants
## single tolerance for magnitude, angle and determinant tests.
## Redefine at your peril.
epsilon = 1e-9
pi2 = 2.0*pi

## decimals used for non-integral numbers in equation strings
decimals = 3

## decimals used when printing points and vectors
vector_decimals = 2

SETTINGS_FILENAME = "spacegeom.yaml"


@dataclass(frozen=True)
class Settings:
    """Overridable tolerance and formatting settings."""

    epsilon: float = epsilon
    decimals: int = decimals
    vector_decimals: int = vector_decimals
    log_level: str = "WARNING"

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "Settings":
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown settings: {', '.join(unknown)}")
        values = dict(data)
        if "epsilon" in values:
            values["epsilon"] = float(values["epsilon"])
            if values["epsilon"] <= 0.0:
                raise ValueError("epsilon must be positive")
        for key in ("decimals", "vector_decimals"):
            if key in values:
                values[key] = int(values[key])
                if values[key] < 0:
                    raise ValueError(f"{key} must be non-negative")
        if "log_level" in values:
            values["log_level"] = str(values["log_level"]).upper()
        return cls(**values)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings from a YAML file.

    If ``path`` is a directory, ``spacegeom.yaml`` inside it is read.  A
    missing file yields the defaults.
    """

    if path is None:
        return Settings()
    settings_path = Path(path)
    if settings_path.is_dir():
        settings_path = settings_path / SETTINGS_FILENAME
    if not settings_path.exists():
        return Settings()
    import yaml  # local import to avoid hard dependency if unused

    with settings_path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"settings file must contain a mapping: {settings_path}")
    return Settings.from_mapping(data)


def save_settings(settings: Settings, path: Path | str) -> Path:
    import yaml

    settings_path = Path(path)
    if settings_path.is_dir():
        settings_path = settings_path / SETTINGS_FILENAME
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    with settings_path.open("w", encoding="utf-8") as fp:
        yaml.safe_dump(settings.to_dict(), fp, sort_keys=False)
    return settings_path


def current_settings(log_level: str = "WARNING") -> Settings:
    """the tolerance and formatting values in effect right now"""
    return Settings(epsilon=epsilon, decimals=decimals,
                    vector_decimals=vector_decimals, log_level=log_level)


## every tolerance predicate and formatter reads the module globals at
## call time, so reassigning them here changes all later computations
def apply_settings(settings: Settings) -> Settings:
    """Make ``settings`` the active tolerance and formatting values.

    Returns the settings that were active before, so they can be put
    back with another ``apply_settings`` call.
    """
    global epsilon, decimals, vector_decimals
    previous = current_settings(settings.log_level)
    epsilon = settings.epsilon
    decimals = settings.decimals
    vector_decimals = settings.vector_decimals
    return previous


@contextmanager
def applied_settings(settings: Settings) -> Iterator[Settings]:
    """Apply ``settings`` for the duration of a ``with`` block."""
    previous = apply_settings(settings)
    try:
        yield settings
    finally:
        apply_settings(previous)


__all__ = [
    'epsilon',
    'pi2',
    'decimals',
    'vector_decimals',
    'Settings',
    'load_settings',
    'save_settings',
    'current_settings',
    'apply_settings',
    'applied_settings',
]
