"""Hotspot and packing configuration with documented defaults."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable

from .validation import validate_fraction, validate_max_size, validate_non_negative


# Default drag fold sizes
DEFAULT_OFFSET_Y = 0.2   # fraction of height for the top/bottom fold bands
DEFAULT_OFFSET_X = 0.50  # fraction of width for the left/right split
DEFAULT_OFFSET_HIGHLIGHT = 5.0  # px of slack for highlight elements
# Default hover hysteresis
DEFAULT_OFFSET_ACTIVE = 15.0
# Default row capacity
DEFAULT_MAX_SIZE = 8

# Host camelCase keys -> field names
_CAMEL_KEYS = {
    "offsetY": "offset_y",
    "offsetX": "offset_x",
    "offsetHighlight": "offset_highlight",
    "offsetActive": "offset_active",
    "maxSize": "max_size",
    "getSize": "get_size",
}


@dataclass(frozen=True)
class DragConfig:
    offset_y: float = DEFAULT_OFFSET_Y
    offset_x: float = DEFAULT_OFFSET_X
    offset_highlight: float = DEFAULT_OFFSET_HIGHLIGHT

    def __post_init__(self) -> None:
        validate_fraction(self.offset_y, "offset_y")
        validate_fraction(self.offset_x, "offset_x")
        validate_non_negative(self.offset_highlight, "offset_highlight")


@dataclass(frozen=True)
class HoverConfig:
    offset_active: float = DEFAULT_OFFSET_ACTIVE

    def __post_init__(self) -> None:
        validate_non_negative(self.offset_active, "offset_active")


@dataclass(frozen=True)
class HotspotConfig:
    """Both named configuration groups."""

    drag: DragConfig = field(default_factory=DragConfig)
    hover: HoverConfig = field(default_factory=HoverConfig)


_HOTSPOT_TYPES = {"drag": DragConfig, "hover": HoverConfig}


def _normalize_keys(overrides: dict[str, Any]) -> dict[str, Any]:
    return {_CAMEL_KEYS.get(k, k): v for k, v in overrides.items()}


def _apply_overrides(base: Any, overrides: dict[str, Any] | None) -> Any:
    if not overrides:
        return base
    names = {f.name for f in dataclasses.fields(base)}
    normalized = _normalize_keys(overrides)
    unknown = sorted(set(normalized) - names)
    if unknown:
        raise TypeError(
            f"Unknown {type(base).__name__} option(s): {unknown}. "
            f"Available: {sorted(names)}"
        )
    return dataclasses.replace(base, **normalized)


def resolve_config(hotspot_type: str, overrides: dict[str, Any] | None = None):
    """Return the defaults for ``hotspot_type`` shallowly merged with ``overrides``.

    Parameters
    ----------
    hotspot_type : 'drag' or 'hover'
    overrides : dict, optional
        Field values to replace. camelCase host keys are accepted.
    """
    if hotspot_type not in _HOTSPOT_TYPES:
        raise ValueError(
            f"Unknown hotspot type '{hotspot_type}'. "
            f"Use one of {sorted(_HOTSPOT_TYPES)}."
        )
    return _apply_overrides(_HOTSPOT_TYPES[hotspot_type](), overrides)


def default_get_size(item) -> float:
    return item.size


@dataclass(frozen=True)
class PackingConfig:
    """Row capacity and how to measure an item against it."""

    max_size: float = DEFAULT_MAX_SIZE
    get_size: Callable[[Any], float] = default_get_size

    def __post_init__(self) -> None:
        validate_max_size(self.max_size)
        if not callable(self.get_size):
            raise TypeError(
                f"get_size must be callable, got {type(self.get_size).__name__}."
            )

    def with_overrides(self, overrides: dict[str, Any] | None) -> PackingConfig:
        return _apply_overrides(self, overrides)
