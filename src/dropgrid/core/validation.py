"""Precondition checks with clear error messages for host integrations.

These guard the boundaries where host data enters the engine. A failure
here is a programming error in the caller, so every check raises rather
than returning a sentinel.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from numbers import Real
from typing import Any


def _check_number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}.")
    if math.isnan(value):
        raise ValueError(f"{name} must not be NaN.")
    return value


def validate_bounds(top: Any, bottom: Any, left: Any, right: Any) -> None:
    """Validate that rectangle edges are numeric and not inverted."""
    for name, value in (("top", top), ("bottom", bottom), ("left", left), ("right", right)):
        _check_number(value, name)
    if top > bottom:
        raise ValueError(
            f"Position has negative height: top={top} is below bottom={bottom}."
        )
    if left > right:
        raise ValueError(
            f"Position has negative width: left={left} is right of right={right}."
        )


def validate_fraction(value: Any, name: str) -> float:
    """Validate a fold fraction in [0, 1]."""
    _check_number(value, name)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0 and 1, got {value}.")
    return value


def validate_non_negative(value: Any, name: str) -> float:
    _check_number(value, name)
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}.")
    return value


def validate_max_size(value: Any) -> float:
    _check_number(value, "max_size")
    if value <= 0:
        raise ValueError(f"max_size must be positive, got {value}.")
    return value


def validate_unique_identifiers(identifiers: Iterable[Any], context: str) -> None:
    """Raise if any identifier appears more than once."""
    seen: set = set()
    dupes: list = []
    for ident in identifiers:
        if ident in seen and ident not in dupes:
            dupes.append(ident)
        seen.add(ident)
    if dupes:
        raise ValueError(
            f"Item identifiers must be unique in {context}. Found duplicates: {dupes[:5]}"
            + (f" (and {len(dupes) - 5} more)" if len(dupes) > 5 else "")
        )


def validate_region_shape(region: Any) -> Sequence:
    """Validate that a region is a sequence of row sequences."""
    if isinstance(region, (str, bytes)) or not isinstance(region, Sequence):
        raise TypeError(
            f"Region must be a sequence of rows, got {type(region).__name__}."
        )
    for i, row in enumerate(region, start=1):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise TypeError(
                f"Row {i} must be a sequence of items, got {type(row).__name__}."
            )
    return region
