"""Drag hotspots: classify a pointer into a drop zone around an Area."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ..core.area import Area
from ..core.config import DragConfig, resolve_config
from . import hit_test

TOP = "top"
BOTTOM = "bottom"
LEFT = "left"
RIGHT = "right"
MODIFIERS = (TOP, BOTTOM, LEFT, RIGHT)


@dataclass(frozen=True)
class DragResult:
    """Where a dragged item would land.

    ``id`` is the target area's index. ``child_id`` is the index of the
    child slot when the drop lands beside a child rather than on a row edge.
    """

    id: int
    modifier: str
    child_id: int | None = None

    def to_dict(self) -> dict:
        d = {"id": self.id, "modifier": self.modifier}
        if self.child_id is not None:
            d["childId"] = self.child_id
        return d


def _edges(children: tuple[Area, ...], attr: str) -> np.ndarray:
    arr = np.array([getattr(c.position, attr) for c in children], dtype=np.float64)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True)
class DragHotspot:
    """Drop-zone tester for one area.

    Holds only the area, its config and the child edges derived from them,
    so calling it on every pointer move carries no state between calls.
    """

    area: Area
    config: DragConfig = field(default_factory=DragConfig)
    _lefts: np.ndarray = field(init=False, repr=False, compare=False)
    _rights: np.ndarray = field(init=False, repr=False, compare=False)
    _indices: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        children = self.area.children
        object.__setattr__(self, "_lefts", _edges(children, "left"))
        object.__setattr__(self, "_rights", _edges(children, "right"))
        object.__setattr__(self, "_indices", tuple(c.index for c in children))

    def __call__(self, x: float, y: float, meta: Any = None) -> DragResult | None:
        area = self.area
        cfg = self.config
        pos = area.position

        if not hit_test.inside(
            x, y, pos.top, pos.bottom, pos.left, pos.right, cfg.offset_highlight
        ):
            return None

        fold_height = hit_test.fold_size(pos.height, cfg.offset_y)
        fold_width = hit_test.fold_size(pos.width, cfg.offset_x)

        if hit_test.in_middle_band(y, pos.top, pos.bottom, fold_height):
            result = self._slot(x)
            if result is not None:
                return result
            if hit_test.in_left_half(x, pos.left, fold_width):
                return DragResult(area.index, LEFT)
            return DragResult(area.index, RIGHT)

        if hit_test.in_top_band(y, pos.top, fold_height, cfg.offset_highlight):
            # Only the first row, or a filled row under a filled row, owns its
            # top edge; otherwise the neighbour's bottom edge is highlighted.
            if area.is_first_row or (area.has_children and not area.empty_row_above):
                return DragResult(area.index, TOP)
            return self._slot(x)

        if hit_test.in_bottom_band(y, pos.bottom, fold_height, cfg.offset_highlight):
            if area.is_last_row or (area.has_children and not area.empty_row_below):
                return DragResult(area.index, BOTTOM)
            return self._slot(x)

        return None

    def _slot(self, x: float) -> DragResult | None:
        """Child slot under ``x``; an empty area offers its first slot."""
        if not self.area.has_children:
            return DragResult(self.area.index, LEFT, child_id=1)
        return self._check_children(x)

    def _check_children(self, x: float) -> DragResult | None:
        """Scan children left to right; the first fold containing ``x`` wins."""
        spacing = self.config.offset_highlight
        fold_widths = hit_test.fold_size(self._rights - self._lefts, self.config.offset_x)
        left_hits = hit_test.in_left_fold(x, self._lefts, fold_widths, spacing)
        right_hits = hit_test.in_right_fold(x, self._rights, fold_widths, spacing)
        matches = np.flatnonzero(left_hits | right_hits)
        if len(matches) == 0:
            return None
        i = int(matches[0])
        modifier = LEFT if left_hits[i] else RIGHT
        return DragResult(self.area.index, modifier, child_id=self._indices[i])


def generate_drag_hotspot(
    area: Area,
    config: DragConfig | dict | None = None,
) -> DragHotspot:
    """Build a drag tester for ``area``.

    ``config`` may be a DragConfig or a dict of overrides for the defaults.
    """
    if not isinstance(config, DragConfig):
        config = resolve_config("drag", config)
    return DragHotspot(area, config)
