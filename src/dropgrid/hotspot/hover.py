"""Hover hotspots: which child of an Area is under the pointer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ..core.area import Area
from ..core.config import HoverConfig, resolve_config
from . import hit_test


@dataclass(frozen=True)
class HoverMeta:
    """Per-call interaction state supplied by the host."""

    active_id: Any = None


def _active_id(meta: Any) -> Any:
    if meta is None:
        return None
    if isinstance(meta, dict):
        return meta.get("active_id", meta.get("activeId"))
    return getattr(meta, "active_id", None)


@dataclass(frozen=True)
class HoverHotspot:
    """Hover tester for the children of one area.

    The active child is tested first against its bounds grown by
    ``offset_active`` so the highlight does not flicker at its edge.
    """

    area: Area
    config: HoverConfig = field(default_factory=HoverConfig)
    _edges: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # columns: top, bottom, left, right
        edges = np.array(
            [
                [c.position.top, c.position.bottom, c.position.left, c.position.right]
                for c in self.area.children
            ],
            dtype=np.float64,
        ).reshape(-1, 4)
        edges.flags.writeable = False
        object.__setattr__(self, "_edges", edges)

    def __call__(self, x: float, y: float, meta: Any = None) -> Any:
        active_id = _active_id(meta)
        if active_id is not None:
            active = self.area.child(active_id)
            if active is not None:
                p = active.position
                if hit_test.inside(
                    x, y, p.top, p.bottom, p.left, p.right, self.config.offset_active
                ):
                    return active.identifier

        if len(self._edges) == 0:
            return False
        e = self._edges
        hits = np.flatnonzero(hit_test.inside(x, y, e[:, 0], e[:, 1], e[:, 2], e[:, 3]))
        if len(hits) == 0:
            return False
        return self.area.children[int(hits[0])].identifier


def generate_hover_hotspot(
    area: Area,
    config: HoverConfig | dict | None = None,
) -> HoverHotspot:
    """Build a hover tester for ``area``.

    ``config`` may be a HoverConfig or a dict of overrides for the defaults.
    """
    if not isinstance(config, HoverConfig):
        config = resolve_config("hover", config)
    return HoverHotspot(area, config)
