"""Area: a rectangle tested for hotspot membership, with precomputed adjacency."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .geometry import Position


@dataclass(frozen=True)
class Area:
    """A measured element (usually a row) and its child elements.

    ``index`` is the 1-based order among siblings and is what drag results
    report. The adjacency flags are computed once by ``build_row_areas``
    instead of being inferred while testing a point.
    """

    position: Position
    index: int
    identifier: Any = None
    children: tuple[Area, ...] = field(default_factory=tuple)
    is_first_row: bool = False
    is_last_row: bool = False
    empty_row_above: bool = False
    empty_row_below: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.position, Position):
            raise TypeError(
                f"Area.position must be a Position, got {type(self.position).__name__}."
            )
        # Accept any sequence of children but store a tuple so the area stays hashable
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

    def child(self, identifier: Any) -> Area | None:
        """Return the child with the given identifier, or None."""
        for c in self.children:
            if c.identifier == identifier:
                return c
        return None

    @classmethod
    def from_dict(cls, d: dict) -> Area:
        """Build from the host's camelCase shape (``id``, ``isFirstRow`` ...)."""
        return cls(
            position=Position.from_dict(d["position"]),
            index=d["index"],
            identifier=d.get("id"),
            children=tuple(cls.from_dict(c) for c in d.get("children") or ()),
            is_first_row=bool(d.get("isFirstRow", False)),
            is_last_row=bool(d.get("isLastRow", False)),
            empty_row_above=bool(d.get("emptyRowAbove", False)),
            empty_row_below=bool(d.get("emptyRowBelow", False)),
        )

    def to_dict(self) -> dict:
        d = {
            "position": self.position.to_dict(),
            "index": self.index,
            "id": self.identifier,
            "isFirstRow": self.is_first_row,
            "isLastRow": self.is_last_row,
            "emptyRowAbove": self.empty_row_above,
            "emptyRowBelow": self.empty_row_below,
        }
        if self.children:
            d["children"] = [c.to_dict() for c in self.children]
        return d


def build_row_areas(
    rows: Sequence[tuple[Position, Any, Sequence[tuple[Position, Any]]]],
) -> list[Area]:
    """Build one Area per row of measured bounds.

    Parameters
    ----------
    rows : sequence of ``(row_position, row_id, [(child_position, child_id), ...])``
        Measured rows in display order. Children are in left-to-right order.

    Returns
    -------
    list[Area]
        Row areas indexed from 1, with children indexed from 1 and the
        first/last/empty-neighbour flags filled in.
    """
    n = len(rows)
    empty = [len(children) == 0 for _, _, children in rows]
    areas = []
    for i, (position, row_id, children) in enumerate(rows):
        child_areas = tuple(
            Area(position=cpos, index=j, identifier=cid)
            for j, (cpos, cid) in enumerate(children, start=1)
        )
        areas.append(
            Area(
                position=position,
                index=i + 1,
                identifier=row_id,
                children=child_areas,
                is_first_row=i == 0,
                is_last_row=i == n - 1,
                empty_row_above=i > 0 and empty[i - 1],
                empty_row_below=i < n - 1 and empty[i + 1],
            )
        )
    return areas
