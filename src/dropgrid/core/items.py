"""Item and Location value types for row-packed regions."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from .validation import validate_non_negative

# Keys the host uses for the fields below; anything else is payload.
_ITEM_KEYS = ("identifier", "size", "row", "position")


@dataclass(frozen=True)
class Item:
    """A payload-bearing unit placed in a row.

    ``row`` and ``position`` are 1-based and only ever assigned by the
    packer. ``payload`` is opaque to the engine and copied on placement.
    """

    identifier: Any
    size: float = 0.0
    row: int | None = None
    position: int | None = None
    payload: dict = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        validate_non_negative(self.size, "Item.size")

    def placed(self, row: int, position: int) -> Item:
        """Return a copy of this item at (row, position)."""
        return dataclasses.replace(
            self, row=row, position=position, payload=dict(self.payload)
        )

    @classmethod
    def from_dict(cls, d: dict) -> Item:
        payload = {k: v for k, v in d.items() if k not in _ITEM_KEYS}
        return cls(
            identifier=d["identifier"],
            size=d.get("size", 0.0),
            row=d.get("row"),
            position=d.get("position"),
            payload=payload,
        )

    def to_dict(self) -> dict:
        return {
            **self.payload,
            "identifier": self.identifier,
            "size": self.size,
            "row": self.row,
            "position": self.position,
        }


@dataclass(frozen=True)
class Location:
    """Where an action applies: a 1-based row and position in a region.

    ``new_row`` asks for a fresh row to be spliced in at ``row`` instead of
    inserting into the existing row there.
    """

    region: Any = None
    row: int | None = None
    position: int | None = None
    new_row: bool = False

    @classmethod
    def from_dict(cls, d: dict) -> Location:
        return cls(
            region=d.get("region"),
            row=d.get("row"),
            position=d.get("position"),
            new_row=bool(d.get("newRow", False)),
        )

    def to_dict(self) -> dict:
        return {
            "region": self.region,
            "row": self.row,
            "position": self.position,
            "newRow": self.new_row,
        }


Row = list[Item]
Region = list[Row]
