"""Structural actions applied by the region rebuilder.

Each action is its own frozen dataclass and the rebuilder dispatches on
the type, never on which keys happen to be present.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from .items import Item, Location


@dataclass(frozen=True)
class Add:
    """Insert one item at ``location``."""

    item: Item
    location: Location = field(default_factory=Location)


@dataclass(frozen=True)
class AddGroup:
    """Insert a contiguous group; every member gets a row of its own."""

    grouped_items: tuple[Item, ...]
    location: Location = field(default_factory=Location)

    def __post_init__(self) -> None:
        if not isinstance(self.grouped_items, tuple):
            object.__setattr__(self, "grouped_items", tuple(self.grouped_items))


@dataclass(frozen=True)
class Remove:
    identifier: Any


@dataclass(frozen=True)
class RemoveGroup:
    identifiers: frozenset

    def __post_init__(self) -> None:
        if not isinstance(self.identifiers, frozenset):
            object.__setattr__(self, "identifiers", frozenset(self.identifiers))


@dataclass(frozen=True)
class RemoveRow:
    """Delete the row at ``location.row`` after repacking."""

    location: Location


@dataclass(frozen=True)
class NoAction:
    """Repack the region unchanged."""


Action = Union[Add, AddGroup, Remove, RemoveGroup, RemoveRow, NoAction]


def target_location(action: Action) -> Location:
    """Return the location carried by an action, or an empty Location."""
    if isinstance(action, (Add, AddGroup, RemoveRow)):
        return action.location
    return Location()


def removed_identifiers(action: Action) -> frozenset:
    """Identifiers the action removes during the repack pass."""
    if isinstance(action, Remove):
        return frozenset((action.identifier,))
    if isinstance(action, RemoveGroup):
        return action.identifiers
    return frozenset()


_ACTION_KEYS = ("add", "addGroup", "remove", "removeGroup", "removeRow")


def action_from_dict(d: dict | None) -> Action:
    """Parse the host's key-based action shape into an Action.

    Accepts ``{"add": {"item": {...}, "location": {...}}}``,
    ``{"addGroup": {"groupedItems": [...], "location": {...}}}``,
    ``{"remove": id}``, ``{"removeGroup": [ids]}`` and
    ``{"removeRow": {"location": {...}}}``. An empty dict is NoAction.
    """
    present = [k for k in _ACTION_KEYS if d and d.get(k) is not None]
    if not present:
        return NoAction()
    if len(present) > 1:
        raise ValueError(
            f"An action must have exactly one kind, got {present}."
        )
    key = present[0]
    body = d[key]
    if key == "add":
        return Add(
            item=Item.from_dict(body["item"]),
            location=Location.from_dict(body.get("location") or {}),
        )
    if key == "addGroup":
        return AddGroup(
            grouped_items=tuple(Item.from_dict(i) for i in body["groupedItems"]),
            location=Location.from_dict(body.get("location") or {}),
        )
    if key == "remove":
        return Remove(body)
    if key == "removeGroup":
        return RemoveGroup(frozenset(body))
    return RemoveRow(location=Location.from_dict(body.get("location") or {}))
