"""Region rebuilder: apply one structural action and repack every row."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from ..core.actions import (
    Action,
    Add,
    AddGroup,
    NoAction,
    RemoveRow,
    removed_identifiers,
    target_location as location_of,
)
from ..core.config import PackingConfig
from ..core.items import Item, Location, Region, Row
from ..core.validation import validate_region_shape, validate_unique_identifiers
from .packer import RowPacker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Insertion:
    """Marker for where an Add/AddGroup lands in the row plan."""

    items: tuple[Item, ...]
    grouped: bool


def _insertion_for(action: Action) -> _Insertion | None:
    if isinstance(action, Add):
        return _Insertion((action.item,), grouped=False)
    if isinstance(action, AddGroup):
        return _Insertion(action.grouped_items, grouped=True)
    return None


def _build_arena(region: Sequence[Row], action: Action) -> dict:
    """Index every existing item by identifier and check the insertion is new."""
    validate_unique_identifiers(
        (item.identifier for row in region for item in row), "the region"
    )
    arena = {item.identifier: item for row in region for item in row}
    insertion = _insertion_for(action)
    if insertion is not None:
        new_ids = [item.identifier for item in insertion.items]
        validate_unique_identifiers(new_ids, "the inserted items")
        clashes = [i for i in new_ids if i in arena]
        if clashes:
            raise ValueError(
                f"Cannot add items already in the region: {clashes[:5]}. "
                "Remove them first to move them."
            )
    return arena


def _plan_rows(
    region: Sequence[Row],
    action: Action,
    location: Location,
) -> list[list]:
    """Lay out surviving identifiers and the insertion marker per output row.

    Each entry of the returned plan is one source row to pack; entries are
    item identifiers or the ``_Insertion`` marker.
    """
    insertion = _insertion_for(action)
    removed = removed_identifiers(action)
    n_rows = len(region)

    target_row = location.row
    if target_row is not None and target_row < 1:
        target_row = 1
    append_at_end = insertion is not None and (target_row is None or target_row > n_rows)

    plan: list[list] = []
    for r, row in enumerate(region, start=1):
        inserting_here = insertion is not None and not append_at_end and r == target_row
        if inserting_here and location.new_row:
            plan.append([insertion])
            inserting_here = False

        slot = None
        if inserting_here:
            # Slot is the existing position to insert before
            slot = location.position if location.position is not None else len(row) + 1
            slot = min(max(slot, 1), len(row) + 1)

        entries: list = []
        for position, item in enumerate(row, start=1):
            if slot == position:
                entries.append(insertion)
            if item.identifier not in removed:
                entries.append(item.identifier)
        if slot == len(row) + 1:
            entries.append(insertion)
        plan.append(entries)

    if append_at_end:
        plan.append([insertion])
    return plan


def _pack_plan(plan: list[list], arena: dict, config: PackingConfig) -> Region:
    rebuilt: Region = []
    for entries in plan:
        packer = RowPacker(config, start_row=len(rebuilt) + 1)
        for entry in entries:
            if isinstance(entry, _Insertion):
                if entry.grouped:
                    packer.add_group(entry.items)
                else:
                    packer.add(entry.items[0])
            else:
                packer.add(arena[entry])
        rebuilt.extend(packer.finish())
    return rebuilt


def remove_row(region: Sequence[Row], row: int | None) -> Region:
    """Delete ``row`` (1-based) and shift every later item up one row.

    A row outside the region leaves it unchanged.
    """
    if row is None or not 1 <= row <= len(region):
        logger.debug("remove_row: row %r outside region of %d rows, ignored", row, len(region))
        return [list(r) for r in region]
    updated: Region = []
    for r, items in enumerate(region, start=1):
        if r == row:
            continue
        if r > row:
            items = [item.placed(item.row - 1, item.position) for item in items]
        updated.append(list(items))
    return updated


def rebuild_region(
    region: Sequence[Row],
    action: Action | None = None,
    target_location: Location | None = None,
    config: PackingConfig | None = None,
) -> Region:
    """Return a new region with ``action`` applied and all rows repacked.

    Parameters
    ----------
    region : sequence of rows of Items
        The prior region. It is read but never modified.
    action : Add, AddGroup, Remove, RemoveGroup, RemoveRow or NoAction
    target_location : Location, optional
        Where an insertion lands. Defaults to the location the action carries.
    config : PackingConfig, optional
        Row capacity and size function.

    Returns
    -------
    list[list[Item]]
        Freshly built rows with contiguous 1-based row and position numbers.
        A region emptied by removals is the lone placeholder row ``[[]]``.
    """
    validate_region_shape(region)
    action = action if action is not None else NoAction()
    config = config or PackingConfig()
    location = target_location if target_location is not None else location_of(action)

    arena = _build_arena(region, action)
    removed = removed_identifiers(action)
    missing = [i for i in removed if i not in arena]
    if missing:
        logger.debug("rebuild_region: ignoring removal of unknown items %s", missing[:5])

    plan = _plan_rows(region, action, location)
    rebuilt = _pack_plan(plan, arena, config)

    if isinstance(action, RemoveRow):
        rebuilt = remove_row(rebuilt, location.row)

    if not rebuilt and len(region) > 0:
        rebuilt = [[]]

    logger.debug(
        "rebuild_region: %s -> %d rows (was %d)",
        type(action).__name__, len(rebuilt), len(region),
    )
    return rebuilt


def region_size_report(region: Sequence[Row], config: PackingConfig | None = None) -> np.ndarray:
    """Per-row sum of item sizes, in row order."""
    config = config or PackingConfig()
    return np.array(
        [sum(config.get_size(item) for item in row) for row in region],
        dtype=np.float64,
    )


def overfull_rows(region: Sequence[Row], config: PackingConfig | None = None) -> list[int]:
    """1-based rows over capacity that hold more than one item.

    A lone oversized item is allowed its own row, so it is not reported.
    """
    config = config or PackingConfig()
    totals = region_size_report(region, config)
    counts = np.array([len(row) for row in region], dtype=np.int64)
    mask = (totals > config.max_size) & (counts > 1)
    return [int(i) + 1 for i in np.flatnonzero(mask)]
