"""RowPacker: greedy left-to-right packing of items into capacity-limited rows."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.config import PackingConfig
from ..core.items import Item, Row


class RowPacker:
    """Packs items into rows in the order they are given.

    An item that would push the running row total over ``max_size`` closes
    the current row and starts a new one. An item too big for any row still
    gets a row of its own and is never split or rejected. Every appended
    item is a fresh copy carrying its assigned row and position.
    """

    def __init__(self, config: PackingConfig | None = None, start_row: int = 1) -> None:
        self._config = config or PackingConfig()
        self._start_row = start_row
        self._rows: list[Row] = []
        self._current: Row = []
        self._row_size = 0.0

    @property
    def current_row(self) -> int:
        """1-based row number the next appended item would land on."""
        return self._start_row + len(self._rows)

    @property
    def row_size(self) -> float:
        return self._row_size

    def add(self, item: Item) -> Item:
        """Append one item, wrapping to a new row when it does not fit."""
        size = self._config.get_size(item)
        if self._current and self._row_size + size > self._config.max_size:
            self._close()
        placed = item.placed(self.current_row, len(self._current) + 1)
        self._current.append(placed)
        self._row_size += size
        return placed

    def add_group(self, items: Iterable[Item]) -> list[Item]:
        """Append a group with every member alone on its own row.

        Whatever row was open is closed first, and the next ``add`` after the
        group starts a fresh row.
        """
        self._close()
        placed = []
        for item in items:
            placed.append(self.add(item))
            self._close()
        return placed

    def finish(self) -> list[Row]:
        """Close the open row and return all non-empty rows."""
        self._close()
        return self._rows

    def _close(self) -> None:
        if self._current:
            self._rows.append(self._current)
        self._current = []
        self._row_size = 0.0


def pack_items(
    items: Iterable[Item],
    config: PackingConfig | None = None,
    start_row: int = 1,
) -> list[Row]:
    """Pack ``items`` into rows numbered from ``start_row``."""
    packer = RowPacker(config, start_row=start_row)
    for item in items:
        packer.add(item)
    return packer.finish()
