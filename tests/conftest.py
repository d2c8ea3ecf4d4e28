"""Shared test fixtures for dropgrid."""

import pytest

from dropgrid.core.area import Area
from dropgrid.core.config import PackingConfig
from dropgrid.core.geometry import Position
from dropgrid.core.items import Item


def make_region(rows):
    """Build a numbered region from [[(identifier, size), ...], ...]."""
    return [
        [
            Item(identifier, size, row=r, position=p)
            for p, (identifier, size) in enumerate(row, start=1)
        ]
        for r, row in enumerate(rows, start=1)
    ]


def layout_of(region):
    """[[(identifier, row, position), ...], ...] for compact assertions."""
    return [[(i.identifier, i.row, i.position) for i in row] for row in region]


def assert_contiguous(region):
    for r, row in enumerate(region, start=1):
        assert [i.row for i in row] == [r] * len(row)
        assert [i.position for i in row] == list(range(1, len(row) + 1))


@pytest.fixture
def packing_config():
    """Capacity 8, sizes read from Item.size."""
    return PackingConfig(max_size=8)


@pytest.fixture
def two_row_region():
    """Row 1: a(3) b(3). Row 2: c(5)."""
    return make_region([[("a", 3), ("b", 3)], [("c", 5)]])


@pytest.fixture
def row_area():
    """A 400x100 row at index 2 with three 100px children."""
    children = tuple(
        Area(
            position=Position(top=0, bottom=100, left=left, right=left + 100),
            index=i,
            identifier=f"child_{i}",
        )
        for i, left in enumerate((0, 100, 200), start=1)
    )
    return Area(
        position=Position(top=0, bottom=100, left=0, right=400),
        index=2,
        identifier="row_2",
        children=children,
    )


@pytest.fixture
def empty_row_area():
    """A 400x100 row at index 3 with no children."""
    return Area(
        position=Position(top=0, bottom=100, left=0, right=400),
        index=3,
        identifier="row_3",
    )
