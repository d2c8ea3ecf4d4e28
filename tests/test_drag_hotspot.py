"""Tests for drag hotspots."""

import numpy as np
import pytest

from dropgrid.core.area import Area
from dropgrid.core.config import DragConfig
from dropgrid.core.geometry import Position
from dropgrid.hotspot.drag import (
    BOTTOM,
    LEFT,
    MODIFIERS,
    RIGHT,
    TOP,
    DragHotspot,
    DragResult,
    generate_drag_hotspot,
)

# Default config on the 400x100 fixture rows: fold height 20,
# whole-area fold width 200, child fold width 50, highlight slack 5.
MID_Y = 50
TOP_Y = 10
BOTTOM_Y = 90


def _with(area, **flags):
    return Area(
        position=area.position,
        index=area.index,
        identifier=area.identifier,
        children=area.children,
        **flags,
    )


class TestOutside:
    def test_far_outside(self, row_area):
        hotspot = generate_drag_hotspot(row_area)
        assert hotspot(500, MID_Y) is None
        assert hotspot(100, -50) is None

    def test_within_highlight_slack(self, row_area):
        hotspot = generate_drag_hotspot(row_area)
        assert hotspot(404, MID_Y) is not None
        assert hotspot(405, MID_Y) is None


class TestMiddleBand:
    def test_left_fold_of_first_child(self, row_area):
        result = generate_drag_hotspot(row_area)(10, MID_Y)
        assert result == DragResult(id=2, modifier=LEFT, child_id=1)

    def test_right_fold_of_first_child(self, row_area):
        result = generate_drag_hotspot(row_area)(60, MID_Y)
        assert result == DragResult(id=2, modifier=RIGHT, child_id=1)

    def test_shared_edge_goes_to_earlier_child(self, row_area):
        result = generate_drag_hotspot(row_area)(100, MID_Y)
        assert result == DragResult(id=2, modifier=RIGHT, child_id=1)

    def test_left_fold_of_second_child(self, row_area):
        result = generate_drag_hotspot(row_area)(120, MID_Y)
        assert result == DragResult(id=2, modifier=LEFT, child_id=2)

    def test_right_slack_of_last_child(self, row_area):
        result = generate_drag_hotspot(row_area)(302, MID_Y)
        assert result == DragResult(id=2, modifier=RIGHT, child_id=3)

    def test_past_children_falls_back_to_area_split(self, row_area):
        result = generate_drag_hotspot(row_area)(350, MID_Y)
        assert result == DragResult(id=2, modifier=RIGHT)
        assert result.child_id is None

    def test_area_split_left_half(self):
        child = Area(Position(0, 100, 300, 400), index=1, identifier="c")
        area = Area(Position(0, 100, 0, 400), index=1, children=(child,))
        result = generate_drag_hotspot(area)(50, MID_Y)
        assert result == DragResult(id=1, modifier=LEFT)

    def test_empty_area_offers_first_slot(self, empty_row_area):
        result = generate_drag_hotspot(empty_row_area)(350, MID_Y)
        assert result == DragResult(id=3, modifier=LEFT, child_id=1)

    def test_bottom_fold_line_is_middle(self, row_area):
        result = generate_drag_hotspot(row_area)(10, 80)
        assert result.modifier == LEFT


class TestTopBand:
    def test_first_row_owns_top(self, row_area):
        area = _with(row_area, is_first_row=True)
        assert generate_drag_hotspot(area)(10, TOP_Y) == DragResult(2, TOP)

    def test_first_row_without_children_owns_top(self, empty_row_area):
        area = _with(empty_row_area, is_first_row=True)
        assert generate_drag_hotspot(area)(10, TOP_Y) == DragResult(3, TOP)

    def test_filled_row_below_filled_row(self, row_area):
        assert generate_drag_hotspot(row_area)(10, TOP_Y) == DragResult(2, TOP)

    def test_top_fold_line_is_top(self, row_area):
        assert generate_drag_hotspot(row_area)(10, 20).modifier == TOP

    def test_empty_row_above_delegates_to_children(self, row_area):
        area = _with(row_area, empty_row_above=True)
        result = generate_drag_hotspot(area)(120, TOP_Y)
        assert result == DragResult(id=2, modifier=LEFT, child_id=2)

    def test_empty_row_above_without_child_match(self, row_area):
        area = _with(row_area, empty_row_above=True)
        assert generate_drag_hotspot(area)(350, TOP_Y) is None

    def test_empty_row_offers_first_slot(self, empty_row_area):
        result = generate_drag_hotspot(empty_row_area)(10, TOP_Y)
        assert result == DragResult(id=3, modifier=LEFT, child_id=1)

    def test_top_slack(self, row_area):
        hotspot = generate_drag_hotspot(row_area)
        assert hotspot(10, -4) == DragResult(2, TOP)
        assert hotspot(10, -5) is None


class TestBottomBand:
    def test_last_row_owns_bottom(self, empty_row_area):
        area = _with(empty_row_area, is_last_row=True)
        assert generate_drag_hotspot(area)(10, BOTTOM_Y) == DragResult(3, BOTTOM)

    def test_filled_row_above_filled_row(self, row_area):
        assert generate_drag_hotspot(row_area)(10, BOTTOM_Y) == DragResult(2, BOTTOM)

    def test_empty_row_below_delegates_to_children(self, row_area):
        area = _with(row_area, empty_row_below=True)
        result = generate_drag_hotspot(area)(60, BOTTOM_Y)
        assert result == DragResult(id=2, modifier=RIGHT, child_id=1)

    def test_empty_row_offers_first_slot(self, empty_row_area):
        result = generate_drag_hotspot(empty_row_area)(200, BOTTOM_Y)
        assert result == DragResult(id=3, modifier=LEFT, child_id=1)


class TestConfig:
    def test_dict_overrides(self, row_area):
        hotspot = generate_drag_hotspot(row_area, {"offsetY": 0.4})
        assert hotspot.config.offset_y == 0.4
        # 35 is in the middle band by default but in the taller top fold now
        assert hotspot(10, 35) == DragResult(2, TOP)

    def test_zero_highlight(self, row_area):
        hotspot = generate_drag_hotspot(row_area, DragConfig(offset_highlight=0))
        assert hotspot(402, MID_Y) is None

    def test_hotspot_is_a_value(self, row_area):
        assert DragHotspot(row_area) == generate_drag_hotspot(row_area)

    def test_to_dict(self):
        assert DragResult(1, LEFT, child_id=2).to_dict() == {
            "id": 1, "modifier": "left", "childId": 2,
        }
        assert DragResult(1, TOP).to_dict() == {"id": 1, "modifier": "top"}


class TestTotality:
    @pytest.mark.parametrize("flags", [
        {},
        {"is_first_row": True, "is_last_row": True},
        {"empty_row_above": True, "empty_row_below": True},
    ])
    def test_result_is_none_or_valid(self, row_area, empty_row_area, flags):
        for area in (_with(row_area, **flags), _with(empty_row_area, **flags)):
            hotspot = generate_drag_hotspot(area)
            for x in np.linspace(-20, 420, 45):
                for y in np.linspace(-20, 120, 29):
                    result = hotspot(float(x), float(y))
                    if result is not None:
                        assert result.id == area.index
                        assert result.modifier in MODIFIERS

    def test_does_not_touch_meta(self, row_area):
        hotspot = generate_drag_hotspot(row_area)
        assert hotspot(10, MID_Y, {"activeId": "x"}) == hotspot(10, MID_Y)
