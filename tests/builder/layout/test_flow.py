"""
Unit tests for the flow controller state machine.

Uses a 100mm tall page with 10mm margins: top=90, bottom=10, so each
column holds 80mm of content.
"""

import pytest

from directory_toolkit.builder.layout import (
    BreakKind,
    FlowController,
    FlowState,
    PageGeometry,
)


@pytest.fixture
def geometry():
    return PageGeometry(width=200.0, height=100.0, margin=10.0)


class TestInitialState:

    def test_init_when_created_then_at_top_column_zero(self, geometry):
        flow = FlowController(geometry, "grid")

        assert flow.state is FlowState.AT_TOP
        assert flow.cursor.y == 90.0
        assert flow.cursor.column == 0
        assert flow.cursor.page_index == 0

    def test_init_when_start_page_then_cursor_on_that_page(self, geometry):
        flow = FlowController(geometry, "list", start_page=3)

        assert flow.cursor.page_index == 3
        assert flow.finish() == 3


class TestListMode:

    def test_place_when_fits_then_no_break(self, geometry):
        flow = FlowController(geometry, "list", entry_gap=0.0)

        placement = flow.place(40.0)

        assert placement.break_kind is BreakKind.NONE
        assert placement.y == 90.0
        assert placement.x == 10.0

    def test_advance_when_called_then_subtracts_height_and_gap(self, geometry):
        flow = FlowController(geometry, "list", entry_gap=5.0)

        flow.place(20.0)
        flow.advance(20.0)

        assert flow.cursor.y == 65.0  # 90 - 20 - 5
        assert flow.state is FlowState.MID_SECTION

    def test_place_when_fits_exactly_then_no_break(self, geometry):
        """y - h == bottom is still a fit."""
        flow = FlowController(geometry, "list", entry_gap=0.0)
        flow.place(30.0)
        flow.advance(30.0)  # y = 60

        placement = flow.place(50.0)  # 60 - 50 = 10 == bottom

        assert placement.break_kind is BreakKind.NONE

    def test_place_when_overflows_then_new_page(self, geometry):
        flow = FlowController(geometry, "list", entry_gap=0.0)
        flow.place(50.0)
        flow.advance(50.0)  # y = 40

        placement = flow.place(31.0)

        assert placement.break_kind is BreakKind.PAGE
        assert placement.starts_new_page
        assert placement.page_index == 1
        assert placement.column == 0
        assert placement.y == 90.0
        assert flow.state is FlowState.AT_TOP

    def test_place_when_list_mode_then_never_uses_column_one(self, geometry):
        flow = FlowController(geometry, "list", entry_gap=0.0)

        columns = set()
        for _ in range(10):
            placement = flow.place(30.0)
            columns.add(placement.column)
            flow.advance(30.0)

        assert columns == {0}


class TestGridMode:

    def test_place_when_column_zero_full_then_moves_to_column_one(self, geometry):
        flow = FlowController(geometry, "grid", entry_gap=0.0)
        flow.place(60.0)
        flow.advance(60.0)  # y = 30

        placement = flow.place(30.0)

        assert placement.break_kind is BreakKind.COLUMN
        assert placement.page_index == 0
        assert placement.column == 1
        assert placement.x == geometry.column_x(1)
        assert placement.y == 90.0

    def test_place_when_column_one_full_then_new_page_column_zero(self, geometry):
        flow = FlowController(geometry, "grid", entry_gap=0.0)
        for _ in range(2):
            flow.place(60.0)
            flow.advance(60.0)

        placement = flow.place(60.0)

        assert placement.break_kind is BreakKind.PAGE
        assert placement.page_index == 1
        assert placement.column == 0

    def test_place_when_many_entries_then_alternates_columns_across_pages(self, geometry):
        """Column sequence is 0,1 per page with no skipped column."""
        flow = FlowController(geometry, "grid", entry_gap=0.0)

        sequence = []
        for _ in range(6):
            placement = flow.place(50.0)
            sequence.append((placement.page_index, placement.column))
            flow.advance(50.0)

        assert sequence == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)]


class TestOversizedBlocks:

    def test_place_when_taller_than_empty_page_then_placed_without_break(self, geometry, caplog):
        flow = FlowController(geometry, "list")

        placement = flow.place(200.0)

        assert placement.break_kind is BreakKind.NONE
        assert placement.page_index == 0
        assert "exceeds empty column" in caplog.text

    def test_place_when_oversized_after_column_break_then_stays_in_column_one(self, geometry):
        flow = FlowController(geometry, "grid", entry_gap=0.0)
        flow.place(50.0)
        flow.advance(50.0)

        first = flow.place(200.0)
        flow.advance(200.0)
        second = flow.place(10.0)

        assert first.break_kind is BreakKind.COLUMN
        assert first.column == 1
        assert second.break_kind is BreakKind.PAGE
        assert second.page_index == 1


class TestSectionIsolation:

    def test_new_controller_when_previous_section_used_then_fresh_cursor(self, geometry):
        """Each section starts from its own cursor at the top."""
        toc = FlowController(geometry, "list", entry_gap=0.0)
        for _ in range(20):
            toc.place(5.0)
            toc.advance(5.0)

        body = FlowController(geometry, "grid", start_page=toc.finish() + 1)

        assert body.cursor is not toc.cursor
        assert body.cursor.y == geometry.top
        assert body.cursor.column == 0
        assert body.state is FlowState.AT_TOP


class TestStateDrivenBreaks:

    def test_column_break_when_taken_then_state_back_at_top(self, geometry):
        flow = FlowController(geometry, "grid", entry_gap=0.0)
        flow.place(60.0)
        flow.advance(60.0)

        flow.place(30.0)

        assert flow.cursor.column == 1
        assert flow.state is FlowState.AT_TOP

    def test_place_when_at_top_of_column_one_and_oversized_then_no_break(self, geometry, caplog):
        """A fresh column holds the block even when it does not fit."""
        flow = FlowController(geometry, "grid", entry_gap=0.0)
        flow.place(50.0)
        flow.advance(50.0)
        flow.place(60.0)  # column break, column 1 now AT_TOP

        placement = flow.place(200.0)

        assert placement.break_kind is BreakKind.NONE
        assert placement.column == 1
        assert placement.page_index == 0
        assert "exceeds empty column" in caplog.text

    def test_place_when_oversized_after_break_then_warned(self, geometry, caplog):
        flow = FlowController(geometry, "list", entry_gap=0.0)
        flow.place(50.0)
        flow.advance(50.0)

        placement = flow.place(geometry.available_height + 1.0)

        assert placement.break_kind is BreakKind.PAGE
        assert "exceeds empty column" in caplog.text

    def test_finish_when_breaks_taken_then_last_page_index(self, geometry):
        flow = FlowController(geometry, "list", entry_gap=0.0)
        for _ in range(5):
            flow.place(50.0)
            flow.advance(50.0)

        assert flow.finish() == 4
