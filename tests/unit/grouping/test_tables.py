#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for table assembly."""

import pytest

from delta2html.ast import BlockGroup, DeltaInsertOp, InlineGroup, TableCell, TableGroup, TableRow
from delta2html.grouping.tables import convert_table_blocks_to_table_rows, group_tables


def _cell(text, row):
    return BlockGroup(DeltaInsertOp.text("\n", {"table": row}), (DeltaInsertOp.text(text),))


@pytest.mark.unit
class TestConvertTableBlocksToTableRows:
    """Tests for splitting cells into rows."""

    def test_rows_split_on_row_id(self):
        cells = [_cell("a1", "row-1"), _cell("b1", "row-1"), _cell("a2", "row-2")]
        rows = convert_table_blocks_to_table_rows(cells)
        assert rows == (
            TableRow((TableCell(cells[0]), TableCell(cells[1]))),
            TableRow((TableCell(cells[2]),)),
        )

    def test_repeated_row_id_after_break_is_new_row(self):
        cells = [_cell("a", "row-1"), _cell("b", "row-2"), _cell("c", "row-1")]
        assert len(convert_table_blocks_to_table_rows(cells)) == 3


@pytest.mark.unit
class TestGroupTables:
    """Tests for the table stage."""

    def test_two_by_three(self):
        cells = [_cell(f"{c}{r}", f"row-{r}") for r in (1, 2) for c in "abc"]
        result = group_tables(cells)

        assert len(result) == 1
        table = result[0]
        assert isinstance(table, TableGroup)
        assert [len(row.cells) for row in table.rows] == [3, 3]
        assert table.rows[1].cells[2].item is cells[5]

    def test_single_cell_table(self):
        cell = _cell("only", "row-9")
        assert group_tables([cell]) == [TableGroup((TableRow((TableCell(cell),)),))]

    def test_non_table_groups_split_tables(self):
        first, second = _cell("a", "row-1"), _cell("b", "row-1")
        paragraph = InlineGroup((DeltaInsertOp.text("between\n"),))
        result = group_tables([first, paragraph, second])

        assert len(result) == 3
        assert isinstance(result[0], TableGroup)
        assert result[1] is paragraph
        assert isinstance(result[2], TableGroup)

    def test_other_blocks_untouched(self):
        header = BlockGroup(DeltaInsertOp.text("\n", {"header": 1}), (DeltaInsertOp.text("T"),))
        assert group_tables([header]) == [header]
