#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/grouping/tables.py
"""Assemble table cells, rows and tables from table-tagged blocks."""

from __future__ import annotations

from typing import Sequence, TypeVar, Union

from delta2html.ast.groups import BlockGroup, TableCell, TableGroup, TableRow
from delta2html.grouping.array import (
    group_consecutive_elements_while,
    group_consecutive_satisfying_class_elements_while,
)

T = TypeVar("T")


def convert_table_blocks_to_table_rows(items: Sequence[BlockGroup]) -> tuple[TableRow, ...]:
    """Split a run of table blocks into rows by their row id."""
    rows = group_consecutive_elements_while(items, lambda g, g_prev: g.op.is_same_table_row_as(g_prev.op))
    return tuple(
        TableRow(tuple(TableCell(cell) for cell in row) if isinstance(row, list) else (TableCell(row),))
        for row in rows
    )


def group_tables(groups: Sequence[T]) -> list[Union[T, TableGroup]]:
    """Replace runs of table-tagged blocks with TableGroups.

    Parameters
    ----------
    groups : sequence
        Groups after same-style merging

    Returns
    -------
    list
        Groups with every maximal run of table blocks turned into one
        TableGroup. A lone table block becomes a one-row, one-cell table.

    """
    result: list[Union[T, TableGroup]] = []
    for item in group_consecutive_satisfying_class_elements_while(
        groups,
        BlockGroup,
        lambda g, g_prev: g.op.is_table() and g_prev.op.is_table(),
    ):
        if isinstance(item, list):
            result.append(TableGroup(convert_table_blocks_to_table_rows(item)))
        elif isinstance(item, BlockGroup) and item.op.is_table():
            result.append(TableGroup((TableRow((TableCell(item),)),)))
        else:
            result.append(item)
    return result
