#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/grouping/lists.py
"""Build nested lists from flat, indent-tagged list blocks.

Quill stores every list item as a flat block whose ``indent`` attribute says
how deep it sits. Nesting happens in three phases:

1. Flattening: consecutive list blocks of a compatible family and the same
   indent become one ListGroup.
2. Indent nesting: inside each run of adjacent ListGroups, groups are folded
   under the last item of the nearest preceding group with a strictly lower
   indent, deepest indent first. Because deeper groups are folded before
   shallower ones, skipped levels (indent 3 directly under indent 1) nest
   correctly.
3. Coalescing: adjacent top-level ListGroups of a compatible family are
   concatenated into a single list.

A group with no lower-indent predecessor in its run stays at the top level.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, TypeVar, Union

from delta2html.ast.groups import BlockGroup, ListGroup, ListItem
from delta2html.grouping.array import group_consecutive_satisfying_class_elements_while

logger = logging.getLogger(__name__)

T = TypeVar("T")


def convert_list_blocks_to_list_groups(groups: Sequence[T]) -> list[Union[T, ListGroup]]:
    """Turn list-tagged blocks into flat ListGroups (phase 1)."""
    result: list[Union[T, ListGroup]] = []
    for item in group_consecutive_satisfying_class_elements_while(
        groups,
        BlockGroup,
        lambda g, g_prev: (
            g.op.is_list()
            and g_prev.op.is_list()
            and g.op.is_same_list_as(g_prev.op)
            and g.op.has_same_indentation_as(g_prev.op)
        ),
    ):
        if isinstance(item, list):
            result.append(ListGroup(tuple(ListItem(g) for g in item)))
        elif isinstance(item, BlockGroup) and item.op.is_list():
            result.append(ListGroup((ListItem(item),)))
        else:
            result.append(item)
    return result


def attach_to_last_item(destination: ListGroup, group: ListGroup) -> ListGroup:
    """Return a copy of ``destination`` whose last item owns ``group``'s items.

    If the last item already has a nested list, the items are appended to it.
    """
    parent = destination.items[-1]
    if parent.inner_list is not None:
        inner_list = ListGroup(parent.inner_list.items + group.items)
    else:
        inner_list = group
    return ListGroup(destination.items[:-1] + (ListItem(parent.item, inner_list),))


def _find_parent_index(run: Sequence[ListGroup], index: int, indent: int) -> Optional[int]:
    for i in range(index - 1, -1, -1):
        if run[i].indent < indent:
            return i
    return None


def nest_list_run(run: Sequence[ListGroup]) -> list[ListGroup]:
    """Fold the groups of one run of adjacent ListGroups by indent (phase 2).

    Parameters
    ----------
    run : sequence of ListGroup
        Adjacent ListGroups, regardless of family or indent

    Returns
    -------
    list of ListGroup
        The groups left at the top level, in document order

    """
    working = list(run)
    indents = sorted({group.indent for group in working if group.indent}, reverse=True)

    for indent in indents:
        j = 0
        while j < len(working):
            if working[j].indent != indent:
                j += 1
                continue
            parent_index = _find_parent_index(working, j, indent)
            if parent_index is None:
                logger.debug("List group at indent %d has no shallower predecessor; left unnested", indent)
                j += 1
                continue
            working[parent_index] = attach_to_last_item(working[parent_index], working[j])
            del working[j]

    return working


def coalesce_list_groups(groups: Sequence[T]) -> list[Union[T, ListGroup]]:
    """Concatenate adjacent top-level lists of a compatible family (phase 3)."""
    result: list[Union[T, ListGroup]] = []
    for item in group_consecutive_satisfying_class_elements_while(
        groups,
        ListGroup,
        lambda curr, prev: curr.first_op.is_same_list_as(prev.first_op),
    ):
        if isinstance(item, list):
            result.append(ListGroup(tuple(li for g in item for li in g.items)))
        else:
            result.append(item)
    return result


def nest_lists(groups: Sequence[T]) -> list[Union[T, ListGroup]]:
    """Build nested ListGroups out of flat list blocks.

    Parameters
    ----------
    groups : sequence
        Groups after table assembly

    Returns
    -------
    list
        Groups with list blocks replaced by nested, coalesced ListGroups

    Examples
    --------
    Items ``a`` and ``b`` at indent 0 followed by ``c`` at indent 1 give one
    list of two items where ``b`` owns a nested list holding ``c``.

    """
    nested: list[Union[T, ListGroup]] = []
    for group in group_consecutive_satisfying_class_elements_while(convert_list_blocks_to_list_groups(groups), ListGroup):
        if isinstance(group, list):
            nested.extend(nest_list_run(group))
        else:
            nested.append(group)

    return coalesce_list_groups(nested)
