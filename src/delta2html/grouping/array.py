#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/delta2html/grouping/array.py
"""Sequence helpers shared by the grouping stages.

All helpers read their input without modifying it and return fresh lists.
"""

from __future__ import annotations

from typing import Callable, NamedTuple, Optional, Sequence, TypeVar, Union

T = TypeVar("T")
G = TypeVar("G")


class _Run(list):
    """A run under construction."""


class ArraySlice(NamedTuple):
    """Result of a backward scan.

    Attributes
    ----------
    slice_starts_at : int
        Index of the first collected element, or -1 if nothing was collected
    elements : list
        Collected elements in their original order

    """

    slice_starts_at: int
    elements: list


def slice_from_reverse_while(
    arr: Sequence[T],
    start_index: int,
    predicate: Callable[[T], bool],
) -> ArraySlice:
    """Collect consecutive elements satisfying ``predicate`` walking backwards.

    Parameters
    ----------
    arr : sequence
        Read-only input sequence
    start_index : int
        Index to start from; the scan moves toward index 0
    predicate : callable
        Elements are collected while this returns True

    Returns
    -------
    ArraySlice
        Start index of the collected run and the run itself in original order

    Examples
    --------
        >>> slice_from_reverse_while([1, 2, 3, 4, 5], 3, lambda v: v > 2)
        ArraySlice(slice_starts_at=2, elements=[3, 4])

    """
    starts_at = -1
    i = start_index
    while i >= 0 and predicate(arr[i]):
        starts_at = i
        i -= 1
    if starts_at == -1:
        return ArraySlice(-1, [])
    return ArraySlice(starts_at, list(arr[starts_at : start_index + 1]))


def group_consecutive_elements_while(
    arr: Sequence[T],
    predicate: Callable[[T, T], bool],
) -> list[Union[T, list[T]]]:
    """Put runs of consecutive elements satisfying ``predicate`` into lists.

    ``predicate`` receives ``(current, previous)``. Elements outside any run
    of two or more are returned as they are.

    Examples
    --------
        >>> group_consecutive_elements_while([1, 2, 3, 5, 7, 8], lambda c, p: c == p + 1)
        [[1, 2, 3], 5, [7, 8]]

    """
    groups: list[Union[T, list[T]]] = []
    for i, curr in enumerate(arr):
        if i > 0 and predicate(curr, arr[i - 1]):
            last = groups[-1]
            if isinstance(last, _Run):
                last.append(curr)
            else:
                groups[-1] = _Run([arr[i - 1], curr])
        else:
            groups.append(curr)
    return [list(g) if isinstance(g, _Run) else g for g in groups]


def group_consecutive_satisfying_class_elements_while(
    arr: Sequence[T],
    class_type: type[G],
    predicate: Optional[Callable[[G, G], bool]] = None,
) -> list[Union[T, list[G]]]:
    """Put runs of consecutive ``class_type`` instances into lists.

    Two neighbours join the same run when both are instances of
    ``class_type`` and ``predicate(current, previous)`` holds (or no
    predicate is given).

    Examples
    --------
        >>> group_consecutive_satisfying_class_elements_while([1, "a", 3, "b", "c"], str)
        [1, 'a', 3, ['b', 'c']]

    """
    return group_consecutive_elements_while(
        arr,
        lambda curr, prev: (
            isinstance(curr, class_type)
            and isinstance(prev, class_type)
            and (predicate is None or predicate(curr, prev))
        ),
    )
