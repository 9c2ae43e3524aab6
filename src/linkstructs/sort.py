"""In-place comparison sorts driven by a three-way comparator."""

import logging
from collections.abc import MutableSequence
from typing import TypeVar

from linkstructs.types import CompareFn

T = TypeVar("T")

logger = logging.getLogger(__name__)


def selection_sort(data: MutableSequence[T], compare: CompareFn) -> None:
    """Selection Sort
    Sorts data in place so it is non-decreasing according to compare.
    Time Complexity: O(n^2) comparisons in every case
    Space Complexity: O(1)
    NOTE: not stable. Swapping the minimum into place can carry an element
    past others that compare equal to it.
    """
    length = len(data)
    for i in range(length):
        smallest = i
        for j in range(i + 1, length):
            if compare(data[smallest], data[j]) > 0:
                smallest = j
        if smallest != i:
            data[i], data[smallest] = data[smallest], data[i]
    logger.debug("Selection sorted %d items", length)


def insertion_sort(data: MutableSequence[T], compare: CompareFn) -> None:
    """Insertion Sort
    Sorts data in place so it is non-decreasing according to compare.
    Time Complexity: O(n^2) in the worst case, O(n) when already sorted
    Space Complexity: O(1)
    NOTE: stable. An element only moves past neighbours that compare
    strictly greater than it.
    """
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and compare(data[j], key) > 0:
            data[j + 1] = data[j]  # shift the larger element up one position
            j -= 1
        data[j + 1] = key
    logger.debug("Insertion sorted %d items", len(data))
