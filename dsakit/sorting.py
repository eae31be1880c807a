"""Classic sorts and simple sequence checks."""

from itertools import pairwise


def bubble_sort(values):
    """Return a new list with the values sorted by bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for index in range(end):
            if items[index] > items[index + 1]:
                items[index], items[index + 1] = items[index + 1], items[index]
    return items


def insertion_sort(values):
    """Return a new list with the values sorted by insertion sort."""
    items = []
    for value in values:
        position = len(items)
        while position > 0 and items[position - 1] > value:
            position -= 1
        items.insert(position, value)
    return items


def _merge(left, right):
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values):
    """Return a new list with the values sorted by a stable merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def is_sorted(values):
    """Tell whether the values are in strictly increasing order."""
    return all(a < b for a, b in pairwise(values))


def linear_search(values, key):
    """Tell whether key occurs among the values."""
    return any(value == key for value in values)