"""Binary-search problems: stalls, books, rotated arrays, square roots."""

import math
from bisect import bisect_left


def _largest_feasible(low, high, feasible):
    best = low
    while low <= high:
        mid = (low + high) // 2
        if feasible(mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def _smallest_feasible(low, high, feasible):
    best = low
    while low <= high:
        mid = (low + high) // 2
        if feasible(mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def aggressive_cows(stalls, cows):
    """Return the largest minimum distance at which cows fit into the stalls."""
    positions = sorted(stalls)
    if cows < 2 or cows > len(positions):
        raise ValueError("need between 2 and len(stalls) cows")

    def fits(distance):
        placed = 1
        last = positions[0]
        for position in positions[1:]:
            if position - last >= distance:
                placed += 1
                if placed == cows:
                    return True
                last = position
        return False

    return _largest_feasible(0, positions[-1] - positions[0], fits)


def binary_search(values, key):
    """Tell whether key is present in the sorted sequence."""
    index = bisect_left(values, key)
    return index < len(values) and values[index] == key


def search_matrix(matrix, key):
    """Find key in a row-major sorted matrix; return (row, col) or None."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    low, high = 0, rows * cols - 1
    while low <= high:
        mid = (low + high) // 2
        row, col = divmod(mid, cols)
        value = matrix[row][col]
        if value == key:
            return row, col
        if value < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def book_allocation(pages, students):
    """Return the smallest possible maximum pages any student must read."""
    if students < 1:
        raise ValueError("need at least one student")

    def fits(limit):
        count = 1
        total = 0
        for book in pages:
            if total + book <= limit:
                total += book
            else:
                count += 1
                if count > students or book > limit:
                    return False
                total = book
        return True

    return _smallest_feasible(0, sum(pages), fits)


def find_pivot(values):
    """Return the index of the smallest element of a rotated sorted sequence."""
    if not values:
        raise ValueError("empty sequence has no pivot")
    low, high = 0, len(values) - 1
    while low < high:
        mid = (low + high) // 2
        if values[mid] > values[high]:
            low = mid + 1
        else:
            high = mid
    return low


def search_rotated(values, key):
    """Return the index of key in a rotated sorted sequence, or None."""
    if not values:
        return None
    pivot = find_pivot(values)
    if pivot and values[0] <= key:
        low, high = 0, pivot - 1
    else:
        low, high = pivot, len(values) - 1
    index = bisect_left(values, key, low, high + 1)
    if index <= high and values[index] == key:
        return index
    return None


def integer_sqrt(n):
    """Return the floor of the square root of a non-negative integer."""
    if n < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(n)


def refine_sqrt(n, whole, precision):
    """Extend an integer square root of n to the given number of decimals."""
    result = float(whole)
    step = 1.0
    for _ in range(precision):
        step /= 10
        candidate = result
        while candidate * candidate <= n:
            result = candidate
            candidate += step
    return result