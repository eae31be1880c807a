"""Array and matrix helpers: wave and spiral traversal, rotation, XOR tricks."""

from functools import reduce
from operator import xor


def format_matrix(matrix):
    """Render a matrix as lines of space-separated values."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix)


def wave_order(matrix):
    """Walk the columns top-down, then bottom-up, alternating."""
    result = []
    for index, column in enumerate(zip(*matrix)):
        result.extend(column if index % 2 == 0 else reversed(column))
    return result


def rotate_left(values, shift):
    """Return values rotated left by shift places."""
    values = list(values)
    if not values:
        return []
    shift %= len(values)
    return values[shift:] + values[:shift]


def transpose(matrix):
    """Return the transpose of a matrix."""
    return [list(column) for column in zip(*matrix)]


def single_unique(values):
    """Return the one value that appears once when all others appear twice."""
    return reduce(xor, values, 0)


def spiral_order(matrix):
    """Return the matrix elements in clockwise spiral order."""
    result = []
    if not matrix or not matrix[0]:
        return result
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while top <= bottom and left <= right:
        result.extend(matrix[top][left : right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(reversed(matrix[bottom][left : right + 1]))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def recursive_sum(values):
    """Return the sum of the values."""
    return sum(values)