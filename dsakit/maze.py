"""Every path a rat can take through a square maze of open (1) cells."""

_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def find_paths(maze):
    """Return all paths from the top-left to the bottom-right cell.

    Paths use the letters D, L, R and U and are listed in the order found,
    trying the moves in that order at each step.
    """
    size = len(maze)
    if any(len(row) != size for row in maze):
        raise ValueError("maze must be square")
    if size == 0 or maze[0][0] != 1:
        return []

    target = (size - 1, size - 1)
    paths = []
    visited = set()

    def walk(x, y, path):
        if (x, y) == target:
            paths.append(path)
            return
        visited.add((x, y))
        for letter, dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < size
                and 0 <= ny < size
                and (nx, ny) not in visited
                and maze[nx][ny] == 1
            ):
                walk(nx, ny, path + letter)
        visited.discard((x, y))

    walk(0, 0, "")
    return paths