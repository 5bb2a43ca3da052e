"""Grid puzzles: flood fills, shortest paths, quadtrees and distances."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import combinations

Cell = tuple[int, int]

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _to_matrix(grid: Iterable[Iterable[int | str]]) -> list[list[int]]:
    """Copy a grid of digits (ints or digit strings) into a rectangular int matrix."""
    cells = [[int(value) for value in row] for row in grid]
    if not cells or not cells[0]:
        raise ValueError("grid is empty")
    width = len(cells[0])
    if any(len(row) != width for row in cells):
        raise ValueError("grid rows differ in length")
    return cells


def _neighbours(cell: Cell, rows: int, cols: int) -> Iterator[Cell]:
    y, x = cell
    for dy, dx in _STEPS:
        ny, nx = y + dy, x + dx
        if 0 <= ny < rows and 0 <= nx < cols:
            yield ny, nx


def _flood(start: Cell, rows: int, cols: int, passable: Callable[[Cell], bool]) -> set[Cell]:
    """Return every cell reachable from ``start`` through passable cells."""
    seen = {start}
    stack = [start]
    while stack:
        cell = stack.pop()
        for nxt in _neighbours(cell, rows, cols):
            if nxt not in seen and passable(nxt):
                seen.add(nxt)
                stack.append(nxt)
    return seen


def _count_regions(cells: Iterable[Cell], rows: int, cols: int) -> list[int]:
    """Return the sizes of the 4-connected regions formed by ``cells``, in scan order."""
    members = set(cells)
    sizes = []
    visited: set[Cell] = set()
    for cell in sorted(members):
        if cell in visited:
            continue
        region = _flood(cell, rows, cols, members.__contains__)
        visited |= region
        sizes.append(len(region))
    return sizes


def melt_cheese(grid: Iterable[Iterable[int | str]]) -> tuple[int, int]:
    """Melt cheese (1) touching the outside air each hour.

    Returns the number of hours until nothing is left and how many
    cheese cells melted in the last hour.
    """
    cells = _to_matrix(grid)
    if any(value not in (0, 1) for row in cells for value in row):
        raise ValueError("cheese grid may hold only 0 and 1")
    rows, cols = len(cells), len(cells[0])
    hours = 0
    while True:
        hours += 1
        seen = {(0, 0)}
        stack = [(0, 0)]
        melted: list[Cell] = []
        while stack:
            y, x = stack.pop()
            if cells[y][x] == 1:
                melted.append((y, x))
                continue
            for nxt in _neighbours((y, x), rows, cols):
                if nxt not in seen:
                    seen.add(nxt)
                    stack.append(nxt)
        for y, x in melted:
            cells[y][x] = 0
        if not any(any(row) for row in cells):
            return hours, len(melted)


def min_chicken_distance(grid: Iterable[Iterable[int | str]], keep: int) -> int:
    """Return the smallest total chicken distance keeping ``keep`` shops open.

    Houses are marked 1 and chicken shops 2; a house's chicken distance
    is the Manhattan distance to its nearest open shop.
    """
    cells = _to_matrix(grid)
    homes = [(y, x) for y, row in enumerate(cells) for x, v in enumerate(row) if v == 1]
    shops = [(y, x) for y, row in enumerate(cells) for x, v in enumerate(row) if v == 2]
    if not 1 <= keep <= len(shops):
        raise ValueError(f"cannot keep {keep} of {len(shops)} chicken shops")

    def total(open_shops: tuple[Cell, ...]) -> int:
        return sum(
            min(abs(hy - sy) + abs(hx - sx) for sy, sx in open_shops)
            for hy, hx in homes
        )

    return min(total(chosen) for chosen in combinations(shops, keep))


def _quad(cells: list[list[int]], y: int, x: int, size: int) -> str:
    value = cells[y][x]
    uniform = all(
        cells[i][j] == value
        for i in range(y, y + size)
        for j in range(x, x + size)
    )
    if uniform:
        return str(value)
    half = size // 2
    parts = (
        _quad(cells, y, x, half),
        _quad(cells, y, x + half, half),
        _quad(cells, y + half, x, half),
        _quad(cells, y + half, x + half, half),
    )
    return "(" + "".join(parts) + ")"


def quadtree(grid: Iterable[Iterable[int | str]]) -> str:
    """Compress a square image whose side is a power of two into quadtree form."""
    cells = _to_matrix(grid)
    size = len(cells)
    if len(cells[0]) != size:
        raise ValueError("quadtree image must be square")
    if size & (size - 1):
        raise ValueError("quadtree image side must be a power of two")
    return _quad(cells, 0, 0, size)


def count_components(grid: Iterable[Iterable[int | str]]) -> int:
    """Count the 4-connected regions of cells marked 1."""
    cells = _to_matrix(grid)
    rows, cols = len(cells), len(cells[0])
    visited: set[Cell] = set()
    count = 0
    for y, row in enumerate(cells):
        for x, value in enumerate(row):
            if value == 1 and (y, x) not in visited:
                count += 1
                visited |= _flood((y, x), rows, cols, lambda c: bool(cells[c[0]][c[1]]))
    return count


def count_cabbage_patches(rows: int, cols: int, positions: Iterable[Cell]) -> int:
    """Count the connected cabbage patches in a field of ``rows`` by ``cols``.

    ``positions`` holds ``(row, col)`` pairs of planted cabbages.
    """
    planted = set()
    for y, x in positions:
        if not (0 <= y < rows and 0 <= x < cols):
            raise ValueError(f"cabbage at {(y, x)} lies outside the field")
        planted.add((y, x))
    return len(_count_regions(planted, rows, cols))


def cloud_arrival(rows: Iterable[str]) -> list[list[int]]:
    """For each cell, return the minutes until a cloud arrives from the west.

    Cells under a cloud (``c``) are 0, cells that no cloud reaches are -1.
    """
    result = []
    for line in rows:
        last_cloud: int | None = None
        out = []
        for x, ch in enumerate(line):
            if ch == "c":
                last_cloud = x
                out.append(0)
            elif ch == ".":
                out.append(-1 if last_cloud is None else x - last_cloud)
            else:
                raise ValueError(f"unexpected sky cell {ch!r}")
        result.append(out)
    return result


def shortest_path(grid: Iterable[Iterable[int | str]]) -> int:
    """Return the number of cells on the shortest path from the top-left to the bottom-right.

    Only cells marked 1 can be entered. Returns 0 if the goal is unreachable.
    """
    cells = _to_matrix(grid)
    rows, cols = len(cells), len(cells[0])
    distance = {(0, 0): 1}
    queue = deque([(0, 0)])
    while queue:
        cell = queue.popleft()
        for nxt in _neighbours(cell, rows, cols):
            if nxt not in distance and cells[nxt[0]][nxt[1]] == 1:
                distance[nxt] = distance[cell] + 1
                queue.append(nxt)
    return distance.get((rows - 1, cols - 1), 0)


def split_areas(rows: int, cols: int, rectangles: Iterable[tuple[int, int, int, int]]) -> list[int]:
    """Return, in ascending order, the areas left uncovered by the rectangles.

    Each rectangle is ``(x1, y1, x2, y2)`` with corners on the grid lines
    of a ``rows`` by ``cols`` sheet.
    """
    covered: set[Cell] = set()
    for x1, y1, x2, y2 in rectangles:
        if not (0 <= x1 <= x2 <= cols and 0 <= y1 <= y2 <= rows):
            raise ValueError(f"rectangle {(x1, y1, x2, y2)} does not fit the sheet")
        covered.update((y, x) for y in range(y1, y2) for x in range(x1, x2))
    free = ((y, x) for y in range(rows) for x in range(cols) if (y, x) not in covered)
    return sorted(_count_regions(free, rows, cols))