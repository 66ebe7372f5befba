#!/usr/bin/env python3
"""
generator.py — perfect-maze topology via a randomized depth-first backtracker.

    from mazewalls.generator import generate
    verticals, horizontals = generate(10, 10, rng=random.Random(42))

verticals[r][c]   -> wall between (r, c) and (r, c+1); True = open passage
horizontals[r][c] -> wall between (r, c) and (r+1, c); True = open passage

Every run opens exactly rows*cols - 1 walls and the open passages form a
spanning tree, so any two cells are joined by exactly one path.
"""

import logging
import numbers
import random
from typing import List, NamedTuple, Optional, Tuple

from mazewalls.shuffle import shuffled

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
WallTable = Tuple[Tuple[bool, ...], ...]

# Row increases downward, col increases rightward.
# Canonical pre-shuffle order: up, right, down, left. Changing it changes
# fixed-seed output, not correctness.
DIRS = (
    ('up',    (-1, 0)),
    ('right', (0, 1)),
    ('down',  (1, 0)),
    ('left',  (0, -1)),
)


class InvalidDimensions(ValueError):
    """rows and cols must both be integers >= 1."""

    def __init__(self, rows, cols):
        super().__init__(f"Invalid maze dimensions {rows}x{cols}: rows and cols must be >= 1.")
        self.rows = rows
        self.cols = cols


class MazeWalls(NamedTuple):
    verticals: WallTable
    horizontals: WallTable

    @property
    def rows(self) -> int:
        return len(self.verticals)

    @property
    def cols(self) -> int:
        # verticals has cols-1 entries per row, horizontals has cols
        if self.horizontals:
            return len(self.horizontals[0])
        return len(self.verticals[0]) + 1


# -------------------------
# Run state
# -------------------------

def _is_integral(n) -> bool:
    # numpy integer scalars register as numbers.Integral
    return isinstance(n, numbers.Integral) and not isinstance(n, bool)

def check_dimensions(rows, cols):
    ok = _is_integral(rows) and _is_integral(cols)
    if not ok or rows < 1 or cols < 1:
        raise InvalidDimensions(rows, cols)

def check_cell(cell, rows: int, cols: int) -> Cell:
    """Validate an (r, c) pair inside the grid; returns it as plain ints."""
    if not isinstance(cell, (tuple, list)) or len(cell) != 2 or not all(map(_is_integral, cell)):
        raise ValueError(f"Cell must be an (row, col) integer pair, got {cell!r}.")
    r, c = int(cell[0]), int(cell[1])
    if not in_bounds(r, c, rows, cols):
        raise ValueError(f"Cell {(r, c)} outside {rows}x{cols} grid.")
    return r, c

def init_tables(rows: int, cols: int):
    visited = [[False] * cols for _ in range(rows)]
    verticals = [[False] * (cols - 1) for _ in range(rows)]
    horizontals = [[False] * cols for _ in range(rows - 1)]
    return visited, verticals, horizontals

def in_bounds(r: int, c: int, rows: int, cols: int) -> bool:
    return 0 <= r < rows and 0 <= c < cols

def neighbors(r: int, c: int, rows: int, cols: int) -> List[Tuple[int, int, str]]:
    out = []
    for d, (dr, dc) in DIRS:
        nr, nc = r + dr, c + dc
        if in_bounds(nr, nc, rows, cols):
            out.append((nr, nc, d))
    return out

def open_wall(verticals, horizontals, r: int, c: int, direction: str):
    if direction == 'left':
        verticals[r][c - 1] = True
    elif direction == 'right':
        verticals[r][c] = True
    elif direction == 'up':
        horizontals[r - 1][c] = True
    elif direction == 'down':
        horizontals[r][c] = True
    else:
        raise ValueError(f"Unknown direction: {direction!r}")


# -------------------------
# Traversal
# -------------------------

def carve(visited, verticals, horizontals, rng, start: Cell) -> int:
    """
    Depth-first backtracker over the given tables, starting at `start`.

    Uses an explicit stack of (cell, remaining shuffled neighbors) frames. A
    neighbor is shuffled when it is entered and fully explored before its
    next sibling is tried, which matches the recursive formulation draw for
    draw. Returns the number of walls opened.
    """
    rows, cols = len(visited), len(visited[0])
    sr, sc = start
    if visited[sr][sc]:
        return 0

    visited[sr][sc] = True
    stack = [(start, iter(shuffled(neighbors(sr, sc, rows, cols), rng)))]
    opened = 0
    while stack:
        (r, c), pending = stack[-1]
        for nr, nc, d in pending:
            if visited[nr][nc]:
                continue
            open_wall(verticals, horizontals, r, c, d)
            opened += 1
            visited[nr][nc] = True
            stack.append(((nr, nc), iter(shuffled(neighbors(nr, nc, rows, cols), rng))))
            break
        else:
            stack.pop()
    return opened

def _freeze(table) -> WallTable:
    return tuple(tuple(row) for row in table)

def _as_rng(rng):
    if rng is None:
        return random.Random()
    if isinstance(rng, int) and not isinstance(rng, bool):
        return random.Random(rng)
    return rng

def generate(rows: int, cols: int, rng=None, start: Optional[Cell] = None) -> MazeWalls:
    """
    Generate a perfect maze and return its internal wall tables.

    rng may be a random.Random (or anything with randrange), an int seed, or
    None for an unseeded source. start pins the first cell; otherwise it is
    drawn as (rng.randrange(rows), rng.randrange(cols)).
    """
    check_dimensions(rows, cols)
    rows, cols = int(rows), int(cols)
    if start is not None:
        start = check_cell(start, rows, cols)
    rng = _as_rng(rng)

    if start is None:
        start = (rng.randrange(rows), rng.randrange(cols))

    visited, verticals, horizontals = init_tables(rows, cols)
    opened = carve(visited, verticals, horizontals, rng, start)
    logger.debug("carved %sx%s maze from start=%s, opened %s walls", rows, cols, start, opened)
    return MazeWalls(_freeze(verticals), _freeze(horizontals))


__all__ = [
    "DIRS", "InvalidDimensions", "MazeWalls",
    "check_dimensions", "check_cell", "init_tables", "in_bounds", "neighbors", "open_wall",
    "carve", "generate",
]
