"""Passage-graph views over generated wall tables."""

import hashlib
import random
from collections import deque
from typing import Dict, List, Tuple

from mazewalls.generator import MazeWalls

Cell = Tuple[int, int]


def walls_to_graph(walls: MazeWalls) -> Dict[Cell, List[Cell]]:
    verticals, horizontals = walls
    rows, cols = walls.rows, walls.cols
    G = {(r, c): [] for r in range(rows) for c in range(cols)}
    for r, row in enumerate(verticals):
        for c, is_open in enumerate(row):
            if is_open:
                G[(r, c)].append((r, c + 1))
                G[(r, c + 1)].append((r, c))
    for r, row in enumerate(horizontals):
        for c, is_open in enumerate(row):
            if is_open:
                G[(r, c)].append((r + 1, c))
                G[(r + 1, c)].append((r, c))
    return G

def count_passages(walls: MazeWalls) -> int:
    return sum(sum(row) for table in walls for row in table)

def shortest_path(graph, start: Cell, goal: Cell) -> List[Cell]:
    """BFS from start; [] when goal is unreachable."""
    came_from = {start: start}
    frontier = deque([start])
    while frontier and goal not in came_from:
        cell = frontier.popleft()
        for nxt in graph[cell]:
            if nxt not in came_from:
                came_from[nxt] = cell
                frontier.append(nxt)
    if goal not in came_from:
        return []
    path = [goal]
    while path[-1] != start:
        path.append(came_from[path[-1]])
    return path[::-1]

def is_perfect_maze(walls: MazeWalls) -> bool:
    """
    True when the open passages form a spanning tree: a flood fill from (0, 0)
    reaches every cell and never meets an already-seen cell except through
    the edge it arrived on.
    """
    G = walls_to_graph(walls)
    start = (0, 0)
    parent = {start: None}
    stack = [start]
    while stack:
        u = stack.pop()
        for v in G[u]:
            if v == parent[u]:
                continue
            if v in parent:
                return False  # cycle
            parent[v] = u
            stack.append(v)
    return len(parent) == len(G)

def encode_walls(walls: MazeWalls) -> str:
    bits = [f"{walls.rows}x{walls.cols}:"]
    for table in walls:
        for row in table:
            bits.append(''.join('1' if is_open else '0' for is_open in row))
        bits.append('|')
    return hashlib.sha256(''.join(bits).encode('ascii')).hexdigest()

def pick_distinct_cells(rng: random.Random, rows: int, cols: int) -> Tuple[Cell, Cell]:
    if rows * cols < 2:
        raise ValueError("Need at least two cells to pick distinct start and goal.")
    s = (rng.randrange(rows), rng.randrange(cols))
    g = (rng.randrange(rows), rng.randrange(cols))
    while g == s:
        g = (rng.randrange(rows), rng.randrange(cols))
    return s, g


__all__ = [
    "walls_to_graph", "count_passages", "shortest_path",
    "is_perfect_maze", "encode_walls", "pick_distinct_cells",
]
