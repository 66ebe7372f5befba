import random

import pytest

from mazewalls.generator import MazeWalls, generate
from mazewalls.graph import (
    count_passages, encode_walls, is_perfect_maze, pick_distinct_cells,
    shortest_path, walls_to_graph,
)

# 2x2 layout: (0,0)-(0,1), (0,1)-(1,1), (1,1)-(1,0)
U_SHAPE = MazeWalls(verticals=((True,), (True,)), horizontals=((False, True),))


def test_walls_to_graph():
    G = walls_to_graph(U_SHAPE)
    assert sorted(G[(0, 0)]) == [(0, 1)]
    assert sorted(G[(0, 1)]) == [(0, 0), (1, 1)]
    assert sorted(G[(1, 1)]) == [(0, 1), (1, 0)]
    assert sorted(G[(1, 0)]) == [(1, 1)]


def test_shortest_path_follows_open_passages():
    G = walls_to_graph(U_SHAPE)
    assert shortest_path(G, (0, 0), (1, 0)) == [(0, 0), (0, 1), (1, 1), (1, 0)]
    assert shortest_path(G, (1, 1), (1, 1)) == [(1, 1)]


def test_shortest_path_none_when_disconnected():
    closed = MazeWalls(verticals=((False,), (False,)), horizontals=((False, False),))
    assert shortest_path(walls_to_graph(closed), (0, 0), (1, 1)) == []


def test_is_perfect_maze_rejects_loops_and_islands():
    all_open = MazeWalls(verticals=((True,), (True,)), horizontals=((True, True),))
    all_closed = MazeWalls(verticals=((False,), (False,)), horizontals=((False, False),))
    assert is_perfect_maze(U_SHAPE)
    assert not is_perfect_maze(all_open)
    assert not is_perfect_maze(all_closed)


def test_count_passages():
    assert count_passages(U_SHAPE) == 3
    assert count_passages(generate(1, 1, random.Random(0))) == 0


def test_path_between_corners_exists_in_generated_maze():
    walls = generate(9, 11, random.Random(3))
    path = shortest_path(walls_to_graph(walls), (0, 0), (8, 10))
    assert path[0] == (0, 0) and path[-1] == (8, 10)
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1


def test_encode_walls_is_stable_and_distinguishing():
    a = generate(6, 6, random.Random(1))
    b = generate(6, 6, random.Random(1))
    c = generate(6, 6, random.Random(2))
    assert encode_walls(a) == encode_walls(b)
    assert len(encode_walls(a)) == 64
    if a != c:
        assert encode_walls(a) != encode_walls(c)


def test_encode_walls_includes_shape():
    row = generate(1, 2, random.Random(0))
    col = generate(2, 1, random.Random(0))
    assert encode_walls(row) != encode_walls(col)


def test_pick_distinct_cells():
    rng = random.Random(9)
    for _ in range(50):
        s, g = pick_distinct_cells(rng, 1, 2)
        assert s != g


def test_pick_distinct_cells_needs_two_cells():
    with pytest.raises(ValueError):
        pick_distinct_cells(random.Random(0), 1, 1)
