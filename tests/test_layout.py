import random

import pytest

from mazewalls.generator import MazeWalls, generate
from mazewalls.layout import Circle, Rect, build_layout


U_SHAPE = MazeWalls(verticals=((True,), (True,)), horizontals=((False, True),))


def test_closed_walls_become_rects():
    layout = build_layout(U_SHAPE, 200, 100)
    assert (layout.unit_x, layout.unit_y) == (100, 50)
    assert layout.walls == [Rect(50, 50, 100, 5, 'wall')]


def test_vertical_wall_geometry():
    walls = MazeWalls(verticals=((False,),), horizontals=())
    layout = build_layout(walls, 80, 40, wall_thickness=3)
    assert layout.walls == [Rect(40, 20, 3, 40, 'wall')]


def test_borders_goal_and_ball():
    layout = build_layout(U_SHAPE, 200, 100, border_thickness=2)
    assert layout.borders == [
        Rect(100, 0, 200, 2, 'border'),
        Rect(100, 100, 200, 2, 'border'),
        Rect(200, 50, 2, 100, 'border'),
        Rect(0, 50, 2, 100, 'border'),
    ]
    assert layout.goal == Rect(150, 75, 50, 25, 'goal')
    assert layout.ball == Circle(50, 25, 12.5, 'ball')


def test_one_rect_per_closed_wall():
    rows, cols = 7, 5
    walls = generate(rows, cols, random.Random(4))
    layout = build_layout(walls, 500, 700)
    internal = rows * (cols - 1) + (rows - 1) * cols
    assert len(layout.walls) == internal - (rows * cols - 1)
    assert len(layout.bodies) == len(layout.walls) + 4 + 2
    assert {b.label for b in layout.bodies} == {'border', 'wall', 'goal', 'ball'}


@pytest.mark.parametrize("width,height", [(0, 100), (100, -1)])
def test_canvas_must_be_positive(width, height):
    with pytest.raises(ValueError):
        build_layout(U_SHAPE, width, height)
