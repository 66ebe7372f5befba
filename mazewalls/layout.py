# layout.py
# -----------------------------------------------------------------------------
# Placement arithmetic for a physics/visual scene: every closed wall becomes a
# centred axis-aligned rectangle on a width x height canvas.
# Positions are (center_x, center_y); y grows downward.
# -----------------------------------------------------------------------------
from typing import List, NamedTuple

from mazewalls.generator import MazeWalls

# ========= DEFAULTS =========
WALL_THICKNESS = 5
BORDER_THICKNESS = 2


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float
    label: str


class Circle(NamedTuple):
    x: float
    y: float
    radius: float
    label: str


class MazeLayout(NamedTuple):
    unit_x: float
    unit_y: float
    borders: List[Rect]
    walls: List[Rect]
    goal: Rect
    ball: Circle

    @property
    def bodies(self):
        return self.borders + self.walls + [self.goal, self.ball]


def border_rects(width, height, thickness=BORDER_THICKNESS) -> List[Rect]:
    return [
        Rect(width / 2, 0, width, thickness, 'border'),       # top
        Rect(width / 2, height, width, thickness, 'border'),  # bottom
        Rect(width, height / 2, thickness, height, 'border'), # right
        Rect(0, height / 2, thickness, height, 'border'),     # left
    ]

def wall_rects(walls: MazeWalls, unit_x, unit_y, thickness=WALL_THICKNESS) -> List[Rect]:
    verticals, horizontals = walls
    out = []
    for r, row in enumerate(horizontals):
        for c, is_open in enumerate(row):
            if is_open:
                continue
            out.append(Rect(c * unit_x + unit_x / 2, r * unit_y + unit_y,
                            unit_x, thickness, 'wall'))
    for r, row in enumerate(verticals):
        for c, is_open in enumerate(row):
            if is_open:
                continue
            out.append(Rect(c * unit_x + unit_x, r * unit_y + unit_y / 2,
                            thickness, unit_y, 'wall'))
    return out

def build_layout(walls: MazeWalls, width, height,
                 wall_thickness=WALL_THICKNESS,
                 border_thickness=BORDER_THICKNESS) -> MazeLayout:
    """
    Border, closed internal walls, a goal square in the bottom-right cell and
    a ball in the top-left cell with radius min(unit_x, unit_y) / 4.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas must be positive, got {width}x{height}.")
    unit_x = width / walls.cols
    unit_y = height / walls.rows

    goal = Rect(width - unit_x / 2, height - unit_y / 2, unit_x / 2, unit_y / 2, 'goal')
    ball = Circle(unit_x / 2, unit_y / 2, min(unit_x, unit_y) / 4, 'ball')
    return MazeLayout(
        unit_x=unit_x,
        unit_y=unit_y,
        borders=border_rects(width, height, border_thickness),
        walls=wall_rects(walls, unit_x, unit_y, wall_thickness),
        goal=goal,
        ball=ball,
    )


__all__ = [
    "WALL_THICKNESS", "BORDER_THICKNESS",
    "Rect", "Circle", "MazeLayout",
    "border_rects", "wall_rects", "build_layout",
]
