# render.py
# -----------------------------------------------------------------------------
# Drawing helpers for generated wall tables:
#   - walls_to_array:    numpy occupancy raster (1 = wall, 0 = open)
#   - draw_maze_image:   pixel-exact PNG via Pillow (axis pads, centred maze)
#   - draw_maze_figure:  matplotlib figure, handy for notebooks
# -----------------------------------------------------------------------------
import logging
from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
from PIL import Image, ImageDraw, ImageFont

from mazewalls.generator import MazeWalls

logger = logging.getLogger(__name__)

# -------------------------
# Defaults
# -------------------------
DEF_CANVAS_W = 720
DEF_CANVAS_H = 480

DEF_WALL_PX   = 4     # wall thickness (px)
DEF_KNOB_PX   = 16    # start/goal circle diameter (px)
DEF_GRID_GRAY = 220   # light grid color channel (None to disable)
DEF_GRID_PX   = 1     # light grid thickness (px)

# Axis pads reserve space for tick numbers + "row"/"col" captions
AXIS_PAD_LEFT   = 34  # px
AXIS_PAD_TOP    = 28  # px
AXIS_PAD_RIGHT  = 8   # px
AXIS_PAD_BOTTOM = 8   # px
DEF_PADS = (AXIS_PAD_LEFT, AXIS_PAD_TOP, AXIS_PAD_RIGHT, AXIS_PAD_BOTTOM)

START_COLOR = (255, 0, 0)
GOAL_COLOR  = (0, 200, 0)


# -------------------------
# Raster
# -------------------------

def walls_to_array(walls: MazeWalls) -> np.ndarray:
    """
    (2*rows+1, 2*cols+1) uint8 grid. Cell (r, c) sits at [2r+1, 2c+1]; the
    wall to its right at [2r+1, 2c+2]; the wall below at [2r+2, 2c+1].
    """
    verticals, horizontals = walls
    rows, cols = walls.rows, walls.cols
    grid = np.ones((2 * rows + 1, 2 * cols + 1), dtype=np.uint8)
    grid[1::2, 1::2] = 0
    if cols > 1:
        v = np.asarray(verticals, dtype=bool)
        grid[1::2, 2:-1:2][v] = 0
    if rows > 1:
        h = np.asarray(horizontals, dtype=bool)
        grid[2:-1:2, 1::2][h] = 0
    return grid


# -------------------------
# Geometry (axis pads, maze rect centred in what is left)
# -------------------------

def compute_geometry(rows: int, cols: int,
                     canvas: Tuple[int,int] = (DEF_CANVAS_W, DEF_CANVAS_H),
                     cell_px: Optional[int] = None,
                     pads: Tuple[int,int,int,int] = DEF_PADS) -> Tuple[int,int,int,int,int]:
    """
    Returns (canvas_w, canvas_h, cell_px, x0, y0); (x0, y0) is the maze's
    top-left corner. cell_px defaults to the largest square that fits.
    """
    W, H = canvas
    padL, padT, padR, padB = pads
    room_w, room_h = W - padL - padR, H - padT - padB
    if cell_px is None and room_w > 0 and room_h > 0:
        cell_px = min(room_w // cols, room_h // rows)
    if not cell_px or cell_px < 1 or cols * cell_px > room_w or rows * cell_px > room_h:
        raise ValueError(f"{rows}x{cols} maze does not fit a {W}x{H} canvas (cell_px={cell_px}).")
    x0 = padL + (room_w - cols * cell_px) // 2
    y0 = padT + (room_h - rows * cell_px) // 2
    return W, H, cell_px, x0, y0

def cell_center_xy(cell, cell_px: int, x0: int, y0: int) -> Tuple[float,float]:
    r, c = cell
    return x0 + c * cell_px + cell_px / 2, y0 + r * cell_px + cell_px / 2


# -------------------------
# Drawing (pixel-perfect with axes)
# -------------------------

def _segment(draw: ImageDraw.ImageDraw, a, b, width, color=(0, 0, 0)):
    draw.line([tuple(map(int, a)), tuple(map(int, b))], fill=color, width=int(width))

def _knob(draw: ImageDraw.ImageDraw, center, diameter, color):
    cx, cy = center
    half = diameter // 2
    draw.ellipse([int(cx) - half, int(cy) - half, int(cx) + half, int(cy) + half], fill=color)


def draw_maze_image(
    walls: MazeWalls,
    *,
    canvas: Tuple[int,int] = (DEF_CANVAS_W, DEF_CANVAS_H),
    cell_px: Optional[int] = None,
    wall_px: int = DEF_WALL_PX,
    knob_px: int = DEF_KNOB_PX,
    draw_grid: bool = True,
    draw_axes: bool = True,
    pads: Tuple[int,int,int,int] = DEF_PADS,
    start: Optional[Tuple[int,int]] = None,
    goal: Optional[Tuple[int,int]] = None,
    out_png: Optional[str] = None,
) -> Image.Image:
    verticals, horizontals = walls
    rows, cols = walls.rows, walls.cols
    canvas_w, canvas_h, cell_px, x0, y0 = compute_geometry(rows, cols, canvas, cell_px, pads)
    maze_w = cols * cell_px
    maze_h = rows * cell_px
    x1, y1 = x0 + maze_w, y0 + maze_h

    def px(r, c):
        return x0 + c * cell_px, y0 + r * cell_px

    im = Image.new("RGB", (canvas_w, canvas_h), (255, 255, 255))
    dr = ImageDraw.Draw(im)

    if draw_grid and DEF_GRID_GRAY is not None:
        gray = (DEF_GRID_GRAY,) * 3
        for c in range(cols + 1):
            _segment(dr, px(0, c), px(rows, c), DEF_GRID_PX, gray)
        for r in range(rows + 1):
            _segment(dr, px(r, 0), px(r, cols), DEF_GRID_PX, gray)

    for a, b in (((x0, y0), (x1, y0)), ((x0, y1), (x1, y1)),
                 ((x0, y0), (x0, y1)), ((x1, y0), (x1, y1))):
        _segment(dr, a, b, wall_px)

    # Closed internal walls: right edge of (r, c) for verticals, bottom edge for horizontals
    for r, row in enumerate(verticals):
        for c, is_open in enumerate(row):
            if not is_open:
                _segment(dr, px(r, c + 1), px(r + 1, c + 1), wall_px)
    for r, row in enumerate(horizontals):
        for c, is_open in enumerate(row):
            if not is_open:
                _segment(dr, px(r + 1, c), px(r + 1, c + 1), wall_px)

    for cell, color in ((start, START_COLOR), (goal, GOAL_COLOR)):
        if cell is not None:
            _knob(dr, cell_center_xy(cell, cell_px, x0, y0), knob_px, color)

    # Axes: numeric ticks and captions
    if draw_axes:
        font = ImageFont.load_default()
        for c in range(cols):
            cx = x0 + c * cell_px + cell_px // 2
            dr.text((cx - 3, max(0, y0 - 14)), str(c), fill=(0, 0, 0), font=font)
        dr.text((x0 + maze_w // 2 - 10, max(0, y0 - 28)), "col", fill=(0, 0, 0), font=font)

        for r in range(rows):
            cy = y0 + r * cell_px + cell_px // 2
            dr.text((max(0, x0 - 18), cy - 6), str(r), fill=(0, 0, 0), font=font)
        dr.text((max(0, x0 - 35), y0 + maze_h // 2 - 6), "row", fill=(0, 0, 0), font=font)

    if out_png:
        im.save(out_png)
        logger.debug("saved %sx%s maze image to %s", rows, cols, out_png)
    return im


def draw_maze_figure(walls: MazeWalls, ax=None, *,
                     start=None, goal=None,
                     wall_width: float = 3.5, out_png: Optional[str] = None):
    """Line-segment plot; row 0 at the top, column 0 at the left."""
    verticals, horizontals = walls
    rows, cols = walls.rows, walls.cols
    if ax is None:
        fig = plt.figure(figsize=(7.2, 4.8), dpi=100)
        ax = fig.add_subplot(111)
    else:
        fig = ax.figure
    ax.set_aspect('equal', adjustable='box')
    ax.set_xlim(-0.5, cols + 0.5)
    ax.set_ylim(rows + 0.5, -0.5)
    ax.set_xticks(range(0, cols)); ax.set_xlabel("col")
    ax.set_yticks(range(0, rows)); ax.set_ylabel("row")

    # Outer border
    ax.plot([0, cols, cols, 0, 0], [0, 0, rows, rows, 0], 'k-', linewidth=wall_width, zorder=1)

    for r, row in enumerate(verticals):
        for c, is_open in enumerate(row):
            if not is_open:
                ax.plot([c + 1, c + 1], [r, r + 1], 'k-', linewidth=wall_width, zorder=2)
    for r, row in enumerate(horizontals):
        for c, is_open in enumerate(row):
            if not is_open:
                ax.plot([c, c + 1], [r + 1, r + 1], 'k-', linewidth=wall_width, zorder=2)

    if start is not None:
        ax.scatter(start[1] + 0.5, start[0] + 0.5, s=300, c='red', edgecolors='none', zorder=3)
    if goal is not None:
        ax.scatter(goal[1] + 0.5, goal[0] + 0.5, s=300, c='green', edgecolors='none', zorder=3)

    if out_png:
        fig.tight_layout(pad=0.6)
        fig.savefig(out_png, dpi=100)
        plt.close(fig)
    return fig


__all__ = [
    "DEF_CANVAS_W", "DEF_CANVAS_H", "DEF_WALL_PX", "DEF_KNOB_PX", "DEF_PADS",
    "walls_to_array", "compute_geometry", "cell_center_xy",
    "draw_maze_image", "draw_maze_figure",
]
