"""
dataset.py — JSONL dump of unique seeded mazes (+ optional PNGs).

Each record:
  index, rows, cols, seed, signature,
  verticals, horizontals,        # wall tables, True = open passage
  start_pos, end_pos, true_path  # [r, c] cells
"""

import json
import logging
import os
import random
from typing import Optional, Tuple

from mazewalls.generator import check_dimensions, generate
from mazewalls.graph import encode_walls, pick_distinct_cells, shortest_path, walls_to_graph
from mazewalls.render import draw_maze_image

logger = logging.getLogger(__name__)

DEF_BASE_SEED = 20250924


def maze_record(index: int, seed: int, walls, start, goal, path) -> dict:
    verticals, horizontals = walls
    return {
        "index": index,
        "rows": walls.rows,
        "cols": walls.cols,
        "seed": seed,
        "signature": encode_walls(walls),
        "verticals": [list(row) for row in verticals],
        "horizontals": [list(row) for row in horizontals],
        "start_pos": [start[0], start[1]],
        "end_pos": [goal[0], goal[1]],
        "true_path": [[r, c] for (r, c) in path],
    }

def generate_dataset(count: int, rows: int, cols: int, out_jsonl: str,
                     base_seed: int = DEF_BASE_SEED,
                     png_dir: Optional[str] = None,
                     max_attempts: Optional[int] = None) -> Tuple[int, int]:
    """
    Write `count` distinct mazes, seeding attempt i with base_seed + i.
    Duplicate layouts are skipped. Returns (made, unique_seen).

    Small grids have few distinct layouts; max_attempts (default 100 * count)
    stops the search instead of looping forever.
    """
    check_dimensions(rows, cols)
    if rows * cols < 2:
        raise ValueError("Dataset mazes need at least two cells for start and goal.")
    if max_attempts is None:
        max_attempts = max(100 * count, 100)

    seen = set()
    made = 0
    idx = 0
    if png_dir:
        os.makedirs(png_dir, exist_ok=True)

    with open(out_jsonl, "w") as f:
        while made < count and idx < max_attempts:
            seed = base_seed + idx
            rng = random.Random(seed)
            idx += 1
            walls = generate(rows, cols, rng)
            sig = encode_walls(walls)
            if sig in seen:
                logger.debug("seed %s duplicates an earlier maze, skipping", seed)
                continue
            seen.add(sig)

            s, g = pick_distinct_cells(rng, rows, cols)
            path = shortest_path(walls_to_graph(walls), s, g)

            rec = maze_record(made, seed, walls, s, g, path)
            f.write(json.dumps(rec) + "\n")

            if png_dir:
                out_png = f"{png_dir}/maze_{made:05d}.png"
                draw_maze_image(walls, start=s, goal=g, out_png=out_png)

            made += 1

    if made < count:
        logger.warning("only %s of %s unique %sx%s mazes found after %s attempts",
                       made, count, rows, cols, idx)
    return made, len(seen)


__all__ = ["DEF_BASE_SEED", "maze_record", "generate_dataset"]
