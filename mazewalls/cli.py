#!/usr/bin/env python3
"""
cli.py

Image:
  mazewalls image --rows 10 --cols 10 --seed 42 --out maze.png
  # Optional: --start "r,c" --goal "r,c" --canvas "720,480" --cell-px 40
  #           --wall-px 4 --knob-px 16 --no-grid --no-axes --backend mpl

Dataset (JSONL + optional PNGs):
  mazewalls dataset --count 5000 --rows 10 --cols 10 --out info_labels.jsonl --png-dir mazes_out
"""

import argparse
import logging
import random

from mazewalls.dataset import DEF_BASE_SEED, generate_dataset
from mazewalls.generator import check_cell, check_dimensions, generate
from mazewalls.graph import pick_distinct_cells
from mazewalls.render import (
    DEF_CANVAS_H, DEF_CANVAS_W, DEF_KNOB_PX, DEF_WALL_PX,
    draw_maze_figure, draw_maze_image,
)


def parse_pair(s: str):
    try:
        a, b = s.split(",")
        return int(a), int(b)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected 'a,b' integers, got {s!r}")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mazewalls", description="Perfect-maze image and dataset generator.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_img = sub.add_parser("image", help="Generate a single maze PNG.")
    p_img.add_argument("--rows", type=int, default=10)
    p_img.add_argument("--cols", type=int, default=10)
    p_img.add_argument("--seed", type=int, default=None)
    p_img.add_argument("--start", type=parse_pair, default=None, help="start 'r,c' (optional)")
    p_img.add_argument("--goal", type=parse_pair, default=None, help="goal 'r,c' (optional)")
    p_img.add_argument("--canvas", type=parse_pair, default=(DEF_CANVAS_W, DEF_CANVAS_H), help="W,H (default 720,480)")
    p_img.add_argument("--cell-px", type=int, default=None, help="Fixed cell size in px (optional)")
    p_img.add_argument("--wall-px", type=int, default=DEF_WALL_PX)
    p_img.add_argument("--knob-px", type=int, default=DEF_KNOB_PX)
    p_img.add_argument("--no-grid", action="store_true")
    p_img.add_argument("--no-axes", action="store_true")
    p_img.add_argument("--backend", choices=("pil", "mpl"), default="pil")
    p_img.add_argument("--out", type=str, required=True)

    p_ds = sub.add_parser("dataset", help="Generate a JSONL dataset of unique mazes.")
    p_ds.add_argument("--count", type=int, default=5000)
    p_ds.add_argument("--rows", type=int, default=10)
    p_ds.add_argument("--cols", type=int, default=10)
    p_ds.add_argument("--out", type=str, default="info_labels.jsonl")
    p_ds.add_argument("--base-seed", type=int, default=DEF_BASE_SEED)
    p_ds.add_argument("--png-dir", type=str, default=None, help="Directory to write per-maze PNGs")
    return parser

def run_image(args):
    s, g = args.start, args.goal
    for cell in (s, g):
        if cell is not None:
            check_cell(cell, args.rows, args.cols)

    rng = random.Random(args.seed)
    walls = generate(args.rows, args.cols, rng)

    if (s is None or g is None) and args.rows * args.cols > 1:
        ps, pg = pick_distinct_cells(rng, args.rows, args.cols)
        s = ps if s is None else s
        g = pg if g is None else g

    if args.backend == "mpl":
        draw_maze_figure(walls, start=s, goal=g, out_png=args.out)
    else:
        draw_maze_image(
            walls,
            canvas=args.canvas, cell_px=args.cell_px,
            wall_px=args.wall_px, knob_px=args.knob_px,
            draw_grid=not args.no_grid, draw_axes=not args.no_axes,
            start=s, goal=g, out_png=args.out,
        )
    print(f"Wrote {args.rows}x{args.cols} maze to {args.out}")

def run_dataset(args):
    made, uniq = generate_dataset(
        count=args.count,
        rows=args.rows,
        cols=args.cols,
        out_jsonl=args.out,
        base_seed=args.base_seed,
        png_dir=args.png_dir,
    )
    print(f"Wrote {made} records to {args.out} (unique mazes: {uniq}).")
    if args.png_dir:
        print(f"PNGs saved to {args.png_dir}")

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        check_dimensions(args.rows, args.cols)
        if args.cmd == "image":
            run_image(args)
        elif args.cmd == "dataset":
            run_dataset(args)
    except ValueError as e:
        parser.error(str(e))

if __name__ == "__main__":
    main()
