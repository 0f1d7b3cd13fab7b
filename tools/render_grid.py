#!/usr/bin/env python3
# Render a maze to PNG using Pillow: one square per cell, coins and origin on top.
# Source is a fresh generation (--seed) or a TSV written by mazetool.py emit.

import argparse, logging, os
from PIL import Image, ImageDraw

from mistymaze.cells import Cell
from mistymaze.connectivity import is_wall
from mistymaze.export import read_tsv
from mistymaze.mapgen.generator import generate_maze

COLORS = {
    "void":  (16, 16, 32, 255),    # blocked, not adjacent to anything walkable
    "wall":  (80, 80, 80, 255),
    Cell.OPEN: (220, 220, 220, 255),
    Cell.SAFE: (120, 200, 255, 255),
}
COIN_COLOR = (255, 220, 0, 255)
ORIGIN_COLOR = (255, 60, 60, 255)

def cell_color(grid, x, y):
    v = grid.get(x, y)
    if v == Cell.BLOCKED:
        return COLORS["wall"] if is_wall(grid, x, y) else COLORS["void"]
    return COLORS[v]

def render_grid(grid, out_png, tile_size=8, coins=(), origin=None, margin=0):
    w, h = grid.width * tile_size + 2*margin, grid.height * tile_size + 2*margin
    canvas = Image.new("RGBA", (w, h), COLORS["void"])
    draw = ImageDraw.Draw(canvas)
    # Image y grows downward; row y of the grid is drawn at the same row.
    for x, y in grid.coords():
        x0 = margin + x * tile_size
        y0 = margin + y * tile_size
        draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=cell_color(grid, x, y))
    pad = max(1, tile_size // 4)
    for x, y in coins:
        x0 = margin + x * tile_size
        y0 = margin + y * tile_size
        draw.ellipse((x0 + pad, y0 + pad, x0 + tile_size - 1 - pad, y0 + tile_size - 1 - pad), fill=COIN_COLOR)
    if origin is not None:
        x0 = margin + origin[0] * tile_size
        y0 = margin + origin[1] * tile_size
        draw.rectangle((x0 + 1, y0 + 1, x0 + tile_size - 2, y0 + tile_size - 2), fill=ORIGIN_COLOR)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--tsv", type=str, default=None, help="Render cells from a TSV instead of generating")
    ap.add_argument("--width", type=int, default=80)
    ap.add_argument("--height", type=int, default=50)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--out", type=str, default="out/maze.png", help="PNG to write")
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.tsv:
        render_grid(read_tsv(args.tsv), args.out, tile_size=args.tile)
    else:
        maze = generate_maze(args.width, args.height, seed=args.seed)
        render_grid(maze.cells, args.out, tile_size=args.tile, coins=maze.coins, origin=maze.origin)
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
