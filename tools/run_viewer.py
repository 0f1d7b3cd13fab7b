#!/usr/bin/env python3
# Minimal interactive maze viewer (no gameplay).
# - R: regenerate with the next seed    Left/Right: previous/next seed
# - C: toggle coins                     Esc: quit
# - 60 Hz fixed loop

import argparse, logging
import pygame

from mistymaze.cells import Cell
from mistymaze.connectivity import wall_cells
from mistymaze.rng import make_rng
from mistymaze.state import MazeState

COLORS = {
    Cell.OPEN: (220, 220, 220),
    Cell.SAFE: (120, 200, 255),
}
WALL_COLOR = (80, 80, 80)
COIN_COLOR = (255, 220, 0)
ORIGIN_COLOR = (255, 60, 60)

def draw_maze(screen, maze, walls, tile, show_coins):
    for x, y in maze.cells.walkable_cells():
        screen.fill(COLORS[maze.cells.get(x, y)], pygame.Rect(x * tile, y * tile, tile, tile))
    for x, y in walls:
        screen.fill(WALL_COLOR, pygame.Rect(x * tile, y * tile, tile, tile))
    if show_coins:
        r = max(1, tile // 4)
        for x, y in maze.coins:
            pygame.draw.circle(screen, COIN_COLOR, (x * tile + tile // 2, y * tile + tile // 2), r)
    ox, oy = maze.origin
    pygame.draw.circle(screen, ORIGIN_COLOR, (ox * tile + tile // 2, oy * tile + tile // 2), max(2, tile // 2 - 1))

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=80)
    ap.add_argument("--height", type=int, default=50)
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--tile", type=int, default=12, help="Tile size in pixels")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    state = MazeState()
    seed = args.seed
    def load():
        # Swap happens only after generation completes.
        maze = state.regenerate(args.width, args.height, make_rng(seed))
        return maze, wall_cells(maze.cells)

    maze, walls = load()
    pygame.init()
    screen = pygame.display.set_mode((maze.width * args.tile, maze.height * args.tile))
    clock = pygame.time.Clock()
    show_coins = True

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key in (pygame.K_r, pygame.K_RIGHT):
                    seed += 1
                    maze, walls = load()
                elif ev.key == pygame.K_LEFT:
                    seed = max(1, seed - 1)
                    maze, walls = load()
                elif ev.key == pygame.K_c:
                    show_coins = not show_coins

        screen.fill((16, 16, 32))
        draw_maze(screen, maze, walls, args.tile, show_coins)
        pygame.display.set_caption(
            f"Misty Maze Viewer | {maze.width}x{maze.height}  seed {seed}  coins {len(maze.coins)}  #{state.generation}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
