#!/usr/bin/env python3
import argparse, logging
from mistymaze.export import to_text, write_tsv
from mistymaze.mapgen.generator import generate_maze

def build(args):
    return generate_maze(
        args.width, args.height, seed=args.seed,
        coin_probability=args.coin_probability,
        extra_connections=args.extra,
    )

def cmd_emit(args):
    maze = build(args)
    write_tsv(maze, args.out)
    print(f"Wrote {args.out} ({maze.width}x{maze.height}, origin {maze.origin}, {len(maze.coins)} coins)")

def cmd_show(args):
    maze = build(args)
    print(to_text(maze, markers=not args.plain))

def add_common(p):
    p.add_argument('--width', type=int, default=80)
    p.add_argument('--height', type=int, default=50)
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--coin-probability', type=float, default=0.5)
    p.add_argument('--extra', type=int, default=0, help='extra corridors beyond the room ring')

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    add_common(p1)
    p1.add_argument('--out', type=str, required=True)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('show')
    add_common(p2)
    p2.add_argument('--plain', action='store_true', help='cells only, no coin/origin markers')
    p2.set_defaults(func=cmd_show)
    args = p.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    args.func(args)

if __name__ == '__main__':
    main()
