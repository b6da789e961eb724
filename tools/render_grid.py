#!/usr/bin/env python3
# Render a CSV board (the output of `dungeongen --csv`) to a PNG using Pillow.

import argparse
import os

from dungeongen.export import board_from_csv
from dungeongen.render.png import render_board


def read_board(path):
    with open(path, encoding="utf-8") as f:
        board = board_from_csv(f.read())
    if not board or any(len(r) != len(board[0]) for r in board):
        raise SystemExit(f"{path}: expected a rectangular grid of tile codes.")
    return board


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("csv", type=str, help="CSV board file")
    ap.add_argument("--out", type=str, help="PNG path (default: alongside the CSV)")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    args = ap.parse_args()

    out = args.out or os.path.splitext(args.csv)[0] + ".png"
    parent = os.path.dirname(out)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_board(read_board(args.csv), tile_size=args.tile).save(out)
    print(f"Wrote {out}")


if __name__ == "__main__":
    main()
