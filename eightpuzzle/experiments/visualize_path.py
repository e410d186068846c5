#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.domains.puzzle8 import GOAL, N, Board, PuzzleState, scramble
from eightpuzzle.search.bfs import bfs
from eightpuzzle.search.rbfs import rbfs

def draw_board(board: Board, out_path: Path):
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, N); ax.set_ylim(0, N)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(N+1):
        ax.plot([0,N],[i,i], linewidth=1)
        ax.plot([i,i],[0,N], linewidth=1)
    # tiles
    for r, row in enumerate(board):
        for c, t in enumerate(row):
            if t == 0: continue
            ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--algo", choices=["bfs","rbfs"], default="rbfs")
    p.add_argument("--depth", type=int, default=20, help="Scramble length")
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--outdir", default="report/figs/example_path")
    args = p.parse_args(argv)

    start = PuzzleState.start(scramble(args.depth, args.seed))
    res = bfs(start, GOAL) if args.algo == "bfs" else rbfs(start, GOAL)

    if not res.get("path"):
        print(f"No path ({res['termination']}).")
        return

    outdir = Path(args.outdir)
    for i, s in enumerate(res["path"]):
        draw_board(s.board, outdir / f"step_{i:03d}.png")
    print(f"Saved {len(res['path'])} frames to {outdir}")

if __name__ == "__main__":
    main()
