from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List

from eightpuzzle.domains.puzzle8 import (
    GOAL,
    MAX_SOLUTION_LENGTH,
    Board,
    PuzzleState,
    scramble,
    is_solvable,
    make_unsolvable_variant,
)
from eightpuzzle.search.bfs import bfs
from eightpuzzle.search.rbfs import rbfs

HEADER = [
    "algorithm","depth","seed",
    "expanded","generated","g","time_sec",
    "peak_frontier","peak_recursion",
    "termination","solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    board: Board

def make_instances(depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            b = scramble(d, seed)
            if not is_solvable(b):
                raise RuntimeError(f"Scramble produced an unsolvable board at depth={d}, seed={seed}.")
            out.append(Instance(seed=seed, depth=d, board=b))
            seed += 1
    return out

def write_row(w, res, inst: Instance, solvable_flag: int):
    w.writerow([
        res.get("algorithm",""), inst.depth, inst.seed,
        res.get("expanded",""), res.get("generated",""),
        "" if res.get("g") is None else res["g"],
        f"{res.get('time',0.0):.6f}",
        res.get("peak_frontier",""), res.get("peak_recursion",""),
        res.get("termination","ok"), solvable_flag,
    ])

def run_all(insts: List[Instance], algo: str, out: Path,
            include_unsolvable: bool = False, max_cost: int | None = MAX_SOLUTION_LENGTH) -> int:
    """Solve every instance with the chosen solvers and write one CSV row per run."""
    want_bfs  = algo in ("bfs","both")
    want_rbfs = algo in ("rbfs","both")
    out.parent.mkdir(parents=True, exist_ok=True)
    rows = 0

    def solve_one(w, board: Board, inst: Instance, solvable_flag: int):
        nonlocal rows
        # fresh root per solver: RBFS rewrites estimated_cost on its nodes
        if want_bfs:
            write_row(w, bfs(PuzzleState.start(board), GOAL), inst, solvable_flag); rows += 1
        if want_rbfs:
            write_row(w, rbfs(PuzzleState.start(board), GOAL, max_cost=max_cost), inst, solvable_flag); rows += 1

    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            solve_one(w, inst.board, inst, 1)
            # Parity-flipped copy: BFS exhausts all 181440 reachable boards here.
            if include_unsolvable:
                solve_one(w, make_unsolvable_variant(inst.board), inst, 0)
    return rows

def main(argv=None):
    ap = argparse.ArgumentParser(description="BFS / RBFS 8-puzzle experiment runner")
    ap.add_argument("--algo", choices=["bfs","rbfs","both"], default="both")
    ap.add_argument("--depths", type=int, nargs="+", default=[6,10,14,18,22,26],
                    help="Scramble lengths (random legal blank moves from the goal)")
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--start_seed", type=int, default=0)
    ap.add_argument("--max_cost", type=int, default=MAX_SOLUTION_LENGTH,
                    help="RBFS never expands nodes with f above this")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run parity-flipped variants")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    insts = make_instances(args.depths, args.per_depth, args.start_seed)
    run_all(insts, args.algo, args.out, args.include_unsolvable, args.max_cost)
    print(f"Wrote {args.out} ({len(insts)} instances)")

if __name__ == "__main__":
    main()
