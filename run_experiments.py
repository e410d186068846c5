#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m eightpuzzle.experiments.runner --depths 6 10 14 18 --per_depth 10 --algo both --out results/bfs_rbfs.csv")
    run("python -m eightpuzzle.experiments.runner --depths 6 10 --per_depth 3 --algo both --include_unsolvable --out results/unsolvable.csv")
    run("python -m eightpuzzle.experiments.plot results/bfs_rbfs.csv --save results/plots")

if __name__ == "__main__":
    main()
