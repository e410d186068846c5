#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path
from typing import List
import numpy as np
import pandas as pd
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

# Okabe–Ito colors (color-blind friendly)
COLORS = {"BFS": "#0072B2", "RBFS": "#D55E00"}
MARKERS = {"BFS": "o", "RBFS": "^"}
METRICS = [("time_sec", "Time (s)"), ("expanded", "Expanded nodes"), ("g", "Solution length")]

def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)

def load_results(paths) -> pd.DataFrame:
    """Concatenate runner CSVs, keeping solved rows only."""
    dfs = []
    for p in paths:
        try:
            df = pd.read_csv(p)
        except Exception as e:
            print(f"skip {p}: {e}")
            continue
        need = {"algorithm", "depth", "time_sec"}
        if not need.issubset(df.columns):
            print(f"skip {p}: missing columns {sorted(need - set(df.columns))}")
            continue
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)
    if "termination" in df.columns:
        df = df[df["termination"].fillna("ok") == "ok"].copy()
    for c in ("depth", "expanded", "generated", "g", "time_sec"):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df.reset_index(drop=True)

def agg_curves(df: pd.DataFrame, algo: str) -> pd.DataFrame:
    part = df[df["algorithm"] == algo]
    if part.empty:
        return pd.DataFrame(columns=["depth","time_sec_mean","time_sec_sem","expanded_mean",
                                     "expanded_sem","g_mean","g_sem","n"])
    g = (part.groupby("depth", as_index=False)
             .agg(time_sec_mean=("time_sec", "mean"),
                  time_sec_sem =("time_sec", sem),
                  expanded_mean=("expanded", "mean"),
                  expanded_sem =("expanded", sem),
                  g_mean       =("g", "mean"),
                  g_sem        =("g", sem),
                  n=("time_sec", "count")))
    return g.sort_values("depth").reset_index(drop=True)

def plot_results(df: pd.DataFrame, outdir: Path, base: str) -> List[Path]:
    outdir.mkdir(parents=True, exist_ok=True)
    algos = [a for a in ("BFS", "RBFS") if a in set(df["algorithm"])]
    curves = {a: agg_curves(df, a) for a in algos}
    saved: List[Path] = []

    fig, axes = plt.subplots(1, len(METRICS), figsize=(15, 4.8))
    for ax, (metric, label) in zip(axes, METRICS):
        for a in algos:
            c = curves[a]
            ax.errorbar(c["depth"], c[f"{metric}_mean"], yerr=c[f"{metric}_sem"],
                        label=a, color=COLORS.get(a), marker=MARKERS.get(a, "o"), lw=2, capsize=3)
        ax.set_xlabel("Scramble depth")
        ax.set_ylabel(label)
        ax.set_title(f"{label} vs depth (mean ± sem)")
        ax.grid(True, alpha=0.25, ls=":")
        ax.legend()
    fig.tight_layout()
    path = outdir / f"{base}_combined.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved: {path}")
    saved.append(path)
    return saved

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot BFS/RBFS runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load_results(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem
    plot_results(df, Path(args.save), base)

    if args.show:
        plt.show()

if __name__ == "__main__":
    main()
