"""Plot solver runtime and decisions against variable count from benchmark results."""

import argparse
import json
from collections import defaultdict
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np


def load_results(filepath: Path) -> list:
    with open(filepath, "r") as f:
        return json.load(f)


def group_by_vars(results: list, key) -> dict:
    """Map variable count -> {'sat': [...], 'unsat': [...]} of key(result) values."""
    groups = defaultdict(lambda: {"sat": [], "unsat": []})
    for r in results:
        verdict = "sat" if r["satisfiable"] else "unsat"
        groups[r["num_vars"]][verdict].append(key(r))
    return groups


def plot_medians(results: list, key, ylabel: str, title: str, output_path: Path):
    """Median of key(result) per variable count, SAT and UNSAT separately."""
    groups = group_by_vars(results, key)
    n_values = sorted(groups)

    fig, ax = plt.subplots(figsize=(10, 6))

    for verdict, marker in (("sat", "o"), ("unsat", "s")):
        xs = [n for n in n_values if groups[n][verdict]]
        ys = [np.median(np.array(groups[n][verdict])) for n in xs]
        if xs:
            ax.plot(xs, ys, marker=marker, label=verdict.upper())

    ax.set_xlabel("Variables", fontsize=12)
    ax.set_ylabel(ylabel, fontsize=12)
    ax.set_title(title, fontsize=14)
    ax.set_yscale("log")
    ax.legend()

    all_values = np.array([key(r) for r in results])
    stats_text = (
        f"N = {len(all_values):,}\n"
        f"Mean = {all_values.mean():.4g}\n"
        f"Median = {np.median(all_values):.4g}\n"
        f"Max = {all_values.max():.4g}"
    )
    ax.text(
        0.03, 0.95, stats_text,
        transform=ax.transAxes,
        fontsize=10,
        verticalalignment="top",
        horizontalalignment="left",
        bbox=dict(boxstyle="round,pad=0.4", facecolor="wheat", alpha=0.8),
    )

    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    print(f"  Saved: {output_path}")


def main():
    parser = argparse.ArgumentParser(description="Plot benchmark results")
    parser.add_argument("results", type=str, help="results.json written by benchmark.py")
    parser.add_argument("--output", type=str, default="runtime_plots", help="Output directory")
    args = parser.parse_args()

    results_path = Path(args.results)
    output_dir = Path(args.output)
    output_dir.mkdir(exist_ok=True)

    results = load_results(results_path)
    if not results:
        print("No results found, nothing to plot.")
        return

    print(f"Processing {results_path} ({len(results)} instances)...")
    # avoid zeros on the log axis
    plot_medians(
        results, lambda r: max(r["seconds"], 1e-6),
        "Median solve time (s)", "Solve time vs. variables",
        output_dir / f"{results_path.stem}_seconds.png",
    )
    plot_medians(
        results, lambda r: r["stats"]["decisions"] + 1,
        "Median decisions + 1", "Decisions vs. variables",
        output_dir / f"{results_path.stem}_decisions.png",
    )

    print("\nDone!")


if __name__ == "__main__":
    main()
