"""
Cross-check benchmark for the DPLL solver.

Solves a batch of random k-SAT formulas, checks every verdict against PySAT
(and brute force on small instances) and saves per-instance results.

Usage:
    python benchmark.py
    python benchmark.py data.count=1000 data.var_max=40
    python benchmark.py solver.search=iterative output.prefix=iter_
"""

import logging
from pathlib import Path

import hydra
from omegaconf import DictConfig, OmegaConf

from dpll_sat.collector import collect_results, save_results

logger = logging.getLogger(__name__)


def resolve_path(path: str, orig_cwd: str) -> str:
    """Resolve a potentially relative path against the original working directory."""
    p = Path(path)
    if not p.is_absolute():
        p = Path(orig_cwd) / p
    return str(p)


@hydra.main(version_base=None, config_path="configs", config_name="default")
def main(cfg: DictConfig):
    # Ensure logging shows on console (Hydra can redirect it)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s", force=True)

    # Hydra changes cwd; resolve all paths relative to the original cwd
    orig_cwd = hydra.utils.get_original_cwd()
    output_dir = resolve_path(cfg.output.dir, orig_cwd)

    print("=" * 60)
    print("DPLL Cross-Check Benchmark")
    print("=" * 60)
    print(f"  Formulas: {cfg.data.count}, variables {cfg.data.var_min}-{cfg.data.var_max}, "
          f"k={cfg.data.clause_length}")
    print(f"  Search: {cfg.solver.search}, PySAT check: {cfg.check.pysat}, "
          f"brute force up to {cfg.check.brute_force_max_vars} vars")
    print("=" * 60)

    data = collect_results(
        var_min=cfg.data.var_min,
        var_max=cfg.data.var_max,
        count=cfg.data.count,
        clause_length=cfg.data.clause_length,
        variance=cfg.data.variance,
        search=cfg.solver.search,
        use_pysat=cfg.check.pysat,
        brute_force_max_vars=cfg.check.brute_force_max_vars,
        seed=cfg.data.get("seed"),
    )
    data["summary"]["config"] = OmegaConf.to_container(cfg, resolve=True)

    save_results(data, output_dir, prefix=cfg.output.prefix)

    summary = data["summary"]
    print(f"\nSAT: {summary['sat']}  UNSAT: {summary['unsat']}")
    print(f"Total solve time: {summary['total_seconds']:.3f}s, decisions: {summary['total_decisions']}")
    logger.info("Results written to %s", output_dir)


if __name__ == "__main__":
    main()
