from pathlib import Path
from typing import List, Sequence
import csv

from smartpath.routing.planner import PlannerConfig, plan_route
from smartpath.store.demo import aisle_floor_plan
from smartpath.store.floor_plan import FloorPlan, Shelf
from smartpath.experiments.rng import RNG
from smartpath.experiments.kpis import to_row

FIELDS = [
    "metric", "spacing", "n_shelves", "seed",
    "ok", "swaps", "tour_length", "route_length_m", "route_points",
]

def sample_shelves(plan: FloorPlan, k: int, rng: RNG) -> List[Shelf]:
    """k estanterías distintas al azar (en el orden del plano)."""
    k = min(k, len(plan.shelves))
    idx = set(int(i) for i in rng.choice(len(plan.shelves), size=k, replace=False))
    return [s for i, s in enumerate(plan.shelves) if i in idx]

def run_metric_comparison(
    out_csv: Path,
    metrics: Sequence[str] = ("euclidean", "path"),
    spacings: Sequence[float] = (1.0,),
    basket_sizes: Sequence[int] = (3, 5, 8),
    seeds: Sequence[int] = (7, 11, 23),
    # tienda de pasillos para el experimento
    n_cols: int = 4,
    n_rows: int = 3,
) -> Path:
    """
    Compara la métrica del tour (línea recta vs camino real por la rejilla) sobre
    carritos aleatorios. Una fila por (seed, tamaño, spacing, métrica).
    """
    plan = aisle_floor_plan(n_cols=n_cols, n_rows=n_rows)
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    with out_csv.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for seed in seeds:
            rng = RNG(seed=seed)
            for size in basket_sizes:
                required = sample_shelves(plan, size, rng)
                for spacing in spacings:
                    for metric in metrics:
                        cfg = PlannerConfig(spacing=spacing, metric=metric)
                        res = plan_route(plan, required, cfg)
                        row = to_row(metric, spacing, len(required), seed, res)
                        w.writerow(row.to_dict())
    return out_csv
