import argparse
import json
from pathlib import Path

from smartpath.io.planner_logging import configure_logging
from smartpath.routing.planner import PlannerConfig, plan_route
from smartpath.spec.config_loader import load_config
from smartpath.spec.planning_spec import PlanningSpec
from smartpath.visual.frames import compose_route_view
from smartpath.visual.plots import plot_route

def main():
    parser = argparse.ArgumentParser(description="Calcula la ruta de compra por la tienda.")
    parser.add_argument("--config", type=Path, help="Petición JSON/YAML (opcional; por defecto tienda demo)")
    parser.add_argument("--spacing", type=float, help="Paso de la rejilla (pisa al archivo)")
    parser.add_argument("--metric", choices=["euclidean", "path"], help="Métrica del tour")
    parser.add_argument("--start", type=float, nargs=2, metavar=("X", "Y"), help="Entrada explícita")
    parser.add_argument("--out-json", type=Path, default=Path("outputs/route/route.json"))
    parser.add_argument("--png", type=Path, help="Guardar dibujo de la ruta")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--json-logs", action="store_true")
    args = parser.parse_args()

    configure_logging(args.log_level, json_format=args.json_logs)

    spec = PlanningSpec.default() if not args.config else PlanningSpec.from_dict(load_config(args.config))
    p = spec.planner
    spec.planner = PlannerConfig(
        spacing=args.spacing if args.spacing is not None else p.spacing,
        metric=args.metric or p.metric,
        start=tuple(args.start) if args.start is not None else p.start,
    )
    spec.validate()

    result = plan_route(spec.floor_plan, spec.required_shelves(), spec.planner)
    view = compose_route_view(spec.floor_plan, result)

    args.out_json.parent.mkdir(parents=True, exist_ok=True)
    with open(args.out_json, "w", encoding="utf-8") as f:
        json.dump(view, f, ensure_ascii=False, indent=2)
    print(f"[OK] Route JSON → {args.out_json}")

    if args.png:
        plot_route(spec.floor_plan, result, args.png)
        print(f"[OK] Route PNG  → {args.png}")

    if not result.ok:
        print(f"[FAIL] {result.failure.describe()}")
        raise SystemExit(1)
    for u in result.unroutable:
        print(f"[WARN] {u.describe()}")
    order = sorted(result.route.visit_order.items(), key=lambda kv: kv[1])
    print("Orden de visita:", " → ".join(f"{n}:{sid}" for sid, n in order) or "-")
    print(f"Largo de ruta: {result.route.length:.1f}  Puntos: {len(result.route.points)}")

if __name__ == "__main__":
    main()
