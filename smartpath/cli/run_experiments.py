from pathlib import Path
from smartpath.io.planner_logging import configure_logging
from smartpath.experiments.runner import run_metric_comparison
from smartpath.experiments.plots import plot_route_length_by_metric, summarize_by_metric

def main():
    configure_logging("WARNING")
    csv_path = run_metric_comparison(
        out_csv=Path("outputs/experiments/metric_comparison.csv"),
        metrics=["euclidean", "path"],
        spacings=[1.0],
        basket_sizes=[3, 5, 8, 10],
        seeds=[7, 11, 23, 42],   # rápido para demo; puedes ampliarlo
        n_cols=4,
        n_rows=3,
    )
    print(f"CSV: {csv_path}")
    print(summarize_by_metric(csv_path).to_string(index=False))

    plot_route_length_by_metric(csv_path, Path("outputs/plots/route_length_by_metric.png"))
    print("Gráficas en outputs/plots/")

if __name__ == "__main__":
    main()
