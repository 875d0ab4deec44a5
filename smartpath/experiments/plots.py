from pathlib import Path
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

def summarize_by_metric(csv_path: Path) -> pd.DataFrame:
    df = pd.read_csv(csv_path)
    df = df[df["ok"]]
    return (df
        .groupby(["metric", "n_shelves"], as_index=False)[["route_length_m", "swaps"]]
        .mean())

def plot_route_length_by_metric(csv_path: Path, out_png: Path):
    agg = summarize_by_metric(csv_path)
    plt.figure()
    for metric in agg["metric"].unique():
        sub = agg[agg["metric"] == metric]
        plt.plot(sub["n_shelves"], sub["route_length_m"], marker="o", label=metric)
    plt.xlabel("Estanterías en el carrito")
    plt.ylabel("Largo de ruta caminada")
    plt.title("Largo promedio de ruta por métrica del tour")
    plt.legend()
    plt.tight_layout()
    out_png.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out_png)
    plt.close()
