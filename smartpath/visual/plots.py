from pathlib import Path
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.patches as patches

from smartpath.routing.planner import PlanResult
from smartpath.store.floor_plan import FloorPlan
from smartpath.visual.frames import visited_shelves


def plot_route(plan: FloorPlan, result: PlanResult, out_png: Path) -> Path:
    fig, ax = plt.subplots(figsize=(5, 5 * plan.height / plan.width))
    ax.add_patch(patches.Rectangle((0, 0), plan.width, plan.height, fill=False, edgecolor="black"))

    visits = result.route.visit_order if result.route else {}
    for s in plan.shelves:
        color = "tab:orange" if s.shelf_id in visits else "lightgray"
        ax.add_patch(patches.Rectangle((s.x, s.y), s.width, s.height, facecolor=color, edgecolor="dimgray"))
        ax.text(s.x + 0.3, s.y + 0.8, s.name or s.shelf_id, fontsize=7)
    # estanterías requeridas que no son obstáculos del plano: solo contorno
    shelves = visited_shelves(result)
    planned = set(plan.shelf_ids())
    for s in shelves.values():
        if s.shelf_id not in planned:
            ax.add_patch(patches.Rectangle((s.x, s.y), s.width, s.height, fill=False,
                                           edgecolor="tab:orange", linestyle="--"))

    if result.route and len(result.route.points) > 1:
        xs = [p[0] for p in result.route.points]
        ys = [p[1] for p in result.route.points]
        ax.plot(xs, ys, color="tab:blue", linewidth=2)
        ax.plot(xs[0], ys[0], marker="o", color="tab:green")

    # badges numerados en el centro de cada estantería visitada
    for sid, n in visits.items():
        cx, cy = shelves[sid].center
        ax.text(cx, cy, str(n), ha="center", va="center", fontsize=9, color="white",
                bbox=dict(boxstyle="circle", facecolor="tab:blue"))

    ax.set_xlim(-1, plan.width + 1)
    ax.set_ylim(plan.height + 1, -1)  # y crece hacia abajo, como en pantalla
    ax.set_aspect("equal")
    title = "Ruta" if result.ok else "Sin ruta: " + result.failure.describe()
    ax.set_title(title, fontsize=9)
    fig.tight_layout()
    out_png.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_png)
    plt.close(fig)
    return out_png
