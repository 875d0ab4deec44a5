import argparse
from pathlib import Path

from smartpath.spec.config_loader import load_config
from smartpath.spec.planning_spec import PlanningSpec
from smartpath.store.grid import build_grid
from smartpath.routing.shortest_path import shortest_path, path_length

def main():
    parser = argparse.ArgumentParser(description="Resumen de la rejilla caminable de la tienda.")
    parser.add_argument("--config", type=Path, help="Petición JSON/YAML (opcional)")
    args = parser.parse_args()

    spec = PlanningSpec.default() if not args.config else PlanningSpec.from_dict(load_config(args.config))
    graph = build_grid(spec.floor_plan, spec.planner.spacing)
    walkable = graph.walkable_nodes()
    edges = list(graph.edges())
    print(f"Rejilla: {graph.nx}x{graph.ny}  Nodos: {len(graph)}  Caminables: {len(walkable)}  Aristas: {len(edges)}")
    # ejemplo de distancia entre esquinas opuestas
    a, b = graph.index_of(0, 0), graph.index_of(graph.nx - 1, graph.ny - 1)
    path = shortest_path(graph, a, b)
    if path:
        print(f"Esquina → esquina: {len(path) - 1} pasos  Distancia: {path_length(graph, path):.1f}")
    else:
        print("Esquina → esquina: sin camino")

if __name__ == "__main__":
    main()
