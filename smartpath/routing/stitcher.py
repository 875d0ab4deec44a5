# smartpath/routing/stitcher.py
from collections import defaultdict
from typing import Dict, List, Union

from smartpath.store.grid import GridGraph
from .results import NoPathBetweenWaypoints, Route
from .shortest_path import shortest_path
from .waypoints import Waypoint


def assign_visit_order(tour: List[int], waypoints: List[Waypoint]) -> Dict[str, int]:
    """
    Recorre el tour una vez; cada estantería distinta del nodo recibe el siguiente
    número libre (desde 1). Varias estanterías en un mismo nodo respetan el orden de entrada.
    """
    shelves_by_node: Dict[int, List[str]] = defaultdict(list)
    for w in waypoints:
        shelves_by_node[w.node].append(w.shelf_id)

    order: Dict[str, int] = {}
    nxt = 1
    for node in tour:
        for sid in shelves_by_node.get(node, []):
            if sid not in order:
                order[sid] = nxt
                nxt += 1
    return order


def stitch(tour: List[int], waypoints: List[Waypoint], graph: GridGraph) -> Union[Route, NoPathBetweenWaypoints]:
    """Une los caminos mínimos entre nodos consecutivos del tour en una sola polilínea."""
    if not tour:
        return Route()

    full: List[int] = [tour[0]]
    for a, b in zip(tour, tour[1:]):
        seg = shortest_path(graph, a, b)
        if not seg:
            # nunca una ruta con huecos
            return NoPathBetweenWaypoints(
                from_node=a, to_node=b,
                from_point=graph.point(a), to_point=graph.point(b),
            )
        full.extend(seg[1:])

    points = []
    for k in full:
        p = graph.point(k)
        if not points or points[-1] != p:
            points.append(p)

    return Route(points=points, visit_order=assign_visit_order(tour, waypoints), node_path=full)
