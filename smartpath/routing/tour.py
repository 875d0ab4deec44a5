# smartpath/routing/tour.py
"""
Orden de visita de los waypoints: vecino más cercano + mejora 2-opt.

Por defecto la métrica es la distancia en línea recta entre coordenadas de
nodo, mientras que la ruta final se camina por la rejilla (Dijkstra). Cerca
de estanterías ambas pueden diferir bastante, así que el orden resultante es
una aproximación. Con metric="path" se usa la distancia real por la rejilla
(un Dijkstra por waypoint) a cambio de O(k) búsquedas extra.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, List, Literal, Optional, Tuple
import math

from smartpath.store.grid import GridGraph
from .shortest_path import pairwise_path_lengths

TourMetric = Literal["euclidean", "path"]
DistanceFn = Callable[[int, int], float]

TWO_OPT_EPS = 1e-9


@dataclass
class TourPlan:
    order: List[int]
    construction_length: float
    length: float
    swaps: int
    metric: str = "euclidean"


# -------------------- Métricas --------------------

def straight_line(graph: GridGraph) -> DistanceFn:
    def dist(a: int, b: int) -> float:
        ax, ay = graph.nodes[a]
        bx, by = graph.nodes[b]
        return math.hypot(ax - bx, ay - by)
    return dist


def grid_path(graph: GridGraph, nodes: Iterable[int]) -> DistanceFn:
    table = pairwise_path_lengths(graph, nodes)

    def dist(a: int, b: int) -> float:
        return table[a][b]
    return dist


def make_distance(graph: GridGraph, nodes: Iterable[int], metric: TourMetric = "euclidean") -> DistanceFn:
    if metric == "euclidean":
        return straight_line(graph)
    if metric == "path":
        return grid_path(graph, nodes)
    raise ValueError(f"Métrica no soportada: {metric}")


def tour_length(order: List[int], distance: DistanceFn) -> float:
    return sum(distance(a, b) for a, b in zip(order, order[1:]))


# -------------------- Construcción --------------------

def pick_start(nodes: List[int], graph: GridGraph) -> int:
    """Nodo con x+y mínimo (aprox. esquina superior izquierda); primero en empates."""
    return min(nodes, key=lambda k: graph.nodes[k][0] + graph.nodes[k][1])


def nearest_neighbor_order(
    nodes: Iterable[int],
    graph: GridGraph,
    distance: Optional[DistanceFn] = None,
    entrance: Optional[int] = None,
) -> List[int]:
    points = list(dict.fromkeys(nodes))  # distintos, en orden de aparición
    if entrance is None and not points:
        return []
    dist = distance or straight_line(graph)

    start = entrance if entrance is not None else pick_start(points, graph)
    order = [start]
    remaining = [k for k in points if k != start]
    while remaining:
        last = order[-1]
        nxt = min(remaining, key=lambda k: dist(last, k))
        remaining.remove(nxt)
        order.append(nxt)
    return order


# -------------------- Mejora --------------------

def two_opt(order: List[int], distance: DistanceFn) -> Tuple[List[int], int]:
    """
    2-opt sobre i en [1, n-3], k en [i+1, n-2]: invierte r[i..k] si baja
    d(i-1,i)+d(k,k+1) en más de TWO_OPT_EPS. Repite pasadas hasta que ninguna mejore.
    Devuelve (orden, cantidad de inversiones aplicadas).
    """
    r = list(order)
    if len(r) <= 3:
        return r, 0
    swaps = 0
    improved = True
    while improved:
        improved = False
        for i in range(1, len(r) - 2):
            for k in range(i + 1, len(r) - 1):
                a, b, c, d = r[i - 1], r[i], r[k], r[k + 1]
                current = distance(a, b) + distance(c, d)
                swapped = distance(a, c) + distance(b, d)
                if swapped + TWO_OPT_EPS < current:
                    r[i:k + 1] = r[i:k + 1][::-1]
                    swaps += 1
                    improved = True
    return r, swaps


# -------------------- API --------------------

def plan_tour(
    nodes: Iterable[int],
    graph: GridGraph,
    metric: TourMetric = "euclidean",
    entrance: Optional[int] = None,
) -> TourPlan:
    points = list(dict.fromkeys(nodes))
    involved = points if entrance is None else [entrance] + points
    dist = make_distance(graph, involved, metric)

    built = nearest_neighbor_order(points, graph, distance=dist, entrance=entrance)
    improved, swaps = two_opt(built, dist)
    return TourPlan(
        order=improved,
        construction_length=tour_length(built, dist),
        length=tour_length(improved, dist),
        swaps=swaps,
        metric=metric,
    )


def order_waypoints(
    nodes: Iterable[int],
    graph: GridGraph,
    metric: TourMetric = "euclidean",
    entrance: Optional[int] = None,
) -> List[int]:
    """Permutación de los nodos distintos de `nodes` (con la entrada al frente si se da)."""
    return plan_tour(nodes, graph, metric=metric, entrance=entrance).order
