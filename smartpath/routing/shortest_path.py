# smartpath/routing/shortest_path.py
from typing import Dict, Iterable, List
import heapq
import math

from smartpath.store.grid import GridGraph


def _check_node(graph: GridGraph, k: int) -> None:
    if not (0 <= k < len(graph.nodes)):
        raise IndexError(f"Nodo {k} fuera de rango (0..{len(graph.nodes) - 1})")


def _dijkstra(graph: GridGraph, start: int, goal: int = -1):
    """
    Dijkstra con frontera en heap binario. Si `goal` >= 0 corta al sacarlo del heap.
    Devuelve (dist, prev).
    """
    n = len(graph.nodes)
    dist = [math.inf] * n
    prev = [-1] * n
    visited = [False] * n

    dist[start] = 0.0
    heap = [(0.0, start)]
    while heap:
        d, u = heapq.heappop(heap)
        if visited[u]:
            continue  # entrada vieja
        visited[u] = True
        if u == goal:
            break
        for v in graph.neighbors[u]:
            if visited[v]:
                continue
            alt = d + graph.edge_weight(u, v)
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u
                heapq.heappush(heap, (alt, v))
    return dist, prev


def shortest_path(graph: GridGraph, start: int, goal: int) -> List[int]:
    """
    Camino mínimo (índices de nodo) de start a goal.
    - start == goal -> [start]
    - goal inalcanzable -> [] (nunca un camino parcial)
    Los empates se resuelven de forma arbitraria.
    """
    _check_node(graph, start)
    _check_node(graph, goal)
    if start == goal:
        return [start]

    _, prev = _dijkstra(graph, start, goal)
    if prev[goal] == -1:
        return []

    path = [goal]
    cur = goal
    while cur != start:
        cur = prev[cur]
        path.append(cur)
    path.reverse()
    return path


def path_length(graph: GridGraph, path: List[int]) -> float:
    return sum(graph.edge_weight(a, b) for a, b in zip(path, path[1:]))


def pairwise_path_lengths(graph: GridGraph, nodes: Iterable[int]) -> Dict[int, Dict[int, float]]:
    """
    Distancias reales por la rejilla entre todos los pares de `nodes`
    (un Dijkstra completo por origen). inf si no hay conexión.
    Sirve para alimentar el planificador de tours con la métrica "path".
    """
    targets = list(dict.fromkeys(nodes))
    for k in targets:
        _check_node(graph, k)
    table: Dict[int, Dict[int, float]] = {}
    for s in targets:
        dist, _ = _dijkstra(graph, s)
        table[s] = {t: dist[t] for t in targets}
    return table
