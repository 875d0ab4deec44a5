# smartpath/routing/waypoints.py
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
import logging
import numpy as np

from smartpath.store.floor_plan import Point, RequiredShelf, Shelf
from smartpath.store.grid import GridGraph
from .results import UnreachableWaypoint

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Waypoint:
    shelf: RequiredShelf
    node: int

    @property
    def shelf_id(self) -> str:
        return self.shelf.shelf_id


def nearest_walkable(graph: GridGraph, p: Point) -> Optional[int]:
    """
    Nodo caminable (con al menos un vecino) más cercano a p por distancia al cuadrado.
    Empates -> menor índice. None si la rejilla no tiene ningún nodo caminable.
    """
    walkable = np.fromiter((bool(nb) for nb in graph.neighbors), dtype=bool, count=len(graph.neighbors))
    if not walkable.any():
        return None
    px, py = p
    xy = graph.coords()
    d2 = (xy[:, 0] - px) ** 2 + (xy[:, 1] - py) ** 2
    d2[~walkable] = np.inf
    # argmin devuelve la primera ocurrencia del mínimo
    return int(np.argmin(d2))


def locate(graph: GridGraph, shelf: Shelf) -> Optional[int]:
    """Waypoint de una estantería: nodo caminable más cercano a su centro."""
    return nearest_walkable(graph, shelf.center)


def locate_waypoints(graph: GridGraph, shelves: Iterable[Shelf]) -> Tuple[List[Waypoint], List[UnreachableWaypoint]]:
    waypoints: List[Waypoint] = []
    unroutable: List[UnreachableWaypoint] = []
    for shelf in shelves:
        k = locate(graph, shelf)
        if k is None:
            miss = UnreachableWaypoint(shelf_id=shelf.shelf_id, center=shelf.center)
            log.warning("unreachable_waypoint: %s", miss.describe())
            unroutable.append(miss)
            continue
        waypoints.append(Waypoint(shelf=shelf, node=k))
    return waypoints, unroutable
