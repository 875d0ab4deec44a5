# smartpath/routing/results.py
from dataclasses import dataclass, field
from typing import Dict, List
import math

from smartpath.store.floor_plan import Point


@dataclass
class Route:
    """Polilínea caminable + número de visita (1..k) por estantería."""
    points: List[Point] = field(default_factory=list)
    visit_order: Dict[str, int] = field(default_factory=dict)
    node_path: List[int] = field(default_factory=list)

    @property
    def length(self) -> float:
        return sum(math.hypot(b[0] - a[0], b[1] - a[1]) for a, b in zip(self.points, self.points[1:]))

    def is_empty(self) -> bool:
        return not self.points


# -------------------- Fallos (valores, no excepciones) --------------------

@dataclass(frozen=True)
class UnreachableWaypoint:
    """La estantería no tiene ningún nodo caminable al que asociarse."""
    shelf_id: str
    center: Point

    def describe(self) -> str:
        return f"Estantería {self.shelf_id} sin nodo caminable (centro={self.center})"


@dataclass(frozen=True)
class RoutingFailure:
    """Base de los fallos de cosido de ruta."""

    def describe(self) -> str:
        return "Fallo de ruteo"


@dataclass(frozen=True)
class NoPathBetweenWaypoints(RoutingFailure):
    from_node: int
    to_node: int
    from_point: Point
    to_point: Point

    def describe(self) -> str:
        return (f"Sin camino entre nodo {self.from_node} {self.from_point} "
                f"y nodo {self.to_node} {self.to_point}")
