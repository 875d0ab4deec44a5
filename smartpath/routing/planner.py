# smartpath/routing/planner.py
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional
import logging

from smartpath.io.planner_logging import emit
from smartpath.store.floor_plan import FloorPlan, Point, Shelf
from smartpath.store.grid import build_grid
from .results import NoPathBetweenWaypoints, Route, RoutingFailure, UnreachableWaypoint
from .stitcher import stitch
from .tour import TourMetric, TourPlan, plan_tour
from .waypoints import Waypoint, locate_waypoints, nearest_walkable

log = logging.getLogger(__name__)

METRICS = ("euclidean", "path")


# --------------------------- Configuración y resultado ---------------------------

@dataclass
class PlannerConfig:
    spacing: float = 1.0                  # paso de la rejilla
    metric: TourMetric = "euclidean"      # "euclidean" | "path"
    start: Optional[Point] = None         # entrada explícita; None -> nodo con x+y mínimo

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "PlannerConfig":
        start = d.get("start")
        return PlannerConfig(
            spacing=float(d.get("spacing", 1.0)),
            metric=d.get("metric", "euclidean"),
            start=(float(start[0]), float(start[1])) if start is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spacing": self.spacing,
            "metric": self.metric,
            "start": list(self.start) if self.start is not None else None,
        }


@dataclass
class PlanResult:
    route: Optional[Route]
    failure: Optional[RoutingFailure] = None
    unroutable: List[UnreachableWaypoint] = field(default_factory=list)
    waypoints: List[Waypoint] = field(default_factory=list)
    tour: Optional[TourPlan] = None
    entrance: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


# ------------------------------- Planificación ---------------------------------

def plan_route(plan: FloorPlan, required: Iterable[Shelf], cfg: Optional[PlannerConfig] = None) -> PlanResult:
    """
    Una petición completa: rejilla -> waypoints -> tour -> ruta cosida.
    Los fallos esperables vuelven como valores en PlanResult; solo un plano
    mal formado lanza (MalformedFloorPlan).
    """
    cfg = cfg or PlannerConfig()
    if cfg.metric not in METRICS:
        raise ValueError(f"Métrica no soportada: {cfg.metric}")
    required = list(required)

    graph = build_grid(plan, cfg.spacing)
    emit(log, "INFO", "plan_request", shelves=len(required), nodes=len(graph),
         spacing=cfg.spacing, metric=cfg.metric)

    waypoints, unroutable = locate_waypoints(graph, required)
    if not waypoints:
        return PlanResult(route=Route(), unroutable=unroutable)

    entrance = None
    if cfg.start is not None:
        entrance = nearest_walkable(graph, cfg.start)
        if entrance is None:
            emit(log, "WARNING", "entrance_ignored", start=cfg.start)

    tour = plan_tour([w.node for w in waypoints], graph, metric=cfg.metric, entrance=entrance)
    emit(log, "DEBUG", "tour_planned", stops=len(tour.order), swaps=tour.swaps,
         construction_length=round(tour.construction_length, 3), length=round(tour.length, 3))

    stitched = stitch(tour.order, waypoints, graph)
    if isinstance(stitched, NoPathBetweenWaypoints):
        emit(log, "WARNING", "no_path_between_waypoints", detail=stitched.describe())
        return PlanResult(route=None, failure=stitched, unroutable=unroutable,
                          waypoints=waypoints, tour=tour, entrance=entrance)

    emit(log, "INFO", "route_ready", points=len(stitched.points),
         length=round(stitched.length, 3), visits=len(stitched.visit_order))
    return PlanResult(route=stitched, unroutable=unroutable, waypoints=waypoints,
                      tour=tour, entrance=entrance)
