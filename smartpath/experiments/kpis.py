from dataclasses import dataclass, asdict
from typing import Dict, Any
from smartpath.routing.planner import PlanResult

@dataclass
class RouteRow:
    metric: str
    spacing: float
    n_shelves: int
    seed: int

    ok: bool
    swaps: int
    tour_length: float       # en la métrica del tour
    route_length_m: float    # caminada real por la rejilla
    route_points: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

def to_row(metric: str, spacing: float, n_shelves: int, seed: int, res: PlanResult) -> RouteRow:
    route = res.route
    return RouteRow(
        metric=metric,
        spacing=spacing,
        n_shelves=n_shelves,
        seed=seed,
        ok=res.ok,
        swaps=res.tour.swaps if res.tour else 0,
        tour_length=res.tour.length if res.tour else 0.0,
        route_length_m=route.length if route else -1.0,
        route_points=len(route.points) if route else 0,
    )
