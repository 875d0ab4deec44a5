# smartpath/visual/frames.py
from __future__ import annotations
from typing import Any, Dict, List

from smartpath.routing.planner import PlanResult
from smartpath.store.floor_plan import FloorPlan, Shelf

# ---------- Vista serializable para la capa de presentación ----------

def visited_shelves(result: PlanResult) -> Dict[str, Shelf]:
    """Estantería de cada waypoint; puede no ser un obstáculo del plano."""
    return {w.shelf_id: w.shelf for w in result.waypoints}


def _badges(result: PlanResult) -> List[Dict[str, Any]]:
    if result.route is None:
        return []
    shelves = visited_shelves(result)
    out = []
    for sid, n in sorted(result.route.visit_order.items(), key=lambda kv: kv[1]):
        cx, cy = shelves[sid].center
        out.append({"shelf_id": sid, "order": n, "x": cx, "y": cy})
    return out


def compose_route_view(plan: FloorPlan, result: PlanResult) -> Dict[str, Any]:
    """
    { meta: {name, width, height, shelves}, route: [{x,y}], length, badges: [...],
      unroutable: [shelf_id], failure: str | None }
    Los badges van en el centro de cada estantería, ordenados por número de visita.
    """
    route = result.route
    return {
        "meta": {
            "name": plan.name,
            "width": plan.width,
            "height": plan.height,
            "shelves": [s.to_dict() for s in plan.shelves],
        },
        "route": [{"x": x, "y": y} for (x, y) in (route.points if route else [])],
        "length": route.length if route else None,
        "badges": _badges(result),
        "unroutable": [u.shelf_id for u in result.unroutable],
        "failure": result.failure.describe() if result.failure else None,
    }
