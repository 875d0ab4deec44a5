# smartpath/__init__.py
from smartpath.routing import PlannerConfig, PlanResult, plan_route
from smartpath.store.floor_plan import FloorPlan, Shelf, MalformedFloorPlan

__all__ = ["PlannerConfig", "PlanResult", "plan_route", "FloorPlan", "Shelf", "MalformedFloorPlan"]
