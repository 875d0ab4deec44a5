# smartpath/routing/__init__.py
from .results import Route, RoutingFailure, NoPathBetweenWaypoints, UnreachableWaypoint
from .shortest_path import shortest_path, path_length, pairwise_path_lengths
from .waypoints import Waypoint, locate, locate_waypoints, nearest_walkable
from .tour import TourPlan, plan_tour, order_waypoints, nearest_neighbor_order, two_opt
from .stitcher import stitch
from .planner import PlannerConfig, PlanResult, plan_route

__all__ = [
    "Route",
    "RoutingFailure",
    "NoPathBetweenWaypoints",
    "UnreachableWaypoint",
    "shortest_path",
    "path_length",
    "pairwise_path_lengths",
    "Waypoint",
    "locate",
    "locate_waypoints",
    "nearest_walkable",
    "TourPlan",
    "plan_tour",
    "order_waypoints",
    "nearest_neighbor_order",
    "two_opt",
    "stitch",
    "PlannerConfig",
    "PlanResult",
    "plan_route",
]
