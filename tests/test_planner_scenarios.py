import math
import pytest
from smartpath.store.floor_plan import FloorPlan, Shelf, MalformedFloorPlan
from smartpath.store.demo import demo_floor_plan
from smartpath.routing.planner import PlannerConfig, plan_route
from smartpath.routing.results import NoPathBetweenWaypoints

def pocket_plan():
    """Recinto cerrado de paredes (interior x,y en 7..13) + una estantería dentro y otra fuera."""
    walls = (
        Shelf("W1", 5, 5, 10, 1),
        Shelf("W2", 5, 14, 10, 1),
        Shelf("W3", 5, 5, 1, 10),
        Shelf("W4", 14, 5, 1, 10),
    )
    inner = Shelf("IN", 9, 9, 2, 2)
    outer = Shelf("OUT", 1, 1, 2, 2)
    return FloorPlan(width=20, height=20, shelves=walls + (inner, outer)), inner, outer

def test_scenario_empty_basket():
    res = plan_route(FloorPlan(width=20, height=40), [], PlannerConfig(spacing=1.0))
    assert res.ok
    assert res.route.points == []
    assert res.route.visit_order == {}

def test_scenario_empty_basket_with_entrance():
    res = plan_route(FloorPlan(width=20, height=40), [], PlannerConfig(start=(0, 0)))
    assert res.ok and res.route.points == [] and res.route.visit_order == {}

def test_scenario_single_shelf_detour_from_entrance():
    s = Shelf("S", 4, 4, 4, 8)
    plan = FloorPlan(width=20, height=40, shelves=(s,))
    res = plan_route(plan, [s], PlannerConfig(start=(0.0, 0.0)))
    assert res.ok
    target = res.route.points[-1]
    assert not s.contains(target)
    assert target == (3.0, 8.0)
    assert res.route.points[0] == (0.0, 0.0)
    assert res.route.visit_order == {"S": 1}
    assert res.route.length > math.hypot(*target)

def test_scenario_single_shelf_without_entrance():
    s = Shelf("S", 4, 4, 4, 8)
    plan = FloorPlan(width=20, height=40, shelves=(s,))
    res = plan_route(plan, [s])
    assert res.route.points == [(3.0, 8.0)]
    assert res.route.visit_order == {"S": 1}

def test_scenario_collinear_shelves_need_no_swaps():
    shelves = tuple(Shelf(sid, x, 4, 2, 2) for sid, x in [("A", 4), ("B", 12), ("C", 20), ("D", 26)])
    plan = FloorPlan(width=30, height=10, shelves=shelves)
    res = plan_route(plan, list(shelves))
    assert res.ok
    # waypoints sobre la fila y=3, de izquierda a derecha
    assert [res.route.points[0], res.route.points[-1]] == [(5.0, 3.0), (27.0, 3.0)]
    assert res.tour.swaps == 0
    assert res.tour.length == pytest.approx(res.tour.construction_length)
    assert res.route.visit_order == {"A": 1, "B": 2, "C": 3, "D": 4}
    assert res.route.length == pytest.approx(22.0)

def test_scenario_isolated_pocket_fails(caplog):
    plan, inner, outer = pocket_plan()
    caplog.set_level("WARNING", logger="smartpath")
    res = plan_route(plan, [inner, outer])
    assert not res.ok
    assert res.route is None
    assert isinstance(res.failure, NoPathBetweenWaypoints)
    assert {res.failure.from_point, res.failure.to_point} == {(10.0, 8.0), (2.0, 0.0)}
    assert any("no_path_between_waypoints" in r.getMessage() for r in caplog.records)

def test_pocket_shelf_alone_is_still_routable():
    plan, inner, _ = pocket_plan()
    res = plan_route(plan, [inner])
    assert res.ok and res.route.visit_order == {"IN": 1}

def test_unroutable_shelf_is_reported_not_dropped():
    cover = Shelf("X", 0, 0, 10, 10)
    res = plan_route(FloorPlan(width=10, height=10, shelves=(cover,)), [cover])
    assert res.ok
    assert res.route.points == []
    assert [u.shelf_id for u in res.unroutable] == ["X"]

def test_demo_store_visits_every_shelf():
    plan = demo_floor_plan()
    required = plan.select(["A1", "A3", "B1", "B2", "B3"])
    for metric in ("euclidean", "path"):
        res = plan_route(plan, required, PlannerConfig(metric=metric))
        assert res.ok
        assert sorted(res.route.visit_order.values()) == [1, 2, 3, 4, 5]
        assert set(res.route.visit_order) == {"A1", "A3", "B1", "B2", "B3"}
        assert all(not plan.is_blocked(p) for p in res.route.points)
        for a, b in zip(res.route.points, res.route.points[1:]):
            assert math.isclose(math.dist(a, b), 1.0)

def test_visit_numbers_follow_first_arrival():
    plan = demo_floor_plan()
    required = list(plan.shelves)
    res = plan_route(plan, required)
    by_node = {w.shelf_id: w.node for w in res.waypoints}
    arrival = {sid: res.tour.order.index(node) for sid, node in by_node.items()}
    ranked = sorted(arrival, key=lambda sid: (arrival[sid], res.route.visit_order[sid]))
    assert [res.route.visit_order[sid] for sid in ranked] == list(range(1, len(required) + 1))

def test_malformed_input_raises():
    with pytest.raises(MalformedFloorPlan):
        plan_route(FloorPlan(width=10, height=10), [], PlannerConfig(spacing=-1))
    with pytest.raises(ValueError):
        plan_route(FloorPlan(width=10, height=10), [], PlannerConfig(metric="manhattan"))
