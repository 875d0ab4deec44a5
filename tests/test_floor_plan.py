import pytest
from smartpath.store.floor_plan import FloorPlan, Shelf, MalformedFloorPlan

def test_malformed_plan_is_value_error():
    assert issubclass(MalformedFloorPlan, ValueError)

def test_rejects_non_positive_or_non_finite_dimensions():
    for w, h in [(-1, 10), (10, 0), (float("nan"), 5), (5, float("inf"))]:
        with pytest.raises(MalformedFloorPlan):
            FloorPlan(width=w, height=h)

def test_rejects_bad_shelf_geometry():
    with pytest.raises(MalformedFloorPlan):
        FloorPlan(width=10, height=10, shelves=(Shelf("A", 1, 1, -2, 3),))
    with pytest.raises(MalformedFloorPlan):
        FloorPlan(width=10, height=10, shelves=(Shelf("A", float("nan"), 1, 2, 3),))

def test_rejects_duplicate_shelf_ids():
    with pytest.raises(MalformedFloorPlan):
        FloorPlan(width=10, height=10, shelves=(Shelf("A", 1, 1, 1, 1), Shelf("A", 5, 5, 1, 1)))

def test_center_and_inclusive_contains():
    s = Shelf("A", 4, 4, 4, 8)
    assert s.center == (6.0, 8.0)
    assert s.contains((4, 4)) and s.contains((8, 12))
    assert not s.contains((3.99, 8))

def test_from_dict_and_select_keep_plan_order():
    plan = FloorPlan.from_dict({
        "name": "Demo",
        "width": 20, "height": 10,
        "shelves": [
            {"id": "B", "x": 10, "y": 2, "width": 2, "height": 4},
            {"id": "A", "x": 2, "y": 2, "width": 2, "height": 4, "name": "Lácteos"},
        ],
    })
    assert plan.shelf_ids() == ["B", "A"]
    assert plan.shelf("A").name == "Lácteos"
    assert [s.shelf_id for s in plan.select(["A", "B"])] == ["B", "A"]
    with pytest.raises(KeyError):
        plan.select(["Z"])

def test_from_dict_missing_key():
    with pytest.raises(MalformedFloorPlan):
        FloorPlan.from_dict({"width": 10})
