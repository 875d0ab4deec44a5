import json
import pytest
import yaml
from smartpath.spec.planning_spec import PlanningSpec
from smartpath.spec.config_loader import load_config
from smartpath.store.basket import Basket

REQUEST = {
    "store": {
        "name": "Mini",
        "width": 12, "height": 10,
        "shelves": [
            {"id": "L", "x": 2, "y": 2, "width": 2, "height": 6},
            {"id": "R", "x": 8, "y": 2, "width": 2, "height": 6},
        ],
    },
    "basket": {"products": [{"id": "leche", "name": "Leche", "shelf_id": "R"}]},
    "planner": {"spacing": 0.5, "metric": "path", "start": [0, 0]},
}

def test_default_spec_is_valid():
    spec = PlanningSpec.default()
    spec.validate()  # no debe lanzar
    assert [s.shelf_id for s in spec.required_shelves()] == ["A1", "A2", "A3", "B1", "B2"]

def test_summary_contains_core_fields():
    txt = PlanningSpec.default().summary()
    assert "PETICIÓN DE RUTA" in txt
    assert "Estanterías requeridas: A1, A2, A3, B1, B2" in txt
    assert "metric = euclidean" in txt

def test_from_dict_uses_assigned_shelves():
    spec = PlanningSpec.from_dict(REQUEST)
    spec.validate()
    assert spec.planner.spacing == 0.5
    assert spec.planner.metric == "path"
    assert spec.planner.start == (0.0, 0.0)
    assert [s.shelf_id for s in spec.required_shelves()] == ["R"]

def test_required_shelves_override_basket():
    spec = PlanningSpec.from_dict({**REQUEST, "required_shelves": ["L", "R"]})
    assert [s.shelf_id for s in spec.required_shelves()] == ["L", "R"]

def test_rejects_bad_planner_values():
    spec = PlanningSpec.default()
    spec.planner.spacing = 0
    with pytest.raises(AssertionError):
        spec.validate()
    spec = PlanningSpec.default()
    spec.planner.metric = "manhattan"
    with pytest.raises(AssertionError):
        spec.validate()

def test_rejects_unknown_shelves():
    spec = PlanningSpec.from_dict({**REQUEST, "required_shelves": ["Z"]})
    with pytest.raises(AssertionError):
        spec.validate()
    bad = {**REQUEST, "basket": {"products": [{"id": "x", "shelf_id": "nope"}]}}
    with pytest.raises(AssertionError):
        PlanningSpec.from_dict(bad).validate()

def test_load_config_json_and_yaml(tmp_path):
    pj = tmp_path / "req.json"
    pj.write_text(json.dumps(REQUEST), encoding="utf-8")
    py = tmp_path / "req.yaml"
    py.write_text(yaml.safe_dump(REQUEST), encoding="utf-8")
    assert load_config(pj) == REQUEST
    assert load_config(py) == REQUEST

def test_load_config_unsupported_suffix(tmp_path):
    p = tmp_path / "req.toml"
    p.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)

def test_mixed_basket_routes_every_product():
    spec = PlanningSpec.default()
    spec.basket = Basket.from_dict({"products": [
        {"id": "a", "shelf_id": "B3"}, {"id": "b"}, {"id": "c"},
    ]})
    spec.validate()
    assert [s.shelf_id for s in spec.required_shelves()] == ["A1", "A2", "B3"]
