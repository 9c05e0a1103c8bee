"""
Beam Assembler Tests
====================

End-to-end runs of compute_beams over whole models.
"""
import pytest

from pathbeam import compute_beams
from pathbeam.beam.options import BeamOptions
from pathbeam.beam.results import FlatBeam, SplitBeam
from pathbeam.model.geometry_primitives import Arc, Circle, Line, Model, Point


def _xy(point):
    return point.x, point.y


class TestScenarios:

    def test_single_circle_splits(self):
        model = Model(paths={"c": Circle(Point(0.0, 0.0), 10.0)})
        result = compute_beams(model, {"distance": 20, "angle": 0, "scale": 0.5})

        unit = result.models['paths["c"]']
        assert isinstance(unit, SplitBeam)
        assert set(unit.models) == {"outside", "inside"}
        assert "ray0" not in unit.paths and "ray1" not in unit.paths
        assert _xy(unit.outside.beam.center) == pytest.approx((20.0, 0.0))

    def test_single_line_flat(self):
        model = Model(paths={"l": Line(Point(0.0, 0.0), Point(10.0, 0.0))})
        result = compute_beams(model, BeamOptions(distance=5.0, angle=90.0, scale=1.0))

        unit = result.models['paths["l"]']
        assert isinstance(unit, FlatBeam)
        assert (_xy(unit.base.start), _xy(unit.base.end)) == ((0.0, 0.0), (10.0, 0.0))
        assert _xy(unit.beam.start) == pytest.approx((0.0, 5.0), abs=1e-9)
        assert _xy(unit.beam.end) == pytest.approx((10.0, 5.0), abs=1e-9)
        ray0, ray1 = unit.paths["ray0"], unit.paths["ray1"]
        assert _xy(ray0.start) + _xy(ray0.end) == pytest.approx((0.0, 0.0, 0.0, 5.0), abs=1e-9)
        assert _xy(ray1.start) + _xy(ray1.end) == pytest.approx((10.0, 0.0, 10.0, 5.0), abs=1e-9)

    def test_three_leaves_get_layers(self, three_leaf_model):
        result = compute_beams(three_leaf_model, {"distance": 4, "angle": 45, "scale": 0.8})
        assert list(result.models) == ['paths["a"]', 'paths["b"]', 'models["m"].paths["c"]']
        assert [unit.layer for unit in result.models.values()] == ["0", "1", "2"]
        assert result.paths == {}


class TestAssembly:

    def test_scale_anchored_at_model_center(self):
        model = Model(paths={"l": Line(Point(0.0, 0.0), Point(10.0, 0.0))})
        unit = compute_beams(model, {"distance": 0, "angle": 0, "scale": 0.5}).models['paths["l"]']
        assert _xy(unit.beam.start) + _xy(unit.beam.end) == pytest.approx((2.5, 0.0, 7.5, 0.0))

    def test_child_origin_applied(self):
        model = Model(models={"m": Model(origin=Point(100.0, 0.0), paths={"l": Line(Point(0, 0), Point(10, 0))})})
        unit = compute_beams(model, {"distance": 1, "angle": 0, "scale": 1}).models['models["m"].paths["l"]']
        assert (_xy(unit.base.start), _xy(unit.base.end)) == ((100.0, 0.0), (110.0, 0.0))
        assert _xy(unit.beam.start) == pytest.approx((101.0, 0.0))

    def test_root_origin_applied(self):
        model = Model.from_dict({"origin": [100, 0], "paths": {"l": {"type": "line", "origin": [0, 0], "end": [10, 0]}}})
        unit = compute_beams(model, {"distance": 1, "angle": 0, "scale": 1}).models['paths["l"]']
        assert (_xy(unit.base.start), _xy(unit.base.end)) == ((100.0, 0.0), (110.0, 0.0))
        assert _xy(unit.beam.start) + _xy(unit.beam.end) == pytest.approx((101.0, 0.0, 111.0, 0.0))

    def test_input_model_unchanged(self, three_leaf_model):
        before = three_leaf_model.to_dict()
        compute_beams(three_leaf_model, {"distance": 4, "angle": 45, "scale": 0.8})
        assert three_leaf_model.to_dict() == before

    def test_repeatable(self, three_leaf_model):
        options = {"distance": 4, "angle": 45, "scale": 0.8}
        assert compute_beams(three_leaf_model, options).to_dict() == compute_beams(three_leaf_model, options).to_dict()

    def test_empty_model(self):
        result = compute_beams(Model(), {"distance": 1, "angle": 0, "scale": 0.5})
        assert result.paths == {} and result.models == {}

    def test_result_serialises_layers(self):
        model = Model(paths={"a": Arc(Point(0.0, 0.0), 10.0, 0.0, 180.0)})
        data = compute_beams(model, {"distance": 8, "angle": 0, "scale": 0.5}).to_dict()
        unit = data["models"]['paths["a"]']
        assert unit["layer"] == "0"
        assert set(unit["models"]) == {"outside", "inside"}


class TestValidation:

    @pytest.mark.parametrize("options", [
        {"distance": 1, "angle": 0, "scale": 0},
        {"distance": -1, "angle": 0, "scale": 0.5},
        {"distance": 1, "angle": 0},
    ])
    def test_bad_options(self, three_leaf_model, options):
        with pytest.raises(ValueError):
            compute_beams(three_leaf_model, options)

    def test_unknown_leaf(self):
        model = Model(paths={"ok": Line(Point(0, 0), Point(1, 0)), "bad": "not a path"})
        with pytest.raises(ValueError, match='paths\\["bad"\\]'):
            compute_beams(model, {"distance": 1, "angle": 0, "scale": 0.5})
