"""
Pytest Configuration and Fixtures
==================================

Shared fixtures for the pathbeam test suite.
"""
import pytest

from pathbeam.model.geometry_primitives import Arc, Circle, Line, Model, Point, Vector


@pytest.fixture
def zero():
    return Vector(0.0, 0.0)


@pytest.fixture
def unit_circle_10():
    """Circle of radius 10 at the origin."""
    return Circle(center=Point(0.0, 0.0), radius=10.0)


@pytest.fixture
def upper_half_arc():
    """Upper half of the radius-10 circle at the origin."""
    return Arc(center=Point(0.0, 0.0), radius=10.0, start_angle=0.0, end_angle=180.0)


@pytest.fixture
def horizontal_line():
    return Line(start=Point(0.0, 0.0), end=Point(10.0, 0.0))


@pytest.fixture
def three_leaf_model():
    """Two top-level paths and one path inside an offset child model."""
    return Model(
        paths={
            "a": Line(start=Point(0.0, 0.0), end=Point(10.0, 0.0)),
            "b": Circle(center=Point(5.0, 5.0), radius=2.0),
        },
        models={
            "m": Model(
                paths={"c": Arc(center=Point(0.0, 0.0), radius=3.0, start_angle=0.0, end_angle=90.0)},
                origin=Point(20.0, 0.0),
            )
        },
    )
