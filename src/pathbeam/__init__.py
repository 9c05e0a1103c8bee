"""Beam (light-ray projection) decomposition of 2D line/arc/circle drawings."""
from pathbeam.beam import (
    BeamOptions,
    BeamResult,
    BeamShape,
    FlatBeam,
    SplitBeam,
    build_beam,
    compute_beams,
    divide_arc,
    occludes,
    outside_index,
)
from pathbeam.logging_config import install_null_handler, setup_logging
from pathbeam.model.geometry_primitives import Arc, Circle, Line, Model, PathType, Point, Vector

install_null_handler()

__all__ = [
    "Arc",
    "BeamOptions",
    "BeamResult",
    "BeamShape",
    "Circle",
    "FlatBeam",
    "Line",
    "Model",
    "PathType",
    "Point",
    "SplitBeam",
    "Vector",
    "build_beam",
    "compute_beams",
    "divide_arc",
    "occludes",
    "outside_index",
    "setup_logging",
]
