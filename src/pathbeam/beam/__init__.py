"""
The BEAM layer projects each path of a model and resolves which parts of the
projection are visible.
"""
from pathbeam.beam.arc_division import divide_arc
from pathbeam.beam.assembler import compute_beams
from pathbeam.beam.occlusion import occludes, outside_index
from pathbeam.beam.options import BeamOptions
from pathbeam.beam.results import BeamResult, BeamShape, FlatBeam, SplitBeam
from pathbeam.beam.unit import build_beam

__all__ = [
    "BeamOptions",
    "BeamResult",
    "BeamShape",
    "FlatBeam",
    "SplitBeam",
    "build_beam",
    "compute_beams",
    "divide_arc",
    "occludes",
    "outside_index",
]
