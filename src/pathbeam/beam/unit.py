"""
Beam Unit
=========
Builds the beam of one source path: the path itself ('base'), its projected
copy ('beam') and the rays joining their end points.

Arcs and circles whose projected copy has outer common tangents with the
original are cut at the tangent angles. Each piece gets its own flat beam and
the pieces are labelled 'outside' / 'inside' by the occlusion test.

Entry points:
    build_beam:        public, performs the tangency check and may split.
    _build_flat_beam:  internal, never splits; used for the split pieces.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from pathbeam.config import BASE_KEY, BEAM_KEY, ROUNDING_ACCURACY, ray_key
from pathbeam.beam.arc_division import divide_arc
from pathbeam.beam.occlusion import outside_index
from pathbeam.beam.results import BeamResult, FlatBeam, SplitBeam
from pathbeam.model.geometry_primitives import Arc, Circle, Line, Path, Vector
from pathbeam.model.geometry_utils import circle_tangent_angles, path_end_points

logger = logging.getLogger(__name__)


def _project(
    path: Path,
    path_offset: Vector,
    beam_offset: Vector,
    scale: float,
    scale_offset: Vector
) -> Tuple[Path, Path]:
    """Placed copy of the path and its scaled, displaced projection."""
    base = path.clone().move_relative(path_offset)
    beam = path.clone().move_relative(path_offset).scale(scale).move_relative(beam_offset + scale_offset)
    return base, beam


def _flat_beam(base: Path, beam: Path) -> FlatBeam:
    result = FlatBeam(paths={BASE_KEY: base, BEAM_KEY: beam})

    base_ends = path_end_points(base)
    beam_ends = path_end_points(beam)
    if base_ends is None or beam_ends is None:
        return result

    for i, (start, end) in enumerate(zip(base_ends, beam_ends)):
        if start.distance_to(end) <= ROUNDING_ACCURACY:
            logger.debug(f"Ray {i} has zero length, omitted.")
            continue
        result.paths[ray_key(i)] = Line(start=start, end=end)
    return result


def _build_flat_beam(
    path: Path,
    path_offset: Vector,
    beam_offset: Vector,
    scale: float,
    scale_offset: Vector
) -> FlatBeam:
    return _flat_beam(*_project(path, path_offset, beam_offset, scale, scale_offset))


def _tangent_pieces(path: Path, angles: Tuple[float, float]) -> List[Arc]:
    match path:
        case Circle():
            return [
                Arc(center=path.center, radius=path.radius, start_angle=angles[1], end_angle=angles[0], layer=path.layer),
                Arc(center=path.center, radius=path.radius, start_angle=angles[0], end_angle=angles[1], layer=path.layer),
            ]
        case Arc():
            return divide_arc(path, angles)
        case _:
            return []


def build_beam(
    path: Path,
    path_offset: Vector,
    beam_offset: Vector,
    scale: float,
    scale_offset: Vector
) -> BeamResult:
    """
    Build the beam of a single path.

    Args:
        path: Source line, arc or circle. It is not modified.
        path_offset: Offset of the path inside the source model.
        beam_offset: Displacement of the projected copy.
        scale: Scale factor of the projected copy (about the coordinate origin).
        scale_offset: Correction that moves the scaling anchor to the model center.

    Returns:
        A FlatBeam, or a SplitBeam when an arc or circle is cut at its tangent angles.

    Raises:
        ValueError: If the path is not a line, arc or circle.
    """
    match path:
        case Line():
            curved = False
        case Arc() | Circle():
            curved = True
        case _:
            raise ValueError(f"Cannot build a beam for {type(path).__name__}; expected Line, Arc or Circle.")

    base, beam = _project(path, path_offset, beam_offset, scale, scale_offset)

    angles: Optional[Tuple[float, float]] = None
    if curved:
        angles = circle_tangent_angles(base.as_circle(), beam.as_circle())
        if angles is None:
            logger.debug(f"No tangents between {path.type} and its projection.")

    if angles is None:
        return _flat_beam(base, beam)

    pieces = _tangent_pieces(path, angles)
    if len(pieces) < 2:
        return _flat_beam(base, beam)

    beams = [_build_flat_beam(piece, path_offset, beam_offset, scale, scale_offset) for piece in pieces]
    index = outside_index(beams[0], beams[1])

    if len(beams) > 2:
        # Wrap-around: the first and last pieces lie on the same side of the tangents
        beams[0].merge(beams[2])

    logger.debug(f"Split {path.type} into {len(pieces)} pieces, piece {index} outside.")
    return SplitBeam.from_pair(outside=beams[index], inside=beams[1 - index])
