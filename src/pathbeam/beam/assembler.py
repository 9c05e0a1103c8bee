"""
Beam Assembler
==============
Entry point of the library: turns every leaf path of a model into a beam unit.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from pathbeam.beam.options import BeamOptions
from pathbeam.beam.unit import build_beam
from pathbeam.model.geometry_primitives import Arc, Circle, Line, Model
from pathbeam.model.geometry_utils import deg2rad, point_from_polar
from pathbeam.model.measure import model_extents, walk

logger = logging.getLogger(__name__)


def compute_beams(model: Model, options: Union[BeamOptions, Mapping[str, Any]]) -> Model:
    """
    Compute the beam decomposition of a model.

    Args:
        model: Source model. It is not modified.
        options: BeamOptions, or a mapping with 'distance', 'angle' (degrees) and 'scale'.

    Returns:
        A new model with one child model per leaf path, keyed by the path's route key
        and layered '0', '1', ... in traversal order.

    Raises:
        ValueError: On invalid options or a leaf that is not a line, arc or circle.
    """
    options = BeamOptions.coerce(options)

    leaves = list(walk(model))
    for leaf in leaves:
        if not isinstance(leaf.path, (Line, Arc, Circle)):
            raise ValueError(
                f"Unsupported path {leaf.route_key}: {type(leaf.path).__name__}; expected Line, Arc or Circle."
            )

    result = Model()
    extents = model_extents(model)
    if extents is None:
        logger.info("Model has no paths, nothing to beam.")
        return result

    # Scaling happens about the origin; shift it back so it looks anchored at the center
    center_large = extents.center
    center_small = center_large.scale(options.scale)
    center_offset = center_large - center_small
    beam_offset = point_from_polar(deg2rad(options.angle), options.distance)

    for layer, leaf in enumerate(leaves):
        unit = build_beam(leaf.path, leaf.offset, beam_offset, options.scale, center_offset)
        unit.layer = str(layer)
        result.models[leaf.route_key] = unit

    logger.info(f"Computed beams for {len(leaves)} paths.")
    return result
