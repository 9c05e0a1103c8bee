"""
Occlusion tests between two pieces of a split beam.
"""
from __future__ import annotations

import logging

from pathbeam.config import BEAM_KEY, ray_key
from pathbeam.beam.results import FlatBeam
from pathbeam.model.geometry_utils import path_intersects

logger = logging.getLogger(__name__)


def occludes(occluder: FlatBeam, occludee: FlatBeam) -> bool:
    """
    True when the occluder's base path crosses the occludee's beam or rays.

    Touching contacts do not count: at a tangent split point the ray of the
    neighbouring piece runs along the common tangent and only touches the base.
    """
    base = occluder.base
    tests = [occludee.paths.get(key) for key in (BEAM_KEY, ray_key(0), ray_key(1))]
    return any(
        path_intersects(base, test, exclude_tangents=True)
        for test in tests if test is not None
    )


def outside_index(first: FlatBeam, second: FlatBeam) -> int:
    """
    Index (0 or 1) of the piece that becomes 'outside'.

    If neither piece occludes the other, the first one is taken.
    """
    if occludes(first, second):
        return 0
    if occludes(second, first):
        return 1
    # Unverified geometry: near-zero curvature or extreme scale ratios end up here
    logger.debug("Neither piece occludes the other, defaulting to the first as outside.")
    return 0
