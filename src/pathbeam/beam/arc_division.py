from __future__ import annotations

import logging
from typing import Iterable, List

from pathbeam.model.geometry_primitives import Arc
from pathbeam.model.geometry_utils import is_between_arc_angles

logger = logging.getLogger(__name__)


def divide_arc(arc: Arc, division_angles: Iterable[float]) -> List[Arc]:
    """
    Split an arc at the given angles.

    Angles are applied in the order given. Each one re-scans the pieces produced
    so far and cuts the piece whose sweep strictly contains it; angles outside
    the arc, or on a piece boundary, are skipped.

    Args:
        arc: The arc to divide. It is not modified.
        division_angles: Cut angles in degrees.

    Returns:
        The pieces in sweep order, starting at the arc's start angle.
    """
    arcs = [arc.clone()]
    for angle in division_angles:
        index = next(
            (i for i, piece in enumerate(arcs) if is_between_arc_angles(angle, piece, exclusive=True)),
            -1
        )
        if index < 0:
            logger.debug(f"Division angle {angle:.6f} is outside the arc, skipped.")
            continue

        piece = arcs[index]
        new_arc = piece.clone()
        new_arc.start_angle = angle
        piece.end_angle = angle
        arcs.insert(index + 1, new_arc)

    return arcs
