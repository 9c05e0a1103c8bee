"""
Model traversal and measurement.

`walk` visits every leaf path of a model tree depth-first (paths before child
models, in insertion order), adding the origin of every model on the way,
the root included, to the offset of each path. `model_extents` uses the same
traversal to compute a bounding box.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

import numpy as np

from pathbeam.model.geometry_primitives import Point, Vector, Line, Arc, Circle, Model, Path
from pathbeam.model.geometry_utils import is_between_arc_angles

ZERO_OFFSET = Vector(0.0, 0.0)


@dataclass(frozen=True)
class WalkPath:
    """A leaf path met during a walk, with its placement in the tree."""
    path: Path
    offset: Vector
    route: tuple[str, ...]

    @property
    def route_key(self) -> str:
        return create_route_key(self.route)


@dataclass(frozen=True)
class Extents:
    """Axis-aligned bounding box."""
    low: Point
    high: Point

    @property
    def center(self) -> Point:
        return Point((self.low.x + self.high.x) / 2, (self.low.y + self.high.y) / 2)


def create_route_key(route: Sequence[str]) -> str:
    """
    Flatten a route into a single key, e.g. ('models', 'm', 'paths', 'p')
    becomes 'models["m"].paths["p"]'.
    """
    parts = []
    for i, element in enumerate(route):
        if i % 2 == 0:
            parts.append(("." if i > 0 else "") + element)
        else:
            parts.append(json.dumps([element], ensure_ascii=False))
    return "".join(parts)


def walk(model: Model) -> Iterator[WalkPath]:
    """Yield every leaf path of the model tree in traversal order."""
    yield from _walk_recursive(model, ZERO_OFFSET, ())


def _walk_recursive(model: Model, offset: Vector, route: tuple[str, ...]) -> Iterator[WalkPath]:
    if model.origin is not None:
        offset = offset + Vector(model.origin.x, model.origin.y)

    for path_id, path in model.paths.items():
        yield WalkPath(path=path, offset=offset, route=route + ("paths", path_id))

    for model_id, child in model.models.items():
        yield from _walk_recursive(child, offset, route + ("models", model_id))


def path_extreme_points(path: Path, offset: Vector = ZERO_OFFSET) -> List[Point]:
    """Points whose bounding box equals the bounding box of the path."""
    match path:
        case Line():
            points = [path.start, path.end]
        case Circle():
            r = abs(path.radius)
            points = [path.center + Vector(-r, -r), path.center + Vector(r, r)]
        case Arc():
            points = list(path.end_points())
            # Add the axis-aligned extremes that fall within the sweep
            points.extend(
                path.point_at(a) for a in (0.0, 90.0, 180.0, 270.0)
                if is_between_arc_angles(a, path, exclusive=False)
            )
        case _:
            raise ValueError(f"Unsupported path type: {type(path).__name__}")
    return [p + offset for p in points]


def model_extents(model: Model) -> Optional[Extents]:
    """
    Bounding box of every path in the model tree.

    Returns:
        The extents, or None for a model without paths.
    """
    points = [
        p.to_array()
        for walked in walk(model)
        for p in path_extreme_points(walked.path, walked.offset)
    ]
    if not points:
        return None

    coords = np.vstack(points)
    low = coords.min(axis=0)
    high = coords.max(axis=0)
    return Extents(low=Point(float(low[0]), float(low[1])), high=Point(float(high[0]), float(high[1])))
