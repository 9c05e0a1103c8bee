"""
Geometric Primitives for 2D drawings.

Paths (Line, Arc, Circle) are plain dataclasses. They are never changed in
place by the beam computation: callers `clone()` first and then chain the
in-place `move_relative()` / `scale()` operations on the copy.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any, ClassVar, Dict, Optional, Tuple, Union, TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class PathType(StrEnum):
    LINE = "line"
    ARC = "arc"
    CIRCLE = "circle"


@dataclass(frozen=True)
class Vector:
    """
    A vector in the drawing plane representing direction and magnitude.
    """
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def cross(self, other: Vector) -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class Point:
    """A point in the drawing plane."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def scale(self, factor: float) -> Point:
        """Scale the point about the coordinate origin."""
        return Point(self.x * factor, self.y * factor)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])

    def to_list(self) -> list[float]:
        return [self.x, self.y]

    @staticmethod
    def from_list(values: Any) -> Point:
        return Point(float(values[0]), float(values[1]))


@dataclass
class Line:
    """A straight segment between two points."""
    start: Point
    end: Point
    layer: Optional[str] = None

    type: ClassVar[PathType] = PathType.LINE

    def clone(self) -> Line:
        return replace(self)

    def move_relative(self, delta: Vector) -> Line:
        self.start = self.start + delta
        self.end = self.end + delta
        return self

    def scale(self, factor: float) -> Line:
        self.start = self.start.scale(factor)
        self.end = self.end.scale(factor)
        return self

    def end_points(self) -> Tuple[Point, Point]:
        return self.start, self.end

    def to_vector(self) -> Vector:
        return self.end - self.start

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"type": self.type.value, "origin": self.start.to_list(), "end": self.end.to_list()}
        if self.layer is not None:
            d["layer"] = self.layer
        return d


@dataclass
class Circle:
    """A full circle."""
    center: Point
    radius: float
    layer: Optional[str] = None

    type: ClassVar[PathType] = PathType.CIRCLE

    def clone(self) -> Circle:
        return replace(self)

    def move_relative(self, delta: Vector) -> Circle:
        self.center = self.center + delta
        return self

    def scale(self, factor: float) -> Circle:
        self.center = self.center.scale(factor)
        self.radius *= factor
        return self

    def as_circle(self) -> Circle:
        return Circle(center=self.center, radius=self.radius)

    def point_at(self, angle_deg: float) -> Point:
        """Point on the circle at a given angle (degrees, CCW from +X)."""
        angle_rad = math.radians(angle_deg)
        return Point(
            self.center.x + self.radius * math.cos(angle_rad),
            self.center.y + self.radius * math.sin(angle_rad)
        )

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"type": self.type.value, "origin": self.center.to_list(), "radius": self.radius}
        if self.layer is not None:
            d["layer"] = self.layer
        return d


@dataclass
class Arc:
    """
    A circular arc defined by its center, radius and two angles in degrees.
    The arc always sweeps counter-clockwise from `start_angle` to `end_angle`.
    """
    center: Point
    radius: float
    start_angle: float
    end_angle: float
    layer: Optional[str] = None

    type: ClassVar[PathType] = PathType.ARC

    def clone(self) -> Arc:
        return replace(self)

    def move_relative(self, delta: Vector) -> Arc:
        self.center = self.center + delta
        return self

    def scale(self, factor: float) -> Arc:
        self.center = self.center.scale(factor)
        self.radius *= factor
        return self

    def as_circle(self) -> Circle:
        """The underlying full circle of the arc."""
        return Circle(center=self.center, radius=self.radius)

    def point_at(self, angle_deg: float) -> Point:
        return self.as_circle().point_at(angle_deg)

    def end_points(self) -> Tuple[Point, Point]:
        return self.point_at(self.start_angle), self.point_at(self.end_angle)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "type": self.type.value,
            "origin": self.center.to_list(),
            "radius": self.radius,
            "startAngle": self.start_angle,
            "endAngle": self.end_angle,
        }
        if self.layer is not None:
            d["layer"] = self.layer
        return d


# Union type for path handling
Path = Union[Line, Arc, Circle]


def path_from_dict(data: Dict[str, Any]) -> Path:
    """Build a path from its maker.js style dictionary."""
    t = data.get("type")
    layer = data.get("layer")
    if t == PathType.LINE:
        return Line(start=Point.from_list(data["origin"]), end=Point.from_list(data["end"]), layer=layer)
    if t == PathType.ARC:
        return Arc(
            center=Point.from_list(data["origin"]),
            radius=float(data["radius"]),
            start_angle=float(data["startAngle"]),
            end_angle=float(data["endAngle"]),
            layer=layer
        )
    if t == PathType.CIRCLE:
        return Circle(center=Point.from_list(data["origin"]), radius=float(data["radius"]), layer=layer)
    raise ValueError(f"Unknown path type: {t!r}")


@dataclass
class Model:
    """
    A tree of named paths and named child models.
    `origin` offsets the model (and all its descendants) inside its parent, or
    inside the drawing for the root model.
    """
    paths: Dict[str, Path] = field(default_factory=dict)
    models: Dict[str, Model] = field(default_factory=dict)
    origin: Optional[Point] = None
    layer: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {}
        if self.paths:
            d["paths"] = {path_id: p.to_dict() for path_id, p in self.paths.items()}
        if self.models:
            d["models"] = {model_id: m.to_dict() for model_id, m in self.models.items()}
        if self.origin is not None:
            d["origin"] = self.origin.to_list()
        if self.layer is not None:
            d["layer"] = self.layer
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Model:
        origin = data.get("origin")
        return cls(
            paths={path_id: path_from_dict(p) for path_id, p in data.get("paths", {}).items()},
            models={model_id: Model.from_dict(m) for model_id, m in data.get("models", {}).items()},
            origin=Point.from_list(origin) if origin is not None else None,
            layer=data.get("layer")
        )
