from __future__ import annotations

from math import sqrt, pi, ceil, floor, atan2, acos, degrees, cos, sin, hypot
from typing import Optional, Tuple

from pathbeam.config import ROUNDING_ACCURACY, TANGENT_TOLERANCE
from pathbeam.model.geometry_primitives import Point, Vector, Line, Arc, Circle, Path


def deg2rad(angle_deg: float) -> float:
    return angle_deg * pi / 180


def no_revolutions(angle_deg: float) -> float:
    """Strip whole revolutions from an angle, giving a value in [0, 360)."""
    revolutions = floor(angle_deg / 360)
    if revolutions == 0:
        return angle_deg
    return angle_deg - 360 * revolutions


def arc_end_angle(arc: Arc) -> float:
    """End angle of the arc unwrapped so that it is never below the start angle."""
    if arc.end_angle < arc.start_angle:
        revolutions = ceil((arc.start_angle - arc.end_angle) / 360)
        return revolutions * 360 + arc.end_angle
    return arc.end_angle


def arc_span(arc: Arc) -> float:
    """Counter-clockwise sweep of the arc in degrees."""
    span = arc_end_angle(arc) - arc.start_angle
    if round(span, 7) > 360:
        return no_revolutions(span)
    return span


def is_between(value: float, limit_a: float, limit_b: float, exclusive: bool, eps: float = ROUNDING_ACCURACY) -> bool:
    low, high = min(limit_a, limit_b), max(limit_a, limit_b)
    if exclusive:
        return low + eps < value < high - eps
    return low - eps <= value <= high + eps


def is_between_arc_angles(angle_deg: float, arc: Arc, exclusive: bool) -> bool:
    """
    Check whether an angle lies within the sweep of an arc.

    Args:
        angle_deg: The angle in question (degrees, any revolution).
        arc: The arc whose sweep is tested.
        exclusive: If True, the arc's own start and end angles do not count.

    Returns:
        True when the angle falls within the arc's sweep.
    """
    start = no_revolutions(arc.start_angle)
    end = start + arc_span(arc)
    angle_deg = no_revolutions(angle_deg)

    # The normalised angle may still sit one revolution before or after the sweep
    return (
        is_between(angle_deg, start, end, exclusive)
        or is_between(angle_deg, start + 360, end + 360, exclusive)
        or is_between(angle_deg, start - 360, end - 360, exclusive)
    )


def angle_of_point(center: Point, point: Point) -> float:
    """Angle (degrees, [0, 360)) of `point` as seen from `center`."""
    return no_revolutions(degrees(atan2(point.y - center.y, point.x - center.x)))


def point_from_polar(angle_rad: float, radius: float) -> Vector:
    return Vector(radius * cos(angle_rad), radius * sin(angle_rad))


def path_end_points(path: Path) -> Optional[Tuple[Point, Point]]:
    """Start and end point of a line or arc; circles have none."""
    match path:
        case Line() | Arc():
            return path.end_points()
        case _:
            return None


def line_circle_intersection(
    point: Point,
    vector: Vector,
    circle: Circle,
    *,
    as_segment: bool = False,
    exclude_tangents: bool = False,
    eps: float = ROUNDING_ACCURACY
    ) -> list[Point]:
    """
    Compute intersection point(s) between a circle and a 2D line or line segment.

    The line is given in parametric form: P(t) = P0 + t * v, where
    P0 is a point on the line and v is the (nonzero) direction vector.
    If `as_segment=True`, the result is restricted to the segment from P0 to (P0 + v),
    i.e., only solutions with 0 <= t <= 1 are returned.

    Args:
        point: A point P0 on the line (or the start of the segment if `as_segment=True`).
        vector: The line direction vector v. If its length is ~0, the function treats the
           "line" as the single point P0.
        circle: The circle with its center and radius.
        as_segment: If True, return only intersections whose parameter t lies in [0, 1] (within `eps`).
        exclude_tangents: If True, a line that only touches the circle yields no intersection.
        eps: Numerical tolerance for zero checks and inclusive interval tests.

    Returns:
        A list containing 0, 1, or 2 intersection points. For tangency a single point
        is returned, unless `exclude_tangents` is set.

    Notes:
        - Solves ||P0 + t*v - C||^2 = r^2, yielding a quadratic a t^2 + b t + c = 0.
        - Tangency is decided on r^2 - dist(C, line)^2 relative to r^2, so the test does not
          depend on the length of v.
    """
    x0, y0 = point.x, point.y
    vx, vy = vector.x, vector.y
    cx, cy = circle.center.x, circle.center.y
    r = circle.radius
    a = vx * vx + vy * vy

    # degenerate direction: treat as point-circle intersection
    if a < eps * eps:
        on_circle = abs(hypot(x0 - cx, y0 - cy) - abs(r)) <= eps
        return [point] if on_circle and not exclude_tangents else []

    b = 2.0 * (vx * (x0 - cx) + vy * (y0 - cy))
    c = (x0 - cx) ** 2 + (y0 - cy) ** 2 - r * r

    # r^2 minus the squared distance from the center to the line
    clearance = (b * b - 4.0 * a * c) / (4.0 * a)
    tolerance = TANGENT_TOLERANCE * max(r * r, 1.0)

    # No real intersection
    if clearance < -tolerance:
        return []

    t_mid = -b / (2.0 * a)

    # Tangency
    if abs(clearance) <= tolerance:
        if exclude_tangents:
            return []
        if as_segment and not (0.0 - eps <= t_mid <= 1.0 + eps):
            return []
        return [Point(x=x0 + t_mid * vx, y=y0 + t_mid * vy)]

    half_chord = sqrt(clearance / a)
    ts = [t_mid - half_chord, t_mid + half_chord]
    if as_segment:
        ts = [t for t in ts if 0.0 - eps <= t <= 1.0 + eps]

    return [Point(x=x0 + t * vx, y=y0 + t * vy) for t in ts]


def segment_intersection(line1: Line, line2: Line, eps: float = ROUNDING_ACCURACY) -> Optional[Point]:
    """
    Intersection of two line segments.
    Returns the point if they cross or touch in a single point, otherwise None
    (parallel / collinear segments are not reported).
    """
    r = line1.to_vector()
    s = line2.to_vector()

    rxs = r.cross(s)
    if abs(rxs) <= TANGENT_TOLERANCE * r.magnitude * s.magnitude:
        # parallel (including possibly collinear)
        return None

    q_p = line2.start - line1.start
    t = q_p.cross(s) / rxs  # parameter on line1
    u = q_p.cross(r) / rxs  # parameter on line2

    # eps is an absolute distance; convert to each segment's parameter space
    t_eps = eps / r.magnitude
    u_eps = eps / s.magnitude
    if -t_eps <= t <= 1.0 + t_eps and -u_eps <= u <= 1.0 + u_eps:
        return line1.start + r * t
    return None


def circle_circle_intersection(
    circle1: Circle,
    circle2: Circle,
    *,
    exclude_tangents: bool = False
    ) -> list[Point]:
    """
    Intersection point(s) of two full circles.

    Args:
        circle1: First circle.
        circle2: Second circle.
        exclude_tangents: If True, circles that only touch yield no intersection.

    Returns:
        0, 1 (touching) or 2 points. Concentric circles yield no points.
    """
    r1, r2 = abs(circle1.radius), abs(circle2.radius)
    connect = circle2.center - circle1.center
    d = connect.magnitude
    if d < ROUNDING_ACCURACY:
        return []

    # distance from circle1's center to the chord, along the connecting line
    a = (d * d + r1 * r1 - r2 * r2) / (2.0 * d)
    clearance = r1 * r1 - a * a
    tolerance = TANGENT_TOLERANCE * max(r1 * r1, r2 * r2, 1.0)

    if clearance < -tolerance:
        return []

    u = connect * (1.0 / d)
    mid = circle1.center + u * a

    if abs(clearance) <= tolerance:
        return [] if exclude_tangents else [mid]

    h = sqrt(clearance)
    perp = Vector(-u.y, u.x)
    return [mid + perp * h, mid - perp * h]


def circle_tangent_angles(a: Circle, b: Circle) -> Optional[Tuple[float, float]]:
    """
    Angles (degrees) at which the outer common tangents touch circle `a`.

    The outer tangents touch both circles at the same angle, since their
    normals are parallel. Solving n . (Cb - Ca) = ra - rb for the unit
    normal n gives the two angles connect_angle +/- acos((ra - rb) / d).

    Args:
        a: The circle the angles are measured on.
        b: The other circle.

    Returns:
        A pair of angles in [0, 360), or None when either circle encloses the
        other (no outer tangents exist).
    """
    distance = a.center.distance_to(b.center)

    # no tangents if either circle encompasses the other
    if a.radius >= distance + b.radius or b.radius >= distance + a.radius:
        return None

    ratio = max(-1.0, min(1.0, (a.radius - b.radius) / distance))
    offset = degrees(acos(ratio))
    connect_angle = degrees(atan2(b.center.y - a.center.y, b.center.x - a.center.x))

    return no_revolutions(connect_angle + offset), no_revolutions(connect_angle - offset)


def _on_path(path: Path, point: Point) -> bool:
    """Whether a point already known to lie on the path's circle is within its sweep."""
    if isinstance(path, Arc):
        return is_between_arc_angles(angle_of_point(path.center, point), path, exclusive=False)
    return True


def path_intersection(path1: Path, path2: Path, *, exclude_tangents: bool = False) -> list[Point]:
    """
    Intersection points between any two of line, arc and circle.

    Segment and arc end points are inclusive. With `exclude_tangents`, contacts
    where the paths only touch are not reported.
    """
    match path1, path2:
        case Line(), Line():
            point = segment_intersection(path1, path2)
            return [point] if point is not None else []
        case Line(), (Arc() | Circle()):
            points = line_circle_intersection(
                path1.start, path1.to_vector(), path2.as_circle(),
                as_segment=True, exclude_tangents=exclude_tangents
            )
            return [p for p in points if _on_path(path2, p)]
        case (Arc() | Circle()), Line():
            return path_intersection(path2, path1, exclude_tangents=exclude_tangents)
        case (Arc() | Circle()), (Arc() | Circle()):
            points = circle_circle_intersection(
                path1.as_circle(), path2.as_circle(), exclude_tangents=exclude_tangents
            )
            return [p for p in points if _on_path(path1, p) and _on_path(path2, p)]
        case _:
            raise ValueError(f"Cannot intersect {type(path1).__name__} with {type(path2).__name__}.")


def path_intersects(path1: Path, path2: Path, *, exclude_tangents: bool = False) -> bool:
    return bool(path_intersection(path1, path2, exclude_tangents=exclude_tangents))
