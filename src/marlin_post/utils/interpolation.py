import math

import cadquery as cq
import numpy as np

from marlin_post.groups import WorkPlane

# Arcs are clockwise/counter-clockwise when looking from the positive end of the normal
PLANE_NORMALS = {
    WorkPlane.XY: cq.Vector(0, 0, 1),
    WorkPlane.XZ: cq.Vector(0, 1, 0),
    WorkPlane.YZ: cq.Vector(1, 0, 0),
}

# Below this the start and end of an arc are considered the same point (full circle)
ANGULAR_EPSILON = 1e-9


def project_to_plane(v: cq.Vector, normal: cq.Vector) -> cq.Vector:
    return v - normal * v.dot(normal)


def arc_sweep(
    start: cq.Vector,
    center: cq.Vector,
    end: cq.Vector,
    normal: cq.Vector,
    clockwise: bool,
) -> float:
    """Signed angle swept from start to end, positive is counter-clockwise around normal"""
    u = project_to_plane(start - center, normal)
    v = project_to_plane(end - center, normal)
    angle = math.atan2(normal.dot(u.cross(v)), u.dot(v))

    ccw = angle % (2 * math.pi)
    if ccw < ANGULAR_EPSILON or 2 * math.pi - ccw < ANGULAR_EPSILON:
        # Start and end coincide, this is a full circle
        return -2 * math.pi if clockwise else 2 * math.pi

    if clockwise:
        return ccw - 2 * math.pi
    return ccw


def arc_segment_count(radius: float, sweep: float, tolerance: float) -> int:
    """Chords needed so that no chord is further than tolerance from the arc"""
    if radius <= tolerance:
        return 2
    max_angle = 2 * math.acos(1 - tolerance / radius)
    return max(math.ceil(abs(sweep) / max_angle), 2)


def chord_deviation(radius: float, sweep: float, count: int) -> float:
    """Sagitta of one chord when the sweep is split into count chords"""
    return radius * (1 - math.cos(abs(sweep) / count / 2))


def linearize_arc(
    start: cq.Vector,
    center: cq.Vector,
    end: cq.Vector,
    normal: cq.Vector,
    clockwise: bool,
    tolerance: float,
) -> list[cq.Vector]:
    """
    Break an arc into straight segments. Returns the end point of every segment, the last one
    being ``end``. Movement along the normal (helix) is interpolated linearly.
    """
    radial = project_to_plane(start - center, normal)
    radius = radial.Length
    sweep = arc_sweep(start, center, end, normal, clockwise)
    count = arc_segment_count(radius, sweep, tolerance)

    # The axis of the arc passes through center, height along the normal comes from start/end
    axis = project_to_plane(center, normal)
    start_height = start.dot(normal)
    end_height = end.dot(normal)
    binormal = normal.cross(radial)

    points = []
    for t in np.linspace(0, 1, count + 1)[1:]:
        angle = sweep * t
        height = start_height + (end_height - start_height) * t
        point = (
            axis
            + radial * math.cos(angle)
            + binormal * math.sin(angle)
            + normal * height
        )
        points.append(point)

    # Snap to the exact end point to avoid drifting by rounding
    points[-1] = cq.Vector(end.x, end.y, end.z)
    return points
