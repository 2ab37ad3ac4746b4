# MIT License (see LICENSE)
"""
Contact detection between pairs of bodies.

This module turns a pair of bodies into a Contact (or None) by dispatching on
their shape variants:

- Circle vs Circle: distance between centers against the sum of radii.
- Circle vs Plane: perpendicular distance from the center to the line.
- Plane vs Circle: the Circle vs Plane contact seen from the plane's side.
- Plane vs Plane: never in contact (planes are static).

Sign convention:
    Contact.normal is the unit vector from body a toward body b and
    Contact.penetration is the overlap depth (positive = overlapping).
    The penetration vector (Contact.vector) is -normal * penetration: it
    points from b toward a and is the displacement that separates a from b.
    Every shape pair follows this convention.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass

import numpy as np

from ..constants import EPSILON
from ..types import Body, Circle, Plane
from ..util import norm, unit

logger = logging.getLogger(__name__)


@dataclass
class Contact:
    """
    Represents an overlap between two bodies.

    Attributes:
        a: First body of the pair.
        b: Second body of the pair.
        normal: Unit normal from a toward b.
        penetration: Overlap depth (>= -epsilon; positive = overlapping).
    """
    a: Body
    b: Body
    normal: np.ndarray
    penetration: float

    @property
    def vector(self) -> np.ndarray:
        """Penetration vector: direction × depth, moving a out of b."""
        return -self.normal * self.penetration


def circle_circle_contact(a: Body, b: Body, eps: float = EPSILON) -> Contact | None:
    """
    Detect contact between two circular bodies.

    Coincident centers have no defined normal; +x is used instead so two
    bodies spawned on top of each other still get pushed apart.

    Args:
        a: First body (must have Circle shape).
        b: Second body (must have Circle shape).
        eps: Overlap tolerance; gaps up to eps still count as contact.

    Returns:
        Contact object if circles touch or overlap, None otherwise.
    """
    d = b.position - a.position
    overlap = norm(d) - (a.shape.radius + b.shape.radius)

    if overlap > eps:
        return None

    return Contact(a=a, b=b, normal=unit(d), penetration=-overlap)


def circle_plane_contact(circle: Body, plane: Body, eps: float = EPSILON) -> Contact | None:
    """
    Detect contact between a circle and an infinite line.

    The line is two-sided: a circle is pushed back to whichever side its
    center is on. A center lying exactly on the line is pushed along the
    plane normal.

    Args:
        circle: Body with Circle shape.
        plane: Body with Plane shape.
        eps: Overlap tolerance.

    Returns:
        Contact (a=circle, b=plane) if touching or overlapping, None otherwise.
    """
    n = plane.shape.normal
    v = circle.position - plane.position
    p = n * float(np.dot(v, n))

    intersection = norm(p) - circle.shape.radius

    if intersection > eps:
        return None

    logger.debug("body %d touches plane %d (depth %.4g)", circle.id, plane.id, -intersection)
    # p points from the line toward the circle; the contact normal runs a -> b
    return Contact(a=circle, b=plane, normal=-unit(p, fallback=n), penetration=-intersection)


def detect_contact(a: Body, b: Body, eps: float = EPSILON) -> Contact | None:
    """
    Unified contact detection dispatcher over the shape variants.

    Args:
        a: First body.
        b: Second body.
        eps: Overlap tolerance.

    Returns:
        Contact with the (a, b) orientation of the arguments, or None.

    Raises:
        TypeError: If the shape pair is not supported.
    """
    sa, sb = a.shape, b.shape

    if isinstance(sa, Circle) and isinstance(sb, Circle):
        return circle_circle_contact(a, b, eps)

    if isinstance(sa, Circle) and isinstance(sb, Plane):
        return circle_plane_contact(a, b, eps)

    if isinstance(sa, Plane) and isinstance(sb, Circle):
        c = circle_plane_contact(b, a, eps)
        if c is None:
            return None
        return Contact(a=a, b=b, normal=-c.normal, penetration=c.penetration)

    if isinstance(sa, Plane) and isinstance(sb, Plane):
        return None

    raise TypeError(f"Unsupported shape pair: {type(sa).__name__}, {type(sb).__name__}")


def penetration_vector(a: Body, b: Body, eps: float = EPSILON) -> np.ndarray | None:
    """
    Penetration vector of a against b, or None when they do not touch.

    The vector points from b toward a with length equal to the overlap
    depth, i.e. it is the displacement that would separate a from b.
    """
    c = detect_contact(a, b, eps)
    return None if c is None else c.vector
