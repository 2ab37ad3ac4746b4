# MIT License (see LICENSE)
"""
Collision detection and resolution subsystem.

This subpackage provides:
    - Contact: Shape-pair dispatch (circle-circle, circle-plane) producing
      a normal, a depth and the penetration vector.
    - Response: Positional split plus 1D elastic exchange along the normal.
    - Boundary: Containment of bodies inside the rectangular arena.

Typical usage:
    from ball_sim.collision import detect_contact, resolve

    contact = detect_contact(a, b)
    if contact:
        resolve(a, b, contact.vector, normal=contact.normal)
"""
from .contact import (
    Contact,
    circle_circle_contact,
    circle_plane_contact,
    detect_contact,
    penetration_vector,
)
from .response import Response, compute_response, apply_response, resolve, wake_if_struck
from .boundary import contain

__all__ = [
    # Contact
    "Contact",
    "circle_circle_contact",
    "circle_plane_contact",
    "detect_contact",
    "penetration_vector",
    # Response
    "Response",
    "compute_response",
    "apply_response",
    "resolve",
    "wake_if_struck",
    # Boundary
    "contain",
]
