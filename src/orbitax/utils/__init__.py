"""Shared utility functions for orbitax.

Provides angle conversion helpers and vector angle computations.
"""

from orbitax.utils._angle import from_radians, to_radians, wrap_to_two_pi
from orbitax.utils._vector import (
    angle_between_vectors,
    cosine_of_angle_between_vectors,
)

__all__ = [
    "angle_between_vectors",
    "cosine_of_angle_between_vectors",
    "from_radians",
    "to_radians",
    "wrap_to_two_pi",
]
