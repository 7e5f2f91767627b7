"""Angle helpers.

``to_radians`` and ``from_radians`` back the ``use_degrees`` flag of the
conversion routines; ``wrap_to_two_pi`` normalizes angles into
``[0, 2pi)``. All are JAX-traceable.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def wrap_to_two_pi(angle: ArrayLike) -> Array:
    """Map an angle into ``[0, 2pi)``.

    Uses a floored modulo, ``angle - 2pi * floor(angle / 2pi)``, so
    negative angles land in the upper half of the range.

    Args:
        angle (ArrayLike): Angle in radians.

    Returns:
        Equivalent angle in ``[0, 2pi)``.
    """
    return jnp.mod(angle, 2.0 * jnp.pi)
