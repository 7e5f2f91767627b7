"""Cylindrical coordinate transformation.

Converts cylindrical coordinates ``[radius, azimuth, z]`` to Cartesian
coordinates ``[x, y, z]``.  The axial component passes through unchanged.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitax.config import get_dtype


def position_cylindrical_to_cartesian(
    x_cyl: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert cylindrical coordinates to Cartesian coordinates.

    Args:
        x_cyl: Cylindrical coordinates ``[r, azimuth, z]``.
            Radius and height in *m*, azimuth in *rad* (or *deg* if
            ``use_degrees=True``).
        use_degrees: If ``True``, interpret the azimuth as degrees.

    Returns:
        jax.Array: Cartesian position ``[x, y, z]`` in *m*.
    """
    x_cyl = jnp.asarray(x_cyl, dtype=get_dtype())

    r = x_cyl[0]
    azimuth = x_cyl[1]

    if use_degrees:
        azimuth = jnp.deg2rad(azimuth)

    return jnp.array([r * jnp.cos(azimuth), r * jnp.sin(azimuth), x_cyl[2]])
