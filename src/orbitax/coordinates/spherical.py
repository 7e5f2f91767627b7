"""Spherical coordinate transformations.

Converts between spherical coordinates ``[radius, zenith, azimuth]`` and
Cartesian coordinates ``[x, y, z]``.  The zenith angle is measured from
the +z axis, the azimuth angle from the +x axis towards +y.

All inputs and outputs use SI base units (metres, radians).
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitax.config import get_dtype, get_epsilon


def position_spherical_to_cartesian(
    x_sph: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert spherical coordinates to Cartesian coordinates.

    Args:
        x_sph: Spherical coordinates ``[r, zenith, azimuth]``.
            Radius in *m*, angles in *rad* (or *deg* if ``use_degrees=True``).
        use_degrees: If ``True``, interpret zenith and azimuth as degrees.

    Returns:
        jax.Array: Cartesian position ``[x, y, z]`` in *m*.

    Example:
        >>> import jax.numpy as jnp
        >>> from orbitax.coordinates import position_spherical_to_cartesian
        >>> x = position_spherical_to_cartesian(jnp.array([2.0, jnp.pi, jnp.pi]))
        >>> float(x[2])
        -2.0
    """
    x_sph = jnp.asarray(x_sph, dtype=get_dtype())

    r = x_sph[0]
    zenith = x_sph[1]
    azimuth = x_sph[2]

    if use_degrees:
        zenith = jnp.deg2rad(zenith)
        azimuth = jnp.deg2rad(azimuth)

    sin_zenith = jnp.sin(zenith)
    x = r * jnp.cos(azimuth) * sin_zenith
    y = r * jnp.sin(azimuth) * sin_zenith
    z = r * jnp.cos(zenith)

    return jnp.array([x, y, z])


def position_cartesian_to_spherical(
    x_cart: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert Cartesian coordinates to spherical coordinates.

    A point within machine epsilon of the origin maps to ``[r, 0, 0]``
    since both angles are undefined there.

    Args:
        x_cart: Cartesian position ``[x, y, z]`` in *m*.
        use_degrees: If ``True``, return zenith and azimuth in degrees.

    Returns:
        jax.Array: Spherical coordinates ``[r, zenith, azimuth]``.
            Zenith in ``[0, pi]``, azimuth in ``(-pi, pi]``.
    """
    x_cart = jnp.asarray(x_cart, dtype=get_dtype())

    r = jnp.linalg.norm(x_cart)
    at_origin = r < get_epsilon()

    # Guard the division so the unused branch does not produce NaN
    r_safe = jnp.where(at_origin, 1.0, r)
    zenith = jnp.where(at_origin, 0.0, jnp.arccos(x_cart[2] / r_safe))
    azimuth = jnp.where(at_origin, 0.0, jnp.arctan2(x_cart[1], x_cart[0]))

    if use_degrees:
        zenith = jnp.rad2deg(zenith)
        azimuth = jnp.rad2deg(azimuth)

    return jnp.array([r, zenith, azimuth])
