"""Keplerian orbital element ↔ inertial Cartesian state vector conversions.

Converts between osculating Keplerian orbital elements and inertial
Cartesian state vectors ``[x, y, z, vx, vy, vz]`` about a central body
with gravitational parameter ``gm``.

Element ordering:

| Index | Element                                   | Units         |
|-------|-------------------------------------------|---------------|
| 0     | *a*: semi-major axis (*p* if e ≈ 1)       | m             |
| 1     | *e*: eccentricity                         | dimensionless |
| 2     | *i*: inclination                          | rad           |
| 3     | *ω*: argument of periapsis                | rad           |
| 4     | *Ω*: longitude of the ascending node      | rad           |
| 5     | *ν*: true anomaly                         | rad           |

Conventions:

- Hyperbolic orbits carry a negative semi-major axis.
- For parabolic orbits (``|e - 1|`` within machine epsilon) element 0 is
  the semi-latus rectum instead of the semi-major axis, in both
  directions.
- Degenerate geometry is resolved by convention rather than by raising:
  circular orbits get ``ω = 0``, equatorial orbits get ``Ω = 0``, and
  the true anomaly is then measured from the node line or the x-axis.
- ``gm <= 0`` or a zero position/velocity vector is not validated and
  yields NaN/Inf.

Regime selection uses ``jnp.where``, so both functions work under
``jax.jit`` and ``jax.vmap``.  All inputs and outputs use SI base units
(metres, metres/second, radians).

References:
    1. D. Vallado, *Fundamentals of Astrodynamics and Applications
       (4th Ed.)*, 2010, Sec. 2.5–2.6.
    2. K. F. Wakker, *Astrodynamics I*, Delft University of Technology,
       2007.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitax.config import get_dtype, get_epsilon
from orbitax.utils import angle_between_vectors, wrap_to_two_pi

SEMI_MAJOR_AXIS_INDEX = 0
SEMI_LATUS_RECTUM_INDEX = 0
ECCENTRICITY_INDEX = 1
INCLINATION_INDEX = 2
ARGUMENT_OF_PERIAPSIS_INDEX = 3
LONGITUDE_OF_ASCENDING_NODE_INDEX = 4
TRUE_ANOMALY_INDEX = 5

X_POSITION_INDEX = 0
Y_POSITION_INDEX = 1
Z_POSITION_INDEX = 2
X_VELOCITY_INDEX = 3
Y_VELOCITY_INDEX = 4
Z_VELOCITY_INDEX = 5


def state_keplerian_to_cartesian(
    x_oe: ArrayLike,
    gm: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert Keplerian orbital elements to a Cartesian state vector.

    Position and velocity are first evaluated in the perifocal frame
    from the conic equation, then rotated into the inertial frame with
    the 3-1-3 Euler sequence ``(Ω, i, ω)``.

    Args:
        x_oe: Orbital elements ``[a, e, i, ω, Ω, ν]``.  Semi-major axis
            (or semi-latus rectum for a parabola) in *m*, angles in *rad*
            (or *deg* if ``use_degrees=True``).
        gm: Gravitational parameter of the central body. Units: *m^3/s^2*
        use_degrees: If ``True``, interpret angular elements as degrees.

    Returns:
        Cartesian state ``[x, y, z, vx, vy, vz]`` in *m* and *m/s*.

    Examples:
        ```python
        import jax.numpy as jnp
        from orbitax.constants import GM_EARTH, R_EARTH
        from orbitax.coordinates import state_keplerian_to_cartesian
        oe = jnp.array([R_EARTH + 500e3, 0.01, 0.9, 0.0, 0.0, 0.0])
        state = state_keplerian_to_cartesian(oe, GM_EARTH)
        ```
    """
    x_oe = jnp.asarray(x_oe, dtype=get_dtype())
    gm = jnp.asarray(gm, dtype=get_dtype())

    a = x_oe[SEMI_MAJOR_AXIS_INDEX]
    e = x_oe[ECCENTRICITY_INDEX]
    i = x_oe[INCLINATION_INDEX]
    omega = x_oe[ARGUMENT_OF_PERIAPSIS_INDEX]
    raan = x_oe[LONGITUDE_OF_ASCENDING_NODE_INDEX]
    nu = x_oe[TRUE_ANOMALY_INDEX]

    if use_degrees:
        i = jnp.deg2rad(i)
        omega = jnp.deg2rad(omega)
        raan = jnp.deg2rad(raan)
        nu = jnp.deg2rad(nu)

    cos_i = jnp.cos(i)
    sin_i = jnp.sin(i)
    cos_o = jnp.cos(omega)
    sin_o = jnp.sin(omega)
    cos_R = jnp.cos(raan)
    sin_R = jnp.sin(raan)
    cos_nu = jnp.cos(nu)
    sin_nu = jnp.sin(nu)

    # Parabolic orbits carry the semi-latus rectum in place of a
    p = jnp.where(jnp.abs(e - 1.0) > get_epsilon(), a * (1.0 - e * e), a)

    # Position and velocity in the perifocal frame
    r_pf = p / (1.0 + e * cos_nu)
    x_pf = r_pf * cos_nu
    y_pf = r_pf * sin_nu

    sqrt_gm_p = jnp.sqrt(gm / p)
    vx_pf = -sqrt_gm_p * sin_nu
    vy_pf = sqrt_gm_p * (e + cos_nu)

    # Perifocal -> inertial rotation, first and second columns
    P = jnp.array(
        [
            cos_R * cos_o - sin_R * sin_o * cos_i,
            sin_R * cos_o + cos_R * sin_o * cos_i,
            sin_o * sin_i,
        ]
    )

    Q = jnp.array(
        [
            -cos_R * sin_o - sin_R * cos_o * cos_i,
            -sin_R * sin_o + cos_R * cos_o * cos_i,
            cos_o * sin_i,
        ]
    )

    r_vec = x_pf * P + y_pf * Q
    v_vec = vx_pf * P + vy_pf * Q

    return jnp.concatenate([r_vec, v_vec])


def state_cartesian_to_keplerian(
    x_cart: ArrayLike,
    gm: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert a Cartesian state vector to Keplerian orbital elements.

    Derives the elements from the angular momentum vector ``h = r × v``,
    the eccentricity vector ``(v × h)/gm - r/|r|``, the ascending node
    vector ``ẑ × ĥ`` and the specific orbital energy.

    The orbit is treated as circular when ``e`` is below machine epsilon
    and as equatorial when the node vector norm is below machine epsilon.
    Quadrants are resolved as follows:

    - ω: ``2π - ω`` when the eccentricity vector points below the
      equatorial plane; for equatorial orbits ω is measured from the
      x-axis.
    - ν: ``2π - ν`` when ``r · v < 0``.  For circular equatorial orbits ν
      is measured from the x-axis; for circular inclined orbits it is
      measured from the node line and flipped when the z-velocity
      component is negative.

    Flipped angles are wrapped, so a zero angle never becomes ``2π``.

    Only an exactly parabolic state reports the semi-latus rectum.  A
    parabola rebuilt from Keplerian elements usually carries round-off in
    ``e`` larger than machine epsilon and zero energy, in which case the
    first element comes out as ``a = -inf``.

    Args:
        x_cart: Cartesian state ``[x, y, z, vx, vy, vz]`` in *m* and *m/s*.
        gm: Gravitational parameter of the central body. Units: *m^3/s^2*
        use_degrees: If ``True``, return angular elements in degrees.

    Returns:
        Orbital elements ``[a, e, i, ω, Ω, ν]``.  Semi-major axis (or
        semi-latus rectum for a parabola) in *m*, angles in *rad* (or
        *deg*), ω, Ω and ν in ``[0, 2π)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from orbitax.constants import GM_EARTH, R_EARTH
        from orbitax.coordinates import state_cartesian_to_keplerian
        v_circ = jnp.sqrt(GM_EARTH / R_EARTH)
        state = jnp.array([R_EARTH, 0.0, 0.0, 0.0, v_circ, 0.0])
        oe = state_cartesian_to_keplerian(state, GM_EARTH)
        ```
    """
    x_cart = jnp.asarray(x_cart, dtype=get_dtype())
    gm = jnp.asarray(gm, dtype=get_dtype())
    eps = get_epsilon()
    two_pi = 2.0 * jnp.pi

    r = x_cart[:3]
    v = x_cart[3:6]
    r_mag = jnp.linalg.norm(r)

    h = jnp.cross(r, v)
    h_mag = jnp.linalg.norm(h)

    # z × h/|h|, zero for an equatorial orbit
    n = jnp.cross(jnp.array([0.0, 0.0, 1.0], dtype=get_dtype()), h / h_mag)

    e_vec = jnp.cross(v, h) / gm - r / r_mag
    energy = 0.5 * jnp.dot(v, v) - gm / r_mag

    ecc = jnp.linalg.norm(e_vec)
    is_circular = ecc < eps
    is_equatorial = jnp.linalg.norm(n) < eps

    i = jnp.arccos(h[2] / h_mag)

    # Parabolic orbits report the semi-latus rectum
    p = h_mag * h_mag / gm
    a = jnp.where(jnp.abs(ecc - 1.0) > eps, gm / (-2.0 * energy), p)

    # Argument of periapsis
    omega_inclined = angle_between_vectors(e_vec, n)
    omega_inclined = wrap_to_two_pi(
        jnp.where(e_vec[2] < 0.0, two_pi - omega_inclined, omega_inclined)
    )
    omega_equatorial = wrap_to_two_pi(jnp.arctan2(e_vec[1], e_vec[0]))
    omega = jnp.where(
        is_circular,
        0.0,
        jnp.where(is_equatorial, omega_equatorial, omega_inclined),
    )

    # Longitude of the ascending node
    raan = jnp.where(is_equatorial, 0.0, wrap_to_two_pi(jnp.arctan2(n[1], n[0])))

    # True anomaly
    nu_elliptic = angle_between_vectors(r, e_vec)
    nu_elliptic = wrap_to_two_pi(
        jnp.where(jnp.dot(v, r) < 0.0, two_pi - nu_elliptic, nu_elliptic)
    )
    nu_circular_equatorial = wrap_to_two_pi(jnp.arctan2(r[1], r[0]))
    nu_circular_inclined = angle_between_vectors(r, n)
    nu_circular_inclined = wrap_to_two_pi(
        jnp.where(
            x_cart[Z_VELOCITY_INDEX] < 0.0,
            two_pi - nu_circular_inclined,
            nu_circular_inclined,
        )
    )
    nu = jnp.where(
        is_circular,
        jnp.where(is_equatorial, nu_circular_equatorial, nu_circular_inclined),
        nu_elliptic,
    )

    if use_degrees:
        i = jnp.rad2deg(i)
        omega = jnp.rad2deg(omega)
        raan = jnp.rad2deg(raan)
        nu = jnp.rad2deg(nu)

    return jnp.array([a, ecc, i, omega, raan, nu])
