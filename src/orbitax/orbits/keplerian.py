"""Keplerian anomaly, time, and mean-motion conversions.

This module provides functions for converting between true, eccentric
(elliptic *E* or hyperbolic *H*), and mean anomalies, between elapsed
time and mean anomaly change, and between mean motion and semi-major
axis, along with closed-form helpers for two-body Kepler orbits.

Regime-specific functions (``*_elliptic_*`` / ``*_hyperbolic_*``) check
the eccentricity or semi-major axis they are handed and raise
:class:`~orbitax.errors.InvalidEccentricityError` or
:class:`~orbitax.errors.InvalidSemimajorAxisError` when it falls outside
the regime.  The dispatchers pick the regime from the eccentricity (or
the sign of the semi-major axis).  Parabolic orbits are not supported by
the anomaly conversions.

Every regime-specific function validates its input, Kepler's equation
included: ``anomaly_elliptic_eccentric_to_mean`` rejects ``e >= 1`` even
though ``E - e sin(E)`` would evaluate for any ``e``.

Because the domain checks inspect concrete values, the validated
argument (``e`` or ``a``) must be a concrete scalar; the remaining
arguments may be traced.  Inputs are coerced to the configured float
dtype (see :func:`orbitax.config.set_dtype`).

References:
    1. K. F. Wakker, *Astrodynamics I*, Delft University of Technology,
       2007.
    2. D. Vallado, *Fundamentals of Astrodynamics and Applications
       (4th Ed.)*, 2010.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitax.config import get_dtype, get_epsilon
from orbitax.constants import GRAVITATIONAL_CONSTANT
from orbitax.errors import InvalidEccentricityError, InvalidSemimajorAxisError
from orbitax.utils import from_radians, to_radians

_ELLIPTIC_DOMAIN = "0 <= e < 1"
_HYPERBOLIC_DOMAIN = "e > 1"


def _check_elliptic(e: ArrayLike) -> None:
    value = float(e)
    if not 0.0 <= value < 1.0:
        raise InvalidEccentricityError(value, _ELLIPTIC_DOMAIN)


def _check_hyperbolic(e: ArrayLike) -> None:
    value = float(e)
    if not value > 1.0:
        raise InvalidEccentricityError(value, _HYPERBOLIC_DOMAIN)


def _is_elliptic(e: ArrayLike) -> bool:
    """Classify ``e`` for the dispatchers; negative and parabolic values raise."""
    value = float(e)
    if value < 0.0:
        raise InvalidEccentricityError(value, "e >= 0")
    if abs(value - 1.0) < get_epsilon():
        raise InvalidEccentricityError(value, "e != 1, parabolic orbits are not supported")
    return value < 1.0


# ──────────────────────────────────────────────
# True anomaly -> eccentric anomaly
# ──────────────────────────────────────────────


def anomaly_true_to_elliptic_eccentric(
    anm_true: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert true anomaly to elliptic eccentric anomaly.

    ``sin E`` and ``cos E`` are built from the true anomaly and combined
    with ``atan2``, so ``E`` lands in the same half-plane as ``ν``.

    Args:
        anm_true: True anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``0 <= e < 1``.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Elliptic eccentric anomaly in ``(-π, π]``. Units: *rad* or *deg*

    Raises:
        InvalidEccentricityError: If ``e`` is outside ``[0, 1)``.

    Examples:
        ```python
        from orbitax.orbits import anomaly_true_to_elliptic_eccentric
        E = anomaly_true_to_elliptic_eccentric(82.16, 0.146, use_degrees=True)
        ```
    """
    _check_elliptic(e)
    anm_true = jnp.asarray(anm_true, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    nu = to_radians(anm_true, use_degrees)
    cos_nu = jnp.cos(nu)
    denominator = 1.0 + e * cos_nu

    sin_E = jnp.sqrt(1.0 - e * e) * jnp.sin(nu) / denominator
    cos_E = (e + cos_nu) / denominator
    return from_radians(jnp.arctan2(sin_E, cos_E), use_degrees)


def anomaly_true_to_hyperbolic_eccentric(
    anm_true: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert true anomaly to hyperbolic eccentric anomaly.

    Args:
        anm_true: True anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``e > 1``.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Hyperbolic eccentric anomaly. Units: *rad* or *deg*

    Raises:
        InvalidEccentricityError: If ``e <= 1``.
    """
    _check_hyperbolic(e)
    anm_true = jnp.asarray(anm_true, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    nu = to_radians(anm_true, use_degrees)
    cos_nu = jnp.cos(nu)

    sinh_H = jnp.sqrt(e * e - 1.0) * jnp.sin(nu) / (1.0 + cos_nu)
    cosh_H = (cos_nu + e) / (1.0 + cos_nu)
    return from_radians(jnp.arctanh(sinh_H / cosh_H), use_degrees)


def anomaly_true_to_eccentric(
    anm_true: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert true anomaly to eccentric anomaly, elliptic or hyperbolic.

    Args:
        anm_true: True anomaly. Units: *rad* or *deg*
        e: Eccentricity, non-negative and not parabolic.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Eccentric anomaly ``E`` for ``e < 1``, ``H`` for ``e > 1``.
        Units: *rad* or *deg*

    Raises:
        InvalidEccentricityError: If ``e < 0`` or ``e`` is within machine
            epsilon of 1.
    """
    if _is_elliptic(e):
        return anomaly_true_to_elliptic_eccentric(anm_true, e, use_degrees)
    return anomaly_true_to_hyperbolic_eccentric(anm_true, e, use_degrees)


# ──────────────────────────────────────────────
# Eccentric anomaly -> true anomaly
# ──────────────────────────────────────────────


def anomaly_elliptic_eccentric_to_true(
    anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert elliptic eccentric anomaly to true anomaly.

    Args:
        anm_ecc: Elliptic eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``0 <= e < 1``.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        True anomaly in ``(-π, π]``. Units: *rad* or *deg*

    Raises:
        InvalidEccentricityError: If ``e`` is outside ``[0, 1)``.

    Examples:
        ```python
        from orbitax.orbits import anomaly_elliptic_eccentric_to_true
        nu = anomaly_elliptic_eccentric_to_true(239.45, 0.639, use_degrees=True)
        ```
    """
    _check_elliptic(e)
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    E = to_radians(anm_ecc, use_degrees)
    cos_E = jnp.cos(E)
    denominator = 1.0 - e * cos_E

    sin_nu = jnp.sqrt(1.0 - e * e) * jnp.sin(E) / denominator
    cos_nu = (cos_E - e) / denominator
    return from_radians(jnp.arctan2(sin_nu, cos_nu), use_degrees)


def anomaly_hyperbolic_eccentric_to_true(
    anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert hyperbolic eccentric anomaly to true anomaly.

    Args:
        anm_ecc: Hyperbolic eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``e > 1``.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        True anomaly. Units: *rad* or *deg*

    Raises:
        InvalidEccentricityError: If ``e <= 1``.
    """
    _check_hyperbolic(e)
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    H = to_radians(anm_ecc, use_degrees)
    cosh_H = jnp.cosh(H)
    denominator = e * cosh_H - 1.0

    sin_nu = jnp.sqrt(e * e - 1.0) * jnp.sinh(H) / denominator
    cos_nu = (e - cosh_H) / denominator
    return from_radians(jnp.arctan2(sin_nu, cos_nu), use_degrees)


def anomaly_eccentric_to_true(
    anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert eccentric anomaly (``E`` or ``H``) to true anomaly.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity, non-negative and not parabolic.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        True anomaly. Units: *rad* or *deg*

    Raises:
        InvalidEccentricityError: If ``e < 0`` or ``e`` is within machine
            epsilon of 1.
    """
    if _is_elliptic(e):
        return anomaly_elliptic_eccentric_to_true(anm_ecc, e, use_degrees)
    return anomaly_hyperbolic_eccentric_to_true(anm_ecc, e, use_degrees)


# ──────────────────────────────────────────────
# Eccentric anomaly -> mean anomaly
# ──────────────────────────────────────────────


def anomaly_elliptic_eccentric_to_mean(
    anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert elliptic eccentric anomaly to mean anomaly.

    Applies Kepler's equation: ``M = E - e * sin(E)``.

    Args:
        anm_ecc: Elliptic eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``0 <= e < 1``.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Mean anomaly. Units: *rad* or *deg*

    Raises:
        InvalidEccentricityError: If ``e`` is outside ``[0, 1)``.

    References:
        O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
        Applications*, 2012. Eq. 2.65.
    """
    _check_elliptic(e)
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    E = to_radians(anm_ecc, use_degrees)
    M = E - e * jnp.sin(E)
    return from_radians(M, use_degrees)


def anomaly_hyperbolic_eccentric_to_mean(
    anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert hyperbolic eccentric anomaly to mean anomaly.

    Applies the hyperbolic Kepler equation: ``M = e * sinh(H) - H``.

    Args:
        anm_ecc: Hyperbolic eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity, ``e > 1``.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Mean anomaly. Units: *rad* or *deg*

    Raises:
        InvalidEccentricityError: If ``e <= 1``.
    """
    _check_hyperbolic(e)
    anm_ecc = jnp.asarray(anm_ecc, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    H = to_radians(anm_ecc, use_degrees)
    M = e * jnp.sinh(H) - H
    return from_radians(M, use_degrees)


def anomaly_eccentric_to_mean(
    anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False
) -> Array:
    """Convert eccentric anomaly (``E`` or ``H``) to mean anomaly.

    Raises:
        InvalidEccentricityError: If ``e < 0`` or ``e`` is within machine
            epsilon of 1.
    """
    if _is_elliptic(e):
        return anomaly_elliptic_eccentric_to_mean(anm_ecc, e, use_degrees)
    return anomaly_hyperbolic_eccentric_to_mean(anm_ecc, e, use_degrees)


# ──────────────────────────────────────────────
# Elapsed time <-> mean anomaly change
# ──────────────────────────────────────────────


def elapsed_time_to_elliptic_mean_anomaly_change(
    dt: ArrayLike, gm: ArrayLike, a: ArrayLike
) -> Array:
    """Convert elapsed time to the mean anomaly change of an ellipse.

    ``ΔM = sqrt(gm / a^3) * Δt``

    Args:
        dt: Elapsed time. Units: *s*
        gm: Gravitational parameter. Units: *m^3/s^2*
        a: Semi-major axis, non-negative. Units: *m*

    Returns:
        Mean anomaly change. Units: *rad*

    Raises:
        InvalidSemimajorAxisError: If ``a < 0``.
    """
    if float(a) < 0.0:
        raise InvalidSemimajorAxisError(float(a), "a >= 0")
    dt = jnp.asarray(dt, dtype=get_dtype())
    gm = jnp.asarray(gm, dtype=get_dtype())
    a = jnp.asarray(a, dtype=get_dtype())
    return jnp.sqrt(gm / a**3) * dt


def elapsed_time_to_hyperbolic_mean_anomaly_change(
    dt: ArrayLike, gm: ArrayLike, a: ArrayLike
) -> Array:
    """Convert elapsed time to the mean anomaly change of a hyperbola.

    ``ΔM = sqrt(gm / (-a)^3) * Δt``

    Args:
        dt: Elapsed time. Units: *s*
        gm: Gravitational parameter. Units: *m^3/s^2*
        a: Semi-major axis, non-positive. Units: *m*

    Returns:
        Mean anomaly change. Units: *rad*

    Raises:
        InvalidSemimajorAxisError: If ``a > 0``.
    """
    if float(a) > 0.0:
        raise InvalidSemimajorAxisError(float(a), "a <= 0")
    dt = jnp.asarray(dt, dtype=get_dtype())
    gm = jnp.asarray(gm, dtype=get_dtype())
    a = jnp.asarray(a, dtype=get_dtype())
    return jnp.sqrt(gm / (-a) ** 3) * dt


def elapsed_time_to_mean_anomaly_change(
    dt: ArrayLike, gm: ArrayLike, a: ArrayLike
) -> Array:
    """Convert elapsed time to mean anomaly change for any non-parabolic orbit.

    The regime follows the sign of ``a``: positive for an ellipse,
    negative for a hyperbola.  ``a == 0`` yields a zero change.

    Args:
        dt: Elapsed time. Units: *s*
        gm: Gravitational parameter. Units: *m^3/s^2*
        a: Semi-major axis. Units: *m*

    Returns:
        Mean anomaly change. Units: *rad*
    """
    value = float(a)
    if value > 0.0:
        return elapsed_time_to_elliptic_mean_anomaly_change(dt, gm, a)
    if value < 0.0:
        return elapsed_time_to_hyperbolic_mean_anomaly_change(dt, gm, a)
    return jnp.zeros_like(jnp.asarray(dt, dtype=get_dtype()))


def elliptic_mean_anomaly_change_to_elapsed_time(
    dM: ArrayLike, gm: ArrayLike, a: ArrayLike
) -> Array:
    """Convert an elliptic mean anomaly change to elapsed time.

    ``Δt = ΔM / sqrt(gm / a^3)``

    Args:
        dM: Mean anomaly change. Units: *rad*
        gm: Gravitational parameter. Units: *m^3/s^2*
        a: Semi-major axis, non-negative. Units: *m*

    Returns:
        Elapsed time. Units: *s*

    Raises:
        InvalidSemimajorAxisError: If ``a < 0``.
    """
    if float(a) < 0.0:
        raise InvalidSemimajorAxisError(float(a), "a >= 0")
    dM = jnp.asarray(dM, dtype=get_dtype())
    gm = jnp.asarray(gm, dtype=get_dtype())
    a = jnp.asarray(a, dtype=get_dtype())
    return dM / jnp.sqrt(gm / a**3)


def hyperbolic_mean_anomaly_change_to_elapsed_time(
    dM: ArrayLike, gm: ArrayLike, a: ArrayLike
) -> Array:
    """Convert a hyperbolic mean anomaly change to elapsed time.

    ``Δt = ΔM / sqrt(gm / (-a)^3)``

    Args:
        dM: Mean anomaly change. Units: *rad*
        gm: Gravitational parameter. Units: *m^3/s^2*
        a: Semi-major axis, non-positive. Units: *m*

    Returns:
        Elapsed time. Units: *s*

    Raises:
        InvalidSemimajorAxisError: If ``a > 0``.
    """
    if float(a) > 0.0:
        raise InvalidSemimajorAxisError(float(a), "a <= 0")
    dM = jnp.asarray(dM, dtype=get_dtype())
    gm = jnp.asarray(gm, dtype=get_dtype())
    a = jnp.asarray(a, dtype=get_dtype())
    return dM / jnp.sqrt(gm / (-a) ** 3)


def mean_anomaly_change_to_elapsed_time(
    dM: ArrayLike, gm: ArrayLike, a: ArrayLike
) -> Array:
    """Convert a mean anomaly change to elapsed time for any non-parabolic orbit.

    Dispatches on the sign of ``a`` like
    :func:`elapsed_time_to_mean_anomaly_change`; ``a == 0`` yields zero.
    """
    value = float(a)
    if value > 0.0:
        return elliptic_mean_anomaly_change_to_elapsed_time(dM, gm, a)
    if value < 0.0:
        return hyperbolic_mean_anomaly_change_to_elapsed_time(dM, gm, a)
    return jnp.zeros_like(jnp.asarray(dM, dtype=get_dtype()))


# ──────────────────────────────────────────────
# Mean motion <-> semi-major axis
# ──────────────────────────────────────────────


def mean_motion_to_semimajor_axis(n: ArrayLike, gm: ArrayLike) -> Array:
    """Compute semi-major axis from mean motion.

    Args:
        n: Mean motion. Units: *rad/s*
        gm: Gravitational parameter. Units: *m^3/s^2*

    Returns:
        Semi-major axis. Units: *m*

    Examples:
        ```python
        from orbitax.constants import GM_EARTH
        from orbitax.orbits import mean_motion_to_semimajor_axis
        a = mean_motion_to_semimajor_axis(7.2921e-5, GM_EARTH)
        ```
    """
    n = jnp.asarray(n, dtype=get_dtype())
    gm = jnp.asarray(gm, dtype=get_dtype())
    return (gm / (n * n)) ** (1.0 / 3.0)


def semimajor_axis_to_mean_motion(a: ArrayLike, gm: ArrayLike) -> Array:
    """Compute the mean motion of an elliptical orbit.

    Args:
        a: Semi-major axis, non-negative. Units: *m*
        gm: Gravitational parameter. Units: *m^3/s^2*

    Returns:
        Mean motion. Units: *rad/s*

    Raises:
        InvalidSemimajorAxisError: If ``a < 0``.
    """
    if float(a) < 0.0:
        raise InvalidSemimajorAxisError(float(a), "a >= 0")
    a = jnp.asarray(a, dtype=get_dtype())
    gm = jnp.asarray(gm, dtype=get_dtype())
    return jnp.sqrt(gm / a**3)


# ──────────────────────────────────────────────
# Two-body Kepler orbit helpers
# ──────────────────────────────────────────────


def kepler_orbital_period(a: ArrayLike, gm: ArrayLike, mass: ArrayLike = 0.0) -> Array:
    """Compute the two-body orbital period.

    ``T = 2π sqrt(a^3 / (G m + gm))``, where ``m`` is the mass of the
    orbiting body and ``gm`` the gravitational parameter of the central
    body.

    Args:
        a: Semi-major axis. Units: *m*
        gm: Gravitational parameter of the central body. Units: *m^3/s^2*
        mass: Mass of the orbiting body. Units: *kg*

    Returns:
        Orbital period. Units: *s*
    """
    a = jnp.asarray(a, dtype=get_dtype())
    gm = jnp.asarray(gm, dtype=get_dtype())
    mass = jnp.asarray(mass, dtype=get_dtype())
    return 2.0 * jnp.pi * jnp.sqrt(a**3 / (GRAVITATIONAL_CONSTANT * mass + gm))


def kepler_angular_momentum(
    a: ArrayLike, e: ArrayLike, gm: ArrayLike, mass: ArrayLike
) -> Array:
    """Compute the orbital angular momentum ``m sqrt(gm a (1 - e^2))``.

    Returns:
        Angular momentum. Units: *kg m^2/s*
    """
    a = jnp.asarray(a, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    gm = jnp.asarray(gm, dtype=get_dtype())
    mass = jnp.asarray(mass, dtype=get_dtype())
    return mass * jnp.sqrt(gm * a * (1.0 - e * e))


def kepler_mean_motion(a: ArrayLike, gm: ArrayLike, mass: ArrayLike = 0.0) -> Array:
    """Compute the two-body mean motion ``sqrt((G m + gm) / a^3)``.

    Returns:
        Mean motion. Units: *rad/s*
    """
    a = jnp.asarray(a, dtype=get_dtype())
    gm = jnp.asarray(gm, dtype=get_dtype())
    mass = jnp.asarray(mass, dtype=get_dtype())
    return jnp.sqrt((GRAVITATIONAL_CONSTANT * mass + gm) / a**3)


def kepler_energy(a: ArrayLike, gm: ArrayLike, mass: ArrayLike) -> Array:
    """Compute the orbital energy ``-m gm / (2a)``.

    Returns:
        Orbital energy. Units: *J*
    """
    a = jnp.asarray(a, dtype=get_dtype())
    gm = jnp.asarray(gm, dtype=get_dtype())
    mass = jnp.asarray(mass, dtype=get_dtype())
    return -mass * gm / (2.0 * a)


def synodic_period(period_1: ArrayLike, period_2: ArrayLike) -> Array:
    """Compute the synodic period of two bodies orbiting the same primary.

    ``T_syn = 1 / |1/T1 - 1/T2|``

    Args:
        period_1: Orbital period of the first body.
        period_2: Orbital period of the second body, in the same units.

    Returns:
        Synodic period, in the units of the inputs.

    Examples:
        ```python
        from orbitax.orbits import synodic_period
        t_syn = synodic_period(365.256378, 686.95)  # Earth-Mars, days
        ```
    """
    period_1 = jnp.asarray(period_1, dtype=get_dtype())
    period_2 = jnp.asarray(period_2, dtype=get_dtype())
    return 1.0 / jnp.abs(1.0 / period_1 - 1.0 / period_2)
