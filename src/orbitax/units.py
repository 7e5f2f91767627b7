"""Linear unit conversions for angles, distances, times, and a few
engineering quantities.

Every function is a single multiplication or division and works on
Python scalars and JAX arrays alike. Inputs are coerced to the configured
float dtype (see :func:`orbitax.config.set_dtype`).
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitax.config import get_dtype
from orbitax.constants import (
    ASTRONOMICAL_UNIT,
    JULIAN_DAY,
    JULIAN_YEAR_IN_DAYS,
    PI,
    SIDEREAL_DAY,
)


def _as(x: ArrayLike) -> Array:
    return jnp.asarray(x, dtype=get_dtype())


# ──────────────────────────────────────────────
# Angles
# ──────────────────────────────────────────────


def radians_to_degrees(angle: ArrayLike) -> Array:
    """Convert an angle from radians to degrees."""
    return _as(angle) / PI * 180.0


def degrees_to_radians(angle: ArrayLike) -> Array:
    """Convert an angle from degrees to radians."""
    return _as(angle) / 180.0 * PI


def degrees_to_arcminutes(angle: ArrayLike) -> Array:
    """Convert an angle from degrees to arcminutes."""
    return _as(angle) * 60.0


def arcminutes_to_arcseconds(angle: ArrayLike) -> Array:
    """Convert an angle from arcminutes to arcseconds."""
    return _as(angle) * 60.0


# ──────────────────────────────────────────────
# Distances
# ──────────────────────────────────────────────


def meters_to_kilometers(distance: ArrayLike) -> Array:
    """Convert a distance from metres to kilometres."""
    return _as(distance) / 1000.0


def kilometers_to_meters(distance: ArrayLike) -> Array:
    """Convert a distance from kilometres to metres."""
    return _as(distance) * 1000.0


def meters_to_astronomical_units(distance: ArrayLike) -> Array:
    """Convert a distance from metres to astronomical units.

    Uses :data:`orbitax.constants.ASTRONOMICAL_UNIT`.
    """
    return _as(distance) / ASTRONOMICAL_UNIT


def astronomical_units_to_meters(distance: ArrayLike) -> Array:
    """Convert a distance from astronomical units to metres."""
    return _as(distance) * ASTRONOMICAL_UNIT


def feet_to_meters(distance: ArrayLike) -> Array:
    """Convert a distance from international feet to metres."""
    return _as(distance) * 0.3048


# ──────────────────────────────────────────────
# Times
# ──────────────────────────────────────────────


def seconds_to_minutes(time: ArrayLike) -> Array:
    return _as(time) / 60.0


def minutes_to_seconds(time: ArrayLike) -> Array:
    return _as(time) * 60.0


def seconds_to_hours(time: ArrayLike) -> Array:
    return _as(time) / 3600.0


def hours_to_seconds(time: ArrayLike) -> Array:
    return _as(time) * 3600.0


def seconds_to_julian_days(time: ArrayLike) -> Array:
    """Convert a duration from seconds to Julian days of 86400 s."""
    return _as(time) / JULIAN_DAY


def julian_days_to_seconds(time: ArrayLike) -> Array:
    """Convert a duration from Julian days to seconds."""
    return _as(time) * JULIAN_DAY


def seconds_to_sidereal_days(time: ArrayLike) -> Array:
    """Convert a duration from seconds to sidereal days."""
    return _as(time) / SIDEREAL_DAY


def sidereal_days_to_seconds(time: ArrayLike) -> Array:
    """Convert a duration from sidereal days to seconds."""
    return _as(time) * SIDEREAL_DAY


def julian_days_to_julian_years(time: ArrayLike) -> Array:
    """Convert a duration from Julian days to Julian years of 365.25 days."""
    return _as(time) / JULIAN_YEAR_IN_DAYS


def julian_years_to_julian_days(time: ArrayLike) -> Array:
    """Convert a duration from Julian years to Julian days."""
    return _as(time) * JULIAN_YEAR_IN_DAYS


# ──────────────────────────────────────────────
# Temperature and pressure
# ──────────────────────────────────────────────


def rankine_to_kelvin(temperature: ArrayLike) -> Array:
    """Convert a temperature from degrees Rankine to Kelvin."""
    return _as(temperature) * 5.0 / 9.0


def pound_per_square_feet_to_pascal(pressure: ArrayLike) -> Array:
    """Convert a pressure from pounds per square foot to pascal."""
    return _as(pressure) * 47.880259
