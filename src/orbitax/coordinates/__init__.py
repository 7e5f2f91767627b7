"""Coordinate transformations.

This sub-module provides functions for converting between common
coordinate representations used in astrodynamics:

- **Spherical**: ``[r, zenith, azimuth]`` ↔ Cartesian ``[x, y, z]``
- **Cylindrical**: ``[r, azimuth, z]`` → Cartesian ``[x, y, z]``
- **Keplerian**: orbital elements ``[a, e, i, ω, Ω, ν]`` ↔ inertial
  Cartesian state ``[x, y, z, vx, vy, vz]``
"""

from .cylindrical import position_cylindrical_to_cartesian
from .keplerian import (
    ARGUMENT_OF_PERIAPSIS_INDEX,
    ECCENTRICITY_INDEX,
    INCLINATION_INDEX,
    LONGITUDE_OF_ASCENDING_NODE_INDEX,
    SEMI_LATUS_RECTUM_INDEX,
    SEMI_MAJOR_AXIS_INDEX,
    TRUE_ANOMALY_INDEX,
    X_POSITION_INDEX,
    X_VELOCITY_INDEX,
    Y_POSITION_INDEX,
    Y_VELOCITY_INDEX,
    Z_POSITION_INDEX,
    Z_VELOCITY_INDEX,
    state_cartesian_to_keplerian,
    state_keplerian_to_cartesian,
)
from .spherical import (
    position_cartesian_to_spherical,
    position_spherical_to_cartesian,
)

__all__ = [
    "position_spherical_to_cartesian",
    "position_cartesian_to_spherical",
    "position_cylindrical_to_cartesian",
    "state_keplerian_to_cartesian",
    "state_cartesian_to_keplerian",
    "SEMI_MAJOR_AXIS_INDEX",
    "SEMI_LATUS_RECTUM_INDEX",
    "ECCENTRICITY_INDEX",
    "INCLINATION_INDEX",
    "ARGUMENT_OF_PERIAPSIS_INDEX",
    "LONGITUDE_OF_ASCENDING_NODE_INDEX",
    "TRUE_ANOMALY_INDEX",
    "X_POSITION_INDEX",
    "Y_POSITION_INDEX",
    "Z_POSITION_INDEX",
    "X_VELOCITY_INDEX",
    "Y_VELOCITY_INDEX",
    "Z_VELOCITY_INDEX",
]
