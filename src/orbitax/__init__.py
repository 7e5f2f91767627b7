"""
orbitax is an astrodynamics library implemented in JAX: orbital element
conversions, anomaly and time conversions, coordinate and unit
conversions, and fixed-step numerical integrators.
"""

from .constants import (
    PI,
    E,
    GOLDEN_RATIO,
    NAN,
    DEG2RAD,
    RAD2DEG,
    JULIAN_DAY,
    JULIAN_YEAR_IN_DAYS,
    JULIAN_YEAR,
    SIDEREAL_DAY,
    SIDEREAL_YEAR_IN_DAYS,
    SIDEREAL_YEAR,
    SPEED_OF_LIGHT,
    GRAVITATIONAL_CONSTANT,
    ASTRONOMICAL_UNIT,
    SPECIFIC_GAS_CONSTANT_AIR,
    R_EARTH,
    GM_EARTH,
    GM_SUN,
)

from .config import set_dtype, get_dtype, get_epsilon

from .errors import (
    OrbitaxError,
    InvalidEccentricityError,
    InvalidSemimajorAxisError,
)

from .utils import (
    angle_between_vectors,
    cosine_of_angle_between_vectors,
)

from .coordinates import (
    position_spherical_to_cartesian,
    position_cartesian_to_spherical,
    position_cylindrical_to_cartesian,
    state_keplerian_to_cartesian,
    state_cartesian_to_keplerian,
)

from .orbits import (
    anomaly_true_to_elliptic_eccentric,
    anomaly_true_to_hyperbolic_eccentric,
    anomaly_true_to_eccentric,
    anomaly_elliptic_eccentric_to_true,
    anomaly_hyperbolic_eccentric_to_true,
    anomaly_eccentric_to_true,
    anomaly_elliptic_eccentric_to_mean,
    anomaly_hyperbolic_eccentric_to_mean,
    anomaly_eccentric_to_mean,
    elapsed_time_to_elliptic_mean_anomaly_change,
    elapsed_time_to_hyperbolic_mean_anomaly_change,
    elapsed_time_to_mean_anomaly_change,
    elliptic_mean_anomaly_change_to_elapsed_time,
    hyperbolic_mean_anomaly_change_to_elapsed_time,
    mean_anomaly_change_to_elapsed_time,
    mean_motion_to_semimajor_axis,
    semimajor_axis_to_mean_motion,
    kepler_orbital_period,
    kepler_angular_momentum,
    kepler_mean_motion,
    kepler_energy,
    synodic_period,
)

from .integrators import (
    StepResult,
    NumericalIntegrator,
    FixedStepIntegrator,
    EulerIntegrator,
    RungeKutta4Integrator,
    euler_step,
    rk4_step,
)

__all__ = [
    # Constants
    "PI",
    "E",
    "GOLDEN_RATIO",
    "NAN",
    "DEG2RAD",
    "RAD2DEG",
    "JULIAN_DAY",
    "JULIAN_YEAR_IN_DAYS",
    "JULIAN_YEAR",
    "SIDEREAL_DAY",
    "SIDEREAL_YEAR_IN_DAYS",
    "SIDEREAL_YEAR",
    "SPEED_OF_LIGHT",
    "GRAVITATIONAL_CONSTANT",
    "ASTRONOMICAL_UNIT",
    "SPECIFIC_GAS_CONSTANT_AIR",
    "R_EARTH",
    "GM_EARTH",
    "GM_SUN",
    # Config
    "set_dtype",
    "get_dtype",
    "get_epsilon",
    # Errors
    "OrbitaxError",
    "InvalidEccentricityError",
    "InvalidSemimajorAxisError",
    # Utils
    "angle_between_vectors",
    "cosine_of_angle_between_vectors",
    # Coordinates
    "position_spherical_to_cartesian",
    "position_cartesian_to_spherical",
    "position_cylindrical_to_cartesian",
    "state_keplerian_to_cartesian",
    "state_cartesian_to_keplerian",
    # Orbits
    "anomaly_true_to_elliptic_eccentric",
    "anomaly_true_to_hyperbolic_eccentric",
    "anomaly_true_to_eccentric",
    "anomaly_elliptic_eccentric_to_true",
    "anomaly_hyperbolic_eccentric_to_true",
    "anomaly_eccentric_to_true",
    "anomaly_elliptic_eccentric_to_mean",
    "anomaly_hyperbolic_eccentric_to_mean",
    "anomaly_eccentric_to_mean",
    "elapsed_time_to_elliptic_mean_anomaly_change",
    "elapsed_time_to_hyperbolic_mean_anomaly_change",
    "elapsed_time_to_mean_anomaly_change",
    "elliptic_mean_anomaly_change_to_elapsed_time",
    "hyperbolic_mean_anomaly_change_to_elapsed_time",
    "mean_anomaly_change_to_elapsed_time",
    "mean_motion_to_semimajor_axis",
    "semimajor_axis_to_mean_motion",
    "kepler_orbital_period",
    "kepler_angular_momentum",
    "kepler_mean_motion",
    "kepler_energy",
    "synodic_period",
    # Integrators
    "StepResult",
    "NumericalIntegrator",
    "FixedStepIntegrator",
    "EulerIntegrator",
    "RungeKutta4Integrator",
    "euler_step",
    "rk4_step",
]
