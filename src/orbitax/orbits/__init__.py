"""Keplerian orbital mechanics functions.

This sub-module provides functions for:

- **Anomaly conversions**: true, eccentric (elliptic and hyperbolic), and
  mean anomalies, with regime-specific variants and eccentricity-based
  dispatchers.
- **Time conversions**: elapsed time ↔ mean anomaly change.
- **Mean motion**: mean motion ↔ semi-major axis.
- **Kepler orbit helpers**: period, angular momentum, mean motion, and
  energy of a two-body orbit, and the synodic period of two orbits.
"""

from .keplerian import (
    anomaly_eccentric_to_mean,
    anomaly_eccentric_to_true,
    anomaly_elliptic_eccentric_to_mean,
    anomaly_elliptic_eccentric_to_true,
    anomaly_hyperbolic_eccentric_to_mean,
    anomaly_hyperbolic_eccentric_to_true,
    anomaly_true_to_eccentric,
    anomaly_true_to_elliptic_eccentric,
    anomaly_true_to_hyperbolic_eccentric,
    elapsed_time_to_elliptic_mean_anomaly_change,
    elapsed_time_to_hyperbolic_mean_anomaly_change,
    elapsed_time_to_mean_anomaly_change,
    elliptic_mean_anomaly_change_to_elapsed_time,
    hyperbolic_mean_anomaly_change_to_elapsed_time,
    kepler_angular_momentum,
    kepler_energy,
    kepler_mean_motion,
    kepler_orbital_period,
    mean_anomaly_change_to_elapsed_time,
    mean_motion_to_semimajor_axis,
    semimajor_axis_to_mean_motion,
    synodic_period,
)

__all__ = [
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
]
