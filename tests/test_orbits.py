"""Tests for the orbitax.orbits module.

Covers anomaly conversions (elliptic and hyperbolic, dispatchers,
domain errors), elapsed time ↔ mean anomaly change, mean motion ↔
semi-major axis, and the two-body Kepler helper formulas.
"""

import math

import jax.numpy as jnp
import pytest

from orbitax.constants import GM_EARTH, GRAVITATIONAL_CONSTANT, SIDEREAL_DAY
from orbitax.errors import InvalidEccentricityError, InvalidSemimajorAxisError, OrbitaxError
from orbitax.orbits import (
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

_ANOMALY_TOL = 1e-14  # relative, float64 closed-form benchmarks


def _deg(x):
    return x * math.pi / 180.0


# ──────────────────────────────────────────────
# True anomaly -> eccentric anomaly
# ──────────────────────────────────────────────


class TestTrueToEccentric:
    def test_elliptic(self):
        E = anomaly_true_to_elliptic_eccentric(_deg(82.16), 0.146)
        assert float(E) == pytest.approx(1.290237398010989, rel=_ANOMALY_TOL)

    def test_circular(self):
        E = anomaly_true_to_elliptic_eccentric(_deg(160.43), 0.0)
        assert float(E) == pytest.approx(2.800031718974503, rel=_ANOMALY_TOL)

    def test_hyperbolic(self):
        H = anomaly_true_to_hyperbolic_eccentric(0.5291, 3.0)
        assert float(H) == pytest.approx(0.3879, rel=1e-4)

    def test_degrees(self):
        E_deg = anomaly_true_to_elliptic_eccentric(82.16, 0.146, use_degrees=True)
        assert float(E_deg) == pytest.approx(math.degrees(1.290237398010989), rel=1e-13)

    def test_dispatch(self):
        assert float(anomaly_true_to_eccentric(_deg(82.16), 0.146)) == pytest.approx(
            1.290237398010989, rel=_ANOMALY_TOL
        )
        assert float(anomaly_true_to_eccentric(0.5291, 3.0)) == pytest.approx(0.3879, rel=1e-4)


class TestEccentricToTrue:
    def test_elliptic(self):
        nu = anomaly_elliptic_eccentric_to_true(_deg(239.45), 0.639)
        assert float(nu) % (2.0 * math.pi) == pytest.approx(3.665218735816221, rel=1e-13)

    def test_circular(self):
        nu = anomaly_elliptic_eccentric_to_true(_deg(-99.54), 0.0)
        assert float(nu) % (2.0 * math.pi) == pytest.approx(4.545884569744431, rel=1e-13)

    def test_hyperbolic(self):
        nu = anomaly_hyperbolic_eccentric_to_true(0.3879, 3.0)
        assert float(nu) == pytest.approx(0.5291, rel=1e-4)

    def test_dispatch(self):
        assert float(anomaly_eccentric_to_true(0.3879, 3.0)) == pytest.approx(0.5291, rel=1e-4)
        nu = anomaly_eccentric_to_true(_deg(239.45), 0.639)
        assert float(nu) % (2.0 * math.pi) == pytest.approx(3.665218735816221, rel=1e-13)

    @pytest.mark.parametrize("e", [0.0, 0.3, 0.9])
    @pytest.mark.parametrize("nu", [-2.5, 0.4, 1.7, 3.0])
    def test_elliptic_roundtrip(self, e, nu):
        nu_back = anomaly_eccentric_to_true(anomaly_true_to_eccentric(nu, e), e)
        assert float(nu_back) == pytest.approx(nu, abs=1e-12)

    @pytest.mark.parametrize("e", [1.2, 3.0])
    @pytest.mark.parametrize("nu", [-0.8, 0.1, 0.9])
    def test_hyperbolic_roundtrip(self, e, nu):
        nu_back = anomaly_eccentric_to_true(anomaly_true_to_eccentric(nu, e), e)
        assert float(nu_back) == pytest.approx(nu, abs=1e-12)


class TestEccentricToMean:
    def test_elliptic(self):
        M = anomaly_elliptic_eccentric_to_mean(_deg(176.09), 0.541)
        assert float(M) == pytest.approx(3.036459804491048, rel=_ANOMALY_TOL)

    def test_circular(self):
        M = anomaly_elliptic_eccentric_to_mean(_deg(320.12), 0.0)
        assert float(M) == pytest.approx(5.587148001484247, rel=_ANOMALY_TOL)

    def test_hyperbolic(self):
        M = anomaly_hyperbolic_eccentric_to_mean(1.6013761449, 2.4)
        assert float(M) == pytest.approx(_deg(235.4), rel=1e-8)

    def test_hyperbolic_degrees(self):
        M = anomaly_hyperbolic_eccentric_to_mean(math.degrees(1.6013761449), 2.4, use_degrees=True)
        assert float(M) == pytest.approx(235.4, rel=1e-8)

    def test_dispatch(self):
        assert float(anomaly_eccentric_to_mean(1.6013761449, 2.4)) == pytest.approx(
            _deg(235.4), rel=1e-8
        )
        assert float(anomaly_eccentric_to_mean(_deg(176.09), 0.541)) == pytest.approx(
            3.036459804491048, rel=_ANOMALY_TOL
        )

    def test_accepts_arrays(self):
        E = jnp.array([0.0, 1.0, 2.0])
        M = anomaly_elliptic_eccentric_to_mean(E, 0.1)
        assert jnp.allclose(M, E - 0.1 * jnp.sin(E))


class TestEccentricityDomain:
    @pytest.mark.parametrize(
        "func",
        [
            anomaly_true_to_elliptic_eccentric,
            anomaly_elliptic_eccentric_to_true,
            anomaly_elliptic_eccentric_to_mean,
        ],
    )
    @pytest.mark.parametrize("e", [1.0, 1.5, -0.1])
    def test_elliptic_rejects(self, func, e):
        with pytest.raises(InvalidEccentricityError, match="0 <= e < 1") as excinfo:
            func(0.5, e)
        assert excinfo.value.eccentricity == e
        assert excinfo.value.expected == "0 <= e < 1"

    @pytest.mark.parametrize(
        "func",
        [
            anomaly_true_to_hyperbolic_eccentric,
            anomaly_hyperbolic_eccentric_to_true,
            anomaly_hyperbolic_eccentric_to_mean,
        ],
    )
    @pytest.mark.parametrize("e", [0.5, 1.0])
    def test_hyperbolic_rejects(self, func, e):
        with pytest.raises(InvalidEccentricityError, match="e > 1"):
            func(0.5, e)

    @pytest.mark.parametrize(
        "func",
        [anomaly_true_to_eccentric, anomaly_eccentric_to_true, anomaly_eccentric_to_mean],
    )
    def test_dispatch_rejects_parabolic(self, func):
        with pytest.raises(InvalidEccentricityError, match="parabolic"):
            func(0.5, 1.0)

    @pytest.mark.parametrize(
        "func",
        [anomaly_true_to_eccentric, anomaly_eccentric_to_true, anomaly_eccentric_to_mean],
    )
    def test_dispatch_rejects_negative(self, func):
        with pytest.raises(InvalidEccentricityError, match="e >= 0"):
            func(0.5, -0.2)

    def test_error_hierarchy(self):
        """Domain errors are both library errors and ValueErrors."""
        with pytest.raises(OrbitaxError):
            anomaly_true_to_hyperbolic_eccentric(0.1, 0.2)
        with pytest.raises(ValueError):
            anomaly_true_to_hyperbolic_eccentric(0.1, 0.2)


# ──────────────────────────────────────────────
# Elapsed time <-> mean anomaly change
# ──────────────────────────────────────────────


class TestElapsedTime:
    _GM_KM = 398600.4415  # km^3/s^2
    _A_GEO_KM = 42165.3431351313

    def test_elliptic_mean_anomaly_change(self):
        dM = elapsed_time_to_elliptic_mean_anomaly_change(8640.0, self._GM_KM, self._A_GEO_KM)
        assert float(dM) == pytest.approx(2.580579656848906 - 1.950567148859647, rel=1e-13)

    def test_hyperbolic_mean_anomaly_change(self):
        dM = elapsed_time_to_hyperbolic_mean_anomaly_change(1000.0, 3.9859383624e14, -40000.0)
        assert float(dM) == pytest.approx(2.495601869539691e3, rel=1e-13)

    def test_elliptic_elapsed_time(self):
        dt = elliptic_mean_anomaly_change_to_elapsed_time(
            3.210592164838165 - 1.950567148859647, self._GM_KM, self._A_GEO_KM
        )
        assert float(dt) == pytest.approx(17280.0, rel=1e-12)

    def test_hyperbolic_elapsed_time(self):
        dt = hyperbolic_mean_anomaly_change_to_elapsed_time(
            2.495601869539691e3, 3.9859383624e14, -40000.0
        )
        assert float(dt) == pytest.approx(1000.0, rel=1e-13)

    def test_dispatch(self):
        assert float(elapsed_time_to_mean_anomaly_change(1000.0, 3.9859383624e14, -40000.0)) == (
            pytest.approx(2.495601869539691e3, rel=1e-13)
        )
        assert float(mean_anomaly_change_to_elapsed_time(
            3.210592164838165 - 1.950567148859647, self._GM_KM, self._A_GEO_KM
        )) == pytest.approx(17280.0, rel=1e-12)

    def test_dispatch_zero_semimajor_axis(self):
        assert float(elapsed_time_to_mean_anomaly_change(100.0, GM_EARTH, 0.0)) == 0.0
        assert float(mean_anomaly_change_to_elapsed_time(1.0, GM_EARTH, 0.0)) == 0.0

    def test_roundtrip(self):
        dM = elapsed_time_to_mean_anomaly_change(3600.0, GM_EARTH, 7000e3)
        assert float(mean_anomaly_change_to_elapsed_time(dM, GM_EARTH, 7000e3)) == pytest.approx(
            3600.0, rel=1e-13
        )

    @pytest.mark.parametrize(
        "func",
        [elapsed_time_to_elliptic_mean_anomaly_change, elliptic_mean_anomaly_change_to_elapsed_time],
    )
    def test_elliptic_rejects_negative_sma(self, func):
        with pytest.raises(InvalidSemimajorAxisError, match="a >= 0") as excinfo:
            func(1.0, GM_EARTH, -7000e3)
        assert excinfo.value.semimajor_axis == -7000e3

    @pytest.mark.parametrize(
        "func",
        [elapsed_time_to_hyperbolic_mean_anomaly_change, hyperbolic_mean_anomaly_change_to_elapsed_time],
    )
    def test_hyperbolic_rejects_positive_sma(self, func):
        with pytest.raises(InvalidSemimajorAxisError, match="a <= 0"):
            func(1.0, GM_EARTH, 7000e3)


# ──────────────────────────────────────────────
# Mean motion <-> semi-major axis
# ──────────────────────────────────────────────


class TestMeanMotion:
    def test_earth_geostationary(self):
        a = mean_motion_to_semimajor_axis(7.2921e-5, 5.9736e24 * 6.67428e-11)
        assert float(a) == pytest.approx(42164e3, rel=2e-4)

    def test_mars_areostationary(self):
        a = mean_motion_to_semimajor_axis(7.088218e-5, 42828e9)
        assert float(a) == pytest.approx(20427e3, rel=1e-4)

    def test_roundtrip(self):
        n = semimajor_axis_to_mean_motion(26600e3, GM_EARTH)
        assert float(mean_motion_to_semimajor_axis(n, GM_EARTH)) == pytest.approx(26600e3, rel=1e-13)

    def test_rejects_negative_sma(self):
        with pytest.raises(InvalidSemimajorAxisError):
            semimajor_axis_to_mean_motion(-1.0e7, GM_EARTH)


# ──────────────────────────────────────────────
# Kepler orbit helpers
# ──────────────────────────────────────────────


class TestKeplerHelpers:
    def test_geostationary_period(self):
        """A geostationary orbit takes one sidereal day."""
        period = kepler_orbital_period(4.2164e7, GM_EARTH, 1.0e3)
        assert float(period) == pytest.approx(SIDEREAL_DAY, rel=1e-4)

    def test_period_mean_motion_consistent(self):
        period = kepler_orbital_period(7000e3, GM_EARTH)
        n = kepler_mean_motion(7000e3, GM_EARTH)
        assert float(period * n) == pytest.approx(2.0 * math.pi, rel=1e-14)

    def test_orbiting_mass_shortens_period(self):
        light = kepler_orbital_period(3.84e8, GM_EARTH)
        heavy = kepler_orbital_period(3.84e8, GM_EARTH, 7.35e22)
        assert float(heavy) < float(light)
        assert float(kepler_mean_motion(3.84e8, GM_EARTH, 7.35e22)) == pytest.approx(
            math.sqrt((GRAVITATIONAL_CONSTANT * 7.35e22 + GM_EARTH) / 3.84e8**3), rel=1e-14
        )

    def test_angular_momentum(self):
        h = kepler_angular_momentum(7000e3, 0.1, GM_EARTH, 500.0)
        expected = 500.0 * math.sqrt(GM_EARTH * 7000e3 * (1.0 - 0.01))
        assert float(h) == pytest.approx(expected, rel=1e-14)

    def test_geostationary_mean_motion(self):
        gm = GRAVITATIONAL_CONSTANT * 5.9736e24
        assert float(kepler_mean_motion(4.2164e7, gm, 1.0e3)) == pytest.approx(7.2921e-5, rel=1e-5)

    def test_circular_angular_momentum(self):
        """For a circular orbit h = m r v."""
        gm = GRAVITATIONAL_CONSTANT * 5.9736e24
        h = kepler_angular_momentum(4.2164e7, 0.0, gm, 1.0e3)
        expected = 1.0e3 * 4.2164e7 * math.sqrt(gm / 4.2164e7)
        assert float(h) == pytest.approx(expected, rel=1e-14)

    def test_energy(self):
        energy = kepler_energy(7000e3, GM_EARTH, 500.0)
        assert float(energy) == pytest.approx(-500.0 * GM_EARTH / 14000e3, rel=1e-14)

    def test_synodic_period_earth_mars(self):
        assert float(synodic_period(365.256378, 686.95)) == pytest.approx(
            779.9746457736733, rel=1e-12
        )

    def test_synodic_period_symmetric(self):
        assert float(synodic_period(686.95, 365.256378)) == pytest.approx(
            float(synodic_period(365.256378, 686.95)), rel=1e-15
        )
