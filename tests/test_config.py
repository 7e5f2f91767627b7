"""Tests for the orbitax.config module."""

import jax
import jax.numpy as jnp
import pytest

from orbitax import config
from orbitax.config import get_dtype, get_epsilon, set_dtype
from orbitax.coordinates import state_keplerian_to_cartesian
from orbitax.integrators import RungeKutta4Integrator
from orbitax.orbits import kepler_orbital_period


@pytest.fixture(autouse=True)
def reset_dtype():
    """Reset dtype to float32 before and after each test."""
    set_dtype(jnp.float32)
    yield
    set_dtype(jnp.float32)


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float32

    def test_set_float64(self):
        set_dtype(jnp.float64)
        assert get_dtype() == jnp.float64

    def test_set_float16(self):
        set_dtype(jnp.float16)
        assert get_dtype() == jnp.float16

    def test_set_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_dtype() == jnp.bfloat16

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float32")

    def test_float64_enables_x64(self):
        set_dtype(jnp.float64)
        assert jax.config.jax_enable_x64 is True


class TestEnvironmentDtype:
    def test_env_var_selects_dtype(self, monkeypatch):
        monkeypatch.setenv("ORBITAX_DTYPE", "Float64")
        config._dtype_from_environment()
        assert get_dtype() == jnp.float64

    def test_empty_env_var_keeps_dtype(self, monkeypatch):
        monkeypatch.setenv("ORBITAX_DTYPE", "")
        config._dtype_from_environment()
        assert get_dtype() == jnp.float32

    def test_invalid_env_var_raises(self, monkeypatch):
        monkeypatch.setenv("ORBITAX_DTYPE", "float128")
        with pytest.raises(ValueError, match="ORBITAX_DTYPE"):
            config._dtype_from_environment()
        assert get_dtype() == jnp.float32


class TestEpsilon:
    def test_float32_epsilon(self):
        assert get_epsilon() == pytest.approx(1.1920929e-07)

    def test_float64_epsilon(self):
        set_dtype(jnp.float64)
        assert get_epsilon() == pytest.approx(2.220446049250313e-16)

    def test_float16_epsilon(self):
        set_dtype(jnp.float16)
        assert get_epsilon() == pytest.approx(9.765625e-04)

    def test_bfloat16_epsilon(self):
        set_dtype(jnp.bfloat16)
        assert get_epsilon() == pytest.approx(7.8125e-03)

    def test_returns_python_float(self):
        assert isinstance(get_epsilon(), float)


class TestDtypeSwitchingOutputs:
    """Verify that output dtypes match the configured dtype."""

    def test_kepler_period_dtype_float64(self):
        set_dtype(jnp.float64)
        assert kepler_orbital_period(7000e3, 3.986004415e14).dtype == jnp.float64

    def test_keplerian_to_cartesian_dtype_float32(self):
        oe = jnp.array([7000e3, 0.001, 0.9, 0.5, 0.3, 0.1])
        state = state_keplerian_to_cartesian(oe, 3.986004415e14)
        assert state.dtype == jnp.float32

    def test_keplerian_to_cartesian_dtype_float64(self):
        set_dtype(jnp.float64)
        oe = jnp.array([7000e3, 0.001, 0.9, 0.5, 0.3, 0.1], dtype=jnp.float64)
        state = state_keplerian_to_cartesian(oe, 3.986004415e14)
        assert state.dtype == jnp.float64

    def test_integrator_state_dtype(self):
        set_dtype(jnp.float64)
        integrator = RungeKutta4Integrator(lambda t, x: -x, 0.0, [1.0, 2.0])
        assert integrator.current_state.dtype == jnp.float64
        integrator.perform_integration_step(0.1)
        assert integrator.current_state.dtype == jnp.float64
