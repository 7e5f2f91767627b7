from typing import Callable, NamedTuple

import jax.numpy as jnp
import pytest

from orbitax.config import set_dtype


class BenchmarkFunction(NamedTuple):
    """ODE with a known value at the end of an integration interval."""

    dynamics: Callable
    interval_start: float
    initial_state: jnp.ndarray
    interval_end: float
    final_state: jnp.ndarray


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    With pytest-xdist, each worker process starts with the default float32.
    This fixture ensures all tests get float64 unless they explicitly override
    it (e.g. test_config.py has its own autouse fixture that sets float32).
    """
    set_dtype(jnp.float64)


@pytest.fixture
def benchmark_functions():
    """Benchmark ODEs keyed by name.

    - ``zero``: ``dx/dt = 0``, state is unchanged.
    - ``constant``: ``dx/dt = 1``, state grows by the interval length.
    - ``exponential``: ``dx/dt = x`` forward over ``[0, 20]``.
    - ``inverse_exponential``: ``dx/dt = x`` backward from 4 to 0.
    - ``burden_faires``: ``dy/dt = y - t^2 + 1``, ``y(0) = 0.5``, with the
      RK4 value at ``t = 2`` tabulated by Burden & Faires, *Numerical
      Analysis*, Table 5.8.
    """
    return {
        "zero": BenchmarkFunction(
            dynamics=lambda t, x: jnp.zeros_like(x),
            interval_start=0.0,
            initial_state=jnp.full(10, 0.5),
            interval_end=2.0,
            final_state=jnp.full(10, 0.5),
        ),
        "constant": BenchmarkFunction(
            dynamics=lambda t, x: jnp.ones_like(x),
            interval_start=0.0,
            initial_state=jnp.full(3, 0.6),
            interval_end=3.0,
            final_state=jnp.full(3, 3.6),
        ),
        "exponential": BenchmarkFunction(
            dynamics=lambda t, x: x,
            interval_start=0.0,
            initial_state=jnp.array([0.7]),
            interval_end=20.0,
            final_state=jnp.array([0.7 * jnp.exp(20.0)]),
        ),
        "inverse_exponential": BenchmarkFunction(
            dynamics=lambda t, x: x,
            interval_start=4.0,
            initial_state=jnp.array([0.7 * jnp.exp(4.0)]),
            interval_end=0.0,
            final_state=jnp.array([0.7]),
        ),
        "burden_faires": BenchmarkFunction(
            dynamics=lambda t, x: x - t**2 + 1.0,
            interval_start=0.0,
            initial_state=jnp.array([0.5]),
            interval_end=2.0,
            final_state=jnp.array([5.3053630]),
        ),
    }
