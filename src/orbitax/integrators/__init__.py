"""Numerical ODE integrators.

Provides fixed-step integrators implemented in JAX, both as pure step
kernels compatible with ``jax.jit`` and ``jax.vmap`` and as stateful
integrator objects that march towards a target interval.

Step kernels share a common interface::

    result = step_fn(dynamics, t, state, dt)

where ``dynamics(t, x) -> dx`` defines the ODE right-hand side, and the
result is a :class:`StepResult` named tuple.

- :func:`euler_step` / :class:`EulerIntegrator` -- forward Euler
- :func:`rk4_step` / :class:`RungeKutta4Integrator` -- classic 4th-order
  Runge-Kutta

Stateful integrators derive from :class:`NumericalIntegrator`, which
provides ``integrate_to`` on top of a single-step primitive and a
one-level rollback.
"""

from orbitax.integrators._base import FixedStepIntegrator, NumericalIntegrator
from orbitax.integrators._types import StepResult
from orbitax.integrators.euler import EulerIntegrator, euler_step
from orbitax.integrators.rk4 import RungeKutta4Integrator, rk4_step

__all__ = [
    "StepResult",
    "NumericalIntegrator",
    "FixedStepIntegrator",
    "EulerIntegrator",
    "RungeKutta4Integrator",
    "euler_step",
    "rk4_step",
]
