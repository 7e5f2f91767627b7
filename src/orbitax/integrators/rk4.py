"""Classic 4th-order Runge-Kutta integrator (RK4).

Implements the standard four-stage, 4th-order explicit Runge-Kutta method
for numerical integration of ordinary differential equations. This is a
fixed-step method with no adaptive step-size control.

The Butcher tableau for RK4 is:

.. math::

    \\begin{array}{c|cccc}
    0   &     &     &     &   \\\\
    1/2 & 1/2 &     &     &   \\\\
    1/2 &  0  & 1/2 &     &   \\\\
    1   &  0  &  0  &  1  &   \\\\
    \\hline
        & 1/6 & 1/3 & 1/3 & 1/6
    \\end{array}

The method achieves 4th-order accuracy, meaning the local truncation error
is :math:`O(h^5)` and the global error is :math:`O(h^4)`.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax.typing import ArrayLike

from orbitax.config import get_dtype
from orbitax.integrators._base import Dynamics, FixedStepIntegrator
from orbitax.integrators._types import StepResult


def rk4_step(
    dynamics: Dynamics,
    t: ArrayLike,
    state: ArrayLike,
    dt: ArrayLike,
) -> StepResult:
    """Perform a single RK4 integration step.

    Advances the state from time ``t`` to ``t + dt`` using the classic
    4th-order Runge-Kutta method. Compatible with ``jax.jit`` and
    ``jax.vmap``.

    Args:
        dynamics: ODE right-hand side function ``f(t, x) -> dx/dt``.
        t: Current time.
        state: Current state vector.
        dt: Timestep to take. May be negative for backward integration.

    Returns:
        StepResult: Named tuple with fields:
            - ``state``: State at ``t + dt``.
            - ``dt_used``: Always equals ``dt``.
            - ``error_estimate``: Always 0.0 (no error estimate for
              fixed-step methods).
            - ``dt_next``: Always equals ``dt``.

    Examples:
        ```python
        import jax.numpy as jnp
        from orbitax.integrators import rk4_step
        def harmonic(t, x):
            return jnp.array([x[1], -x[0]])
        result = rk4_step(harmonic, 0.0, jnp.array([1.0, 0.0]), 0.01)
        result.state  # ~[cos(0.01), -sin(0.01)]
        ```
    """
    dtype = get_dtype()
    t = jnp.asarray(t, dtype=dtype)
    state = jnp.asarray(state, dtype=dtype)
    dt = jnp.asarray(dt, dtype=dtype)

    k1 = dt * dynamics(t, state)
    k2 = dt * dynamics(t + 0.5 * dt, state + 0.5 * k1)
    k3 = dt * dynamics(t + 0.5 * dt, state + 0.5 * k2)
    k4 = dt * dynamics(t + dt, state + k3)

    state_new = state + (k1 + 2.0 * k2 + 2.0 * k3 + k4) / 6.0

    return StepResult(
        state=state_new,
        dt_used=dt,
        error_estimate=jnp.asarray(0.0, dtype=dtype),
        dt_next=dt,
    )


class RungeKutta4Integrator(FixedStepIntegrator):
    """Stateful classic RK4 integrator.

    Args:
        dynamics: State-derivative function ``f(t, x) -> dx/dt``.
        interval_start: Initial value of the independent variable.
        initial_state: State at ``interval_start``.
        jit: Whether to compile the step kernel with ``jax.jit``.

    Examples:
        ```python
        import jax.numpy as jnp
        from orbitax.integrators import RungeKutta4Integrator
        def harmonic(t, x):
            return jnp.array([x[1], -x[0]])
        integrator = RungeKutta4Integrator(harmonic, 0.0, jnp.array([1.0, 0.0]))
        integrator.integrate_to(jnp.pi, 0.01)  # ~[-1, 0]
        ```
    """

    def __init__(
        self,
        dynamics: Dynamics,
        interval_start: float,
        initial_state: ArrayLike,
        jit: bool = True,
    ) -> None:
        super().__init__(dynamics, interval_start, initial_state, rk4_step, jit=jit)
