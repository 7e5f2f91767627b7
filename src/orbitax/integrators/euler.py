"""Forward Euler integrator.

First-order explicit method: ``x_{n+1} = x_n + h f(t_n, x_n)``.  The
local truncation error is :math:`O(h^2)` and the global error
:math:`O(h)`, so it mostly serves as a baseline against the higher-order
schemes.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax.typing import ArrayLike

from orbitax.config import get_dtype
from orbitax.integrators._base import Dynamics, FixedStepIntegrator
from orbitax.integrators._types import StepResult


def euler_step(
    dynamics: Dynamics,
    t: ArrayLike,
    state: ArrayLike,
    dt: ArrayLike,
) -> StepResult:
    """Perform a single forward Euler step.

    Args:
        dynamics: ODE right-hand side function ``f(t, x) -> dx/dt``.
        t: Current time.
        state: Current state vector.
        dt: Timestep to take. May be negative for backward integration.

    Returns:
        StepResult: State at ``t + dt``; ``dt_used`` and ``dt_next`` equal
            ``dt``, ``error_estimate`` is 0.0.

    Examples:
        ```python
        import jax.numpy as jnp
        from orbitax.integrators import euler_step
        result = euler_step(lambda t, x: x, 0.0, jnp.array([1.0]), 0.1)
        result.state  # [1.1]
        ```
    """
    dtype = get_dtype()
    t = jnp.asarray(t, dtype=dtype)
    state = jnp.asarray(state, dtype=dtype)
    dt = jnp.asarray(dt, dtype=dtype)

    state_new = state + dt * dynamics(t, state)

    return StepResult(
        state=state_new,
        dt_used=dt,
        error_estimate=jnp.asarray(0.0, dtype=dtype),
        dt_next=dt,
    )


class EulerIntegrator(FixedStepIntegrator):
    """Stateful forward Euler integrator.

    Args:
        dynamics: State-derivative function ``f(t, x) -> dx/dt``.
        interval_start: Initial value of the independent variable.
        initial_state: State at ``interval_start``.
        jit: Whether to compile the step kernel with ``jax.jit``.

    Examples:
        ```python
        from orbitax.integrators import EulerIntegrator
        integrator = EulerIntegrator(lambda t, x: x, 0.0, 0.7)
        integrator.integrate_to(1.0, 1e-3)  # ~0.7 e
        ```
    """

    def __init__(
        self,
        dynamics: Dynamics,
        interval_start: float,
        initial_state: ArrayLike,
        jit: bool = True,
    ) -> None:
        super().__init__(dynamics, interval_start, initial_state, euler_step, jit=jit)
