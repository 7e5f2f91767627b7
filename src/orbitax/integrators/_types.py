"""Type definitions for numerical integrators.

Provides :class:`StepResult`, the output of every step kernel, containing
the new state, the step actually taken, an error estimate, and the
suggested next step.

``StepResult`` is a :class:`~typing.NamedTuple`, which JAX treats as a
pytree automatically, so step kernels returning it work with ``jax.jit``,
``jax.vmap``, and ``jax.lax`` control flow primitives.
"""

from __future__ import annotations

from typing import NamedTuple

from jax import Array


class StepResult(NamedTuple):
    """Result of a single integrator step.

    Returned by the step kernels (``euler_step``, ``rk4_step``). Both are
    fixed-step methods, so ``error_estimate`` is always 0.0 and
    ``dt_next`` equals ``dt_used``.

    Attributes:
        state: State vector at ``t + dt_used``.
        dt_used: Step actually taken, equal to the requested step.
        error_estimate: Always 0.0; fixed-step schemes carry no embedded
            error estimate.
        dt_next: Suggested next step, equal to ``dt_used``.
    """

    state: Array
    dt_used: Array
    error_estimate: Array
    dt_next: Array
