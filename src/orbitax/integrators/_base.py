"""Stateful integrator interface and the fixed-step state machine.

:class:`NumericalIntegrator` defines the contract every integrator
fulfils: accessors for the current interval and state, a single-step
primitive, a one-level rollback, and :meth:`~NumericalIntegrator.integrate_to`,
which drives the single-step primitive up to a target interval and clips
the last step so the target is hit exactly.

:class:`FixedStepIntegrator` implements the bookkeeping shared by the
fixed-step schemes on top of a pure step kernel
``step(dynamics, t, state, dt) -> StepResult``.

The current interval is kept as a Python ``float``.  The end-of-interval
test in ``integrate_to`` compares it against the double-precision machine
epsilon whatever the configured state dtype.
"""

from __future__ import annotations

import abc
import logging
import math
import sys
from collections.abc import Callable
from functools import partial

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitax.config import get_dtype
from orbitax.integrators._types import StepResult

logger = logging.getLogger(__name__)

Dynamics = Callable[[ArrayLike, ArrayLike], Array]
StepKernel = Callable[[Dynamics, ArrayLike, ArrayLike, ArrayLike], StepResult]


class NumericalIntegrator(abc.ABC):
    """Base class for integrators of ``dx/dt = f(t, x)``.

    Args:
        dynamics: State-derivative function ``f(t, x) -> dx/dt``.
            Exceptions it raises propagate unchanged to the caller.
    """

    def __init__(self, dynamics: Dynamics) -> None:
        self._dynamics = dynamics

    @property
    def dynamics(self) -> Dynamics:
        """State-derivative function the integrator was built with."""
        return self._dynamics

    @property
    @abc.abstractmethod
    def current_state(self) -> Array:
        """State at :attr:`current_interval`."""

    @property
    @abc.abstractmethod
    def current_interval(self) -> float:
        """Current value of the independent variable."""

    @property
    @abc.abstractmethod
    def next_step_size(self) -> float:
        """Step size :meth:`integrate_to` uses for its next step."""

    @abc.abstractmethod
    def perform_integration_step(self, step_size: float) -> Array:
        """Advance the integrator by exactly one step.

        Caches the pre-step interval and state so that a following
        :meth:`rollback_to_previous_state` can restore them.

        Args:
            step_size: Step in the independent variable. May be negative.

        Returns:
            The new current state.
        """

    @abc.abstractmethod
    def rollback_to_previous_state(self) -> bool:
        """Undo the most recent integration step.

        Returns:
            ``True`` if the pre-step interval and state were restored,
            ``False`` (leaving the integrator untouched) if no step has
            been taken since construction or the last rollback.
        """

    def integrate_to(self, interval_end: float, initial_step_size: float) -> Array:
        """Integrate until the current interval equals ``interval_end``.

        The first step uses ``initial_step_size``; every later step uses
        :attr:`next_step_size`.  Once the remaining interval fits in one
        step (within a relative epsilon), the step is clipped to land
        exactly on ``interval_end``.  Works for forward (positive step)
        and backward (negative step) integration alike.

        Args:
            interval_end: Target value of the independent variable.
            initial_step_size: Size of the first step. Its sign must point
                from :attr:`current_interval` towards ``interval_end``.

        Returns:
            The state at ``interval_end``.

        Raises:
            ValueError: If the step is zero, or points away from
                ``interval_end``, while the target has not been reached.
        """
        interval_end = float(interval_end)
        step_size = float(initial_step_size)
        eps = sys.float_info.epsilon

        remaining = interval_end - self.current_interval
        at_end = remaining * math.copysign(1.0, step_size) <= eps
        if not at_end and (step_size == 0.0 or remaining * step_size < 0.0):
            raise ValueError(
                f"Step size {step_size} cannot reach interval end {interval_end} "
                f"from {self.current_interval}"
            )

        logger.debug(
            "Integrating from %s to %s with initial step %s",
            self.current_interval,
            interval_end,
            step_size,
        )

        steps = 0
        while not at_end:
            if abs(interval_end - self.current_interval) <= abs(step_size) * (1.0 + eps):
                step_size = interval_end - self.current_interval
                at_end = True

            self.perform_integration_step(step_size)
            steps += 1
            step_size = self.next_step_size

        logger.debug("Reached %s after %d steps", self.current_interval, steps)
        return self.current_state


class FixedStepIntegrator(NumericalIntegrator):
    """Integrator state machine for fixed-step schemes.

    Holds the current interval and state plus a one-slot rollback cache,
    and delegates the update itself to a pure step kernel.  The kernel is
    bound to ``dynamics`` and compiled with ``jax.jit`` unless ``jit`` is
    ``False``; pass ``jit=False`` for derivative functions that cannot be
    traced.

    Args:
        dynamics: State-derivative function ``f(t, x) -> dx/dt``.
        interval_start: Initial value of the independent variable.
        initial_state: State at ``interval_start``.
        step: Step kernel ``step(dynamics, t, state, dt) -> StepResult``.
        jit: Whether to compile the bound step kernel.
    """

    def __init__(
        self,
        dynamics: Dynamics,
        interval_start: float,
        initial_state: ArrayLike,
        step: StepKernel,
        jit: bool = True,
    ) -> None:
        super().__init__(dynamics)
        kernel = partial(step, dynamics)
        self._step = jax.jit(kernel) if jit else kernel
        self._current_interval = float(interval_start)
        self._current_state = jnp.asarray(initial_state, dtype=get_dtype())
        self._step_size = 0.0
        self._previous: tuple[float, Array] | None = None

    @property
    def current_state(self) -> Array:
        return self._current_state

    @property
    def current_interval(self) -> float:
        return self._current_interval

    @property
    def next_step_size(self) -> float:
        """Size of the last step taken; fixed-step schemes never adapt it."""
        return self._step_size

    def perform_integration_step(self, step_size: float) -> Array:
        step_size = float(step_size)
        result = self._step(self._current_interval, self._current_state, step_size)

        self._previous = (self._current_interval, self._current_state)
        self._current_state = result.state
        self._current_interval = self._current_interval + step_size
        self._step_size = step_size
        return self._current_state

    def rollback_to_previous_state(self) -> bool:
        if self._previous is None:
            logger.debug("Rollback refused: no step since the last rollback")
            return False

        self._current_interval, self._current_state = self._previous
        self._previous = None
        logger.debug("Rolled back to interval %s", self._current_interval)
        return True
