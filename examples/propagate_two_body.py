# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "orbitax"]
#
# [tool.uv.sources]
# orbitax = { path = ".." }
# ///
"""Propagate a two-body orbit with a fixed-step integrator.

Builds the initial Cartesian state from classical Keplerian elements,
integrates point-mass gravity for a number of orbital periods with the
stateful RK4 (or Euler) integrator, converts the final state back to
Keplerian elements and reports the drift against the initial elements.

Requires orbitax to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/propagate_two_body.py [OPTIONS]

Examples:
    # One revolution of a 7000 km LEO orbit at 10 s steps
    uv run examples/propagate_two_body.py

    # Molniya-like orbit for five revolutions
    uv run examples/propagate_two_body.py --sma 26600 --ecc 0.74 --inc 63.4 --revolutions 5

    # Compare against forward Euler
    uv run examples/propagate_two_body.py --method euler --timestep 1
"""

import enum
import logging
import time
from typing import Annotated

import jax.numpy as jnp
import typer

from orbitax import (
    GM_EARTH,
    EulerIntegrator,
    RungeKutta4Integrator,
    kepler_orbital_period,
    set_dtype,
    state_cartesian_to_keplerian,
    state_keplerian_to_cartesian,
)

set_dtype(jnp.float64)

_ELEMENT_NAMES = ("a [m]", "e", "i [deg]", "omega [deg]", "RAAN [deg]", "nu [deg]")


class Method(enum.StrEnum):
    rk4 = "rk4"
    euler = "euler"


def point_mass_gravity(t, x):
    r = x[:3]
    v = x[3:]
    a = -GM_EARTH * r / jnp.linalg.norm(r) ** 3
    return jnp.concatenate([v, a])


def main(
    sma: Annotated[float, typer.Option(help="Semi-major axis in km")] = 7000.0,
    ecc: Annotated[float, typer.Option(help="Eccentricity")] = 0.01,
    inc: Annotated[float, typer.Option(help="Inclination in degrees")] = 45.0,
    argp: Annotated[float, typer.Option(help="Argument of periapsis in degrees")] = 30.0,
    raan: Annotated[float, typer.Option(help="Longitude of ascending node in degrees")] = 60.0,
    anomaly: Annotated[float, typer.Option(help="True anomaly in degrees")] = 10.0,
    revolutions: Annotated[float, typer.Option(help="Number of orbital periods")] = 1.0,
    timestep: Annotated[float, typer.Option(help="Integration timestep in seconds")] = 10.0,
    method: Annotated[Method, typer.Option(help="Integration scheme")] = Method.rk4,
    verbose: Annotated[bool, typer.Option(help="Log integrator progress")] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    x_oe = jnp.array([sma * 1e3, ecc, inc, argp, raan, anomaly])
    x0 = state_keplerian_to_cartesian(x_oe, GM_EARTH, use_degrees=True)

    period = float(kepler_orbital_period(sma * 1e3, GM_EARTH))
    duration = revolutions * period
    print(f"Orbital period: {period:.3f} s, propagating {duration:.3f} s")

    integrator_cls = RungeKutta4Integrator if method is Method.rk4 else EulerIntegrator
    integrator = integrator_cls(point_mass_gravity, 0.0, x0)

    t0 = time.perf_counter()
    xf = integrator.integrate_to(duration, timestep)
    xf.block_until_ready()
    print(f"Integrated with {method.value} in {time.perf_counter() - t0:.2f}s")

    oe_final = state_cartesian_to_keplerian(xf, GM_EARTH, use_degrees=True)

    print(f"\n{'element':<12}{'initial':>20}{'final':>20}")
    for name, before, after in zip(_ELEMENT_NAMES, x_oe.tolist(), oe_final.tolist()):
        print(f"{name:<12}{before:>20.9f}{after:>20.9f}")

    print(f"\nPosition drift: {float(jnp.linalg.norm(xf[:3] - x0[:3])):.6e} m")


if __name__ == "__main__":
    typer.run(main)
