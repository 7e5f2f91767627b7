"""Exceptions raised by orbitax.

Domain violations in the anomaly and time conversions raise tagged
exceptions carrying the offending value and the domain the routine
supports, so callers can tell them apart from ordinary NaN propagation.
Both concrete errors also subclass ``ValueError``.
"""

from __future__ import annotations


class OrbitaxError(Exception):
    """Base class for all orbitax errors."""


class InvalidEccentricityError(OrbitaxError, ValueError):
    """Eccentricity outside the domain supported by a conversion.

    Attributes:
        eccentricity (float): The rejected eccentricity.
        expected (str): Human-readable description of the valid domain,
            e.g. ``"0 <= e < 1"``.
    """

    def __init__(self, eccentricity: float, expected: str) -> None:
        self.eccentricity = eccentricity
        self.expected = expected
        super().__init__(
            f"Eccentricity is invalid: e = {eccentricity!r}, expected {expected}"
        )


class InvalidSemimajorAxisError(OrbitaxError, ValueError):
    """Semi-major axis whose sign does not match the orbit regime.

    Elliptical orbits carry a positive semi-major axis and hyperbolic
    orbits a negative one.

    Attributes:
        semimajor_axis (float): The rejected semi-major axis.
        expected (str): Human-readable description of the valid domain.
    """

    def __init__(self, semimajor_axis: float, expected: str) -> None:
        self.semimajor_axis = semimajor_axis
        self.expected = expected
        super().__init__(
            f"Semi-major axis is invalid: a = {semimajor_axis!r}, expected {expected}"
        )
