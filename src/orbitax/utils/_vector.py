"""Angles between vectors.

The cosine is computed from the dot product of the normalized vectors
and clamped into ``[-1, 1]`` so that ``arccos`` never sees a value
pushed just outside its domain by round-off.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orbitax.config import get_dtype


def cosine_of_angle_between_vectors(v0: ArrayLike, v1: ArrayLike) -> Array:
    """Compute the cosine of the angle between two vectors.

    Args:
        v0 (ArrayLike): First vector.
        v1 (ArrayLike): Second vector, same length as ``v0``.

    Returns:
        Cosine of the enclosed angle, clamped to ``[-1, 1]``.
    """
    v0 = jnp.asarray(v0, dtype=get_dtype())
    v1 = jnp.asarray(v1, dtype=get_dtype())

    cos_angle = jnp.dot(v0 / jnp.linalg.norm(v0), v1 / jnp.linalg.norm(v1))
    return jnp.clip(cos_angle, -1.0, 1.0)


def angle_between_vectors(v0: ArrayLike, v1: ArrayLike) -> Array:
    """Compute the angle between two vectors.

    Args:
        v0 (ArrayLike): First vector.
        v1 (ArrayLike): Second vector, same length as ``v0``.

    Returns:
        Enclosed angle in ``[0, pi]``. Units: *rad*
    """
    return jnp.arccos(cosine_of_angle_between_vectors(v0, v1))
