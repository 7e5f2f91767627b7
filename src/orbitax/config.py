"""Floating-point precision settings shared by every orbitax routine.

All array inputs are coerced to the dtype returned by ``get_dtype()``.
It starts as ``jnp.float32``, which runs on any accelerator, unless the
``ORBITAX_DTYPE`` environment variable names another supported dtype
(``float16``, ``bfloat16``, ``float32`` or ``float64``) at import time.
Selecting ``float64`` turns on ``jax_enable_x64``.

The dtype is read while JAX traces a function, so a compiled program
keeps the dtype that was active when it was traced.  Pick the precision
before the first ``jax.jit`` call.

``get_epsilon()`` is the tolerance behind the near-zero tests of the
element conversions: circular, equatorial and parabolic orbit detection.
"""

from __future__ import annotations

import os

import jax
import jax.numpy as jnp

_ENV_VAR = "ORBITAX_DTYPE"

_DTYPES_BY_NAME = {
    "float16": jnp.float16,
    "bfloat16": jnp.bfloat16,
    "float32": jnp.float32,
    "float64": jnp.float64,
}

_dtype = jnp.float32


def set_dtype(dtype) -> None:
    """Select the float dtype used by orbitax from now on.

    Eager calls see the new dtype at once.  Functions already compiled
    with ``jax.jit`` keep the dtype they were traced with.

    Args:
        dtype: ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32`` or
            ``jnp.float64``. The latter also enables ``jax_enable_x64``.

    Raises:
        ValueError: If *dtype* is not one of the supported float types.
    """
    global _dtype
    if dtype not in _DTYPES_BY_NAME.values():
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the active float dtype."""
    return _dtype


def get_epsilon() -> float:
    """Return the machine epsilon of the active float dtype.

    Approximate values:

    - ``float64``:  2.22e-16
    - ``float32``:  1.19e-7
    - ``bfloat16``: 7.81e-3
    - ``float16``:  9.77e-4

    Returns:
        float: Gap between 1.0 and the next representable number.
    """
    return float(jnp.finfo(_dtype).eps)


def _dtype_from_environment() -> None:
    name = os.environ.get(_ENV_VAR)
    if not name:
        return
    try:
        dtype = _DTYPES_BY_NAME[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unsupported {_ENV_VAR}={name!r}. Must be one of: "
            f"{', '.join(_DTYPES_BY_NAME)}"
        ) from None
    set_dtype(dtype)


_dtype_from_environment()
