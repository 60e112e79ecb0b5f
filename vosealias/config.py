"""Environment-variable configuration.

All variables are read at call time, so tests and long-running processes can
change them without re-importing the package.

``VOSEALIAS_SEED``
    Integer seed used by auto-seeded samplers (``AliasSampler.from_weights``).
``VOSEALIAS_DISABLE_CY``
    Force the pure-Python table builder even when the compiled kernel exists.
``VOSEALIAS_BIT_GENERATOR``
    Default NumPy bit generator (``pcg64``, ``pcg64dxsm``, ``philox``, ``sfc64``, ``mt19937``).
"""

from __future__ import annotations

import os

SEED_ENV = "VOSEALIAS_SEED"
DISABLE_CY_ENV = "VOSEALIAS_DISABLE_CY"
BIT_GENERATOR_ENV = "VOSEALIAS_BIT_GENERATOR"

DEFAULT_BIT_GENERATOR = "pcg64"


def _bool_env(key: str) -> bool:
    val = os.environ.get(key, "").strip().lower()
    return val not in ("", "0", "false", "no", "off")


def _int_env(key: str) -> int | None:
    raw = os.environ.get(key, "").strip()
    if raw == "":
        return None
    try:
        out = int(raw)
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got: {raw!r}") from e
    if out < 0:
        raise ValueError(f"{key} must be >= 0, got: {out}")
    return out


def env_seed() -> int | None:
    return _int_env(SEED_ENV)


def cy_disabled() -> bool:
    return _bool_env(DISABLE_CY_ENV)


def env_bit_generator() -> str:
    val = os.environ.get(BIT_GENERATOR_ENV, "").strip().lower()
    return val or DEFAULT_BIT_GENERATOR


def describe() -> dict[str, object]:
    """Effective configuration, as used by the doctor CLI."""
    return {
        SEED_ENV: env_seed(),
        DISABLE_CY_ENV: cy_disabled(),
        BIT_GENERATOR_ENV: env_bit_generator(),
    }
