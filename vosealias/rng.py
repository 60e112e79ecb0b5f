from __future__ import annotations

import numpy as np

from .config import env_bit_generator

_BIT_GENERATORS = {
    "pcg64": np.random.PCG64,
    "pcg64dxsm": np.random.PCG64DXSM,
    "philox": np.random.Philox,
    "sfc64": np.random.SFC64,
    "mt19937": np.random.MT19937,
}


def fresh_seed() -> int:
    """Draw a new integer seed from OS entropy."""
    return int(np.random.SeedSequence().entropy)


def check_seed(seed) -> int:
    if isinstance(seed, (bool, np.bool_)) or not isinstance(seed, (int, np.integer)):
        raise ValueError(f"seed must be an integer, got: {seed!r}")
    seed = int(seed)
    if seed < 0:
        raise ValueError(f"seed must be >= 0, got: {seed}")
    return seed


def make_generator(seed: int, *, bit_generator: str | None = None) -> np.random.Generator:
    """Build a private ``numpy.random.Generator`` from an integer seed.

    ``bit_generator`` defaults to ``VOSEALIAS_BIT_GENERATOR`` (``pcg64`` when unset).
    """

    name = str(bit_generator if bit_generator is not None else env_bit_generator()).strip().lower()
    try:
        cls = _BIT_GENERATORS[name]
    except KeyError as e:
        choices = ", ".join(sorted(_BIT_GENERATORS))
        raise ValueError(f"unknown bit generator {name!r}; expected one of: {choices}") from e
    return np.random.Generator(cls(check_seed(seed)))


def derive_seed(seed: int, index: int) -> int:
    """Deterministic child seed number ``index`` of ``seed`` (128-bit)."""
    words = np.random.SeedSequence(check_seed(seed), spawn_key=(int(index),)).generate_state(4, dtype=np.uint32)
    out = 0
    for word in words.tolist():
        out = (out << 32) | int(word)
    return out
