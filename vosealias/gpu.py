"""Optional CuPy batch sampler for alias tables."""

from __future__ import annotations

import numpy as np

from .rng import check_seed
from .table import AliasTable


def _import_cupy():
    try:
        import cupy as cp  # type: ignore
    except Exception:
        return None
    return cp


def has_cupy() -> bool:
    """Return True if CuPy can be imported."""
    return _import_cupy() is not None


def has_cuda_device() -> bool:
    """Return True if a CUDA device is visible to CuPy."""
    cp = _import_cupy()
    if cp is None:
        return False
    try:
        return cp.cuda.runtime.getDeviceCount() > 0
    except Exception:
        return False


def sample_alias_cuda(table: AliasTable, size: int, *, seed: int, to_host: bool = True):
    """Draw ``size`` outcome indices on the GPU.

    Same per-draw rule as :meth:`AliasSampler.sample`, but driven by CuPy's
    device generator, so results differ from the CPU path for equal seeds.

    Returns
    -------
    numpy.ndarray or cupy.ndarray
        int64 indices in ``[0, n)``; a host array when ``to_host`` is True.
    """

    cp = _import_cupy()
    if cp is None:
        raise RuntimeError("CuPy is not available (install with `python -m pip install -e '.[cuda]'`)")
    if not isinstance(table, AliasTable):
        raise TypeError(f"table must be an AliasTable, got {type(table).__name__}")
    size = int(size)
    if size < 0:
        raise ValueError("size must be >= 0")

    # CuPy seeds are 64-bit.
    rs = cp.random.RandomState(check_seed(seed) & 0xFFFFFFFFFFFFFFFF)
    prob_dev = cp.asarray(table.prob, dtype=cp.float64)
    alias_dev = cp.asarray(table.alias, dtype=cp.int64)

    cols = rs.randint(0, table.n, size=size, dtype=cp.int64)
    u = rs.random_sample(size, dtype=cp.float64)
    out = cp.where(u < prob_dev[cols], cols, alias_dev[cols])
    if to_host:
        return np.asarray(cp.asnumpy(out), dtype=np.int64)
    return out
