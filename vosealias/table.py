from __future__ import annotations

import warnings
from dataclasses import dataclass

import numpy as np

from .config import DISABLE_CY_ENV, cy_disabled
from .errors import EmptyInputError, InvalidWeightError

try:  # optional compiled fast path for the pairing loop
    from vosealias._alias_cy import build_alias_arrays_cy as _build_alias_arrays_cy  # type: ignore
except Exception:  # pragma: no cover
    _build_alias_arrays_cy = None

_BACKENDS = ("auto", "python", "cython")


def have_cy_kernel() -> bool:
    return _build_alias_arrays_cy is not None


@dataclass(frozen=True)
class AliasTable:
    """Cutoff/alias tables for O(1) sampling via Vose's alias method.

    Attributes
    ----------
    prob
        float64 array of shape (n,) with values in [0, 1]. ``prob[i]`` is the
        probability that a draw landing on column ``i`` returns ``i`` itself.
    alias
        int64 array of shape (n,) with alias indices in [0, n). ``alias[i]`` is
        returned when the coin toss at column ``i`` fails.
    weight_sum
        Sum of the raw input weights as float64.

    Both arrays are copied on construction and marked read-only, so a table can
    be shared between samplers.
    """

    prob: np.ndarray
    alias: np.ndarray
    weight_sum: float = 1.0

    def __post_init__(self) -> None:
        prob = np.array(self.prob, dtype=np.float64, order="C", copy=True)
        alias = np.array(self.alias, dtype=np.int64, order="C", copy=True)
        if prob.ndim != 1 or alias.ndim != 1:
            raise ValueError("prob and alias must be 1D")
        if prob.size != alias.size:
            raise ValueError("prob and alias must have the same size")
        n = int(prob.size)
        if n == 0:
            raise EmptyInputError("alias table must have at least one column")
        if not np.all(np.isfinite(prob)) or np.any(prob < 0.0) or np.any(prob > 1.0):
            raise ValueError("prob entries must lie in [0, 1]")
        if np.any(alias < 0) or np.any(alias >= n):
            raise ValueError("alias entries must lie in [0, n)")
        prob.flags.writeable = False
        alias.flags.writeable = False
        object.__setattr__(self, "prob", prob)
        object.__setattr__(self, "alias", alias)
        object.__setattr__(self, "weight_sum", float(self.weight_sum))

    @property
    def n(self) -> int:
        return int(self.prob.size)

    def __len__(self) -> int:
        return self.n

    def implied_distribution(self) -> np.ndarray:
        """Probability mass routed to each outcome by the table.

        Outcome ``k`` receives ``prob[k] / n`` from its own column plus
        ``(1 - prob[j]) / n`` from every column ``j`` whose alias is ``k``.
        For a table built from weights this equals ``weights / sum(weights)``
        up to rounding.
        """

        n = self.n
        routed = np.bincount(self.alias, weights=1.0 - self.prob, minlength=n)
        return (self.prob + routed) / float(n)


def normalize_weights(weights) -> tuple[np.ndarray, float]:
    """Validate raw weights and return ``(weights / total, total)``.

    The input is copied; the caller's sequence is never modified.
    """

    try:
        raw = np.asarray(weights)
    except (TypeError, ValueError) as e:
        raise InvalidWeightError(f"weights must be real numbers: {e}") from e
    if raw.dtype.kind not in "biuf":
        raise InvalidWeightError(f"weights must be real numbers, got dtype {raw.dtype}")
    w = np.array(raw, dtype=np.float64, copy=True)
    if w.ndim != 1:
        raise InvalidWeightError(f"weights must be 1D, got shape {w.shape}")
    if w.size == 0:
        raise EmptyInputError("no weights provided")

    bad = ~np.isfinite(w)
    if np.any(bad):
        i = int(np.flatnonzero(bad)[0])
        raise InvalidWeightError(f"weights[{i}] is not finite: {w[i]!r}")
    neg = w < 0.0
    if np.any(neg):
        i = int(np.flatnonzero(neg)[0])
        raise InvalidWeightError(f"weights[{i}] is negative: {w[i]!r}")

    # Left-to-right sum; pairwise np.sum can move w[i] across the 1/n cutoff.
    with np.errstate(over="ignore", invalid="ignore"):
        total = float(np.cumsum(w)[-1])
    if not np.isfinite(total):
        raise InvalidWeightError("sum of weights is not finite")
    if total <= 0.0:
        raise InvalidWeightError("sum of weights must be positive")
    return w / total, total


def _build_alias_arrays_py(p: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Reference pairing loop over normalized weights ``p`` (sum 1)."""

    n = int(p.size)
    w = p.tolist()
    prob = [0.0] * n
    alias = [0] * n
    average = 1.0 / n

    # Weights equal to the average go to `large`.
    small: list[int] = []
    large: list[int] = []
    for i in range(n):
        if w[i] >= average:
            large.append(i)
        else:
            small.append(i)

    # Rounding can empty `large` before `small`, so check both.
    while small and large:
        less = small.pop()
        more = large.pop()
        prob[less] = w[less] * n
        alias[less] = more
        w[more] = (w[more] + w[less]) - average
        if w[more] >= average:
            large.append(more)
        else:
            small.append(more)

    # Whatever is left carries (numerically) exactly 1/n.
    for i in small:
        prob[i] = 1.0
        alias[i] = i
    for i in large:
        prob[i] = 1.0
        alias[i] = i

    return np.asarray(prob, dtype=np.float64), np.asarray(alias, dtype=np.int64)


def _build_alias_arrays_compiled(p: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    n = int(p.size)
    prob = np.zeros((n,), dtype=np.float64)
    alias = np.zeros((n,), dtype=np.int64)
    _build_alias_arrays_cy(np.array(p, dtype=np.float64, order="C", copy=True), prob, alias)
    return prob, alias


def _resolve_backend(backend: str) -> str:
    backend = str(backend).strip().lower()
    if backend not in _BACKENDS:
        raise ValueError(f"backend must be one of {_BACKENDS}, got: {backend!r}")
    if backend == "auto":
        if _build_alias_arrays_cy is not None and not cy_disabled():
            return "cython"
        return "python"
    if backend == "cython":
        if _build_alias_arrays_cy is None:
            raise RuntimeError("vosealias._alias_cy is not available (build the Cython extension)")
        if cy_disabled():
            warnings.warn(
                f"{DISABLE_CY_ENV} is set but backend='cython' was requested explicitly; using the compiled kernel",
                UserWarning,
                stacklevel=3,
            )
    return backend


def build_alias_table_from_weights(weights, *, backend: str = "auto") -> AliasTable:
    """Build an alias table for sampling indices with probability ∝ weights.

    Parameters
    ----------
    weights
        1D sequence of non-negative finite reals with a positive sum.
    backend
        ``"auto"`` (compiled kernel when available and not disabled via
        ``VOSEALIAS_DISABLE_CY``), ``"python"`` or ``"cython"``.

    Raises
    ------
    EmptyInputError
        ``weights`` is empty.
    InvalidWeightError
        A weight is negative or non-finite, or the total is zero or non-finite.
    """

    p, total = normalize_weights(weights)
    if _resolve_backend(backend) == "cython":
        prob, alias = _build_alias_arrays_compiled(p)
    else:
        prob, alias = _build_alias_arrays_py(p)
    return AliasTable(prob=prob, alias=alias, weight_sum=total)
