from __future__ import annotations

import numpy as np

from .config import env_seed
from .rng import check_seed, derive_seed, fresh_seed, make_generator
from .table import AliasTable, build_alias_table_from_weights


def _auto_seed() -> int:
    seed = env_seed()
    if seed is None:
        seed = fresh_seed()
    return seed


class AliasSampler:
    """Draw outcome indices in O(1) from a prebuilt :class:`AliasTable`.

    Each sampler owns a private ``numpy.random.Generator`` seeded once from
    ``seed``. The table is read-only and may be shared between samplers
    (see :meth:`spawn`); the generator must not be shared across threads.
    """

    __slots__ = ("_table", "_seed", "_bit_generator", "_rng", "_n", "_prob", "_alias", "_nspawn")

    def __init__(self, table: AliasTable, seed: int, *, bit_generator: str | None = None) -> None:
        if not isinstance(table, AliasTable):
            raise TypeError(f"table must be an AliasTable, got {type(table).__name__}")
        self._table = table
        self._seed = check_seed(seed)
        self._bit_generator = bit_generator
        self._rng = make_generator(self._seed, bit_generator=bit_generator)
        self._n = table.n
        # Plain lists are faster than ndarray indexing in the scalar path.
        self._prob = table.prob.tolist()
        self._alias = table.alias.tolist()
        self._nspawn = 0

    @classmethod
    def from_weights(cls, weights, *, bit_generator: str | None = None, backend: str = "auto") -> "AliasSampler":
        """Build a sampler with an automatically chosen seed.

        The seed is taken from ``VOSEALIAS_SEED`` when set, otherwise from OS
        entropy. It is exposed as :attr:`seed` so a run can be replayed with
        :meth:`from_weights_with_seed`.
        """

        return cls.from_weights_with_seed(weights, _auto_seed(), bit_generator=bit_generator, backend=backend)

    @classmethod
    def from_weights_with_seed(
        cls,
        weights,
        seed: int,
        *,
        bit_generator: str | None = None,
        backend: str = "auto",
    ) -> "AliasSampler":
        """Build a sampler whose draws are fully determined by ``weights`` and ``seed``."""

        seed = check_seed(seed)
        table = build_alias_table_from_weights(weights, backend=backend)
        return cls(table, seed, bit_generator=bit_generator)

    @classmethod
    def from_table(cls, table: AliasTable, seed: int | None = None, *, bit_generator: str | None = None) -> "AliasSampler":
        """Sampler over an existing table.

        With ``seed=None`` the seed follows :meth:`from_weights`:
        ``VOSEALIAS_SEED`` when set, otherwise OS entropy.
        """

        if seed is None:
            seed = _auto_seed()
        return cls(table, seed, bit_generator=bit_generator)

    def spawn(self, seed: int | None = None) -> "AliasSampler":
        """New sampler over the same table with an independent generator.

        With ``seed=None`` the child seed is derived from this sampler's seed
        and a spawn counter, so replaying the parent seed replays every child.
        """

        if seed is None:
            seed = derive_seed(self._seed, self._nspawn)
            self._nspawn += 1
        return type(self)(self._table, seed, bit_generator=self._bit_generator)

    @property
    def table(self) -> AliasTable:
        return self._table

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def n(self) -> int:
        return self._n

    def next(self) -> int:
        """Draw one outcome index in ``[0, n)``."""

        # Fair die roll picks the column, biased coin picks column or alias.
        column = int(self._rng.integers(self._n))
        if self._rng.random() < self._prob[column]:
            return column
        return self._alias[column]

    def __iter__(self) -> "AliasSampler":
        return self

    def __next__(self) -> int:
        return self.next()

    def sample(self, size: int) -> np.ndarray:
        """Draw ``size`` outcome indices at once (int64 array).

        Uses the same per-draw rule as :meth:`next` but consumes the generator
        in a different order, so it does not reproduce a sequence of ``next()``
        calls made with the same seed.
        """

        size = int(size)
        if size < 0:
            raise ValueError("size must be >= 0")
        cols = self._rng.integers(0, self._n, size=size, dtype=np.int64)
        u = self._rng.random(size)
        keep = u < self._table.prob[cols]
        return np.where(keep, cols, self._table.alias[cols])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self._n}, seed={self._seed})"
