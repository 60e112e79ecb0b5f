"""vosealias — O(1) discrete sampling with Vose's alias method."""

from importlib.metadata import PackageNotFoundError, version as _dist_version

from vosealias.errors import AliasTableError, EmptyInputError, InvalidWeightError
from vosealias.rng import fresh_seed, make_generator
from vosealias.sampler import AliasSampler
from vosealias.table import AliasTable, build_alias_table_from_weights, have_cy_kernel, normalize_weights

try:
    __version__ = _dist_version("vosealias")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    # Core classes
    "AliasSampler",
    "AliasTable",
    # Errors
    "AliasTableError",
    "EmptyInputError",
    "InvalidWeightError",
    # Core functions
    "build_alias_table_from_weights",
    "fresh_seed",
    "have_cy_kernel",
    "make_generator",
    "normalize_weights",
]
