from __future__ import annotations

import os
import sys

from setuptools.command.build_ext import build_ext as _build_ext
from setuptools import Extension, setup


def _bool_env(key: str) -> bool:
    val = os.environ.get(key, "").strip().lower()
    return val not in ("", "0", "false", "no", "off")


def _alias_ext() -> Extension:
    try:
        import numpy as np
    except Exception as e:  # pragma: no cover
        raise SystemExit("NumPy is required to build vosealias._alias_cy") from e

    extra_compile_args = ["-O3"] if sys.platform != "win32" else ["/O2"]
    define_macros: list[tuple[str, str]] = [("NPY_NO_DEPRECATED_API", "NPY_1_7_API_VERSION")]

    return Extension(
        "vosealias._alias_cy",
        sources=["vosealias/_alias_cy.pyx"],
        include_dirs=[np.get_include()],
        language="c",
        extra_compile_args=extra_compile_args,
        define_macros=define_macros,
    )


def _cythonize_exts(exts: list[Extension]) -> list[Extension]:
    if _bool_env("VOSEALIAS_SKIP_CY_EXT"):
        return []
    try:
        from Cython.Build import cythonize
    except Exception as e:  # pragma: no cover
        raise SystemExit("Cython is required to build vosealias Cython extensions.") from e

    return cythonize(
        exts,
        compiler_directives={"language_level": "3"},
        annotate=False,
        build_dir=os.path.join("build", "cython"),
    )


class build_ext(_build_ext):
    def build_extension(self, ext) -> None:
        try:
            super().build_extension(ext)
        except Exception as e:
            if _bool_env("VOSEALIAS_REQUIRE_CY_EXT"):
                raise
            print(
                f"vosealias: failed to build {ext.name} ({type(e).__name__}: {e}); "
                "falling back to the pure-Python table builder. "
                "Set VOSEALIAS_REQUIRE_CY_EXT=1 to make this a hard error.",
                file=sys.stderr,
            )


setup(
    ext_modules=_cythonize_exts([_alias_ext()]),
    cmdclass={"build_ext": build_ext},
)
