from __future__ import annotations

import importlib
import platform
import sys


def _try_import(modname: str):
    try:
        return importlib.import_module(modname), None
    except Exception as e:  # pragma: no cover
        return None, e


def main() -> None:
    print("vosealias environment check")
    print(f"- python: {sys.version.split()[0]}")
    print(f"- platform: {platform.platform()}")

    np, np_err = _try_import("numpy")
    if np_err is None:
        print(f"- numpy: {np.__version__}")
    else:  # pragma: no cover
        print(f"- numpy: MISSING ({type(np_err).__name__}: {np_err})")

    _, cy_err = _try_import("vosealias._alias_cy")
    if cy_err is None:
        print("- table kernel (_alias_cy): OK")
    else:
        print(f"- table kernel (_alias_cy): MISSING ({type(cy_err).__name__}: {cy_err})")
        print("  hint: rebuild with `python -m pip install -e .` (requires a C compiler)")

    from vosealias.gpu import _import_cupy, has_cuda_device

    cp = _import_cupy()
    if cp is None:
        print("- cupy: MISSING")
        print("  hint: install with `python -m pip install -e '.[cuda]'`")
    elif has_cuda_device():
        print(f"- cupy: OK (devices={int(cp.cuda.runtime.getDeviceCount())})")
    else:
        print("- cupy: OK (no CUDA devices detected)")

    from vosealias import config

    try:
        settings = config.describe()
    except ValueError as e:
        print(f"- config: INVALID ({e})")
    else:
        for key, val in settings.items():
            print(f"- {key}: {val}")


if __name__ == "__main__":  # pragma: no cover
    main()
