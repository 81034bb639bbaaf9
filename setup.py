"""
Optional mypyc build for streamhtml.

Metadata lives in pyproject.toml; this file only adds compiled extensions
when asked to:

    STREAMHTML_USE_MYPYC=1 pip install .
"""

import os
from pathlib import Path

from setuptools import setup

PACKAGE_DIR = Path("src") / "streamhtml"

# Modules on the per-call write path. builder.py and serialize.py stay
# interpreted: they only forward calls.
HOT_MODULES = ("escape", "attributes", "renderers")


def mypyc_extensions() -> list:
    from mypyc.build import mypycify

    return mypycify(
        [str(PACKAGE_DIR / f"{name}.py") for name in HOT_MODULES],
        opt_level=os.environ.get("MYPYC_OPT_LEVEL", "3"),
        # attributes.py and renderers.py call into each other
        separate=False,
    )


if __name__ == "__main__":
    use_mypyc = os.environ.get("STREAMHTML_USE_MYPYC", "0") == "1"
    setup(ext_modules=mypyc_extensions() if use_mypyc else [])
