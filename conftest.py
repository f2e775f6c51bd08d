"""Root conftest: put this checkout's src/ first on sys.path.

Lets the test suite run straight from a clone without an editable
install, and makes sure a stale installed copy never shadows src/.
"""

import pathlib
import sys

_src = str(pathlib.Path(__file__).resolve().parent / "src")
if _src not in sys.path:
    sys.path.insert(0, _src)
