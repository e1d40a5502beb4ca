import sys
from pathlib import Path
from typing import BinaryIO

if sys.version_info < (3, 10):
    raise Exception("The seq-stats code needs Python 3.10 or later.")  # pyright: ignore[reportUnreachable]

# Note that the version string below must have the following format,
# otherwise it will not be found by the version() function in ../setup.py
__version__ = "0.1.0"


File = BinaryIO | str | Path
