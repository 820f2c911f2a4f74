"""lugia-pack: assemble the publishable contract artifact bundle.

The bundle is an npm-style `output/` tree holding per-package ABIs and metadata
plus a generated `package.json` with a date/timestamp version.
"""

from __future__ import annotations

from lugia_pack.core import FileSystemError, ManifestError, MissingInputError, PackError
from lugia_pack.pack import PackResult, run_pack

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "FileSystemError",
    "ManifestError",
    "MissingInputError",
    "PackError",
    "PackResult",
    "run_pack",
]
