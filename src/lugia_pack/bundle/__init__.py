"""Output bundle I/O.

- Rebuild the `output/` tree and copy per-package artifacts/metadata
- Read the project package.json and write the publish manifest
"""

from __future__ import annotations

from .io import copy_readme, materialize_package, prune_debug_files, reset_output
from .manifest import build_publish_manifest, read_source_manifest, write_publish_manifest

__all__ = [
    "build_publish_manifest",
    "copy_readme",
    "materialize_package",
    "prune_debug_files",
    "read_source_manifest",
    "reset_output",
    "write_publish_manifest",
]
