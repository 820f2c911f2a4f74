"""lugia-pack core: data model, errors, discovery.

This package must not import the bundle or CLI layers.
"""

from __future__ import annotations

from .discover import compute_version, discover_packages
from .errors import FileSystemError, ManifestError, MissingInputError, PackError
from .model import COPIED_FIELDS, PUBLISH_DESCRIPTION, PUBLISH_NAME, PackageEntry, PackLayout, PublishManifest

__all__ = [
    "COPIED_FIELDS",
    "PUBLISH_DESCRIPTION",
    "PUBLISH_NAME",
    "PackageEntry",
    "PackLayout",
    "PublishManifest",
    "FileSystemError",
    "ManifestError",
    "MissingInputError",
    "PackError",
    "compute_version",
    "discover_packages",
]
