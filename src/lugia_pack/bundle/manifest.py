"""Publish manifest utilities.

- read the project `package.json` that supplies the copied fields
- build a `PublishManifest` with a freshly computed version
- write `output/package.json` (2-space indent, publish key order)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from lugia_pack.core.discover import compute_version
from lugia_pack.core.errors import FileSystemError, ManifestError, MissingInputError
from lugia_pack.core.model import COPIED_FIELDS, PublishManifest

logger = logging.getLogger(__name__)


def read_source_manifest(path: Path) -> dict[str, Any]:
    p = Path(path)
    if not p.is_file():
        raise MissingInputError(p, what="source manifest")
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"cannot read {p}: {e}", path=p) from e
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(f"{p}: invalid JSON: {e}") from e
    if not isinstance(obj, dict):
        raise ManifestError(f"{p}: expected JSON object, got {type(obj).__name__}")
    return obj


def build_publish_manifest(source: dict[str, Any], *, version: str | None = None) -> PublishManifest:
    """Construct the publish manifest from a source package.json dict.

    `name` and `description` are fixed regardless of the source contents.
    """
    if version is None:
        version = compute_version()
    copied = {key: source[key] for key in COPIED_FIELDS if key in source}
    return PublishManifest(version=version, copied=copied)


def write_publish_manifest(path: Path, manifest: PublishManifest) -> None:
    p = Path(path)
    text = json.dumps(manifest.to_dict(), indent=2) + "\n"
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"cannot write {p}: {e}", path=p) from e
    logger.info("wrote %s (version %s)", p, manifest.version)
