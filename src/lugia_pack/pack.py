"""The pack run.

Fixed sequence, no branching and no rollback:

1. reset `output/` (refused if it would overlap the inputs)
2. copy `README.md`
3. discover packages under `packages/` (minus `common`)
4. materialize each package
5. write `output/package.json`

Any `PackError` aborts the run and leaves partial output in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from lugia_pack.bundle.io import copy_readme, materialize_package, reset_output
from lugia_pack.bundle.manifest import build_publish_manifest, read_source_manifest, write_publish_manifest
from lugia_pack.core.discover import compute_version, discover_packages
from lugia_pack.core.errors import FileSystemError
from lugia_pack.core.model import PackLayout, PublishManifest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackResult:
    out_dir: Path
    packages: tuple[str, ...]
    pruned: int
    manifest: PublishManifest


def check_output_target(layout: PackLayout) -> Path:
    """Refuse an output directory whose reset would delete the inputs.

    The output may not be the root or one of its ancestors, and may not be or
    sit inside the README, the source package.json or the packages root.
    Returns the resolved output path.
    """
    out = layout.out_dir.resolve()
    root = layout.root.resolve()
    if root.is_relative_to(out):
        raise FileSystemError(f"output directory {out} contains the repository root {root}", path=out)
    for protected in (layout.readme, layout.source_manifest, layout.packages_root):
        target = protected.resolve()
        if out.is_relative_to(target):
            raise FileSystemError(f"output directory {out} overlaps input {target}", path=out)
    return out


def run_pack(layout: PackLayout | None = None, *, now: datetime | None = None) -> PackResult:
    """Build the publishable bundle described by `layout` (defaults to the cwd)."""
    if layout is None:
        layout = PackLayout()

    check_output_target(layout)
    out_dir = reset_output(layout.out_dir)
    copy_readme(layout.readme, out_dir)

    entries = discover_packages(layout.packages_root, exclude=layout.shared_package)
    pruned = 0
    for entry in entries:
        pruned += materialize_package(
            entry,
            out_dir,
            subtrees=layout.artifact_subtrees,
            debug_suffix=layout.debug_suffix,
        )

    source = read_source_manifest(layout.source_manifest)
    manifest = build_publish_manifest(source, version=compute_version(now))
    write_publish_manifest(out_dir / "package.json", manifest)

    logger.info("packed %d package(s) into %s", len(entries), out_dir)
    return PackResult(
        out_dir=out_dir,
        packages=tuple(e.name for e in entries),
        pruned=pruned,
        manifest=manifest,
    )
