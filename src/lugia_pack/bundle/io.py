"""Output tree operations.

The output tree is rebuilt from scratch on every run:

    output/
      README.md
      <package>/artifacts/lib/...
      <package>/artifacts/src/...
      <package>/metadata.json
      package.json

Debug sidecars (`*.dbg.json`) are pruned from the copied artifacts.
Every `OSError` raised while writing the tree surfaces as `FileSystemError`.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable

from lugia_pack.core.errors import FileSystemError, MissingInputError
from lugia_pack.core.model import PackageEntry

logger = logging.getLogger(__name__)


def reset_output(out_dir: Path) -> Path:
    """Delete `out_dir` if present and recreate it empty."""
    out = Path(out_dir)
    try:
        if out.is_dir() and not out.is_symlink():
            shutil.rmtree(out)
        elif out.exists() or out.is_symlink():
            out.unlink()
        out.mkdir(parents=True)
    except OSError as e:
        raise FileSystemError(f"cannot reset output directory {out}: {e}", path=out) from e
    logger.info("reset %s", out)
    return out


def _copy_file(src: Path, dest: Path) -> None:
    try:
        shutil.copyfile(src, dest)
    except OSError as e:
        raise FileSystemError(f"cannot copy {src} to {dest}: {e}", path=dest) from e


def copy_readme(readme: Path, out_dir: Path) -> Path:
    src = Path(readme)
    if not src.is_file():
        raise MissingInputError(src, what="readme")
    dest = Path(out_dir) / src.name
    _copy_file(src, dest)
    logger.info("copied %s", src)
    return dest


def _copy_tree(src: Path, dest: Path, *, what: str) -> None:
    if not src.is_dir():
        raise MissingInputError(src, what=what)
    # Links are copied as links, like `cp -r`.
    try:
        shutil.copytree(src, dest, symlinks=True, dirs_exist_ok=True)
    except OSError as e:  # shutil.Error is an OSError
        raise FileSystemError(f"{what}: cannot copy {src} to {dest}: {e}", path=dest) from e


def prune_debug_files(root: Path, *, suffix: str = ".dbg.json") -> list[Path]:
    """Delete every file under `root` whose name ends with `suffix`.

    Symlinked sidecars are removed as links; their targets are left alone.
    """
    removed: list[Path] = []
    for path in sorted(Path(root).rglob(f"*{suffix}")):
        if path.is_file() or path.is_symlink():
            try:
                path.unlink()
            except OSError as e:
                raise FileSystemError(f"cannot delete {path}: {e}", path=path) from e
            logger.debug("pruned %s", path)
            removed.append(path)
    return removed


def materialize_package(
    entry: PackageEntry,
    out_dir: Path,
    *,
    subtrees: Iterable[str] = ("lib", "src"),
    debug_suffix: str = ".dbg.json",
) -> int:
    """Copy one package's artifacts and metadata into `out_dir/<name>/`.

    Returns the number of debug files pruned from the copied artifacts.
    """
    pkg_out = Path(out_dir) / entry.name
    artifacts_out = pkg_out / "artifacts"
    try:
        artifacts_out.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileSystemError(f"{entry.name}: cannot create {artifacts_out}: {e}", path=artifacts_out) from e

    for subtree in subtrees:
        _copy_tree(
            entry.artifacts_dir / subtree,
            artifacts_out / subtree,
            what=f"{entry.name}: artifacts/{subtree}",
        )

    pruned = prune_debug_files(artifacts_out, suffix=debug_suffix)

    metadata = entry.metadata_file
    if not metadata.is_file():
        raise MissingInputError(metadata, what=f"{entry.name}: metadata")
    _copy_file(metadata, pkg_out / "metadata.json")

    logger.info("packed %s (%d debug file(s) pruned)", entry.name, len(pruned))
    return len(pruned)
