"""Package discovery and version computation."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

from .errors import FileSystemError
from .model import PackageEntry

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def discover_packages(packages_root: Path, *, exclude: str = "common") -> list[PackageEntry]:
    """List package directories directly under `packages_root`.

    The shared-code directory named `exclude` is skipped by exact name and plain
    files are ignored. Entries are sorted by name so runs are reproducible.
    """
    root = Path(packages_root)
    try:
        children = list(root.iterdir())
    except OSError as e:
        raise FileSystemError(f"cannot read packages root {root}: {e}", path=root) from e

    entries = [
        PackageEntry(name=child.name, root=child)
        for child in children
        if child.is_dir() and child.name != exclude
    ]
    entries.sort(key=lambda e: e.name)
    logger.debug("discovered %d package(s) under %s", len(entries), root)
    return entries


def compute_version(now: datetime | None = None) -> str:
    """Return `{year}.{month}.{day}-{epoch_millis}` in UTC, without zero padding.

    Naive datetimes are interpreted as UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    utc = now.astimezone(timezone.utc)
    millis = (utc - _EPOCH) // timedelta(milliseconds=1)
    return f"{utc.year}.{utc.month}.{utc.day}-{millis}"
