"""Pytest configuration.

This repo follows the `src/` layout. Ensure `src/` is on `sys.path` so tests run
even when pytest comes from a different interpreter than the editable install.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Synthetic contract repository
# =============================================================================

SOURCE_MANIFEST: dict[str, Any] = {
    "name": "@perp/lugia",
    "version": "0.0.0",
    "license": "GPL-3.0-or-later",
    "author": "Perpetual Protocol",
    "repository": {"type": "git", "url": "git+https://github.com/perpetual-protocol/perp-lugia.git"},
    "homepage": "https://perp.com",
    "keywords": ["perpetual", "protocol", "contracts"],
    "scripts": {"build": "hardhat compile"},
}


def write_json(path: Path, obj: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2) + "\n", encoding="utf-8")


def make_package(root: Path, name: str, *, with_metadata: bool = True, with_src: bool = True) -> Path:
    """Create `packages/<name>/` with lib/src artifacts, a debug sidecar and metadata."""
    pkg = root / "packages" / name
    artifacts = pkg / "artifacts"
    write_json(artifacts / "lib" / "A.json", {"abi": [], "contractName": "A"})
    write_json(artifacts / "lib" / "nested" / "A.dbg.json", {"buildInfo": "x"})
    if with_src:
        (artifacts / "src").mkdir(parents=True, exist_ok=True)
        (artifacts / "src" / "B.sol").write_text("// SPDX-License-Identifier: GPL-3.0\n", encoding="utf-8")
        write_json(artifacts / "src" / "B.dbg.json", {"buildInfo": "y"})
    write_json(artifacts / "debug.dbg.json", {"buildInfo": "z"})
    if with_metadata:
        write_json(pkg / "metadata" / f"{name}.json", {"name": name, "address": "0x0"})
    return pkg


@pytest.fixture
def contract_repo(tmp_path: Path) -> Path:
    """Repository with `common/`, `vault/` and `clearingHouse/` packages."""
    root = tmp_path / "repo"
    root.mkdir()
    (root / "README.md").write_text("# Lugia deployments\n", encoding="utf-8")
    write_json(root / "package.json", SOURCE_MANIFEST)
    (root / "packages" / "common" / "contracts").mkdir(parents=True)
    make_package(root, "vault")
    make_package(root, "clearingHouse")
    return root
