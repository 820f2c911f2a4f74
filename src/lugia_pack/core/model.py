"""Data model for a pack run.

- `PackLayout`: fixed source/output layout rooted at a repository directory
- `PackageEntry`: one discovered contract package
- `PublishManifest`: the generated `package.json` for publishing

All types are frozen; nothing is persisted across runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

PUBLISH_NAME = "@perp/lugia-deployments"
PUBLISH_DESCRIPTION = "Perpetual Protocol Lugia contract artifacts (ABIs) and deployed addresses"

# Fields copied verbatim from the source package.json, in output order.
COPIED_FIELDS: tuple[str, ...] = ("license", "author", "repository", "homepage", "keywords")


@dataclass(frozen=True)
class PackLayout:
    root: Path = Path(".")
    out_dir_name: str = "output"
    readme_name: str = "README.md"
    manifest_name: str = "package.json"
    packages_dir_name: str = "packages"
    shared_package: str = "common"
    debug_suffix: str = ".dbg.json"
    artifact_subtrees: tuple[str, ...] = ("lib", "src")

    @property
    def readme(self) -> Path:
        return self.root / self.readme_name

    @property
    def source_manifest(self) -> Path:
        return self.root / self.manifest_name

    @property
    def packages_root(self) -> Path:
        return self.root / self.packages_dir_name

    @property
    def out_dir(self) -> Path:
        # An absolute out_dir_name wins over root (Path join semantics).
        return self.root / self.out_dir_name


@dataclass(frozen=True)
class PackageEntry:
    name: str
    root: Path

    @property
    def artifacts_dir(self) -> Path:
        return self.root / "artifacts"

    @property
    def metadata_file(self) -> Path:
        return self.root / "metadata" / f"{self.name}.json"


@dataclass(frozen=True)
class PublishManifest:
    version: str
    copied: dict[str, Any] = field(default_factory=dict)
    name: str = PUBLISH_NAME
    description: str = PUBLISH_DESCRIPTION

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest with keys in publish order.

        Copied fields absent from the source are omitted rather than written as null.
        """
        out: dict[str, Any] = {
            "name": self.name,
            "version": self.version,
            "description": self.description,
        }
        for key in COPIED_FIELDS:
            if key in self.copied:
                out[key] = self.copied[key]
        return out
