from __future__ import annotations

import json
import logging
from pathlib import Path

from typer.testing import CliRunner

from conftest import make_package
from lugia_pack.cli.main import app


def test_cli_pack_writes_bundle(contract_repo: Path) -> None:
    runner = CliRunner()
    res = runner.invoke(app, ["pack", "--root", str(contract_repo)])

    assert res.exit_code == 0, res.output
    out = contract_repo / "output"
    assert str(out) in res.output
    manifest = json.loads((out / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "@perp/lugia-deployments"


def test_cli_pack_default_root_is_cwd(contract_repo: Path, monkeypatch) -> None:
    monkeypatch.chdir(contract_repo)
    runner = CliRunner()
    res = runner.invoke(app, ["pack"])

    assert res.exit_code == 0, res.output
    assert (contract_repo / "output" / "vault" / "metadata.json").is_file()


def test_cli_pack_missing_readme_exits_nonzero(contract_repo: Path) -> None:
    (contract_repo / "README.md").unlink()
    runner = CliRunner()
    res = runner.invoke(app, ["pack", "--root", str(contract_repo)])

    assert res.exit_code == 1
    assert not (contract_repo / "output" / "vault").exists()


def test_cli_version() -> None:
    from lugia_pack import __version__

    res = CliRunner().invoke(app, ["version"])

    assert res.exit_code == 0
    assert res.output.strip() == __version__


def test_cli_pack_verbose_logs_pruned_files(contract_repo: Path, caplog) -> None:
    res = CliRunner().invoke(app, ["pack", "-v", "--root", str(contract_repo)])

    assert res.exit_code == 0, res.output
    pruned = [r for r in caplog.records if r.levelno == logging.DEBUG and r.getMessage().startswith("pruned ")]
    assert len(pruned) == 4  # lib/nested + src sidecars for two packages


def test_cli_pack_default_is_not_verbose(contract_repo: Path, caplog) -> None:
    res = CliRunner().invoke(app, ["pack", "--root", str(contract_repo)])

    assert res.exit_code == 0, res.output
    assert not [r for r in caplog.records if r.levelno == logging.DEBUG]
    assert any(r.getMessage().startswith("packed vault") for r in caplog.records)


def test_cli_pack_refuses_root_as_out_dir(contract_repo: Path) -> None:
    res = CliRunner().invoke(app, ["pack", "--root", str(contract_repo), "--out-dir", "."])

    assert res.exit_code == 1
    assert "error: output directory" in res.output
    assert (contract_repo / "README.md").is_file()
    assert (contract_repo / "packages" / "vault" / "metadata" / "vault.json").is_file()


def test_cli_pack_output_collision_is_reported(contract_repo: Path) -> None:
    make_package(contract_repo, "README.md")

    res = CliRunner().invoke(app, ["pack", "--root", str(contract_repo)])

    assert res.exit_code == 1
    assert "error: README.md: cannot create" in res.output
