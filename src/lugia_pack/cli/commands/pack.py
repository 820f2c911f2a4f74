"""`lugia-pack pack` command.

Rebuilds `output/` from `README.md`, `package.json` and `packages/*` under the
repository root. With no options the root is the current working directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from lugia_pack.core.errors import PackError
from lugia_pack.core.model import PackLayout
from lugia_pack.pack import run_pack


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    # Set on the package logger so the level holds even when the root logger
    # already has handlers and basicConfig is a no-op.
    logging.getLogger("lugia_pack").setLevel(logging.DEBUG if verbose else logging.INFO)


def register(app: typer.Typer) -> None:
    @app.command("pack")
    def pack(
        root: str = typer.Option(".", "--root", help="Repository root holding README.md, package.json and packages/."),
        out_dir: str = typer.Option("output", "--out-dir", help="Output directory (relative to --root)."),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    ) -> None:
        """Build the publishable bundle. Destroys any existing output directory."""
        _configure_logging(verbose)
        layout = PackLayout(root=Path(root), out_dir_name=out_dir)
        try:
            result = run_pack(layout)
        except PackError as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=1) from e

        typer.echo(str(result.out_dir))
