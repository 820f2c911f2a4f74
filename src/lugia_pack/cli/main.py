"""lugia-pack CLI entrypoint."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="lugia-pack",
    add_completion=False,
    no_args_is_help=True,
    help="Assemble the publishable contract artifact bundle.",
)


@app.callback()
def _callback() -> None:
    """lugia-pack CLI."""
    # Intentionally empty; subcommands are registered below.
    return


@app.command("version")
def version() -> None:
    """Print the installed lugia-pack version."""
    from lugia_pack import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    from lugia_pack.cli.commands import pack as pack_cmd

    pack_cmd.register(app)


_register_commands()


def main() -> None:
    app()
