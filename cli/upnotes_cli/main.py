from __future__ import annotations

import typer

from . import console
from .commands import self_cmd, settings_cmd, updates_cmd
from .config import load_config
from .logging_ import setup_logging
from .notice import notify_if_outdated
from .version import cli_version

# These already talk to the release endpoints themselves.
_SKIP_NOTICE = {"self", "updates", "settings"}


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="upnotes",
        help="upnotes CLI",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(self_cmd.app, name="self")
    app.add_typer(updates_cmd.app, name="updates")

    @app.command("version", help="Print the installed CLI version.")
    def version() -> None:
        console.console.print(cli_version(), highlight=False)

    @app.callback()
    def _main(
            ctx: typer.Context,
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
            no_update_check: bool = typer.Option(
                False, "--no-update-check", help="Skip the automatic check for a newer release."
            ),
    ):
        setup_logging(verbose)
        if no_update_check or ctx.invoked_subcommand in _SKIP_NOTICE or ctx.resilient_parsing:
            return
        notify_if_outdated(load_config())

    return app


app = _build_app()
