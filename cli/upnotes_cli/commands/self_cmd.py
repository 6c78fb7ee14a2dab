from __future__ import annotations

import importlib
import shlex
import subprocess

import typer
from rich.markup import escape
from upnotes_client.updates import check_versions, fetch_changes

from .. import console
from ..config import effective_update_command, load_config
from ..http import make_client
from ..version import installed_version

app = typer.Typer(help="Manage the installed CLI.")


def _run_update_command(command: list[str]) -> subprocess.CompletedProcess[str]:
    return subprocess.run(command, capture_output=True, text=True, check=True)


def _refreshed_version(package_name: str) -> str | None:
    importlib.invalidate_caches()
    return installed_version(package_name)


@app.command("update", help="Upgrade the CLI to the latest published version.")
def update_self(
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        force: bool = typer.Option(False, "--force", help="Run the upgrade even when up to date."),
) -> None:
    cfg = load_config()
    current = installed_version(cfg.package_name)
    command = effective_update_command(cfg)
    manual = shlex.join(command)

    client = make_client(cfg)
    try:
        status = check_versions(client, current)
    finally:
        client.close()

    if status is not None and not status.update_available and not force:
        console.ok(escape(f"CLI is up to date ({current})."))
        return
    if status is not None and status.update_available:
        console.info(f"Update available: {status.current} -> {status.latest}")

    if not yes and not typer.confirm(f"Run {manual}?", default=True):
        console.info("Update cancelled.")
        raise typer.Exit(code=0)

    console.info(f"Updating {cfg.package_name}...")
    console.print(f"Running command: [italic]{escape(manual)}[/]")
    try:
        result = _run_update_command(command)
    except (OSError, subprocess.CalledProcessError) as exc:
        console.rule()
        console.err(escape(f"Update of {cfg.package_name} failed."))
        console.notes(str(exc))
        stderr = getattr(exc, "stderr", None)
        if stderr:
            console.notes(stderr.strip())
        console.print(f"You can try running the following command: [bold]{escape(manual)}[/]")
        console.print("If that still fails, try upgrading pip first.")
        raise typer.Exit(code=1)

    console.rule()
    if result.stdout:
        console.notes(result.stdout.strip())
    console.rule()

    updated = _refreshed_version(cfg.package_name)
    console.ok(f"[bold]{escape(cfg.package_name)} successfully updated to version {escape(updated or 'unknown')}[/]")

    if current and updated and updated != current:
        client = make_client(cfg)
        try:
            changes = fetch_changes(client, current, updated)
        finally:
            client.close()
        if changes:
            console.rule()
            console.notes(changes)
            console.rule()
