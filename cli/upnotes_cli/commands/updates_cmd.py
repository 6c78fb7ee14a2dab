from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape
from upnotes_client.changelog import has_version
from upnotes_client.errors import UpnotesClientError
from upnotes_client.semver import parse_semver
from upnotes_client.updates import changes_between, check_versions, version_not_found_msg

from .. import console
from ..config import load_config
from ..http import make_client
from ..notice import print_update_banner
from ..version import installed_version

app = typer.Typer(help="Check for CLI updates and show what changed between releases.")


def _current_version(package_name: str) -> str:
    current = installed_version(package_name)
    if not current:
        console.err(f"Package {escape(package_name)} is not installed.")
        raise typer.Exit(code=2)
    return current


def _warn_if_not_semver(label: str, version: str) -> None:
    if parse_semver(version) is None:
        console.warn(escape(f"{label} version {version!r} is not in MAJOR.MINOR.PATCH form."))


@app.command("check", help="Compare the installed version with the latest published one.")
def check(
        package_url: str | None = typer.Option(None, "--package-url", help="Override package metadata URL."),
        changelog_url: str | None = typer.Option(None, "--changelog-url", help="Override changelog URL."),
) -> None:
    cfg = load_config()
    current = _current_version(cfg.package_name)
    client = make_client(cfg, package_url_override=package_url, changelog_url_override=changelog_url)
    try:
        status = check_versions(client, current)
        if status is None:
            console.err("Update check failed: unable to resolve the latest published version.")
            raise typer.Exit(code=1)
        if not status.update_available:
            console.ok(escape(f"CLI is up to date ({current})."))
            return
        try:
            document = client.changelog_text()
        except UpnotesClientError as exc:
            console.warn(escape(f"Changelog unavailable: {exc}"))
            document = ""
        changes = changes_between(document, status.current, status.latest) if document else None
    finally:
        client.close()
    print_update_banner(status, changes)


@app.command("changes", help="Show release notes gained by upgrading between two versions.")
def changes(
        from_version: str | None = typer.Option(None, "--from", help="Installed version (default: current install)."),
        to_version: str | None = typer.Option(None, "--to", help="Target version (default: latest published)."),
        file: Path | None = typer.Option(None, "--file", exists=True, dir_okay=False, help="Read a local changelog."),
        changelog_url: str | None = typer.Option(None, "--changelog-url", help="Override changelog URL."),
) -> None:
    cfg = load_config()
    current = (from_version or "").strip() or _current_version(cfg.package_name)
    target = (to_version or "").strip()
    client = make_client(cfg, changelog_url_override=changelog_url)
    try:
        if not target:
            status = check_versions(client, current)
            if status is None:
                console.err("Unable to resolve the latest published version. Pass --to explicitly.")
                raise typer.Exit(code=1)
            target = status.latest
        if file is not None:
            document = file.read_text(encoding="utf-8")
        else:
            try:
                document = client.changelog_text()
            except UpnotesClientError as exc:
                console.err(escape(f"Changelog unavailable: {exc}"))
                raise typer.Exit(code=1)
    finally:
        client.close()

    _warn_if_not_semver("Target", target)
    if not has_version(document, target):
        console.err(escape(version_not_found_msg(target)))
        raise typer.Exit(code=1)
    if not has_version(document, current):
        console.warn(escape(f"Version {current} not found in the changelog; showing all older entries."))

    text = changes_between(document, current, target)
    if not text:
        console.err("No changes to show.")
        raise typer.Exit(code=1)
    console.notes(text)
