from __future__ import annotations

import os
import shlex

import typer
from rich.markup import escape

from .. import console
from ..config import config_path, default_config, effective_update_command, load_config, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/upnotes/config.toml).")

_KEYS = ("package_name", "package_url", "changelog_url", "check_updates", "timeout_s", "update_command")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        package_name: str = typer.Option(
            default_config().package_name,
            "--package-name",
            prompt="Package to watch",
            help="Installed distribution whose updates are tracked.",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.package_name = package_name.strip()
    if not cfg.package_name:
        console.err("Package name cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(escape(f"Config written: {saved}"))


@app.command("show")
def show_settings():
    cfg = load_config()
    console.console.print(
        f"package_name={cfg.package_name} package_url={cfg.package_url} "
        f"changelog_url={cfg.changelog_url} check_updates={cfg.check_updates} timeout_s={cfg.timeout_s} "
        f"update_command={shlex.join(effective_update_command(cfg))}",
        highlight=False,
        markup=False,
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help=f"Setting key ({', '.join(_KEYS)})."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k not in _KEYS:
        console.err(escape(f"Unknown setting: {key}"))
        raise typer.Exit(code=2)
    value = effective_update_command(cfg) if k == "update_command" else getattr(cfg, k)
    if isinstance(value, list):
        value = shlex.join(value)
    console.console.print(str(value), highlight=False, markup=False)


@app.command("set")
def set_setting(
        package_name: str | None = typer.Option(None, "--package-name", help="Set the tracked package."),
        package_url: str | None = typer.Option(None, "--package-url", help="Set package metadata URL."),
        changelog_url: str | None = typer.Option(None, "--changelog-url", help="Set changelog URL."),
        check_updates: bool | None = typer.Option(
            None, "--check-updates/--no-check-updates", help="Toggle the automatic update notice."
        ),
        timeout_s: float | None = typer.Option(None, "--timeout", min=0.1, help="HTTP timeout in seconds."),
        update_command: str | None = typer.Option(
            None, "--update-command", help="Shell-style upgrade command; empty string restores the pip default."
        ),
):
    cfg = load_config()
    if package_name is not None:
        cfg.package_name = package_name.strip()
    if package_url is not None:
        cfg.package_url = package_url.strip()
    if changelog_url is not None:
        cfg.changelog_url = changelog_url.strip()
    if check_updates is not None:
        cfg.check_updates = check_updates
    if timeout_s is not None:
        cfg.timeout_s = timeout_s
    if update_command is not None:
        try:
            cfg.update_command = shlex.split(update_command)
        except ValueError as exc:
            console.err(escape(f"Invalid --update-command: {exc}"))
            raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(escape(f"Settings updated: {saved}"))
