from __future__ import annotations

import logging

from rich.markup import escape
from upnotes_client.updates import UpdateStatus, check_versions, fetch_changes

from . import console
from .config import AppConfig, update_check_enabled
from .http import make_client
from .version import installed_version

logger = logging.getLogger(__name__)


def print_update_banner(status: UpdateStatus, changes: str | None) -> None:
    console.rule()
    console.print(
        "There is a new version available of this CLI "
        f"([red]{escape(status.current)}[/] -> [green]{escape(status.latest)}[/])"
    )
    if changes:
        console.print()
        console.notes(changes)
        console.print()
    console.print("Run [bold italic]upnotes self update[/] to get the latest version")
    console.rule()


def resolve_status(cfg: AppConfig) -> UpdateStatus | None:
    current = installed_version(cfg.package_name)
    if not current:
        logger.debug("Package %s is not installed; skipping update check", cfg.package_name)
        return None
    client = make_client(cfg)
    try:
        return check_versions(client, current)
    finally:
        client.close()


def notify_if_outdated(cfg: AppConfig) -> UpdateStatus | None:
    """Print the update banner when a newer release is published.

    Never raises; the notice must not break the command it precedes.
    """
    if not update_check_enabled(cfg):
        return None
    try:
        status = resolve_status(cfg)
        if status is None or not status.update_available:
            return status
        client = make_client(cfg)
        try:
            changes = fetch_changes(client, status.current, status.latest)
        finally:
            client.close()
    except Exception:
        logger.debug("Update check failed", exc_info=True)
        return None
    print_update_banner(status, changes)
    return status
