from __future__ import annotations

from importlib import metadata

DIST_NAME = "upnotes-cli"


def installed_version(dist_name: str) -> str | None:
    try:
        return metadata.version(dist_name)
    except metadata.PackageNotFoundError:
        return None


def cli_version() -> str:
    return installed_version(DIST_NAME) or "0.0.0"
