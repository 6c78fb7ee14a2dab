from __future__ import annotations

from upnotes_client import ReleaseClient
from upnotes_client.config_types import ClientConfig

from .config import AppConfig, resolve_changelog_url, resolve_package_url
from .version import cli_version


def make_client(
    cfg: AppConfig,
    *,
    package_url_override: str | None = None,
    changelog_url_override: str | None = None,
) -> ReleaseClient:
    package_url = (package_url_override or resolve_package_url(cfg)).strip()
    changelog_url = (changelog_url_override or resolve_changelog_url(cfg)).strip()
    return ReleaseClient(
        ClientConfig(
            package_url=package_url,
            changelog_url=changelog_url,
            timeout_s=cfg.timeout_s,
            client_version=cli_version(),
        )
    )
