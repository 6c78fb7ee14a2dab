from __future__ import annotations

import logging
from dataclasses import dataclass

from .changelog import extract_range, has_version
from .client import ReleaseClient
from .errors import NetworkError, NotFoundError, UpnotesClientError
from .semver import is_newer

logger = logging.getLogger(__name__)

CHANGELOG_NOT_FOUND_MSG = (
    "Changelog file not found. The CHANGELOG.md file may have been moved or deleted from the repository."
)
CHANGELOG_FETCH_FAILED_MSG = "Failed to fetch changelog"


@dataclass(frozen=True)
class UpdateStatus:
    current: str
    latest: str
    update_available: bool


def version_not_found_msg(version: str) -> str:
    return (
        f"Version {version} not found in the changelog. This might indicate that the changelog "
        "hasn't been updated yet for this version, or the version format is incorrect "
        "(should be ## [version] (date))."
    )


def check_versions(client: ReleaseClient, current: str | None) -> UpdateStatus | None:
    """Compare the installed version with the published one.

    Returns None when either version is unknown, including when the
    metadata endpoint could not be reached.
    """
    try:
        latest = client.latest_version()
    except UpnotesClientError as exc:
        logger.debug("Failed to get the latest version: %s", exc)
        return None
    if not latest or not current:
        return None
    return UpdateStatus(current=current, latest=latest, update_available=is_newer(latest, current))


def changes_between(document: str, current: str, update: str) -> str:
    if not has_version(document, update):
        logger.debug(version_not_found_msg(update))
        return ""
    return extract_range(document, current, update)


def fetch_changes(client: ReleaseClient, current: str, update: str) -> str | None:
    """Release notes between two versions, or None when the changelog is unavailable."""
    try:
        document = client.changelog_text()
    except NotFoundError as exc:
        if isinstance(exc.__cause__, NetworkError):
            logger.debug(CHANGELOG_FETCH_FAILED_MSG)
        else:
            logger.debug(CHANGELOG_NOT_FOUND_MSG)
        logger.debug("Changelog fetch failed: %s", exc)
        return None
    return changes_between(document, current, update)
