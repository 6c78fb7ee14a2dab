from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SECTION_MARKER = "## ["
LABEL_OPEN = "["
LABEL_CLOSE = "]"


@dataclass(frozen=True)
class VersionSection:
    label: str
    body: str


def split_sections(document: str) -> list[VersionSection]:
    """Split a changelog into version sections, newest first.

    Everything before the first ``## [`` marker is preamble and dropped.
    The label is the text up to the first ``]`` of the chunk (the whole
    chunk when the header never closes its bracket).
    """
    chunks = (document or "").split(SECTION_MARKER)[1:]
    sections: list[VersionSection] = []
    for chunk in chunks:
        label = chunk.split(LABEL_CLOSE, 1)[0]
        body = LABEL_OPEN + chunk.strip()
        sections.append(VersionSection(label=label, body=body))
    return sections


def has_version(document: str, version: str) -> bool:
    return any(section.label == version for section in split_sections(document))


def select_range(
    sections: list[VersionSection],
    current_version: str,
    update_version: str,
) -> list[VersionSection]:
    """Sections from ``update_version`` down to, not including, ``current_version``."""
    collecting = False
    collected: list[VersionSection] = []
    for section in sections:
        if section.label == update_version:
            collecting = True
            collected.append(section)
        elif collecting and section.label == current_version:
            break
        elif collecting:
            collected.append(section)
    return collected


def extract_range(document: str, current_version: str, update_version: str) -> str:
    """Release notes gained by upgrading from ``current_version`` to ``update_version``.

    Bodies are joined by a blank line in document order. Returns an empty
    string when ``update_version`` has no section, and also when anything
    goes wrong while parsing.
    """
    try:
        sections = split_sections(document)
        selected = select_range(sections, current_version, update_version)
        return "\n\n".join(section.body for section in selected)
    except Exception:
        logger.debug("Failed to parse changelog", exc_info=True)
        return ""
