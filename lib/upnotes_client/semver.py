from __future__ import annotations

import re

_SEMVER_RE = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)$")


def parse_semver(text: str) -> tuple[int, int, int] | None:
    m = _SEMVER_RE.match((text or "").strip())
    if not m:
        return None
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def _parts(version: str) -> list[int | None]:
    out: list[int | None] = []
    for part in version.split("."):
        part = part.strip()
        if not part:
            out.append(0)
        else:
            out.append(int(part) if part.isdecimal() else None)
    return out


def is_newer(latest: str, current: str) -> bool:
    """Return True when ``latest`` is strictly newer than ``current``.

    Components are compared left to right over the length of ``latest``.
    A component that is not a plain integer, or one that ``current`` lacks,
    counts as a difference that is never "newer". An empty component
    (``"1..5"``) reads as 0. Equal versions, and a ``latest`` that is a
    prefix of ``current``, are not newer.
    """
    latest_parts = _parts(latest)
    current_parts = _parts(current)
    for i, lp in enumerate(latest_parts):
        cp = current_parts[i] if i < len(current_parts) else None
        if lp is None or cp is None:
            return False
        if lp != cp:
            return lp > cp
    return False
