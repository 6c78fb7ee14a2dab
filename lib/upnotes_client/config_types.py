from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ClientConfig:
    package_url: str
    changelog_url: str
    timeout_s: float = 15.0
    client_version: str | None = None
