from __future__ import annotations

from typing import Any

import httpx

from .config_types import ClientConfig
from .errors import ApiError, NetworkError, NotFoundError
from .transport import Transport


class ReleaseClient:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        self._t = Transport(cfg, transport=transport)

    def __enter__(self) -> "ReleaseClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._t.close()

    def latest_version(self) -> str | None:
        """Version published at the package metadata URL.

        Accepts a package.json-like document (``{"version": ...}``) as well
        as the PyPI JSON API shape (``{"info": {"version": ...}}``).
        """
        r = self._t.request("GET", self._cfg.package_url)
        try:
            data = r.json()
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        version = data.get("version")
        if version is None and isinstance(data.get("info"), dict):
            version = data["info"].get("version")
        if isinstance(version, str) and version.strip():
            return version.strip()
        return None

    def changelog_text(self) -> str:
        url = self._cfg.changelog_url
        try:
            r = self._t.request("GET", url)
        except ApiError as exc:
            raise NotFoundError(exc.status_code, f"changelog not available at {url}", exc.details) from exc
        except NetworkError as exc:
            raise NotFoundError(0, f"changelog not available at {url}", str(exc)) from exc
        if r.status_code != 200:
            raise NotFoundError(r.status_code, f"changelog not available at {url}", None)
        return r.text
