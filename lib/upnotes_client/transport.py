from __future__ import annotations

import httpx

from .config_types import ClientConfig
from .errors import ApiError, NetworkError


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        headers = {"User-Agent": f"upnotes-client/{cfg.client_version or '0.0.0'}"}
        self._client = httpx.Client(
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def request(self, method: str, url: str) -> httpx.Response:
        try:
            r = self._client.request(method, url)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        if r.status_code >= 400:
            msg = f"{method} {url} failed with {r.status_code}"
            details = r.text[:1000] if r.text else None
            raise ApiError(r.status_code, msg, details)
        return r
