import httpx
import pytest

from upnotes_client import ReleaseClient
from upnotes_client.config_types import ClientConfig
from upnotes_client.errors import ApiError, NetworkError, NotFoundError

PACKAGE_URL = "https://releases.example.test/package.json"
CHANGELOG_URL = "https://releases.example.test/CHANGELOG.md"


def _client(handler) -> ReleaseClient:
    cfg = ClientConfig(package_url=PACKAGE_URL, changelog_url=CHANGELOG_URL, client_version="1.0.0")
    return ReleaseClient(cfg, transport=httpx.MockTransport(handler))


def test_latest_version_from_package_json() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["ua"] = request.headers.get("User-Agent")
        return httpx.Response(200, json={"name": "upnotes-cli", "version": "1.4.0"})

    with _client(handler) as client:
        assert client.latest_version() == "1.4.0"
    assert seen["url"] == PACKAGE_URL
    assert seen["ua"] == "upnotes-client/1.0.0"


def test_latest_version_from_pypi_json() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"info": {"version": "2.0.1"}, "releases": {}})

    with _client(handler) as client:
        assert client.latest_version() == "2.0.1"


def test_latest_version_missing_field() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"name": "upnotes-cli"})

    with _client(handler) as client:
        assert client.latest_version() is None


def test_latest_version_not_json() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    with _client(handler) as client:
        assert client.latest_version() is None


def test_latest_version_http_error() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="Internal Server Error")

    with _client(handler) as client:
        with pytest.raises(ApiError) as exc:
            client.latest_version()
    assert exc.value.status_code == 500
    assert exc.value.details == "Internal Server Error"


def test_latest_version_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _client(handler) as client:
        with pytest.raises(NetworkError):
            client.latest_version()


def test_changelog_text() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == CHANGELOG_URL
        return httpx.Response(200, text="# Changelog\n\n## [1.0.0] (05/06/2025)\n- Initial release")

    with _client(handler) as client:
        assert client.changelog_text().endswith("- Initial release")


def test_changelog_404_raises_not_found() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="Not Found")

    with _client(handler) as client:
        with pytest.raises(NotFoundError) as exc:
            client.changelog_text()
    assert exc.value.status_code == 404


def test_changelog_non_200_success_raises_not_found() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    with _client(handler) as client:
        with pytest.raises(NotFoundError):
            client.changelog_text()


def test_changelog_transport_failure_raises_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with _client(handler) as client:
        with pytest.raises(NotFoundError) as exc:
            client.changelog_text()
    assert isinstance(exc.value.__cause__, NetworkError)
