from pathlib import Path

import httpx
import pytest

import threadgrab


@pytest.fixture
def fixture_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixture_dir):
    def _loader(name: str) -> str:
        with open(fixture_dir / name, "r", encoding="utf-8") as f:
            return f.read()
    return _loader


@pytest.fixture
def post_video_html(load_fixture):
    return load_fixture("post_video.html")


@pytest.fixture
def make_page():
    def _make(html: str, status_code: int = 200) -> threadgrab.FetchedPage:
        return threadgrab.FetchedPage(html=html, status_code=status_code,
                                      url="https://www.threads.net/@user/post/ABC123")
    return _make


class MockHTTPXClient:
    def __init__(self, routes: dict[tuple[str, str], object] | None = None):
        self.routes = routes or {}
        self.closed = False
        self.headers = {}
        self.calls = []

    def request(self, method: str, url: str, **kwargs):
        self.calls.append((method.upper(), url, kwargs))
        key = (method.upper(), url)
        if key in self.routes:
            resp = self.routes[key]
            if isinstance(resp, Exception):
                raise resp
            return resp
        return httpx.Response(404, request=httpx.Request(method, url), text="")

    def get(self, url: str, **kwargs):
        return self.request("GET", url, **kwargs)

    def close(self):
        self.closed = True


@pytest.fixture
def mock_httpx_client(monkeypatch):
    holder = {"instance": None}

    def _factory(routes=None):
        inst = MockHTTPXClient(routes=routes)
        holder["instance"] = inst
        monkeypatch.setattr(threadgrab.http.httpx, "Client", lambda *a, **k: inst)
        return inst

    return _factory


@pytest.fixture
def html_response():
    def _make(url: str, html: str, status_code: int = 200) -> httpx.Response:
        return httpx.Response(status_code, request=httpx.Request("GET", url), text=html)
    return _make


@pytest.fixture
def mock_client_cls():
    return MockHTTPXClient
