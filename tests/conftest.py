"""Test fixtures: sample RAE pages and a recording mock transport."""

from pathlib import Path

import httpx
import pytest

SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples"

CHALLENGE_CODE = "HOVC:rb7kXuTm:3505"  # value computed by samples/rae_challenge.html


def _read(name: str) -> str:
    return (SAMPLES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture()
def challenge_code() -> str:
    return CHALLENGE_CODE


@pytest.fixture()
def challenge_html() -> str:
    return _read("rae_challenge.html")


@pytest.fixture()
def disambiguation_html() -> str:
    return _read("rae_disambiguation.html")


@pytest.fixture()
def definition_html() -> str:
    return _read("rae_definition.html")


class FakeRae:
    """Serve canned pages and record every request made."""

    def __init__(self, get_page: str = "", post_page: str = "",
                 get_status: int = 200, post_status: int = 200) -> None:
        self.get_page = get_page
        self.post_page = post_page
        self.get_status = get_status
        self.post_status = post_status
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET":
            return httpx.Response(self.get_status, text=self.get_page)
        return httpx.Response(self.post_status, text=self.post_page)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    @property
    def methods(self) -> list[str]:
        return [r.method for r in self.requests]


@pytest.fixture()
def fake_rae() -> FakeRae:
    return FakeRae()
