"""Pytest configuration and fixtures."""

from pathlib import Path

import httpx
import pytest

from gasmflux.core.scraper import SoundgasmClient

DATA_DIR = Path(__file__).parent / "data"

BASE_URL = "https://soundgasm.net"
ITEM_URL = f"{BASE_URL}/u/alice/Rainy-Evening"
LISTING_URL = f"{BASE_URL}/u/alice"
EMPTY_LISTING_URL = f"{BASE_URL}/u/nobody"


def load_page(name):
    return (DATA_DIR / name).read_text(encoding="utf-8")


class FakeSite:
    """Serves canned pages through httpx.MockTransport and records every request."""

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.requests = []

    def handler(self, request):
        url = str(request.url)
        self.requests.append(url)
        if url not in self.pages:
            return httpx.Response(404, text="Not Found")
        return httpx.Response(200, text=self.pages[url])

    def count(self, url):
        return self.requests.count(url)


@pytest.fixture
def site():
    item_page = load_page("item_page.html")
    return FakeSite({
        ITEM_URL: item_page,
        f"{BASE_URL}/u/alice/Morning-Birds": item_page,
        f"{BASE_URL}/u/alice/Night-Train": item_page,
        LISTING_URL: load_page("listing_page.html"),
        EMPTY_LISTING_URL: load_page("empty_listing_page.html"),
    })


@pytest.fixture
def http_client(site):
    with httpx.Client(transport=httpx.MockTransport(site.handler)) as client:
        yield client


@pytest.fixture
def client(http_client):
    return SoundgasmClient(client=http_client)
