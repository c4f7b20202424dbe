"""Pytest configuration and shared fixtures."""

import pytest

from fred_graph.data.client import Fred, FredClient
from fred_samples import TODAY, MockDownloader


@pytest.fixture
def downloader():
    return MockDownloader()


@pytest.fixture
def client(downloader):
    """FredClient with key 'key', the fake transport and 'today' pinned to 2013-08-14."""
    fred_client = FredClient("key", downloader=downloader, clock=lambda: TODAY)
    yield fred_client
    fred_client.close()


@pytest.fixture
def fred(downloader):
    """Blocking facade over the same fake transport."""
    facade = Fred("key", downloader=downloader, clock=lambda: TODAY)
    yield facade
    facade.close()
