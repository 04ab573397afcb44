"""
Shared pytest fixtures for wallsource tests.

HTTP is replaced by FakeSession, which serves canned responses keyed by URL and
records every request made through it.
"""
import asyncio
import logging
from unittest.mock import MagicMock

import aiohttp
import pytest
from yarl import URL


class FakeResponse:
    def __init__(self, body: bytes = b"", status: int = 200):
        self.body = body
        self.status = status

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def read(self) -> bytes:
        # Yield to the loop like a real network read would
        await asyncio.sleep(0)
        return self.body

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise aiohttp.ClientResponseError(MagicMock(), (), status=self.status)


class FakeSession:
    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, url, body=b"", status=200):
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.routes[str(url)] = FakeResponse(body, status)

    def fail(self, url, error: Exception):
        self.routes[str(url)] = error

    def get(self, url, headers=None):
        self.requests.append((URL(str(url)), headers or {}))
        response = self.routes.get(str(url))
        if response is None:
            raise aiohttp.ClientConnectionError(f"no route for {url}")
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def urls(self):
        return [str(url) for url, _ in self.requests]


class FakeFetcher:
    def __init__(self, work_folder: str = "", user_agent: str = "wallsource-tests/1.0"):
        self.log = logging.getLogger("wallsource.tests")
        self.http = FakeSession()
        self.work_folder = work_folder
        self.user_agent = user_agent


class Recorder:
    """Collects everything a source emits."""

    def __init__(self, source):
        self.files = []
        self.messages = []
        source.add_file_ready_handler(self.files.append)
        source.add_message_handler(self.messages.append)


@pytest.fixture
def fetcher(tmp_path):
    return FakeFetcher(work_folder=str(tmp_path / "work"))
