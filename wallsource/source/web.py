# wallsource - Interchangeable image sources for wallpaper rotators.
# Copyright (C) 2026 wallsource contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
from __future__ import annotations

from typing import Any, ClassVar
from pathlib import Path, PurePosixPath
import mimetypes
import asyncio
import json
import re

from yarl import URL
import aiohttp
import magic

from mautrix.util import background_task

from .abstract import Candidate
from .file import FileSource
from .resolver import Resolver

NO_RESULTS_MESSAGE = "JSON reply empty or null.\nWas there no images with that tag?"
extension_regex = re.compile(r"^\.[A-Za-z0-9]{1,10}$")


def guess_extension(url: URL, data: bytes) -> str:
    ext = PurePosixPath(url.path).suffix
    if extension_regex.match(ext):
        return ext
    try:
        mimetype = magic.from_buffer(data, mime=True)
    except magic.MagicException:
        return ""
    return mimetypes.guess_extension(mimetype) or ""


class WebSource(FileSource):
    """Fetches a random image from a JSON API.

    Fetching is done in two steps: first the API is queried with the URL built by the
    resolver, then the image URL the resolver found in the response is downloaded into
    ``<work_folder>/dl/``. If the API doesn't return anything usable, the source falls back
    to emitting the last local file it had.
    """

    type_name: ClassVar[str] = None
    resolver: Resolver | None
    tags: list[str]
    title: str
    work_folder: str
    user_agent: str
    _source: URL
    _fetching: bool

    def __init__(self, *args, resolver: Resolver | None = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.resolver = resolver
        self.tags = []
        self.title = "Unnamed web source"
        self.work_folder = ""
        self.user_agent = self.fetcher.user_agent
        self._source = URL()
        self._fetching = False

    async def prepare(self) -> None:
        self.set_path(self.config.get("path", ""))
        self.set_field(self.config.get("tags", []))
        self.set_work_folder(self.config.get("work_folder") or self.fetcher.work_folder or "")
        if "title" in self.config:
            self.title = self.config["title"]
        if "user_agent" in self.config:
            self.user_agent = self.config["user_agent"]

    def short_name(self) -> str:
        return "WebSource"

    @property
    def source(self) -> URL:
        return self._source

    @property
    def field(self) -> Any:
        return list(self.tags)

    def set_field(self, value: Any) -> None:
        if isinstance(value, str):
            value = value.split()
        self.tags = [str(tag) for tag in value or []]

    def set_work_folder(self, folder: str) -> None:
        self.work_folder = folder

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}

    def fetch_file(self) -> asyncio.Task:
        return background_task.create(self.fetch())

    async def fetch(self) -> Candidate | None:
        if not self.work_folder:
            self.log.debug("No work folder configured, not fetching")
            return None
        if self.resolver is None:
            self.log.debug("No resolver configured, not fetching")
            return None
        url = self.resolver.build_request_url(self.tags)
        if url is None:
            self.log.debug("Resolver couldn't build request URL, not fetching")
            return None
        if self._fetching:
            self.log.warning("Previous fetch is still in progress, ignoring new fetch")
            return None
        self._fetching = True
        try:
            return await self._fetch(url)
        finally:
            self._fetching = False

    async def _fetch(self, url: URL) -> Candidate | None:
        image_url = await self._request_json(url)
        if image_url is None:
            return self._no_results()
        try:
            data = await self._request_file(image_url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.log.error(f"Failed to download {image_url}: {e}")
            self.emit_message(f"Failed to download image from {image_url.host}")
            return self.fetch_local()
        try:
            path = self.store_temp_file(data, guess_extension(image_url, data))
        except (OSError, ValueError):
            self.log.exception(f"Failed to save image from {image_url}")
            self.emit_message(f"Failed to save downloaded image to {self.work_folder}")
            return None
        self._source = image_url
        self.path = self.last_file = str(path)
        self.emit_file_ready(self.path)
        return Candidate(source_url=image_url, path=self.path)

    def _no_results(self) -> Candidate | None:
        self.emit_message(NO_RESULTS_MESSAGE)
        return self.fetch_local()

    async def _request_json(self, url: URL) -> URL | None:
        self.log.debug(f"Requesting {url}")
        try:
            async with self.fetcher.http.get(url, headers=self.headers) as resp:
                if resp.status >= 400:
                    self.log.warning(f"Got HTTP {resp.status} from {url}")
                    return None
                body = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.log.warning(f"Failed to request {url}: {e}")
            return None
        if not body.strip():
            return None
        try:
            data = json.loads(body)
        except (ValueError, RecursionError):
            self.log.warning(f"Got non-JSON response from {url}")
            return None
        if not data:
            return None
        image_url = self.resolver.parse_response(data, url)
        if image_url is None:
            self.log.debug(f"No image found in response from {url}")
        return image_url

    async def _request_file(self, url: URL) -> bytes:
        self.log.debug(f"Downloading {url}")
        async with self.fetcher.http.get(url, headers=self.headers) as resp:
            resp.raise_for_status()
            return await resp.read()

    def store_temp_file(self, data: bytes, ext: str) -> Path:
        folder = Path(self.work_folder, "dl")
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / f"image{ext}"
        path.write_bytes(data)
        self.log.debug(f"Stored {len(data)} bytes to {path}")
        return path
