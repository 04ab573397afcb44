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
from typing import Optional, Callable, cast
import logging
import os

import aiohttp

from mautrix.util.logging import TraceLogger

from . import __version__
from .config import Config
from .source import AbstractSource, Candidate

DEFAULT_USER_AGENT = ("Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/999.99 (KHTML, like Gecko) "
                      f"wallsource/{__version__}")


class WallpaperFetcher:
    config: Config
    log: TraceLogger
    http: Optional[aiohttp.ClientSession]
    source: Optional[AbstractSource]
    on_file: Optional[Callable[[str], None]]
    on_message: Optional[Callable[[str], None]]
    _own_http: bool

    def __init__(self, config: Config, http: Optional[aiohttp.ClientSession] = None,
                 log: Optional[TraceLogger] = None) -> None:
        self.config = config
        self.log = log or cast(TraceLogger, logging.getLogger("wallsource"))
        self.http = http
        self._own_http = http is None
        self.source = None
        self.on_file = None
        self.on_message = None

    @property
    def work_folder(self) -> str:
        folder = self.config["work_folder"]
        return os.path.expanduser(folder) if folder else ""

    @property
    def user_agent(self) -> str:
        return self.config["user_agent"] or DEFAULT_USER_AGENT

    async def start(self) -> None:
        if self.http is None:
            timeout = aiohttp.ClientTimeout(total=self.config["http.timeout"])
            self.http = aiohttp.ClientSession(timeout=timeout)
        self.source = AbstractSource.create(self, self.config["source"])
        self.source.add_file_ready_handler(self._file_ready)
        self.source.add_message_handler(self._user_message)
        await self.source.prepare()
        self.log.info(f"Using {self.source.short_name()} source "
                      f"({self.config['source.type']})")

    async def stop(self) -> None:
        if self._own_http and self.http is not None:
            await self.http.close()
            self.http = None

    def _file_ready(self, path: str) -> None:
        self.log.debug(f"{self.source.short_name()} produced {path}")
        if self.on_file:
            self.on_file(path)

    def _user_message(self, message: str) -> None:
        self.log.info(f"Message from {self.source.short_name()}: {message}")
        if self.on_message:
            self.on_message(message)

    async def fetch(self) -> Optional[Candidate]:
        try:
            return await self.source.fetch()
        except Exception:
            self.log.exception("Failed to fetch image")
            return None
