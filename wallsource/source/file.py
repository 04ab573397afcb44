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
from typing import Any, Optional, ClassVar
from pathlib import Path
import asyncio

from yarl import URL

from .abstract import AbstractSource, Candidate


def _file_url(path: str) -> URL:
    if not path:
        return URL()
    return URL(Path(path).absolute().as_uri())


class FileSource(AbstractSource):
    type_name: ClassVar[str] = "file"
    path: str
    last_file: str

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.path = ""
        self.last_file = ""

    async def prepare(self) -> None:
        self.set_field(self.config.get("path", ""))

    def short_name(self) -> str:
        return "File"

    @property
    def source(self) -> URL:
        return _file_url(self.last_file or self.path)

    @property
    def field(self) -> Any:
        return self.path

    def set_field(self, value: Any) -> None:
        self.set_path(str(value) if value else "")

    def set_path(self, path: str) -> None:
        self.path = path
        self.last_file = ""
        self.process_path()

    def process_path(self) -> None:
        pass

    def pick_file(self) -> str:
        return self.path

    def fetch_local(self) -> Optional[Candidate]:
        path = self.pick_file()
        if not path:
            self.log.debug("No path configured, not emitting anything")
            return None
        self.last_file = path
        self.emit_file_ready(path)
        return Candidate(source_url=_file_url(path), path=path)

    async def fetch(self) -> Optional[Candidate]:
        return self.fetch_local()

    def fetch_file(self) -> Optional[asyncio.Task]:
        self.fetch_local()
        return None
