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
from typing import (NamedTuple, Type, Optional, Dict, Any, List, Callable, ClassVar, Awaitable,
                    Union, TYPE_CHECKING)
from abc import ABC, abstractmethod
import asyncio
import inspect

from yarl import URL

from mautrix.util import background_task
from mautrix.util.logging import TraceLogger

if TYPE_CHECKING:
    from ..fetcher import WallpaperFetcher


class Candidate(NamedTuple):
    source_url: URL
    path: str


FileReadyHandler = Callable[[str], Union[None, Awaitable[None]]]
MessageHandler = Callable[[str], Union[None, Awaitable[None]]]


class AbstractSource(ABC):
    type_name: ClassVar[str] = None
    all: ClassVar[Dict[str, Type['AbstractSource']]] = {}
    fetcher: 'WallpaperFetcher'
    log: TraceLogger
    config: Dict[str, Any]
    _file_ready_handlers: List[FileReadyHandler]
    _message_handlers: List[MessageHandler]

    def __init__(self, fetcher: 'WallpaperFetcher', config: Dict[str, Any]) -> None:
        self.fetcher = fetcher
        self.log = fetcher.log.getChild("source").getChild(self.__class__.__name__.lower())
        self.config = config
        self._file_ready_handlers = []
        self._message_handlers = []

    async def prepare(self) -> None:
        pass

    @abstractmethod
    def short_name(self) -> str:
        pass

    @property
    @abstractmethod
    def source(self) -> URL:
        """The origin of the most recently produced candidate."""

    @property
    @abstractmethod
    def field(self) -> Any:
        pass

    @abstractmethod
    def set_field(self, value: Any) -> None:
        """Replace the source-specific configuration value.

        Anything derived from the value (e.g. a file list) is rebuilt before this returns.
        """

    @abstractmethod
    async def fetch(self) -> Optional[Candidate]:
        """Produce one candidate, emit the ready event for it and return it.

        Returns ``None`` when nothing could be produced.
        """

    @abstractmethod
    def fetch_file(self) -> Optional[asyncio.Task]:
        """Start producing one candidate without waiting for it.

        The result is only delivered through the file ready handlers. Sources that need to
        wait for something return the background task doing the work.
        """

    def add_file_ready_handler(self, handler: FileReadyHandler) -> None:
        self._file_ready_handlers.append(handler)

    def add_message_handler(self, handler: MessageHandler) -> None:
        self._message_handlers.append(handler)

    def _emit(self, handlers: List[Callable[[str], Any]], value: str) -> None:
        for handler in handlers:
            try:
                ret = handler(value)
            except Exception:
                self.log.exception(f"Error in handler {handler!r}")
                continue
            if inspect.iscoroutine(ret):
                background_task.create(ret)

    def emit_file_ready(self, path: str) -> None:
        self.log.debug(f"Next file: {path}")
        self._emit(self._file_ready_handlers, path)

    def emit_message(self, message: str) -> None:
        self._emit(self._message_handlers, message)

    @classmethod
    def register(cls, source_cls: Type['AbstractSource']) -> None:
        if source_cls.type_name:
            cls.all[source_cls.type_name.lower()] = source_cls
        for subclass in source_cls.__subclasses__():
            cls.register(subclass)

    @classmethod
    def create(cls, fetcher: 'WallpaperFetcher', config: Dict[str, Any]) -> 'AbstractSource':
        type_cls = cls.all[config["type"].lower()]
        return type_cls(fetcher, config.get("config") or {})

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.short_name()!r}>"
