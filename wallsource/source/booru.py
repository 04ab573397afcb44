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

from typing import Any, ClassVar, Sequence
from urllib.parse import quote

from attr import dataclass
from yarl import URL

from .resolver import Resolver, join_tags, first_item, absolute_url
from .web import WebSource


@dataclass
class BooruResolver(Resolver):
    host: str = ""
    api_page: str = ""

    def build_request_url(self, tags: Sequence[str]) -> URL | None:
        if not self.host:
            return None
        path = self.api_page if self.api_page.startswith("/") else f"/{self.api_page}"
        try:
            return URL.build(scheme="https", host=self.host, path=quote(path),
                             query_string=f"limit=1&random=true&tags={join_tags(tags)}",
                             encoded=True)
        except ValueError:
            return None

    def parse_response(self, data: Any, request_url: URL) -> URL | None:
        post = first_item(data)
        if post is None:
            return None
        return absolute_url(post.get("file_url"), request_url)


class Booru(WebSource):
    type_name: ClassVar[str] = "booru"
    resolver: BooruResolver

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, resolver=BooruResolver(), **kwargs)
        self.title = "Unnamed booru source"

    async def prepare(self) -> None:
        await super().prepare()
        self.set_host(self.config.get("host", ""))
        self.set_api_page(self.config.get("api_page", ""))

    def short_name(self) -> str:
        return self.resolver.host

    def set_host(self, host: str) -> None:
        self.resolver.host = host

    def set_api_page(self, api_page: str) -> None:
        self.resolver.api_page = api_page
