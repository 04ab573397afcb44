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

from yarl import URL

from .resolver import Resolver, join_tags, first_item, url_from_user_input
from .web import WebSource


class WallhavenResolver(Resolver):
    host: ClassVar[str] = "wallhaven.cc"
    api_page: ClassVar[str] = "/api/v1/search"

    def build_request_url(self, tags: Sequence[str]) -> URL | None:
        return URL.build(scheme="https", host=self.host, path=self.api_page,
                         query_string=f"sorting=random&q={join_tags(tags)}", encoded=True)

    def parse_response(self, data: Any, request_url: URL) -> URL | None:
        if not isinstance(data, dict):
            return None
        wallpaper = first_item(data.get("data"))
        if wallpaper is None:
            return None
        return url_from_user_input(wallpaper.get("path"))


class Wallhaven(WebSource):
    type_name: ClassVar[str] = "wallhaven"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, resolver=WallhavenResolver(), **kwargs)
        self.title = "Wallhaven"

    def short_name(self) -> str:
        return "WallhavenSource"
