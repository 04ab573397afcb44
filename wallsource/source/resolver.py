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

from typing import Any, Sequence
from abc import ABC, abstractmethod
from urllib.parse import quote

from yarl import URL


class Resolver(ABC):
    """Turns a tag query into a JSON API request and the API response into an image URL.

    Implementations must be free of side effects, and :meth:`parse_response` must return
    ``None`` instead of raising when the response doesn't look like expected.
    """

    @abstractmethod
    def build_request_url(self, tags: Sequence[str]) -> URL | None:
        pass

    @abstractmethod
    def parse_response(self, data: Any, request_url: URL) -> URL | None:
        pass


def join_tags(tags: Sequence[str]) -> str:
    """Percent-encode each tag and join them with a literal ``+``, ready for an encoded query."""
    return "+".join(quote(tag, safe=":_-.()!*'~") for tag in tags)


def first_item(data: Any) -> dict | None:
    if not isinstance(data, list) or not data:
        return None
    item = data[0]
    return item if isinstance(item, dict) else None


def absolute_url(value: Any, request_url: URL) -> URL | None:
    """Parse an URL string from an API response.

    Scheme-relative URLs (``//host/path``) inherit the scheme of the request URL.
    """
    if not isinstance(value, str) or not value:
        return None
    if value.startswith("//"):
        value = f"{request_url.scheme}:{value}"
    try:
        url = URL(value)
    except ValueError:
        return None
    if not url.is_absolute() or not url.scheme:
        return None
    return url


def url_from_user_input(value: Any) -> URL | None:
    """Leniently parse an URL that's supposed to be absolute, assuming http if there's no scheme."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not value:
        return None
    try:
        url = URL(value)
        if not url.scheme or not url.host:
            url = URL(f"http://{value.lstrip('/')}")
    except ValueError:
        return None
    return url if url.host else None
