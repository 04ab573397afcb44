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
from typing import Any, ClassVar, Iterable

from .filelist import FileListSource


class DropSource(FileListSource):
    type_name: ClassVar[str] = "drop"

    async def prepare(self) -> None:
        self.set_field(self.config.get("files", []))

    def short_name(self) -> str:
        return "Drop"

    def process_path(self) -> None:
        pass

    @property
    def field(self) -> Any:
        return list(self.files)

    def set_field(self, value: Any) -> None:
        self.set_files(value or [])

    def set_files(self, files: Iterable[str]) -> None:
        self.files = [str(file) for file in files]
        self.last_file = ""
