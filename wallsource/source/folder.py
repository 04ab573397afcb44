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
from typing import ClassVar, Tuple
from pathlib import Path

from .filelist import FileListSource


class FolderSource(FileListSource):
    type_name: ClassVar[str] = "folder"
    extensions: ClassVar[Tuple[str, ...]] = (".jpg", ".png")

    def short_name(self) -> str:
        return "Folder"

    def process_path(self) -> None:
        self.files = []
        if not self.path:
            return
        folder = Path(self.path)
        try:
            self.files = [str(file.absolute()) for file in folder.iterdir()
                          if file.suffix.lower() in self.extensions and file.is_file()]
        except OSError as e:
            self.log.warning(f"Failed to scan {folder}: {e}")
        self.log.debug(f"Found {len(self.files)} images in {folder}")
