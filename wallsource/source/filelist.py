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

from typing import ClassVar
import random

from .file import FileSource


class FileListSource(FileSource):
    type_name: ClassVar[str] = "filelist"
    files: list[str]
    rng: random.Random

    def __init__(self, *args, seed: int | None = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.files = []
        if seed is None:
            seed = self.config.get("seed")
        if seed is None:
            seed = random.SystemRandom().getrandbits(64)
        self.rng = random.Random(seed)

    def short_name(self) -> str:
        return "FileList"

    def process_path(self) -> None:
        if not self.path:
            self.files = []
            return
        try:
            with open(self.path, encoding="utf-8") as file:
                lines = file.readlines()
        except OSError as e:
            self.log.warning(f"Failed to read file list from {self.path}: {e}")
            return
        self.files = [line.strip() for line in lines if line.strip()]
        self.log.debug(f"Loaded {len(self.files)} paths from {self.path}")

    def pick_file(self) -> str:
        if not self.files:
            return super().pick_file()
        return self.rng.choice(self.files)
