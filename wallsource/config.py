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
from mautrix.util.config import BaseFileConfig, ConfigUpdateHelper

BASE_PATH = "pkg://wallsource/example-config.yaml"


class Config(BaseFileConfig):
    def __init__(self, path: str, base_path: str = BASE_PATH) -> None:
        super().__init__(path, base_path)

    def do_update(self, helper: ConfigUpdateHelper) -> None:
        helper.copy("work_folder")
        helper.copy("user_agent")
        helper.copy("http.timeout")
        helper.copy("source.type")
        helper.copy("source.config")
        helper.copy("logging")
