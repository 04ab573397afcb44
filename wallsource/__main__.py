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
from typing import List, Optional
from importlib.resources import files as resource_files
import logging.config
import argparse
import asyncio
import copy
import sys
import os

from . import __version__
from .config import Config
from .fetcher import WallpaperFetcher


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wallsource",
                                     description="Fetch images from a wallpaper source.")
    parser.add_argument("-c", "--config", default="config.yaml", metavar="<path>",
                        help="the path to your config file")
    parser.add_argument("-n", "--count", type=int, default=1, metavar="<count>",
                        help="how many images to fetch")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(args)


async def run(fetcher: WallpaperFetcher, count: int) -> int:
    fetcher.on_message = lambda message: print(message, file=sys.stderr)
    await fetcher.start()
    produced = 0
    try:
        for _ in range(count):
            candidate = await fetcher.fetch()
            if candidate is None:
                continue
            # Downloaded images share one path, so the consumer has to read it before the next fetch
            print(candidate.path, flush=True)
            produced += 1
    finally:
        await fetcher.stop()
    return 0 if produced else 1


def main(args: Optional[List[str]] = None) -> None:
    opts = parse_args(args)
    if not os.path.exists(opts.config):
        example = resource_files("wallsource") / "example-config.yaml"
        with open(opts.config, "wb") as file:
            file.write(example.read_bytes())
        print(f"Wrote example config to {opts.config}, edit it and run again", file=sys.stderr)
        sys.exit(1)
    config = Config(opts.config)
    config.load_and_update()
    logging.config.dictConfig(copy.deepcopy(config["logging"]))
    fetcher = WallpaperFetcher(config)
    sys.exit(asyncio.run(run(fetcher, opts.count)))


if __name__ == "__main__":
    main()
