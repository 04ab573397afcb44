__version__ = "0.1.0"

from .fetcher import WallpaperFetcher
from .source import AbstractSource, Candidate

__all__ = ["WallpaperFetcher", "AbstractSource", "Candidate"]
