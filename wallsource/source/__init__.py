from .abstract import AbstractSource, Candidate
from .file import FileSource
from .filelist import FileListSource
from .folder import FolderSource
from .drop import DropSource
from .resolver import Resolver
from .web import WebSource, NO_RESULTS_MESSAGE
from .booru import Booru, BooruResolver
from .wallhaven import Wallhaven, WallhavenResolver

for source in AbstractSource.__subclasses__():
    AbstractSource.register(source)

__all__ = ["AbstractSource", "Candidate", "FileSource", "FileListSource", "FolderSource",
           "DropSource", "Resolver", "WebSource", "NO_RESULTS_MESSAGE", "Booru", "BooruResolver",
           "Wallhaven", "WallhavenResolver"]
