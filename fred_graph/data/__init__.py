"""Transport, URL building and result collection."""

from .transport import HttpxDownloader, UrlDownloader
from .pagination import fetch_all_pages
from .runner import LoopRunner

__all__ = ["HttpxDownloader", "UrlDownloader", "fetch_all_pages", "LoopRunner"]
