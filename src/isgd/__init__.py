"""is.gd URL shortener with a local cache and clipboard integration."""

__version__ = "0.1.0"
__author__ = "isgd contributors"

from .cache import UrlCache
from .client import IsgdClient, ShortenError
from .cli import Shortener, Mode
from .config import Config

__all__ = ["Config", "IsgdClient", "Mode", "ShortenError", "Shortener", "UrlCache"]
