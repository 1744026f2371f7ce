"""
Runtime configuration for the shortener.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

APP_NAME = "isgd"
CACHE_FILENAME = "cache.jsonl"


def default_cache_file(environ: Mapping[str, str]) -> Path:
    """Location of the cache file under the user's cache home."""
    override = environ.get("ISGD_CACHE_FILE")
    if override:
        return Path(override).expanduser()

    cache_home = environ.get("XDG_CACHE_HOME")
    if cache_home:
        base = Path(cache_home).expanduser()
    else:
        base = Path.home() / ".cache"
    return base / APP_NAME / CACHE_FILENAME


@dataclass
class Config:
    cache_file: Path = field(default_factory=lambda: default_cache_file(os.environ))
    api_url: str = "https://is.gd/create.php"
    provider_host: str = "is.gd"
    # is.gd `opt` field: 2 asks for lower-case pronounceable slugs
    slug_option: str = "2"
    response_format: str = "simple"
    notify_command: str = "notify-send"
    app_name: str = APP_NAME
    verbose: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Config":
        """Build a config from the environment, then apply explicit overrides."""
        if environ is None:
            environ = os.environ
        values = {"cache_file": default_cache_file(environ)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        values["cache_file"] = Path(values["cache_file"]).expanduser()
        return cls(**values)
