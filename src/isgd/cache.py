"""
On-disk cache of shortened URLs.

One JSON object per line: {"url": <original>, "short": <shortened>}.
Later lines win over earlier ones for the same URL.
"""

import json
import os
import sys
import tempfile
from contextlib import contextmanager
from typing import Dict, Iterator, Optional, TextIO

try:
    import fcntl
    HAS_FLOCK = True
except ImportError:
    HAS_FLOCK = False

from .config import Config
from .urls import host_of


class UrlCache:
    def __init__(self, config: Config):
        self.config = config
        self.path = config.cache_file

    def is_short(self, url: str) -> bool:
        """True if the URL already lives on the shortening provider's domain."""
        host = host_of(url)
        provider = self.config.provider_host.lower()
        return host == provider or host.endswith("." + provider)

    def get(self, url: str) -> Optional[str]:
        """Return the cached short URL for url, or None on a miss."""
        if self.is_short(url):
            return url
        if not self.path.exists():
            return None
        with self.path.open("r", encoding="utf-8", errors="replace") as handle:
            return self._read(handle).get(url)

    def put(self, url: str, shortened: str) -> None:
        """Store or overwrite the short URL for url.

        The merged entries go to a temporary file that replaces the cache
        only once it is fully written, so a failed write leaves the old
        cache intact.
        """
        if not shortened:
            raise ValueError(f"Refusing to cache an empty short URL for {url}")

        with self._locked():
            entries = self.entries()
            entries[url] = shortened
            fd, tmp_name = tempfile.mkstemp(prefix=".cache-", suffix=".tmp", dir=str(self.path.parent))
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    for key, value in entries.items():
                        handle.write(json.dumps({"url": key, "short": value}, ensure_ascii=False) + "\n")
                os.replace(tmp_name, str(self.path))
            except BaseException:
                os.unlink(tmp_name)
                raise

    def entries(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8", errors="replace") as handle:
            return self._read(handle)

    @contextmanager
    def _locked(self) -> Iterator[None]:
        """Hold an advisory lock on a sidecar lock file, if the platform has one."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        lock_path = self.path.with_name(self.path.name + ".lock")
        with lock_path.open("a") as lock:
            if HAS_FLOCK:
                fcntl.flock(lock.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                if HAS_FLOCK:
                    fcntl.flock(lock.fileno(), fcntl.LOCK_UN)

    def _read(self, handle: TextIO) -> Dict[str, str]:
        entries: Dict[str, str] = {}
        for lineno, line in enumerate(handle, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
                url, short = record["url"], record["short"]
                if not isinstance(url, str) or not isinstance(short, str):
                    raise TypeError("url and short must be strings")
            except (ValueError, KeyError, TypeError):
                print(f"Warning: skipping malformed cache line {lineno} in {self.path}", file=sys.stderr)
                continue
            # dict keeps first-insertion order; move the key to the latest position
            entries.pop(url, None)
            entries[url] = short
        return entries
