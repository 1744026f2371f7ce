"""URL checks."""

import re
from urllib.parse import urlsplit

SAMPLE_URL = "https://www.example.com/some/long/path?with=query&and=more"

URL_PATTERN = re.compile(
    r"^https?://"
    r"(?:[A-Za-z0-9-]+\.)+[A-Za-z0-9]{2,}"
    r"(?::\d+)?"
    r"(?:[/?#]\S*)?$"
)


def is_valid_url(text: str) -> bool:
    """Return True if text looks like an http(s) URL with a dotted host."""
    if not text:
        return False
    try:
        # undecodable argv bytes arrive as lone surrogates
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return URL_PATTERN.match(text) is not None


def host_of(url: str) -> str:
    try:
        return (urlsplit(url).hostname or "").lower()
    except ValueError:
        return ""
