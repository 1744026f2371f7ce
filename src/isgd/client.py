"""
Client for the is.gd shortening API.
"""

from typing import Optional

import requests

from .config import Config


class ShortenError(RuntimeError):
    """The remote API did not return a usable short URL."""


class IsgdClient:
    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def shorten(self, url: str) -> str:
        """POST url to the API and return the shortened URL text."""
        data = {
            "url": url,
            "opt": self.config.slug_option,
            "format": self.config.response_format,
        }
        try:
            response = self.session.post(self.config.api_url, data=data)
            response.raise_for_status()
        except requests.RequestException as e:
            raise ShortenError(f"Request to {self.config.api_url} failed: {e}")

        short = response.text.strip()
        if not short:
            raise ShortenError("Empty response from shortening service")
        if short.lower().startswith("error"):
            raise ShortenError(short)
        return short
