#!/usr/bin/env python3
"""
is.gd URL shortener with a local cache, clipboard and notification support.
"""

import sys
import select
from enum import Enum
from typing import Optional

import click

from .cache import UrlCache
from .client import IsgdClient, ShortenError
from .config import Config
from .desktop import notify, read_clipboard, write_clipboard
from .urls import SAMPLE_URL, is_valid_url


class Mode(Enum):
    PLAIN = "plain"
    CLIPBOARD = "clipboard"
    SELECTION = "selection"


def mode_for_name(prog_name: Optional[str]) -> Mode:
    """Pick the output mode from the name the tool was invoked as."""
    name = (prog_name or "").rsplit("/", 1)[-1]
    if name.endswith(".py"):
        name = name[:-3]
    return {"isgdc": Mode.CLIPBOARD, "isgds": Mode.SELECTION}.get(name, Mode.PLAIN)


def stdout_is_terminal() -> bool:
    """Whether the result is going to a visible terminal."""
    return sys.stdout.isatty()


class Shortener:
    def __init__(self, config: Config, cache: Optional[UrlCache] = None,
                 client: Optional[IsgdClient] = None, usage: str = ""):
        self.config = config
        self.cache = cache or UrlCache(config)
        self.client = client or IsgdClient(config)
        self.usage = usage

    def _trace(self, message: str) -> None:
        if self.config.verbose:
            print(f"[isgd] {message}", file=sys.stderr)

    def _has_stdin_data(self) -> bool:
        """Check if there's data available on stdin without blocking."""
        if sys.stdin.isatty():
            return False

        if hasattr(select, 'select'):
            ready, _, _ = select.select([sys.stdin], [], [], 0)
            return bool(ready)
        else:
            return not sys.stdin.isatty()

    def resolve_input(self, argument: Optional[str], mode: Mode) -> str:
        """Pick the URL from the argument, piped stdin or the clipboard, in that order."""
        selection = mode is Mode.SELECTION

        if argument:
            self._trace("input from argument")
            if argument.strip() == "test":
                return SAMPLE_URL
            text = argument
        elif sys.stdin.isatty():
            text = read_clipboard(selection)
            self._trace("input from clipboard")
        else:
            text = ""
            if self._has_stdin_data():
                text = sys.stdin.readline()
            if text.strip():
                self._trace("input from stdin")
            else:
                text = read_clipboard(selection)
                self._trace("stdin empty, input from clipboard")

        return text.strip()

    def shorten(self, url: str) -> str:
        """Return the short URL for url, consulting the cache before the API."""
        if self.cache.is_short(url):
            print(f"Note: {url} is already short, nothing to do", file=sys.stderr)
            if not stdout_is_terminal():
                notify(self.config, f"{url} is already short")
            return url

        try:
            cached = self.cache.get(url)
        except (OSError, ValueError) as e:
            print(f"Warning: Cannot read cache {self.cache.path}: {e}", file=sys.stderr)
            cached = None

        if cached:
            self._trace(f"cache hit in {self.cache.path}")
            return cached

        self._trace("cache miss, asking is.gd")
        short = self.client.shorten(url)

        try:
            self.cache.put(url, short)
        except (OSError, ValueError) as e:
            print(f"Warning: Cannot write cache {self.cache.path}: {e}", file=sys.stderr)

        return short

    def emit(self, short: str, mode: Mode) -> None:
        """Print the result and send it to the clipboard/notification sinks."""
        print(short)

        if mode is Mode.CLIPBOARD:
            write_clipboard(short)
        elif mode is Mode.SELECTION:
            write_clipboard(short, selection=True)

        if not stdout_is_terminal():
            notify(self.config, short)

    def _fail(self, message: str, urgency: str) -> None:
        print(f"Error: {message}", file=sys.stderr)
        if not stdout_is_terminal():
            notify(self.config, message, urgency=urgency)

    def run(self, argument: Optional[str], mode: Mode) -> int:
        """Main execution logic."""
        url = self.resolve_input(argument, mode)

        if not is_valid_url(url):
            self._fail(f"Not a valid URL: {url!r}", "normal")
            if self.usage:
                print(self.usage, file=sys.stderr)
            return 1

        try:
            short = self.shorten(url)
        except ShortenError as e:
            self._fail(str(e), "critical")
            return 1

        self.emit(short, mode)
        return 0


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option('-c', '--clipboard', is_flag=True, help='Replace the clipboard with the short URL')
@click.option('-s', '--selection', is_flag=True, help='Replace the selection clipboard with the short URL')
@click.option('--cache-file', type=click.Path(dir_okay=False), envvar='ISGD_CACHE_FILE',
              help='Cache file location')
@click.option('-v', '--verbose', is_flag=True, help='Trace cache and input decisions on stderr')
@click.argument('url', required=False)
@click.pass_context
def main(ctx, clipboard, selection, cache_file, verbose, url):
    """Shorten URL with is.gd, reading it from stdin or the clipboard if omitted.

    Pass the literal URL "test" to shorten a sample URL.
    """
    if clipboard:
        mode = Mode.CLIPBOARD
    elif selection:
        mode = Mode.SELECTION
    else:
        mode = mode_for_name(ctx.info_name)

    config = Config.from_env(cache_file=cache_file, verbose=verbose)
    app = Shortener(config, usage=ctx.get_help())
    sys.exit(app.run(url, mode))


if __name__ == '__main__':
    main()
