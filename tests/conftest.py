# tests/conftest.py
import pytest
from types import SimpleNamespace
from unittest.mock import Mock, patch

from isgd.config import Config


@pytest.fixture
def config(tmp_path):
    """Config pointing at a throwaway cache file."""
    return Config(cache_file=tmp_path / "isgd" / "cache.jsonl")


@pytest.fixture
def mock_session():
    """A requests.Session stand-in answering with a fixed short URL."""
    session = Mock()
    response = Mock()
    response.text = "https://is.gd/AbCd1\n"
    response.raise_for_status.return_value = None
    session.post.return_value = response
    return session


@pytest.fixture
def mock_stdin():
    with patch('sys.stdin') as stdin:
        stdin.isatty.return_value = True
        yield stdin


@pytest.fixture(autouse=True)
def desktop_io():
    """Keep tests away from the real clipboard and notification daemon."""
    with patch('isgd.cli.notify') as notify, \
            patch('isgd.cli.read_clipboard', return_value="") as read_clipboard, \
            patch('isgd.cli.write_clipboard', return_value=True) as write_clipboard, \
            patch('isgd.cli.stdout_is_terminal', return_value=True) as stdout_tty:
        yield SimpleNamespace(notify=notify, read_clipboard=read_clipboard,
                              write_clipboard=write_clipboard, stdout_tty=stdout_tty)
