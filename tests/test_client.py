import pytest
import requests

from isgd.client import IsgdClient, ShortenError


class TestIsgdClient:
    """Test the is.gd API client."""

    def test_shorten_posts_form(self, config, mock_session):
        client = IsgdClient(config, session=mock_session)

        assert client.shorten("https://www.example.com") == "https://is.gd/AbCd1"
        mock_session.post.assert_called_once_with(
            "https://is.gd/create.php",
            data={"url": "https://www.example.com", "opt": "2", "format": "simple"},
        )

    def test_network_error(self, config, mock_session):
        mock_session.post.side_effect = requests.ConnectionError("no route to host")
        client = IsgdClient(config, session=mock_session)

        with pytest.raises(ShortenError, match="no route to host"):
            client.shorten("https://www.example.com")

    def test_http_error(self, config, mock_session):
        mock_session.post.return_value.raise_for_status.side_effect = requests.HTTPError("502 Bad Gateway")
        client = IsgdClient(config, session=mock_session)

        with pytest.raises(ShortenError, match="502"):
            client.shorten("https://www.example.com")

    def test_empty_body(self, config, mock_session):
        mock_session.post.return_value.text = "  \n"
        client = IsgdClient(config, session=mock_session)

        with pytest.raises(ShortenError, match="Empty response"):
            client.shorten("https://www.example.com")

    def test_error_body(self, config, mock_session):
        mock_session.post.return_value.text = "Error: Please enter a valid URL to shorten"
        client = IsgdClient(config, session=mock_session)

        with pytest.raises(ShortenError, match="valid URL"):
            client.shorten("https://www.example.com")

    def test_default_session(self, config):
        client = IsgdClient(config)
        assert isinstance(client.session, requests.Session)
