"""Tests for the site reference, auth header and settings."""

import base64
import dataclasses

import pytest

from config.settings import Settings
from wpapi.site import WordPressSite, basic_auth_header


class TestBasicAuthHeader:
    def test_encodes_credentials(self):
        header = basic_auth_header("editor", "secret")

        expected = base64.b64encode(b"editor:secret").decode()
        assert header == {"Authorization": f"Basic {expected}"}

    def test_strips_app_password_spaces(self):
        header = basic_auth_header("editor", "abcd efgh ijkl")

        token = header["Authorization"].split(" ", 1)[1]
        assert base64.b64decode(token) == b"editor:abcdefghijkl"


class TestWordPressSite:
    """Test WordPressSite construction."""

    def test_strips_trailing_slash(self):
        site = WordPressSite(url="https://blog.example.com/")

        assert site.url == "https://blog.example.com"
        assert site.api_root == "https://blog.example.com/wp-json/wp/v2"

    def test_is_immutable(self):
        site = WordPressSite(url="https://blog.example.com")

        with pytest.raises(dataclasses.FrozenInstanceError):
            site.url = "https://other.example.com"

    def test_copies_headers(self):
        headers = {"Authorization": "Basic abc"}
        site = WordPressSite(url="https://blog.example.com", headers=headers)

        headers["Authorization"] = "Basic changed"

        assert site.headers == {"Authorization": "Basic abc"}

    def test_from_credentials(self):
        site = WordPressSite.from_credentials("https://blog.example.com", "editor", "secret", timeout=5)

        assert site.headers == basic_auth_header("editor", "secret")
        assert site.timeout == 5

    def test_from_settings(self):
        settings = Settings(
            wp_url="https://blog.example.com/",
            wp_username="editor",
            wp_app_password="abcd efgh",
            wp_timeout=12.5,
            wp_upload_timeout=60,
        )

        site = WordPressSite.from_settings(settings)

        assert site.url == "https://blog.example.com"
        assert site.headers == basic_auth_header("editor", "abcdefgh")
        assert site.timeout == 12.5
        assert site.upload_timeout == 60

    def test_from_incomplete_settings(self):
        settings = Settings(wp_url="https://blog.example.com", wp_username="", wp_app_password="")

        with pytest.raises(ValueError, match="wp_username, wp_app_password"):
            WordPressSite.from_settings(settings)


class TestSettings:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("WP_URL", "https://env.example.com")
        monkeypatch.setenv("WP_TIMEOUT", "7")

        settings = Settings(_env_file=None)

        assert settings.wp_url == "https://env.example.com"
        assert settings.wp_timeout == 7.0
        assert settings.wp_upload_timeout == 120.0

    def test_ignores_dotenv_when_disabled(self, monkeypatch, tmp_path):
        (tmp_path / ".env").write_text("WP_UPLOAD_TIMEOUT=5\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("WP_UPLOAD_TIMEOUT", raising=False)

        assert Settings(_env_file=None).wp_upload_timeout == 120.0
        assert Settings().wp_upload_timeout == 5.0
