"""
Unit tests for .env loading and CLI input validation.
"""

import pytest

from artvote_forms.config import (
    DEFAULT_MAX_VOTES,
    DEFAULT_PLACEHOLDER_URL,
    ConfigError,
    build_contest_request,
    load_config,
    parse_contest_number,
)
from artvote_forms.paths import AppPaths


class TestLoadConfig:
    """Test cases for load_config."""

    def test_defaults(self, tmp_path):
        (tmp_path / ".env").write_text("API_KEY=abc123\n", encoding="utf-8")

        config = load_config(AppPaths(base_dir=tmp_path))

        assert config.api_key == "abc123"
        assert config.upload_url == (
            "https://freeimage.host/api/1/upload?key=abc123&action=upload"
        )
        assert config.placeholder_url == DEFAULT_PLACEHOLDER_URL
        assert config.upload_timeout == 1000.0
        assert config.max_votes == DEFAULT_MAX_VOTES

    def test_overrides(self, tmp_path):
        (tmp_path / ".env").write_text(
            "API_KEY=abc\n"
            "MAX_VOTES=5\n"
            "UPLOAD_TIMEOUT=30\n"
            "PLACEHOLDER_IMAGE_URL=https://example.com/filler.png\n",
            encoding="utf-8",
        )

        config = load_config(AppPaths(base_dir=tmp_path))

        assert config.max_votes == 5
        assert config.upload_timeout == 30.0
        assert config.placeholder_url == "https://example.com/filler.png"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="No .env file"):
            load_config(AppPaths(base_dir=tmp_path))

    def test_missing_api_key(self, tmp_path):
        (tmp_path / ".env").write_text("OTHER=1\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="API_KEY"):
            load_config(AppPaths(base_dir=tmp_path))

    def test_invalid_max_votes(self, tmp_path):
        (tmp_path / ".env").write_text("API_KEY=a\nMAX_VOTES=lots\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="MAX_VOTES"):
            load_config(AppPaths(base_dir=tmp_path))


class TestContestRequest:
    """Test cases for the positional CLI input."""

    def test_valid(self):
        request = build_contest_request("Pikachu", "12", ["Cutest", " ", "Funniest "])

        assert request.pokemon == "Pikachu"
        assert request.number == 12
        assert request.categories == ["Cutest", "Funniest"]

    def test_bad_number(self):
        with pytest.raises(ConfigError, match="contest number"):
            parse_contest_number("twelve")

    def test_no_categories(self):
        with pytest.raises(ConfigError, match="category"):
            build_contest_request("Pikachu", "12", ["  "])
