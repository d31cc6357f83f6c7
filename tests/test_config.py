"""
Tests for config module
"""

from unittest.mock import patch

from api_lambda_proxy.config import (
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TARGET_URL,
    get_settings,
)


class TestGetSettings:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            settings = get_settings()

        assert settings.default_target_url == DEFAULT_TARGET_URL
        assert settings.request_timeout == DEFAULT_REQUEST_TIMEOUT
        assert settings.log_level == "INFO"

    def test_default_target_url_from_environment(self):
        with patch.dict(
            "os.environ", {"PROXY_DEFAULT_TARGET_URL": " https://config.test/api "}
        ):
            settings = get_settings()

        assert settings.default_target_url == "https://config.test/api"

    def test_blank_default_target_url_uses_builtin(self):
        with patch.dict("os.environ", {"PROXY_DEFAULT_TARGET_URL": "  "}):
            assert get_settings().default_target_url == DEFAULT_TARGET_URL

    def test_settings_follow_environment_changes(self):
        with patch.dict("os.environ", {"PROXY_DEFAULT_TARGET_URL": "https://a.test"}):
            first = get_settings()
        with patch.dict("os.environ", {"PROXY_DEFAULT_TARGET_URL": "https://b.test"}):
            second = get_settings()

        assert first.default_target_url == "https://a.test"
        assert second.default_target_url == "https://b.test"


class TestRequestTimeout:
    def test_custom_timeout(self):
        with patch.dict("os.environ", {"PROXY_REQUEST_TIMEOUT": "2.5"}):
            assert get_settings().request_timeout == 2.5

    def test_zero_disables_timeout(self):
        with patch.dict("os.environ", {"PROXY_REQUEST_TIMEOUT": "0"}):
            assert get_settings().request_timeout is None

    def test_empty_disables_timeout(self):
        with patch.dict("os.environ", {"PROXY_REQUEST_TIMEOUT": ""}):
            assert get_settings().request_timeout is None

    def test_invalid_timeout_uses_default(self):
        with patch.dict("os.environ", {"PROXY_REQUEST_TIMEOUT": "soon"}):
            assert get_settings().request_timeout == DEFAULT_REQUEST_TIMEOUT

    def test_negative_timeout_uses_default(self):
        with patch.dict("os.environ", {"PROXY_REQUEST_TIMEOUT": "-1"}):
            assert get_settings().request_timeout == DEFAULT_REQUEST_TIMEOUT


class TestLogLevel:
    def test_lowercase_level(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "debug"}):
            assert get_settings().log_level == "DEBUG"

    def test_unknown_level_uses_default(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "LOUD"}):
            assert get_settings().log_level == "INFO"
