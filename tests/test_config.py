import pytest
from pydantic import ValidationError

from xsrf_client.config import XsrfClientSettings


def test_defaults():
    settings = XsrfClientSettings()
    assert settings.cookie_name == "XSRF-TOKEN="
    assert settings.header_name == "X-XSRF-TOKEN"
    assert settings.timeout_ms is None
    assert settings.base_url_str is None


def test_cookie_name_gets_separator():
    assert XsrfClientSettings(cookie_name="csrftoken").cookie_name == "csrftoken="
    assert XsrfClientSettings(cookie_name="csrftoken=").cookie_name == "csrftoken="


def test_empty_strings_become_none():
    settings = XsrfClientSettings(base_url="", timeout_ms="")
    assert settings.base_url is None
    assert settings.timeout_ms is None


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        XsrfClientSettings(timeout_ms=0)


def test_base_url_str():
    settings = XsrfClientSettings(base_url="https://api.example.com/v1/")
    assert settings.base_url_str == "https://api.example.com/v1/"
