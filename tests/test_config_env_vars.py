import pytest

from xsrf_client.config import XsrfClientSettings


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for key in (
        "XSRF_COOKIE",
        "XSRF_CLIENT_COOKIE",
        "XSRF_CLIENT_COOKIE_NAME",
        "XSRF_CLIENT_HEADER_NAME",
        "XSRF_CLIENT_BASE_URL",
        "XSRF_CLIENT_TIMEOUT_MS",
        "XSRF_CLIENT_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.mark.parametrize(
    "env_vars, expected_values",
    [
        (
            {
                "XSRF_CLIENT_COOKIE_NAME": "csrftoken",
                "XSRF_CLIENT_HEADER_NAME": "X-CSRFToken",
            },
            {
                "cookie_name": "csrftoken=",
                "header_name": "X-CSRFToken",
            },
        ),
        (
            {"XSRF_COOKIE": "XSRF-TOKEN=abc"},
            {"cookie": "XSRF-TOKEN=abc"},
        ),
        (
            {"XSRF_CLIENT_COOKIE": "XSRF-TOKEN=def"},
            {"cookie": "XSRF-TOKEN=def"},
        ),
        (
            {
                "XSRF_CLIENT_TIMEOUT_MS": "1500",
                "XSRF_CLIENT_LOG_LEVEL": "DEBUG",
            },
            {
                "timeout_ms": 1500.0,
                "log_level": "DEBUG",
            },
        ),
    ],
)
def test_env_vars_are_loaded(monkeypatch, env_vars, expected_values):
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)

    settings = XsrfClientSettings(_env_file=None)
    for field, expected in expected_values.items():
        assert getattr(settings, field) == expected


def test_base_url_from_env(monkeypatch):
    monkeypatch.setenv("XSRF_CLIENT_BASE_URL", "https://api.example.com")
    settings = XsrfClientSettings(_env_file=None)
    assert settings.base_url_str == "https://api.example.com/"


def test_bare_cookie_env_var_is_ignored(monkeypatch):
    monkeypatch.setenv("COOKIE", "XSRF-TOKEN=leak")
    settings = XsrfClientSettings(_env_file=None)
    assert settings.cookie is None


def test_cookie_by_field_name():
    settings = XsrfClientSettings(_env_file=None, cookie="XSRF-TOKEN=abc")
    assert settings.cookie == "XSRF-TOKEN=abc"
