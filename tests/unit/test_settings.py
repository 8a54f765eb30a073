"""Unit tests for environment-driven settings."""

from keycloak_admin_client.settings import ClientSettings, load_settings


def test_defaults(monkeypatch):
    for name in (
        "KEYCLOAK_ADMIN_BASE_URL",
        "KEYCLOAK_ADMIN_REALM_NAME",
        "KEYCLOAK_ADMIN_TIMEOUT",
        "KEYCLOAK_ADMIN_VERIFY_SSL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = ClientSettings()

    assert settings.base_url == "http://127.0.0.1:8080/auth"
    assert settings.realm_name == "master"
    assert settings.timeout is None
    assert settings.verify_ssl is True
    assert settings.json_logs is False


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("KEYCLOAK_ADMIN_BASE_URL", "https://sso.example.com")
    monkeypatch.setenv("KEYCLOAK_ADMIN_REALM_NAME", "demo")
    monkeypatch.setenv("KEYCLOAK_ADMIN_VERIFY_SSL", "false")
    monkeypatch.setenv("KEYCLOAK_ADMIN_LOG_LEVEL", "DEBUG")

    settings = load_settings()

    assert settings.base_url == "https://sso.example.com"
    assert settings.realm_name == "demo"
    assert settings.verify_ssl is False
    assert settings.log_level == "DEBUG"
