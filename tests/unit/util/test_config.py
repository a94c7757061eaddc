"""Unit tests for settings."""

from satya.config import AuthSettings, PlatformSettings, Settings


class TestAdminAllowlist:
    def test_comma_separated(self):
        auth = AuthSettings(admin_emails=" Alice@Example.com, ,bob@example.com ")

        assert auth.admin_allowlist == ["alice@example.com", "bob@example.com"]

    def test_json_list(self):
        auth = AuthSettings(admin_emails='["Alice@Example.com", "bob@example.com"]')

        assert auth.admin_allowlist == ["alice@example.com", "bob@example.com"]

    def test_empty(self):
        assert AuthSettings().admin_allowlist == []


class TestSettings:
    def test_platform_configured(self):
        assert not PlatformSettings().is_configured
        assert PlatformSettings(url="https://p.test", service_role_key="k").is_configured

    def test_production_urls(self):
        settings = Settings(
            environment="production", host="api.satya.test", frontend_host="satya.test"
        )

        assert settings.api.base_url == "https://api.satya.test"
        assert settings.api.frontend_url == "https://satya.test"

    def test_development_urls(self):
        settings = Settings(environment="development")

        assert settings.api.base_url == "http://localhost:5050"
        assert settings.api.frontend_url == "http://localhost:5173"


class TestCorsOrigins:
    def test_defaults(self):
        settings = Settings(environment="development")

        assert settings.allowed_origins == [
            "http://localhost:3000",
            "http://localhost:5173",
        ]
        assert not settings.allow_any_origin

    def test_extra_origins(self):
        settings = Settings(environment="development", cors_origins=" https://a.test,")

        assert "https://a.test" in settings.allowed_origins

    def test_wildcard(self):
        assert Settings(cors_origins="*").allow_any_origin
