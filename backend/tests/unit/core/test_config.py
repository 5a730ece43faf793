"""Tests for environment-driven settings."""

from pathlib import Path

from cybershield.core.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("PORT", "ENVIRONMENT", "NODE_ENV", "DATA_DIR", "CONTACTS_FILENAME"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.PORT == 3000
        assert settings.ENVIRONMENT == "development"
        assert settings.is_development is True
        assert settings.API_PREFIX == "/api"
        assert settings.CORS_ORIGINS == ["*"]
        assert settings.TRUST_PROXY_HEADERS is False
        assert settings.CONTACT_STORE_SERIALIZE_WRITES is False
        assert settings.contacts_file.name == "contacts.json"

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert Settings(_env_file=None).PORT == 8080

    def test_node_env_alias(self, monkeypatch):
        """NODE_ENV is accepted for the environment mode."""
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("NODE_ENV", "production")

        settings = Settings(_env_file=None)

        assert settings.ENVIRONMENT == "production"
        assert settings.is_development is False

    def test_environment_is_case_insensitive(self):
        assert Settings(_env_file=None, ENVIRONMENT="Development").is_development is True

    def test_contacts_file_under_data_dir(self, tmp_path: Path):
        settings = Settings(_env_file=None, DATA_DIR=tmp_path, CONTACTS_FILENAME="leads.json")
        assert settings.contacts_file == tmp_path / "leads.json"

    def test_frontend_entry_file(self, tmp_path: Path):
        settings = Settings(_env_file=None, FRONTEND_DIR=tmp_path)
        assert settings.frontend_entry_file == tmp_path / "index.html"
