"""Unit tests for application settings."""

import pytest
from userflow.config import get_settings


class TestBasicAuthSettings:
    """Credential pair loading."""

    @pytest.fixture(autouse=True)
    def _clear_env(self, monkeypatch: pytest.MonkeyPatch):
        for name in (
            "BASIC_AUTH_USERNAME",
            "BASIC_AUTH_PASSWORD",
            "BASIC_AUTH__USERNAME",
            "BASIC_AUTH__PASSWORD",
        ):
            monkeypatch.delenv(name, raising=False)
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_single_underscore_names(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """BASIC_AUTH_USERNAME/BASIC_AUTH_PASSWORD populate the pair."""
        monkeypatch.setenv("BASIC_AUTH_USERNAME", "u")
        monkeypatch.setenv("BASIC_AUTH_PASSWORD", "p")

        settings = get_settings()

        assert settings.basic_auth_username == "u"
        assert settings.basic_auth_password == "p"
        assert settings.basic_auth_configured is True

    def test_double_underscore_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The BASIC_AUTH__* spellings are accepted as aliases."""
        monkeypatch.setenv("BASIC_AUTH__USERNAME", "alias-user")
        monkeypatch.setenv("BASIC_AUTH__PASSWORD", "alias-pass")

        settings = get_settings()

        assert settings.basic_auth_username == "alias-user"
        assert settings.basic_auth_password == "alias-pass"
        assert settings.basic_auth_configured is True

    def test_half_configured_pair_is_not_configured(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A username without a password leaves auth unconfigured."""
        monkeypatch.setenv("BASIC_AUTH_USERNAME", "u")

        assert get_settings().basic_auth_configured is False
