"""Tests for environment-driven settings."""

from plainpost_mcp.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)  # no stray .env
        for name in (
            "PLAINPOST_DEFAULT_STYLE",
            "PLAINPOST_PANGU_ENABLED",
            "PLAINPOST_HIGHLIGHT_LINKS",
        ):
            monkeypatch.delenv(name, raising=False)
        s = Settings()
        assert s.plainpost_default_style == "structured"
        assert s.plainpost_pangu_enabled is False
        assert s.plainpost_highlight_links is True

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PLAINPOST_DEFAULT_STYLE", "social")
        monkeypatch.setenv("plainpost_pangu_enabled", "true")
        s = Settings()
        assert s.plainpost_default_style == "social"
        assert s.plainpost_pangu_enabled is True

    def test_from_env_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("PLAINPOST_DEFAULT_STYLE", raising=False)
        (tmp_path / ".env").write_text("PLAINPOST_DEFAULT_STYLE=minimal\nUNRELATED=1\n")
        assert Settings().plainpost_default_style == "minimal"
