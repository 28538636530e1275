"""Tests for settings and the user .env writer."""

from core.config import AppSettings, write_user_env_vars


class TestAppSettings:
    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PROFILE_EDITOR_API_BASE_URL", "https://api.example.com")
        monkeypatch.setenv("PROFILE_EDITOR_AVATAR_MAX_MEGABYTES", "2")
        monkeypatch.setenv("PROFILE_EDITOR_SESSION_PATH", str(tmp_path / "s.json"))

        settings = AppSettings()

        assert settings.api_base_url == "https://api.example.com"
        assert settings.avatar_max_megabytes == 2
        assert settings.session_path == tmp_path / "s.json"

    def test_defaults(self):
        settings = AppSettings(_env_file=None)

        assert settings.password_min_length == 6
        assert settings.http_timeout_seconds > 0


class TestWriteUserEnvVars:
    def test_merges_with_existing_values(self, tmp_path):
        env_path = tmp_path / "cfg" / ".env"
        env_path.parent.mkdir()
        env_path.write_text("# comment\nPROFILE_EDITOR_API_TOKEN='old'\nOTHER=1\n", encoding="utf-8")

        write_user_env_vars(
            {"PROFILE_EDITOR_API_TOKEN": "new", "PROFILE_EDITOR_API_BASE_URL": "http://x.test", "SKIP": None},
            env_path=env_path,
        )

        lines = env_path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert lines[1:] == [
            "OTHER=1",
            "PROFILE_EDITOR_API_BASE_URL=http://x.test",
            "PROFILE_EDITOR_API_TOKEN=new",
        ]
