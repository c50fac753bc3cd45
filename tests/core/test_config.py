"""Tests for configuration loading."""

import tomllib

import pytest

from spotify_notify.core.config import (
    DEFAULT_SERVICE_NAME,
    Config,
    NotificationsConfig,
    PlayerConfig,
    SearchConfig,
    create_default_config,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
)


class TestLoadConfig:
    """Tests for load_config."""

    def test_creates_default_file(self) -> None:
        config_path = get_config_path()
        assert not config_path.exists()

        config = load_config()

        assert config_path.exists()
        assert config == Config()

    def test_default_file_parses(self) -> None:
        data = tomllib.loads(create_default_config())
        assert data["player"]["service_name"] == DEFAULT_SERVICE_NAME
        assert data["search"]["max_candidates"] == 5

    def test_reads_values(self, tmp_path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text(
            """
[player]
service_name = "org.mpris.MediaPlayer2.vlc"
timeout_seconds = 2

[search]
endpoint = "https://search.example.com"
max_candidates = 8

[notifications]
enabled = false

[logging]
level = "debug"
log_file = "~/spotify-notify.log"
"""
        )

        config = load_config(path)

        assert config.player.service_name == "org.mpris.MediaPlayer2.vlc"
        assert config.player.timeout_seconds == 2.0
        assert config.search.endpoint == "https://search.example.com"
        assert config.search.max_candidates == 8
        assert config.notifications.enabled is False
        assert config.logging.level == "DEBUG"
        assert not config.logging.log_file.startswith("~")

    def test_partial_sections_keep_defaults(self, tmp_path) -> None:
        path = tmp_path / "partial.toml"
        path.write_text('[player]\nservice_name = "org.mpris.MediaPlayer2.mpv"\n')

        config = load_config(path)

        assert config.player.service_name == "org.mpris.MediaPlayer2.mpv"
        assert config.player.timeout_seconds == 5.0
        assert config.search == SearchConfig()

    def test_missing_explicit_path_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")

    def test_invalid_toml_falls_back_to_defaults(self, tmp_path, capsys) -> None:
        path = tmp_path / "broken.toml"
        path.write_text("[player\nservice_name = ")

        assert load_config(path) == Config()
        assert "Using default configuration" in capsys.readouterr().out

    def test_invalid_player_section_falls_back(self, tmp_path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text('[player]\nservice_name = ""\n')

        assert load_config(path).player == PlayerConfig()

    def test_invalid_max_candidates_falls_back(self, tmp_path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[search]\nmax_candidates = 0\n")

        assert load_config(path).search == SearchConfig()

    def test_section_that_is_not_a_table_falls_back(self, tmp_path, capsys) -> None:
        path = tmp_path / "shape.toml"
        path.write_text("player = 5\n")

        assert load_config(path) == Config()
        assert "[player] must be a table" in capsys.readouterr().out

    def test_non_string_log_level_falls_back(self, tmp_path) -> None:
        path = tmp_path / "level.toml"
        path.write_text("[logging]\nlevel = 5\n")

        assert load_config(path) == Config()

    def test_non_string_service_name_falls_back(self, tmp_path) -> None:
        path = tmp_path / "service.toml"
        path.write_text("[player]\nservice_name = 5\n")

        config = load_config(path)

        assert config.player == PlayerConfig()
        assert isinstance(config.player.service_name, str)

    def test_non_string_endpoint_falls_back(self, tmp_path) -> None:
        path = tmp_path / "endpoint.toml"
        path.write_text("[search]\nendpoint = [1, 2]\n")

        assert load_config(path).search == SearchConfig()

    def test_invalid_notifications_fall_back(self, tmp_path) -> None:
        path = tmp_path / "notify.toml"
        path.write_text('[notifications]\nenabled = "yes"\napp_name = 3\n')

        assert load_config(path).notifications == NotificationsConfig()

    def test_environment_overrides(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "c.toml"
        path.write_text('[player]\nservice_name = "org.mpris.MediaPlayer2.vlc"\n')
        monkeypatch.setenv("SPOTIFY_NOTIFY_SERVICE_NAME", "org.mpris.MediaPlayer2.mpv")
        monkeypatch.setenv("SPOTIFY_NOTIFY_SEARCH_ENDPOINT", "https://env.example.com")

        config = load_config(path)

        assert config.player.service_name == "org.mpris.MediaPlayer2.mpv"
        assert config.search.endpoint == "https://env.example.com"


class TestValidate:
    """Tests for section validation."""

    def test_player_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            PlayerConfig(timeout_seconds=0).validate()

    def test_search_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            SearchConfig(timeout_seconds=-1).validate()


class TestPaths:
    """Tests for path helpers."""

    def test_data_dir_follows_xdg(self, tmp_path) -> None:
        assert get_data_dir() == tmp_path / "data" / "spotify-notify"

    def test_log_file_default(self, tmp_path) -> None:
        assert get_log_file_path(Config()) == (
            tmp_path / "data" / "spotify-notify" / "spotify-notify.log"
        )

    def test_log_file_custom(self, tmp_path) -> None:
        config = Config()
        config.logging.log_file = str(tmp_path / "x.log")
        assert get_log_file_path(config) == tmp_path / "x.log"
