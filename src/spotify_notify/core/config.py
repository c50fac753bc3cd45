"""
Configuration management for Spotify Notify
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_SERVICE_NAME = "org.mpris.MediaPlayer2.spotify"
DEFAULT_OBJECT_PATH = "/org/mpris/MediaPlayer2"
DEFAULT_SEARCH_ENDPOINT = "https://spotify-search-api-test.herokuapp.com/search/tracks"
DEFAULT_ARTWORK_URL = "https://www.scdn.co/i/_global/touch-icon-144.png"


@dataclass
class PlayerConfig:
    """Configuration for the MPRIS player on the session bus."""

    service_name: str = DEFAULT_SERVICE_NAME
    object_path: str = DEFAULT_OBJECT_PATH
    timeout_seconds: float = 5.0

    def validate(self) -> None:
        """Validate player configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not isinstance(self.service_name, str) or not self.service_name:
            raise ValueError(
                f"service_name must be a non-empty string, got {self.service_name!r}"
            )
        if not isinstance(self.object_path, str):
            raise ValueError(
                f"object_path must be a string, got {self.object_path!r}"
            )
        if self.timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive, got {self.timeout_seconds}"
            )


@dataclass
class SearchConfig:
    """Configuration for the remote track search endpoint."""

    endpoint: str = DEFAULT_SEARCH_ENDPOINT
    timeout_seconds: float = 10.0
    max_candidates: int = 5  # Default for `play-song search --list`

    def validate(self) -> None:
        """Validate search configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not isinstance(self.endpoint, str) or not self.endpoint:
            raise ValueError(
                f"endpoint must be a non-empty string, got {self.endpoint!r}"
            )
        if self.max_candidates < 1:
            raise ValueError(
                f"max_candidates must be at least 1, got {self.max_candidates}"
            )
        if self.timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive, got {self.timeout_seconds}"
            )


@dataclass
class NotificationsConfig:
    """Configuration for desktop notifications."""

    enabled: bool = True
    app_name: str = "Spotify Notify"
    fallback_artwork_url: str = DEFAULT_ARTWORK_URL

    def validate(self) -> None:
        """Validate notification configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not isinstance(self.enabled, bool):
            raise ValueError(f"enabled must be true or false, got {self.enabled!r}")
        for name in ("app_name", "fallback_artwork_url"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string, got {value!r}")


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/spotify-notify/spotify-notify.log)
    )
    console_output: bool = False  # Also output to stderr (for debugging)


@dataclass
class Config:
    """Main configuration object."""

    player: PlayerConfig = field(default_factory=PlayerConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    notifications: NotificationsConfig = field(default_factory=NotificationsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "spotify-notify"
    return Path.home() / ".config" / "spotify-notify"


def get_config_path() -> Path:
    """Get the main configuration file path."""
    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "spotify-notify"
    return Path.home() / ".local" / "share" / "spotify-notify"


def _get_section(toml_data: dict, name: str) -> dict:
    """Return a TOML table, rejecting a key that is not a table."""
    section = toml_data[name]
    if not isinstance(section, dict):
        raise TypeError(f"[{name}] must be a table, got {section!r}")
    return section


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return f"""
# Spotify Notify Configuration

[player]
# D-Bus service name of the MPRIS player to control.
# play-song only works against players that accept spotify:track URIs.
service_name = "{DEFAULT_SERVICE_NAME}"

# Object path exposing org.mpris.MediaPlayer2.Player
object_path = "{DEFAULT_OBJECT_PATH}"

# Seconds to wait for the player before giving up
timeout_seconds = 5.0

[search]
# Track search endpoint (queried with ?track=<terms>)
endpoint = "{DEFAULT_SEARCH_ENDPOINT}"

# Seconds to wait for search results
timeout_seconds = 10.0

# Number of candidates shown by `play-song search --list`
max_candidates = 5

[notifications]
# Show now-playing as a desktop notification (prints to the terminal otherwise)
enabled = true

# Application name shown by the notification daemon
app_name = "Spotify Notify"

# Artwork used when the player does not report one
fallback_artwork_url = "{DEFAULT_ARTWORK_URL}"

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/spotify-notify/spotify-notify.log)
# log_file = "/path/to/custom/spotify-notify.log"

# Also output logs to stderr (useful for debugging)
console_output = false
""".strip()


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - SPOTIFY_NOTIFY_SERVICE_NAME
    - SPOTIFY_NOTIFY_SEARCH_ENDPOINT

    Args:
        config_path: Explicit config file. Must exist when given.

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = get_config_path()
        if not config_path.exists():
            # Create config directory and default file
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(create_default_config())

    config = Config()

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        if "player" in toml_data:
            player_data = _get_section(toml_data, "player")
            config.player = PlayerConfig(
                service_name=player_data.get(
                    "service_name", config.player.service_name
                ),
                object_path=player_data.get("object_path", config.player.object_path),
                timeout_seconds=float(
                    player_data.get("timeout_seconds", config.player.timeout_seconds)
                ),
            )
            # Validate player config
            try:
                config.player.validate()
            except ValueError as e:
                print(f"Warning: Invalid player configuration: {e}")
                print("Using default player configuration.")
                config.player = PlayerConfig()

        if "search" in toml_data:
            search_data = _get_section(toml_data, "search")
            config.search = SearchConfig(
                endpoint=search_data.get("endpoint", config.search.endpoint),
                timeout_seconds=float(
                    search_data.get("timeout_seconds", config.search.timeout_seconds)
                ),
                max_candidates=int(
                    search_data.get("max_candidates", config.search.max_candidates)
                ),
            )
            # Validate search config
            try:
                config.search.validate()
            except ValueError as e:
                print(f"Warning: Invalid search configuration: {e}")
                print("Using default search configuration.")
                config.search = SearchConfig()

        if "notifications" in toml_data:
            notifications_data = _get_section(toml_data, "notifications")
            config.notifications = NotificationsConfig(
                enabled=notifications_data.get(
                    "enabled", config.notifications.enabled
                ),
                app_name=notifications_data.get(
                    "app_name", config.notifications.app_name
                ),
                fallback_artwork_url=notifications_data.get(
                    "fallback_artwork_url", config.notifications.fallback_artwork_url
                ),
            )
            # Validate notifications config
            try:
                config.notifications.validate()
            except ValueError as e:
                print(f"Warning: Invalid notifications configuration: {e}")
                print("Using default notifications configuration.")
                config.notifications = NotificationsConfig()

        if "logging" in toml_data:
            logging_data = _get_section(toml_data, "logging")
            level = logging_data.get("level", config.logging.level)
            if not isinstance(level, str):
                raise TypeError(f"logging.level must be a string, got {level!r}")
            log_file = logging_data.get("log_file")
            if log_file:
                log_file = str(Path(log_file).expanduser())
            config.logging = LoggingConfig(
                level=level.upper(),
                log_file=log_file,
                console_output=logging_data.get(
                    "console_output", config.logging.console_output
                ),
            )

    except (tomllib.TOMLDecodeError, ValueError, TypeError, AttributeError) as e:
        print(f"Error loading configuration from {config_path}: {e}")
        print("Using default configuration.")
        config = Config()

    # Environment overrides apply on top of file values
    service_name = os.environ.get("SPOTIFY_NOTIFY_SERVICE_NAME")
    search_endpoint = os.environ.get("SPOTIFY_NOTIFY_SEARCH_ENDPOINT")

    if service_name:
        config.player.service_name = service_name
    if search_endpoint:
        config.search.endpoint = search_endpoint

    return config


def get_log_file_path(config: Config) -> Path:
    """Get the path to the log file."""
    if config.logging.log_file:
        return Path(config.logging.log_file)
    return get_data_dir() / "spotify-notify.log"
