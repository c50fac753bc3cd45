"""Base exception shared by every Spotify Notify error."""


class SpotifyNotifyError(Exception):
    """Base exception for Spotify Notify operations."""

    pass
