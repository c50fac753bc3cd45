"""Search-specific exceptions for error handling."""

from spotify_notify.core.exceptions import SpotifyNotifyError


class SearchError(SpotifyNotifyError):
    """Raised when the search endpoint cannot be reached or returns garbage."""

    def __init__(self, query: str, reason: str):
        self.query = query
        self.reason = reason
        super().__init__(f"Search for {query!r} failed: {reason}")
