"""Spotify track search provider."""

from .api import build_search_url, parse_search_response, search_tracks, track_uri
from .exceptions import SearchError

__all__ = [
    "build_search_url",
    "parse_search_response",
    "search_tracks",
    "track_uri",
    "SearchError",
]
