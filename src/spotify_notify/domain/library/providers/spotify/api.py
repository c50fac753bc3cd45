"""
Track search API.

One GET per search against an endpoint that mirrors the Spotify Web API
search response: ``{"tracks": {"items": [...]}}``.
"""

from typing import Any, List
from urllib.parse import quote

import requests
from loguru import logger

from spotify_notify.core.config import DEFAULT_SEARCH_ENDPOINT

from ...models import Track
from .exceptions import SearchError

TRACK_URI_PREFIX = "spotify:track:"


def build_search_url(query: str, endpoint: str = DEFAULT_SEARCH_ENDPOINT) -> str:
    """Build the search URL, percent-encoding the query (spaces become %20)."""
    return f"{endpoint}?track={quote(query, safe='')}"


def parse_search_response(query: str, payload: Any) -> List[Track]:
    """Convert a decoded search response into Tracks, keeping relevance order.

    Raises:
        SearchError: If the payload does not have the expected shape
    """
    try:
        items = payload["tracks"]["items"]
        if not isinstance(items, list):
            raise TypeError(f"items must be a list, got {type(items).__name__}")
        return [Track.from_dict(item) for item in items]
    except (KeyError, TypeError) as e:
        raise SearchError(query, f"unexpected response shape ({e})") from e


def search_tracks(
    query: str,
    endpoint: str = DEFAULT_SEARCH_ENDPOINT,
    timeout: float = 10.0,
) -> List[Track]:
    """Search for tracks matching free-text terms.

    Args:
        query: Search terms, e.g. "title artist"
        endpoint: Search endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Matching tracks in relevance order (possibly empty)

    Raises:
        SearchError: On network, HTTP, decoding or shape failures
    """
    url = build_search_url(query, endpoint)
    logger.debug(f"Searching tracks: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        logger.error(f"Search request failed for {query!r}: {e}")
        raise SearchError(query, str(e)) from e
    except ValueError as e:
        logger.error(f"Search response for {query!r} is not JSON: {e}")
        raise SearchError(query, "invalid JSON response") from e

    tracks = parse_search_response(query, payload)
    logger.info(f"Search for {query!r} returned {len(tracks)} tracks")
    return tracks


def track_uri(track: Track) -> str:
    """Build the playable URI for a track."""
    return f"{TRACK_URI_PREFIX}{track.id}"
