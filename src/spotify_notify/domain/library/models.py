"""
Music library domain models.

Contains data structures for search results and the currently playing track.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Artist:
    """A credited artist on a track."""

    name: str


@dataclass(frozen=True)
class Album:
    """The album a track belongs to."""

    name: str


@dataclass(frozen=True)
class Track:
    """A track returned by the search endpoint.

    The id is opaque; it only becomes playable once embedded in a
    spotify:track:<id> URI.
    """

    name: str
    id: str
    artists: tuple[Artist, ...]
    album: Album

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Track":
        """Build a Track from one search-result item.

        Raises:
            KeyError: If a required field is missing
            TypeError: If a field has the wrong shape
        """
        artists = data["artists"]
        if not isinstance(artists, list):
            raise TypeError(f"artists must be a list, got {type(artists).__name__}")

        return cls(
            name=_require_str(data["name"], "name"),
            id=_require_str(data["id"], "id"),
            artists=tuple(
                Artist(name=_require_str(a["name"], "artist name")) for a in artists
            ),
            album=Album(name=_require_str(data["album"]["name"], "album name")),
        )


@dataclass(frozen=True)
class TrackMetadata:
    """Metadata of the track the player is currently playing.

    Every field is always populated; missing values are replaced with
    defaults during extraction.
    """

    title: str
    artists: tuple[str, ...]
    album: str
    artwork_url: str


def _require_str(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a string, got {type(value).__name__}")
    return value
