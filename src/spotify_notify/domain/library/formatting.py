"""Human-readable rendering of tracks and artist credits."""

from collections.abc import Sequence

from .models import Track

UNKNOWN_ARTIST = "Unknown"


def format_artists(names: Sequence[str]) -> str:
    """Join artist names into prose.

    Examples:
        >>> format_artists(["A"])
        'A'
        >>> format_artists(["A", "B", "C"])
        'A, B and C'

    An empty list renders as "Unknown".
    """
    if not names:
        return UNKNOWN_ARTIST

    *start, last = names
    if not start:
        return last
    return f"{', '.join(start)} and {last}"


def format_track(track: Track) -> str:
    """Render a track as "<name> by <artists> on <album>"."""
    artists = format_artists([artist.name for artist in track.artists])
    return f"{track.name} by {artists} on {track.album.name}"
