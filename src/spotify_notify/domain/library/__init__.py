"""Library domain - track models, metadata and formatting.

This domain handles:
- Track data models (search results and now-playing metadata)
- Metadata extraction from MPRIS property maps
- Track display formatting
"""

# Models
from .models import Album, Artist, Track, TrackMetadata

# Metadata extraction
from .metadata import extract_metadata, get_value

# Formatting
from .formatting import format_artists, format_track

__all__ = [
    # Models
    "Album",
    "Artist",
    "Track",
    "TrackMetadata",
    # Metadata
    "extract_metadata",
    "get_value",
    # Formatting
    "format_artists",
    "format_track",
]
