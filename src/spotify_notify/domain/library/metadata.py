"""
Now-playing metadata extraction.

Converts the loosely-typed MPRIS ``Metadata`` property map into a
TrackMetadata, substituting defaults for missing or malformed fields.
Players differ in what they report, so nothing here ever raises.
"""

from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from loguru import logger

from spotify_notify.core.config import DEFAULT_ARTWORK_URL

from .models import TrackMetadata

T = TypeVar("T")

TITLE_KEY = "xesam:title"
ARTIST_KEY = "xesam:artist"
ALBUM_KEY = "xesam:album"
ART_URL_KEY = "mpris:artUrl"

DEFAULT_TITLE = "Unknown"
DEFAULT_ARTISTS: tuple[str, ...] = ("Unknown",)
DEFAULT_ALBUM = "Unknown"


def as_str(value: Any) -> str:
    """Coerce a bus string (dbus.String is a str subclass) to a plain str.

    Raises:
        TypeError: If value is not a string
    """
    if not isinstance(value, str):
        raise TypeError(f"expected string, got {type(value).__name__}")
    return str(value)


def as_str_sequence(value: Any) -> tuple[str, ...]:
    """Coerce a bus string array to a tuple of plain strings.

    A bare string is rejected even though it is iterable, and so is an
    empty array: callers need at least one artist to render.

    Raises:
        TypeError: If value is not a non-empty sequence of strings
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise TypeError(f"expected string array, got {type(value).__name__}")
    if not value:
        raise TypeError("expected non-empty string array")
    return tuple(as_str(item) for item in value)


def get_value(
    properties: Mapping[str, Any],
    key: str,
    default: T,
    cast: Callable[[Any], T],
) -> T:
    """Read ``key`` from a property map and cast it, or fall back to ``default``.

    Args:
        properties: Property map as returned by the bus
        key: Property name (e.g. "xesam:title")
        default: Value used when the key is missing or cannot be cast
        cast: Converter that raises TypeError/ValueError on a shape mismatch

    Returns:
        The cast value, or ``default``
    """
    if key not in properties:
        logger.debug(f"Metadata key {key!r} missing, using default {default!r}")
        return default

    try:
        return cast(properties[key])
    except (TypeError, ValueError) as e:
        logger.debug(f"Metadata key {key!r} malformed ({e}), using default {default!r}")
        return default


def extract_metadata(
    properties: Mapping[str, Any], artwork_default: str = DEFAULT_ARTWORK_URL
) -> TrackMetadata:
    """Build a fully populated TrackMetadata from an MPRIS property map.

    Args:
        properties: Value of the player's ``Metadata`` property
        artwork_default: Artwork URL used when ``mpris:artUrl`` is unusable

    Returns:
        TrackMetadata with defaults for every missing or malformed field
    """
    if not isinstance(properties, Mapping):
        logger.debug(
            f"Metadata is not a map ({type(properties).__name__}), using defaults"
        )
        properties = {}

    return TrackMetadata(
        title=get_value(properties, TITLE_KEY, DEFAULT_TITLE, as_str),
        artists=get_value(properties, ARTIST_KEY, DEFAULT_ARTISTS, as_str_sequence),
        album=get_value(properties, ALBUM_KEY, DEFAULT_ALBUM, as_str),
        artwork_url=get_value(properties, ART_URL_KEY, artwork_default, as_str),
    )
