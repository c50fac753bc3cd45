"""
Play request resolution.

Turns a play request into exactly one playable URI: a literal URI passes
through untouched, free-text terms are searched and one candidate is
chosen (first match, or picked interactively from the top results).
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from loguru import logger

from spotify_notify.core.output import log

from ..library.formatting import format_track
from ..library.models import Track
from ..library.providers.spotify.api import track_uri
from .exceptions import NoTrackFoundError, SelectionInputError
from .prompt import InteractiveIO

SearchFn = Callable[[str], List[Track]]

SELECTION_PROMPT = "Enter a number to play: "


@dataclass(frozen=True)
class FirstMatch:
    """Play the most relevant search result."""


@dataclass(frozen=True)
class Interactive:
    """Let the user pick among the top ``max_candidates`` results."""

    max_candidates: int = 5

    def __post_init__(self) -> None:
        if self.max_candidates < 1:
            raise ValueError(
                f"max_candidates must be at least 1, got {self.max_candidates}"
            )


SelectionMode = Union[FirstMatch, Interactive]


@dataclass(frozen=True)
class UriRequest:
    """Play a literal URI (e.g. spotify:track:<id>)."""

    uri: str


@dataclass(frozen=True)
class SearchRequest:
    """Search for free-text terms and play one of the results."""

    terms: str
    selection: SelectionMode = FirstMatch()


PlayRequest = Union[UriRequest, SearchRequest]


def choose_interactively(candidates: List[Track], io: InteractiveIO) -> Track:
    """Show numbered candidates and return the one the user picks.

    One prompt, one read. No re-prompt on bad input.

    Raises:
        SelectionInputError: If the input is not an index into ``candidates``
    """
    for index, track in enumerate(candidates):
        io.write(f"{index} - {format_track(track)}\n")
    io.write(SELECTION_PROMPT)

    raw = io.read()
    try:
        choice = int(raw.strip())
    except ValueError as e:
        raise SelectionInputError(raw.strip(), len(candidates)) from e

    if not 0 <= choice < len(candidates):
        raise SelectionInputError(raw.strip(), len(candidates))

    return candidates[choice]


def select_track(
    request: SearchRequest,
    search: SearchFn,
    io: Optional[InteractiveIO] = None,
) -> Track:
    """Search for the request's terms and pick one track.

    Args:
        request: Search terms and selection mode
        search: Search collaborator returning tracks in relevance order
        io: Terminal collaborator, required for Interactive selection

    Raises:
        NoTrackFoundError: If the search returned nothing
        SelectionInputError: If the interactive choice is invalid
        SearchError: Propagated from the search collaborator
    """
    results = search(request.terms)
    if not results:
        logger.info(f"No results for {request.terms!r}")
        raise NoTrackFoundError(request.terms)

    selection = request.selection
    if isinstance(selection, FirstMatch):
        return results[0]
    if isinstance(selection, Interactive):
        if io is None:
            raise ValueError("Interactive selection requires an InteractiveIO")
        return choose_interactively(results[: selection.max_candidates], io)
    raise TypeError(f"Unknown selection mode: {selection!r}")


def resolve(
    request: PlayRequest,
    search: SearchFn,
    io: Optional[InteractiveIO] = None,
) -> str:
    """Resolve a play request to one playable URI.

    Literal URIs are returned unchanged without searching.

    Raises:
        NoTrackFoundError: If a search returned nothing
        SelectionInputError: If the interactive choice is invalid
        SearchError: Propagated from the search collaborator
    """
    if isinstance(request, UriRequest):
        return request.uri
    if isinstance(request, SearchRequest):
        track = select_track(request, search, io)
        log(f"Playing {format_track(track)}")
        return track_uri(track)
    raise TypeError(f"Unknown play request: {request!r}")
