"""Shared fixtures for the Spotify Notify test suite."""

import sys
from typing import Any, Dict, List, Optional, Tuple

import pytest
from loguru import logger

from spotify_notify.domain.library.models import Album, Artist, Track


class FakePlayer:
    """In-memory PlayerControl that records every call."""

    def __init__(self, properties: Optional[Dict[str, Any]] = None):
        self.properties = properties or {}
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def call_method(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))

    def get_property(self, name: str) -> Any:
        return self.properties[name]


class ScriptedIO:
    """InteractiveIO that replays canned input and captures output."""

    def __init__(self, *lines: str):
        self.lines = list(lines)
        self.written: List[str] = []
        self.reads = 0

    def write(self, text: str) -> None:
        self.written.append(text)

    def read(self) -> str:
        self.reads += 1
        return self.lines.pop(0)

    @property
    def output(self) -> str:
        return "".join(self.written)


def make_track(
    name: str = "Song",
    track_id: str = "abc123",
    artists: Tuple[str, ...] = ("Max",),
    album: str = "Album",
) -> Track:
    """Build a Track with sensible defaults."""
    return Track(
        name=name,
        id=track_id,
        artists=tuple(Artist(a) for a in artists),
        album=Album(album),
    )


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Keep config, data and log files inside the test's tmp dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("SPOTIFY_NOTIFY_SERVICE_NAME", raising=False)
    monkeypatch.delenv("SPOTIFY_NOTIFY_SEARCH_ENDPOINT", raising=False)
    yield
    # setup_loguru replaces sinks; restore the default one between tests
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def fake_player():
    """A fresh FakePlayer."""
    return FakePlayer()
