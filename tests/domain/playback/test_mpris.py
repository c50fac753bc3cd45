"""Tests for the dbus-python MPRIS adapter (bus access is mocked)."""

from unittest.mock import MagicMock, patch

import pytest

dbus = pytest.importorskip("dbus")

from spotify_notify.domain.playback.exceptions import (  # noqa: E402
    BusConnectionError,
    RemoteCallError,
)
from spotify_notify.domain.playback.mpris import (  # noqa: E402
    PLAYER_IFACE,
    MprisPlayer,
)


def _dbus_error(name: str, message: str = "failed"):
    return dbus.exceptions.DBusException(message, name=name)


@pytest.fixture
def session_bus():
    """Patch dbus.SessionBus with a mock connection."""
    bus = MagicMock()
    with patch(
        "spotify_notify.domain.playback.mpris.dbus.SessionBus", return_value=bus
    ) as factory:
        yield factory, bus


@pytest.fixture
def interfaces():
    """Patch dbus.Interface to return distinct player/properties mocks."""
    player_iface = MagicMock(name="player")
    props_iface = MagicMock(name="properties")

    def make(obj, dbus_interface):
        return player_iface if dbus_interface == PLAYER_IFACE else props_iface

    with patch(
        "spotify_notify.domain.playback.mpris.dbus.Interface", side_effect=make
    ):
        yield player_iface, props_iface


class TestMprisPlayer:
    """Tests for MprisPlayer."""

    def test_connects_to_service_and_path(self, session_bus, interfaces) -> None:
        factory, bus = session_bus
        with MprisPlayer("org.mpris.MediaPlayer2.vlc", "/org/mpris/MediaPlayer2"):
            pass

        factory.assert_called_once_with(private=True)
        bus.get_object.assert_called_once_with(
            "org.mpris.MediaPlayer2.vlc", "/org/mpris/MediaPlayer2", introspect=False
        )

    def test_closes_bus_on_exit(self, session_bus, interfaces) -> None:
        _, bus = session_bus
        with MprisPlayer():
            pass
        bus.close.assert_called_once()

    def test_closes_bus_on_error(self, session_bus, interfaces) -> None:
        _, bus = session_bus
        with pytest.raises(RuntimeError):
            with MprisPlayer():
                raise RuntimeError("boom")
        bus.close.assert_called_once()

    def test_call_method_passes_timeout(self, session_bus, interfaces) -> None:
        player_iface, _ = interfaces
        with MprisPlayer(timeout=5.0) as player:
            player.call_method("OpenUri", "spotify:track:abc")

        player_iface.OpenUri.assert_called_once_with("spotify:track:abc", timeout=5.0)

    def test_get_property(self, session_bus, interfaces) -> None:
        _, props_iface = interfaces
        props_iface.Get.return_value = {"xesam:title": "Song"}

        with MprisPlayer(timeout=2.0) as player:
            value = player.get_property("Metadata")

        props_iface.Get.assert_called_once_with(PLAYER_IFACE, "Metadata", timeout=2.0)
        assert value == {"xesam:title": "Song"}

    def test_bus_unavailable(self) -> None:
        with patch(
            "spotify_notify.domain.playback.mpris.dbus.SessionBus",
            side_effect=_dbus_error("org.freedesktop.DBus.Error.NotSupported"),
        ):
            with pytest.raises(BusConnectionError):
                MprisPlayer().connect()

    def test_unknown_service(self, session_bus, interfaces) -> None:
        player_iface, _ = interfaces
        player_iface.Next.side_effect = _dbus_error(
            "org.freedesktop.DBus.Error.ServiceUnknown"
        )
        with MprisPlayer() as player:
            with pytest.raises(BusConnectionError):
                player.call_method("Next")

    def test_unsupported_method(self, session_bus, interfaces) -> None:
        player_iface, _ = interfaces
        player_iface.OpenUri.side_effect = _dbus_error(
            "org.freedesktop.DBus.Error.UnknownMethod", "No such method"
        )
        with MprisPlayer() as player:
            with pytest.raises(RemoteCallError) as exc_info:
                player.call_method("OpenUri", "x")
        assert exc_info.value.member == "OpenUri"

    def test_call_without_connection(self) -> None:
        with pytest.raises(RemoteCallError):
            MprisPlayer().call_method("Next")
