"""
MPRIS player access over the D-Bus session bus.

Blocking dbus-python adapter used by the CLI. Opens a private bus
connection per command and closes it on exit.
"""

from typing import Any, Optional

import dbus
from loguru import logger

from spotify_notify.core.config import DEFAULT_OBJECT_PATH, DEFAULT_SERVICE_NAME

from .exceptions import BusConnectionError, RemoteCallError

PLAYER_IFACE = "org.mpris.MediaPlayer2.Player"
PROPS_IFACE = "org.freedesktop.DBus.Properties"


class MprisPlayer:
    """Player control collaborator backed by a session bus connection.

    Use as a context manager:

        with MprisPlayer("org.mpris.MediaPlayer2.spotify") as player:
            player.call_method("Next")
    """

    def __init__(
        self,
        service_name: str = DEFAULT_SERVICE_NAME,
        object_path: str = DEFAULT_OBJECT_PATH,
        timeout: float = 5.0,
    ):
        self.service_name = service_name
        self.object_path = object_path
        self.timeout = timeout
        self._bus: Optional[dbus.SessionBus] = None
        self._player: Optional[dbus.Interface] = None
        self._properties: Optional[dbus.Interface] = None

    def connect(self) -> "MprisPlayer":
        """Open the bus connection and bind the player object.

        Raises:
            BusConnectionError: If the bus or service cannot be reached
        """
        logger.debug(f"Connecting to {self.service_name} at {self.object_path}")
        try:
            self._bus = dbus.SessionBus(private=True)
            # Skip introspection so no call is made before one is needed
            obj = self._bus.get_object(
                self.service_name, self.object_path, introspect=False
            )
        except dbus.exceptions.DBusException as e:
            self.close()
            logger.error(f"Session bus connection failed: {e}")
            raise BusConnectionError(self.service_name, str(e)) from e

        self._player = dbus.Interface(obj, dbus_interface=PLAYER_IFACE)
        self._properties = dbus.Interface(obj, dbus_interface=PROPS_IFACE)
        return self

    def close(self) -> None:
        """Close the private bus connection (safe to call twice)."""
        if self._bus is not None:
            self._bus.close()
            logger.debug(f"Closed bus connection to {self.service_name}")
        self._bus = None
        self._player = None
        self._properties = None

    def __enter__(self) -> "MprisPlayer":
        return self.connect()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def call_method(self, method: str, *args: Any) -> None:
        """Invoke a method on the Player interface.

        Raises:
            RemoteCallError: If the call fails or times out
        """
        if self._player is None:
            raise RemoteCallError(method, "not connected")
        try:
            getattr(self._player, method)(*args, timeout=self.timeout)
        except dbus.exceptions.DBusException as e:
            logger.error(f"{PLAYER_IFACE}.{method} failed: {e}")
            raise self._translate(method, e) from e

    def get_property(self, name: str) -> Any:
        """Read a property of the Player interface.

        Raises:
            RemoteCallError: If the read fails or times out
        """
        if self._properties is None:
            raise RemoteCallError(name, "not connected")
        try:
            return self._properties.Get(PLAYER_IFACE, name, timeout=self.timeout)
        except dbus.exceptions.DBusException as e:
            logger.error(f"Reading {PLAYER_IFACE}.{name} failed: {e}")
            raise self._translate(name, e) from e

    def _translate(self, member: str, error: "dbus.exceptions.DBusException"):
        # An absent service surfaces on first use since introspection is skipped
        if error.get_dbus_name() in (
            "org.freedesktop.DBus.Error.ServiceUnknown",
            "org.freedesktop.DBus.Error.NoReply",
        ):
            return BusConnectionError(
                self.service_name, error.get_dbus_message() or str(error)
            )
        return RemoteCallError(member, error.get_dbus_message() or str(error))
