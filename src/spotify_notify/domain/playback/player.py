"""
Playback control for MPRIS players.

Maps abstract actions onto single method calls on a player control
collaborator. Holds no state: every action is one remote call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Protocol, Union

from loguru import logger


class PlayerControl(Protocol):
    """Anything that can invoke methods and read properties on a player."""

    def call_method(self, method: str, *args: Any) -> None: ...

    def get_property(self, name: str) -> Any: ...


class PlayerAction(Enum):
    """Zero-argument player actions; values are MPRIS method names."""

    NEXT = "Next"
    PREVIOUS = "Previous"
    PLAY_PAUSE = "PlayPause"


@dataclass(frozen=True)
class OpenUri:
    """Start playback of a specific URI."""

    uri: str


Action = Union[PlayerAction, OpenUri]


def apply_action(control: PlayerControl, action: Action) -> None:
    """Perform one player action as exactly one remote call.

    Raises:
        RemoteCallError: If the player rejects the call
    """
    if isinstance(action, OpenUri):
        logger.info(f"OpenUri {action.uri}")
        control.call_method("OpenUri", action.uri)
    elif isinstance(action, PlayerAction):
        logger.info(f"{action.value}")
        control.call_method(action.value)
    else:
        raise TypeError(f"Unknown player action: {action!r}")


def get_metadata(control: PlayerControl) -> Mapping[str, Any]:
    """Read the player's raw ``Metadata`` property map."""
    metadata = control.get_property("Metadata")
    logger.debug("Player metadata: {!r}", metadata)
    return metadata
