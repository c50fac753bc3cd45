"""Terminal I/O used for interactive track selection."""

from typing import Optional, Protocol

from rich.console import Console

from spotify_notify.core.console import get_console


class InteractiveIO(Protocol):
    """Prompt/read capability handed to the resolver."""

    def write(self, text: str) -> None: ...

    def read(self) -> str: ...


class ConsoleIO:
    """InteractiveIO over the shared Rich console and standard input."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()

    def write(self, text: str) -> None:
        self.console.print(text, end="", markup=False, highlight=False)

    def read(self) -> str:
        return self.console.input()
