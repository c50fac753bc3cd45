"""Centralized Rich Console management.

One Console for stdout and one for stderr, shared by every module.
"""

from rich.console import Console

_console: Console | None = None
_error_console: Console | None = None


def get_console(stderr: bool = False) -> Console:
    """Get or create the global Rich Console instance.

    Args:
        stderr: Return the console bound to standard error instead

    Returns:
        Console: The global Rich Console instance
    """
    global _console, _error_console
    if stderr:
        if _error_console is None:
            _error_console = Console(stderr=True)
        return _error_console
    if _console is None:
        _console = Console()
    return _console


def safe_print(message: str, style: str | None = None) -> None:
    """Print using Rich Console with optional styling.

    Args:
        message: The message to print
        style: Optional Rich style string (e.g., "bold red", "green")
    """
    console = get_console()
    if style:
        console.print(message, style=style, markup=False)
    else:
        console.print(message, markup=False, highlight=False)
