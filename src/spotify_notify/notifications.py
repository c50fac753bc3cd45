"""Desktop notification helpers for Spotify Notify."""

import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Literal, Optional
from urllib.parse import unquote

import requests
from loguru import logger

from spotify_notify.domain.library.models import TrackMetadata


def notify(
    title: str,
    message: str,
    app_name: str = "Spotify Notify",
    icon_path: Optional[Path] = None,
    category: Optional[str] = None,
    urgency: Literal["low", "normal", "critical"] = "normal",
) -> bool:
    """
    Show a desktop notification using notify-send.

    Args:
        title: Notification summary
        message: Notification body
        app_name: Application name reported to the notification daemon
        icon_path: Local image shown with the notification
        category: Notification category hint (e.g. "music")
        urgency: Urgency level ('low', 'normal', 'critical')

    Returns:
        True if notify-send ran successfully

    Note:
        Skips the notification if notify-send is not available.
        Errors are logged but don't interrupt program flow.
    """
    if not shutil.which("notify-send"):
        logger.warning("notify-send not available, skipping notification")
        return False

    cmd = ["notify-send", "--urgency", urgency, "--app-name", app_name]
    if icon_path is not None:
        cmd += ["--icon", str(icon_path)]
    if category:
        cmd += ["--category", category]
    cmd += [title, message]

    try:
        result = subprocess.run(
            cmd,
            check=False,  # Don't raise on error
            timeout=2.0,
            capture_output=True,
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.warning(f"notify-send failed: {e}")
        return False

    if result.returncode != 0:
        logger.warning(
            f"notify-send exited with {result.returncode}: "
            f"{result.stderr.decode('utf-8', errors='replace').strip()}"
        )
        return False
    return True


def download_artwork(
    url: str, directory: Path, timeout: float = 10.0
) -> Optional[Path]:
    """Fetch artwork into ``directory``.

    Local file:// URLs are used in place.

    Returns:
        Path of the saved image, or None if it could not be fetched
    """
    if url.startswith("file://"):
        local_path = Path(unquote(url[len("file://"):]))
        return local_path if local_path.is_file() else None

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"Could not fetch artwork {url}: {e}")
        return None

    artwork_path = directory / "artwork"
    try:
        artwork_path.write_bytes(response.content)
    except OSError as e:
        logger.warning(f"Could not save artwork to {artwork_path}: {e}")
        return None
    logger.debug(f"Saved artwork ({len(response.content)} bytes) to {artwork_path}")
    return artwork_path


def format_notification_body(metadata: TrackMetadata) -> str:
    """Body line: "<artists> - <album>"."""
    return f"{', '.join(metadata.artists)} - {metadata.album}"


def notify_now_playing(
    metadata: TrackMetadata, app_name: str = "Spotify Notify"
) -> bool:
    """Show the current track as a notification with its artwork.

    The artwork lives in a temporary directory removed once notify-send
    returns. A failed download still shows the notification without an icon.

    Returns:
        True if the notification was shown
    """
    with tempfile.TemporaryDirectory(prefix="spotify-notify-") as tmp_dir:
        icon_path = download_artwork(metadata.artwork_url, Path(tmp_dir))
        return notify(
            metadata.title,
            format_notification_body(metadata),
            app_name=app_name,
            icon_path=icon_path,
            category="music",
        )
