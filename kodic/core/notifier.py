"""Desktop notifications"""

import logging
import subprocess
import sys
from pathlib import Path

from ..config.settings import settings
from ..exceptions import NotificationError
from ..logging_config import get_logger
from ..utils.error_handler import handle_errors
from .constants import NotificationConstants
from .interfaces import NotifierInterface

logger = get_logger(__name__)


class DesktopNotifier(NotifierInterface):
    """Shows transient desktop notifications with the platform's own tool.

    ``notify-send`` is used on Linux and other Unix desktops, ``osascript`` on
    macOS and a PowerShell toast on Windows. The command is spawned and left
    running; nothing waits on it. Finished children are reaped on the next call.
    """

    def __init__(
        self,
        app_name: str | None = None,
        icon_path: Path | str | None = None,
        timeout_ms: int | None = None,
        platform: str | None = None,
    ):
        self.app_name = app_name or settings.notification.app_name
        self.icon_path = Path(
            icon_path if icon_path is not None else settings.notification.icon_path
        )
        self.timeout_ms = timeout_ms or settings.notification.timeout_ms
        self.platform = platform or sys.platform
        self._pending: list[subprocess.Popen] = []

    def build_command(self, title: str, body: str) -> list[str]:
        """Command line that shows one notification on this platform"""
        if self.platform == "darwin":
            return self._osascript_command(title, body)
        if self.platform == "win32":
            return self._toast_command(title, body)
        return self._notify_send_command(title, body)

    def _notify_send_command(self, title: str, body: str) -> list[str]:
        cmd = [
            NotificationConstants.NOTIFY_COMMAND,
            "-a",
            self.app_name,
            "-t",
            str(self.timeout_ms),
        ]
        if self.icon_path.is_file():
            cmd += ["-i", str(self.icon_path.resolve())]
        # "--" keeps a body starting with "-" from being read as an option
        cmd += ["--", title, body]
        return cmd

    def _osascript_command(self, title: str, body: str) -> list[str]:
        script = (
            f'display notification "{_applescript_quote(body)}" '
            f'with title "{_applescript_quote(title)}" '
            f'subtitle "{_applescript_quote(self.app_name)}"'
        )
        return [NotificationConstants.OSASCRIPT_COMMAND, "-e", script]

    def _toast_command(self, title: str, body: str) -> list[str]:
        script = NotificationConstants.TOAST_SCRIPT.format(
            title=_powershell_quote(title),
            body=_powershell_quote(body),
            app_id=NotificationConstants.POWERSHELL_APP_ID,
        )
        return [
            NotificationConstants.POWERSHELL_COMMAND,
            "-NoProfile",
            "-WindowStyle",
            "Hidden",
            "-Command",
            script,
        ]

    @handle_errors(log_level=logging.WARNING, operation_name="notify")
    def notify(self, title: str, body: str) -> None:
        self._reap()
        try:
            proc = subprocess.Popen(
                self.build_command(title, body),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            raise NotificationError(title, e) from e
        self._pending.append(proc)
        logger.debug(f"Notification dispatched: {title}")

    def _reap(self) -> None:
        self._pending = [p for p in self._pending if p.poll() is None]


class NullNotifier(NotifierInterface):
    """Notifier used when notifications are disabled"""

    def notify(self, title: str, body: str) -> None:
        logger.debug(f"Notifications disabled, skipping: {title}")


def _applescript_quote(text: str) -> str:
    """Escape text for an AppleScript string literal"""
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", " ")


def _powershell_quote(text: str) -> str:
    """Escape text for a single-quoted PowerShell string"""
    return text.replace("'", "''")
