"""Gather facts about the user's environment for the system prompt."""

import logging
import os
import platform
import subprocess
from collections.abc import Mapping

log = logging.getLogger(__name__)

CLIPBOARD_TIMEOUT_SECONDS = 5


def get_platform_name() -> str:
    """Return a short operating system name (e.g. 'linux', 'macos', 'windows')."""
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    return system or "unknown"


def detect_user(environ: Mapping[str, str] | None = None) -> str:
    """Return the current user name from the environment."""
    env = os.environ if environ is None else environ
    return env.get("USERNAME") or env.get("USER") or "unknown"


def detect_shell(environ: Mapping[str, str] | None = None) -> str:
    """Return the user's shell, telling PowerShell and cmd.exe apart on Windows."""
    env = os.environ if environ is None else environ
    if "SHELL" in env:
        return env["SHELL"]
    if "ComSpec" in env and "PROMPT" not in env:
        # cmd.exe defines PROMPT, PowerShell does not.
        return "powershell"
    if "ComSpec" in env and "cmd.exe" in env["ComSpec"]:
        return "cmd"
    return "unknown"


def _run_clipboard_command(argv: list[str]) -> str:
    result = subprocess.run(
        argv,
        capture_output=True,
        text=True,
        timeout=CLIPBOARD_TIMEOUT_SECONDS,
    )
    log.debug("%s returned %d chars (rc=%d)", argv[0], len(result.stdout), result.returncode)
    return result.stdout


def _read_linux_clipboard() -> str | None:
    try:
        text = _run_clipboard_command(["xclip", "-selection", "clipboard", "-o"])
        if text.strip():
            return text
    except (subprocess.TimeoutExpired, OSError) as e:
        log.debug("xclip failed: %s", e)
    try:
        return _run_clipboard_command(["xsel", "--clipboard", "--output"])
    except (subprocess.TimeoutExpired, OSError) as e:
        log.debug("xsel failed: %s", e)
        return None


def read_clipboard() -> str | None:
    """Return the clipboard text, or None when no clipboard tool produced any.

    On Windows and macOS a missing clipboard tool raises; on Linux both
    ``xclip`` and ``xsel`` are tried and failure yields None.
    """
    system = platform.system()
    if system == "Windows":
        return _run_clipboard_command(["powershell", "-NoProfile", "-Command", "Get-Clipboard"])
    if system == "Darwin":
        return _run_clipboard_command(["pbpaste"])
    if system == "Linux":
        return _read_linux_clipboard()
    log.debug("no clipboard support for %s", system)
    return None
