"""Exception hierarchy for termai.

Every failure that ends a run is a :class:`TermaiError`. The CLI boundary
turns it into a message on stderr and the error's exit code.

Hierarchy
---------
TermaiError
├── EmptyPrompt
├── ClipboardReadError
├── NoApiBaseConfigured
├── NoModelConfigured
├── ServerUnreachable
├── RequestTimeout
├── UpstreamError
├── StreamDecodeError
├── MalformedSetting
├── InvalidConfiguration
├── InvalidApiBase
└── Interrupted
"""

from __future__ import annotations

from termai import exit_codes


class TermaiError(Exception):
    """Base exception for all termai errors."""

    exit_code: int = exit_codes.GENERAL_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# --- Prompt ----------------------------------------------------------------

class EmptyPrompt(TermaiError):
    """Raised when no prompt text was supplied."""

    exit_code = exit_codes.EMPTY_PROMPT

    def __init__(self, message: str = "No prompt provided") -> None:
        super().__init__(message)


class ClipboardReadError(TermaiError):
    """Raised when the clipboard could not be read."""

    exit_code = exit_codes.CLIPBOARD_ERROR


# --- Configuration ---------------------------------------------------------

class NoApiBaseConfigured(TermaiError):
    def __init__(self) -> None:
        super().__init__(
            "No Ollama API base URL specified. Please set the OLLAMA_API_BASE "
            "environment variable or use the --config option."
        )


class NoModelConfigured(TermaiError):
    def __init__(self) -> None:
        super().__init__(
            "No model specified. Please set the OLLAMA_MODEL environment variable, "
            "use the --model option or configure a model via --config."
        )


class MalformedSetting(TermaiError):
    def __init__(self, setting: str) -> None:
        super().__init__("Invalid configuration format. Use key=value format.")
        self.setting = setting


class InvalidConfiguration(TermaiError):
    """Raised when a stored setting has a value of the wrong shape."""


# --- Server ----------------------------------------------------------------

class ServerUnreachable(TermaiError):
    def __init__(self, message: str = "Ollama server not running!") -> None:
        super().__init__(message)


class RequestTimeout(TermaiError):
    def __init__(self, timeout: float) -> None:
        super().__init__(f"Ollama did not respond within {timeout:g} seconds")
        self.timeout = timeout


class UpstreamError(TermaiError):
    """Raised when the server answers with an error status or error record."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Ollama failed: {status_code} {body}")
        self.status_code = status_code
        self.body = body


class StreamDecodeError(TermaiError):
    """Raised when a streamed record is not valid JSON."""

    def __init__(self, record: str) -> None:
        super().__init__(f"Could not decode response record: {record!r}")
        self.record = record


class Interrupted(TermaiError):
    """Raised when the user interrupts a run with Ctrl+C."""

    exit_code = exit_codes.KEYBOARD_INTERRUPT

    def __init__(self) -> None:
        super().__init__("Interrupted")


class InvalidApiBase(TermaiError):
    """Raised when the Ollama API base is not a usable URL."""

    def __init__(self, api_base: str, reason: str) -> None:
        super().__init__(f"Invalid Ollama API base URL {api_base!r}: {reason}")
        self.api_base = api_base
