"""Shared fixtures for the termai test suite."""

import pytest


class RecordingStream:
    """Text stream that keeps every write separately."""

    def __init__(self) -> None:
        self.writes: list[str] = []
        self.flush_calls = 0

    def isatty(self) -> bool:
        return True

    def write(self, text: str) -> int:
        self.writes.append(text)
        return len(text)

    def flush(self) -> None:
        self.flush_calls += 1

    def getvalue(self) -> str:
        return "".join(self.writes)


@pytest.fixture
def recording_stream() -> RecordingStream:
    return RecordingStream()


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Point the config file at a temp home and clear Ollama environment variables."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("OLLAMA_MODEL", raising=False)
    monkeypatch.delenv("OLLAMA_API_BASE", raising=False)
    return tmp_path
