"""Terminal assistant that streams answers from an Ollama server."""

__version__ = "0.1.0"
