"""Wire models for the Ollama ``/api/generate`` endpoint."""

from pydantic import BaseModel, ConfigDict


class GenerateRequest(BaseModel):
    """Request body sent to the server; built fresh for every run."""

    model: str
    system: str
    prompt: str


class GenerateChunk(BaseModel):
    """One newline-delimited record of a streamed response."""

    model_config = ConfigDict(extra="ignore")

    response: str = ""
    done: bool = False
    error: str | None = None
