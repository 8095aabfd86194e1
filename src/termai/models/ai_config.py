"""Configuration model for termai."""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from termai.constants import GREEN, ORANGE, RESET

DEFAULT_API_BASE = "http://localhost:11434"
DEFAULT_OUTPUT_START = RESET + GREEN + "✨ "
DEFAULT_OUTPUT_END = RESET + GREEN
DEFAULT_CODE_COLOR = ORANGE
DEFAULT_SPINNER_CHARS = "⠁⠂⠄⡀⡈⡐⡠⣀⣁⣂⣄⣌⣔⣤⣥⣦⣮⣶⣷⣿⡿⠿⢟⠟⡛⠛⠫⢋⠋⠍⡉⠉⠑⠡⢁"
DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful terminal assistant. Provide concise assistance with terminal commands. "
    "Operating system: $platform. "
    "User: '$user', shell: $shell. "
    "Do not use markdown formatting. "
    "Exclude the shell prompt from command suggestions. "
    "Keep responses brief, ending with the proposed command."
    "Highlight the proposed command with $code, and reset color at the end with " + RESET + ". "
)


class AiConfig(BaseModel):
    """Effective runtime configuration, built once at startup.

    Fields are populated from the upper-case keys of the config file. Keys
    termai does not know about are kept as extras and otherwise ignored.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    ollama_model: str | None = Field(default=None, alias="OLLAMA_MODEL")
    ollama_api_base: str | None = Field(default=None, alias="OLLAMA_API_BASE")
    system_prompt: str = Field(default=DEFAULT_SYSTEM_PROMPT, alias="SYSTEM_PROMPT")
    output_start: str = Field(default=DEFAULT_OUTPUT_START, alias="OUTPUT_START")
    output_end: str = Field(default=DEFAULT_OUTPUT_END, alias="OUTPUT_END")
    code_color: str = Field(default=DEFAULT_CODE_COLOR, alias="CODE_COLOR")
    spinner_chars: str = Field(default=DEFAULT_SPINNER_CHARS, alias="SPINNER_CHARS")
    request_timeout: float | None = Field(default=None, alias="REQUEST_TIMEOUT")

    @field_validator("code_color", mode="before")
    @classmethod
    def _default_code_color(cls, value: str | None) -> str:
        return value or DEFAULT_CODE_COLOR

    @field_validator("spinner_chars", mode="before")
    @classmethod
    def _default_spinner_chars(cls, value: str | None) -> str:
        return value or DEFAULT_SPINNER_CHARS

    @field_validator("request_timeout", mode="before")
    @classmethod
    def _empty_timeout_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("request_timeout")
    @classmethod
    def _positive_timeout(cls, value: float | None) -> float | None:
        if value is not None and (not math.isfinite(value) or value <= 0):
            raise ValueError("REQUEST_TIMEOUT must be a positive, finite number of seconds")
        return value
