"""Core logic for termai."""

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import TextIO

import httpx

from termai.config import resolve_api_base, resolve_model
from termai.context import detect_shell, detect_user, get_platform_name, read_clipboard
from termai.llm import stream_completion
from termai.models import AiConfig, GenerateRequest
from termai.prompt import build_system_prompt, build_user_prompt

log = logging.getLogger("termai")


def prepare_request(
    raw_prompt: str,
    config: AiConfig,
    *,
    model: str | None = None,
    include_clipboard: bool = False,
    clipboard_fetch: Callable[[], str | None] = read_clipboard,
    environ: Mapping[str, str] | None = None,
) -> tuple[str, GenerateRequest]:
    """Resolve the endpoint and build the request body without touching the network."""
    prompt = build_user_prompt(raw_prompt, include_clipboard, clipboard_fetch)
    api_base = resolve_api_base(config, environ)
    resolved_model = resolve_model(model, config, environ)
    system = build_system_prompt(
        config.system_prompt,
        get_platform_name(),
        detect_user(environ),
        detect_shell(environ),
        config.code_color,
    )
    log.debug("prompt=%r", prompt)
    return api_base, GenerateRequest(model=resolved_model, system=system, prompt=prompt)


def run(
    raw_prompt: str,
    config: AiConfig,
    *,
    model: str | None = None,
    include_clipboard: bool = False,
    clipboard_fetch: Callable[[], str | None] = read_clipboard,
    out: TextIO | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Run the core termai pipeline: build the request, then stream the answer."""
    api_base, request = prepare_request(
        raw_prompt,
        config,
        model=model,
        include_clipboard=include_clipboard,
        clipboard_fetch=clipboard_fetch,
    )
    asyncio.run(stream_completion(request, api_base, config, out, transport=transport))
