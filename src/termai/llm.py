"""Streaming requests to the Ollama ``/api/generate`` endpoint."""

import logging
import sys
from typing import TextIO

import httpx
from pydantic import ValidationError

from termai.exceptions import (
    InvalidApiBase,
    RequestTimeout,
    ServerUnreachable,
    StreamDecodeError,
    TermaiError,
    UpstreamError,
)
from termai.models import AiConfig, GenerateChunk, GenerateRequest
from termai.wait_indicator import SPINNER_INTERVAL_SECONDS, WaitIndicator

log = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"


class ResponseWriter:
    """Write streamed tokens between the configured output markers."""

    def __init__(self, config: AiConfig, spinner: WaitIndicator, out: TextIO) -> None:
        self._config = config
        self._spinner = spinner
        self._out = out
        self.started = False
        self.records = 0

    def begin(self) -> None:
        """Stop the spinner and emit the start marker, once."""
        if self.started:
            return
        self.started = True
        self._spinner.cancel()
        self._write(self._config.output_start)

    def record(self, line: str, status_code: int) -> None:
        if not line.strip():
            return
        try:
            chunk = GenerateChunk.model_validate_json(line)
        except ValidationError as e:
            raise StreamDecodeError(line) from e
        if chunk.error is not None:
            raise UpstreamError(status_code, chunk.error)
        self.records += 1
        self._write(chunk.response)

    def end(self) -> None:
        self.begin()
        self._write(self._config.output_end + "\n")

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()


async def stream_completion(
    request: GenerateRequest,
    api_base: str,
    config: AiConfig,
    out: TextIO | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    spinner_interval: float = SPINNER_INTERVAL_SECONDS,
) -> None:
    """Send the request and copy each streamed ``response`` fragment to ``out``."""
    stream = out if out is not None else sys.stdout
    spinner = WaitIndicator(config.spinner_chars, stream=stream, interval=spinner_interval)
    writer = ResponseWriter(config, spinner, stream)
    url = f"{api_base}{GENERATE_PATH}"
    body = request.model_dump_json()
    log.debug("POST %s (%d bytes)", url, len(body))

    spinner.start()
    try:
        async with httpx.AsyncClient(
            transport=transport, timeout=httpx.Timeout(config.request_timeout)
        ) as client:
            async with client.stream(
                "POST", url, content=body, headers={"Content-Type": "application/json"}
            ) as response:
                log.debug("status=%d", response.status_code)
                if response.status_code != 200:
                    await response.aread()
                    raise UpstreamError(response.status_code, response.text)

                pending = ""
                async for text in response.aiter_text():
                    if not text:
                        continue
                    writer.begin()
                    pending += text
                    *lines, pending = pending.split("\n")
                    for line in lines:
                        writer.record(line, response.status_code)
                writer.record(pending, response.status_code)
    except httpx.InvalidURL as e:
        raise InvalidApiBase(api_base, str(e)) from e
    except httpx.ConnectError as e:
        log.debug("connect failed: %s", e)
        raise ServerUnreachable() from e
    except httpx.TimeoutException as e:
        raise RequestTimeout(config.request_timeout or 0) from e
    except httpx.HTTPError as e:
        raise TermaiError(f"Request to Ollama failed: {e}") from e
    finally:
        spinner.cancel()

    log.debug("stream closed after %d records", writer.records)
    writer.end()
