"""Shared CLI helpers, including the single failure path."""

import sys
from pathlib import Path
from typing import TextIO

from termai.config import load_config
from termai.constants import SHOW_CURSOR
from termai.exceptions import TermaiError
from termai.models import AiConfig


def report_failure(
    error: TermaiError,
    config: AiConfig,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Print the error, restore the cursor, close the output and return the exit code."""
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    print(f"Error: {error.message}", file=err)
    out.write(SHOW_CURSOR)
    print(config.output_end, file=out, flush=True)
    return error.exit_code


def config_for_failure(config_file: Path) -> AiConfig:
    """Return the configured output markers, or the defaults if the file is invalid."""
    try:
        return load_config(config_file)
    except TermaiError:
        return AiConfig()
