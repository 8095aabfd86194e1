"""Configuration commands: ``--config``, ``--config-list`` and ``--help``."""

import argparse
import logging
import os
from pathlib import Path

from termai.cli.shared import config_for_failure, report_failure
from termai.config import OLLAMA_MODEL, read_config, update_config
from termai.exceptions import TermaiError
from termai.models import AiConfig

log = logging.getLogger(__name__)

USAGE = "Usage: ai [options] <prompt>"


def set_setting(setting: str, config_file: Path) -> int:
    """Persist one ``key=value`` setting."""
    try:
        update_config(setting, config_file)
    except TermaiError as e:
        return report_failure(e, config_for_failure(config_file))
    log.debug("saved %r to %s", setting, config_file)
    return 0


def list_config(config_file: Path) -> int:
    """Print every persisted setting."""
    try:
        stored = read_config(config_file)
    except TermaiError as e:
        return report_failure(e, AiConfig())
    for key, value in stored.items():
        print(f"{key}={value}")
    if not stored.get(OLLAMA_MODEL):
        print(f"{OLLAMA_MODEL}=(not configured)")
    return 0


def print_usage(parser: argparse.ArgumentParser, config_file: Path) -> int:
    """Print help followed by the model that would be used."""
    print(USAGE)
    parser.print_help()
    try:
        stored_model = read_config(config_file).get(OLLAMA_MODEL)
    except TermaiError as e:
        return report_failure(e, AiConfig())
    model = stored_model or os.environ.get(OLLAMA_MODEL, "")
    print(f"Current model: {model or '(not configured)'}")
    return 0
