"""One-shot prompt mode."""

import argparse
import logging
from pathlib import Path

from termai.cli.shared import report_failure
from termai.config import load_config
from termai.exceptions import Interrupted, TermaiError
from termai.models import AiConfig
from termai.termai import run as query_llm

log = logging.getLogger(__name__)


def run(args: argparse.Namespace, config_file: Path) -> int:
    """Send the prompt and stream the answer to stdout."""
    config = AiConfig()
    try:
        config = load_config(config_file)
        query_llm(
            " ".join(args.words),
            config,
            model=args.model,
            include_clipboard=args.clip,
        )
    except TermaiError as e:
        log.debug("run failed: %r", e)
        return report_failure(e, config)
    except KeyboardInterrupt:
        return report_failure(Interrupted(), config)
    return 0
