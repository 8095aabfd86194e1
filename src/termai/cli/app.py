"""Top-level CLI router."""

import argparse
import logging

from termai import __version__
from termai.cli import configure as configure_cmd
from termai.cli import query as query_cmd
from termai.config import get_config_file


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``ai`` command."""
    parser = argparse.ArgumentParser(
        prog="ai",
        usage=argparse.SUPPRESS,
        description="Ask a local Ollama model for help with terminal commands",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Display help information")
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-p",
        "--clip",
        action="store_true",
        help="Include clipboard content in the prompt",
    )
    parser.add_argument("-m", "--model", help="Specify the Ollama model")
    parser.add_argument(
        "-c",
        "--config",
        metavar="KEY=VALUE",
        help="Set a configuration property: key=value",
    )
    parser.add_argument(
        "-l",
        "--config-list",
        action="store_true",
        help="List the current configuration",
    )
    parser.add_argument("words", nargs="*", metavar="prompt", help="The prompt to send")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Route to help, configuration or prompt mode."""
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    config_file = get_config_file()
    if args.help:
        return configure_cmd.print_usage(parser, config_file)
    if args.config is not None:
        return configure_cmd.set_setting(args.config, config_file)
    if args.config_list:
        return configure_cmd.list_config(config_file)
    return query_cmd.run(args, config_file)


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
