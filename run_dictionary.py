"""This module provides the entry point for running the dictionary shell."""

import argparse
import logging
import signal
import sys
from pathlib import Path
from typing import Any, Optional

from src.dictionary.config import (
    ConfigBoolParsingError,
    ConfigNotFoundError,
    ConfigValueError,
    DictionaryConfig,
    load_config_file,
)
from src.dictionary.loader import load_dictionary
from src.dictionary.logger import setup_logging, teardown_logging
from src.dictionary.shell import InputStreamClosedError, QueryShell

CONFIG_PATH = Path(__file__).parent / "config.txt"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse the command line options.

    Args:
        argv (Optional[list[str]]): The arguments, sys.argv[1:] if None.

    Returns:
        argparse.Namespace: The parsed options.

    """
    parser = argparse.ArgumentParser(
        description="Look words up and autocomplete prefixes.",
    )
    parser.add_argument(
        "--config_path",
        type=str,
        default=str(CONFIG_PATH),
        help="Optional path to the config file.",
        required=False,
    )
    parser.add_argument(
        "--wordlist",
        type=str,
        default=None,
        help="Word list to load, overrides the config file's 'wordlist'.",
        required=False,
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of suggestions per query.",
        required=False,
    )
    parser.add_argument(
        "--log_level",
        default="INFO",
        choices=LOG_LEVELS,
        help="Minimum level of the records written to the log file.",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> DictionaryConfig:
    """Combine the config file with the command line overrides.

    The config file may be absent when a word list is given on the
    command line.

    Args:
        args (argparse.Namespace): The parsed options.

    Returns:
        DictionaryConfig: The settings to run with.

    """
    config_path = Path(args.config_path)
    if args.wordlist is not None and not config_path.exists():
        config = DictionaryConfig(Path(args.wordlist))
    else:
        config = load_config_file(config_path, args.wordlist)

    if args.limit is not None:
        if args.limit <= 0:
            raise ConfigValueError(
                f"The value of 'limit' must be a positive integer, "
                f"got {args.limit}.",
            )
        config.max_suggestions = args.limit
    return config


def handle_sigterm(signum: int, frame: Any) -> None:
    """Handle SIGTERM signals to perform a graceful shutdown
    of the application.

    Args:
        signum (int): The signal number received.
        frame (FrameType): The current stack frame (unused).

    Exits:
        Exits the process with status code 0.

    """
    sys.exit(0)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the dictionary shell.

    Returns:
        int: The process exit code.

    """
    args = parse_args(argv)

    try:
        config = build_config(args)
    except (
        FileNotFoundError,
        ConfigNotFoundError,
        ConfigBoolParsingError,
        ConfigValueError,
    ) as e:
        print(f"[CONFIG ERROR] {e}", file=sys.stderr)
        return 2

    setup_logging(config.log_file, getattr(logging, args.log_level))
    logging.info(f"Starting dictionary with {config!r}")

    try:
        trie = load_dictionary(config.word_list_path)
        shell = QueryShell(
            trie,
            limit=config.max_suggestions,
            log_details=config.log_details,
        )
        return shell.run()

    except InputStreamClosedError:
        logging.exception("Input stream closed unexpectedly")
        print("Error while reading input", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        logging.info("Interrupted by the user")
        return 130

    finally:
        teardown_logging()


if __name__ == "__main__":
    signal.signal(signal.SIGTERM, handle_sigterm)
    sys.exit(main())
