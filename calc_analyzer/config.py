# config.py
"""
Runtime settings for the calculator.

Values come from the environment (optionally a ``.env`` file loaded with
python-dotenv) and can be overridden on the command line.

Environment variables:
  CALC_LOG_LEVEL    log level name for the stderr log (default WARNING)
  CALC_PLAIN_INPUT  truthy value to read lines with builtin input() instead of prompt_toolkit
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

from calc_analyzer.errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Resolved runtime settings."""
    log_level: str = "WARNING"
    plain_input: bool = False


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def _normalize_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level {value!r}; expected one of: {', '.join(LOG_LEVELS)}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calc-analyzer",
        description="Interactive Calculator & Data Analyzer.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Log level for diagnostics written to stderr (default: WARNING, or CALC_LOG_LEVEL).",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        default=None,
        help="Read input with plain input() instead of prompt_toolkit (or set CALC_PLAIN_INPUT).",
    )
    return parser


def load_settings(argv: Optional[List[str]] = None) -> Settings:
    """Build Settings from the environment, then apply command-line overrides.

    Raises ConfigError for an unknown log level.
    """
    load_dotenv()
    args = build_parser().parse_args(argv)

    log_level = args.log_level if args.log_level is not None else os.getenv("CALC_LOG_LEVEL", "WARNING")
    plain_input = args.plain if args.plain is not None else _env_flag("CALC_PLAIN_INPUT")

    return Settings(log_level=_normalize_level(log_level), plain_input=plain_input)


def configure_logging(level: str) -> None:
    """Send log records to stderr so stdout carries only the calculator report."""
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
