"""``tripdesk logging`` subcommands: persist and inspect the log level."""

import logging

from tripdesk.logging import get_configured_level, get_logger, reset_logger, save_log_level
from tripdesk.logging.logging import _resolve_log_file

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def register_subcommands(subparsers):
    set_level_parser = subparsers.add_parser("set-level", help="Set the logging level")
    set_level_parser.add_argument("level", choices=LEVELS, help="Logging level to use")
    subparsers.add_parser("show-path", help="Show the log file location")
    subparsers.add_parser("show-level", help="Show the configured logging level")


def dispatch(args):
    if args.subcommand == "set-level":
        level_name = args.level.upper()
        path = save_log_level(level_name)
        reset_logger()
        get_logger(level=getattr(logging, level_name))
        print(f"Log level set to {level_name} ({path})")
    elif args.subcommand == "show-path":
        print(_resolve_log_file().resolve())
    elif args.subcommand == "show-level":
        print(get_configured_level())
    else:
        raise ValueError(f"No handler for logging subcommand: {args.subcommand}")
