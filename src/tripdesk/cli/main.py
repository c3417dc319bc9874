# tripdesk/cli/main.py
import argparse
import sys

from tripdesk.cli import api, client, logging as logging_cli
from tripdesk.cli.env import load_env_files, split_env_file_args


def build_parser():
    parser = argparse.ArgumentParser(prog="tripdesk", description="tripdesk API and assistant adapter toolkit")
    parser.add_argument(
        "--env-file",
        action="append",
        default=[],
        help="Load KEY=value lines into the environment first (repeatable)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    api_parser = subparsers.add_parser("api", help="api control")
    api.register_subcommands(api_parser.add_subparsers(dest="subcommand", required=True))

    client_parser = subparsers.add_parser("client", help="Call the API through the assistant adapter")
    client.register_subcommands(client_parser.add_subparsers(dest="subcommand", required=True))

    logging_parser = subparsers.add_parser("logging", help="Logging utilities")
    logging_cli.register_subcommands(logging_parser.add_subparsers(dest="subcommand", required=True))
    return parser


def main(argv=None):
    argv = sys.argv[1:] if argv is None else list(argv)
    # env files must be loaded before subcommand defaults read the environment
    env_files, argv = split_env_file_args(argv)
    if env_files:
        load_env_files(env_files)

    args = build_parser().parse_args(argv)

    handlers = {
        "api": api.dispatch,
        "client": client.dispatch,
        "logging": logging_cli.dispatch,
    }
    handlers[args.command](args)


if __name__ == "__main__":
    main()
