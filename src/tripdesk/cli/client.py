"""CLI helpers for calling the trips API through the assistant adapter.

Each invocation is one adapter session: it logs in with ``--user`` and then
runs the requested listing, printing exactly the text a planner would see.
"""

from __future__ import annotations

import os

from tripdesk.client.adapter import TripsApiClient


_LISTING_METHODS = {
    "trips": "get_trips",
    "vehicles": "get_vehicles",
    "drivers": "get_drivers",
}


def _add_common(parser) -> None:
    parser.add_argument("--user", required=True, help="User name to log in with, e.g. user_pepsi")
    parser.add_argument(
        "--server",
        default=os.getenv("TRIPDESK_API_URL") or "",
        help="API base URL (default: $TRIPDESK_API_URL or http://$TRIPDESK_HOST:$TRIPDESK_PORT)",
    )
    parser.add_argument(
        "--timeout-seconds",
        type=float,
        default=None,
        help="HTTP timeout seconds (default: $TRIPDESK_HTTP_TIMEOUT_SECONDS or 10)",
    )


def register_subcommands(subparsers) -> None:
    _add_common(subparsers.add_parser("login", help="Log in and print the session id"))
    for name in _LISTING_METHODS:
        _add_common(subparsers.add_parser(name, help=f"Log in and list the customer's {name}"))


def dispatch(args) -> None:
    if args.subcommand != "login" and args.subcommand not in _LISTING_METHODS:
        raise SystemExit(f"Unknown client subcommand: {args.subcommand}")

    with TripsApiClient(args.server or None, timeout=args.timeout_seconds) as client:
        result = client.login(args.user)
        if args.subcommand == "login" or client.session_id is None:
            print(result)
            return
        print(getattr(client, _LISTING_METHODS[args.subcommand])())
