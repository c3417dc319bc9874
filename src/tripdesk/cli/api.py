# tripdesk/cli/api.py
from __future__ import annotations

import json
import os
from pathlib import Path

import requests

from tripdesk.logging import get_logger

_REQUEST_TIMEOUT = 2.0
_DEFAULT_PORT = 5271


def register_subcommands(subparsers):
    subparsers.add_parser("status", help="Check whether the API server is running")
    starter_parser = subparsers.add_parser("start", help="start the API server")
    starter_parser.add_argument(
        "--host",
        default=os.getenv("TRIPDESK_HOST") or "127.0.0.1",
        help="Host to run the API server on (default: $TRIPDESK_HOST or 127.0.0.1)",
    )
    starter_parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("TRIPDESK_PORT") or _DEFAULT_PORT),
        help=f"Port to run the API server on (default: $TRIPDESK_PORT or {_DEFAULT_PORT})",
    )


def _state_file() -> Path:
    raw = os.getenv("TRIPDESK_API_STATE_FILE")
    if raw and raw.strip():
        return Path(raw).expanduser()
    return Path.home() / ".tripdesk" / "api_state.json"


def _loopback_host(host: str) -> str:
    if host in {"0.0.0.0", "::"}:
        return "127.0.0.1"
    return host


def _read_state() -> dict | None:
    try:
        data = json.loads(_state_file().read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return None
    return data if isinstance(data, dict) else None


def dispatch(args):
    """Dispatch API CLI subcommands using a simple lookup table.

    Errors from handlers are allowed to propagate so callers can see the
    underlying exception. Unknown subcommands raise ``ValueError``.
    """
    logger = get_logger(__file__)

    def _status() -> None:
        state = _read_state()
        if state is None:
            logger.info("API server is not running.")
            return

        host, port = state.get("host"), state.get("port")
        url = f"http://{_loopback_host(str(host))}:{port}/status"
        try:
            response = requests.get(url, timeout=_REQUEST_TIMEOUT)
        except requests.RequestException as exc:
            logger.warning("API server at %s:%s is not responding: %s", host, port, exc)
            return

        if response.status_code == 200:
            logger.info("API server is running at %s:%s", host, port)
        else:
            logger.warning("API server at %s:%s answered %s", host, port, response.status_code)

    def _start() -> None:
        from tripdesk.api.main import app
        import uvicorn

        state_file = _state_file()
        state_file.parent.mkdir(parents=True, exist_ok=True)
        state_file.write_text(
            json.dumps({"host": args.host, "port": args.port, "pid": os.getpid()}),
            encoding="utf-8",
        )
        logger.info(f"Starting API server at {args.host}:{args.port}")
        try:
            uvicorn.run(app, host=args.host, port=args.port)
        finally:
            state_file.unlink(missing_ok=True)

    commands = {"status": _status, "start": _start}
    try:
        handler = commands[args.subcommand]
    except KeyError as exc:
        message = f"No handler for API subcommand: {args.subcommand}"
        logger.error(message)
        raise ValueError(message) from exc

    handler()
