from __future__ import annotations

import copy
from typing import Any, Callable

from tripdesk.client.adapter import TripsApiClient
from tripdesk.logging import get_logger

logger = get_logger(__name__)

TOOL_RESULT_PREFIX = "TOOL_RESULT"


def _function_spec(name: str, description: str, properties: dict[str, Any] | None = None) -> dict[str, Any]:
    properties = properties or {}
    return {
        "type": "function",
        "function": {
            "name": name,
            "description": description,
            "parameters": {
                "type": "object",
                "properties": properties,
                "required": sorted(properties),
                "additionalProperties": False,
            },
        },
    }


_OPENAI_TOOL_SPECS: dict[str, dict[str, Any]] = {
    "simple_login": _function_spec(
        "simple_login",
        "Performs a simple login with a username to get a session ID.",
        {"userName": {"type": "string", "description": "The username to use for login."}},
    ),
    "get_trips": _function_spec("get_trips", "Gets the list of trips for the current session."),
    "get_vehicles": _function_spec("get_vehicles", "Gets the list of vehicles for the current session."),
    "get_drivers": _function_spec("get_drivers", "Gets the list of drivers for the current session."),
}


def openai_tools() -> list[dict[str, Any]]:
    """Return OpenAI-compatible tool schemas for the adapter operations."""

    return [copy.deepcopy(spec) for spec in _OPENAI_TOOL_SPECS.values()]


def _login(client: TripsApiClient, args: dict[str, Any]) -> str:
    user_name = args.get("userName")
    if user_name is None:
        user_name = args.get("user_name")
    if not isinstance(user_name, str) or not user_name.strip():
        return "Login failed: Missing string argument: userName"
    return client.login(user_name)


_HANDLERS: dict[str, Callable[[TripsApiClient, dict[str, Any]], str]] = {
    "simple_login": _login,
    "get_trips": lambda client, _args: client.get_trips(),
    "get_vehicles": lambda client, _args: client.get_vehicles(),
    "get_drivers": lambda client, _args: client.get_drivers(),
}


def run_tool(*, name: str, args: dict[str, Any] | None, client: TripsApiClient) -> str:
    """Dispatch a planner tool call to ``client`` and return its text result."""

    handler = _HANDLERS.get(name)
    if handler is None:
        logger.warning("Unknown tool requested: %s", name)
        return f"Unknown tool: {name}. Available tools: {', '.join(_HANDLERS)}."
    if args is not None and not isinstance(args, dict):
        return f"{name} failed: Tool arguments must be a JSON object."
    return handler(client, args or {})


def format_tool_result_message(tool_name: str, result: str) -> str:
    return f"{TOOL_RESULT_PREFIX} {tool_name}:\n{result}"


__all__ = ["openai_tools", "run_tool", "format_tool_result_message", "TOOL_RESULT_PREFIX"]
