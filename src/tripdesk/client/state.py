"""Login state held by one :class:`~tripdesk.client.adapter.TripsApiClient`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class LoggedOut:
    pass


@dataclass(frozen=True)
class LoggedIn:
    session_id: str


AdapterState = Union[LoggedOut, LoggedIn]


__all__ = ["LoggedOut", "LoggedIn", "AdapterState"]
