"""Core package for the tripdesk project.

This top-level module exposes the client-side :class:`TripsApiClient`, the
text-returning adapter an assistant planner calls to reach the trips API.
"""

from .client.adapter import TripsApiClient

__all__ = ["TripsApiClient"]
