"""Core type definitions."""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass

from aiohttp import web

# Read-only path -> destination URL lookup built once per configuration load
RedirectMap = Mapping[str, str]

# Any aiohttp request handler; used for both the dispatcher and its fallback
Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@dataclass(frozen=True)
class PathRecord:
    """One configured redirect entry.

    Field names match the keys of the YAML and JSON redirect documents.
    """

    path: str
    url: str
