"""Redirect dispatch for aiohttp.

Builds request handlers that redirect configured paths and hand every other
request to a fallback handler.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from aiohttp import web

from urlshort.core.decoders import decode_json, decode_yaml
from urlshort.core.mapping import build_map
from urlshort.core.types import Handler, RedirectMap

logger = logging.getLogger(__name__)


def make_dispatcher(redirects: Mapping[str, str], fallback: Handler) -> Handler:
    """Create a handler that redirects mapped paths.

    A request whose path is a key in ``redirects`` gets a 302 Found to the
    mapped URL. Any other request is passed to ``fallback`` unchanged.

    Args:
        redirects: Path to destination URL mapping
        fallback: Handler for requests with no matching path

    Returns:
        aiohttp request handler
    """
    # Snapshot so later changes to the caller's dict are not observed
    lookup: RedirectMap = MappingProxyType(dict(redirects))

    async def dispatch(request: web.Request) -> web.StreamResponse:
        destination = lookup.get(request.path)
        if destination is not None:
            logger.debug(f"Redirecting {request.path} -> {destination}")
            raise web.HTTPFound(destination)

        logger.debug(f"No redirect for {request.path}, using fallback")
        return await fallback(request)

    return dispatch


def map_handler(paths_to_urls: Mapping[str, str], fallback: Handler) -> Handler:
    """Create a redirect handler from a plain path to URL mapping."""
    return make_dispatcher(paths_to_urls, fallback)


def yaml_handler(data: bytes, fallback: Handler) -> Handler:
    """Create a redirect handler from a YAML redirect document.

    Raises:
        DecodeError: If the YAML is malformed
    """
    return make_dispatcher(build_map(decode_yaml(data)), fallback)


def json_handler(data: bytes, fallback: Handler) -> Handler:
    """Create a redirect handler from a JSON redirect document.

    Raises:
        DecodeError: If the JSON is malformed
    """
    return make_dispatcher(build_map(decode_json(data)), fallback)
