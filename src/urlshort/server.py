"""aiohttp server for urlshort.

Application factory that serves configured redirects and falls back to a
404 page for unknown paths.
"""

import logging
from types import MappingProxyType

from aiohttp import web

from urlshort.config import Config
from urlshort.core.decoders import decode_json, decode_yaml
from urlshort.core.mapping import build_map
from urlshort.core.types import Handler, RedirectMap
from urlshort.handler import make_dispatcher

logger = logging.getLogger(__name__)


async def not_found(request: web.Request) -> web.Response:
    """Default fallback for paths with no redirect."""
    return web.Response(status=404, text=f"No redirect configured for {request.path}\n")


def load_redirects(config: Config) -> RedirectMap:
    """Merge all configured redirect sources into one map.

    Sources are applied in order: inline paths, YAML file, JSON file.
    A later source overrides an earlier one for the same path.

    Args:
        config: Application configuration

    Returns:
        Read-only redirect map

    Raises:
        OSError: If a redirect file cannot be read
        DecodeError: If a redirect file is malformed
    """
    merged: dict[str, str] = dict(config.redirects.paths)

    yaml_file = config.redirects.yaml_file
    if yaml_file is not None:
        merged.update(build_map(decode_yaml(yaml_file.read_bytes())))

    json_file = config.redirects.json_file
    if json_file is not None:
        merged.update(build_map(decode_json(json_file.read_bytes())))

    return MappingProxyType(merged)


def create_app(config: Config, *, fallback: Handler = not_found) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        fallback: Handler for paths with no redirect (default: 404 page)

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    redirects = load_redirects(config)
    logger.info(f"Loaded {len(redirects)} redirect(s)")

    # Catch-all: every path goes through the redirect lookup first
    app.router.add_route("*", "/{path:.*}", make_dispatcher(redirects, fallback))

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
