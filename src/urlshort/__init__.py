"""urlshort - redirect request paths to configured URLs.

Redirects are loaded from plain mappings, YAML or JSON documents and served
through an aiohttp handler that falls back to another handler for unknown
paths.
"""

from .core import DecodeError, PathRecord, build_map, decode_json, decode_yaml
from .handler import json_handler, make_dispatcher, map_handler, yaml_handler

__all__ = [
    'DecodeError',
    'PathRecord',
    'build_map',
    'decode_json',
    'decode_yaml',
    'json_handler',
    'make_dispatcher',
    'map_handler',
    'yaml_handler',
]
