"""Core redirect lookup: records, decoders and map construction."""

from .decoders import DecodeError, decode_json, decode_yaml
from .mapping import build_map
from .types import Handler, PathRecord, RedirectMap

__all__ = [
    'DecodeError',
    'Handler',
    'PathRecord',
    'RedirectMap',
    'build_map',
    'decode_json',
    'decode_yaml',
]
