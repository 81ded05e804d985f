"""YAML and JSON decoders for redirect documents.

Both formats describe a sequence of objects with ``path`` and ``url`` keys:

    - path: /some-path
      url: https://www.some-url.com/demo

    [{"path": "/some-path", "url": "https://www.some-url.com/demo"}]
"""

import json

import yaml

from urlshort.core.types import PathRecord

_FIELDS = ("path", "url")


class DecodeError(ValueError):
    """Raised when a redirect document is malformed.

    Covers syntax errors from the underlying parser as well as documents
    that parse but do not have the expected shape.
    """

    def __init__(self, fmt: str, message: str) -> None:
        self.format = fmt
        super().__init__(f"Invalid {fmt} redirect document: {message}")


def decode_yaml(data: bytes) -> list[PathRecord]:
    """Decode a YAML redirect document.

    Args:
        data: Raw YAML bytes

    Returns:
        Path records in document order

    Raises:
        DecodeError: If the document is not valid YAML or has the wrong shape
    """
    try:
        # BaseLoader keeps every scalar as its source text
        document = yaml.load(data, Loader=yaml.BaseLoader)
    except (yaml.YAMLError, RecursionError) as e:
        raise DecodeError("YAML", str(e)) from e
    return _to_records(document, "YAML")


def decode_json(data: bytes) -> list[PathRecord]:
    """Decode a JSON redirect document.

    Args:
        data: Raw JSON bytes

    Returns:
        Path records in document order

    Raises:
        DecodeError: If the document is not valid JSON or has the wrong shape
    """
    try:
        document = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        raise DecodeError("JSON", str(e)) from e
    return _to_records(document, "JSON")


def _to_records(document: object, fmt: str) -> list[PathRecord]:
    # An empty document means no redirects, not an error
    if document is None:
        return []

    if not isinstance(document, list):
        raise DecodeError(fmt, f"expected a list, got {type(document).__name__}")

    records: list[PathRecord] = []
    for index, item in enumerate(document):
        if not isinstance(item, dict):
            raise DecodeError(
                fmt,
                f"item {index}: expected a mapping, got {type(item).__name__}",
            )
        values: dict[str, str] = {}
        for name in _FIELDS:
            if name not in item:
                raise DecodeError(fmt, f"item {index}: missing {name!r}")
            value = item[name]
            if not isinstance(value, str):
                raise DecodeError(fmt, f"item {index}: {name!r} must be a string")
            values[name] = value
        records.append(PathRecord(**values))
    return records
