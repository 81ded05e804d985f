"""Redirect map construction."""

from collections.abc import Iterable
from types import MappingProxyType

from urlshort.core.types import PathRecord, RedirectMap


def build_map(records: Iterable[PathRecord]) -> RedirectMap:
    """Build a redirect map from decoded path records.

    Records are inserted in iteration order, so when several records share
    a path the last one wins. Paths and URLs are not validated.

    Args:
        records: Path records, typically straight from a decoder

    Returns:
        Read-only mapping of path to destination URL
    """
    redirects: dict[str, str] = {}
    for record in records:
        redirects[record.path] = record.url
    return MappingProxyType(redirects)
