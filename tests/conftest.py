"""Shared test fixtures."""

from pathlib import Path

import pytest
from urlshort.config import Config, RedirectsConfig, ServerConfig

GODOC_PATH = "/urlshort-godoc"
GODOC_URL = "https://godoc.org/github.com/gophercises/urlshort"


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Create a test configuration with one inline redirect."""
    return Config(
        server=ServerConfig(),
        redirects=RedirectsConfig(paths={GODOC_PATH: GODOC_URL}),
    )
