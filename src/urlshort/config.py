"""Configuration management for urlshort.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "urlshort.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class RedirectsConfig:
    """Redirect sources configuration."""

    paths: dict[str, str] = field(default_factory=dict)
    yaml_file: Path | None = None
    json_file: Path | None = None


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    redirects: RedirectsConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for urlshort.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(server=ServerConfig(), redirects=RedirectsConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        if not isinstance(data, dict):
            raise ValueError("Configuration must be a dictionary")

        server = cls._parse_server(data.get("server"))
        redirects = cls._parse_redirects(data.get("redirects"), path.parent)

        return cls(server=server, redirects=redirects, config_path=path)

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_redirects(cls, data: object, config_dir: Path) -> RedirectsConfig:
        """Parse redirects configuration section.

        Args:
            data: Raw redirects section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            RedirectsConfig instance
        """
        if data is None:
            return RedirectsConfig()

        if not isinstance(data, dict):
            raise ValueError("redirects section must be a dictionary")

        paths_raw = data.get("paths", {})
        if not isinstance(paths_raw, dict):
            raise ValueError("redirects.paths must be a table")
        paths: dict[str, str] = {}
        for key, value in paths_raw.items():
            if not isinstance(value, str):
                raise ValueError(f"redirects.paths.{key} must be a string")
            paths[key] = value

        yaml_file = data.get("yaml_file")
        if yaml_file is not None and not isinstance(yaml_file, str):
            raise ValueError("redirects.yaml_file must be a string")

        json_file = data.get("json_file")
        if json_file is not None and not isinstance(json_file, str):
            raise ValueError("redirects.json_file must be a string")

        return RedirectsConfig(
            paths=paths,
            yaml_file=config_dir / yaml_file if yaml_file is not None else None,
            json_file=config_dir / json_file if json_file is not None else None,
        )

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        yaml_file: Path | None = None,
        json_file: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            yaml_file: Override redirects.yaml_file
            json_file: Override redirects.json_file

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        redirects = self.redirects
        if yaml_file is not None or json_file is not None:
            redirects = replace(
                self.redirects,
                yaml_file=yaml_file if yaml_file is not None else self.redirects.yaml_file,
                json_file=json_file if json_file is not None else self.redirects.json_file,
            )

        return replace(self, server=server, redirects=redirects)
