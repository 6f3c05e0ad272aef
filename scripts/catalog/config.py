"""Configuration module for the catalog builder.

Handles configuration from multiple sources with precedence:
CLI arguments > config file > environment variables > defaults
"""

import os
import sys
from pathlib import Path
from typing import Any, ClassVar

import yaml
from dotenv import load_dotenv


class Config:
    """Configuration manager for catalog build operations."""

    # Default configuration values
    DEFAULTS: ClassVar[dict[str, Any]] = {
        "base_path": ".",
        "cdn_base_url": "https://cdn.jsdelivr.net/gh/yingshulu/content",
        "album_file": "album.json",
        "index_file": "index.json",
        "header_size": 261,  # enough for every signature in filetype_utils
    }

    ENV_MAPPING: ClassVar[dict[str, str]] = {
        "CATALOG_BASE_PATH": "base_path",
        "CATALOG_CDN_BASE_URL": "cdn_base_url",
        "CATALOG_ALBUM_FILE": "album_file",
        "CATALOG_INDEX_FILE": "index_file",
    }

    # Directory names starting with this marker are never album folders
    HIDDEN_PREFIX: ClassVar[str] = "."

    def __init__(
        self,
        base_path: str | None = None,
        config_file: str | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize configuration.

        Args:
            base_path: Directory holding the album folders
            config_file: Path to YAML config file
            **overrides: Direct configuration overrides
        """
        self.config = self.DEFAULTS.copy()

        # Environment first so the config file can override it
        self._load_env_vars()

        if config_file:
            self._load_config_file(config_file)

        # Apply CLI overrides
        if base_path:
            self.config["base_path"] = base_path
        self.config.update(overrides)

        self.base_path = Path(str(self.config["base_path"])).resolve()

    def _load_config_file(self, config_file: str) -> None:
        """Load configuration from YAML file."""
        try:
            with Path(config_file).open() as f:
                file_config: dict[str, Any] = yaml.safe_load(f) or {}
                if not isinstance(file_config, dict):
                    print(
                        f"Warning: Config file '{config_file}' is not a mapping, using defaults",
                        file=sys.stderr,
                    )
                    return
                self.config.update(file_config)
        except FileNotFoundError:
            print(
                f"Warning: Config file '{config_file}' not found, using defaults",
                file=sys.stderr,
            )
        except yaml.YAMLError as e:
            print(f"Warning: Error parsing config file: {e}", file=sys.stderr)

    def _load_env_vars(self) -> None:
        """Load configuration from environment variables."""
        for env_var, config_key in self.ENV_MAPPING.items():
            value = os.getenv(env_var)
            if value:
                self.config[config_key] = value

    @property
    def cdn_base_url(self) -> str:
        """CDN base URL that album folders are published under."""
        return str(self.config["cdn_base_url"]).rstrip("/")

    @property
    def album_file(self) -> str:
        """File name of the per-album manifest."""
        return str(self.config["album_file"])

    @property
    def index_file(self) -> str:
        """File name of the top-level index."""
        return str(self.config["index_file"])

    @property
    def index_path(self) -> Path:
        """Path to the top-level index."""
        return self.base_path / self.index_file

    @property
    def header_size(self) -> int:
        """Number of leading bytes read for content classification."""
        return int(str(self.config["header_size"]))

    def album_manifest_path(self, album_dir: Path) -> Path:
        """Path to the manifest file inside an album folder."""
        return album_dir / self.album_file

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(base_path={self.base_path}, cdn={self.cdn_base_url})"


def load_config(
    base_path: str | None = None,
    config_file: str | None = None,
    **kwargs: Any,
) -> Config:
    """Load configuration with auto-detection of config file.

    Args:
        base_path: Directory holding the album folders
        config_file: Explicit path to config file (optional)
        **kwargs: Additional configuration overrides

    Returns:
        Config instance
    """
    load_dotenv(Path(".env"))  # current directory only, if present

    # Auto-detect config file if not provided
    if not config_file:
        for candidate in [".catalog_build.yaml", ".catalog_build.yml", "catalog_build.yaml"]:
            if Path(candidate).exists():
                config_file = candidate
                break

    return Config(base_path=base_path, config_file=config_file, **kwargs)
