"""
Shared fixtures for catalog tests.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from scripts.catalog.config import Config

CDN = "https://cdn.example.com/content"

# Minimal headers for each kind, padded like real files
MP3_BYTES = b"ID3\x04\x00\x00\x00\x00\x00\x00" + b"\x00" * 300
FLAC_BYTES = b"fLaC\x00\x00\x00\x22" + b"\x00" * 300
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR" + b"\x00" * 300
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + b"\x00" * 300
TEXT_BYTES = b"liner notes\n"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CATALOG_* variables from the host out of the tests."""
    for env_var in Config.ENV_MAPPING:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Config rooted at the test's temporary directory."""
    return Config(base_path=str(tmp_path), cdn_base_url=CDN)


@pytest.fixture
def write_file() -> Callable[[Path, bytes], Path]:
    """Create a file (and its parent folders) with the given content."""

    def _write(path: Path, data: bytes) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def headers() -> dict[str, bytes]:
    return {
        "mp3": MP3_BYTES,
        "flac": FLAC_BYTES,
        "png": PNG_BYTES,
        "jpeg": JPEG_BYTES,
        "text": TEXT_BYTES,
    }
