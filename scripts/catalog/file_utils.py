"""File utility functions for catalog build operations.

Handles local paths, public CDN URLs and directory listing.
"""

import os
from pathlib import Path
from urllib.parse import quote

from .config import Config
from .errors import ReadError

# Reserved characters left literal inside a URL path segment. "/", ";", ","
# and "?" are always escaped so they cannot change segmentation.
SEGMENT_SAFE = "$&+:=@"


def local_path(name: str, parent: str | Path) -> Path:
    """Join an album folder and a file name for filesystem access.

    No escaping is applied.

    Examples:
        >>> local_path("01.mp3", "Blue Train").as_posix()
        'Blue Train/01.mp3'
    """
    return Path(parent) / name


def display_name(name: str) -> str:
    """Name as stored in manifests.

    Bytes that are not valid UTF-8 (kept by the OS as surrogate escapes)
    become U+FFFD, so the name can always be written as JSON.
    """
    return os.fsencode(name).decode("utf-8", "replace")


def escape_segment(segment: str) -> str:
    """Percent-encode a single URL path segment.

    The segment is escaped from its filesystem bytes, so names that are not
    valid UTF-8 still produce a well-formed URL.

    Examples:
        >>> escape_segment("Side A/B?.mp3")
        'Side%20A%2FB%3F.mp3'
    """
    return quote(os.fsencode(segment), safe=SEGMENT_SAFE)


def public_url(name: str, parent: str, base_url: str) -> str:
    """Build the public URL of a file inside an album folder.

    Folder and file name are escaped independently, so decoding each path
    segment recovers the original names.

    Args:
        name: File name
        parent: Album folder name
        base_url: CDN base URL without trailing slash

    Returns:
        URL of the form ``{base_url}/{folder}/{file}``

    Examples:
        >>> public_url("a b.mp3", "Live #1", "https://cdn.example.com")
        'https://cdn.example.com/Live%20%231/a%20b.mp3'
    """
    return f"{base_url}/{escape_segment(parent)}/{escape_segment(name)}"


def list_entries(directory: Path) -> list[Path]:
    """List the direct entries of a directory in lexical order.

    Args:
        directory: Directory to list

    Returns:
        Entry paths sorted by name

    Raises:
        ReadError: If the directory cannot be listed
    """
    try:
        return sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ReadError(f"Cannot list directory {directory}: {e}") from e


def get_album_directories(config: Config) -> list[Path]:
    """Get list of album directories.

    Every non-hidden directory directly under the base path is an album.

    Args:
        config: Configuration instance

    Returns:
        List of album directory paths, sorted alphabetically

    Raises:
        ReadError: If the base path cannot be listed
    """
    try:
        return [
            entry
            for entry in list_entries(config.base_path)
            if entry.is_dir() and not entry.name.startswith(config.HIDDEN_PREFIX)
        ]
    except OSError as e:
        raise ReadError(f"Cannot list directory {config.base_path}: {e}") from e
