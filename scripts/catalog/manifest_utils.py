"""Manifest load/save utilities.

album.json (per album folder, read/write):
  - id, name, image_url, playlist_url
  - songs: ordered array of {id, name, url}

index.json (base directory, write-only):
  - albums: ordered array of covers (album fields without songs)

Files are written with tab indentation in declared field order and without a
trailing newline. Loading is strict: callers decide how to recover.

Functions:
- load_album(): Read and validate an album manifest
- dump_manifest(): Serialize a manifest to its on-disk text
- write_manifest_file(): Write a manifest, skipping unchanged content
- save_album() / save_market(): Persist album and index manifests
"""

import json
from pathlib import Path
from typing import Any

from .errors import ParseError, ReadError, WriteError
from .models import Album, Market, Song


def _typed_field(
    raw: dict[str, Any],
    key: str,
    expected: type,
    default: Any,
    where: str,
) -> Any:
    """Fetch ``raw[key]`` checking its type. Missing or null gives ``default``."""
    value = raw.get(key)
    if value is None:
        return default
    # bool is an int subclass but never a valid id
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ParseError(
            f"{where}: expected {expected.__name__} for '{key}', got {type(value).__name__}"
        )
    return value


def parse_song(raw: Any, where: str) -> Song:
    if not isinstance(raw, dict):
        raise ParseError(f"{where}: song must be an object, got {type(raw).__name__}")
    return {
        "id": _typed_field(raw, "id", int, 0, where),
        "name": _typed_field(raw, "name", str, "", where),
        "url": _typed_field(raw, "url", str, "", where),
    }


def parse_album(raw: Any, source: str) -> Album:
    """Validate decoded JSON as an album record.

    Unknown keys are ignored and missing keys take empty values.

    Args:
        raw: Decoded JSON value
        source: Name used in error messages (usually the file path)

    Returns:
        Album record with keys in declared order

    Raises:
        ParseError: If the value does not have the album shape
    """
    if not isinstance(raw, dict):
        raise ParseError(f"{source}: album must be a JSON object, got {type(raw).__name__}")

    songs_raw = _typed_field(raw, "songs", list, [], source)
    return {
        "id": _typed_field(raw, "id", int, 0, source),
        "name": _typed_field(raw, "name", str, "", source),
        "image_url": _typed_field(raw, "image_url", str, "", source),
        "playlist_url": _typed_field(raw, "playlist_url", str, "", source),
        "songs": [parse_song(song, f"{source} songs[{i}]") for i, song in enumerate(songs_raw)],
    }


def load_album(path: Path) -> Album:
    """Load an album manifest.

    Args:
        path: Path to album.json

    Returns:
        Album record

    Raises:
        ReadError: If the file cannot be read
        ParseError: If the content is not a valid album manifest
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        raise ReadError(f"Cannot read {path}: {e}") from e

    try:
        raw = json.loads(content)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ParseError(f"{path} is not valid JSON: {e}") from e

    return parse_album(raw, str(path))


def dump_manifest(manifest_data: Any) -> str:
    """Serialize manifest data exactly as it is written to disk."""
    return json.dumps(manifest_data, indent="\t", ensure_ascii=False)


def write_manifest_file(
    manifest_data: Any,
    output_path: Path,
    dry_run: bool = False,
    verbose: bool = True,
) -> bool:
    """Write manifest data to JSON file.

    The whole file is replaced. Nothing is written when the file already holds
    identical content.

    Args:
        manifest_data: Data to write
        output_path: Path to output file
        dry_run: If True, don't actually write
        verbose: If True, print progress messages

    Returns:
        True if the file content changed (or would change in dry-run)

    Raises:
        WriteError: If the file cannot be written
    """
    content = dump_manifest(manifest_data)

    try:
        existing = output_path.read_text(encoding="utf-8") if output_path.is_file() else None
    except (OSError, UnicodeDecodeError):
        existing = None

    if existing == content:
        if verbose:
            print(f"  Unchanged: {output_path.name}")
        return False

    if dry_run:
        if verbose:
            print(f"  Would write {output_path}")
        return True

    try:
        with output_path.open("w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise WriteError(f"Cannot write {output_path}: {e}") from e

    if verbose:
        print(f"  Writing {output_path.name}")
    return True


def save_album(
    album: Album,
    path: Path,
    dry_run: bool = False,
    verbose: bool = True,
) -> bool:
    """Persist an album manifest. See write_manifest_file()."""
    return write_manifest_file(album, path, dry_run=dry_run, verbose=verbose)


def save_market(
    market: Market,
    path: Path,
    dry_run: bool = False,
    verbose: bool = True,
) -> bool:
    """Persist the top-level index. See write_manifest_file()."""
    return write_manifest_file(market, path, dry_run=dry_run, verbose=verbose)
