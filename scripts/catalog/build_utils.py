"""Catalog build orchestration.

One pass over the base directory: every non-hidden folder is an album. Each
album is loaded (or started fresh), reconciled with its folder and saved,
then its cover is added to the market. Album ids are positions in the
market, so a folder that fails to list is left out and later ids close the
gap. The index is written last.
"""

import sys
from pathlib import Path
from typing import Any

from .album_utils import load_or_create_album, reconcile_album
from .config import Config
from .errors import CatalogError, ReadError, WriteError
from .file_utils import display_name, get_album_directories, local_path
from .manifest_utils import load_album, save_album, save_market
from .models import Album, Market, album_cover, new_market


def process_album_folder(
    album_dir: Path,
    config: Config,
    verbose: bool = True,
) -> tuple[Album, int] | None:
    """Load and reconcile a single album folder.

    Returns:
        Tuple of (updated album, number of songs added), or None if the
        folder cannot be listed or its entries cannot be inspected
    """
    try:
        previous = load_or_create_album(album_dir, config, verbose=verbose)
        album = reconcile_album(album_dir, previous, config, verbose=verbose)
    except (ReadError, OSError) as e:
        print(f"Error: Skipping album {display_name(album_dir.name)}: {e}", file=sys.stderr)
        return None
    return album, len(album["songs"]) - len(previous["songs"])


def add_album(market: Market, album: Album) -> Album:
    """Assign the next album id and append the album's cover to the market."""
    album["id"] = len(market["albums"])
    market["albums"].append(album_cover(album))
    return album


def build_catalog(
    config: Config,
    dry_run: bool = False,
    verbose: bool = True,
) -> dict[str, Any]:
    """Rebuild every album manifest and the top-level index.

    Args:
        config: Configuration instance
        dry_run: If True, report writes without touching the filesystem
        verbose: If True, print progress messages

    Returns:
        Dict with statistics and the built market:
        {"albums": count, "songs": count, "new_songs": count,
         "errors": count, "market": Market}

    Raises:
        ReadError: If the base directory cannot be listed
        WriteError: If the index cannot be written
    """
    stats: dict[str, Any] = {"albums": 0, "songs": 0, "new_songs": 0, "errors": 0}
    market = new_market()

    for album_dir in get_album_directories(config):
        if verbose:
            print(f"Processing: {display_name(album_dir.name)}")

        result = process_album_folder(album_dir, config, verbose=verbose)
        if result is None:
            stats["errors"] += 1
            continue

        album, added = result
        add_album(market, album)
        stats["albums"] += 1
        stats["songs"] += len(album["songs"])
        stats["new_songs"] += added

        try:
            save_album(
                album,
                config.album_manifest_path(album_dir),
                dry_run=dry_run,
                verbose=verbose,
            )
        except WriteError as e:
            print(f"Error: Album {display_name(album_dir.name)} not saved: {e}", file=sys.stderr)
            stats["errors"] += 1

    if verbose:
        print(f"\nIndex: {config.index_path}")
    save_market(market, config.index_path, dry_run=dry_run, verbose=verbose)

    stats["market"] = market
    return stats


def validate_catalog(config: Config, verbose: bool = True) -> dict[str, list[str]]:
    """Check album manifests against their folders without writing anything.

    Issues: manifest missing or invalid, recorded song file missing.
    Albums without a cover image are reported separately.

    Args:
        config: Configuration instance
        verbose: If True, print one line per album

    Returns:
        Dict with "albums", "missing_covers" and "issues" name lists

    Raises:
        ReadError: If the base directory cannot be listed
    """
    result: dict[str, list[str]] = {"albums": [], "missing_covers": [], "issues": []}

    for album_dir in get_album_directories(config):
        folder = display_name(album_dir.name)
        result["albums"].append(folder)
        manifest_path = config.album_manifest_path(album_dir)

        try:
            album = load_album(manifest_path)
        except CatalogError as e:
            result["issues"].append(str(e))
            if verbose:
                print(f"  ❌ {folder}: {e}")
            continue

        missing = [
            song["name"]
            for song in album["songs"]
            if not local_path(song["name"], album_dir).is_file()
        ]
        for name in missing:
            result["issues"].append(f"{folder}: recorded song missing: {name}")

        if not album["image_url"]:
            result["missing_covers"].append(folder)

        if verbose:
            if missing:
                print(f"  ❌ {folder}: {len(missing)} missing song file(s)")
            elif not album["image_url"]:
                print(f"  ⚠️  No cover image for: {folder}")
            else:
                print(f"  ✓ {folder} ({len(album['songs'])} songs)")

    return result
