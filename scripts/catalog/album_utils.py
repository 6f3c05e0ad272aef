"""Album reconciliation.

Merges the current contents of an album folder into the album record loaded
from its manifest. Reconciliation is additive only:

- Recorded songs keep their id, name, url and position, even when the file
  is gone or the folder was renamed.
- New audio files are appended in listing order with id = song count.
- image_url is set to the last image found; it is never cleared.
- playlist_url always points at the folder's own manifest.

Songs are matched by file name only, so renaming a file records it again
as a new song.
"""

import sys
from pathlib import Path

from .config import Config
from .errors import ParseError, ReadError
from .file_utils import display_name, list_entries, public_url
from .filetype_utils import AUDIO, IMAGE, classify_file
from .manifest_utils import load_album
from .models import Album, new_album, new_song


def load_or_create_album(
    album_dir: Path,
    config: Config,
    verbose: bool = True,
) -> Album:
    """Load an album manifest, falling back to an empty album.

    Any read or parse failure starts the album fresh, named after its folder.

    Args:
        album_dir: Album folder
        config: Configuration instance
        verbose: If True, print progress messages

    Returns:
        Album record to reconcile against
    """
    manifest_path = config.album_manifest_path(album_dir)
    folder = display_name(album_dir.name)

    if not manifest_path.exists():
        if verbose:
            print(f"  No {manifest_path.name}, starting new album")
        return new_album(folder)

    try:
        album = load_album(manifest_path)
    except (ReadError, ParseError) as e:
        print(f"Warning: {e}; starting {folder} as a new album", file=sys.stderr)
        return new_album(folder)

    if not album["name"]:
        album["name"] = folder
    return album


def reconcile_album(
    album_dir: Path,
    previous: Album,
    config: Config,
    verbose: bool = True,
) -> Album:
    """Bring an album record up to date with its folder.

    Args:
        album_dir: Album folder
        previous: Record from load_or_create_album()
        config: Configuration instance
        verbose: If True, print progress messages

    Returns:
        Updated album record (previous is left untouched)

    Raises:
        ReadError: If the album folder cannot be listed
    """
    folder = album_dir.name
    entries = list_entries(album_dir)

    album: Album = {
        "id": previous["id"],
        "name": previous["name"],
        "image_url": previous["image_url"],
        "playlist_url": previous["playlist_url"],
        "songs": list(previous["songs"]),
    }
    recorded = {song["name"] for song in album["songs"]}

    for entry in entries:
        name = display_name(entry.name)
        if entry.is_dir() or name in recorded:
            continue

        kind = classify_file(entry, config.header_size)
        if kind == AUDIO:
            song = new_song(
                len(album["songs"]),
                name,
                public_url(entry.name, folder, config.cdn_base_url),
            )
            album["songs"].append(song)
            recorded.add(name)
            if verbose:
                print(f"  + [{song['id']}] {name}")
        elif kind == IMAGE:
            album["image_url"] = public_url(entry.name, folder, config.cdn_base_url)

    album["playlist_url"] = public_url(config.album_file, folder, config.cdn_base_url)
    return album
