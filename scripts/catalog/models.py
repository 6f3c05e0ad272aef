"""Manifest record shapes.

Records are plain dicts so they serialize straight to JSON; key insertion
order is the on-disk field order.

album.json:
  - id, name, image_url, playlist_url
  - songs: [{id, name, url}, ...]

index.json:
  - albums: [{id, name, image_url, playlist_url}, ...]
"""

from typing import TypedDict


class Song(TypedDict):
    id: int
    name: str
    url: str


class Cover(TypedDict):
    id: int
    name: str
    image_url: str
    playlist_url: str


class Album(TypedDict):
    id: int
    name: str
    image_url: str
    playlist_url: str
    songs: list[Song]


class Market(TypedDict):
    albums: list[Cover]


def new_song(song_id: int, name: str, url: str) -> Song:
    return {"id": song_id, "name": name, "url": url}


def new_album(name: str) -> Album:
    """Empty album record named after its folder."""
    return {
        "id": 0,
        "name": name,
        "image_url": "",
        "playlist_url": "",
        "songs": [],
    }


def new_market() -> Market:
    return {"albums": []}


def album_cover(album: Album) -> Cover:
    """Copy of the album fields shown in the index."""
    return {
        "id": album["id"],
        "name": album["name"],
        "image_url": album["image_url"],
        "playlist_url": album["playlist_url"],
    }
