"""Catalog manifest build modules."""

from .album_utils import load_or_create_album, reconcile_album
from .build_utils import build_catalog, validate_catalog
from .config import Config, load_config
from .errors import CatalogError, ParseError, ReadError, WriteError
from .file_utils import display_name, get_album_directories, local_path, public_url
from .filetype_utils import AUDIO, IMAGE, UNKNOWN, classify_file, detect_format
from .manifest_utils import load_album, save_album, save_market

__all__ = [
    "AUDIO",
    "IMAGE",
    "UNKNOWN",
    "CatalogError",
    "Config",
    "ParseError",
    "ReadError",
    "WriteError",
    "build_catalog",
    "classify_file",
    "detect_format",
    "display_name",
    "get_album_directories",
    "load_album",
    "load_config",
    "load_or_create_album",
    "local_path",
    "public_url",
    "reconcile_album",
    "save_album",
    "save_market",
    "validate_catalog",
]
