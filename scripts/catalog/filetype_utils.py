"""Content-based file classification.

Album folders hold whatever the uploader dropped in them, so file kinds are
decided from leading magic bytes only; extensions are never consulted.

Recognized formats:
- Audio: MIDI, MP3 (ID3 tag or bare MPEG frame sync), M4A, Ogg, FLAC,
  WAV, AMR, AAC (ADTS), AIFF
- Image: JPEG, JPEG 2000, PNG, GIF, WebP, Canon CR2, TIFF, BMP, JPEG XR,
  PSD, ICO, HEIF/HEIC, AVIF, DICOM, DWG, OpenEXR

Signature-Based Detection:
At most ``HEADER_SIZE`` bytes are read (DICOM needs offset 128-132, the
rest sit in the first 12 bytes). Shorter files are matched on whatever is
available. When a header would match both groups the audio match wins.
"""

import sys
from collections.abc import Callable
from pathlib import Path

AUDIO = "audio"
IMAGE = "image"
UNKNOWN = "unknown"

HEADER_SIZE = 261

_TIFF_LE = b"II*\x00"
_TIFF_BE = b"MM\x00*"

_HEIF_BRANDS = {b"heic", b"heix", b"hevc", b"hevx", b"heim", b"heis", b"mif1", b"msf1"}
_AVIF_BRANDS = {b"avif", b"avis"}


def _ftyp_brand(header: bytes) -> bytes | None:
    """Major brand of an ISO base media ``ftyp`` box, if present."""
    if len(header) >= 12 and header[4:8] == b"ftyp":
        return header[8:12]
    return None


def _is_tiff(header: bytes) -> bool:
    return header.startswith(_TIFF_LE) or header.startswith(_TIFF_BE)


def _is_mp3(header: bytes) -> bool:
    if header.startswith(b"ID3"):
        return True
    # MPEG-1 Layer 3 / MPEG-2 Layer 3 frame sync
    return len(header) >= 2 and header[0] == 0xFF and header[1] in (0xFB, 0xF3, 0xF2)


def _is_aac(header: bytes) -> bool:
    return len(header) >= 2 and header[0] == 0xFF and header[1] in (0xF1, 0xF9)


# (format, matcher), checked in order within each group
AUDIO_SIGNATURES: list[tuple[str, Callable[[bytes], bool]]] = [
    ("midi", lambda h: h.startswith(b"MThd")),
    ("mp3", _is_mp3),
    ("m4a", lambda h: _ftyp_brand(h) == b"M4A " or h.startswith(b"M4A ")),
    ("ogg", lambda h: h.startswith(b"OggS")),
    ("flac", lambda h: h.startswith(b"fLaC")),
    ("wav", lambda h: h.startswith(b"RIFF") and h[8:12] == b"WAVE"),
    ("amr", lambda h: h.startswith(b"#!AMR\n")),
    ("aac", _is_aac),
    ("aiff", lambda h: h.startswith(b"FORM") and h[8:12] == b"AIFF"),
]

IMAGE_SIGNATURES: list[tuple[str, Callable[[bytes], bool]]] = [
    ("jpg", lambda h: h.startswith(b"\xff\xd8\xff")),
    ("jpx", lambda h: h.startswith(b"\x00\x00\x00\x0cjP  \r\n\x87\n")),
    ("png", lambda h: h.startswith(b"\x89PNG")),
    ("gif", lambda h: h.startswith(b"GIF")),
    ("webp", lambda h: h.startswith(b"RIFF") and h[8:12] == b"WEBP"),
    ("cr2", lambda h: _is_tiff(h) and h[8:10] == b"CR"),
    ("tif", _is_tiff),
    ("bmp", lambda h: h.startswith(b"BM")),
    ("jxr", lambda h: h.startswith(b"II\xbc")),
    ("psd", lambda h: h.startswith(b"8BPS")),
    ("ico", lambda h: h.startswith(b"\x00\x00\x01\x00")),
    ("heif", lambda h: _ftyp_brand(h) in _HEIF_BRANDS),
    ("avif", lambda h: _ftyp_brand(h) in _AVIF_BRANDS),
    ("dcm", lambda h: h[128:132] == b"DICM"),
    ("dwg", lambda h: h.startswith(b"AC10")),
    ("exr", lambda h: h.startswith(b"\x76\x2f\x31\x01")),
]


def detect_format(header: bytes) -> tuple[str, str] | None:
    """Detect file kind and format from leading bytes.

    Args:
        header: First bytes of a file (may be shorter than HEADER_SIZE)

    Returns:
        Tuple of (kind, format), e.g. ("audio", "flac"), or None if unknown
    """
    for kind, signatures in ((AUDIO, AUDIO_SIGNATURES), (IMAGE, IMAGE_SIGNATURES)):
        for fmt, matches in signatures:
            if matches(header):
                return kind, fmt
    return None


def classify_header(header: bytes) -> str:
    """Classify leading bytes as AUDIO, IMAGE or UNKNOWN."""
    detected = detect_format(header)
    return detected[0] if detected else UNKNOWN


def read_header(file_path: Path, size: int = HEADER_SIZE) -> bytes | None:
    """Read up to ``size`` bytes from the start of a file.

    Returns:
        The bytes read, or None if the file cannot be opened or read
    """
    try:
        with file_path.open("rb") as f:
            return f.read(size)
    except OSError as e:
        print(f"Warning: Cannot read {file_path}: {e}", file=sys.stderr)
        return None


def classify_file(file_path: Path, size: int = HEADER_SIZE) -> str:
    """Classify a file by content.

    A file that cannot be read is UNKNOWN so one bad file never stops a build.

    Args:
        file_path: Path to file
        size: Number of leading bytes to inspect

    Returns:
        AUDIO, IMAGE or UNKNOWN
    """
    header = read_header(file_path, size)
    if not header:
        return UNKNOWN
    return classify_header(header)
