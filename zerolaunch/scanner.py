"""Walking directories for program files and choosing the best icon image."""

from __future__ import annotations

import logging
import os
import struct
from collections.abc import Iterable
from pathlib import Path

from .path_checker import PathChecker

logger = logging.getLogger(__name__)

# Icon scale suffixes, highest resolution first.
_SCALES = (
    ".scale-400.",
    ".scale-300.",
    ".targetsize-256.",
    ".scale-200.",
    ".targetsize-48.",
    ".scale-100.",
    ".targetsize-24.",
    ".targetsize-16.",
)

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_JPEG_SOF_MARKERS = frozenset(range(0xC0, 0xD0)) - {0xC4, 0xC8, 0xCC}


def is_valid_path(path: str | os.PathLike[str], forbidden_paths: Iterable[str]) -> bool:
    """Return True if ``path`` exists and lies under no forbidden path."""
    path = Path(path)
    if not path.exists():
        return False
    return not any(
        forbidden and path.is_relative_to(forbidden) for forbidden in forbidden_paths
    )


def is_target_file(path: str | os.PathLike[str], checker: PathChecker) -> bool:
    """Return True if ``path`` is a file (or link) whose name the checker accepts."""
    path = Path(path)
    if not path.is_file() and not path.is_symlink():
        return False
    return checker.is_match(path.name)


def visit_dir(
    directory: str | os.PathLike[str],
    depth: int,
    checker: PathChecker,
    forbidden_paths: Iterable[str],
) -> list[str]:
    """Collect wanted files below ``directory``, descending at most ``depth`` levels.

    Unreadable directories are skipped. If ``directory`` is itself a file it is
    returned as the only result.
    """
    forbidden = list(forbidden_paths)
    directory = Path(directory)
    if depth == 0 or not is_valid_path(directory, forbidden):
        return []

    if not directory.is_dir():
        return [str(directory)]

    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        logger.warning("Error reading directory %s: %s", directory, exc)
        return []

    result: list[str] = []
    for entry in entries:
        if entry.is_dir():
            result.extend(visit_dir(entry, depth - 1, checker, forbidden))
        elif is_target_file(entry, checker):
            result.append(str(entry))
    return result


def _png_size(data: bytes) -> tuple[int, int] | None:
    if data[:8] != _PNG_SIGNATURE or data[12:16] != b"IHDR" or len(data) < 24:
        return None
    return struct.unpack(">II", data[16:24])


def _gif_size(data: bytes) -> tuple[int, int] | None:
    if data[:6] not in (b"GIF87a", b"GIF89a") or len(data) < 10:
        return None
    return struct.unpack("<HH", data[6:10])


def _bmp_size(data: bytes) -> tuple[int, int] | None:
    if data[:2] != b"BM" or len(data) < 26:
        return None
    (header_size,) = struct.unpack("<I", data[14:18])
    if header_size == 12:
        return struct.unpack("<HH", data[18:22])
    width, height = struct.unpack("<ii", data[18:26])
    return abs(width), abs(height)


def _jpeg_size(data: bytes) -> tuple[int, int] | None:
    if data[:2] != b"\xff\xd8":
        return None
    offset = 2
    while offset + 4 <= len(data):
        if data[offset] != 0xFF:
            return None
        marker = data[offset + 1]
        if marker == 0xFF:
            offset += 1
            continue
        if marker in (0xD8, 0x01) or 0xD0 <= marker <= 0xD7:
            offset += 2
            continue
        if marker in _JPEG_SOF_MARKERS:
            if offset + 9 > len(data):
                return None
            height, width = struct.unpack(">HH", data[offset + 5 : offset + 9])
            return width, height
        (length,) = struct.unpack(">H", data[offset + 2 : offset + 4])
        offset += 2 + length
    return None


def image_resolution(path: str | os.PathLike[str]) -> int | None:
    """Return width times height of a PNG, GIF, BMP or JPEG image, or None."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        return None
    for reader in (_png_size, _gif_size, _bmp_size, _jpeg_size):
        size = reader(data)
        if size is not None:
            width, height = size
            if width == 0 or height == 0:
                return None
            return width * height
    return None


def validate_icon_path(icon_path: str) -> str:
    """Return the highest-resolution variant of an icon, or "" if none is found.

    Known scale variants are tried first; otherwise every PNG in the icon's
    directory whose name starts with the icon's stem is compared by size.
    """
    name = os.path.basename(icon_path)
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem or not extension:
        return ""
    if not name:
        return ""
    parent = os.path.dirname(icon_path)

    for scale in _SCALES:
        candidate = os.path.join(parent, f"{stem}{scale}..{extension}")
        if os.path.exists(candidate):
            return candidate

    try:
        entries = sorted(os.scandir(parent), key=lambda e: e.name)
    except OSError:
        return ""

    matching: list[tuple[str, int]] = []
    for entry in entries:
        entry_path = os.path.join(parent, entry.name)
        if not os.path.isfile(entry_path):
            continue
        entry_stem, entry_dot, entry_ext = entry.name.rpartition(".")
        if not entry_dot or not entry_stem or entry_ext.lower() != "png":
            continue
        if not entry_stem.startswith(stem):
            continue
        resolution = image_resolution(entry_path)
        if resolution is not None:
            matching.append((entry_path, resolution))

    matching.sort(key=lambda item: item[1], reverse=True)
    return matching[0][0] if matching else ""