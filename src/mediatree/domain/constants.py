from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the fixed lookup tables used by the scanner: extension
families per media category, the names excluded from every scan,
the human size unit table and the canonical artifact name.
"""

from typing import FrozenSet, Tuple

APP_VERSION = "1.0.0"

# Artifact consumed by the browser, written next to the scanned root
OUTPUT_FILE_NAME = "file-structure.json"

# -----------------------------------------------------------------------------
# CATEGORIES
# -----------------------------------------------------------------------------

CATEGORY_FOLDER = "folder"
CATEGORY_IMAGE = "image"
CATEGORY_AUDIO = "audio"
CATEGORY_VIDEO = "video"
CATEGORY_OTHER = "other"

FILE_CATEGORIES: Tuple[str, ...] = (
    CATEGORY_IMAGE,
    CATEGORY_AUDIO,
    CATEGORY_VIDEO,
    CATEGORY_OTHER,
)

# -----------------------------------------------------------------------------
# EXTENSION TABLES (lowercase, without the leading dot)
# -----------------------------------------------------------------------------

IMAGE_EXTENSIONS: FrozenSet[str] = frozenset(
    {"jpg", "jpeg", "png", "gif", "bmp", "svg", "webp", "ico"}
)
AUDIO_EXTENSIONS: FrozenSet[str] = frozenset(
    {"mp3", "wav", "ogg", "aac", "flac", "m4a", "wma"}
)
VIDEO_EXTENSIONS: FrozenSet[str] = frozenset(
    {"mp4", "avi", "mov", "wmv", "flv", "webm", "mkv"}
)

# -----------------------------------------------------------------------------
# IGNORE SET
# -----------------------------------------------------------------------------

IGNORED_NAMES: FrozenSet[str] = frozenset({
    # Version control metadata
    ".git",
    ".gitignore",
    ".gitkeep",
    # OS metadata
    ".DS_Store",
    "Thumbs.db",
    "desktop.ini",
    # Package manifests and dependency folders
    "node_modules",
    "package.json",
    "package-lock.json",
    "__pycache__",
    # The generator itself and its own output
    OUTPUT_FILE_NAME,
    "mediatree.py",
    "generate-structure.js",
})

# -----------------------------------------------------------------------------
# SIZE FORMATTING
# -----------------------------------------------------------------------------

SIZE_BASE = 1024
SIZE_UNITS: Tuple[str, ...] = ("Bytes", "KB", "MB", "GB")
