from __future__ import annotations

"""
File Classification Helpers.

Pure functions used by the scanner to decide which entries to skip, which
media category a file belongs to and how its size is presented.
"""

import os

from mediatree.domain.config import DEFAULT_CONFIG, ScannerConfig
from mediatree.domain.constants import (
    CATEGORY_AUDIO,
    CATEGORY_IMAGE,
    CATEGORY_OTHER,
    CATEGORY_VIDEO,
    SIZE_BASE,
    SIZE_UNITS,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def get_extension(file_name: str) -> str:
    """
    Extract the lowercased extension without its dot.

    Names without a dot, and dotfiles such as '.env', have no extension.
    """
    _, ext = os.path.splitext(file_name)
    return ext[1:].lower()


def classify(file_name: str, config: ScannerConfig = DEFAULT_CONFIG) -> str:
    """
    Map a file name to its media category.

    The first matching table wins, checked in image, audio, video order.

    Args:
        file_name: Base name of the file.
        config: Scanner configuration holding the extension tables.

    Returns:
        str: One of 'image', 'audio', 'video' or 'other'.
    """
    ext = get_extension(file_name)
    if not ext:
        return CATEGORY_OTHER
    if ext in config.image_extensions:
        return CATEGORY_IMAGE
    if ext in config.audio_extensions:
        return CATEGORY_AUDIO
    if ext in config.video_extensions:
        return CATEGORY_VIDEO
    return CATEGORY_OTHER


def format_size(num_bytes: int) -> str:
    """
    Render a byte count as a short human readable label.

    Uses 1024-based units up to GB with one decimal place, e.g.
    1536 -> '1.5 KB'. Sizes beyond the table stay expressed in GB.

    Args:
        num_bytes: Non-negative size in bytes.

    Returns:
        str: Label such as '0 Bytes', '1.0 KB' or '2.3 MB'.

    Raises:
        ValueError: If num_bytes is negative.
    """
    if num_bytes < 0:
        raise ValueError(f"Size cannot be negative: {num_bytes}")
    if num_bytes == 0:
        return "0 Bytes"

    # Integer floor(log_1024(n)), clamped to the unit table
    index = 0
    while index < len(SIZE_UNITS) - 1 and num_bytes >= SIZE_BASE ** (index + 1):
        index += 1

    value = num_bytes / (SIZE_BASE ** index)
    return f"{value:.1f} {SIZE_UNITS[index]}"


def should_ignore(name: str, config: ScannerConfig = DEFAULT_CONFIG) -> bool:
    """Check whether an entry is hidden or part of the fixed ignore set."""
    return name in config.ignored_names or name.startswith(".")
