from __future__ import annotations

"""
Unit tests for the File Classification Helpers.

Verifies extension-based categorization, human size labels and the
ignore rules applied to every directory entry.
"""

import pytest

from mediatree.core.services.classifier import (
    classify,
    format_size,
    get_extension,
    should_ignore,
)
from mediatree.domain.config import ScannerConfig
from mediatree.domain.constants import IGNORED_NAMES

# -----------------------------------------------------------------------------
# CLASSIFICATION TESTS
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("name, expected", [
    ("photo.jpg", "image"),
    ("logo.svg", "image"),
    ("track.flac", "audio"),
    ("voice.m4a", "audio"),
    ("movie.mkv", "video"),
    ("clip.webm", "video"),
    ("report.pdf", "other"),
    ("Makefile", "other"),
    ("archive.tar.gz", "other"),
])
def test_classify_by_extension(name: str, expected: str) -> None:
    """Verify each table maps to its category and unknowns fall to 'other'."""
    assert classify(name) == expected


def test_classify_is_case_insensitive() -> None:
    assert classify("A.PNG") == classify("a.png") == "image"
    assert classify("SONG.Mp3") == "audio"


def test_classify_uses_last_extension() -> None:
    assert classify("backup.png.mp4") == "video"


def test_classify_without_extension() -> None:
    """Names without a dot, trailing dots and dotfiles have no extension."""
    assert get_extension("README") == ""
    assert get_extension("weird.") == ""
    assert get_extension(".env") == ""
    assert classify("README") == "other"
    assert classify("weird.") == "other"


def test_classify_respects_custom_tables() -> None:
    cfg = ScannerConfig(image_extensions=frozenset({"heic"}))
    assert classify("shot.heic", cfg) == "image"
    assert classify("shot.png", cfg) == "other"

# -----------------------------------------------------------------------------
# SIZE FORMATTING TESTS
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("num_bytes, expected", [
    (0, "0 Bytes"),
    (1, "1.0 Bytes"),
    (500, "500.0 Bytes"),
    (1023, "1023.0 Bytes"),
    (1024, "1.0 KB"),
    (1536, "1.5 KB"),
    (1048576, "1.0 MB"),
    (5 * 1024 ** 3, "5.0 GB"),
])
def test_format_size(num_bytes: int, expected: str) -> None:
    assert format_size(num_bytes) == expected


def test_format_size_clamps_to_gigabytes() -> None:
    """Sizes past the unit table stay expressed in GB."""
    assert format_size(1024 ** 4) == "1024.0 GB"


def test_format_size_rejects_negative() -> None:
    with pytest.raises(ValueError):
        format_size(-1)

# -----------------------------------------------------------------------------
# IGNORE RULES TESTS
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("name", sorted(IGNORED_NAMES))
def test_should_ignore_fixed_set(name: str) -> None:
    assert should_ignore(name) is True


@pytest.mark.parametrize("name", [".env", ".cache", ".anything"])
def test_should_ignore_dotfiles(name: str) -> None:
    assert should_ignore(name) is True


@pytest.mark.parametrize("name", ["photo.jpg", "music", "package.json.bak", "Node_Modules"])
def test_should_not_ignore_regular_names(name: str) -> None:
    assert should_ignore(name) is False
