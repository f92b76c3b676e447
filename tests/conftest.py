from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared media folder fixtures used across unit and integration tests.
3. Logging teardown so handlers never outlive a captured stream.
"""

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from mediatree.infra.logging import reset_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def clean_logging() -> Iterator[None]:
    """Remove handlers installed by configure_logging after each test."""
    yield
    reset_logging()


@pytest.fixture
def media_root(tmp_path: Path) -> Path:
    """
    Create a small media folder.

    Structure:
        media/
            audio/song.mp3          (2048 bytes)
            images/cover.PNG        (1536 bytes)
            images/nested/clip.mp4  (10 bytes)
            notes.txt               (5 bytes)
            .hidden                 (ignored)
            node_modules/lib.js     (ignored)
            package.json            (ignored)
    """
    root = tmp_path / "media"
    (root / "audio").mkdir(parents=True)
    (root / "images" / "nested").mkdir(parents=True)
    (root / "node_modules").mkdir()

    (root / "audio" / "song.mp3").write_bytes(b"\0" * 2048)
    (root / "images" / "cover.PNG").write_bytes(b"\0" * 1536)
    (root / "images" / "nested" / "clip.mp4").write_bytes(b"\0" * 10)
    (root / "notes.txt").write_text("hello", encoding="utf-8")
    (root / ".hidden").write_text("secret", encoding="utf-8")
    (root / "node_modules" / "lib.js").write_text("var x = 1;", encoding="utf-8")
    (root / "package.json").write_text("{}", encoding="utf-8")

    return root
