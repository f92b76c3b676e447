from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, output path resolution and JSON
persistence, including the all-or-nothing replacement of a document.
"""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from mediatree.infra.fs import get_output_path, normalize_path, read_json, write_json

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_normalize_path_expansion() -> None:
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub", fallback=".")
        assert path.lower().endswith(os.path.join("my_folder", "sub").lower())
        assert os.path.isabs(path)


def test_normalize_path_fallback() -> None:
    assert normalize_path("   ", fallback=".") == os.path.abspath(".")
    assert normalize_path(None) == os.path.abspath(".")


def test_get_output_path(tmp_path: Path) -> None:
    root = str(tmp_path)

    assert get_output_path(root, "file-structure.json") == os.path.join(root, "file-structure.json")
    assert get_output_path(root, "file-structure.json", str(tmp_path / "x.json")) == str(tmp_path / "x.json")

# -----------------------------------------------------------------------------
# PERSISTENCE TESTS
# -----------------------------------------------------------------------------

def test_write_and_read_json(tmp_path: Path) -> None:
    target = tmp_path / "doc.json"

    write_json(str(target), {"name": "canción", "n": 1})

    assert read_json(str(target)) == {"name": "canción", "n": 1}
    assert "canción" in target.read_text(encoding="utf-8")


def test_write_json_replaces_existing(tmp_path: Path) -> None:
    target = tmp_path / "doc.json"
    target.write_text(json.dumps({"old": True}), encoding="utf-8")

    write_json(str(target), {"new": True})

    assert read_json(str(target)) == {"new": True}
    assert os.listdir(tmp_path) == ["doc.json"]


def test_write_json_failure_keeps_previous(tmp_path: Path) -> None:
    target = tmp_path / "doc.json"
    target.write_text(json.dumps({"old": True}), encoding="utf-8")

    with patch("mediatree.infra.fs.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(OSError):
            write_json(str(target), {"new": True})

    assert read_json(str(target)) == {"old": True}
    assert os.listdir(tmp_path) == ["doc.json"]


def test_read_json_errors(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_json(str(tmp_path / "missing.json"))

    bad = tmp_path / "bad.json"
    bad.write_text("{", encoding="utf-8")
    with pytest.raises(ValueError):
        read_json(str(bad))
