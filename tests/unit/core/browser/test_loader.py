from __future__ import annotations

"""
Unit tests for the Structure Document Loader.

Verifies loading from files, directories and URLs, and that every
failure mode degrades to the fallback structure with a warning.
"""

import json
import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from mediatree.core.browser.fallback import FALLBACK_ROOT
from mediatree.core.browser.loader import build_fallback_document, load_document
from mediatree.core.services.generator import generate_structure


def test_load_generated_document_from_file(media_root: Path) -> None:
    generated = generate_structure(str(media_root))

    result = load_document(str(media_root / "file-structure.json"))

    assert result.used_fallback is False
    assert result.error == ""
    assert result.document.to_dict() == generated.to_dict()


def test_load_from_directory(media_root: Path) -> None:
    generate_structure(str(media_root))

    result = load_document(str(media_root))

    assert result.used_fallback is False
    assert "audio" in result.document.tree


def test_missing_file_uses_fallback(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="mediatree.core.browser.loader"):
        result = load_document(str(tmp_path / "nope.json"))

    assert result.used_fallback is True
    assert result.document.root_path == FALLBACK_ROOT
    assert "images" in result.document.tree
    assert any(r.levelno == logging.WARNING for r in caplog.records)
    assert "mediatree" in caplog.text


def test_invalid_json_uses_fallback(tmp_path: Path) -> None:
    bad = tmp_path / "file-structure.json"
    bad.write_text("{not json", encoding="utf-8")

    result = load_document(str(bad))

    assert result.used_fallback is True
    assert result.error


def test_wrong_shape_uses_fallback(tmp_path: Path) -> None:
    doc = tmp_path / "file-structure.json"
    doc.write_text(json.dumps({"generated": "2024-01-01T00:00:00.000Z", "root": "/x"}), encoding="utf-8")

    result = load_document(str(doc))

    assert result.used_fallback is True
    assert "structure" in result.error


def test_custom_fallback_structure(tmp_path: Path) -> None:
    result = load_document(
        str(tmp_path / "missing.json"),
        fallback={"only.txt": {"type": "other", "size": "1 KB"}},
    )

    assert list(result.document.tree) == ["only.txt"]


def test_load_from_url() -> None:
    payload = {
        "generated": "2024-01-31T10:15:30.123Z",
        "root": "/srv/media",
        "structure": {
            "song.mp3": {
                "type": "audio",
                "size": "2.0 KB",
                "path": "song.mp3",
                "lastModified": "2024-01-30T08:00:00.000Z",
            },
        },
    }
    response = MagicMock()
    response.json.return_value = payload
    response.content = json.dumps(payload).encode("utf-8")
    response.raise_for_status.return_value = None

    with patch("mediatree.infra.network.requests.get", return_value=response) as mock_get:
        result = load_document("https://example.org/file-structure.json")

    mock_get.assert_called_once()
    assert result.used_fallback is False
    assert result.document.root_path == "/srv/media"
    assert result.document.tree["song.mp3"].category == "audio"


def test_url_failure_uses_fallback() -> None:
    with patch(
            "mediatree.infra.network.requests.get",
            side_effect=requests.exceptions.ConnectionError("offline"),
    ):
        result = load_document("http://localhost:9/file-structure.json")

    assert result.used_fallback is True
    assert "offline" in result.error


def test_fallback_document_shape() -> None:
    document = build_fallback_document()

    hotwheels = document.tree["images"].children["galaxia-hotwheels"]
    assert hotwheels.path == "images/galaxia-hotwheels"
    assert hotwheels.children["1.png"].path == "images/galaxia-hotwheels/1.png"
    assert hotwheels.children["1.png"].size_label == "72.7 KB"
    assert dict(document.tree["fonts"].children) == {}
