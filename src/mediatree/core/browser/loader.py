from __future__ import annotations

"""
Structure Document Loader.

Resolves a document source (local file, directory or HTTP URL) into a
Document for the browser model. Any read, fetch or parse failure is
logged as a warning with remediation steps and the static fallback
tree is substituted; the loader never raises for I/O problems.
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

import requests

from mediatree.core.browser.fallback import FALLBACK_ROOT, FALLBACK_STRUCTURE
from mediatree.domain.constants import OUTPUT_FILE_NAME
from mediatree.domain.tree_models import Document, tree_from_dict
from mediatree.infra.fs import read_json
from mediatree.infra.network import fetch_json_document, is_remote_source

logger = logging.getLogger(__name__)

_REMEDIATION_HINT = (
    "To generate the structure automatically, run:\n"
    "   mediatree <media-folder>\n"
    "   python -m mediatree.main <media-folder>"
)

# -----------------------------------------------------------------------------
# DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of a load attempt.

    Attributes:
        document: The loaded document, or the fallback one.
        used_fallback: True when the fallback tree was substituted.
        error: Description of the failure that triggered the fallback.
    """
    document: Document
    used_fallback: bool = False
    error: str = ""

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_document(
        source: str = OUTPUT_FILE_NAME,
        fallback: Optional[Mapping[str, Any]] = None,
) -> LoadResult:
    """
    Load a structure document, substituting the fallback tree on failure.

    Args:
        source: Path to the JSON file, a directory containing it, or a URL.
        fallback: Serialized structure used when loading fails.
            Defaults to the built-in fixture.

    Returns:
        LoadResult: The document plus whether the fallback was used.
    """
    logger.info("Loading file structure...")

    try:
        payload = _read_payload(source)
        document = Document.from_dict(payload)
    except (OSError, ValueError, requests.exceptions.RequestException) as e:
        logger.warning(f"Could not load {source}, using default structure: {e}")
        logger.info(_REMEDIATION_HINT)
        return LoadResult(
            document=build_fallback_document(fallback),
            used_fallback=True,
            error=str(e),
        )

    logger.info(f"Structure loaded (generated: {payload.get('generated', 'unknown')})")
    logger.info(f"Root: {document.root_path}")
    return LoadResult(document=document)


def build_fallback_document(structure: Optional[Mapping[str, Any]] = None) -> Document:
    """Wrap the fallback structure into a Document stamped with the current time."""
    return Document(
        generated_at=datetime.now(timezone.utc),
        root_path=FALLBACK_ROOT,
        tree=tree_from_dict(structure if structure is not None else FALLBACK_STRUCTURE),
    )

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _read_payload(source: str) -> Any:
    if is_remote_source(source):
        return fetch_json_document(source)

    path = source
    if os.path.isdir(path):
        path = os.path.join(path, OUTPUT_FILE_NAME)
    return read_json(path)
