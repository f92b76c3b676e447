from __future__ import annotations

"""
Document Generation Service.

Orchestrates a full run: resolves the root, scans it, stamps the result,
persists the document next to the scanned tree and reports the totals.
Persistence failures are fatal and surface as DocumentWriteError.
"""

import logging
import os
from datetime import datetime, timezone
from typing import List, Optional

from mediatree.core.services.scanner import calculate_stats, scan_directory
from mediatree.domain.config import DEFAULT_CONFIG, ScannerConfig
from mediatree.domain.errors import DocumentWriteError
from mediatree.domain.tree_models import Document, ScanStats
from mediatree.infra.fs import get_output_path, normalize_path, write_json

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_structure(
        root_path: str = ".",
        config: ScannerConfig = DEFAULT_CONFIG,
        output_path: Optional[str] = None,
) -> Document:
    """
    Scan a directory tree and persist it as a JSON document.

    Args:
        root_path: Directory to scan. Defaults to the working directory.
        config: Scanner configuration.
        output_path: Optional destination overriding '<root>/<output_file_name>'.

    Returns:
        Document: The generated (and persisted) document.

    Raises:
        DocumentWriteError: If the document cannot be written.
    """
    logger.info("Scanning file structure...")

    absolute_root = normalize_path(root_path)
    destination = get_output_path(absolute_root, config.output_file_name, output_path)

    # An explicit destination inside the root must not show up in the next scan
    if _is_within(os.path.dirname(destination), absolute_root):
        config = config.with_ignored_name(os.path.basename(destination))

    structure = scan_directory(absolute_root, "", config)

    document = Document(
        generated_at=datetime.now(timezone.utc),
        root_path=absolute_root,
        tree=structure,
    )

    save_document(document, destination)

    logger.info("Structure generated successfully.")
    logger.info(f"File created: {destination}")
    logger.debug(f"Scan totals: {summarize(document).to_dict()}")
    return document


def save_document(document: Document, destination: str) -> None:
    """
    Write a document to disk, replacing any previous version.

    Raises:
        DocumentWriteError: On any filesystem failure.
    """
    try:
        write_json(destination, document.to_dict())
    except OSError as e:
        logger.error(f"Failed to persist document to '{destination}': {e}")
        raise DocumentWriteError(destination, str(e)) from e
    logger.debug(f"Document persisted ({os.path.getsize(destination)} bytes).")


def summarize(document: Document) -> ScanStats:
    """Compute the aggregate counters of a generated document."""
    return calculate_stats(document.tree)


def report_stats(stats: ScanStats) -> List[str]:
    """
    Render the final tally as console lines.

    Args:
        stats: Aggregate counters of a scan.

    Returns:
        List[str]: One header line followed by one line per counter.
    """
    return [
        "Statistics:",
        f"  Folders: {stats.folders}",
        f"  Files:   {stats.files}",
        f"  Images:  {stats.images}",
        f"  Audio:   {stats.audio}",
        f"  Video:   {stats.video}",
        f"  Other:   {stats.other}",
    ]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_within(path: str, root: str) -> bool:
    """Check whether 'path' is 'root' or one of its descendants."""
    path = os.path.normcase(os.path.abspath(path))
    root = os.path.normcase(os.path.abspath(root))
    try:
        return os.path.commonpath([path, root]) == root
    except ValueError:
        # Different drives on Windows
        return False
