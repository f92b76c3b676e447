from __future__ import annotations

"""
Directory Tree Scanning Service.

Walks a root directory depth-first and builds the immutable node tree
consumed by the generator. Scanning is best-effort: a directory that
cannot be listed is logged and contributes an empty subtree, so one bad
branch never aborts the whole run.
"""

import logging
import os
from datetime import datetime, timezone
from typing import Dict, List, Optional

from mediatree.core.services.classifier import classify, format_size, should_ignore
from mediatree.domain.config import DEFAULT_CONFIG, ScannerConfig
from mediatree.domain.tree_models import (
    FileNode,
    FolderNode,
    Node,
    ScanStats,
    Tree,
    freeze_tree,
)

logger = logging.getLogger(__name__)

# ==============================================================================
# PUBLIC API
# ==============================================================================

def scan_directory(
        dir_path: str,
        relative_prefix: str = "",
        config: ScannerConfig = DEFAULT_CONFIG,
) -> Tree:
    """
    Build the mapping of entry name to node for a directory.

    Directories are recursed into and wrapped as FolderNode; regular
    files are stat'ed and wrapped as FileNode. Ignored and hidden names
    are skipped at every level.

    Args:
        dir_path: Filesystem path of the directory to scan.
        relative_prefix: Slash-joined path of dir_path from the scan root.
        config: Scanner configuration (ignore set, tables, ordering).

    Returns:
        Tree: Read-only mapping of the directory's non-ignored entries.
    """
    structure: Dict[str, Node] = {}

    entries = _list_entries(dir_path, config.sort_entries)
    if entries is None:
        return freeze_tree(structure)

    for entry in entries:
        if should_ignore(entry.name, config):
            continue

        rel_path = f"{relative_prefix}/{entry.name}" if relative_prefix else entry.name

        if _is_directory(entry):
            children = scan_directory(entry.path, rel_path, config)
            structure[entry.name] = FolderNode(
                name=entry.name,
                path=rel_path,
                children=children,
            )
            continue

        node = _build_file_node(entry, rel_path, config)
        if node is not None:
            structure[entry.name] = node

    return freeze_tree(structure)


def calculate_stats(tree: Tree) -> ScanStats:
    """
    Fold a tree into aggregate folder, file and category counters.

    Args:
        tree: Mapping of name to node, as returned by scan_directory.

    Returns:
        ScanStats: Totals for the whole subtree.
    """
    total = ScanStats()
    for node in tree.values():
        if isinstance(node, FolderNode):
            total = total + ScanStats.for_folder() + calculate_stats(node.children)
        else:
            total = total + ScanStats.for_file(node.category)
    return total

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _list_entries(dir_path: str, sort_entries: bool) -> Optional[List[os.DirEntry]]:
    """Snapshot a directory listing, or None if it cannot be read."""
    try:
        with os.scandir(dir_path) as it:
            entries = list(it)
    except OSError as e:
        logger.error(f"Error reading directory {dir_path}: {e}")
        return None

    if sort_entries:
        entries.sort(key=lambda e: e.name)
    return entries


def _is_directory(entry: os.DirEntry) -> bool:
    # Symlinked directories are treated as files to avoid following cycles
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _build_file_node(
        entry: os.DirEntry,
        rel_path: str,
        config: ScannerConfig,
) -> Optional[FileNode]:
    """Stat a file entry and wrap it; entries that vanished are skipped."""
    try:
        stats = os.stat(entry.path)
    except OSError as e:
        logger.warning(f"Skipping unreadable file {entry.path}: {e}")
        return None

    return FileNode(
        name=entry.name,
        path=rel_path,
        category=classify(entry.name, config),
        size_bytes=stats.st_size,
        size_label=format_size(stats.st_size),
        last_modified=datetime.fromtimestamp(stats.st_mtime, tz=timezone.utc),
    )
