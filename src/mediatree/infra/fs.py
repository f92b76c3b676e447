from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and JSON artifact persistence used by the
generator and the browser loader. Acts as a thin abstraction over 'os'
and 'json' so the services stay free of low-level I/O details.
"""

import json
import os
import tempfile
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str = ".") -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def get_output_path(root_path: str, file_name: str, override: Optional[str] = None) -> str:
    """
    Resolve where the generated document is written.

    Args:
        root_path: Absolute path of the scanned root.
        file_name: Default artifact name inside the root.
        override: Explicit destination, if requested by the caller.

    Returns:
        str: Absolute destination path.
    """
    if override:
        return normalize_path(override)
    return os.path.join(root_path, file_name)

# -----------------------------------------------------------------------------
# PERSISTENCE API
# -----------------------------------------------------------------------------

def write_json(path: str, payload: Dict[str, Any]) -> None:
    """
    Persist a JSON payload, replacing any previous file in one step.

    The payload is written to a temporary sibling and renamed over the
    destination, so readers never observe a half-written document.

    Raises:
        OSError: If the directory is not writable or the rename fails.
    """
    target_dir = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix=".mediatree-", suffix=".tmp", dir=target_dir)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def read_json(path: str) -> Any:
    """
    Load a JSON file.

    Raises:
        OSError: If the file cannot be opened.
        ValueError: If the content is not valid JSON.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
