from __future__ import annotations

"""
Scanner Configuration Management.

Defines the immutable configuration captured by the scanner (ignore set,
extension tables, output naming, ordering) and loads optional overrides
from a JSON file. Defaults come from the domain constants.
"""

import json
import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Iterable, Optional

from mediatree.domain.constants import (
    AUDIO_EXTENSIONS,
    IGNORED_NAMES,
    IMAGE_EXTENSIONS,
    OUTPUT_FILE_NAME,
    VIDEO_EXTENSIONS,
)
from mediatree.domain.errors import ConfigError

logger = logging.getLogger(__name__)

# Keys accepted in a configuration file
_KNOWN_KEYS = (
    "extra_ignored_names",
    "image_extensions",
    "audio_extensions",
    "video_extensions",
    "output_file_name",
    "sort_entries",
)

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScannerConfig:
    """
    Immutable specification of a scan.

    Attributes:
        ignored_names: Entry names skipped at every level.
        image_extensions: Extensions classified as 'image'.
        audio_extensions: Extensions classified as 'audio'.
        video_extensions: Extensions classified as 'video'.
        output_file_name: Name of the artifact written into the root.
        sort_entries: Visit entries in name order instead of listing order.
    """
    ignored_names: FrozenSet[str] = field(default=IGNORED_NAMES)
    image_extensions: FrozenSet[str] = field(default=IMAGE_EXTENSIONS)
    audio_extensions: FrozenSet[str] = field(default=AUDIO_EXTENSIONS)
    video_extensions: FrozenSet[str] = field(default=VIDEO_EXTENSIONS)
    output_file_name: str = OUTPUT_FILE_NAME
    sort_entries: bool = False

    def with_overrides(
            self,
            output_file_name: Optional[str] = None,
            sort_entries: Optional[bool] = None,
    ) -> ScannerConfig:
        """Return a copy with the non-None values applied."""
        changes: Dict[str, Any] = {}
        if output_file_name:
            changes["output_file_name"] = output_file_name
            changes["ignored_names"] = self.ignored_names | {output_file_name}
        if sort_entries is not None:
            changes["sort_entries"] = sort_entries
        return replace(self, **changes) if changes else self

    def with_ignored_name(self, name: str) -> ScannerConfig:
        """Return a copy that also skips entries called 'name'."""
        if not name or name in self.ignored_names:
            return self
        return replace(self, ignored_names=self.ignored_names | {name})


DEFAULT_CONFIG = ScannerConfig()

# -----------------------------------------------------------------------------
# PERSISTENCE LOGIC
# -----------------------------------------------------------------------------

def load_scanner_config(path: Optional[str] = None) -> ScannerConfig:
    """
    Build a ScannerConfig from an optional JSON override file.

    'extra_ignored_names' extends the default ignore set; extension lists
    replace their default table. Unknown keys are logged and ignored.

    Args:
        path: Path to the JSON file. None returns the defaults.

    Returns:
        ScannerConfig: The resolved configuration.

    Raises:
        ConfigError: If the file cannot be read or has an invalid shape.
    """
    if not path:
        return DEFAULT_CONFIG

    if not os.path.isfile(path):
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to read configuration '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a JSON object.")

    for key in data:
        if key not in _KNOWN_KEYS:
            logger.warning(f"Config: Ignoring unknown key '{key}'.")

    changes: Dict[str, Any] = {}

    if "extra_ignored_names" in data:
        extra = _as_name_set(data["extra_ignored_names"], "extra_ignored_names")
        changes["ignored_names"] = DEFAULT_CONFIG.ignored_names | extra

    for key in ("image_extensions", "audio_extensions", "video_extensions"):
        if key in data:
            changes[key] = _as_extension_set(data[key], key)

    if "output_file_name" in data:
        name = data["output_file_name"]
        if not isinstance(name, str) or not name.strip():
            raise ConfigError("'output_file_name' must be a non-empty string.")
        changes["output_file_name"] = name.strip()
        changes["ignored_names"] = changes.get(
            "ignored_names", DEFAULT_CONFIG.ignored_names
        ) | {name.strip()}

    if "sort_entries" in data:
        if not isinstance(data["sort_entries"], bool):
            raise ConfigError("'sort_entries' must be a boolean.")
        changes["sort_entries"] = data["sort_entries"]

    logger.debug(f"Config: Loaded {len(changes)} override(s) from {path}")
    return replace(DEFAULT_CONFIG, **changes)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _as_name_set(value: Any, key: str) -> FrozenSet[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings.")
    return frozenset(v for v in value if v)


def _as_extension_set(value: Any, key: str) -> FrozenSet[str]:
    names: Iterable[str] = _as_name_set(value, key)
    return frozenset(n.strip().lstrip(".").lower() for n in names if n.strip())
