from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive node types produced by the scanner, the document
envelope persisted to disk and the aggregate statistics computed over a
tree. All models are immutable; a new scan produces a new tree.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from mediatree.domain.constants import (
    CATEGORY_AUDIO,
    CATEGORY_FOLDER,
    CATEGORY_IMAGE,
    CATEGORY_OTHER,
    CATEGORY_VIDEO,
    FILE_CATEGORIES,
)

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the directory tree.

    Attributes:
        name: Base name of the file.
        path: Slash-joined path relative to the scan root.
        category: Media category derived from the extension.
        size_bytes: Raw size reported by the filesystem.
        size_label: Human readable size (e.g. '1.5 KB').
        last_modified: Modification time (UTC), if known.
    """
    name: str
    path: str
    category: str
    size_bytes: int
    size_label: str
    last_modified: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.category,
            "size": self.size_label,
            "path": self.path,
        }
        if self.last_modified is not None:
            data["lastModified"] = format_timestamp(self.last_modified)
        return data


@dataclass(frozen=True)
class FolderNode:
    """
    Represents a branch entry (directory) in the directory tree.

    Attributes:
        name: Base name of the directory.
        path: Slash-joined path relative to the scan root.
        children: Read-only mapping of entry name to node.
    """
    name: str
    path: str
    children: Mapping[str, "Node"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the children mapping so the tree cannot be patched after the scan
        object.__setattr__(self, "children", freeze_tree(self.children))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": CATEGORY_FOLDER,
            "children": tree_to_dict(self.children),
            "path": self.path,
        }


Node = Union[FolderNode, FileNode]
Tree = Mapping[str, Node]


def freeze_tree(children: Mapping[str, Node]) -> Tree:
    """Wrap a children mapping in a read-only view, preserving insertion order."""
    if isinstance(children, MappingProxyType):
        return children
    return MappingProxyType(dict(children))

# -----------------------------------------------------------------------------
# AGGREGATES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanStats:
    """
    Aggregate counters over a scanned tree.

    Instances are combined with '+', which keeps the recursive fold
    free of shared mutable counters.
    """
    folders: int = 0
    files: int = 0
    images: int = 0
    audio: int = 0
    video: int = 0
    other: int = 0

    def __add__(self, rhs: ScanStats) -> ScanStats:
        if not isinstance(rhs, ScanStats):
            return NotImplemented
        return ScanStats(
            folders=self.folders + rhs.folders,
            files=self.files + rhs.files,
            images=self.images + rhs.images,
            audio=self.audio + rhs.audio,
            video=self.video + rhs.video,
            other=self.other + rhs.other,
        )

    @classmethod
    def for_folder(cls) -> ScanStats:
        return cls(folders=1)

    @classmethod
    def for_file(cls, category: str) -> ScanStats:
        return cls(
            files=1,
            images=int(category == CATEGORY_IMAGE),
            audio=int(category == CATEGORY_AUDIO),
            video=int(category == CATEGORY_VIDEO),
            other=int(category not in (CATEGORY_IMAGE, CATEGORY_AUDIO, CATEGORY_VIDEO)),
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "folders": self.folders,
            "files": self.files,
            "images": self.images,
            "audio": self.audio,
            "video": self.video,
            "other": self.other,
        }

# -----------------------------------------------------------------------------
# DOCUMENT ENVELOPE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Document:
    """
    Serialized artifact of a single scan.

    Attributes:
        generated_at: UTC timestamp of the scan.
        root_path: Absolute path of the scanned root.
        tree: Top-level entries of the root folder.
    """
    generated_at: datetime
    root_path: str
    tree: Tree = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tree", freeze_tree(self.tree))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated": format_timestamp(self.generated_at),
            "root": self.root_path,
            "structure": tree_to_dict(self.tree),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Document:
        """
        Rebuild a Document from its serialized form.

        Raises:
            ValueError: If the payload does not have the document shape.
        """
        if not isinstance(data, Mapping):
            raise ValueError("Document root must be a JSON object.")

        structure = data.get("structure")
        if not isinstance(structure, Mapping):
            raise ValueError("Document is missing the 'structure' mapping.")

        generated_raw = data.get("generated")
        generated_at = (
            parse_timestamp(generated_raw)
            if generated_raw
            else datetime.now(timezone.utc)
        )
        return cls(
            generated_at=generated_at,
            root_path=str(data.get("root", "")),
            tree=tree_from_dict(structure),
        )

# -----------------------------------------------------------------------------
# SERIALIZATION HELPERS
# -----------------------------------------------------------------------------

def tree_to_dict(tree: Tree) -> Dict[str, Any]:
    return {name: node.to_dict() for name, node in tree.items()}


def tree_from_dict(structure: Mapping[str, Any], parent_path: str = "") -> Tree:
    """
    Rebuild nodes from a serialized 'structure' mapping.

    Entries lacking 'path' get one derived from their parent; entries
    lacking 'size' or 'lastModified' (hand-written fixtures, older
    documents) keep empty defaults.
    """
    nodes: Dict[str, Node] = {}
    for name, raw in structure.items():
        if not isinstance(raw, Mapping):
            raise ValueError(f"Entry '{name}' is not an object.")

        path = str(raw.get("path") or (f"{parent_path}/{name}" if parent_path else name))
        node_type = raw.get("type", CATEGORY_OTHER)

        if node_type == CATEGORY_FOLDER:
            children = raw.get("children", {})
            if not isinstance(children, Mapping):
                raise ValueError(f"Folder '{path}' has invalid children.")
            nodes[name] = FolderNode(
                name=name,
                path=path,
                children=tree_from_dict(children, path),
            )
        else:
            modified_raw = raw.get("lastModified")
            nodes[name] = FileNode(
                name=name,
                path=path,
                category=node_type if node_type in FILE_CATEGORIES else CATEGORY_OTHER,
                size_bytes=0,
                size_label=str(raw.get("size", "")),
                last_modified=parse_timestamp(modified_raw) if modified_raw else None,
            )
    return freeze_tree(nodes)


def format_timestamp(value: datetime) -> str:
    """Render a datetime as UTC ISO-8601 with milliseconds and a 'Z' suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def parse_timestamp(raw: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting the 'Z' suffix."""
    text = str(raw).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
