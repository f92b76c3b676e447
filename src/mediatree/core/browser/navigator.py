from __future__ import annotations

"""
Headless Browser Model.

Keeps the 'current folder' cursor over a read-only tree and exposes what a
view needs to render it: the resolved folder, its entries sorted folders
first, the breadcrumb trail and the preview action for a selected file.
"""

import locale
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from mediatree.domain.constants import CATEGORY_AUDIO, CATEGORY_IMAGE
from mediatree.domain.tree_models import FolderNode, Node, Tree

logger = logging.getLogger(__name__)

ROOT_LABEL = "Root"

PREVIEW_IMAGE = "image"
PREVIEW_AUDIO = "audio"
PREVIEW_DOWNLOAD = "download"

# -----------------------------------------------------------------------------
# VIEW MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Breadcrumb:
    label: str
    path: str


@dataclass(frozen=True)
class Preview:
    """
    Preview action for a selected file.

    Attributes:
        kind: 'image' (inline), 'audio' (player) or 'download'.
        name: File name shown as the title.
        path: Slash-joined path used as the media source or download link.
    """
    kind: str
    name: str
    path: str

# -----------------------------------------------------------------------------
# NAVIGATOR
# -----------------------------------------------------------------------------

class Navigator:
    """
    Cursor-based navigation over a scanned tree.

    The tree is never modified; only 'current_path' changes.
    """

    def __init__(self, tree: Tree, current_path: str = ""):
        self._tree = tree
        self.current_path = _normalize(current_path)

    @property
    def tree(self) -> Tree:
        return self._tree

    @property
    def can_go_back(self) -> bool:
        return bool(self.current_path)

    def current_folder(self) -> Tree:
        """
        Resolve the cursor to a folder's children.

        Segments that do not name a folder are skipped, so an unknown path
        resolves to the deepest folder that exists along it.
        """
        current = self._tree
        for part in _split(self.current_path):
            node = current.get(part)
            if isinstance(node, FolderNode):
                current = node.children
        return current

    def entries(self) -> List[Tuple[str, Node]]:
        """List the current folder, folders first, then by name."""
        return sorted(self.current_folder().items(), key=_entry_sort_key)

    def breadcrumbs(self) -> List[Breadcrumb]:
        crumbs = [Breadcrumb(ROOT_LABEL, "")]
        cumulative = ""
        for part in _split(self.current_path):
            cumulative = f"{cumulative}/{part}" if cumulative else part
            crumbs.append(Breadcrumb(part, cumulative))
        return crumbs

    def navigate_to(self, path: str) -> None:
        self.current_path = _normalize(path)
        logger.debug(f"Navigator: Cursor moved to '{self.current_path or '/'}'")

    def go_back(self) -> None:
        if not self.current_path:
            return
        self.navigate_to("/".join(_split(self.current_path)[:-1]))

    def open(self, name: str) -> Optional[Preview]:
        """
        Activate an entry of the current folder.

        Folders move the cursor into them and return None; files return
        their preview action.

        Raises:
            KeyError: If the current folder has no entry with that name.
        """
        node = self.current_folder()[name]
        if isinstance(node, FolderNode):
            self.navigate_to(self._child_path(name))
            return None
        return self.preview(name)

    def preview(self, name: str) -> Preview:
        """
        Build the preview action for a file of the current folder.

        Raises:
            KeyError: If the entry does not exist.
            ValueError: If the entry is a folder.
        """
        node = self.current_folder()[name]
        if isinstance(node, FolderNode):
            raise ValueError(f"'{name}' is a folder and has no preview.")
        return Preview(kind=preview_kind(node.category), name=name, path=self._child_path(name))

    def _child_path(self, name: str) -> str:
        return f"{self.current_path}/{name}" if self.current_path else name

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def preview_kind(category: str) -> str:
    """Map a file category to the way a browser presents it."""
    if category == CATEGORY_IMAGE:
        return PREVIEW_IMAGE
    if category == CATEGORY_AUDIO:
        return PREVIEW_AUDIO
    return PREVIEW_DOWNLOAD


def _entry_sort_key(item: Tuple[str, Node]) -> Tuple[int, str, str]:
    name, node = item
    return (0 if isinstance(node, FolderNode) else 1, locale.strxfrm(name.casefold()), name)


def _split(path: str) -> List[str]:
    return [part for part in path.split("/") if part]


def _normalize(path: str) -> str:
    return "/".join(_split(path or ""))
