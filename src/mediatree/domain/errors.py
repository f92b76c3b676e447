from __future__ import annotations

"""
Domain Error Hierarchy.

Only failures that must reach the invoker are modelled here. Recoverable
problems (an unreadable subdirectory, an unreachable document) are
logged where they happen and never raised.
"""


class MediaTreeError(Exception):
    """Base class for all fatal application errors."""


class ConfigError(MediaTreeError):
    """The scanner configuration file is unreadable or malformed."""


class DocumentWriteError(MediaTreeError):
    """
    The generated document could not be persisted.

    Attributes:
        path: Target path of the failed write.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not write '{path}': {reason}")
        self.path = path
        self.reason = reason
