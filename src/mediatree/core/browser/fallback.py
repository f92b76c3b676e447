from __future__ import annotations

"""
Fallback Structure Fixture.

Static tree shown by the browser when no generated document can be
loaded. It uses the serialized document shape, without paths or
timestamps, and is rebuilt into nodes by the loader.
"""

from typing import Any, Dict

FALLBACK_ROOT = "(fallback)"

FALLBACK_STRUCTURE: Dict[str, Any] = {
    "audio": {
        "type": "folder",
        "children": {
            "we fell in love in octobers.mp3": {"type": "audio", "size": "487 KB"},
            "make-u-mine.mp3": {"type": "audio", "size": "1.3 MB"},
        },
    },
    "images": {
        "type": "folder",
        "children": {
            "galaxia-hotwheels": {
                "type": "folder",
                "children": {
                    "1.png": {"type": "image", "size": "72.7 KB"},
                    "2.png": {"type": "image", "size": "25.3 KB"},
                    "3.png": {"type": "image", "size": "102.7 KB"},
                    "4.png": {"type": "image", "size": "58.3 KB"},
                    "5.png": {"type": "image", "size": "58.6 KB"},
                    "hotwheels-logo.png": {"type": "image", "size": "30.0 KB"},
                },
            },
        },
    },
    "css": {
        "type": "folder",
        "children": {
            "style.css": {"type": "other", "size": "5.7 KB"},
        },
    },
    "js": {
        "type": "folder",
        "children": {
            "main.js": {"type": "other", "size": "10.4 KB"},
        },
    },
    "fonts": {
        "type": "folder",
        "children": {},
    },
    "index.html": {"type": "other", "size": "1.6 KB"},
    "README.md": {"type": "other", "size": "5.6 KB"},
}
