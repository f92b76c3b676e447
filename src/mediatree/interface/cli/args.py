from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the 'generate' and 'browse' commands
and the small amount of argv normalization that lets 'generate' be the
implicit default command.
"""

import argparse
import sys
from typing import List, Optional, Sequence

from mediatree.domain.constants import APP_VERSION, OUTPUT_FILE_NAME

COMMAND_GENERATE = "generate"
COMMAND_BROWSE = "browse"
_COMMANDS = (COMMAND_GENERATE, COMMAND_BROWSE)
_TOP_LEVEL_FLAGS = ("-h", "--help", "--version")

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the MediaTree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="mediatree",
        description="Scan a media folder into file-structure.json and browse it.",
        epilog=(
            "Without a command, arguments are passed to 'generate'. To scan a "
            "folder literally named 'browse' or 'generate', name the command "
            "explicitly: mediatree generate browse"
        ),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    sub = p.add_subparsers(dest="command", metavar="{generate,browse}")

    # --- generate ---
    gen = sub.add_parser(
        COMMAND_GENERATE,
        help="Scan a directory and write its structure document (default).",
    )
    gen.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Directory to scan (default: current directory). "
             "Use 'mediatree generate browse' for a folder named like a command.",
    )
    gen.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help=f"Write the document here instead of <root>/{OUTPUT_FILE_NAME}.",
    )
    gen.add_argument(
        "--sort",
        dest="sort_entries",
        action="store_true",
        default=None,
        help="Visit entries in name order for deterministic output.",
    )
    gen.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON file overriding ignore names and extension tables.",
    )
    gen.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the final statistics as JSON.",
    )
    _add_diagnostic_args(gen)

    # --- browse ---
    browse = sub.add_parser(
        COMMAND_BROWSE,
        help="List a folder of a structure document (file, directory or URL).",
    )
    browse.add_argument(
        "source",
        nargs="?",
        default=OUTPUT_FILE_NAME,
        help=f"Document path, folder containing {OUTPUT_FILE_NAME}, or http(s) URL.",
    )
    browse.add_argument(
        "-p", "--path",
        dest="current_path",
        default="",
        help="Slash-separated folder to list (default: root).",
    )
    _add_diagnostic_args(browse)

    return p


def normalize_argv(argv: Sequence[str]) -> List[str]:
    """
    Make 'generate' the implicit command.

    'mediatree photos/' is read as 'mediatree generate photos/'; top-level
    help and version flags are left untouched. A leading command name always
    selects that command, so a folder named 'browse' needs an explicit
    'generate' in front of it.
    """
    args = list(argv)
    if not args:
        return [COMMAND_GENERATE]
    if args[0] in _COMMANDS or args[0] in _TOP_LEVEL_FLAGS:
        return args
    return [COMMAND_GENERATE] + args


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    raw = list(sys.argv[1:] if argv is None else argv)
    return build_parser().parse_args(normalize_argv(raw))

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _add_diagnostic_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
