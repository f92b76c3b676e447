from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution, execution of the 'generate' or 'browse' command and result
rendering. Exit codes: 0 success, 1 fatal failure, 2 invalid input,
130 interrupted.
"""

import json
import locale
import os
import sys
from typing import List, Optional

from mediatree.core.browser.loader import load_document
from mediatree.core.browser.navigator import Navigator
from mediatree.core.services.generator import generate_structure, report_stats, summarize
from mediatree.domain.config import load_scanner_config
from mediatree.domain.errors import ConfigError, DocumentWriteError
from mediatree.domain.tree_models import FolderNode
from mediatree.infra.fs import normalize_path
from mediatree.infra.logging import LoggingConfig, configure_logging, get_logger
from mediatree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    args = cli_args.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))
    _init_collation()

    try:
        if args.command == cli_args.COMMAND_BROWSE:
            return run_browse(args.source, args.current_path)
        return run_generate(
            args.root,
            output_path=args.output_path,
            config_path=args.config_path,
            sort_entries=args.sort_entries,
            json_output=args.json_output,
        )
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED

# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------

def run_generate(
        root: str,
        output_path: Optional[str] = None,
        config_path: Optional[str] = None,
        sort_entries: Optional[bool] = None,
        json_output: bool = False,
) -> int:
    """Scan 'root', persist the document and print the tally."""
    if not os.path.isdir(normalize_path(root)):
        msg = f"Directory does not exist: {root}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_USAGE

    try:
        config = load_scanner_config(config_path)
    except ConfigError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    config = config.with_overrides(sort_entries=sort_entries)

    try:
        document = generate_structure(root, config=config, output_path=output_path)
    except DocumentWriteError as e:
        logger.critical(f"Error generating structure: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    stats = summarize(document)
    if json_output:
        print(json.dumps(stats.to_dict(), indent=2))
    else:
        print("\n".join(report_stats(stats)))
    return EXIT_OK


def run_browse(source: str, current_path: str = "") -> int:
    """Print the breadcrumb and sorted listing of one folder of a document."""
    result = load_document(source)
    navigator = Navigator(result.document.tree, current_path)

    crumbs = " > ".join(c.label for c in navigator.breadcrumbs())
    print(crumbs)
    if result.used_fallback:
        print("(showing fallback structure)")

    entries = navigator.entries()
    if not entries:
        print("  This folder is empty.")
        return EXIT_OK

    for name, node in entries:
        if isinstance(node, FolderNode):
            print(f"  [folder] {name}/")
        else:
            size = f"  ({node.size_label})" if node.size_label else ""
            print(f"  [{node.category}] {name}{size}")
    return EXIT_OK


# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _init_collation() -> None:
    """Adopt the user's collation rules so listings sort like a file browser."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.debug(f"Collation locale unavailable, using code point order: {e}")


if __name__ == "__main__":
    sys.exit(main())
