from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies the implicit 'generate' command, defaults and flag mapping.
"""

import pytest

from mediatree.interface.cli.args import (
    COMMAND_BROWSE,
    COMMAND_GENERATE,
    build_parser,
    normalize_argv,
    parse_args,
)


def test_no_arguments_generate_current_directory() -> None:
    args = parse_args([])

    assert args.command == COMMAND_GENERATE
    assert args.root == "."
    assert args.output_path is None
    assert args.sort_entries is None
    assert args.json_output is False
    assert args.debug is False


def test_positional_root_implies_generate() -> None:
    args = parse_args(["photos", "--sort", "--debug"])

    assert args.command == COMMAND_GENERATE
    assert args.root == "photos"
    assert args.sort_entries is True
    assert args.debug is True


def test_explicit_generate_options() -> None:
    args = parse_args([
        "generate", "media", "-o", "out.json", "--config", "cfg.json",
        "--json", "--log-file", "run.log",
    ])

    assert args.root == "media"
    assert args.output_path == "out.json"
    assert args.config_path == "cfg.json"
    assert args.json_output is True
    assert args.log_file == "run.log"


def test_browse_command() -> None:
    args = parse_args(["browse", "site/", "--path", "images/2024"])

    assert args.command == COMMAND_BROWSE
    assert args.source == "site/"
    assert args.current_path == "images/2024"


def test_browse_defaults() -> None:
    args = parse_args(["browse"])

    assert args.source == "file-structure.json"
    assert args.current_path == ""


@pytest.mark.parametrize("argv, expected", [
    ([], ["generate"]),
    (["--help"], ["--help"]),
    (["browse"], ["browse"]),
    (["dir"], ["generate", "dir"]),
    (["--debug"], ["generate", "--debug"]),
])
def test_normalize_argv(argv, expected) -> None:
    assert normalize_argv(argv) == expected


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--version"])

    assert exc_info.value.code == 0
    assert "mediatree" in capsys.readouterr().out


def test_command_names_win_over_folder_names() -> None:
    """A bare 'browse' selects the command; 'generate browse' scans the folder."""
    assert parse_args(["browse"]).command == COMMAND_BROWSE

    args = parse_args(["generate", "browse"])
    assert args.command == COMMAND_GENERATE
    assert args.root == "browse"


def test_help_documents_folder_named_like_command() -> None:
    epilog = " ".join(build_parser().epilog.split())

    assert "mediatree generate browse" in epilog
