"""Entry point for running patch-speller.

This module provides the command line interface. It handles:
- Settings and logging setup
- Spelling configuration loading
- Reading the diff from a file, stdin or git
- Printing findings as text or JSON
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import structlog

from patch_speller._version import __version__

if TYPE_CHECKING:
    from patch_speller.models.finding import Finding

log = structlog.get_logger()


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument namespace
    """
    parser = argparse.ArgumentParser(
        prog="patch-speller",
        description="Spell-check identifiers and comments on the added lines of a diff",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-r",
        "--repo",
        type=Path,
        default=Path("."),
        help="Repository root holding the spelling configuration (default: .)",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Spelling configuration file, relative to --repo (default: .patch_speller.yml)",
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--diff",
        default="-",
        help="Unified diff file to check, '-' for stdin (default: -)",
    )
    source.add_argument(
        "--commit",
        default=None,
        help="Check `git diff <commit>` in --repo instead of reading a diff",
    )

    parser.add_argument(
        "--symbols",
        type=Path,
        default=None,
        help="File of extra identifier names to never spell-check, one per line",
    )

    parser.add_argument(
        "-o",
        "--output",
        choices=["text", "json"],
        default="text",
        help="Findings output format (default: text)",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "console"],
        default=None,
        help="Log output format (default: from PATCH_SPELLER_LOG_FORMAT or console)",
    )

    return parser.parse_args(argv)


def read_diff(args: argparse.Namespace, git_timeout: int) -> str:
    """Read the diff to check from git, stdin, or a file.

    Raises:
        GitError: If git fails
        OSError: If the diff file can't be read
    """
    if args.commit:
        from patch_speller.utils.git import SafeGit

        return SafeGit(args.repo, default_timeout=git_timeout).diff(args.commit)

    if args.diff == "-":
        return sys.stdin.read()

    return Path(args.diff).read_text()


def write_findings(findings: list[Finding], output: str, stream: TextIO) -> None:
    """Print findings in the requested format."""
    if output == "json":
        json.dump([finding.to_dict() for finding in findings], stream, indent=2)
        stream.write("\n")
        return

    for finding in findings:
        stream.write(
            f"{finding.file_path}:{finding.line_locator}: "
            f"{finding.severity.value}: {finding.message}\n"
        )


def run(args: argparse.Namespace, stream: TextIO | None = None) -> int:
    """Run a spell check.

    Args:
        args: Parsed command line arguments
        stream: Where to print findings (default: stdout)

    Returns:
        Exit code (0 for success, including when findings are reported,
        1 for a fatal error)
    """
    from patch_speller.adapters.catalog import PythonSymbolCatalog, StaticIdentifierCatalog
    from patch_speller.config.loader import load_spell_config
    from patch_speller.config.schema import SpellerSettings
    from patch_speller.core.diff_parser import UnifiedDiffParser
    from patch_speller.core.runner import create_runner
    from patch_speller.utils.errors import SpellerError
    from patch_speller.utils.logging import bind_context, clear_context

    settings = SpellerSettings()
    stream = stream or sys.stdout
    bind_context(repo=str(args.repo))

    try:
        config = load_spell_config(args.repo, args.config or settings.config_file)

        extra_names: frozenset[str] = frozenset()
        if args.symbols is not None:
            extra_names = StaticIdentifierCatalog.from_file(args.symbols).names

        diff_text = read_diff(args, settings.git_timeout)
        patches = UnifiedDiffParser().parse(diff_text)

        runner = create_runner(config, catalog=PythonSymbolCatalog.snapshot(extra_names))
        findings = runner.run(patches)

        write_findings(findings, args.output, stream)
        return 0

    except SpellerError as e:
        log.error("spell_check_failed", error_type=type(e).__name__, error=str(e))
        return 1
    except OSError as e:
        log.error("input_unreadable", error=str(e))
        return 1
    finally:
        clear_context()


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    from patch_speller.config.schema import SpellerSettings
    from patch_speller.utils.logging import configure_from_settings

    args = parse_args(argv)
    settings = SpellerSettings()

    configure_from_settings(settings, debug=args.debug, log_format=args.log_format)

    try:
        return run(args)
    except KeyboardInterrupt:
        log.info("interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
