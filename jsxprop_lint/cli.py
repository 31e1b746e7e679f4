"""
Command-line entry point for jsxprop-lint.

Reads one or more element dumps, runs the checker suite and prints the
diagnostics.

Exit codes
----------
0  no diagnostics
1  diagnostics reported
2  infrastructure error (unreadable dump, malformed input, bad options)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from jsxprop_lint import __version__
from jsxprop_lint.checkers import (
    CheckerRunner,
    CheckerRunResults,
    SuppressionManager,
    get_default_registry,
)
from jsxprop_lint.config import RuleOptions
from jsxprop_lint.diagnostics import apply_fixes
from jsxprop_lint.dump import ElementDump, FileDump, load_dump
from jsxprop_lint.errors import JsxPropLintError
from jsxprop_lint.reporter import Reporter, SarifBuilder

_log = logging.getLogger("jsxprop_lint")

EXIT_OK: int = 0
EXIT_VIOLATION: int = 1
EXIT_INFRA: int = 2

OUTPUT_FORMATS = ("json", "gcc", "terminal", "sarif", "summary")


def _configure_logging(verbosity: int) -> None:
    """Set up the ``jsxprop_lint`` logger.

    Parameters
    ----------
    verbosity:
        0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    handler.set_name("jsxprop_lint.cli")
    root = logging.getLogger("jsxprop_lint")
    root.setLevel(level)
    for old in [h for h in root.handlers if h.get_name() == "jsxprop_lint.cli"]:
        root.removeHandler(old)
    root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsxprop-lint",
        description="Validate attribute names on JSX-like elements from element dumps.",
    )
    parser.add_argument("dumps", nargs="*", help="Element dump files (JSON)")
    parser.add_argument(
        "--ignore", action="append", default=[], metavar="NAME",
        help="Attribute name to always accept (repeatable)",
    )
    parser.add_argument(
        "--suppress", action="append", default=[], metavar="ID",
        help="Message id to suppress everywhere (repeatable; '*' for all)",
    )
    parser.add_argument(
        "--suppress-file", action="append", default=[], metavar="ID:PATTERN",
        help="Message id to suppress in files matching PATTERN (repeatable)",
    )
    parser.add_argument(
        "--output", choices=OUTPUT_FORMATS, default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--sarif-output", metavar="PATH", default=None,
        help="Also write a SARIF report to PATH",
    )
    parser.add_argument(
        "--apply-fixes", action="store_true",
        help="Print each file's source with rename fixes applied, as JSON lines",
    )
    parser.add_argument(
        "--list-checkers", action="store_true",
        help="List available checkers and exit",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _build_suppressions(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> SuppressionManager:
    sm = SuppressionManager()
    for eid in args.suppress:
        sm.add_global_suppression(eid)
    for entry in args.suppress_file:
        eid, sep, pattern = entry.partition(":")
        if not sep or not eid or not pattern:
            parser.error(f"--suppress-file expects ID:PATTERN, got {entry!r}")
        sm.add_file_suppression(eid, pattern)
    return sm


def _list_checkers(out: TextIO) -> None:
    registry = get_default_registry()
    for name in registry.names:
        cls = registry.get_by_name(name)
        if cls is None:
            continue
        out.write(f"  {name:25s} {cls.description}\n")
        out.write(f"  {'':25s} IDs: {', '.join(sorted(cls.error_ids))}\n")
        out.write(f"  {'':25s} Fixable: {', '.join(sorted(cls.fixable_ids)) or '-'}\n\n")


def _fix_file(file_dump: FileDump, results: CheckerRunResults) -> dict:
    if file_dump.source is None:
        raise JsxPropLintError(
            f"dump for '{file_dump.file}' has no 'source' to apply fixes to",
            detail={"file": file_dump.file},
        )
    # results of this file object only; file names need not be unique
    fixes = [d.fix for d in results.diagnostics if d.fix is not None]
    return {
        "file": file_dump.file,
        "fixes": len(fixes),
        "output": apply_fixes(file_dump.source, fixes),
    }


def _emit(args: argparse.Namespace, dumps: Sequence[ElementDump],
          results: CheckerRunResults, out: TextIO) -> None:
    if args.output == "json":
        for diag in results.diagnostics:
            out.write(diag.to_json_str() + "\n")
    elif args.output == "gcc":
        for diag in results.diagnostics:
            out.write(diag.to_gcc_format() + "\n")
    elif args.output == "sarif":
        builder = SarifBuilder()
        for diag in results.diagnostics:
            builder.add(diag)
        out.write(builder.to_json(version=__version__) + "\n")
    elif args.output == "terminal":
        sources = {
            f.file: f.source for d in dumps for f in d.files if f.source is not None
        }
        with Reporter(stream=out, colour=None, sources=sources,
                      sarif_path=args.sarif_output, tool_version=__version__) as rep:
            for diag in results.diagnostics:
                rep.emit(diag)
        return
    else:
        out.write(results.summary() + "\n")

    if args.sarif_output:
        builder = SarifBuilder()
        for diag in results.diagnostics:
            builder.add(diag)
        builder.write(args.sarif_output, version=__version__)


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    """Run the CLI; returns the process exit code."""
    out = out or sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.list_checkers:
        _list_checkers(out)
        return EXIT_OK
    if not args.dumps:
        parser.error("at least one element dump is required")

    try:
        options = RuleOptions.from_ignore(args.ignore)
        runner = CheckerRunner(suppressions=_build_suppressions(parser, args), options=options)
        dumps = [load_dump(path) for path in args.dumps]
        per_file = [
            (file_dump, runner.run(file_dump.elements, file=file_dump.file))
            for dump in dumps
            for file_dump in dump.files
        ]
        if args.apply_fixes:
            for file_dump, file_results in per_file:
                out.write(json.dumps(_fix_file(file_dump, file_results)) + "\n")
            return EXIT_OK

        results = CheckerRunResults()
        for _, file_results in per_file:
            results.merge(file_results)
    except JsxPropLintError as exc:
        _log.error("%s", exc)
        return EXIT_INFRA

    _log.info(results.summary())
    _emit(args, dumps, results, out)
    return EXIT_VIOLATION if results.total_count else EXIT_OK


def run() -> None:
    """Console-script wrapper."""
    sys.exit(main())


__all__ = ["main", "run", "build_parser", "EXIT_OK", "EXIT_VIOLATION", "EXIT_INFRA"]
