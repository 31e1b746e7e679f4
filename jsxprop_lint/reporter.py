#!/usr/bin/env python3
"""
jsxprop_lint/reporter.py
════════════════════════

Diagnostic renderers for the command line.

Output formats
──────────────
  • Terminal : colourful Rust-style rendering (termcolor)
  • Plain    : one GCC-style line per diagnostic (non-TTY, log files)
  • SARIF    : 2.1.0 JSON, written on :meth:`Reporter.finish` when a path is
               given or ``$REPORT_GENERATE_SARIF`` is set

Usage
─────
    with Reporter(colour=True, sources={"App.jsx": text}) as rep:
        for diag in results.diagnostics:
            rep.emit(diag)
"""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, TextIO, Union

from termcolor import colored

from jsxprop_lint.diagnostics import Diagnostic, DiagnosticSeverity, MessageId

_SEVERITY_COLOURS: Dict[DiagnosticSeverity, str] = {
    DiagnosticSeverity.ERROR: "red",
    DiagnosticSeverity.WARNING: "yellow",
    DiagnosticSeverity.INFORMATION: "white",
}

_SARIF_LEVELS: Dict[DiagnosticSeverity, str] = {
    DiagnosticSeverity.ERROR: "error",
    DiagnosticSeverity.WARNING: "warning",
    DiagnosticSeverity.INFORMATION: "note",
}


@dataclass
class ReporterStats:
    """Aggregate counts per severity."""
    error: int = 0
    warning: int = 0
    information: int = 0
    fixable: int = 0

    def record(self, diag: Diagnostic) -> None:
        attr = diag.severity.value
        setattr(self, attr, getattr(self, attr) + 1)
        if diag.fixable:
            self.fixable += 1

    @property
    def total(self) -> int:
        return self.error + self.warning + self.information

    def summary_line(self) -> str:
        parts: List[str] = []
        if self.error:
            parts.append(f"{self.error} error{'s' if self.error != 1 else ''}")
        if self.warning:
            parts.append(f"{self.warning} warning{'s' if self.warning != 1 else ''}")
        if self.information:
            parts.append(f"{self.information} info")
        if not parts:
            return "no diagnostics emitted"
        line = "; ".join(parts) + f" ({self.total} total)"
        if self.fixable:
            line += f", {self.fixable} fixable"
        return line


def _help_text(diag: Diagnostic) -> Optional[str]:
    if diag.message_id is MessageId.UNKNOWN_PROP_WITH_STANDARD_NAME:
        return f"rename to '{diag.data['standardName']}'"
    if diag.message_id is MessageId.INVALID_PROP_ON_TAG:
        return f"remove it, or use one of: {diag.data['allowedTags']}"
    return None


# ═════════════════════════════════════════════════════════════════════════
#  TERMINAL RENDERER  (Rust-style colourful output)
# ═════════════════════════════════════════════════════════════════════════

class TerminalRenderer:
    """Render diagnostics to a terminal with colours."""

    def __init__(
        self,
        stream: TextIO = sys.stderr,
        sources: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._stream = stream
        self._sources: Mapping[str, str] = sources or {}

    def render(self, diag: Diagnostic) -> None:
        colour = _SEVERITY_COLOURS[diag.severity]
        lines: List[str] = []

        sev_str = colored(f"{diag.severity.value}[{diag.error_id}]", colour, attrs=["bold"])
        lines.append(f"{sev_str}: {colored(diag.message, attrs=['bold'])}")

        loc = diag.location
        if loc.file or loc.line:
            arrow = colored("-->", "blue", attrs=["bold"])
            lines.append(f"  {arrow} {loc}")

        src_line = self._source_line(loc.file, loc.line)
        if src_line is not None and loc.column:
            gutter = str(loc.line)
            pipe = colored("|", "blue", attrs=["bold"])
            lines.append(f" {colored(gutter, 'blue', attrs=['bold'])} {pipe} {src_line}")
            pad = " " * (loc.column - 1)
            marker = colored("^" * max(len(diag.name), 1), colour, attrs=["bold"])
            lines.append(f" {' ' * len(gutter)} {pipe} {pad}{marker}")

        hint = _help_text(diag)
        if hint:
            prefix = colored("help", "green", attrs=["bold"])
            lines.append(f"  = {prefix}: {hint}")

        lines.append(colored(diag.to_gcc_format(), attrs=["dark"]))
        lines.append("")
        self._stream.write("\n".join(lines) + "\n")
        self._stream.flush()

    def _source_line(self, file: str, line: int) -> Optional[str]:
        text = self._sources.get(file)
        if text is None or line < 1:
            return None
        source_lines = text.splitlines()
        if line > len(source_lines):
            return None
        return source_lines[line - 1]


# ═════════════════════════════════════════════════════════════════════════
#  PLAIN RENDERER  (for log files / non-TTY)
# ═════════════════════════════════════════════════════════════════════════

class PlainRenderer:
    """Non-coloured renderer, one GCC-style line per diagnostic."""

    def __init__(self, stream: TextIO = sys.stderr) -> None:
        self._stream = stream

    def render(self, diag: Diagnostic) -> None:
        self._stream.write(diag.to_gcc_format() + "\n")
        hint = _help_text(diag)
        if hint:
            self._stream.write(f"  help: {hint}\n")
        self._stream.flush()


# ═════════════════════════════════════════════════════════════════════════
#  SARIF 2.1.0 BUILDER
# ═════════════════════════════════════════════════════════════════════════

class SarifBuilder:
    """Accumulates diagnostics and writes a SARIF 2.1.0 JSON file."""

    SARIF_VERSION = "2.1.0"
    SARIF_SCHEMA = (
        "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/"
        "Schemata/sarif-schema-2.1.0.json"
    )

    def __init__(self) -> None:
        self._results: List[Dict[str, Any]] = []
        self._rules: Dict[str, Dict[str, Any]] = {}

    def add(self, diag: Diagnostic) -> None:
        if diag.error_id not in self._rules:
            self._rules[diag.error_id] = {
                "id": diag.error_id,
                "shortDescription": {"text": diag.message_id.template},
            }

        loc = diag.location
        region: Dict[str, Any] = {"startLine": loc.line}
        if loc.column:
            region["startColumn"] = loc.column
        result: Dict[str, Any] = {
            "ruleId": diag.error_id,
            "level": _SARIF_LEVELS[diag.severity],
            "message": {"text": diag.message},
            "locations": [{
                "physicalLocation": {
                    "artifactLocation": {"uri": loc.file},
                    "region": region,
                },
            }],
        }
        if diag.fix is not None and diag.fix.range is not None:
            result["fixes"] = [{
                "description": {"text": _help_text(diag) or ""},
                "artifactChanges": [{
                    "artifactLocation": {"uri": loc.file},
                    "replacements": [{
                        "deletedRegion": {
                            "charOffset": diag.fix.range.start,
                            "charLength": diag.fix.range.end - diag.fix.range.start,
                        },
                        "insertedContent": {"text": diag.fix.text},
                    }],
                }],
            }]
        self._results.append(result)

    def to_dict(self, tool_name: str = "jsxprop-lint", version: str = "0.1.0") -> Dict[str, Any]:
        return {
            "$schema": self.SARIF_SCHEMA,
            "version": self.SARIF_VERSION,
            "runs": [
                {
                    "tool": {
                        "driver": {
                            "name": tool_name,
                            "version": version,
                            "rules": list(self._rules.values()),
                        }
                    },
                    "results": self._results,
                }
            ],
        }

    def to_json(self, tool_name: str = "jsxprop-lint", version: str = "0.1.0") -> str:
        return json.dumps(self.to_dict(tool_name, version), indent=2)

    def write(self, path: str, tool_name: str = "jsxprop-lint", version: str = "0.1.0") -> None:
        Path(path).write_text(self.to_json(tool_name, version), encoding="utf-8")


# ═════════════════════════════════════════════════════════════════════════
#  REPORTER  (main entry point)
# ═════════════════════════════════════════════════════════════════════════

class Reporter:
    """
    Central diagnostic dispatcher.

    Use as a context manager::

        with Reporter() as rep:
            rep.emit(diag)
        # finish() is called automatically
    """

    def __init__(
        self,
        stream: TextIO = sys.stderr,
        colour: Optional[bool] = None,
        sources: Optional[Mapping[str, str]] = None,
        sarif_path: Optional[str] = None,
        tool_name: str = "jsxprop-lint",
        tool_version: str = "0.1.0",
    ) -> None:
        self.tool_name = tool_name
        self.tool_version = tool_version
        self.stats = ReporterStats()
        self._stream = stream

        use_colour = colour if colour is not None else hasattr(stream, "isatty") and stream.isatty()
        if use_colour:
            self._renderer: Union[TerminalRenderer, PlainRenderer] = TerminalRenderer(stream, sources)
        else:
            self._renderer = PlainRenderer(stream)

        self._sarif_path = sarif_path or os.environ.get("REPORT_GENERATE_SARIF", "")
        self._sarif: Optional[SarifBuilder] = SarifBuilder() if self._sarif_path else None

    def __enter__(self) -> Reporter:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.finish()

    def emit(self, diag: Diagnostic) -> None:
        self.stats.record(diag)
        self._renderer.render(diag)
        if self._sarif is not None:
            self._sarif.add(diag)

    def finish(self) -> ReporterStats:
        """Print the summary line and write SARIF if configured."""
        summary = self.stats.summary_line()
        if isinstance(self._renderer, TerminalRenderer):
            if self.stats.error:
                colour = "red"
            elif self.stats.total:
                colour = "yellow"
            else:
                colour = "green"
            self._stream.write(colored(f"  ╰─ {summary}", colour, attrs=["bold"]) + "\n")
        else:
            self._stream.write(f"  {summary}\n")

        if self._sarif is not None:
            self._sarif.write(
                self._sarif_path,
                tool_name=self.tool_name,
                version=self.tool_version,
            )
        return self.stats


__all__ = [
    "Reporter",
    "ReporterStats",
    "TerminalRenderer",
    "PlainRenderer",
    "SarifBuilder",
]
