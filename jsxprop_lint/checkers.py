"""
jsxprop_lint/checkers.py
════════════════════════

Checker framework that drives the attribute engine over host-provided
elements and collects diagnostics.

Architecture
────────────

  ┌─────────────────────────────────────────────────────────┐
  │                   CheckerRunner                         │
  │  ┌──────────────────────────────────────────────────┐   │
  │  │          UnknownPropertyChecker                  │   │
  │  │  classify → normalize → table → decide → emit    │   │
  │  └───────────────────────┬──────────────────────────┘   │
  │                          │                              │
  │  ┌───────────────────────▼──────────────────────────┐   │
  │  │           SuppressionManager                     │   │
  │  │        global ids  │  per-file patterns          │   │
  │  └───────────────────────┬──────────────────────────┘   │
  │                          │                              │
  │  ┌───────────────────────▼──────────────────────────┐   │
  │  │      CheckerRunResults (JSON / gcc / summary)    │   │
  │  └──────────────────────────────────────────────────┘   │
  └─────────────────────────────────────────────────────────┘

Each Checker follows a four-phase lifecycle:

  1. **configure()**         read options, pick the attribute table
  2. **collect_evidence()**  compute a verdict per attribute
  3. **diagnose()**          turn verdicts into Diagnostics
  4. **report()**            return Diagnostics (filtered by suppressions)

Malformed host input is not turned into a diagnostic: the
:class:`~jsxprop_lint.errors.JsxPropLintError` propagates out of the runner.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass, field
from fnmatch import fnmatch
from typing import (
    Any,
    ClassVar,
    Dict,
    FrozenSet,
    Iterable,
    List,
    Optional,
    Sequence,
    Set,
    Tuple,
    Type,
)

from jsxprop_lint.attribute_table import DEFAULT_TABLE, AttributeTable
from jsxprop_lint.config import RuleOptions
from jsxprop_lint.decision import Verdict, evaluate_element
from jsxprop_lint.diagnostics import (
    RULE_NAME,
    Diagnostic,
    DiagnosticSeverity,
    MessageId,
    diagnostic_for,
)
from jsxprop_lint.dump import ElementDump
from jsxprop_lint.elements import (
    AttributeOccurrence,
    ElementContext,
    ElementNode,
    classify_element,
)

_log = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════════════
#  PART 1: SUPPRESSION MANAGER
# ═════════════════════════════════════════════════════════════════════════

class SuppressionManager:
    """
    Manages diagnostic suppressions by message id.

    Sources:
      1. File-level suppressions (exact path, suffix or fnmatch pattern)
      2. Global suppressions (command-line or config)

    Attribute names the rule should accept belong in ``RuleOptions.ignore``;
    suppressions silence whole diagnostic kinds.

    Usage
    -----
    >>> sm = SuppressionManager()
    >>> sm.add_file_suppression("unknownProp", "legacy/*.jsx")
    >>> sm.add_global_suppression("invalidPropOnTag")
    >>> if not sm.is_suppressed(diagnostic):
    ...     emit(diagnostic)
    """

    def __init__(self) -> None:
        # file pattern → set of error_ids
        self._file_level: Dict[str, Set[str]] = defaultdict(set)
        # globally suppressed error_ids
        self._global: Set[str] = set()

    def add_file_suppression(self, error_id: str, file_pattern: str) -> None:
        """Suppress ``error_id`` in files matching ``file_pattern``."""
        self._file_level[file_pattern].add(error_id)

    def add_global_suppression(self, error_id: str) -> None:
        """Globally suppress ``error_id`` (``*`` suppresses everything)."""
        self._global.add(error_id)

    def is_suppressed(self, diag: Diagnostic) -> bool:
        eid = diag.error_id
        if eid in self._global or "*" in self._global:
            return True

        file = diag.location.file
        for pattern, ids in self._file_level.items():
            if eid not in ids and "*" not in ids:
                continue
            if pattern == file or file.endswith(pattern) or fnmatch(file, pattern):
                return True
        return False

    def filter_diagnostics(
        self, diagnostics: Iterable[Diagnostic]
    ) -> List[Diagnostic]:
        """Return only non-suppressed diagnostics."""
        return [d for d in diagnostics if not self.is_suppressed(d)]


# ═════════════════════════════════════════════════════════════════════════
#  PART 2: CHECKER BASE CLASS
# ═════════════════════════════════════════════════════════════════════════

@dataclass
class CheckerContext:
    """
    Shared context passed to every checker during execution.

    Attributes
    ----------
    elements     : element openings of one file, in traversal order
    file         : path the elements come from
    options      : RuleOptions for this run
    table        : attribute table lookups go to
    suppressions : SuppressionManager
    stats        : mutable dict for timing / counting statistics
    """
    elements: Sequence[ElementNode]
    file: str = ""
    options: RuleOptions = field(default_factory=RuleOptions)
    table: AttributeTable = DEFAULT_TABLE
    suppressions: SuppressionManager = field(default_factory=SuppressionManager)
    stats: Dict[str, Any] = field(default_factory=dict)


class Checker(ABC):
    """
    Abstract base class for all checkers.

    Subclass Contract
    ─────────────────
      - Override ``name``, ``description``, ``error_ids``
      - Implement ``collect_evidence()`` and ``diagnose()``
      - Optionally override ``configure()`` for custom setup
    """

    name: ClassVar[str] = "base-checker"
    description: ClassVar[str] = ""
    error_ids: ClassVar[FrozenSet[str]] = frozenset()
    default_severity: ClassVar[DiagnosticSeverity] = DiagnosticSeverity.WARNING
    fixable_ids: ClassVar[FrozenSet[str]] = frozenset()

    def __init__(self) -> None:
        self._diagnostics: List[Diagnostic] = []

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._diagnostics)

    def configure(self, ctx: CheckerContext) -> None:
        """Called before evidence collection. Default does nothing."""

    @abstractmethod
    def collect_evidence(self, ctx: CheckerContext) -> None:
        ...

    @abstractmethod
    def diagnose(self, ctx: CheckerContext) -> None:
        """Append diagnostics to ``self._diagnostics``."""
        ...

    def report(self, ctx: CheckerContext) -> List[Diagnostic]:
        """Return final diagnostics, filtered by suppressions."""
        return ctx.suppressions.filter_diagnostics(self._diagnostics)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} '{self.name}'>"


# ═════════════════════════════════════════════════════════════════════════
#  PART 3: CHECKER REGISTRY
# ═════════════════════════════════════════════════════════════════════════

class CheckerRegistry:
    """
    Registry of available checkers, keyed by checker name.

    >>> registry = CheckerRegistry()
    >>> registry.register(UnknownPropertyChecker)
    >>> registry.names
    ['no-unknown-property']
    """

    def __init__(self) -> None:
        self._checkers: Dict[str, Type[Checker]] = {}

    def register(self, checker_cls: Type[Checker]) -> None:
        """Add *checker_cls*, replacing any checker with the same name."""
        self._checkers[checker_cls.name] = checker_cls

    def get_all(self) -> List[Type[Checker]]:
        """Registered checkers, in registration order."""
        return list(self._checkers.values())

    def get_by_name(self, name: str) -> Optional[Type[Checker]]:
        return self._checkers.get(name)

    @property
    def names(self) -> List[str]:
        return sorted(self._checkers.keys())


# ═════════════════════════════════════════════════════════════════════════
#  PART 4: UNKNOWN PROPERTY CHECKER
# ═════════════════════════════════════════════════════════════════════════

class UnknownPropertyChecker(Checker):
    """
    Flags unknown, mis-spelled and misplaced attributes on intrinsic
    elements. Component elements are skipped entirely.
    """

    name: ClassVar[str] = RULE_NAME
    description: ClassVar[str] = "Unknown DOM property / attribute detection"
    error_ids: ClassVar[FrozenSet[str]] = frozenset(m.ident for m in MessageId)
    fixable_ids: ClassVar[FrozenSet[str]] = frozenset({
        MessageId.UNKNOWN_PROP_WITH_STANDARD_NAME.ident,
    })

    def __init__(self) -> None:
        super().__init__()
        self._verdicts: List[Tuple[ElementContext, AttributeOccurrence, Verdict]] = []

    def collect_evidence(self, ctx: CheckerContext) -> None:
        skipped = 0
        for element in ctx.elements:
            context = classify_element(element)
            if context.is_component:
                skipped += 1
                continue
            for occ, verdict in evaluate_element(element, ctx.options, ctx.table):
                self._verdicts.append((context, occ, verdict))
        ctx.stats[f"{self.name}_components_skipped"] = skipped
        ctx.stats[f"{self.name}_attributes_checked"] = len(self._verdicts)

    def diagnose(self, ctx: CheckerContext) -> None:
        for context, occ, verdict in self._verdicts:
            diag = diagnostic_for(occ, verdict, context, severity=self.default_severity)
            if diag is not None:
                self._diagnostics.append(diag)


_DEFAULT_REGISTRY = CheckerRegistry()
_DEFAULT_REGISTRY.register(UnknownPropertyChecker)


def get_default_registry() -> CheckerRegistry:
    return _DEFAULT_REGISTRY


# ═════════════════════════════════════════════════════════════════════════
#  PART 5: RUNNER
# ═════════════════════════════════════════════════════════════════════════

@dataclass
class CheckerRunResults:
    """
    Aggregate results from running a suite of checkers.

    Attributes
    ----------
    diagnostics            : All diagnostics from all checkers
    diagnostics_by_checker : Diagnostics grouped by checker name
    stats                  : Timing and counting statistics
    checker_names          : Names of checkers that were run
    """
    diagnostics: List[Diagnostic] = field(default_factory=list)
    diagnostics_by_checker: Dict[str, List[Diagnostic]] = field(
        default_factory=lambda: defaultdict(list)
    )
    stats: Dict[str, Any] = field(default_factory=dict)
    checker_names: List[str] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(
            1 for d in self.diagnostics
            if d.severity == DiagnosticSeverity.ERROR
        )

    @property
    def warning_count(self) -> int:
        return sum(
            1 for d in self.diagnostics
            if d.severity == DiagnosticSeverity.WARNING
        )

    @property
    def total_count(self) -> int:
        return len(self.diagnostics)

    @property
    def fixable_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.fixable)

    def by_message_id(self, error_id: str) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.error_id == error_id]

    def by_file(self, file: str) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.location.file == file]

    def merge(self, other: CheckerRunResults) -> None:
        self.diagnostics.extend(other.diagnostics)
        for name, diags in other.diagnostics_by_checker.items():
            self.diagnostics_by_checker[name].extend(diags)
        for key, val in other.stats.items():
            if key in self.stats:
                self.stats[key] += val
            else:
                self.stats[key] = val
        for name in other.checker_names:
            if name not in self.checker_names:
                self.checker_names.append(name)

    def to_json_lines(self) -> str:
        return "\n".join(d.to_json_str() for d in self.diagnostics)

    def to_gcc_format(self) -> str:
        return "\n".join(d.to_gcc_format() for d in self.diagnostics)

    def summary(self) -> str:
        lines = [
            f"Checker run complete: {self.total_count} diagnostics "
            f"({self.error_count} errors, {self.warning_count} warnings, "
            f"{self.fixable_count} fixable)",
        ]
        for name in self.checker_names:
            count = len(self.diagnostics_by_checker.get(name, []))
            elapsed = self.stats.get(f"{name}_elapsed_ms", 0)
            lines.append(f"  {name}: {count} findings ({elapsed:.1f}ms)")
        return "\n".join(lines)


class CheckerRunner:
    """
    Runs a suite of checkers against host elements.

    Usage
    -----
    >>> runner = CheckerRunner(options=RuleOptions.from_options({"ignore": ["class"]}))
    >>> results = runner.run(elements, file="App.jsx")
    >>> print(results.summary())

    >>> results = runner.run_dump(load_dump("App.jsx.json"))
    """

    def __init__(
        self,
        registry: Optional[CheckerRegistry] = None,
        suppressions: Optional[SuppressionManager] = None,
        options: Optional[RuleOptions] = None,
        table: Optional[AttributeTable] = None,
    ) -> None:
        self.registry = registry or _DEFAULT_REGISTRY
        self.suppressions = suppressions or SuppressionManager()
        self.options = options or RuleOptions()
        self.table = table or DEFAULT_TABLE

    def _select(self, checkers: Optional[Sequence[str]]) -> List[Type[Checker]]:
        if checkers is None:
            return self.registry.get_all()
        selected: List[Type[Checker]] = []
        for name in checkers:
            cls = self.registry.get_by_name(name)
            if cls is None:
                _log.warning("unknown checker '%s' ignored", name)
                continue
            selected.append(cls)
        return selected

    def run(
        self,
        elements: Sequence[ElementNode],
        file: str = "",
        checkers: Optional[Sequence[str]] = None,
    ) -> CheckerRunResults:
        """
        Run checkers over the elements of a single file.

        Parameters
        ----------
        elements : element openings in traversal order
        file     : path used for file-level suppressions and reporting
        checkers : list of checker names to run (None = all registered)
        """
        results = CheckerRunResults()
        ctx = CheckerContext(
            elements=elements,
            file=file,
            options=self.options,
            table=self.table,
            suppressions=self.suppressions,
        )

        for cls in self._select(checkers):
            checker = cls()
            results.checker_names.append(cls.name)

            t0 = time.monotonic()
            checker.configure(ctx)
            checker.collect_evidence(ctx)
            checker.diagnose(ctx)
            diags = checker.report(ctx)
            elapsed_ms = (time.monotonic() - t0) * 1000.0

            _log.debug(
                "%s: %d diagnostic(s) in %s (%.1fms)",
                cls.name, len(diags), file or "<input>", elapsed_ms,
            )
            results.diagnostics.extend(diags)
            results.diagnostics_by_checker[cls.name] = diags
            results.stats[f"{cls.name}_elapsed_ms"] = elapsed_ms

        results.stats.update(
            (k, v) for k, v in ctx.stats.items() if k not in results.stats
        )
        return results

    def run_dump(
        self,
        dump: ElementDump,
        checkers: Optional[Sequence[str]] = None,
    ) -> CheckerRunResults:
        """Run checkers across every file of an element dump."""
        combined = CheckerRunResults()
        for file_dump in dump.files:
            combined.merge(self.run(file_dump.elements, file=file_dump.file, checkers=checkers))
        return combined


__all__ = [
    "SuppressionManager",
    "Checker",
    "CheckerContext",
    "CheckerRegistry",
    "UnknownPropertyChecker",
    "CheckerRunner",
    "CheckerRunResults",
    "get_default_registry",
]
