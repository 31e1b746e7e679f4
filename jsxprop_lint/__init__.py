"""
jsxprop_lint: Attribute Validation for JSX-like Markup
=======================================================

Decides, for every attribute on every intrinsic element a host parser hands
over, whether the attribute is known, whether it must be renamed to its
canonical spelling, and whether it is allowed on that tag.

Core modules
------------
normalizer
    Lookup-key normalization and the ``data-*`` / ``aria-*`` name tests.
attribute_table
    The static, read-only attribute dictionary.
elements
    Host records (elements, attribute occurrences) and the element classifier.
config
    Rule options (``ignore``).
decision
    The per-attribute decision procedure and its verdicts.
diagnostics
    Verdict → diagnostic + rename fix; host-side fix application.
dump
    Reader for JSON element dumps.
checkers
    Checker framework, suppressions and the runner.
reporter
    Terminal, plain and SARIF output.

Quick start
-----------
>>> from jsxprop_lint import ElementNode, AttributeOccurrence, evaluate_element
>>> el = ElementNode("div", [AttributeOccurrence("class")])
>>> [verdict for _, verdict in evaluate_element(el)]
[UnknownWithSuggestion(canonical_name='className')]
"""

from __future__ import annotations

import importlib
import logging
import sys
from typing import TYPE_CHECKING, List

# ---------------------------------------------------------------------------
# Package metadata
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
__author__ = "jsxprop-lint contributors"
__license__ = "MIT"
__all__: List[str] = []          # populated below

_log = logging.getLogger(__name__)
_log.addHandler(logging.NullHandler())

# ---------------------------------------------------------------------------
# Submodules and the public names each contributes, in dependency order.
# ---------------------------------------------------------------------------

_CORE_MODULES = {
    "errors": [
        "JsxPropLintError",
        "MalformedInputError",
        "DictionaryConflictError",
        "ConfigurationError",
        "DumpFormatError",
        "FixError",
    ],
    "normalizer": [
        "normalize",
        "is_data_attribute",
        "is_aria_attribute",
    ],
    "attribute_table": [
        "AttributeEntry",
        "AttributeTable",
        "ARIA_PROPERTIES",
        "DEFAULT_TABLE",
        "build_attribute_table",
        "get_default_table",
    ],
    "elements": [
        "SourceLocation",
        "TextRange",
        "AttributeOccurrence",
        "SpreadOccurrence",
        "ElementNode",
        "ElementContext",
        "classify",
        "classify_element",
    ],
    "config": [
        "RuleOptions",
    ],
    "decision": [
        "Verdict",
        "Ok",
        "UnknownNoSuggestion",
        "UnknownWithSuggestion",
        "InvalidOnTag",
        "decide",
        "evaluate_element",
    ],
    "diagnostics": [
        "Diagnostic",
        "DiagnosticSeverity",
        "MessageId",
        "Fix",
        "diagnostic_for",
        "apply_fixes",
    ],
    "dump": [
        "ElementDump",
        "FileDump",
        "load_dump",
        "loads_dump",
        "parse_dump",
    ],
    "checkers": [
        "SuppressionManager",
        "Checker",
        "CheckerContext",
        "CheckerRegistry",
        "UnknownPropertyChecker",
        "CheckerRunner",
        "CheckerRunResults",
    ],
    "reporter": [
        "Reporter",
        "SarifBuilder",
    ],
}


def _import_names(module_rel_name: str, names: List[str]) -> None:
    """Import *names* from a submodule and bind them in the package namespace."""
    fq_name = f"{__name__}.{module_rel_name}"
    try:
        mod = importlib.import_module(fq_name)
    except ImportError as exc:
        raise ImportError(
            f"jsxprop_lint: required submodule '{module_rel_name}' "
            f"failed to import: {exc}"
        ) from exc

    current_module = sys.modules[__name__]
    for name in names:
        if not hasattr(mod, name):
            raise AttributeError(f"jsxprop_lint.{module_rel_name} does not export '{name}'")
        setattr(current_module, name, getattr(mod, name))
        __all__.append(name)

    setattr(current_module, module_rel_name, mod)
    if module_rel_name not in __all__:
        __all__.append(module_rel_name)


for _mod, _names in _CORE_MODULES.items():
    _import_names(_mod, _names)

del _mod, _names


def list_submodules() -> List[str]:
    return sorted(_CORE_MODULES)


def engine_info() -> dict:
    """Metadata about the loaded engine, for ``--version`` style output."""
    table = sys.modules[f"{__name__}.attribute_table"].DEFAULT_TABLE
    return {
        "package": __name__,
        "version": __version__,
        "python": sys.version,
        "attribute_entries": len(table),
        "aria_properties": len(table.aria_properties),
        "submodules": list_submodules(),
    }


__all__ += ["list_submodules", "engine_info", "__version__"]

if TYPE_CHECKING:
    from .errors import (
        JsxPropLintError as JsxPropLintError,
        MalformedInputError as MalformedInputError,
        DictionaryConflictError as DictionaryConflictError,
        ConfigurationError as ConfigurationError,
        DumpFormatError as DumpFormatError,
        FixError as FixError,
    )
    from .normalizer import (
        normalize as normalize,
        is_data_attribute as is_data_attribute,
        is_aria_attribute as is_aria_attribute,
    )
    from .attribute_table import (
        AttributeEntry as AttributeEntry,
        AttributeTable as AttributeTable,
        ARIA_PROPERTIES as ARIA_PROPERTIES,
        DEFAULT_TABLE as DEFAULT_TABLE,
        build_attribute_table as build_attribute_table,
        get_default_table as get_default_table,
    )
    from .elements import (
        SourceLocation as SourceLocation,
        TextRange as TextRange,
        AttributeOccurrence as AttributeOccurrence,
        SpreadOccurrence as SpreadOccurrence,
        ElementNode as ElementNode,
        ElementContext as ElementContext,
        classify as classify,
        classify_element as classify_element,
    )
    from .config import RuleOptions as RuleOptions
    from .decision import (
        Verdict as Verdict,
        Ok as Ok,
        UnknownNoSuggestion as UnknownNoSuggestion,
        UnknownWithSuggestion as UnknownWithSuggestion,
        InvalidOnTag as InvalidOnTag,
        decide as decide,
        evaluate_element as evaluate_element,
    )
    from .diagnostics import (
        Diagnostic as Diagnostic,
        DiagnosticSeverity as DiagnosticSeverity,
        MessageId as MessageId,
        Fix as Fix,
        diagnostic_for as diagnostic_for,
        apply_fixes as apply_fixes,
    )
    from .dump import (
        ElementDump as ElementDump,
        FileDump as FileDump,
        load_dump as load_dump,
        loads_dump as loads_dump,
        parse_dump as parse_dump,
    )
    from .checkers import (
        SuppressionManager as SuppressionManager,
        Checker as Checker,
        CheckerContext as CheckerContext,
        CheckerRegistry as CheckerRegistry,
        UnknownPropertyChecker as UnknownPropertyChecker,
        CheckerRunner as CheckerRunner,
        CheckerRunResults as CheckerRunResults,
    )
    from .reporter import (
        Reporter as Reporter,
        SarifBuilder as SarifBuilder,
    )
