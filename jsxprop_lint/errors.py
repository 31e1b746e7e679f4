# jsxprop_lint/errors.py
"""
Exception hierarchy for jsxprop-lint.

Diagnostics about attributes (unknown, mis-cased, wrong tag) are *not*
exceptions: they are the normal output of the engine. The types below signal
defects in what the host handed us, or in the tables we were built from.

Error Hierarchy:
────────────────
┌──────────────────────────────────────────────────────────────────┐
│  JsxPropLintError (base)                                         │
│  ├── MalformedInputError      JPL-1001  bad element/attribute    │
│  ├── DictionaryConflictError  JPL-1002  ambiguous table entries  │
│  ├── ConfigurationError       JPL-2001  bad rule options         │
│  ├── DumpFormatError          JPL-3001  unreadable element dump  │
│  └── FixError                 JPL-4001  fixes cannot be applied  │
└──────────────────────────────────────────────────────────────────┘
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional


class JsxPropLintError(Exception):
    """Base class for every fault raised by jsxprop-lint."""

    code: ClassVar[str] = "JPL-0000"

    def __init__(self, message: str, *, detail: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail: Dict[str, Any] = dict(detail or {})

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Machine-readable form, used by the CLI's JSON output."""
        return {
            "code": self.code,
            "type": type(self).__name__,
            "message": self.message,
            "detail": self.detail,
        }


class MalformedInputError(JsxPropLintError):
    """
    The host passed structurally invalid data.

    Examples: an attribute occurrence with an empty name, or a spread
    occurrence routed into name-based validation.
    """

    code: ClassVar[str] = "JPL-1001"


class DictionaryConflictError(JsxPropLintError):
    """Two canonical attribute names normalize to the same lookup key."""

    code: ClassVar[str] = "JPL-1002"


class ConfigurationError(JsxPropLintError):
    """Rule options contain an unknown key or a value of the wrong shape."""

    code: ClassVar[str] = "JPL-2001"


class DumpFormatError(JsxPropLintError):
    """An element dump could not be read or is missing required fields."""

    code: ClassVar[str] = "JPL-3001"


class FixError(JsxPropLintError):
    """A set of fixes cannot be applied to the given source text."""

    code: ClassVar[str] = "JPL-4001"


__all__ = [
    "JsxPropLintError",
    "MalformedInputError",
    "DictionaryConflictError",
    "ConfigurationError",
    "DumpFormatError",
    "FixError",
]
