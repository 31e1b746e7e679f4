# jsxprop_lint/diagnostics.py
"""
jsxprop_lint/diagnostics.py
═══════════════════════════

Turns verdicts into diagnostics and, for renames, into token-level fixes.

  Verdict                  message id                   fix
  ───────────────────────  ───────────────────────────  ──────────────────
  Ok                       (none)                       –
  UnknownNoSuggestion      unknownProp                  –
  UnknownWithSuggestion    unknownPropWithStandardName  rename name token
  InvalidOnTag             invalidPropOnTag             –

The engine only *describes* fixes. Applying them is up to the host; the
:func:`apply_fixes` helper does so on a copy of the source text.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from jsxprop_lint.decision import (
    InvalidOnTag,
    UnknownNoSuggestion,
    UnknownWithSuggestion,
    Verdict,
)
from jsxprop_lint.elements import (
    AttributeOccurrence,
    ElementContext,
    SourceLocation,
    TextRange,
)
from jsxprop_lint.errors import FixError

RULE_NAME = "no-unknown-property"


# ═════════════════════════════════════════════════════════════════════════
#  PART 1: DIAGNOSTIC MODEL
# ═════════════════════════════════════════════════════════════════════════

class DiagnosticSeverity(Enum):
    """Severity the host may map onto its own levels."""
    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"


class MessageId(Enum):
    """Stable diagnostic kinds, with their message templates."""
    UNKNOWN_PROP = (
        "unknownProp",
        "Unknown property '{name}' found",
    )
    UNKNOWN_PROP_WITH_STANDARD_NAME = (
        "unknownPropWithStandardName",
        "Unknown property '{name}' found, use '{standardName}' instead",
    )
    INVALID_PROP_ON_TAG = (
        "invalidPropOnTag",
        "Invalid property '{name}' found on tag '{tagName}', "
        "but it is only allowed on: {allowedTags}",
    )

    def __init__(self, ident: str, template: str) -> None:
        self.ident = ident
        self.template = template

    def format(self, data: Mapping[str, str]) -> str:
        return self.template.format(**data)

    @classmethod
    def from_ident(cls, ident: str) -> MessageId:
        for member in cls:
            if member.ident == ident:
                return member
        raise KeyError(ident)


@dataclass(frozen=True)
class Fix:
    """Replace ``range`` (the attribute name token) with ``text``."""
    text: str
    range: Optional[TextRange] = None

    def to_json(self) -> Dict[str, Any]:
        return {
            "range": self.range.as_list() if self.range else None,
            "text": self.text,
        }


@dataclass(frozen=True)
class Diagnostic:
    """
    A single finding about one attribute.

    Attributes
    ----------
    message_id : MessageId of the finding
    data       : Template values (``name``, ``standardName``, ...)
    severity   : DiagnosticSeverity
    location   : Where the attribute name starts
    fix        : Rename fix, only for ``unknownPropWithStandardName``
    rule       : Name of the rule that produced it
    """
    message_id: MessageId
    data: Mapping[str, str]
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    location: SourceLocation = field(default_factory=SourceLocation)
    fix: Optional[Fix] = None
    rule: str = RULE_NAME

    @property
    def error_id(self) -> str:
        return self.message_id.ident

    @property
    def name(self) -> str:
        return self.data["name"]

    @property
    def message(self) -> str:
        return self.message_id.format(self.data)

    @property
    def fixable(self) -> bool:
        return self.fix is not None

    def to_json(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "file": self.location.file,
            "line": self.location.line,
            "column": self.location.column,
            "severity": self.severity.value,
            "ruleId": self.rule,
            "messageId": self.error_id,
            "message": self.message,
            "data": dict(self.data),
        }
        if self.fix is not None:
            result["fix"] = self.fix.to_json()
        return result

    def to_json_str(self) -> str:
        """Single-line JSON string."""
        return json.dumps(self.to_json())

    def to_gcc_format(self) -> str:
        """GCC-style diagnostic string: file:line:col: severity: message."""
        return f"{self.location}: {self.severity.value}: {self.message} [{self.error_id}]"


# ═════════════════════════════════════════════════════════════════════════
#  PART 2: EMITTER
# ═════════════════════════════════════════════════════════════════════════

def format_allowed_tags(tags: Iterable[str]) -> str:
    return ", ".join(tags)


def diagnostic_for(
    occurrence: AttributeOccurrence,
    verdict: Verdict,
    context: ElementContext,
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING,
    rule: str = RULE_NAME,
) -> Optional[Diagnostic]:
    """Diagnostic for one verdict, or ``None`` when the verdict is Ok."""
    name = occurrence.raw_name
    if isinstance(verdict, UnknownWithSuggestion):
        return Diagnostic(
            message_id=MessageId.UNKNOWN_PROP_WITH_STANDARD_NAME,
            data={"name": name, "standardName": verdict.canonical_name},
            severity=severity,
            location=occurrence.location,
            fix=Fix(text=verdict.canonical_name, range=occurrence.span),
            rule=rule,
        )
    if isinstance(verdict, InvalidOnTag):
        return Diagnostic(
            message_id=MessageId.INVALID_PROP_ON_TAG,
            data={
                "name": name,
                "tagName": context.tag_name or "",
                "allowedTags": format_allowed_tags(verdict.allowed_tags),
            },
            severity=severity,
            location=occurrence.location,
            rule=rule,
        )
    if isinstance(verdict, UnknownNoSuggestion):
        return Diagnostic(
            message_id=MessageId.UNKNOWN_PROP,
            data={"name": name},
            severity=severity,
            location=occurrence.location,
            rule=rule,
        )
    return None


# ═════════════════════════════════════════════════════════════════════════
#  PART 3: FIX APPLICATION (host side)
# ═════════════════════════════════════════════════════════════════════════

def apply_fixes(source: str, fixes: Iterable[Fix]) -> str:
    """
    Return *source* with every fix applied.

    Raises
    ------
    FixError
        A fix has no range, a range lies outside *source*, or two ranges
        overlap.
    """
    ordered: List[Fix] = []
    for fix in fixes:
        if fix.range is None:
            raise FixError(
                f"fix to '{fix.text}' has no source range",
                detail={"text": fix.text},
            )
        if fix.range.end > len(source):
            raise FixError(
                f"fix range {fix.range.as_list()} exceeds source length {len(source)}",
                detail={"range": fix.range.as_list(), "length": len(source)},
            )
        ordered.append(fix)
    ordered.sort(key=lambda f: f.range.start)

    for prev, cur in zip(ordered, ordered[1:]):
        if prev.range.overlaps(cur.range):
            raise FixError(
                "overlapping fixes",
                detail={"ranges": [prev.range.as_list(), cur.range.as_list()]},
            )

    parts: List[str] = []
    pos = 0
    for fix in ordered:
        parts.append(source[pos:fix.range.start])
        parts.append(fix.text)
        pos = fix.range.end
    parts.append(source[pos:])
    return "".join(parts)


__all__ = [
    "RULE_NAME",
    "DiagnosticSeverity",
    "MessageId",
    "Fix",
    "Diagnostic",
    "SourceLocation",
    "TextRange",
    "format_allowed_tags",
    "diagnostic_for",
    "apply_fixes",
]
