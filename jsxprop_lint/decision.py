# jsxprop_lint/decision.py
"""
jsxprop_lint/decision.py
════════════════════════

Per-attribute verdicts.

Decision procedure (first match wins)
─────────────────────────────────────

  1. name in ``ignore``                       → Ok
  2. ``data-*`` pattern                       → Ok
  3. ``aria-*`` prefix                        → Ok if in the ARIA set,
                                                 else UnknownNoSuggestion
  4. ``class`` on an element with ``is=...``  → Ok
  5. table lookup by normalized key
       not found                              → UnknownNoSuggestion
       spelling differs from canonical        → UnknownWithSuggestion
  6. tag restriction
       any tag / tag allowed                  → Ok
       otherwise                              → InvalidOnTag

A rename in step 5 stops the procedure: the tag restriction of the
canonical attribute is only checked once the name is spelled correctly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional, Tuple

from jsxprop_lint.attribute_table import DEFAULT_TABLE, AttributeTable
from jsxprop_lint.config import DEFAULT_OPTIONS, RuleOptions
from jsxprop_lint.elements import (
    AttributeOccurrence,
    ElementContext,
    ElementNode,
    Occurrence,
    classify_element,
)
from jsxprop_lint.errors import MalformedInputError
from jsxprop_lint.normalizer import is_aria_attribute, is_data_attribute, normalize

# Historical DOM spelling that customized built-ins may keep using.
_CUSTOM_ELEMENT_CLASS = "class"


# ═════════════════════════════════════════════════════════════════════════
#  PART 1: VERDICTS
# ═════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Verdict:
    """Base of the verdict variants."""
    kind: ClassVar[str] = "verdict"

    @property
    def is_ok(self) -> bool:
        return False


@dataclass(frozen=True)
class Ok(Verdict):
    kind: ClassVar[str] = "ok"

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class UnknownNoSuggestion(Verdict):
    kind: ClassVar[str] = "unknown"


@dataclass(frozen=True)
class UnknownWithSuggestion(Verdict):
    """The name is a mis-cased or mis-separated spelling of ``canonical_name``."""
    canonical_name: str
    kind: ClassVar[str] = "rename"


@dataclass(frozen=True)
class InvalidOnTag(Verdict):
    """``canonical_name`` is spelled correctly but not valid on this tag."""
    canonical_name: str
    allowed_tags: Tuple[str, ...]
    kind: ClassVar[str] = "invalid-tag"

    def __post_init__(self) -> None:
        if not self.allowed_tags:
            raise MalformedInputError(
                f"InvalidOnTag for '{self.canonical_name}' requires at least one allowed tag",
                detail={"name": self.canonical_name},
            )


OK = Ok()
UNKNOWN = UnknownNoSuggestion()


# ═════════════════════════════════════════════════════════════════════════
#  PART 2: DECISION ENGINE
# ═════════════════════════════════════════════════════════════════════════

def decide(
    occurrence: Occurrence,
    context: ElementContext,
    options: RuleOptions = DEFAULT_OPTIONS,
    table: AttributeTable = DEFAULT_TABLE,
) -> Verdict:
    """
    Verdict for one named attribute on an intrinsic element.

    Raises
    ------
    MalformedInputError
        *occurrence* is a spread, or *context* describes a component; the
        caller is expected to filter both out (see :func:`evaluate_element`).
    """
    if occurrence.is_spread:
        raise MalformedInputError(
            "spread occurrence routed into name-based validation",
            detail={"location": str(occurrence.location)},
        )
    if context.is_component:
        raise MalformedInputError(
            f"component element '{context.tag_name}' is not validated",
            detail={"tag": context.tag_name},
        )

    name = occurrence.raw_name
    if options.is_ignored(name):
        return OK
    if is_data_attribute(name):
        return OK
    if is_aria_attribute(name):
        return OK if table.is_aria_property(name) else UNKNOWN
    if context.has_type_marker and name == _CUSTOM_ELEMENT_CLASS:
        return OK

    entry = table.lookup(normalize(name))
    if entry is None:
        return UNKNOWN
    if not entry.accepts_spelling(name):
        return UnknownWithSuggestion(entry.canonical_name)

    # tag_name is never None here: None always classifies as a component
    if entry.allows_tag(context.tag_name):
        return OK
    return InvalidOnTag(entry.canonical_name, entry.allowed_tags_order)


def evaluate_element(
    element: ElementNode,
    options: RuleOptions = DEFAULT_OPTIONS,
    table: AttributeTable = DEFAULT_TABLE,
) -> List[Tuple[AttributeOccurrence, Verdict]]:
    """
    Verdicts for every named attribute of *element*, in source order.

    Components yield nothing; spread occurrences are skipped.
    """
    context = classify_element(element)
    if context.is_component:
        return []
    return [
        (occ, decide(occ, context, options, table))
        for occ in element.named_attributes()
    ]


def suggested_name(verdict: Verdict) -> Optional[str]:
    if isinstance(verdict, UnknownWithSuggestion):
        return verdict.canonical_name
    return None


__all__ = [
    "Verdict",
    "Ok",
    "UnknownNoSuggestion",
    "UnknownWithSuggestion",
    "InvalidOnTag",
    "OK",
    "UNKNOWN",
    "decide",
    "evaluate_element",
    "suggested_name",
]
