# jsxprop_lint/elements.py
"""
Element and attribute records handed over by the host, and the classifier
that decides whether an element's attributes are validated at all.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple, Union

from jsxprop_lint.errors import MalformedInputError

# Attribute marking a customized built-in element (``<div is="my-elem">``).
TYPE_MARKER_ATTRIBUTE = "is"

# Intrinsic tags start with a lowercase letter and are neither member
# expressions (``foo.bar``) nor custom elements (``atom-panel``).
_INTRINSIC_TAG = re.compile(r"^[a-z][^.\-]*$")


# ═════════════════════════════════════════════════════════════════════════
#  PART 1: SOURCE POSITIONS
# ═════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class SourceLocation:
    """A specific point in source code."""
    file: str = ""
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        if self.column:
            return f"{self.file}:{self.line}:{self.column}"
        return f"{self.file}:{self.line}"


@dataclass(frozen=True)
class TextRange:
    """Half-open ``[start, end)`` character offsets into the source text."""
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise MalformedInputError(
                f"invalid text range [{self.start}, {self.end})",
                detail={"start": self.start, "end": self.end},
            )

    def overlaps(self, other: TextRange) -> bool:
        return self.start < other.end and other.start < self.end

    def as_list(self) -> list:
        return [self.start, self.end]


# ═════════════════════════════════════════════════════════════════════════
#  PART 2: ATTRIBUTE OCCURRENCES
# ═════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AttributeOccurrence:
    """
    One named attribute on an element.

    Attributes
    ----------
    raw_name : Name exactly as written, including namespace (``xlink:href``)
    value    : Placeholder for the attribute value; never inspected
    span     : Range of the name token, used for the rename fix
    location : Where the name starts
    """
    raw_name: str
    value: Any = None
    span: Optional[TextRange] = None
    location: SourceLocation = field(default_factory=SourceLocation)

    def __post_init__(self) -> None:
        if not isinstance(self.raw_name, str) or not self.raw_name:
            raise MalformedInputError(
                "attribute occurrence has no name",
                detail={"name": self.raw_name, "location": str(self.location)},
            )

    @property
    def is_spread(self) -> bool:
        return False


@dataclass(frozen=True)
class SpreadOccurrence:
    """``{...props}``: its keys are not statically known, so it is never validated."""
    location: SourceLocation = field(default_factory=SourceLocation)

    @property
    def is_spread(self) -> bool:
        return True


Occurrence = Union[AttributeOccurrence, SpreadOccurrence]


# ═════════════════════════════════════════════════════════════════════════
#  PART 3: ELEMENTS
# ═════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ElementNode:
    """
    One element opening as visited by the host.

    ``tag_name`` is ``None`` when the host only knows the element is not
    intrinsic (for example a computed component reference).
    """
    tag_name: Optional[str]
    attributes: Tuple[Occurrence, ...] = ()
    location: SourceLocation = field(default_factory=SourceLocation)

    def __post_init__(self) -> None:
        # accept any sequence from the host but store an immutable tuple
        object.__setattr__(self, "attributes", tuple(self.attributes))

    def named_attributes(self) -> Tuple[AttributeOccurrence, ...]:
        return tuple(a for a in self.attributes if not a.is_spread)


@dataclass(frozen=True)
class ElementContext:
    """Classification of one element; built per element and then dropped."""
    tag_name: Optional[str]
    is_component: bool
    has_type_marker: bool = False


def is_intrinsic_tag(tag_name: Optional[str]) -> bool:
    """True for built-in host tags such as ``div`` or ``svg``."""
    return tag_name is not None and _INTRINSIC_TAG.match(tag_name) is not None


def classify(tag_name: Optional[str], attributes: Sequence[Occurrence] = ()) -> ElementContext:
    """
    Decide how an element's attributes are treated.

    Capitalized, dotted, hyphenated (custom element) and unknown (``None``)
    tags are components and are never validated. An intrinsic element with
    an ``is`` attribute carries a type marker.

    >>> classify("App").is_component
    True
    >>> classify("div", [AttributeOccurrence("is")]).has_type_marker
    True
    """
    if not is_intrinsic_tag(tag_name):
        return ElementContext(tag_name=tag_name, is_component=True)
    has_marker = any(
        not occ.is_spread and occ.raw_name == TYPE_MARKER_ATTRIBUTE
        for occ in attributes
    )
    return ElementContext(
        tag_name=tag_name,
        is_component=False,
        has_type_marker=has_marker,
    )


def classify_element(element: ElementNode) -> ElementContext:
    return classify(element.tag_name, element.attributes)


__all__ = [
    "TYPE_MARKER_ATTRIBUTE",
    "SourceLocation",
    "TextRange",
    "AttributeOccurrence",
    "SpreadOccurrence",
    "Occurrence",
    "ElementNode",
    "ElementContext",
    "is_intrinsic_tag",
    "classify",
    "classify_element",
]
