# tests/conftest.py
"""
Shared helpers for the jsxprop_lint test-suite.

``scan_elements`` is a deliberately small opening-tag scanner so tests can be
written as JSX snippets. It understands exactly what the tests use: tag
names, quoted and braced values, bare attributes and ``{...spread}``.
"""

import copy
import re
from typing import List, Optional, Sequence

import pytest

from jsxprop_lint.checkers import CheckerRunner
from jsxprop_lint.config import RuleOptions
from jsxprop_lint.decision import Verdict, evaluate_element
from jsxprop_lint.diagnostics import Diagnostic, apply_fixes
from jsxprop_lint.elements import (
    AttributeOccurrence,
    ElementNode,
    SourceLocation,
    SpreadOccurrence,
    TextRange,
)

_TAG_OPEN = re.compile(r"<([A-Za-z_$][\w$.:-]*)")
_ATTR_NAME = re.compile(r"[A-Za-z_$][\w$:-]*")


def _loc(source: str, offset: int, file: str) -> SourceLocation:
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return SourceLocation(file=file, line=line, column=column)


def _skip_braces(source: str, i: int) -> int:
    depth = 0
    while i < len(source):
        if source[i] == "{":
            depth += 1
        elif source[i] == "}":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    raise ValueError("unbalanced braces")


def scan_elements(source: str, file: str = "test.jsx") -> List[ElementNode]:
    """Element openings of a JSX snippet, in source order."""
    elements = []
    pos = 0
    while True:
        m = _TAG_OPEN.search(source, pos)
        if m is None:
            return elements
        attrs = []
        i = m.end()
        while i < len(source):
            c = source[i]
            if c.isspace():
                i += 1
            elif c == ">":
                i += 1
                break
            elif source.startswith("/>", i):
                i += 2
                break
            elif c == "{":
                attrs.append(SpreadOccurrence(location=_loc(source, i, file)))
                i = _skip_braces(source, i)
            else:
                nm = _ATTR_NAME.match(source, i)
                if nm is None:
                    raise ValueError(f"cannot scan attribute at {i}: {source[i:]!r}")
                start, i = nm.start(), nm.end()
                attrs.append(AttributeOccurrence(
                    raw_name=nm.group(0),
                    span=TextRange(start, i),
                    location=_loc(source, start, file),
                ))
                if i < len(source) and source[i] == "=":
                    i += 1
                    if source[i] in "\"'":
                        i = source.index(source[i], i + 1) + 1
                    elif source[i] == "{":
                        i = _skip_braces(source, i)
        elements.append(ElementNode(
            tag_name=m.group(1),
            attributes=attrs,
            location=_loc(source, m.start(), file),
        ))
        pos = i


def element(tag: Optional[str], *names: str) -> ElementNode:
    """Element with plain named attributes (``"..."`` adds a spread)."""
    attrs = [
        SpreadOccurrence() if name == "..." else AttributeOccurrence(name)
        for name in names
    ]
    return ElementNode(tag_name=tag, attributes=attrs)


def verdicts_for(tag: Optional[str], *names: str, ignore: Sequence[str] = ()) -> List[Verdict]:
    options = RuleOptions.from_ignore(ignore)
    return [v for _, v in evaluate_element(element(tag, *names), options)]


def lint(source: str, ignore: Sequence[str] = (), file: str = "test.jsx") -> List[Diagnostic]:
    runner = CheckerRunner(options=RuleOptions.from_ignore(ignore))
    return runner.run(scan_elements(source, file), file=file).diagnostics


def fix(source: str, ignore: Sequence[str] = ()) -> str:
    diags = lint(source, ignore=ignore)
    return apply_fixes(source, [d.fix for d in diags if d.fix is not None])


SAMPLE_DUMP = {
    "file": "App.jsx",
    "source": '<div class="a" data-x="1"></div>',
    "elements": [
        {
            "tag": "div",
            "line": 1,
            "column": 1,
            "attributes": [
                {"name": "class", "line": 1, "column": 6, "range": [5, 10]},
                {"name": "data-x", "line": 1, "column": 16, "range": [15, 21]},
            ],
        },
    ],
}


@pytest.fixture
def sample_dump():
    return copy.deepcopy(SAMPLE_DUMP)
