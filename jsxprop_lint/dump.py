# jsxprop_lint/dump.py
"""
Reader for element dumps.

An element dump is the JSON a host parser writes after visiting the element
openings of one or more source files. This module only converts it into
:class:`~jsxprop_lint.elements.ElementNode` records; it never looks at markup.

Format
------
::

    {
      "file": "App.jsx",
      "source": "<div class=\\"a\\"></div>",        (optional)
      "elements": [
        {"tag": "div", "line": 1, "column": 1,
         "attributes": [
           {"name": "class", "line": 1, "column": 6, "range": [5, 10]},
           {"spread": true, "line": 1, "column": 12}
         ]}
      ]
    }

``"tag": null`` marks an element the host knows is not intrinsic. The top
level may also be a list of such file objects.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple, Union

from jsxprop_lint.elements import (
    AttributeOccurrence,
    ElementNode,
    Occurrence,
    SourceLocation,
    SpreadOccurrence,
    TextRange,
)
from jsxprop_lint.errors import DumpFormatError, MalformedInputError

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileDump:
    """Elements of one source file."""
    file: str
    elements: Tuple[ElementNode, ...] = ()
    source: Optional[str] = None


@dataclass(frozen=True)
class ElementDump:
    """Everything read from one dump document."""
    files: Tuple[FileDump, ...] = field(default_factory=tuple)

    @property
    def element_count(self) -> int:
        return sum(len(f.elements) for f in self.files)


def _require(obj: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in obj:
        raise DumpFormatError(f"{where}: missing '{key}'", detail={"where": where})
    return obj[key]


def _int_field(obj: Mapping[str, Any], key: str, where: str) -> int:
    value = obj.get(key, 0)
    if not isinstance(value, int) or isinstance(value, bool):
        raise DumpFormatError(
            f"{where}: '{key}' must be an integer, got {value!r}",
            detail={"where": where, "key": key},
        )
    return value


def _parse_range(raw: Any, where: str) -> Optional[TextRange]:
    if raw is None:
        return None
    if (
        not isinstance(raw, (list, tuple))
        or len(raw) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in raw)
    ):
        raise DumpFormatError(
            f"{where}: 'range' must be [start, end], got {raw!r}",
            detail={"where": where},
        )
    try:
        return TextRange(raw[0], raw[1])
    except MalformedInputError as exc:
        raise DumpFormatError(f"{where}: {exc.message}", detail=exc.detail) from exc


def _parse_attribute(raw: Any, file: str, where: str) -> Occurrence:
    if not isinstance(raw, Mapping):
        raise DumpFormatError(f"{where}: attribute must be an object", detail={"where": where})
    location = SourceLocation(
        file=file,
        line=_int_field(raw, "line", where),
        column=_int_field(raw, "column", where),
    )
    if raw.get("spread", False):
        return SpreadOccurrence(location=location)
    name = _require(raw, "name", where)
    # an empty or non-string name surfaces as MalformedInputError
    return AttributeOccurrence(
        raw_name=name,
        value=raw.get("value"),
        span=_parse_range(raw.get("range"), where),
        location=location,
    )


def _parse_element(raw: Any, file: str, where: str) -> ElementNode:
    if not isinstance(raw, Mapping):
        raise DumpFormatError(f"{where}: element must be an object", detail={"where": where})
    tag = _require(raw, "tag", where)
    if tag is not None and not isinstance(tag, str):
        raise DumpFormatError(
            f"{where}: 'tag' must be a string or null, got {tag!r}",
            detail={"where": where},
        )
    attributes = raw.get("attributes", [])
    if not isinstance(attributes, list):
        raise DumpFormatError(f"{where}: 'attributes' must be a list", detail={"where": where})
    return ElementNode(
        tag_name=tag,
        attributes=tuple(
            _parse_attribute(a, file, f"{where}.attributes[{i}]")
            for i, a in enumerate(attributes)
        ),
        location=SourceLocation(
            file=file,
            line=_int_field(raw, "line", where),
            column=_int_field(raw, "column", where),
        ),
    )


def _parse_file(raw: Any, where: str) -> FileDump:
    if not isinstance(raw, Mapping):
        raise DumpFormatError(f"{where}: expected an object", detail={"where": where})
    file = raw.get("file", "")
    if not isinstance(file, str):
        raise DumpFormatError(f"{where}: 'file' must be a string", detail={"where": where})
    elements = _require(raw, "elements", where)
    if not isinstance(elements, list):
        raise DumpFormatError(f"{where}: 'elements' must be a list", detail={"where": where})
    source = raw.get("source")
    if source is not None and not isinstance(source, str):
        raise DumpFormatError(f"{where}: 'source' must be a string", detail={"where": where})
    return FileDump(
        file=file,
        elements=tuple(
            _parse_element(e, file, f"{where}.elements[{i}]")
            for i, e in enumerate(elements)
        ),
        source=source,
    )


def parse_dump(obj: Union[Mapping[str, Any], List[Any]]) -> ElementDump:
    """Convert an already-decoded dump document."""
    if isinstance(obj, list):
        files = tuple(_parse_file(f, f"$[{i}]") for i, f in enumerate(obj))
    else:
        files = (_parse_file(obj, "$"),)
    dump = ElementDump(files=files)
    _log.debug("parsed dump: %d file(s), %d element(s)", len(files), dump.element_count)
    return dump


def loads_dump(text: str) -> ElementDump:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DumpFormatError(f"invalid JSON: {exc}", detail={"position": exc.pos}) from exc
    return parse_dump(obj)


def load_dump(path: Union[str, Path]) -> ElementDump:
    """Read and parse a dump file."""
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise DumpFormatError(f"cannot read {p}: {exc}", detail={"path": str(p)}) from exc
    except UnicodeDecodeError as exc:
        raise DumpFormatError(
            f"{p} is not valid UTF-8: {exc.reason} at byte {exc.start}",
            detail={"path": str(p), "position": exc.start},
        ) from exc
    _log.info("loading element dump %s", p)
    return loads_dump(text)


__all__ = [
    "FileDump",
    "ElementDump",
    "parse_dump",
    "loads_dump",
    "load_dump",
]
