# jsxprop_lint/normalizer.py
"""
Lookup-key normalization and the two name patterns that bypass the
attribute dictionary.

A normalized key is only ever used for dictionary membership: it is never
reported, stored on an entry, or compared against a canonical name.
"""

from __future__ import annotations

import re

from jsxprop_lint.errors import MalformedInputError

ARIA_PREFIX = "aria-"

# Separators that differ between HTML, SVG and JSX spellings of one attribute.
_SEPARATORS = re.compile(r"[-:]")

_DATA_ATTRIBUTE = re.compile(r"^data(-[^:]*)*$")
_DATA_XML_RESERVED = re.compile(r"^data-xml", re.IGNORECASE)


def normalize(raw_name: str) -> str:
    """
    Return the dictionary lookup key for *raw_name*.

    >>> normalize("accept-charset") == normalize("acceptCharset")
    True
    >>> normalize("xlink:href")
    'xlinkhref'
    """
    if not raw_name:
        raise MalformedInputError("attribute name is empty", detail={"name": raw_name})
    return _SEPARATORS.sub("", raw_name.lower())


def is_data_attribute(name: str) -> bool:
    """True for ``data-*`` names; ``data-xml*`` is reserved and excluded."""
    if _DATA_XML_RESERVED.match(name):
        return False
    return _DATA_ATTRIBUTE.match(name) is not None


def is_aria_attribute(name: str) -> bool:
    """Prefix test only; membership in the ARIA set is the table's job."""
    return name.startswith(ARIA_PREFIX)


__all__ = [
    "ARIA_PREFIX",
    "normalize",
    "is_data_attribute",
    "is_aria_attribute",
]
