# tests/test_normalizer.py
"""
Tests for lookup-key normalization and the data/aria name tests.
"""

import pytest

from jsxprop_lint.errors import MalformedInputError
from jsxprop_lint.normalizer import is_aria_attribute, is_data_attribute, normalize


class TestNormalize:

    @pytest.mark.parametrize("raw,canonical", [
        ("accept-charset", "acceptCharset"),
        ("http-equiv", "httpEquiv"),
        ("xlink:href", "xlinkHref"),
        ("clip-path", "clipPath"),
        ("onMousedown", "onMouseDown"),
        ("onmousedown", "onMouseDown"),
        ("crossorigin", "crossOrigin"),
    ])
    def test_spellings_share_key(self, raw, canonical):
        assert normalize(raw) == normalize(canonical)

    def test_lowercases_and_strips_separators(self):
        assert normalize("Stroke-Width") == "strokewidth"
        assert normalize("xml:lang") == "xmllang"

    def test_class_and_classname_differ(self):
        # reaching className from class needs the explicit rename map
        assert normalize("class") != normalize("className")

    def test_empty_name_rejected(self):
        with pytest.raises(MalformedInputError):
            normalize("")


class TestDataAttribute:

    @pytest.mark.parametrize("name", [
        "data-foo", "data-foo-bar", "data-parent", "data-index-number", "data",
    ])
    def test_accepted(self, name):
        assert is_data_attribute(name)

    @pytest.mark.parametrize("name", [
        "dataFoo", "data-xml-thing", "DATA-XMLfoo", "data-foo:bar", "xdata-foo",
    ])
    def test_rejected(self, name):
        assert not is_data_attribute(name)


class TestAriaPrefix:

    def test_prefix_only(self):
        assert is_aria_attribute("aria-label")
        assert is_aria_attribute("aria-fake")
        assert not is_aria_attribute("ariaLabel")
        assert not is_aria_attribute("role")
