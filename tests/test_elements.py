# tests/test_elements.py
"""
Tests for host records and the element classifier.
"""

import pytest

from jsxprop_lint.elements import (
    AttributeOccurrence,
    ElementNode,
    SourceLocation,
    SpreadOccurrence,
    TextRange,
    classify,
    classify_element,
    is_intrinsic_tag,
)
from jsxprop_lint.errors import MalformedInputError


class TestClassify:

    @pytest.mark.parametrize("tag", ["div", "svg", "image", "h1", "foreignObject"])
    def test_intrinsic(self, tag):
        ctx = classify(tag)
        assert not ctx.is_component
        assert ctx.tag_name == tag

    @pytest.mark.parametrize("tag", ["App", "Foo.bar", "foo.bar", "atom-panel", "_x", None])
    def test_components(self, tag):
        assert classify(tag).is_component
        assert not is_intrinsic_tag(tag)

    def test_type_marker(self):
        ctx = classify("div", [AttributeOccurrence("class"), AttributeOccurrence("is")])
        assert ctx.has_type_marker

    def test_no_type_marker(self):
        assert not classify("div", [AttributeOccurrence("class")]).has_type_marker
        assert not classify("div", [SpreadOccurrence()]).has_type_marker

    def test_components_never_marked(self):
        assert not classify("App", [AttributeOccurrence("is")]).has_type_marker

    def test_classify_element(self):
        el = ElementNode("div", [AttributeOccurrence("is")])
        assert classify_element(el).has_type_marker


class TestRecords:

    def test_attributes_stored_as_tuple(self):
        el = ElementNode("div", [AttributeOccurrence("id"), SpreadOccurrence()])
        assert isinstance(el.attributes, tuple)
        assert [a.raw_name for a in el.named_attributes()] == ["id"]

    def test_spread_flag(self):
        assert SpreadOccurrence().is_spread
        assert not AttributeOccurrence("id").is_spread

    @pytest.mark.parametrize("name", ["", None, 3])
    def test_bad_names(self, name):
        with pytest.raises(MalformedInputError):
            AttributeOccurrence(name)

    def test_location_str(self):
        assert str(SourceLocation("a.jsx", 3, 7)) == "a.jsx:3:7"
        assert str(SourceLocation("a.jsx", 3)) == "a.jsx:3"


class TestTextRange:

    def test_overlaps(self):
        assert TextRange(0, 5).overlaps(TextRange(4, 8))
        assert not TextRange(0, 5).overlaps(TextRange(5, 8))

    @pytest.mark.parametrize("start,end", [(-1, 2), (5, 3)])
    def test_invalid(self, start, end):
        with pytest.raises(MalformedInputError):
            TextRange(start, end)

    def test_as_list(self):
        assert TextRange(2, 4).as_list() == [2, 4]
