# tests/test_config.py
"""
Tests for RuleOptions parsing.
"""

import pytest

from jsxprop_lint.config import DEFAULT_OPTIONS, RuleOptions
from jsxprop_lint.errors import ConfigurationError


class TestFromOptions:

    @pytest.mark.parametrize("raw", [None, [], {}, [{}]])
    def test_empty_forms(self, raw):
        assert RuleOptions.from_options(raw) == DEFAULT_OPTIONS

    def test_mapping(self):
        opts = RuleOptions.from_options({"ignore": ["class", "someProp"]})
        assert opts.ignore == frozenset({"class", "someProp"})
        assert opts.is_ignored("class")
        assert not opts.is_ignored("Class")

    def test_list_form(self):
        opts = RuleOptions.from_options([{"ignore": ["class"]}])
        assert opts.to_dict() == {"ignore": ["class"]}

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError) as exc_info:
            RuleOptions.from_options({"ignore": [], "requireDataLowercase": True})
        assert exc_info.value.detail["unknown"] == ["requireDataLowercase"]

    def test_too_many_objects(self):
        with pytest.raises(ConfigurationError):
            RuleOptions.from_options([{"ignore": []}, {"ignore": []}])

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError):
            RuleOptions.from_options("ignore")


class TestFromIgnore:

    def test_bare_string_rejected(self):
        with pytest.raises(ConfigurationError):
            RuleOptions.from_ignore("class")

    @pytest.mark.parametrize("entry", ["", None, 5])
    def test_bad_entries(self, entry):
        with pytest.raises(ConfigurationError):
            RuleOptions.from_ignore(["class", entry])

    def test_error_code(self):
        with pytest.raises(ConfigurationError) as exc_info:
            RuleOptions.from_ignore([""])
        assert exc_info.value.code == "JPL-2001"
        assert str(exc_info.value).startswith("[JPL-2001] ")
