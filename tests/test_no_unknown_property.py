# tests/test_no_unknown_property.py
"""
End-to-end behaviour of the no-unknown-property rule on JSX snippets:
which snippets pass, which diagnostics the others produce, and what the
rename fixes turn the source into.
"""

import pytest

from tests.conftest import fix, lint


VALID = [
    # components and their props are never checked
    '<App class="bar" />;',
    '<App for="bar" />;',
    '<App someProp="bar" />;',
    '<Foo.bar for="bar" />;',
    '<App accept-charset="bar" />;',
    '<App http-equiv="bar" />;',
    '<App xlink:href="bar" />;',
    '<App clip-path="bar" />;',
    # common DOM attributes
    '<div className="bar"></div>;',
    '<div onMouseDown={this._onMouseDown}></div>;',
    '<a href="someLink">Read more</a>',
    '<img src="cat_keyboard.jpeg" alt="A cat sleeping on a keyboard" />',
    '<input type="password" required />',
    '<input ref={this.input} type="radio" />',
    '<input key="bar" type="radio" />',
    '<button disabled>You cannot click me</button>;',
    '<svg key="lock" viewBox="box" fill={10} d="d" stroke={1} strokeWidth={2} '
    'strokeLinecap={3} strokeLinejoin={4} transform="something" clipRule="else" '
    'x1={5} x2="6" y1="7" y2="8"></svg>',
    '<meta property="og:type" content="website" />',
    '<input type="checkbox" checked={checked} disabled={disabled} id={id} onChange={onChange} />',
    # both casings of charset
    '<meta charset="utf-8" />;',
    '<meta charSet="utf-8" />;',
    # customized built-ins and custom elements may use class
    '<div class="foo" is="my-elem"></div>;',
    '<div {...this.props} class="foo" is="my-elem"></div>;',
    '<atom-panel class="foo"></atom-panel>;',
    # data-*
    '<div data-foo="bar"></div>;',
    '<div data-foo-bar="baz"></div>;',
    '<div data-parent="parent"></div>;',
    '<div data-index-number="1234"></div>;',
    # aria-*
    '<button aria-haspopup="true">Click me to open pop up</button>;',
    '<button aria-label="Close" onClick={someThing.close} />;',
    # restricted attributes on their own tags
    '<script crossOrigin />',
    '<audio crossOrigin />',
    '<svg><image crossOrigin /></svg>',
]


class TestValidSnippets:

    @pytest.mark.parametrize("source", VALID)
    def test_no_diagnostics(self, source):
        assert lint(source) == []

    def test_ignore_class(self):
        assert lint('<div class="bar"></div>;', ignore=["class"]) == []

    def test_ignore_custom_prop(self):
        assert lint('<div someProp="bar"></div>;', ignore=["someProp"]) == []

    @pytest.mark.parametrize("tag", ["App", "Foo.bar", "atom-panel"])
    @pytest.mark.parametrize("name", ["hasOwnProperty", "constructor", "__proto__", "toString"])
    def test_prototype_member_names_on_components(self, tag, name):
        assert lint(f'<{tag} {name}="x" />') == []

    @pytest.mark.parametrize("name", ["hasOwnProperty", "constructor", "__proto__", "toString"])
    def test_prototype_member_names_on_intrinsic(self, name):
        assert [d.error_id for d in lint(f'<div {name}="x" />')] == ["unknownProp"]


class TestUnknownProp:

    @pytest.mark.parametrize("source,name", [
        ('<div hasOwnProperty="should not be allowed property"></div>;', "hasOwnProperty"),
        ('<div abc="should not be allowed property"></div>;', "abc"),
        ('<div aria-fake="should not be allowed property"></div>;', "aria-fake"),
        ('<div someProp="bar"></div>;', "someProp"),
    ])
    def test_reported(self, source, name):
        diags = lint(source)
        assert len(diags) == 1
        assert diags[0].error_id == "unknownProp"
        assert dict(diags[0].data) == {"name": name}
        assert diags[0].message == f"Unknown property '{name}' found"
        assert diags[0].fix is None
        # nothing to rewrite
        assert fix(source) == source


class TestUnknownPropWithStandardName:

    @pytest.mark.parametrize("source,name,standard,output", [
        ('<div class="bar"></div>;', "class", "className",
         '<div className="bar"></div>;'),
        ('<div for="bar"></div>;', "for", "htmlFor",
         '<div htmlFor="bar"></div>;'),
        ('<div accept-charset="bar"></div>;', "accept-charset", "acceptCharset",
         '<div acceptCharset="bar"></div>;'),
        ('<div http-equiv="bar"></div>;', "http-equiv", "httpEquiv",
         '<div httpEquiv="bar"></div>;'),
        ('<div accesskey="bar"></div>;', "accesskey", "accessKey",
         '<div accessKey="bar"></div>;'),
        ('<div onclick="bar"></div>;', "onclick", "onClick",
         '<div onClick="bar"></div>;'),
        ('<div onmousedown="bar"></div>;', "onmousedown", "onMouseDown",
         '<div onMouseDown="bar"></div>;'),
        ('<div onMousedown="bar"></div>;', "onMousedown", "onMouseDown",
         '<div onMouseDown="bar"></div>;'),
        ('<use xlink:href="bar" />;', "xlink:href", "xlinkHref",
         '<use xlinkHref="bar" />;'),
        ('<rect clip-path="bar" />;', "clip-path", "clipPath",
         '<rect clipPath="bar" />;'),
        ('<script crossorigin />', "crossorigin", "crossOrigin",
         '<script crossOrigin />'),
        # the rename comes first; the tag restriction is checked on the next pass
        ('<div crossorigin />', "crossorigin", "crossOrigin",
         '<div crossOrigin />'),
    ])
    def test_reported_and_fixed(self, source, name, standard, output):
        diags = lint(source)
        assert len(diags) == 1
        diag = diags[0]
        assert diag.error_id == "unknownPropWithStandardName"
        assert dict(diag.data) == {"name": name, "standardName": standard}
        assert diag.message == f"Unknown property '{name}' found, use '{standard}' instead"
        assert diag.fixable
        assert fix(source) == output

    def test_fix_is_idempotent(self):
        once = fix('<div class="a" onclick={f} accept-charset="x"></div>')
        assert once == '<div className="a" onClick={f} acceptCharset="x"></div>'
        assert lint(once) == []
        assert fix(once) == once


class TestInvalidPropOnTag:

    def test_cross_origin_on_div(self):
        diags = lint('<div crossOrigin />')
        assert len(diags) == 1
        diag = diags[0]
        assert diag.error_id == "invalidPropOnTag"
        assert dict(diag.data) == {
            "name": "crossOrigin",
            "tagName": "div",
            "allowedTags": "script, img, video, audio, link, image",
        }
        assert diag.message == (
            "Invalid property 'crossOrigin' found on tag 'div', but it is only "
            "allowed on: script, img, video, audio, link, image"
        )
        assert diag.fix is None

    def test_fixed_output_reports_tag_next(self):
        fixed = fix('<div crossorigin />')
        assert [d.error_id for d in lint(fixed)] == ["invalidPropOnTag"]

    @pytest.mark.parametrize("source,allowed", [
        ('<div download />', "a, area"),
        ('<img poster="p.png" />', "video"),
        ('<div playsInline />', "video"),
        ('<link noModule />', "script"),
        ('<img imageSizes="1" />', "link"),
        ('<div allowFullScreen />', "iframe, video"),
    ])
    def test_other_restrictions(self, source, allowed):
        diags = lint(source)
        assert [d.error_id for d in diags] == ["invalidPropOnTag"]
        assert diags[0].data["allowedTags"] == allowed


class TestMultipleAttributes:

    def test_source_order_and_locations(self):
        source = '<div\n  class="a"\n  abc="b"\n  data-x="1"\n  crossOrigin\n/>'
        diags = lint(source, file="multi.jsx")
        assert [d.error_id for d in diags] == [
            "unknownPropWithStandardName",
            "unknownProp",
            "invalidPropOnTag",
        ]
        assert [(d.location.line, d.location.column) for d in diags] == [
            (2, 3), (3, 3), (5, 3),
        ]
        assert {d.location.file for d in diags} == {"multi.jsx"}

    def test_nested_elements_checked_independently(self):
        source = '<App class="x"><div class="y"><Child for="z" /></div></App>'
        diags = lint(source)
        assert [d.data["name"] for d in diags] == ["class"]
