# jsxprop_lint/attribute_table.py
"""
jsxprop_lint/attribute_table.py
═══════════════════════════════

Static attribute dictionary: normalized key → canonical spelling, optional
tag restriction, and accepted aliases.

Layout
──────

  ┌────────────────────────────────────────────────────────────┐
  │                     AttributeTable                         │
  │                                                            │
  │  entries   normalize(canonical) → AttributeEntry           │
  │  renames   normalize(raw)       → canonical   (class, for) │
  │  aria      closed frozenset of aria-* names                │
  └────────────────────────────────────────────────────────────┘

Spellings that only differ from their canonical name by case or by ``-``/``:``
separators need no explicit rename: they normalize onto the canonical entry.
``class`` and ``for`` do not (their canonical names are ``className`` and
``htmlFor``), so they live in the rename map.

``data-*`` names are a pattern, not entries; see
:func:`jsxprop_lint.normalizer.is_data_attribute`.

The table is built once at import time (:data:`DEFAULT_TABLE`). Entries are
frozen dataclasses and every mapping is a read-only proxy, so a table can be
shared between threads without locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from jsxprop_lint.errors import DictionaryConflictError
from jsxprop_lint.normalizer import normalize

_log = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════════════
#  PART 1: ENTRY MODEL
# ═════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AttributeEntry:
    """
    One canonical attribute.

    Attributes
    ----------
    canonical_name     : The only spelling accepted without complaint
    allowed_tags       : Tags the attribute is valid on; ``None`` means any tag
    allowed_tags_order : ``allowed_tags`` in declaration order, for messages
    aliases            : Other spellings accepted on equal footing
    category           : Where the name comes from ("html", "svg", "event", ...)
    """
    canonical_name: str
    allowed_tags: Optional[FrozenSet[str]] = None
    allowed_tags_order: Tuple[str, ...] = ()
    aliases: FrozenSet[str] = field(default_factory=frozenset)
    category: str = "html"

    @property
    def key(self) -> str:
        return normalize(self.canonical_name)

    @property
    def is_tag_restricted(self) -> bool:
        return self.allowed_tags is not None

    def accepts_spelling(self, raw_name: str) -> bool:
        """True when *raw_name* is the canonical spelling or a registered alias."""
        return raw_name == self.canonical_name or raw_name in self.aliases

    def allows_tag(self, tag_name: str) -> bool:
        return self.allowed_tags is None or tag_name in self.allowed_tags


# ═════════════════════════════════════════════════════════════════════════
#  PART 2: STATIC DATA
# ═════════════════════════════════════════════════════════════════════════

# WAI-ARIA 1.2 states and properties. Closed set: an ``aria-`` name that is
# not listed here is unknown.
ARIA_PROPERTIES: FrozenSet[str] = frozenset({
    # Global
    "aria-atomic", "aria-braillelabel", "aria-brailleroledescription",
    "aria-busy", "aria-controls", "aria-current", "aria-describedby",
    "aria-description", "aria-details", "aria-disabled", "aria-dropeffect",
    "aria-errormessage", "aria-flowto", "aria-grabbed", "aria-haspopup",
    "aria-hidden", "aria-invalid", "aria-keyshortcuts", "aria-label",
    "aria-labelledby", "aria-live", "aria-owns", "aria-relevant",
    "aria-roledescription",
    # Widget
    "aria-autocomplete", "aria-checked", "aria-expanded", "aria-level",
    "aria-modal", "aria-multiline", "aria-multiselectable",
    "aria-orientation", "aria-placeholder", "aria-pressed", "aria-readonly",
    "aria-required", "aria-selected", "aria-sort", "aria-valuemax",
    "aria-valuemin", "aria-valuenow", "aria-valuetext",
    # Relationship
    "aria-activedescendant", "aria-colcount", "aria-colindex",
    "aria-colindextext", "aria-colspan", "aria-posinset", "aria-rowcount",
    "aria-rowindex", "aria-rowindextext", "aria-rowspan", "aria-setsize",
})

HTML_ATTRIBUTES: Tuple[str, ...] = (
    # Global attributes
    "accessKey", "autoCapitalize", "autoFocus", "className", "contentEditable",
    "contextMenu", "dir", "draggable", "enterKeyHint", "exportParts",
    "hidden", "id", "inert", "inputMode", "is", "itemID", "itemProp",
    "itemRef", "itemScope", "itemType", "lang", "nonce", "part", "role",
    "slot", "spellCheck", "style", "tabIndex", "title", "translate",
    # Element-specific attributes
    "accept", "acceptCharset", "action", "allow", "allowFullScreen",
    "allowTransparency", "alt", "async", "autoComplete", "autoPlay",
    "border", "buffered", "capture", "cellPadding", "cellSpacing",
    "challenge", "charSet", "checked", "cite", "classID", "code", "codeBase",
    "cols", "colSpan", "content", "controls", "controlsList", "coords",
    "crossOrigin", "csp", "data", "dateTime", "decoding", "default",
    "defer", "disabled", "disablePictureInPicture", "disableRemotePlayback",
    "download", "encType", "fetchPriority", "form", "formAction",
    "formEncType", "formMethod", "formNoValidate", "formTarget",
    "frameBorder", "headers", "height", "high", "href", "hrefLang",
    "htmlFor", "httpEquiv", "icon", "imageSizes", "imageSrcSet",
    "importance", "integrity", "keyParams", "keyType", "kind", "label",
    "language", "list", "loading", "loop", "low", "manifest",
    "marginHeight", "marginWidth", "max", "maxLength", "media",
    "mediaGroup", "method", "min", "minLength", "multiple", "muted", "name",
    "noModule", "noValidate", "open", "optimum", "pattern", "ping",
    "placeholder", "playsInline", "poster", "preload", "profile",
    "radioGroup", "readOnly", "referrerPolicy", "rel", "required",
    "reversed", "rows", "rowSpan", "sandbox", "scope", "scoped",
    "scrolling", "seamless", "selected", "shape", "size", "sizes", "span",
    "src", "srcDoc", "srcLang", "srcSet", "start", "step", "summary",
    "target", "type", "useMap", "value", "width", "wmode", "wrap",
    # Non-standard
    "autoCorrect", "autoSave", "color", "results", "security",
    "unselectable",
)

# OpenGraph / RDFa
RDFA_ATTRIBUTES: Tuple[str, ...] = (
    "about", "datatype", "inlist", "prefix", "property", "resource",
    "typeof", "vocab",
)

SVG_ATTRIBUTES: Tuple[str, ...] = (
    "accentHeight", "accumulate", "additive", "alignmentBaseline",
    "allowReorder", "alphabetic", "amplitude", "arabicForm", "ascent",
    "attributeName", "attributeType", "autoReverse", "azimuth",
    "baseFrequency", "baselineShift", "baseProfile", "bbox", "begin",
    "bias", "by", "calcMode", "capHeight", "clip", "clipPath",
    "clipPathUnits", "clipRule", "colorInterpolation",
    "colorInterpolationFilters", "colorProfile", "colorRendering",
    "contentScriptType", "contentStyleType", "cursor", "cx", "cy", "d",
    "decelerate", "descent", "diffuseConstant", "direction", "display",
    "divisor", "dominantBaseline", "dur", "dx", "dy", "edgeMode",
    "elevation", "enableBackground", "end", "exponent",
    "externalResourcesRequired", "fill", "fillOpacity", "fillRule",
    "filter", "filterRes", "filterUnits", "floodColor", "floodOpacity",
    "focusable", "fontFamily", "fontSize", "fontSizeAdjust", "fontStretch",
    "fontStyle", "fontVariant", "fontWeight", "format", "fr", "from", "fx",
    "fy", "g1", "g2", "glyphName", "glyphOrientationHorizontal",
    "glyphOrientationVertical", "glyphRef", "gradientTransform",
    "gradientUnits", "hanging", "horizAdvX", "horizOriginX", "ideographic",
    "imageRendering", "in", "in2", "intercept", "k", "k1", "k2", "k3", "k4",
    "kernelMatrix", "kernelUnitLength", "kerning", "keyPoints",
    "keySplines", "keyTimes", "lengthAdjust", "letterSpacing",
    "lightingColor", "limitingConeAngle", "local", "markerEnd",
    "markerHeight", "markerMid", "markerStart", "markerUnits",
    "markerWidth", "mask", "maskContentUnits", "maskUnits", "mathematical",
    "mode", "numOctaves", "offset", "opacity", "operator", "order",
    "orient", "orientation", "origin", "overflow", "overlinePosition",
    "overlineThickness", "paintOrder", "panose1", "path", "pathLength",
    "patternContentUnits", "patternTransform", "patternUnits",
    "pointerEvents", "points", "pointsAtX", "pointsAtY", "pointsAtZ",
    "preserveAlpha", "preserveAspectRatio", "primitiveUnits", "r",
    "radius", "refX", "refY", "renderingIntent", "repeatCount",
    "repeatDur", "requiredExtensions", "requiredFeatures", "restart",
    "result", "rotate", "rx", "ry", "scale", "seed", "shapeRendering",
    "slope", "spacing", "specularConstant", "specularExponent", "speed",
    "spreadMethod", "startOffset", "stdDeviation", "stemh", "stemv",
    "stitchTiles", "stopColor", "stopOpacity", "strikethroughPosition",
    "strikethroughThickness", "string", "stroke", "strokeDasharray",
    "strokeDashoffset", "strokeLinecap", "strokeLinejoin",
    "strokeMiterlimit", "strokeOpacity", "strokeWidth", "surfaceScale",
    "systemLanguage", "tableValues", "targetX", "targetY", "textAnchor",
    "textDecoration", "textLength", "textRendering", "to", "transform",
    "u1", "u2", "underlinePosition", "underlineThickness", "unicode",
    "unicodeBidi", "unicodeRange", "unitsPerEm", "vAlphabetic", "values",
    "vectorEffect", "version", "vertAdvY", "vertOriginX", "vertOriginY",
    "vHanging", "vIdeographic", "viewBox", "viewTarget", "visibility",
    "vMathematical", "widths", "wordSpacing", "writingMode", "x", "x1",
    "x2", "xChannelSelector", "xHeight", "xlinkActuate", "xlinkArcrole",
    "xlinkHref", "xlinkRole", "xlinkShow", "xlinkTitle", "xlinkType",
    "xmlBase", "xmlLang", "xmlns", "xmlnsXlink", "xmlSpace", "y", "y1",
    "y2", "yChannelSelector", "z", "zoomAndPan",
)

_EVENT_HANDLERS: Tuple[str, ...] = (
    # Clipboard
    "onCopy", "onCut", "onPaste",
    # Composition
    "onCompositionEnd", "onCompositionStart", "onCompositionUpdate",
    # Keyboard
    "onKeyDown", "onKeyPress", "onKeyUp",
    # Focus
    "onFocus", "onBlur",
    # Form
    "onBeforeInput", "onChange", "onInput", "onInvalid", "onReset",
    "onSubmit",
    # Generic / image
    "onError", "onLoad",
    # Mouse
    "onClick", "onContextMenu", "onDoubleClick", "onDrag", "onDragEnd",
    "onDragEnter", "onDragExit", "onDragLeave", "onDragOver",
    "onDragStart", "onDrop", "onMouseDown", "onMouseEnter",
    "onMouseLeave", "onMouseMove", "onMouseOut", "onMouseOver",
    "onMouseUp",
    # Pointer
    "onPointerDown", "onPointerMove", "onPointerUp", "onPointerCancel",
    "onGotPointerCapture", "onLostPointerCapture", "onPointerEnter",
    "onPointerLeave", "onPointerOver", "onPointerOut",
    # Selection, touch, UI, wheel
    "onSelect", "onTouchCancel", "onTouchEnd", "onTouchMove",
    "onTouchStart", "onScroll", "onWheel",
    # Media
    "onAbort", "onCanPlay", "onCanPlayThrough", "onDurationChange",
    "onEmptied", "onEncrypted", "onEnded", "onLoadedData",
    "onLoadedMetadata", "onLoadStart", "onPause", "onPlay", "onPlaying",
    "onProgress", "onRateChange", "onSeeked", "onSeeking", "onStalled",
    "onSuspend", "onTimeUpdate", "onVolumeChange", "onWaiting",
    # Animation, transition, details, dialog
    "onAnimationStart", "onAnimationEnd", "onAnimationIteration",
    "onTransitionEnd", "onToggle", "onCancel", "onClose",
)

# Every handler also exists in its capture-phase form.
EVENT_HANDLERS: Tuple[str, ...] = _EVENT_HANDLERS + tuple(
    f"{name}Capture" for name in _EVENT_HANDLERS
)

REACT_PROPS: Tuple[str, ...] = (
    "children", "dangerouslySetInnerHTML", "defaultChecked", "defaultValue",
    "key", "ref", "suppressContentEditableWarning",
    "suppressHydrationWarning",
)

# canonical name → tags it is valid on, in the order messages list them
TAG_RESTRICTIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "crossOrigin": ("script", "img", "video", "audio", "link", "image"),
    "download": ("a", "area"),
    "poster": ("video",),
    "playsInline": ("video",),
    "noModule": ("script",),
    "imageSizes": ("link",),
    "imageSrcSet": ("link",),
    "allowFullScreen": ("iframe", "video"),
})

# canonical name → other casings accepted without a rename suggestion
ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "charSet": ("charset",),
    "hrefLang": ("hreflang",),
})

# raw spelling → canonical name, for spellings normalization cannot reach
RENAMES: Mapping[str, str] = MappingProxyType({
    "class": "className",
    "for": "htmlFor",
})

DEFAULT_GROUPS: Tuple[Tuple[str, Sequence[str]], ...] = (
    ("html", HTML_ATTRIBUTES),
    ("rdfa", RDFA_ATTRIBUTES),
    ("svg", SVG_ATTRIBUTES),
    ("event", EVENT_HANDLERS),
    ("react", REACT_PROPS),
)


# ═════════════════════════════════════════════════════════════════════════
#  PART 3: TABLE
# ═════════════════════════════════════════════════════════════════════════

class AttributeTable:
    """
    Read-only lookup from normalized key to :class:`AttributeEntry`.

    Usage
    -----
    >>> table = get_default_table()
    >>> table.lookup(normalize("accept-charset")).canonical_name
    'acceptCharset'
    >>> table.lookup(normalize("class")).canonical_name
    'className'
    >>> table.lookup(normalize("hasOwnProperty")) is None
    True
    """

    __slots__ = ("_entries", "_renames", "_aria")

    def __init__(
        self,
        entries: Mapping[str, AttributeEntry],
        renames: Mapping[str, str],
        aria: FrozenSet[str],
    ) -> None:
        self._entries: Mapping[str, AttributeEntry] = MappingProxyType(dict(entries))
        self._renames: Mapping[str, str] = MappingProxyType(dict(renames))
        self._aria: FrozenSet[str] = frozenset(aria)

    def lookup(self, key: str) -> Optional[AttributeEntry]:
        """Return the entry for a normalized *key*, or ``None``."""
        entry = self._entries.get(key)
        if entry is not None:
            return entry
        target = self._renames.get(key)
        if target is None:
            return None
        return self._entries[normalize(target)]

    def is_aria_property(self, name: str) -> bool:
        """Exact, case-sensitive membership in the ARIA set."""
        return name in self._aria

    @property
    def aria_properties(self) -> FrozenSet[str]:
        return self._aria

    @property
    def renames(self) -> Mapping[str, str]:
        return self._renames

    def canonical_names(self) -> List[str]:
        return sorted(e.canonical_name for e in self._entries.values())

    def restricted_entries(self) -> List[AttributeEntry]:
        return [e for e in self._entries.values() if e.is_tag_restricted]

    def __contains__(self, key: object) -> bool:
        return key in self._entries or key in self._renames

    def __iter__(self) -> Iterator[AttributeEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"<AttributeTable entries={len(self._entries)} "
            f"renames={len(self._renames)} aria={len(self._aria)}>"
        )


def build_attribute_table(
    groups: Iterable[Tuple[str, Sequence[str]]] = DEFAULT_GROUPS,
    restrictions: Mapping[str, Sequence[str]] = TAG_RESTRICTIONS,
    aliases: Mapping[str, Sequence[str]] = ALIASES,
    renames: Mapping[str, str] = RENAMES,
    aria: Iterable[str] = ARIA_PROPERTIES,
) -> AttributeTable:
    """
    Build an :class:`AttributeTable` and check its invariants.

    Raises
    ------
    DictionaryConflictError
        Two different canonical names share a normalized key, an alias or
        restriction names an unknown attribute, an alias does not normalize
        onto its canonical entry, or a rename shadows a canonical entry.
    """
    names: Dict[str, Tuple[str, str]] = {}  # key → (canonical, category)
    for category, group in groups:
        for canonical in group:
            key = normalize(canonical)
            seen = names.get(key)
            if seen is not None and seen[0] != canonical:
                raise DictionaryConflictError(
                    f"'{canonical}' and '{seen[0]}' share lookup key '{key}'",
                    detail={"key": key, "names": [seen[0], canonical]},
                )
            if seen is None:
                names[key] = (canonical, category)

    known = {canonical for canonical, _ in names.values()}
    for canonical in list(restrictions) + list(aliases):
        if canonical not in known:
            raise DictionaryConflictError(
                f"'{canonical}' is restricted or aliased but not declared",
                detail={"name": canonical},
            )

    for canonical, spellings in aliases.items():
        for alias in spellings:
            if normalize(alias) != normalize(canonical):
                raise DictionaryConflictError(
                    f"alias '{alias}' does not normalize onto '{canonical}'",
                    detail={"alias": alias, "name": canonical},
                )

    rename_keys: Dict[str, str] = {}
    for raw, canonical in renames.items():
        key = normalize(raw)
        if key in names:
            raise DictionaryConflictError(
                f"rename '{raw}' shadows canonical entry '{names[key][0]}'",
                detail={"key": key},
            )
        if canonical not in known:
            raise DictionaryConflictError(
                f"rename target '{canonical}' is not declared",
                detail={"name": canonical},
            )
        rename_keys[key] = canonical

    entries: Dict[str, AttributeEntry] = {}
    for key, (canonical, category) in names.items():
        tags = tuple(restrictions.get(canonical, ()))
        entries[key] = AttributeEntry(
            canonical_name=canonical,
            allowed_tags=frozenset(tags) if tags else None,
            allowed_tags_order=tags,
            aliases=frozenset(aliases.get(canonical, ())),
            category=category,
        )

    table = AttributeTable(entries, rename_keys, frozenset(aria))
    _log.debug("built %r", table)
    return table


DEFAULT_TABLE: AttributeTable = build_attribute_table()


def get_default_table() -> AttributeTable:
    """The process-wide table built at import time."""
    return DEFAULT_TABLE


__all__ = [
    "AttributeEntry",
    "AttributeTable",
    "ARIA_PROPERTIES",
    "HTML_ATTRIBUTES",
    "RDFA_ATTRIBUTES",
    "SVG_ATTRIBUTES",
    "EVENT_HANDLERS",
    "REACT_PROPS",
    "TAG_RESTRICTIONS",
    "ALIASES",
    "RENAMES",
    "DEFAULT_GROUPS",
    "DEFAULT_TABLE",
    "build_attribute_table",
    "get_default_table",
]
