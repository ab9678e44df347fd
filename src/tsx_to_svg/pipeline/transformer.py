"""Rewrite an extracted JSX ``<svg>`` fragment into standalone SVG markup.

The rewrite is pattern based on purpose: output keeps the exact textual
shape of the input apart from the rules below, applied in order.

1. Remove ``{...props}`` spreads.
2. Replace ``currentColor`` with the requested color (``#000000`` default).
3. Turn numeric JSX expressions (``rx={4}``) into strings (``rx="4"``).
4. Set ``width``/``height`` on the root tag from options or the ``viewBox``.
5. Add the SVG namespace when no ``xmlns`` attribute exists.
6. Convert camelCase attribute names to kebab-case, except SVG attributes
   whose mixed case is significant.
7. Collapse whitespace and drop spaces before ``>``.
"""

from __future__ import annotations

import re

from tsx_to_svg.application.options import TransformOptions
from tsx_to_svg.errors import TransformationError
from tsx_to_svg.types import Failure, NormalizedText, Outcome, Success

DEFAULT_COLOR = "#000000"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# SVG attributes that are case-sensitive and must keep their camelCase name.
CASE_SENSITIVE_ATTRIBUTES = frozenset(
    {
        "allowReorder",
        "attributeName",
        "attributeType",
        "autoReverse",
        "baseFrequency",
        "baseProfile",
        "calcMode",
        "clipPathUnits",
        "contentScriptType",
        "contentStyleType",
        "diffuseConstant",
        "edgeMode",
        "externalResourcesRequired",
        "filterRes",
        "filterUnits",
        "glyphRef",
        "gradientTransform",
        "gradientUnits",
        "kernelMatrix",
        "kernelUnitLength",
        "keyPoints",
        "keySplines",
        "keyTimes",
        "lengthAdjust",
        "limitingConeAngle",
        "markerHeight",
        "markerUnits",
        "markerWidth",
        "maskContentUnits",
        "maskUnits",
        "numOctaves",
        "pathLength",
        "patternContentUnits",
        "patternTransform",
        "patternUnits",
        "pointsAtX",
        "pointsAtY",
        "pointsAtZ",
        "preserveAlpha",
        "preserveAspectRatio",
        "primitiveUnits",
        "refX",
        "refY",
        "repeatCount",
        "repeatDur",
        "requiredExtensions",
        "requiredFeatures",
        "specularConstant",
        "specularExponent",
        "spreadMethod",
        "startOffset",
        "stdDeviation",
        "stitchTiles",
        "surfaceScale",
        "systemLanguage",
        "tableValues",
        "targetX",
        "targetY",
        "textLength",
        "viewBox",
        "viewTarget",
        "xChannelSelector",
        "yChannelSelector",
        "zoomAndPan",
    }
)

_PROPS_SPREAD = re.compile(r"\{\s*\.\.\.\s*props\s*\}")
_CURRENT_COLOR = re.compile(r"currentColor", re.IGNORECASE)
_NUMERIC_EXPRESSION = re.compile(r"=\{\s*(\d+(?:\.\d+)?)\s*\}")
_VIEWBOX = re.compile(r"""viewBox\s*=\s*["']([^"']+)["']""", re.IGNORECASE)
_ROOT_TAG_NAME = re.compile(r"<svg(?=[\s>])", re.IGNORECASE)
_ROOT_OPEN_TAG = re.compile(r"<svg(?=[\s>])[^>]*>", re.IGNORECASE)
_XMLNS = re.compile(r"\sxmlns\s*=")
_TAG = re.compile(r"<[^>]*>")
# Quoted values are matched first and returned unchanged.
_CAMEL_ATTRIBUTE = re.compile(
    r"""("[^"]*"|'[^']*')|(?<=\s)([a-z0-9][A-Za-z0-9]*[A-Z][A-Za-z0-9]*)(?=\s*=)"""
)
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_WHITESPACE = re.compile(r"\s+")
_SPACE_BEFORE_CLOSE = re.compile(r"\s+>")
_DIMENSION_ATTRIBUTES = {
    name: re.compile(rf"""(?<=\s){name}\s*=\s*("[^"]*"|'[^']*')""")
    for name in ("width", "height")
}


def viewbox_dimensions(svg: str) -> tuple[str, str] | None:
    """Return ``(width, height)`` from the 3rd and 4th ``viewBox`` fields, if any."""
    match = _VIEWBOX.search(svg)
    if match is None:
        return None
    fields = match.group(1).split()
    if len(fields) < 4:
        return None
    return fields[2], fields[3]


def kebab_case(name: str) -> str:
    """Convert a camelCase attribute name to kebab-case."""
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


def _insert_after_tag_name(text: str, attributes: str) -> str:
    match = _ROOT_TAG_NAME.search(text)
    if match is None:
        return text
    return f"{text[: match.end()]} {attributes}{text[match.end():]}"


def _set_root_dimensions(svg: str, width: str | None, height: str | None) -> str:
    """Replace or insert width/height on the root ``<svg>`` opening tag only."""

    def rewrite(match: re.Match[str]) -> str:
        tag = match.group(0)
        inserted: list[str] = []
        for name, value in (("width", width), ("height", height)):
            if value is None:
                continue
            attribute = f'{name}="{value}"'
            pattern = _DIMENSION_ATTRIBUTES[name]
            if pattern.search(tag):
                tag = pattern.sub(lambda _: attribute, tag, count=1)
            else:
                inserted.append(attribute)
        if inserted:
            tag = _insert_after_tag_name(tag, " ".join(inserted))
        return tag

    return _ROOT_OPEN_TAG.sub(rewrite, svg, count=1)


def _normalize_attribute_case(svg: str) -> str:
    """Kebab-case attribute names inside tags, leaving values and text alone."""

    def rewrite_name(match: re.Match[str]) -> str:
        name = match.group(2)
        if name is None or name in CASE_SENSITIVE_ATTRIBUTES:
            return match.group(0)
        return kebab_case(name)

    def rewrite_tag(match: re.Match[str]) -> str:
        return _CAMEL_ATTRIBUTE.sub(rewrite_name, match.group(0))

    return _TAG.sub(rewrite_tag, svg)


def _transform(svg: str, options: TransformOptions) -> str:
    svg = _PROPS_SPREAD.sub("", svg)

    color = options.color or DEFAULT_COLOR
    svg = _CURRENT_COLOR.sub(lambda _: color, svg)

    svg = _NUMERIC_EXPRESSION.sub(r'="\1"', svg)

    width, height = options.width, options.height
    if width is None or height is None:
        derived = viewbox_dimensions(svg)
        if derived is not None:
            width = width or derived[0]
            height = height or derived[1]
    if width is not None or height is not None:
        svg = _set_root_dimensions(svg, width, height)

    if _XMLNS.search(svg) is None:
        svg = _insert_after_tag_name(svg, f'xmlns="{SVG_NAMESPACE}"')

    svg = _normalize_attribute_case(svg)

    svg = _WHITESPACE.sub(" ", svg)
    return _SPACE_BEFORE_CLOSE.sub(">", svg)


def transform_svg(
    fragment: str, options: TransformOptions | None = None
) -> Outcome[NormalizedText]:
    """Normalize an extracted ``<svg>`` fragment into standalone SVG.

    Parameters
    ----------
    fragment : str
        Markup returned by :func:`tsx_to_svg.pipeline.extractor.extract_svg`.
    options : TransformOptions | None, default=None
        Width, height and color overrides. Color must already be a
        validated ``#RRGGBB`` string.

    Returns
    -------
    Outcome[str]
        ``Success`` with the normalized markup, or ``Failure`` wrapping
        ``TransformationError`` if the rewrite raised.
    """
    try:
        return Success(_transform(fragment, options or TransformOptions()))
    except Exception as exc:
        return Failure(TransformationError("Failed to transform SVG content", exc))
