"""Locate the first ``<svg>`` element inside a TSX source."""

from __future__ import annotations

import re

from tsx_to_svg.errors import SvgNotFoundError
from tsx_to_svg.types import Failure, Fragment, Outcome, Success

# "<svg" must be followed by whitespace or ">" so that type references such
# as ``SVGProps<SVGSVGElement>`` never match.
_SVG_ELEMENT = re.compile(r"<svg[\s>].*?</svg>", re.IGNORECASE | re.DOTALL)
_SVG_OPEN = re.compile(r"<svg[\s>]", re.IGNORECASE)


def extract_svg(source_text: str, source: str = "<string>") -> Outcome[Fragment]:
    """Return the first ``<svg ...>...</svg>`` span of ``source_text``.

    Parameters
    ----------
    source_text : str
        Full content of a TSX component file.
    source : str, default="<string>"
        Name of the source, used only in the ``SvgNotFoundError`` message.

    Returns
    -------
    Outcome[str]
        ``Success`` with the fragment from the opening tag through the
        closing tag (inclusive), or ``Failure`` wrapping ``SvgNotFoundError``.
    """
    match = _SVG_ELEMENT.search(source_text)
    if match is None:
        return Failure(SvgNotFoundError(source))

    fragment = match.group(0)
    opening = _SVG_OPEN.search(fragment)
    if opening is not None:
        fragment = fragment[opening.start():]
    return Success(fragment)
