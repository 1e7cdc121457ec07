"""SVG markup inspection for icon detail payloads."""

from __future__ import annotations

from bs4 import BeautifulSoup

from .schemas import SvgMetadata


def _attr(node, name: str) -> str | None:
    # html.parser lowercases attribute names, so viewBox arrives as viewbox.
    value = node.get(name) or node.get(name.lower())
    if value is None:
        return None
    return str(value).strip() or None


def read_svg_metadata(content: bytes | str) -> SvgMetadata:
    """Pull viewBox, size and title out of an SVG document.

    Raises ``ValueError`` when the markup has no ``<svg>`` element.
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")

    soup = BeautifulSoup(content, "html.parser")
    svg = soup.find("svg")
    if svg is None:
        raise ValueError("Document does not contain an <svg> element")

    title = None
    title_node = svg.find("title")
    if title_node:
        title = title_node.get_text(strip=True) or None

    return SvgMetadata(
        view_box=_attr(svg, "viewBox"),
        width=_attr(svg, "width"),
        height=_attr(svg, "height"),
        title=title,
    )


def is_svg(content: bytes | str) -> bool:
    try:
        read_svg_metadata(content)
    except ValueError:
        return False
    return True
