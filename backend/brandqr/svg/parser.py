"""SVG parser — reads back documents produced by the renderer.

Used by the raster exporter (natural size, embedded images) and by tests
that check the draw order and module coverage.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

from brandqr.models.svg_document import SvgDocument, SvgElement

logger = logging.getLogger(__name__)

_SVG_NS = "{http://www.w3.org/2000/svg}"
_XLINK_HREF = "{http://www.w3.org/1999/xlink}href"
_LENGTH_RE = re.compile(r"^\s*([0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)\s*(px)?\s*$")
_SVG_OPEN_RE = re.compile(r"<svg\b", re.IGNORECASE)


def parse_length(value: str | None) -> float:
    """Absolute pixel length of a width/height attribute; 0 when absent or relative."""
    if not value:
        return 0.0
    match = _LENGTH_RE.match(value)
    if not match:
        return 0.0
    return float(match.group(1))


def _local_name(tag: str) -> str:
    return tag[len(_SVG_NS):] if tag.startswith(_SVG_NS) else tag


def parse_svg(svg_text: str) -> SvgDocument:
    """Parse raw SVG text. Raises ``xml.etree.ElementTree.ParseError`` on malformed input."""
    root = ET.fromstring(svg_text)
    if _local_name(root.tag) != "svg":
        raise ET.ParseError(f"root element is <{_local_name(root.tag)}>, expected <svg>")

    viewbox = (0.0, 0.0, 0.0, 0.0)
    vb = root.get("viewBox")
    if vb:
        parts = vb.replace(",", " ").split()
        if len(parts) == 4:
            try:
                viewbox = tuple(float(p) for p in parts)  # type: ignore[assignment]
            except ValueError:
                logger.debug("Ignoring malformed viewBox %r", vb)

    elements: list[SvgElement] = []
    for node in root.iter():
        if node is root:
            continue
        attrs = {_local_name(k): v for k, v in node.attrib.items()}
        if _XLINK_HREF in node.attrib:
            attrs.setdefault("href", node.attrib[_XLINK_HREF])
        tag = _local_name(node.tag)
        elements.append(
            SvgElement(
                tag=tag,
                attributes=attrs,
                path_data=attrs.get("d") if tag == "path" else None,
            )
        )

    return SvgDocument(
        viewbox=viewbox,
        width=parse_length(root.get("width")),
        height=parse_length(root.get("height")),
        elements=elements,
        root_attributes={_local_name(k): v for k, v in root.attrib.items()},
        raw_svg=svg_text,
    )


def set_root_attributes(svg_text: str, attrs: dict[str, str]) -> str:
    """Insert attributes right after the opening ``<svg`` tag name."""
    injected = "".join(f' {k}="{v}"' for k, v in attrs.items())
    return _SVG_OPEN_RE.sub(lambda m: m.group(0) + injected, svg_text, count=1)
