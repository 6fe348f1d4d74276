"""Write SVG documents from element definitions."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import quoteattr

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
_DOCTYPE = (
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">'
)


def format_number(value: float) -> str:
    """Shortest fixed-point form: 10.0 -> "10", 12.50 -> "12.5"."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")


def _attr_value(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


def serialize_svg(
    elements: list[dict[str, Any]],
    width: float,
    height: float,
    root_attrs: dict[str, Any] | None = None,
) -> str:
    """Generate SVG 1.1 markup, one element per line in document order."""
    w = format_number(width)
    h = format_number(height)
    root = {
        "xmlns": "http://www.w3.org/2000/svg",
        "version": "1.1",
        "width": w,
        "height": h,
        "viewBox": f"0 0 {w} {h}",
    }
    if root_attrs:
        root.update(root_attrs)

    lines = [
        _XML_DECLARATION,
        _DOCTYPE,
        f"<svg {_attr_string(root)}>",
    ]
    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        lines.append(f"  <{tag} {_attr_string(attrs)}/>")
    lines.append("</svg>")
    return "\n".join(lines)


def _attr_string(attrs: dict[str, Any]) -> str:
    return " ".join(f"{k}={quoteattr(_attr_value(v))}" for k, v in attrs.items())
