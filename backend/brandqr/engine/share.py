"""Standalone share page built from an HTML template.

Templates use six placeholders, each of which may appear any number of
times: {{TITLE}}, {{SUBTITLE}}, {{QR_SVG}}, {{BRAND_TEXT}}, {{TARGET_URL}},
{{NORMALIZED_URL}}. Substitution is a single pass, so placeholder-looking
text inside the values is left alone.
"""

from __future__ import annotations

import html
import logging
import re
from pathlib import Path
from urllib.parse import quote, urlsplit

from brandqr.engine.session import GenerationResult
from brandqr.engine.url_classifier import normalize_url
from brandqr.models.render_config import CaptionConfig

logger = logging.getLogger(__name__)

PLACEHOLDERS = ("TITLE", "SUBTITLE", "QR_SVG", "BRAND_TEXT", "TARGET_URL", "NORMALIZED_URL")
_PLACEHOLDER_RE = re.compile(r"\{\{(" + "|".join(PLACEHOLDERS) + r")\}\}")

DEFAULT_TEMPLATE_PATH = Path(__file__).parent / "templates" / "share-template.html"

DEFAULT_TITLE = "QR Code"
URL_SUBTITLE = "Tap the QR code to open instantly!"
TEXT_SUBTITLE = "Scan or share this QR code"
NON_URL_WARNING = (
    "Shareable pages work best with URLs. "
    "Your QR code will still be shareable but not clickable."
)

# Schemes the share page may link to. Anything else (javascript:, data:,
# vbscript:) is replaced by an inert "#".
LINK_SCHEMES = frozenset({"http", "https", "mailto", "tel"})

# Browsers drop these before reading the scheme.
_URL_NOISE_RE = re.compile(r"[\t\n\r]")
_LEADING_JUNK = "".join(chr(c) for c in range(0x21))

FALLBACK_TEMPLATE = """<!DOCTYPE html>
<html><head><meta charset="UTF-8"><meta name="viewport" content="width=device-width, initial-scale=1.0"><title>{{TITLE}}</title></head>
<body style="font-family: sans-serif; text-align: center; padding: 2rem; background: #f5f5f5;">
<div style="background: white; padding: 2rem; border-radius: 1rem; display: inline-block;">
<h1>{{TITLE}}</h1><p>{{SUBTITLE}}</p><a href="{{NORMALIZED_URL}}" target="_blank" rel="noopener noreferrer" style="display: inline-block;">{{QR_SVG}}</a>
{{BRAND_TEXT}}<p>Tap to open: {{TARGET_URL}}</p></div></body></html>"""


def caption_html(caption: CaptionConfig | None) -> str:
    """Styled caption snippet, or an empty string without a caption."""
    if caption is None:
        return ""
    return (
        f'<div class="brand-text {caption.size.value}" '
        f'style="color: {html.escape(caption.color)};">{html.escape(caption.text)}</div>'
    )


def link_href(value: str) -> str:
    """``value`` if a browser would treat it as a harmless link, else ``#``.

    Scheme-less values are relative links and pass through.
    """
    cleaned = _URL_NOISE_RE.sub("", value).lstrip(_LEADING_JUNK)
    try:
        scheme = urlsplit(cleaned).scheme.lower()
    except ValueError:
        return "#"
    if scheme and scheme not in LINK_SCHEMES:
        return "#"
    return value


def whatsapp_share_url(share_url: str) -> str:
    message = f"Check out this QR code: {share_url}"
    return f"https://wa.me/?text={quote(message, safe='')}"


def share_warning(result: GenerationResult) -> str | None:
    return None if result.is_url else NON_URL_WARNING


def substitute(template: str, values: dict[str, str]) -> str:
    """Replace every ``{{NAME}}`` occurrence for the six known placeholders."""
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], template)


class ShareDocumentBuilder:
    """Fills the share template for a generation result.

    The template comes from, in order: the ``template`` argument, the file
    at ``template_path`` (the packaged template by default), or the
    built-in fallback when the file cannot be read.
    """

    def __init__(self, template: str | None = None, template_path: Path | None = None) -> None:
        if template is not None:
            self.template = template
        else:
            self.template = self._load_template(template_path or DEFAULT_TEMPLATE_PATH)

    @staticmethod
    def _load_template(path: Path) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to load share template %s, using fallback: %s", path, e)
            return FALLBACK_TEMPLATE

    def values_for(self, result: GenerationResult) -> dict[str, str]:
        url = result.is_url
        target = result.text
        normalized = normalize_url(target) if url else target
        return {
            "TITLE": html.escape(result.caption_text or DEFAULT_TITLE),
            "SUBTITLE": URL_SUBTITLE if url else TEXT_SUBTITLE,
            "QR_SVG": result.image.svg,
            "BRAND_TEXT": caption_html(result.config.caption),
            "TARGET_URL": html.escape(target),
            "NORMALIZED_URL": html.escape(link_href(normalized)),
        }

    def build(self, result: GenerationResult) -> str:
        return substitute(self.template, self.values_for(result))
