"""Generation results — the explicit session state export and share work on."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from brandqr.engine.encoder import Encoder, encode_text
from brandqr.engine.renderer import render_svg
from brandqr.engine.url_classifier import is_url, normalize_url
from brandqr.errors import EncodingError
from brandqr.models.images import VectorImage
from brandqr.models.qr import EccLevel
from brandqr.models.render_config import RenderConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """One finished generation. Replaced, never mutated, by the next one."""

    text: str
    ecc: EccLevel
    config: RenderConfig
    matrix_size: int
    image: VectorImage
    make_clickable: bool = False

    @property
    def is_url(self) -> bool:
        return is_url(self.text)

    @property
    def clickable(self) -> bool:
        return self.make_clickable and self.is_url

    @property
    def click_url(self) -> str | None:
        return normalize_url(self.text) if self.clickable else None

    @property
    def status_message(self) -> str | None:
        if not self.make_clickable:
            return None
        if self.is_url:
            return f"QR code is clickable - opens {self.text}"
        return "Content is not a URL"

    @property
    def caption_text(self) -> str | None:
        return self.config.caption.text if self.config.caption else None


def generate(
    text: str,
    ecc: EccLevel | str,
    config: RenderConfig,
    encoder: Encoder = encode_text,
    make_clickable: bool = False,
) -> GenerationResult:
    text = (text or "").strip()
    if not text:
        raise EncodingError("Please enter some text to generate a QR code")

    level = EccLevel.parse(ecc)
    matrix = encoder(text, level)
    image = render_svg(matrix, config)
    logger.info(
        "Generated QR code: %d modules, %s px, ecc=%s, logo=%s, caption=%s",
        matrix.size, image.width, level.value, config.logo is not None, config.caption is not None,
    )
    return GenerationResult(
        text=text,
        ecc=level,
        config=config,
        matrix_size=matrix.size,
        image=image,
        make_clickable=make_clickable,
    )
