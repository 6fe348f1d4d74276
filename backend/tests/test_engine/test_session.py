"""Tests for generation results and the encoder capability."""

from __future__ import annotations

import numpy as np
import pytest

from brandqr.engine.encoder import encode_text
from brandqr.engine.session import GenerationResult, generate
from brandqr.errors import ConfigurationError, EncodingError
from brandqr.models.qr import EccLevel, ModuleMatrix
from brandqr.models.render_config import CaptionConfig, RenderConfig
from tests.conftest import FINDER_21, covered_modules, fixed_encoder


def test_generate_uses_injected_encoder():
    encoder = fixed_encoder(FINDER_21)
    result = generate("  hello  ", "high", RenderConfig(module_scale=10, border_modules=2), encoder=encoder)
    assert encoder.calls == [("hello", EccLevel.HIGH)]
    assert result.text == "hello"
    assert result.ecc is EccLevel.HIGH
    assert result.matrix_size == 21
    assert result.image.width == 250


def test_empty_text_rejected():
    with pytest.raises(EncodingError):
        generate("   ", EccLevel.LOW, RenderConfig(), encoder=fixed_encoder(FINDER_21))


def test_result_is_frozen():
    result = generate("x", EccLevel.LOW, RenderConfig(), encoder=fixed_encoder(FINDER_21))
    with pytest.raises(AttributeError):
        result.text = "y"  # type: ignore[misc]


def test_regeneration_returns_fresh_result():
    encoder = fixed_encoder(FINDER_21)
    first = generate("example.com", EccLevel.LOW, RenderConfig(), encoder=encoder)
    second = generate("example.com", EccLevel.LOW, RenderConfig(module_scale=3), encoder=encoder)
    assert first is not second
    assert first.image.width != second.image.width


@pytest.mark.parametrize(
    "text, make_clickable, clickable, click_url, status",
    [
        ("example.com", True, True, "https://example.com", "QR code is clickable - opens example.com"),
        ("example.com", False, False, None, None),
        ("hello world", True, False, None, "Content is not a URL"),
        ("https://a.b", True, True, "https://a.b", "QR code is clickable - opens https://a.b"),
    ],
)
def test_click_status(text, make_clickable, clickable, click_url, status):
    result = generate(
        text, EccLevel.MEDIUM, RenderConfig(), encoder=fixed_encoder(FINDER_21), make_clickable=make_clickable
    )
    assert result.clickable is clickable
    assert result.click_url == click_url
    assert result.status_message == status


def test_caption_text():
    config = RenderConfig(caption=CaptionConfig(text="Acme"))
    result = generate("x", EccLevel.LOW, config, encoder=fixed_encoder(FINDER_21))
    assert result.caption_text == "Acme"


class TestQrcodeEncoder:
    def test_short_text_is_version_1(self):
        matrix = encode_text("hello", EccLevel.MEDIUM)
        assert isinstance(matrix, ModuleMatrix)
        assert matrix.size == 21

    @pytest.mark.parametrize("ecc", list(EccLevel))
    def test_size_is_valid_qr_size(self, ecc):
        matrix = encode_text("https://example.com/some/longer/path?with=query", ecc)
        assert matrix.size >= 21
        assert (matrix.size - 17) % 4 == 0

    def test_higher_ecc_never_smaller(self):
        text = "https://example.com/" + "a" * 60
        sizes = [encode_text(text, ecc).size for ecc in EccLevel]
        assert sizes == sorted(sizes)

    def test_finder_pattern_present(self):
        m = encode_text("hello", EccLevel.LOW).modules
        assert m[0, 0:7].all() and m[6, 0:7].all()
        assert not m[1, 1:6].any()

    def test_overflow(self):
        with pytest.raises(EncodingError):
            encode_text("x" * 4000, EccLevel.HIGH)

    def test_end_to_end_path_matches_encoder(self):
        config = RenderConfig(module_scale=4, border_modules=4)
        result = generate("https://example.com", EccLevel.QUARTILE, config)
        matrix = encode_text("https://example.com", EccLevel.QUARTILE)
        grid = covered_modules(result.image.svg, matrix.size, 4, 16)
        assert np.array_equal(grid, matrix.modules)


def test_configuration_error_before_encoding():
    encoder = fixed_encoder(FINDER_21)
    with pytest.raises(ConfigurationError):
        generate("x", EccLevel.LOW, RenderConfig(module_scale=-1), encoder=encoder)
    assert encoder.calls == []


def test_result_fields():
    assert {f for f in GenerationResult.__dataclass_fields__} == {
        "text", "ecc", "config", "matrix_size", "image", "make_clickable",
    }
