"""Tests for render configuration validation."""

from __future__ import annotations

import base64

import pytest

from brandqr.errors import ConfigurationError
from brandqr.models.render_config import (
    CaptionConfig,
    CaptionSize,
    LogoBackground,
    LogoConfig,
    RenderConfig,
    logo_data_url,
)
from tests.conftest import RED_LOGO_URL, make_png


def test_defaults_are_valid():
    config = RenderConfig()
    assert config.module_scale == 10
    assert config.border_modules == 4
    assert config.logo is None
    assert config.caption is None


@pytest.mark.parametrize("scale", [0, -1, -0.5, float("nan"), float("inf")])
def test_non_positive_scale_rejected(scale):
    with pytest.raises(ConfigurationError):
        RenderConfig(module_scale=scale)


def test_negative_border_rejected():
    with pytest.raises(ConfigurationError):
        RenderConfig(border_modules=-1)


def test_zero_border_allowed():
    assert RenderConfig(border_modules=0).border_modules == 0


def test_fractional_border_rejected():
    with pytest.raises(ConfigurationError):
        RenderConfig(border_modules=1.5)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        RenderConfig(module_scale=-1)


@pytest.mark.parametrize("color", ["#000", "#1a2b3c", "white", "rgb(10, 20, 30)"])
def test_colors_accepted(color):
    assert RenderConfig(foreground_color=color).foreground_color == color


@pytest.mark.parametrize("color", ["", "not-a-color", "#12345", "#00000080"])
def test_bad_or_translucent_colors_rejected(color):
    with pytest.raises(ConfigurationError):
        RenderConfig(background_color=color)


def test_config_is_frozen():
    config = RenderConfig()
    with pytest.raises(AttributeError):
        config.module_scale = 3  # type: ignore[misc]


class TestLogoConfig:
    def test_mode_coerced_from_string(self):
        logo = LogoConfig(href=RED_LOGO_URL, background="custom", custom_color="#00ff00")
        assert logo.background is LogoBackground.CUSTOM
        assert logo.backing_color == "#00ff00"

    def test_white_backing(self):
        assert LogoConfig(href=RED_LOGO_URL, background="white").backing_color == "#ffffff"

    def test_no_backing(self):
        assert LogoConfig(href=RED_LOGO_URL).backing_color is None

    @pytest.mark.parametrize("pct", [0, -5, 100.01, 150])
    def test_size_out_of_range(self, pct):
        with pytest.raises(ConfigurationError):
            LogoConfig(href=RED_LOGO_URL, size_percent=pct)

    def test_full_size_allowed(self):
        assert LogoConfig(href=RED_LOGO_URL, size_percent=100).size_percent == 100

    def test_unknown_mode(self):
        with pytest.raises(ConfigurationError):
            LogoConfig(href=RED_LOGO_URL, background="striped")

    def test_empty_href(self):
        with pytest.raises(ConfigurationError):
            LogoConfig(href="")

    @pytest.mark.parametrize(
        "href",
        ["http://169.254.169.254/latest/meta-data", "file:///etc/passwd", "logo.png", "DATA:image/png;base64,AAAA"],
    )
    def test_only_data_urls_accepted(self, href):
        with pytest.raises(ConfigurationError):
            LogoConfig(href=href)


class TestCaptionConfig:
    def test_text_is_stripped(self):
        caption = CaptionConfig(text="  Acme Corp  ", size="large")
        assert caption.text == "Acme Corp"
        assert caption.size is CaptionSize.LARGE

    def test_blank_text_rejected(self):
        with pytest.raises(ConfigurationError):
            CaptionConfig(text="   ")

    def test_unknown_size_rejected(self):
        with pytest.raises(ConfigurationError):
            CaptionConfig(text="Acme", size="huge")


class TestLogoDataUrl:
    def test_sniffs_png(self):
        url = logo_data_url(make_png())
        assert url.startswith("data:image/png;base64,")
        assert base64.b64decode(url.split(",", 1)[1]) == make_png()

    def test_explicit_media_type(self):
        assert logo_data_url(b"<svg/>", "image/svg+xml").startswith("data:image/svg+xml;base64,")

    def test_unrecognised_bytes(self):
        with pytest.raises(ConfigurationError):
            logo_data_url(b"definitely not an image")

    def test_empty(self):
        with pytest.raises(ConfigurationError):
            logo_data_url(b"")
