"""Error taxonomy shared by the engine and the API layer."""

from __future__ import annotations


class BrandQrError(Exception):
    """Base class for all BrandQR errors."""


class ConfigurationError(BrandQrError, ValueError):
    """Invalid render configuration (non-positive scale, negative border, bad color)."""


class EncodingError(BrandQrError):
    """The QR encoder could not produce a module matrix for the input."""


class ExportError(BrandQrError):
    """Raster export failed. The vector image it was given stays valid."""


class SessionNotFoundError(BrandQrError, KeyError):
    """No generation result is stored under the requested session id."""
