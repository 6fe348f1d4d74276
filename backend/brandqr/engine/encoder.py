"""QR encoder capability.

The pipeline only depends on ``Encoder``: any callable
``(text, ecc) -> ModuleMatrix``. ``encode_text`` is the default
implementation backed by the ``qrcode`` package.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np
import qrcode
from qrcode.constants import (
    ERROR_CORRECT_H,
    ERROR_CORRECT_L,
    ERROR_CORRECT_M,
    ERROR_CORRECT_Q,
)
from qrcode.exceptions import DataOverflowError

from brandqr.errors import EncodingError
from brandqr.models.qr import EccLevel, ModuleMatrix

logger = logging.getLogger(__name__)

Encoder = Callable[[str, EccLevel], ModuleMatrix]

_ECC_MAP = {
    EccLevel.LOW: ERROR_CORRECT_L,  # ~7%
    EccLevel.MEDIUM: ERROR_CORRECT_M,  # ~15%
    EccLevel.QUARTILE: ERROR_CORRECT_Q,  # ~25%
    EccLevel.HIGH: ERROR_CORRECT_H,  # ~30%
}


def encode_text(text: str, ecc: EccLevel) -> ModuleMatrix:
    """Encode ``text`` into the smallest QR version that fits."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=_ECC_MAP[EccLevel.parse(ecc)],
        box_size=1,
        border=0,
    )
    qr.add_data(text)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as e:
        raise EncodingError(f"Text is too long for a QR code at {EccLevel.parse(ecc).value} level") from e

    matrix = ModuleMatrix(np.array(qr.get_matrix(), dtype=bool))
    logger.debug("Encoded %d chars at %s -> %d modules", len(text), ecc, matrix.size)
    return matrix
