"""QR generation: the code encodes only the material id; scanners look up the rest."""

import io
import logging

import qrcode
from qrcode.constants import ERROR_CORRECT_L
from qrcode.image.svg import SvgImage

logger = logging.getLogger(__name__)

MODULE_SIZE = 6
QUIET_ZONE = 2


class QRPayloadError(ValueError):
    """Raised when there is no material id to encode."""


def _build(material_id: str | None) -> qrcode.QRCode:
    payload = (material_id or "").strip()
    if not payload:
        raise QRPayloadError("Material ID is required to build a QR code")
    # version 1 holds a 7-character id; fit=True grows it for longer ids
    qr = qrcode.QRCode(
        version=1,
        error_correction=ERROR_CORRECT_L,
        box_size=MODULE_SIZE,
        border=QUIET_ZONE,
    )
    qr.add_data(payload)
    qr.make(fit=True)
    logger.debug("QR for %s: version %d", payload, qr.version)
    return qr


def build_qr_svg(material_id: str | None) -> str:
    """Standalone SVG document for *material_id*."""
    img = _build(material_id).make_image(image_factory=SvgImage)
    buffer = io.BytesIO()
    img.save(buffer)
    return buffer.getvalue().decode("utf-8")


def build_qr_png(material_id: str | None) -> bytes:
    """PNG bytes for *material_id* (black modules on white)."""
    img = _build(material_id).make_image(fill_color="black", back_color="white")
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()
