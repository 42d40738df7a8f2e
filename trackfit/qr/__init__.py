"""QR codes that carry a material id."""

from trackfit.qr.generator import QRPayloadError, build_qr_png, build_qr_svg

__all__ = ["QRPayloadError", "build_qr_png", "build_qr_svg"]
