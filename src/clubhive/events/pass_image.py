from __future__ import annotations

import io

import qrcode

from ..core.exceptions import ValidationError


def render_pass_png(token: str) -> bytes:
    """Render an entry pass token as a scannable PNG QR code."""
    token = (token or "").strip()
    if not token:
        raise ValidationError("pass token is required", field="pass_token")

    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(token)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
