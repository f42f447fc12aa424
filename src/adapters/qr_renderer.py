"""Terminal QR rendering (qrcode)."""

from __future__ import annotations

import io

import qrcode


class TerminalQrRenderer:
    """Half-block ASCII QR code, small enough for a regular terminal."""

    def __init__(self, border: int = 1) -> None:
        self._border = border

    def render(self, text: str) -> str:
        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=1,
            border=self._border,
        )
        qr.add_data(text)
        qr.make(fit=True)

        output = io.StringIO()
        qr.print_ascii(out=output, invert=True)
        return output.getvalue()
