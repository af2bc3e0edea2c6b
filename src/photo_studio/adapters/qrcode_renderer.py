"""QR code rendering with the qrcode library."""

from dataclasses import dataclass

import qrcode
from qrcode.constants import ERROR_CORRECT_H

from photo_studio.adapters.local_file_storage import LocalFileStorage
from photo_studio.services.codes import CodeRenderer

_TARGET_WIDTH = 256
_BORDER = 4


@dataclass
class QrcodeRenderer(CodeRenderer):
    """Renders PNG QR codes into a local storage directory."""

    storage: LocalFileStorage
    width: int = _TARGET_WIDTH

    def render(self, name: str, content: str) -> str:
        """Write a QR code for content as name and return its URL."""
        qr = qrcode.QRCode(error_correction=ERROR_CORRECT_H, border=_BORDER)
        qr.add_data(content)
        qr.make(fit=True)
        qr.box_size = max(1, self.width // (qr.modules_count + 2 * _BORDER))
        image = qr.make_image(fill_color="black", back_color="white")
        image.save(str(self.storage.path_for(name)))
        return self.storage.url_for(name)
