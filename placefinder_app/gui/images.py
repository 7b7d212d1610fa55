"""
images.py - Turns downloaded image bytes into a QPixmap.

Pillow does the decoding so formats Qt has no plugin for (WebP on some
builds, CMYK JPEGs from Wikimedia) still show up. Anything Pillow cannot
open returns None and the caller hides the image.
"""

import io
import logging

from PIL import Image, UnidentifiedImageError
from PySide6.QtGui import QImage, QPixmap

log = logging.getLogger(__name__)


def pixmap_from_bytes(data: bytes | None, max_size: int) -> QPixmap | None:
    if not data:
        return None
    try:
        img = Image.open(io.BytesIO(data))
        img = img.convert("RGBA")
    except (UnidentifiedImageError, OSError, ValueError) as e:
        log.debug("[images] Cannot decode image: %s", e)
        return None

    img.thumbnail((max_size, max_size), Image.LANCZOS)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    qimg = QImage.fromData(buf.getvalue())
    if qimg.isNull():
        return None
    return QPixmap.fromImage(qimg)
