"""
place_overlay.py - Detail overlay for one point of interest.

Sits on top of the whole window (whatever screen is showing), dims it,
and shows a content card in the middle:

    ┌──────────────── backdrop ────────────────┐
    │   ┌──────────── card ──────────────┐     │
    │   │                       [Close]  │     │
    │   │  image (optional)              │     │
    │   │  title / category / info       │     │
    │   │  links                         │     │
    │   └────────────────────────────────┘     │
    └──────────────────────────────────────────┘

Clicking the backdrop outside the card or the close button emits
`closed`. Escape is handled by the main window so it works regardless
of focus.
"""

from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QPushButton,
    QScrollArea, QVBoxLayout, QWidget
)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QPainter

from placefinder_app.gui.images import pixmap_from_bytes

IMAGE_SIZE = 520


class PlaceOverlay(QWidget):

    closed = Signal()

    def __init__(self, close_text: str = "Close", parent=None):
        super().__init__(parent)
        self._image_url: str | None = None
        self._build_ui(close_text)
        self.hide()

    # ── UI ────────────────────────────────────────────────────────────────────

    def _build_ui(self, close_text: str):
        outer = QVBoxLayout(self)
        outer.setContentsMargins(60, 40, 60, 40)

        self._card = QFrame()
        self._card.setObjectName("placeCard")
        self._card.setStyleSheet(
            "#placeCard { background: white; border-radius: 8px; }"
        )
        card_layout = QVBoxLayout(self._card)

        top_row = QHBoxLayout()
        top_row.addStretch()
        self._close_btn = QPushButton(close_text)
        self._close_btn.clicked.connect(self.closed)
        top_row.addWidget(self._close_btn)
        card_layout.addLayout(top_row)

        content = QWidget()
        content_layout = QVBoxLayout(content)

        self._image = QLabel()
        self._image.setAlignment(Qt.AlignCenter)
        self._image.hide()
        content_layout.addWidget(self._image)

        self._body = QLabel()
        self._body.setTextFormat(Qt.RichText)
        self._body.setWordWrap(True)
        self._body.setOpenExternalLinks(True)
        self._body.setTextInteractionFlags(Qt.TextBrowserInteraction)
        self._body.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        content_layout.addWidget(self._body)
        content_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setWidget(content)
        card_layout.addWidget(scroll, stretch=1)

        outer.addWidget(self._card)

    # ── Public API ────────────────────────────────────────────────────────────

    def show_place(self, html: str, image_url: str | None):
        self._body.setText(html)
        self._image_url = image_url
        self._image.clear()
        self._image.hide()
        if self.parentWidget() is not None:
            self.setGeometry(self.parentWidget().rect())
        self.show()
        self.raise_()

    def set_image(self, url: str, data: bytes | None):
        """Ignored unless `url` is the image of the place on screen."""
        if url != self._image_url or self.isHidden():
            return
        pixmap = pixmap_from_bytes(data, IMAGE_SIZE)
        if pixmap is None:
            self._image.hide()
            return
        self._image.setPixmap(pixmap)
        self._image.show()

    def body_html(self) -> str:
        return self._body.text()

    def image_visible(self) -> bool:
        return not self._image.isHidden()

    def card_geometry(self):
        return self._card.geometry()

    # ── Events ────────────────────────────────────────────────────────────────

    def paintEvent(self, event):
        p = QPainter(self)
        p.fillRect(self.rect(), QColor(0, 0, 0, 140))
        p.end()

    def mousePressEvent(self, event):
        """A click that lands on the backdrop, not the card, closes."""
        if not self._card.geometry().contains(event.position().toPoint()):
            self.closed.emit()
        event.accept()
