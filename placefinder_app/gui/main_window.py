"""
main_window.py - The main application window for Placefinder.

Three screens in a stack, exactly one visible at a time:
    ┌──────────────────────────────┐
    │  SEARCH:  [ query ] [Search] │
    │           error line         │
    │           candidate list     │
    ├──────────────────────────────┤
    │  LOADING: spinner            │
    ├──────────────────────────────┤
    │  RESULTS: [← Back]           │
    │           weather card       │
    │           places list        │
    └──────────────────────────────┘
plus a PlaceOverlay that covers everything when a place is opened.

The window only builds widgets and implements the view methods the
ExplorerController calls; all decisions live in the controller.
"""

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QLineEdit, QListWidget, QListWidgetItem,
    QStackedWidget, QGroupBox, QProgressBar, QFrame
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut

from placefinder_app.gui.controller import ExplorerController, Screen
from placefinder_app.gui.images import pixmap_from_bytes
from placefinder_app.gui.place_overlay import PlaceOverlay
from placefinder_app.models.app_config import AppConfig
from placefinder_app.models.location import LocationCandidate
from placefinder_app.models.place import Place
from placefinder_app.models.weather import WeatherSummary
from placefinder_app.renderer.filters import escape
from placefinder_app.renderer.messages import get_messages
from placefinder_app.renderer.views import ViewRenderer
from placefinder_app.sources.api_client import PlacesApiClient

ICON_SIZE = 80


def _rich_label(html: str = "") -> QLabel:
    """A rich-text label that lets clicks through to the list row under it."""
    label = QLabel(html)
    label.setTextFormat(Qt.RichText)
    label.setWordWrap(True)
    label.setAttribute(Qt.WA_TransparentForMouseEvents)
    label.setContentsMargins(8, 6, 8, 6)
    return label


# ── Main Window ───────────────────────────────────────────────────────────────

class MainWindow(QMainWindow):
    """
    Args:
        cfg:         AppConfig; defaults to AppConfig.load()
        client:      API client; defaults to a PlacesApiClient built from cfg
        dispatcher:  request dispatcher handed to the controller (tests)
    """

    def __init__(self, cfg: AppConfig | None = None, client=None, dispatcher=None):
        super().__init__()
        self._cfg   = cfg or AppConfig.load()
        self._msg   = get_messages(self._cfg.language)
        self._views = ViewRenderer(self._msg, self._cfg.icon_url, self._cfg.map_url)

        self.setWindowTitle(self._msg["window_title"])
        self.setMinimumSize(640, 560)

        # Runtime state
        self._weather_icon_url: str | None = None

        self._build_ui()

        self.controller = ExplorerController(
            view       = self,
            client     = client or PlacesApiClient(self._cfg.api_base, self._cfg.timeout),
            views      = self._views,
            dispatcher = dispatcher,
        )
        self._connect_signals()
        self.show_screen(Screen.SEARCH)

    # ── UI Construction ───────────────────────────────────────────────────────

    def _build_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(12, 12, 12, 12)

        self._stack = QStackedWidget()
        # Page order must match Screen values
        self._stack.addWidget(self._build_search_page())
        self._stack.addWidget(self._build_loading_page())
        self._stack.addWidget(self._build_results_page())
        root.addWidget(self._stack)

        self._overlay = PlaceOverlay(self._msg["close"], parent=central)

    def _build_search_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)

        title = QLabel(self._msg["search_title"])
        title.setStyleSheet("font-size: 20px; font-weight: bold;")
        layout.addWidget(title)

        search_row = QHBoxLayout()
        self._search_input = QLineEdit()
        self._search_input.setPlaceholderText(self._msg["search_hint"])
        search_row.addWidget(self._search_input, stretch=1)
        self._search_btn = QPushButton(self._msg["search"])
        self._search_btn.setStyleSheet(
            "font-weight: bold; background: #1a73e8; color: white; padding: 4px 16px;"
        )
        search_row.addWidget(self._search_btn)
        layout.addLayout(search_row)

        self._error = QLabel()
        self._error.setTextFormat(Qt.RichText)
        self._error.setWordWrap(True)
        self._error.hide()
        layout.addWidget(self._error)

        self._locations = QListWidget()
        self._locations.setSpacing(2)
        layout.addWidget(self._locations, stretch=1)
        return page

    def _build_loading_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.addStretch()
        label = QLabel(self._msg["loading"])
        label.setAlignment(Qt.AlignCenter)
        layout.addWidget(label)
        busy = QProgressBar()
        busy.setRange(0, 0)   # indeterminate
        busy.setFixedHeight(6)
        busy.setTextVisible(False)
        layout.addWidget(busy)
        layout.addStretch()
        return page

    def _build_results_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)

        back_row = QHBoxLayout()
        self._back_btn = QPushButton(self._msg["back"])
        back_row.addWidget(self._back_btn)
        back_row.addStretch()
        layout.addLayout(back_row)

        weather_box = QFrame()
        weather_row = QHBoxLayout(weather_box)
        weather_row.setContentsMargins(0, 0, 0, 0)
        self._weather = QLabel()
        self._weather.setTextFormat(Qt.RichText)
        self._weather.setWordWrap(True)
        weather_row.addWidget(self._weather, stretch=1)
        self._weather_icon = QLabel()
        self._weather_icon.setFixedSize(ICON_SIZE, ICON_SIZE)
        self._weather_icon.hide()
        weather_row.addWidget(self._weather_icon, alignment=Qt.AlignTop)
        layout.addWidget(weather_box)

        places_box = QGroupBox()
        places_layout = QVBoxLayout(places_box)
        self._places_header = QLabel()
        self._places_header.setTextFormat(Qt.RichText)
        places_layout.addWidget(self._places_header)
        self._places = QListWidget()
        self._places.setSpacing(2)
        places_layout.addWidget(self._places, stretch=1)
        layout.addWidget(places_box, stretch=1)
        return page

    def _connect_signals(self):
        # Button and Enter are the same trigger; the controller guards both
        self._search_btn.clicked.connect(self._on_search)
        self._search_input.returnPressed.connect(self._on_search)
        self._back_btn.clicked.connect(self.controller.go_back)
        self._locations.itemClicked.connect(self._on_location_clicked)
        self._places.itemClicked.connect(self._on_place_clicked)
        self._overlay.closed.connect(self.controller.close_modal)

        self._escape = QShortcut(QKeySequence(Qt.Key_Escape), self)
        self._escape.setContext(Qt.ApplicationShortcut)
        self._escape.activated.connect(self.controller.close_modal)

    # ── Slots ─────────────────────────────────────────────────────────────────

    def _on_search(self, *_):
        self.controller.search(self._search_input.text())

    def _on_location_clicked(self, item: QListWidgetItem):
        self.controller.select_location(item.data(Qt.UserRole))

    def _on_place_clicked(self, item: QListWidgetItem):
        self.controller.show_modal(item.data(Qt.UserRole))

    def closeEvent(self, event):
        self.controller.shutdown()
        super().closeEvent(event)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if not self._overlay.isHidden():
            self._overlay.setGeometry(self.centralWidget().rect())

    # ── View interface (called by ExplorerController) ─────────────────────────

    def show_screen(self, screen: Screen):
        self._stack.setCurrentIndex(screen.value)

    def set_search_busy(self, busy: bool):
        self._search_btn.setEnabled(not busy)
        self._search_btn.setText(self._msg["searching"] if busy else self._msg["search"])

    def show_error(self, message: str):
        self._error.setText(self._views.error_html(message))
        self._error.show()

    def clear_error(self):
        self._error.clear()
        self._error.hide()

    def show_candidates(self, candidates: list[LocationCandidate]):
        self._locations.clear()
        for loc in candidates:
            item = QListWidgetItem()
            item.setData(Qt.UserRole, loc)
            item.setToolTip(self._views.candidate_label(loc))
            label = _rich_label(self._views.candidate_html(loc))
            item.setSizeHint(label.sizeHint())
            self._locations.addItem(item)
            self._locations.setItemWidget(item, label)

    def clear_candidates(self):
        self._locations.clear()

    def show_weather(self, location: LocationCandidate, weather: WeatherSummary | None):
        self._weather_icon.clear()
        self._weather_icon.hide()
        if weather is None:
            self._weather_icon_url = None
            self._weather.clear()
            return
        self._weather_icon_url = self._views.weather_icon_url(weather)
        self._weather.setText(self._views.weather_html(location, weather))

    def set_weather_icon(self, url: str, data: bytes | None):
        if url != self._weather_icon_url:
            return
        pixmap = pixmap_from_bytes(data, ICON_SIZE)
        if pixmap is None:
            self._weather_icon.hide()
            return
        self._weather_icon.setPixmap(pixmap)
        self._weather_icon.show()

    def show_places(self, places: tuple[Place, ...]):
        self._places.clear()
        if not places:
            self._places_header.setText(self._views.no_places_html())
            self._places.hide()
            return

        header = self._views.places_header(len(places))
        self._places_header.setText(f'<b style="font-size: 15px;">{escape(header)}</b>')
        for i, place in enumerate(places):
            item = QListWidgetItem()
            item.setData(Qt.UserRole, i)
            label = _rich_label(self._views.place_row_html(place))
            item.setSizeHint(label.sizeHint())
            self._places.addItem(item)
            self._places.setItemWidget(item, label)
        self._places.show()

    def show_place(self, place: Place):
        self._overlay.show_place(self._views.place_detail_html(place), place.image)

    def set_place_image(self, url: str, data: bytes | None):
        self._overlay.set_image(url, data)

    def hide_place(self):
        self._overlay.hide()
