"""
controller.py - The screen state machine behind the main window.

    SEARCH ──search()──▶ candidate list ──select_location()──▶ LOADING
       ▲                                                         │
       │  go_back()                              ok ▼            │ failed
       └──────────────── RESULTS ◀───────────────────            │
       ▲                    │ show_modal(i) / close_modal()       │
       └────────────────────┴─────────────────────────────────────┘

The controller never touches widgets directly. It drives a view object
(the main window in the app, a recorder in tests) through these methods:

    show_screen(screen)              set_search_busy(busy)
    show_error(message)              clear_error()
    show_candidates(candidates)      clear_candidates()
    show_weather(location, weather)  set_weather_icon(url, data | None)
    show_places(places)
    show_place(place)                set_place_image(url, data | None)
    hide_place()

Requests run off the GUI thread through a dispatcher:

    dispatcher(fn, arg, on_success, on_failure)

The default dispatcher starts a RequestWorker (QThread) per request.
Tests pass one that calls fn(arg) inline.
"""

import logging
from enum import Enum
from typing import Callable

from PySide6.QtCore import QThread, Signal

from placefinder_app.errors import ValidationError
from placefinder_app.models.details import LocationDetails
from placefinder_app.models.location import LocationCandidate
from placefinder_app.models.session import UISession
from placefinder_app.renderer.views import ViewRenderer
from placefinder_app.sources.api_client import PlacesApiClient

log = logging.getLogger(__name__)

Dispatcher = Callable[[Callable, object, Callable, Callable], None]


class Screen(Enum):
    SEARCH  = 0
    LOADING = 1
    RESULTS = 2


def validate_query(raw: str, message: str) -> str:
    """Trimmed query, or ValidationError(message) when nothing is left."""
    query = (raw or "").strip()
    if not query:
        raise ValidationError(message)
    return query


# ── Background worker: one request ────────────────────────────────────────────

class RequestWorker(QThread):
    """Runs fn(arg) on a background thread and reports the outcome."""
    succeeded = Signal(object)   # result
    failed    = Signal(object)   # exception

    def __init__(self, fn: Callable, arg: object):
        super().__init__()
        self.fn  = fn
        self.arg = arg

    def run(self):
        try:
            result = self.fn(self.arg)
        except Exception as e:
            self.failed.emit(e)
            return
        self.succeeded.emit(result)


class ThreadDispatcher:
    """Starts a RequestWorker per request and keeps it alive until it ends."""

    def __init__(self):
        self._workers: list[RequestWorker] = []

    def __call__(self, fn, arg, on_success, on_failure):
        worker = RequestWorker(fn, arg)
        self._workers.append(worker)
        worker.succeeded.connect(on_success)
        worker.failed.connect(on_failure)

        def _done():
            if worker in self._workers:
                self._workers.remove(worker)
            worker.deleteLater()

        worker.finished.connect(_done)
        worker.start()

    @property
    def active(self) -> int:
        return len(self._workers)

    def shutdown(self, timeout_ms: int = 5000):
        """Block until running workers end so none is destroyed mid-run."""
        for worker in list(self._workers):
            if not worker.wait(timeout_ms):
                log.warning("[ThreadDispatcher] Worker still running after %d ms", timeout_ms)


# ── Controller ────────────────────────────────────────────────────────────────

class ExplorerController:
    """
    Args:
        view:        object implementing the view methods listed above
        client:      PlacesApiClient (or anything with the same methods)
        views:       ViewRenderer, for messages and icon URLs
        dispatcher:  how requests are run; defaults to ThreadDispatcher()
    """

    def __init__(
        self,
        view,
        client: PlacesApiClient,
        views: ViewRenderer,
        dispatcher: Dispatcher | None = None,
    ):
        self.view       = view
        self.client     = client
        self.views      = views
        self.msg        = views.msg
        self._dispatch  = dispatcher or ThreadDispatcher()

        self.screen: Screen = Screen.SEARCH
        self._session       = UISession()
        self._search_in_flight  = False
        self._details_in_flight = False

    @property
    def session(self) -> UISession:
        return self._session

    @property
    def searching(self) -> bool:
        return self._search_in_flight

    @property
    def loading_details(self) -> bool:
        return self._details_in_flight

    # ── View router ───────────────────────────────────────────────────────────

    def show_screen(self, screen: Screen):
        self.screen = screen
        self.view.show_screen(screen)

    # ── Search flow ───────────────────────────────────────────────────────────

    def search(self, raw_query: str):
        try:
            query = validate_query(raw_query, self.msg["enter_place"])
        except ValidationError as e:
            self.view.show_error(e.message)
            return

        if self._search_in_flight:
            log.debug("[Controller] Search already running, ignoring %r", query)
            return

        self._search_in_flight = True
        self.view.set_search_busy(True)
        log.info("[Controller] Searching for %r", query)
        self._dispatch(self.client.search, query,
                       self._on_search_done, self._on_search_failed)

    def _on_search_done(self, candidates: list):
        try:
            if not candidates:
                self.view.clear_candidates()
                self.view.show_error(self.msg["no_locations"])
                return
            self.view.show_candidates(candidates)
            self.view.clear_error()
        finally:
            self._finish_search()

    def _on_search_failed(self, error: Exception):
        try:
            log.warning("[Controller] Search failed: %s", error)
            self.view.clear_candidates()
            self.view.show_error(self.msg["error"].format(detail=error))
        finally:
            self._finish_search()

    def _finish_search(self):
        self._search_in_flight = False
        self.view.set_search_busy(False)

    # ── Detail flow ───────────────────────────────────────────────────────────

    def select_location(self, location: LocationCandidate):
        if self._details_in_flight:
            log.debug("[Controller] Details already loading, ignoring %s", location.name)
            return

        # A new run invalidates whatever places list was on screen
        self._session = self._session.next()
        generation = self._session.generation

        self._details_in_flight = True
        self.show_screen(Screen.LOADING)
        log.info("[Controller] Loading details for %s", location.name)
        self._dispatch(
            self.client.location_details, location,
            lambda details: self._on_details_done(generation, details),
            lambda error: self._on_details_failed(generation, error),
        )

    def _on_details_done(self, generation: int, details: LocationDetails):
        self._details_in_flight = False
        if generation != self._session.generation:
            log.debug("[Controller] Dropping stale details for %s", details.location.name)
            return

        self._session = UISession(generation=generation, places=details.places)
        self.view.show_weather(details.location, details.weather)
        self.view.show_places(details.places)
        self.show_screen(Screen.RESULTS)

        if details.weather is not None:
            icon_url = self.views.weather_icon_url(details.weather)
            if icon_url:
                self._load_image(icon_url, self.view.set_weather_icon)

    def _on_details_failed(self, generation: int, error: Exception):
        self._details_in_flight = False
        if generation != self._session.generation:
            log.debug("[Controller] Dropping stale details failure: %s", error)
            return
        log.warning("[Controller] Details failed: %s", error)
        self.go_back()
        self.view.show_error(self.msg["error"].format(detail=error))

    # ── Modal flow ────────────────────────────────────────────────────────────

    def show_modal(self, index: int) -> bool:
        place = self._session.place_at(index)
        if place is None:
            log.warning("[Controller] No place at index %s (%d on screen)",
                        index, len(self._session.places))
            return False

        self.view.show_place(place)
        if place.image:
            self._load_image(place.image, self.view.set_place_image)
        return True

    def close_modal(self):
        self.view.hide_place()

    # ── Navigation ────────────────────────────────────────────────────────────

    def go_back(self):
        self._session = self._session.next()
        self.view.hide_place()
        self.show_screen(Screen.SEARCH)
        self.view.clear_candidates()
        self.view.clear_error()

    def shutdown(self):
        """Wait for in-flight requests; called when the window closes."""
        shutdown = getattr(self._dispatch, "shutdown", None)
        if shutdown is not None:
            shutdown()

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _load_image(self, url: str, deliver: Callable[[str, bytes | None], None]):
        """Fire-and-forget download; failures deliver None so the view hides it."""
        def _failed(error: Exception):
            log.debug("[Controller] Image %s not loaded: %s", url, error)
            deliver(url, None)

        self._dispatch(self.client.fetch_image, url,
                       lambda data: deliver(url, data), _failed)
