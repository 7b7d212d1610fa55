import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from placefinder_app.errors import RequestFailure
from placefinder_app.gui.controller import ExplorerController, Screen
from placefinder_app.models.details import LocationDetails
from placefinder_app.models.location import LocationCandidate
from placefinder_app.models.place import Place
from placefinder_app.models.weather import WeatherSummary
from placefinder_app.renderer.messages import get_messages
from placefinder_app.renderer.views import ViewRenderer


# ── Dispatchers ───────────────────────────────────────────────────────────────

def sync_dispatch(fn, arg, on_success, on_failure):
    """Runs the request inline, the way RequestWorker would, minus the thread."""
    try:
        result = fn(arg)
    except Exception as e:
        on_failure(e)
        return
    on_success(result)


class DeferredDispatcher:
    """Holds requests until the test resolves them."""

    def __init__(self):
        self.pending = []

    def __call__(self, fn, arg, on_success, on_failure):
        self.pending.append((fn, arg, on_success, on_failure))

    def run(self, index=0):
        fn, arg, on_success, on_failure = self.pending.pop(index)
        sync_dispatch(fn, arg, on_success, on_failure)

    def run_all(self):
        while self.pending:
            self.run()


# ── Fakes ─────────────────────────────────────────────────────────────────────

class FakeClient:
    def __init__(self):
        self.search_results: list = []
        self.details: LocationDetails | None = None
        self.search_error: Exception | None = None
        self.details_error: Exception | None = None
        self.images: dict[str, bytes] = {}
        self.search_calls: list[str] = []
        self.details_calls: list[LocationCandidate] = []
        self.image_calls: list[str] = []

    def search(self, query):
        self.search_calls.append(query)
        if self.search_error:
            raise self.search_error
        return self.search_results

    def location_details(self, location):
        self.details_calls.append(location)
        if self.details_error:
            raise self.details_error
        return self.details

    def fetch_image(self, url):
        self.image_calls.append(url)
        if url not in self.images:
            raise RequestFailure("404 Client Error: Not Found")
        return self.images[url]


class RecordingView:
    """Stands in for MainWindow and remembers what is on screen."""

    def __init__(self):
        self.screen = Screen.SEARCH
        self.busy = False
        self.busy_history: list[bool] = []
        self.error: str | None = None
        self.candidates: list = []
        self.weather = None
        self.weather_location = None
        self.places: tuple = ()
        self.place: Place | None = None
        self.weather_icon: tuple | None = None
        self.place_image: tuple | None = None

    def show_screen(self, screen):
        self.screen = screen

    def set_search_busy(self, busy):
        self.busy = busy
        self.busy_history.append(busy)

    def show_error(self, message):
        self.error = message

    def clear_error(self):
        self.error = None

    def show_candidates(self, candidates):
        self.candidates = list(candidates)

    def clear_candidates(self):
        self.candidates = []

    def show_weather(self, location, weather):
        self.weather_location = location
        self.weather = weather

    def set_weather_icon(self, url, data):
        self.weather_icon = (url, data)

    def show_places(self, places):
        self.places = places

    def show_place(self, place):
        self.place = place

    def set_place_image(self, url, data):
        self.place_image = (url, data)

    def hide_place(self):
        self.place = None


# ── Sample data ───────────────────────────────────────────────────────────────

PARIS = {"name": "Paris", "country": "France", "lat": 48.8566, "lon": 2.3522}

PARIS_WEATHER = {
    "description": "clear sky", "icon": "01d", "temp": 18.2,
    "feels_like": 17.9, "humidity": 60, "wind_speed": 3.1,
}

PARIS_PLACES = [
    {
        "xid": "W123", "name": "Louvre", "kinds": "museums,cultural,interesting_places",
        "lat": 48.8606, "lon": 2.3376,
        "description": "Art museum\n\nHome of the Mona Lisa\nThird line",
        "image": "https://img.example/louvre.jpg",
        "website": "louvre.fr",
        "wikipedia": "https://en.wikipedia.org/wiki/Louvre",
    },
    {"xid": "N9", "lat": 48.85, "lon": 2.35},
]


@pytest.fixture
def messages():
    return get_messages("en")


@pytest.fixture
def views(messages):
    return ViewRenderer(messages)


@pytest.fixture
def paris():
    return LocationCandidate.from_dict(dict(PARIS))


@pytest.fixture
def paris_details(paris):
    return LocationDetails(
        location=paris,
        weather=WeatherSummary.from_dict(PARIS_WEATHER),
        places=tuple(Place.from_dict(p) for p in PARIS_PLACES),
    )


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def controller(view, client, views):
    return ExplorerController(view, client, views, dispatcher=sync_dispatch)
