import json

import pytest

from conftest import PARIS, PARIS_PLACES, PARIS_WEATHER

from placefinder_app.models.app_config import AppConfig, DEFAULT_MAP_URL
from placefinder_app.models.details import LocationDetails
from placefinder_app.models.location import LocationCandidate
from placefinder_app.models.place import Place
from placefinder_app.models.session import UISession
from placefinder_app.models.weather import WeatherSummary
from placefinder_app.renderer.messages import MESSAGES, get_messages


class TestLocationCandidate:
    def test_from_dict(self):
        loc = LocationCandidate.from_dict(dict(PARIS))
        assert loc.name == "Paris"
        assert loc.country == "France"
        assert loc.state is None
        assert loc.region == "France"

    def test_round_trip_keeps_exact_object(self):
        raw = {"name": "Springfield", "state": "IL", "country": "US",
               "lat": 39.8, "lon": -89.6, "extra": {"id": 7}}
        loc = LocationCandidate.from_dict(raw)
        assert loc.to_dict() is raw

    def test_to_dict_without_raw(self):
        loc = LocationCandidate(name="X", lat=1.0, lon=2.0, state="S")
        assert loc.to_dict() == {"name": "X", "lat": 1.0, "lon": 2.0, "state": "S"}

    def test_region_skips_empty_parts(self):
        loc = LocationCandidate.from_dict(
            {"name": "Austin", "state": "Texas", "country": "", "lat": 1, "lon": 2})
        assert loc.region == "Texas"


class TestWeatherSummary:
    def test_absent(self):
        assert WeatherSummary.from_dict(None) is None
        assert WeatherSummary.from_dict({}) is None

    def test_present(self):
        w = WeatherSummary.from_dict(PARIS_WEATHER)
        assert w.description == "clear sky"
        assert w.humidity == 60
        assert w.wind_speed == 3.1


class TestPlace:
    def test_optional_fields(self):
        p = Place.from_dict({"lat": 1, "lon": 2})
        assert p.name is None
        assert p.kinds is None
        assert p.category is None
        assert p.distance is None

    def test_missing_coordinates_rejected(self):
        with pytest.raises(KeyError):
            Place.from_dict({"name": "Nowhere", "lon": 2})
        with pytest.raises(KeyError):
            Place.from_dict({"name": "Nowhere", "lat": 1})

    def test_first_category(self):
        p = Place.from_dict({"lat": 1, "lon": 2, "kinds": " museums , cultural"})
        assert p.category == "museums"


class TestLocationDetails:
    def test_full_payload(self):
        selected = LocationCandidate.from_dict(dict(PARIS))
        details = LocationDetails.from_dict(
            {"location": dict(PARIS), "weather": PARIS_WEATHER, "places": PARIS_PLACES},
            selected=selected,
        )
        assert details.location.name == "Paris"
        assert details.weather.temp == 18.2
        assert len(details.places) == 2
        assert details.places[0].name == "Louvre"

    def test_missing_weather_and_places(self):
        selected = LocationCandidate.from_dict(dict(PARIS))
        details = LocationDetails.from_dict({"places": None}, selected=selected)
        assert details.location is selected
        assert details.weather is None
        assert details.places == ()


class TestUISession:
    def test_place_at(self):
        places = tuple(Place.from_dict(p) for p in PARIS_PLACES)
        session = UISession(places=places)
        assert session.place_at(0) is places[0]
        assert session.place_at(1) is places[1]
        assert session.place_at(2) is None
        assert session.place_at(-1) is None

    def test_next_replaces_list_and_bumps_generation(self):
        old = UISession(generation=3, places=(Place(lat=0, lon=0),))
        new = old.next()
        assert new.generation == 4
        assert new.places == ()
        assert new.place_at(0) is None
        assert old.place_at(0) is not None


class TestAppConfig:
    def test_defaults_when_missing(self, tmp_path):
        cfg = AppConfig.load(tmp_path / "nope.json")
        assert cfg.api_base == "http://localhost:8080/api"
        assert cfg.timeout == 10
        assert cfg.language == "en"
        assert cfg.map_url == DEFAULT_MAP_URL

    def test_overrides(self, tmp_path):
        path = tmp_path / "placefinder.json"
        path.write_text(json.dumps({
            "api_base": "https://places.example/api/",
            "timeout": 3, "language": "ru", "log_level": "debug",
        }), encoding="utf-8")
        cfg = AppConfig.load(path)
        assert cfg.api_base == "https://places.example/api"
        assert cfg.timeout == 3
        assert cfg.language == "ru"
        assert cfg.log_level == "DEBUG"

    def test_broken_file_keeps_defaults(self, tmp_path, caplog):
        path = tmp_path / "placefinder.json"
        path.write_text("{not json", encoding="utf-8")
        cfg = AppConfig.load(path)
        assert cfg.api_base == "http://localhost:8080/api"
        assert "Load error" in caplog.text


class TestMessages:
    def test_catalogs_share_keys(self):
        assert set(MESSAGES["ru"]) == set(MESSAGES["en"])

    def test_unknown_language_falls_back(self):
        assert get_messages("xx") is MESSAGES["en"]

    def test_russian(self):
        assert get_messages("ru")["enter_place"] == "Введите название места"
