"""
details.py - The aggregate payload returned by /location/details.

    {
        "location": {...},          ← echo of the selected candidate
        "weather":  {...} | null,   ← optional
        "places":   [...] | null,   ← optional
        "error":    "..."           ← optional soft error from the backend
    }
"""

from dataclasses import dataclass, field

from placefinder_app.models.location import LocationCandidate
from placefinder_app.models.place import Place
from placefinder_app.models.weather import WeatherSummary


@dataclass(frozen=True)
class LocationDetails:
    location: LocationCandidate
    weather:  WeatherSummary | None = None
    places:   tuple[Place, ...]    = field(default_factory=tuple)
    error:    str | None           = None

    @classmethod
    def from_dict(cls, d: dict, selected: LocationCandidate) -> "LocationDetails":
        """
        Build from a decoded response. `selected` stands in for the
        location when the backend does not echo one back.
        """
        loc = d.get("location")
        location = LocationCandidate.from_dict(loc) if loc else selected
        return cls(
            location = location,
            weather  = WeatherSummary.from_dict(d.get("weather")),
            places   = tuple(Place.from_dict(p) for p in d.get("places") or []),
            error    = d.get("error") or None,
        )
