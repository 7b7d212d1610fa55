"""
location.py - One geocoding result returned by the search endpoint.

The backend sends:
    {"name": "Paris", "country": "France", "lat": 48.8566, "lon": 2.3522}
`state` and `country` are optional.

The decoded JSON object is kept as-is in `raw` and sent back verbatim
in the details request, so nothing is dropped, added or recomputed on
the way through.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class LocationCandidate:
    name:    str
    lat:     float
    lon:     float
    state:   str | None = None
    country: str | None = None
    raw:     dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def region(self) -> str:
        """Comma-joined non-empty subset of state and country."""
        return ", ".join(part for part in (self.state, self.country) if part)

    # ── Serialization ─────────────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, d: dict) -> "LocationCandidate":
        """Raises KeyError/TypeError/ValueError on a malformed object."""
        return cls(
            name    = str(d.get("name") or ""),
            lat     = float(d["lat"]),
            lon     = float(d["lon"]),
            state   = d.get("state") or None,
            country = d.get("country") or None,
            raw     = d,
        )

    def to_dict(self) -> dict:
        if self.raw:
            return self.raw
        d = {"name": self.name, "lat": self.lat, "lon": self.lon}
        if self.country:
            d["country"] = self.country
        if self.state:
            d["state"] = self.state
        return d
