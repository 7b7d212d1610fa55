"""
place.py - A point of interest near the selected location.

Every field except the coordinates is optional. `kinds` is a
comma-separated category string ("museums,cultural,interesting_places");
only its first token is shown.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Place:
    lat:         float
    lon:         float
    name:        str | None   = None
    kinds:       str | None   = None
    description: str | None   = None
    image:       str | None   = None
    website:     str | None   = None
    wikipedia:   str | None   = None
    xid:         str | None   = None
    distance:    float | None = None

    @property
    def category(self) -> str | None:
        if not self.kinds:
            return None
        return self.kinds.split(",")[0].strip()

    @classmethod
    def from_dict(cls, d: dict) -> "Place":
        """Raises KeyError/TypeError/ValueError when coordinates are missing or bad."""
        distance = d.get("distance")
        return cls(
            lat         = float(d["lat"]),
            lon         = float(d["lon"]),
            name        = d.get("name") or None,
            kinds       = d.get("kinds") or None,
            description = d.get("description") or None,
            image       = d.get("image") or None,
            website     = d.get("website") or None,
            wikipedia   = d.get("wikipedia") or None,
            xid         = d.get("xid") or None,
            distance    = float(distance) if distance is not None else None,
        )
