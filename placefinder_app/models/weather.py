"""
weather.py - Current conditions for the selected location.

Shape sent by the details endpoint (OpenWeather units, metric):
    {"description": "clear sky", "icon": "01d", "temp": 18.2,
     "feels_like": 17.9, "humidity": 60, "wind_speed": 3.1}
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherSummary:
    description: str   = ""
    icon:        str   = ""
    temp:        float = 0.0
    feels_like:  float = 0.0
    humidity:    int   = 0
    wind_speed:  float = 0.0

    @classmethod
    def from_dict(cls, d: dict | None) -> "WeatherSummary | None":
        """None (or an empty object) means no weather card is rendered."""
        if not d:
            return None
        return cls(
            description = str(d.get("description") or ""),
            icon        = str(d.get("icon") or ""),
            temp        = float(d.get("temp") or 0),
            feels_like  = float(d.get("feels_like") or 0),
            humidity    = int(d.get("humidity") or 0),
            wind_speed  = float(d.get("wind_speed") or 0),
        )
