"""
Views - builds the rich-text fragments shown in the Qt labels.

Qt labels understand a subset of HTML, so every fragment here is plain
markup. Any value that came from the user or the backend goes through
escape() before it is interpolated; nothing else is trusted.

Usage:
    views = ViewRenderer(get_messages("en"))
    label.setText(views.weather_html(details.location, details.weather))
"""

from placefinder_app.models.app_config import DEFAULT_ICON_URL, DEFAULT_MAP_URL
from placefinder_app.models.location import LocationCandidate
from placefinder_app.models.place import Place
from placefinder_app.models.weather import WeatherSummary
from placefinder_app.renderer.filters import (
    description_preview, escape, format_coords, format_number,
    normalize_url, round_half_up,
)

MUTED = "#80868b"
DIM   = "#5f6368"


class ViewRenderer:
    """
    Args:
        messages:  message catalog from get_messages()
        icon_url:  weather icon URL template with an {icon} placeholder
        map_url:   map search URL template with {lat} and {lon} placeholders
    """

    def __init__(
        self,
        messages: dict[str, str],
        icon_url: str = DEFAULT_ICON_URL,
        map_url: str = DEFAULT_MAP_URL,
    ):
        self.msg      = messages
        self.icon_url = icon_url
        self.map_url  = map_url

    # ── Search screen ─────────────────────────────────────────────────────────

    def error_html(self, message: str) -> str:
        return f'<span style="color: #d93025;">{escape(message)}</span>'

    def candidate_label(self, loc: LocationCandidate) -> str:
        """Plain text: 'Paris, France — 📍 48.8566, 2.3522'."""
        title = ", ".join(part for part in (loc.name, loc.region) if part)
        return f"{title} — 📍 {format_coords(loc.lat, loc.lon)}"

    def candidate_html(self, loc: LocationCandidate) -> str:
        return (
            f"<h3>{escape(loc.name)}</h3>"
            f"<p>{escape(loc.region)}</p>"
            f'<p style="font-size: 12px; color: {MUTED};">'
            f"📍 {format_coords(loc.lat, loc.lon)}</p>"
        )

    # ── Results screen: weather ───────────────────────────────────────────────

    def weather_icon_url(self, weather: WeatherSummary) -> str | None:
        if not weather.icon:
            return None
        return self.icon_url.format(icon=weather.icon)

    def weather_html(self, location: LocationCandidate,
                     weather: WeatherSummary | None) -> str:
        """Empty string when there is no weather; the panel stays blank."""
        if weather is None:
            return ""

        rows = [
            (self.msg["temperature"], f"{round_half_up(weather.temp)}°C"),
            (self.msg["feels_like"],  f"{round_half_up(weather.feels_like)}°C"),
            (self.msg["humidity"],    f"{weather.humidity}%"),
            (self.msg["wind"],
             f"{format_number(weather.wind_speed)} {self.msg['wind_unit']}"),
        ]
        cells = "".join(
            f'<td style="padding-right: 18px;">'
            f'<span style="color: {DIM}; font-size: 11px;">{escape(label)}</span><br>'
            f"<b>{escape(value)}</b></td>"
            for label, value in rows
        )
        return (
            f'<div style="font-size: 20px; font-weight: bold;">{escape(location.name)}</div>'
            f'<div style="color: {DIM};">{escape(weather.description)}</div>'
            f"<table><tr>{cells}</tr></table>"
        )

    # ── Results screen: places ────────────────────────────────────────────────

    def places_header(self, count: int) -> str:
        return self.msg["places_header"].format(count=count)

    def no_places_html(self) -> str:
        return f'<p style="color: {DIM};">{escape(self.msg["no_places"])}</p>'

    def place_title(self, place: Place) -> str:
        return place.name or self.msg["untitled"]

    def place_preview_html(self, place: Place) -> str:
        if not place.description:
            return (f'<span style="color: {MUTED};">'
                    f'{escape(self.msg["click_for_details"])}</span>')
        return escape(description_preview(place.description))

    def place_row_html(self, place: Place) -> str:
        html = f"<b>{escape(self.place_title(place))}</b>"
        if place.category:
            html += f'&nbsp;&nbsp;<span style="color: #1a73e8;">{escape(place.category)}</span>'
        html += f"<br>{self.place_preview_html(place)}"
        return html

    # ── Modal ─────────────────────────────────────────────────────────────────

    def place_links(self, place: Place) -> list[tuple[str, str]]:
        """(label, url) pairs. The map link is always last and always present."""
        links = []
        if place.website:
            links.append((self.msg["website"], normalize_url(place.website)))
        if place.wikipedia:
            links.append((self.msg["wikipedia"], normalize_url(place.wikipedia)))
        links.append((self.msg["map"], self.map_url.format(
            lat=format_number(place.lat), lon=format_number(place.lon))))
        return links

    def place_detail_html(self, place: Place) -> str:
        """Everything in the overlay except the image, which loads separately."""
        html = f'<div style="font-size: 20px; font-weight: bold;">{escape(self.place_title(place))}</div>'

        if place.category:
            html += f'<p style="color: #1a73e8;">{escape(place.category)}</p>'

        if place.description:
            body = escape(place.description).replace("\n", "<br>")
            html += f"<h3>{escape(self.msg['information'])}</h3><p>{body}</p>"

        links = self.place_links(place)
        if links:
            anchors = "&nbsp;&nbsp;&nbsp;".join(
                f'<a href="{escape(url)}">{escape(label)}</a>' for label, url in links
            )
            html += f"<h3>{escape(self.msg['links'])}</h3><p>{anchors}</p>"

        return html
