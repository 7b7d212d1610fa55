"""
api_client.py - Talks to the Placefinder backend.

Two JSON POST endpoints, relative to the configured base URL:

    POST {base}/search             {"query": "Paris"}
        → [{"name": "Paris", "country": "France", "lat": ..., "lon": ...}, ...]
          (or null when nothing matched)

    POST {base}/location/details   {"location": {...candidate...}}
        → {"location": {...}, "weather": {...} | null, "places": [...] | null}

Plus plain GETs for images (weather icons, place photos).

Connection errors, timeouts, non-2xx statuses and bodies that are not
the JSON we expect are all raised as RequestFailure, with a message
suitable for showing to the user.

Usage:
    client = PlacesApiClient("http://localhost:8080/api")
    candidates = client.search("Paris")
    details = client.location_details(candidates[0])
"""

import logging

import requests

from placefinder_app.errors import RequestFailure
from placefinder_app.models.details import LocationDetails
from placefinder_app.models.location import LocationCandidate

log = logging.getLogger(__name__)


class PlacesApiClient:
    """
    Args:
        base_url:  API root, e.g. "http://localhost:8080/api"
        timeout:   HTTP timeout in seconds for every request
        session:   Optional requests.Session (shared connection pool)
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = 10,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout  = timeout
        self.session  = session or requests.Session()

    # ── Endpoints ─────────────────────────────────────────────────────────────

    def search(self, query: str) -> list[LocationCandidate]:
        """Geocode a query. [] when the backend finds nothing."""
        data = self._post("/search", {"query": query})
        if not data:
            return []
        if not isinstance(data, list):
            raise RequestFailure(f"unexpected search response: {type(data).__name__}")
        try:
            return [LocationCandidate.from_dict(d) for d in data]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise RequestFailure(f"malformed location in search response: {e}") from e

    def location_details(self, location: LocationCandidate) -> LocationDetails:
        """Weather + nearby places for the exact candidate the user picked."""
        data = self._post("/location/details", {"location": location.to_dict()})
        if not isinstance(data, dict):
            raise RequestFailure(f"unexpected details response: {type(data).__name__}")
        try:
            details = LocationDetails.from_dict(data, selected=location)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise RequestFailure(f"malformed details response: {e}") from e
        if details.error:
            log.warning("[PlacesApiClient] Backend reported: %s", details.error)
        return details

    def fetch_image(self, url: str) -> bytes:
        """Raw bytes of an image. Raises RequestFailure on any HTTP error."""
        log.debug("[PlacesApiClient] GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise RequestFailure(str(e)) from e
        return resp.content

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _post(self, path: str, payload: dict) -> object:
        url = self.base_url + path
        log.debug("[PlacesApiClient] POST %s %s", url, payload)
        try:
            resp = self.session.post(url, json=payload, timeout=self.timeout)
            resp.raise_for_status()   # raises HTTPError on 4xx/5xx
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            log.warning("[PlacesApiClient] %s failed: %s", path, e)
            raise RequestFailure(str(e), status_code=status) from e
        except requests.RequestException as e:
            log.warning("[PlacesApiClient] %s failed: %s", path, e)
            raise RequestFailure(str(e)) from e

        try:
            return resp.json()
        except ValueError as e:
            log.warning("[PlacesApiClient] %s returned invalid JSON: %s", path, e)
            raise RequestFailure(f"invalid JSON from {path}: {e}") from e
