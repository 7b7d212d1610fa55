"""
Filters - text transformations applied to server values before they are
placed into a rich-text label.

Usage:
    from placefinder_app.renderer.filters import escape, truncate
    escape('<b>"Café"</b>')        # → '&lt;b&gt;&quot;Café&quot;&lt;/b&gt;'
    truncate("hello world", 5)     # → 'hello...'
"""

import html
import math

PREVIEW_LIMIT     = 120
PREVIEW_LINES     = 2
PREVIEW_SEPARATOR = " • "
ELLIPSIS          = "..."


# ── Escaping & truncation ─────────────────────────────────────────────────────

def escape(value) -> str:
    """HTML-escape any value, quotes included. None → ''."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def truncate(value: str, limit: int = PREVIEW_LIMIT) -> str:
    return value[:limit] + ELLIPSIS if len(value) > limit else value


# ── Numbers ───────────────────────────────────────────────────────────────────

def round_half_up(value: float) -> int:
    """21.5 → 22, -0.5 → 0. Python's round() would give banker's rounding."""
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Shortest form of a number: 3.0 → '3', 3.1 → '3.1', 48.8566 → '48.8566'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def format_coords(lat: float, lon: float) -> str:
    return f"{lat:.4f}, {lon:.4f}"


# ── Places ────────────────────────────────────────────────────────────────────

def description_preview(description: str) -> str:
    """
    First two non-blank lines joined with ' • ', cut at PREVIEW_LIMIT chars.
    Not escaped; callers escape the result.
    """
    lines = [line for line in description.splitlines() if line.strip()]
    return truncate(PREVIEW_SEPARATOR.join(lines[:PREVIEW_LINES]), PREVIEW_LIMIT)


def normalize_url(url: str) -> str:
    """'example.com' → 'https://example.com'. Anything starting with http is kept."""
    return url if url.startswith("http") else f"https://{url}"
