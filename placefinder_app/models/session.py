"""
session.py - The places list currently on screen.

The Results screen addresses places by their zero-based position only,
so the list a modal index refers to has to be kept somewhere. The
controller owns exactly one UISession and swaps the whole record:

    new Detail Flow  → UISession(generation=n+1, places=<new list>)
    go_back()        → UISession(generation=n+1)   (empty)

An index from an older record can never resolve against a newer list
because the record is replaced, not mutated.
"""

from dataclasses import dataclass, field

from placefinder_app.models.place import Place


@dataclass(frozen=True)
class UISession:
    generation: int               = 0
    places:     tuple[Place, ...] = field(default_factory=tuple)

    def place_at(self, index: int) -> Place | None:
        """Positional lookup. Out of range (negative included) → None."""
        if 0 <= index < len(self.places):
            return self.places[index]
        return None

    def next(self, places: tuple[Place, ...] = ()) -> "UISession":
        return UISession(generation=self.generation + 1, places=tuple(places))
