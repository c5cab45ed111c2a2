"""Popular calculators shown above the catalog grid.

Curated by hand and kept separate from ``registry.CALCULATOR_REGISTRY`` so the
editors decide what counts as popular.
"""
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class QuickNavEntry:
    name: str
    route: str
    glyph: str
    description: str


POPULAR_CALCULATORS: List[QuickNavEntry] = [
    QuickNavEntry("Flooring Cost", "/calculator/flooring-cost", "💰", "Calculate total project costs"),
    QuickNavEntry("Square Footage", "/calculator/square-footage", "📐", "Measure room areas"),
    QuickNavEntry("Tile Calculator", "/calculator/tile", "🏛️", "Tiles and materials needed"),
    QuickNavEntry("Hardwood", "/calculator/hardwood", "🪵", "Wood flooring estimates"),
    QuickNavEntry("Laminate", "/calculator/laminate", "🏠", "Laminate flooring plans"),
    QuickNavEntry("Vinyl", "/calculator/vinyl", "📱", "Vinyl flooring calculations"),
    QuickNavEntry("Carpet", "/calculator/carpet", "🧸", "Carpet material estimates"),
    QuickNavEntry("Baseboard Trim", "/calculator/baseboard", "📏", "Trim and molding lengths"),
]


def get_popular_calculators() -> List[QuickNavEntry]:
    return POPULAR_CALCULATORS
