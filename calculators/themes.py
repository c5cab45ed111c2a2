"""Icon and colour lookups for catalog entries.

Catalog data may name icons or colours this module does not know about; those
resolve to the defaults instead of failing.
"""
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Icon:
    key: str
    glyph: str


@dataclass(frozen=True)
class Theme:
    background: str
    foreground: str

    @property
    def css_class(self) -> str:
        return f"{self.background} {self.foreground}"


DEFAULT_ICON_KEY = "Calculator"
DEFAULT_COLOR_KEY = "blue"

_GLYPHS: Dict[str, str] = {
    "Calculator": "🧮",
    "Ruler": "📏",
    "Wrench": "🔧",
    "Percent": "％",
    "Package": "📦",
    "Users": "👥",
    "Home": "🏠",
    "Grid": "▦",
    "Droplets": "💧",
    "Grid3x3": "▦",
    "Puzzle": "🧩",
    "Mountain": "⛰️",
    "Gem": "💎",
    "Square": "◼",
    "TreePine": "🌲",
    "Layers2": "🗂️",
    "FileImage": "🖼️",
    "Grid2x2": "⊞",
    "Expand": "⤢",
    "Layers": "📚",
    "ScrollText": "📜",
    "Leaf": "🍃",
    "Waves": "🌊",
    "Paintbrush": "🖌️",
    "Building": "🏢",
    "Car": "🚗",
    "Dumbbell": "🏋️",
    "TreeDeciduous": "🌳",
    "Trees": "🌲",
    "RotateCcw": "↺",
    "Layers3": "🧱",
    "SquareStack": "🗃️",
    "Shield": "🛡️",
    "RectangleHorizontal": "▬",
    "CornerUpLeft": "↰",
    "Circle": "⚪",
    "Building2": "🏬",
}

ICONS: Dict[str, Icon] = {key: Icon(key=key, glyph=glyph) for key, glyph in _GLYPHS.items()}

THEMES: Dict[str, Theme] = {
    "blue": Theme("bg-blue-100", "text-blue-600"),
    "green": Theme("bg-green-100", "text-green-600"),
    "yellow": Theme("bg-yellow-100", "text-yellow-600"),
    "amber": Theme("bg-amber-100", "text-amber-600"),
    "red": Theme("bg-red-100", "text-red-600"),
    "purple": Theme("bg-purple-100", "text-purple-600"),
    "orange": Theme("bg-orange-100", "text-orange-600"),
    "teal": Theme("bg-teal-100", "text-teal-600"),
    "indigo": Theme("bg-indigo-100", "text-indigo-600"),
    "slate": Theme("bg-slate-100", "text-slate-600"),
    "cyan": Theme("bg-cyan-100", "text-cyan-600"),
    "gray": Theme("bg-gray-100", "text-gray-600"),
    "violet": Theme("bg-violet-100", "text-violet-600"),
    "stone": Theme("bg-stone-100", "text-stone-600"),
    "rose": Theme("bg-rose-100", "text-rose-600"),
    "neutral": Theme("bg-neutral-100", "text-neutral-600"),
    "emerald": Theme("bg-emerald-100", "text-emerald-600"),
    "lime": Theme("bg-lime-100", "text-lime-600"),
    "pink": Theme("bg-pink-100", "text-pink-600"),
    "fuchsia": Theme("bg-fuchsia-100", "text-fuchsia-600"),
    # no brown in the palette, darker yellow text stands in
    "brown": Theme("bg-yellow-100", "text-yellow-800"),
    "zinc": Theme("bg-zinc-100", "text-zinc-600"),
    "sky": Theme("bg-sky-100", "text-sky-600"),
}


def resolve_icon(key: Optional[str]) -> Icon:
    if isinstance(key, str) and key in ICONS:
        return ICONS[key]
    return ICONS[DEFAULT_ICON_KEY]


def resolve_theme(key: Optional[str]) -> Theme:
    if isinstance(key, str) and key in THEMES:
        return THEMES[key]
    return THEMES[DEFAULT_COLOR_KEY]
