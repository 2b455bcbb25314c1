"""Badge colours for the eighteen Pokémon types."""

from types import MappingProxyType
from typing import Mapping

DEFAULT_TYPE_COLOR = "#9ca3af"

TYPE_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "normal": "#9ca3af",
        "fire": "#ef4444",
        "water": "#3b82f6",
        "electric": "#facc15",
        "grass": "#22c55e",
        "ice": "#bfdbfe",
        "fighting": "#b91c1c",
        "poison": "#a855f7",
        "ground": "#ca8a04",
        "flying": "#818cf8",
        "psychic": "#ec4899",
        "bug": "#4ade80",
        "rock": "#854d0e",
        "ghost": "#7e22ce",
        "dragon": "#4338ca",
        "dark": "#1f2937",
        "steel": "#6b7280",
        "fairy": "#f9a8d4",
    }
)


def type_color(type_name: str, palette: Mapping[str, str] = TYPE_COLORS) -> str:
    """Return the badge colour for a type, or the default for unknown names."""
    return palette.get(type_name, DEFAULT_TYPE_COLOR)
