"""Presenter: turns explorer state into the view model the frontend draws.

Everything here is a pure function of its arguments; no network access and
no mutation of the records passed in.
"""

from typing import Mapping, Optional, Sequence

from explorer.data.type_colors import TYPE_COLORS, type_color
from explorer.schemas.catalog import DetailRecord, ListEntry
from explorer.schemas.explorer import (
    AbilityBadge,
    BasicPanel,
    ExplorerState,
    ExplorerView,
    SecondaryPanel,
    SelectOption,
    StatBar,
    TypeBadge,
)

MAX_STAT_VALUE = 255

INITIAL_SPINNER = "Loading Pokémon..."
DETAIL_SPINNER = "Loading Pokémon details..."


def capitalize(name: str) -> str:
    """Upper-case the first character only, leaving the rest untouched."""
    return name[:1].upper() + name[1:]


def dehyphenate(name: str) -> str:
    return name.replace("-", " ")


def format_measure(raw: int, unit: str) -> str:
    """Scale a raw tenths-of-a-unit value, e.g. 7 -> '0.7 m'."""
    return f"{raw / 10:.1f} {unit}"


def stat_bar_width(value: int) -> float:
    """Bar width as a percentage of the maximum stat, clamped to 0..100."""
    return max(0.0, min(value / MAX_STAT_VALUE * 100, 100.0))


def cache_notice(cache_size: int) -> Optional[str]:
    if cache_size <= 0:
        return None
    return f"Cached {cache_size} Pokémon for faster loading"


def build_basic_panel(record: DetailRecord, palette: Mapping[str, str] = TYPE_COLORS) -> BasicPanel:
    artwork = record.sprites.other.official_artwork.front_default or record.sprites.front_default
    return BasicPanel(
        id=record.id,
        name=record.name,
        title=capitalize(record.name),
        artwork_url=artwork,
        height=format_measure(record.height, "m"),
        weight=format_measure(record.weight, "kg"),
        types=[
            TypeBadge(name=slot.type.name, color=type_color(slot.type.name, palette))
            for slot in record.types
        ],
    )


def build_secondary_panel(record: DetailRecord) -> SecondaryPanel:
    abilities = []
    for slot in record.abilities:
        label = dehyphenate(slot.ability.name)
        if slot.is_hidden:
            label += " (Hidden)"
        abilities.append(AbilityBadge(label=label, hidden=slot.is_hidden))

    # Record order, not sorted.
    stats = [
        StatBar(
            name=slot.stat.name,
            label=dehyphenate(slot.stat.name),
            value=slot.base_stat,
            width_percent=stat_bar_width(slot.base_stat),
        )
        for slot in record.stats
    ]
    return SecondaryPanel(abilities=abilities, stats=stats)


def present(
    *,
    initial_loading: bool,
    entries: Sequence[ListEntry],
    selection: str,
    detail_loading: bool,
    detail: Optional[DetailRecord],
    cache_size: int,
    cached_names: Sequence[str] = (),
    palette: Mapping[str, str] = TYPE_COLORS,
    explorer_id: Optional[str] = None,
) -> ExplorerView:
    """Build the view for one explorer.

    Precedence: the initial spinner hides everything else; otherwise the
    selector is always shown, followed by either the detail spinner or the
    two detail panels. The cache footer is independent of both.
    """
    if initial_loading:
        return ExplorerView(
            explorer_id=explorer_id,
            state=ExplorerState.init,
            initial_loading=True,
            spinner=INITIAL_SPINNER,
        )

    view = ExplorerView(
        explorer_id=explorer_id,
        state=ExplorerState.list_ready,
        initial_loading=False,
        options=[SelectOption(value=e.name, label=capitalize(e.name)) for e in entries],
        selection=selection,
        detail_loading=detail_loading,
        cache_size=cache_size,
        cached_names=list(cached_names),
        cache_notice=cache_notice(cache_size),
    )
    if detail_loading:
        view.state = ExplorerState.detail_loading
        view.spinner = DETAIL_SPINNER
    elif detail is not None:
        view.state = ExplorerState.detail_ready
        view.basic = build_basic_panel(detail, palette)
        view.secondary = build_secondary_panel(detail)
    return view
