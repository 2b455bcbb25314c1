"""Pydantic models for the upstream PokeAPI payloads.

Only the fields the explorer renders are declared; anything else in the
response is ignored. Models are frozen so a cached record cannot change.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class ListEntry(_Frozen):
    name: str
    url: str


class EntryPage(_Frozen):
    results: tuple[ListEntry, ...] = ()


class NamedResource(_Frozen):
    name: str


class AbilitySlot(_Frozen):
    ability: NamedResource
    is_hidden: bool = False


class TypeSlot(_Frozen):
    type: NamedResource


class Artwork(_Frozen):
    front_default: Optional[str] = None


class OtherSprites(_Frozen):
    official_artwork: Artwork = Field(default_factory=Artwork, alias="official-artwork")


class Sprites(_Frozen):
    front_default: Optional[str] = None
    other: OtherSprites = Field(default_factory=OtherSprites)


class StatSlot(_Frozen):
    base_stat: int
    stat: NamedResource


class DetailRecord(_Frozen):
    id: int
    name: str
    height: int
    weight: int
    abilities: tuple[AbilitySlot, ...] = ()
    types: tuple[TypeSlot, ...] = ()
    sprites: Sprites = Field(default_factory=Sprites)
    stats: tuple[StatSlot, ...] = ()
