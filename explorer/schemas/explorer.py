from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ExplorerState(str, Enum):
    init = "init"
    list_ready = "list_ready"
    detail_loading = "detail_loading"
    detail_ready = "detail_ready"


class SelectEntry(BaseModel):
    name: str


class SelectOption(BaseModel):
    value: str
    label: str


class TypeBadge(BaseModel):
    name: str
    color: str


class AbilityBadge(BaseModel):
    label: str
    hidden: bool


class StatBar(BaseModel):
    name: str
    label: str
    value: int
    width_percent: float


class BasicPanel(BaseModel):
    id: int
    name: str
    title: str
    artwork_url: Optional[str]
    height: str
    weight: str
    types: list[TypeBadge]


class SecondaryPanel(BaseModel):
    abilities: list[AbilityBadge]
    stats: list[StatBar]


class ExplorerView(BaseModel):
    explorer_id: Optional[str] = None
    state: ExplorerState
    initial_loading: bool
    spinner: Optional[str] = None
    options: list[SelectOption] = []
    selection: str = ""
    detail_loading: bool = False
    basic: Optional[BasicPanel] = None
    secondary: Optional[SecondaryPanel] = None
    cache_size: int = 0
    cached_names: list[str] = []
    cache_notice: Optional[str] = None
