"""Game data schemas and their JSON (de)serialisation."""

import types
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Union, get_args, get_origin

from .effects import DamageType, HasEffects


class _StrEnum(str, Enum):
    def __str__(self):
        return self.value


class FightResult(_StrEnum):
    WIN = "win"
    LOSS = "loss"


class MapContentType(_StrEnum):
    MONSTER = "monster"
    RESOURCE = "resource"
    WORKSHOP = "workshop"
    BANK = "bank"
    GRAND_EXCHANGE = "grand_exchange"
    TASKS_MASTER = "tasks_master"
    NPC = "npc"


class NpcType(_StrEnum):
    MERCHANT = "merchant"
    TRADER = "trader"


class TaskType(_StrEnum):
    MONSTERS = "monsters"
    ITEMS = "items"


@dataclass
class SimpleItemSchema:
    code: str = ""
    quantity: int = 0


@dataclass
class SimpleEffectSchema:
    code: str = ""
    value: int = 0


@dataclass
class DropRateSchema:
    code: str = ""
    rate: int = 0
    min_quantity: int = 0
    max_quantity: int = 0


@dataclass
class CraftSchema:
    skill: str | None = None
    level: int | None = None
    items: list[SimpleItemSchema] | None = None
    quantity: int | None = None


@dataclass
class ItemSchema(HasEffects):
    name: str = ""
    code: str = ""
    level: int = 0
    type: str = ""
    subtype: str = ""
    description: str = ""
    effect_list: list[SimpleEffectSchema] | None = field(
        default=None, metadata={"key": "effects"}
    )
    craft: CraftSchema | None = None
    tradeable: bool = True

    def effects(self):
        return list(self.effect_list or [])


@dataclass
class MonsterSchema(HasEffects):
    name: str = ""
    code: str = ""
    level: int = 0
    hp: int = 0
    attack_fire: int = 0
    attack_earth: int = 0
    attack_water: int = 0
    attack_air: int = 0
    res_fire: int = 0
    res_earth: int = 0
    res_water: int = 0
    res_air: int = 0
    base_critical_strike: int = field(default=0, metadata={"key": "critical_strike"})
    effect_list: list[SimpleEffectSchema] | None = field(
        default=None, metadata={"key": "effects"}
    )
    min_gold: int = 0
    max_gold: int = 0
    drops: list[DropRateSchema] = field(default_factory=list)

    def effects(self):
        return list(self.effect_list or [])

    def attack_damage(self, damage_type):
        return getattr(self, f"attack_{DamageType(damage_type).value}")

    def resistance(self, damage_type):
        return getattr(self, f"res_{DamageType(damage_type).value}")


@dataclass
class ResourceSchema:
    name: str = ""
    code: str = ""
    skill: str = ""
    level: int = 0
    drops: list[DropRateSchema] = field(default_factory=list)


@dataclass
class MapContentSchema:
    type: MapContentType = MapContentType.MONSTER
    code: str = ""


@dataclass
class MapSchema:
    name: str = ""
    skin: str = ""
    x: int = 0
    y: int = 0
    content: MapContentSchema | None = None


@dataclass
class EventContentSchema:
    type: MapContentType = MapContentType.MONSTER
    code: str = ""


@dataclass
class EventSchema:
    name: str = ""
    code: str = ""
    content: EventContentSchema = field(default_factory=EventContentSchema)
    maps: list[MapSchema] = field(default_factory=list)
    skin: str = ""
    duration: int = 0
    rate: int = 0

    def content_code(self):
        return self.content.code


@dataclass
class ActiveEventSchema:
    name: str = ""
    code: str = ""
    map: MapSchema = field(default_factory=MapSchema)
    previous_map: MapSchema = field(default_factory=MapSchema)
    duration: int = 0
    expiration: str = ""
    created_at: str = ""

    def content_code(self):
        """Code of the content the event placed on its map."""
        if self.map.content is None:
            raise ValueError("event to have content")
        return self.map.content.code


@dataclass
class NpcSchema:
    name: str = ""
    code: str = ""
    description: str = ""
    type: NpcType = NpcType.MERCHANT


@dataclass
class NpcItem:
    code: str = ""
    npc: str = ""
    currency: str = ""
    buy_price: int | None = None
    sell_price: int | None = None


@dataclass
class TaskFullSchema:
    code: str = ""
    level: int = 0
    type: TaskType = TaskType.MONSTERS
    min_quantity: int = 0
    max_quantity: int = 0
    skill: str | None = None


@dataclass
class StatusSchema:
    version: str = ""
    server_time: str = ""
    max_level: int = 0
    characters_online: int = 0


def _key(f):
    return f.metadata.get("key", f.name)


def _convert(hint, value):
    if value is None:
        return None
    origin = get_origin(hint)
    if origin is Union or origin is types.UnionType:
        inner = [a for a in get_args(hint) if a is not type(None)]
        return _convert(inner[0], value)
    if origin is list:
        (inner,) = get_args(hint)
        return [_convert(inner, v) for v in value]
    if isinstance(hint, type):
        if is_dataclass(hint):
            return from_dict(hint, value)
        if issubclass(hint, Enum):
            return hint(value)
    return value


def from_dict(cls, data):
    """Build an instance of the schema ``cls`` from its JSON mapping."""
    if not isinstance(data, dict):
        raise TypeError(f"expected a mapping for {cls.__name__}, got {type(data).__name__}")
    kwargs = {
        f.name: _convert(f.type, data[_key(f)])
        for f in fields(cls)
        if _key(f) in data
    }
    return cls(**kwargs)


def _plain(value):
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def to_dict(obj):
    """Turn a schema instance into its JSON mapping."""
    if not is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"not a schema instance: {obj!r}")
    return {_key(f): _plain(getattr(obj, f.name)) for f in fields(obj)}