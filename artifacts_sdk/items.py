"""Item catalogue and the questions asked about how items are obtained."""

import math
import threading
from dataclasses import dataclass
from enum import Enum

from .cache import PersistedData
from .consts import GEMS, GIFT, GINGERBREAD, TASKS_COIN, TASKS_REWARDS_SPECIFICS
from .item_ext import ItemType, SubType, is_craftable, is_crafted_with, item_type, mats
from .models import ItemSchema, NpcType, SimpleItemSchema
from .monsters import drop_rate as monster_drop_rate
from .resources import drop_rate as resource_drop_rate

_UNKNOWN_TIME = 10000
_TASK_TIME = 20000
_RESOURCE_TIME = 20
_NPC_TIME = 60


def _round(value):
    """Round half away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


class SourceKind(Enum):
    """Ways an item can be obtained."""

    RESOURCE = "resource"
    MONSTER = "monster"
    NPC = "npc"
    CRAFT = "craft"
    TASK_REWARD = "task_reward"
    TASK = "task"

    def __str__(self):
        return self.value


@dataclass(eq=True)
class ItemSource:
    """One source of an item; ``entity`` is the resource, monster or NPC when relevant."""

    kind: SourceKind
    entity: object = None


class Items(PersistedData):
    """Items by code, cached on disk.

    ``api`` must expose ``items.all()``. The other collaborators are the
    Resources, Monsters, TasksRewards and Npcs catalogues.
    """

    path = ".cache/items.json"
    schema = ItemSchema

    def __init__(self, api, resources, monsters, tasks_rewards, npcs):
        self._api = api
        self._resources = resources
        self._monsters = monsters
        self._tasks_rewards = tasks_rewards
        self._npcs = npcs
        self._lock = threading.RLock()
        self._data = dict(self.retrieve_data())

    def data_from_api(self):
        return {item.code: item for item in self._api.items.all()}

    def refresh_data(self):
        data = self.data_from_api()
        with self._lock:
            self._data = data

    def __iter__(self):
        return iter(self.all())

    def get(self, code):
        """Item with the given code, or None."""
        with self._lock:
            return self._data.get(code)

    def all(self):
        with self._lock:
            return list(self._data.values())

    def mats_of(self, code):
        """Materials needed to craft the item ``code`` once."""
        item = self.get(code)
        return [] if item is None else mats(item)

    def mats_for(self, code, quantity):
        """Materials needed to craft ``quantity`` of the item ``code``."""
        result = self.mats_of(code)
        for mat in result:
            mat.quantity *= quantity
        return result

    def base_mats_of(self, code):
        """Materials of ``code`` expanded one level down to their own materials."""
        result = []
        for mat in self.mats_of(code):
            sub = self.mats_of(mat.code)
            if not sub:
                result.append(SimpleItemSchema(code=mat.code, quantity=mat.quantity))
            else:
                result.extend(
                    SimpleItemSchema(code=b.code, quantity=b.quantity * mat.quantity)
                    for b in sub
                )
        return result

    def crafted_from_resource(self, resource):
        """Items craftable from the base materials dropped by ``resource``."""
        found = self._resources.get(resource)
        if found is None:
            return []
        return [
            item
            for drop in found.drops
            for item in self.crafted_with_base_mat(drop.code)
        ]

    def crafted_with(self, code):
        """Items directly crafted with ``code``."""
        return [item for item in self.all() if is_crafted_with(item, code)]

    def require_task_reward(self, code):
        return any(m.code in TASKS_REWARDS_SPECIFICS for m in self.base_mats_of(code))

    def unique_craft(self, code):
        """The only item crafted with ``code``, or None."""
        crafts = self.crafted_with(code)
        return crafts[0] if len(crafts) == 1 else None

    def crafted_with_base_mat(self, code):
        """Items crafted with ``code`` as a base material."""
        return [i for i in self.all() if self.is_crafted_with_base_mat(i.code, code)]

    def is_crafted_with_base_mat(self, code, mat):
        return any(m.code == mat for m in self.base_mats_of(code))

    def _mob_mats(self, code):
        found = (self.get(m.code) for m in self.mats_of(code))
        return [i for i in found if i is not None and i.subtype == SubType.MOB.value]

    def mats_mob_average_lvl(self, code):
        """Average level of the monster-dropped materials of ``code``, or 0."""
        mob_mats = self._mob_mats(code)
        if not mob_mats:
            return 0
        return sum(i.level for i in mob_mats) // len(mob_mats)

    def mats_mob_max_lvl(self, code):
        """Highest level of the monster-dropped materials of ``code``, or 0."""
        return max((i.level for i in self._mob_mats(code)), default=0)

    def mats_quantity_for(self, code):
        """Inventory space taken by the materials needed to craft ``code``."""
        return sum(m.quantity for m in self.mats_of(code))

    def recycled_quantity_for(self, code):
        return -(-self.mats_quantity_for(code) // 5)

    def drop_rate(self, code):
        """Drop rate of ``code`` from the first monster or resource dropping it, or 0."""
        drops = [d for m in self._monsters.dropping(code) for d in m.drops]
        drops += [d for r in self._resources.dropping(code) for d in r.drops]
        drop = next((d for d in drops if d.code == code), None)
        if drop is None:
            return 0
        return _round(drop.rate * ((drop.min_quantity + drop.max_quantity) / 2.0))

    def base_mats_drop_rate(self, code):
        """Quantity-weighted average drop rate of the base materials of ``code``."""
        base_mats = self.base_mats_of(code)
        if not base_mats:
            return 0.0
        total = sum(m.quantity for m in base_mats)
        weighted = sum(self.drop_rate(m.code) * m.quantity for m in base_mats)
        return weighted / total

    def restoring_utilities(self, level):
        """Utilities restoring health with a level of at least ``level``."""
        return [
            i
            for i in self.all()
            if item_type(i) is ItemType.UTILITY and i.restore() > 0 and i.level >= level
        ]

    def best_source_of(self, code):
        """Preferred way of obtaining ``code``, or None."""
        if code == GIFT:
            monster = self._monsters.get(GINGERBREAD)
            return None if monster is None else ItemSource(SourceKind.MONSTER, monster)
        if code in GEMS:
            return ItemSource(SourceKind.CRAFT)
        if code in TASKS_REWARDS_SPECIFICS:
            return ItemSource(SourceKind.TASK_REWARD)
        sources = self.sources_of(code)
        if not sources:
            return None
        if all(s.kind in (SourceKind.RESOURCE, SourceKind.MONSTER) for s in sources):

            def key(source):
                if source.kind is SourceKind.RESOURCE:
                    rate = resource_drop_rate(source.entity, code)
                else:
                    rate = monster_drop_rate(source.entity, code)
                return (0,) if rate is None else (1, rate)

            return min(sources, key=key)
        return sources[0]

    def sources_of(self, code):
        """Every way of obtaining ``code``."""
        sources = [ItemSource(SourceKind.RESOURCE, r) for r in self._resources.dropping(code)]
        sources += [ItemSource(SourceKind.MONSTER, m) for m in self._monsters.dropping(code)]
        sources += [ItemSource(SourceKind.NPC, n) for n in self._npcs.selling(code)]
        item = self.get(code)
        if item is not None and is_craftable(item):
            sources.append(ItemSource(SourceKind.CRAFT))
        if any(r.code == code for r in self._tasks_rewards.all()):
            sources.append(ItemSource(SourceKind.TASK_REWARD))
        if code == TASKS_COIN:
            sources.append(ItemSource(SourceKind.TASK))
        return sources

    def _source_time(self, item, source):
        kind = source.kind
        if kind is SourceKind.RESOURCE:
            return _RESOURCE_TIME
        if kind is SourceKind.MONSTER:
            return source.entity.level * self.drop_rate(item)
        if kind is SourceKind.CRAFT:
            total = 0
            for mat in self.mats_of(item):
                time = self.time_to_get(mat.code)
                total += (_UNKNOWN_TIME if time is None else time) * mat.quantity
            return total
        if kind is SourceKind.NPC:
            return _NPC_TIME
        return _TASK_TIME

    def time_to_get(self, item):
        """Rough time to obtain ``item`` by its fastest source, or None."""
        return min(
            (self._source_time(item, s) for s in self.sources_of(item)), default=None
        )

    def is_from_event(self, code):
        """Whether ``code`` can be obtained from an event or a merchant."""
        item = self.get(code)
        if item is None:
            return False
        for source in self.sources_of(item.code):
            if source.kind is SourceKind.RESOURCE:
                if self._resources.is_event(source.entity.code):
                    return True
            elif source.kind is SourceKind.MONSTER:
                if self._monsters.is_event(source.entity.code):
                    return True
            elif source.kind is SourceKind.NPC:
                if source.entity.type == NpcType.MERCHANT:
                    return True
        return False