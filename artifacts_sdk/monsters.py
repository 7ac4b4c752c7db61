"""Monsters and their drops."""

import threading

from .cache import PersistedData
from .models import MonsterSchema


class Monsters(PersistedData):
    """Monsters by code, cached on disk.

    ``api`` must expose ``monsters.all()``. ``events`` must expose ``all()``.
    """

    path = ".cache/monsters.json"
    schema = MonsterSchema

    def __init__(self, api, events):
        self._api = api
        self._events = events
        self._lock = threading.RLock()
        self._data = dict(self.retrieve_data())

    def data_from_api(self):
        return {monster.code: monster for monster in self._api.monsters.all()}

    def refresh_data(self):
        data = self.data_from_api()
        with self._lock:
            self._data = data

    def get(self, code):
        """Monster with the given code, or None."""
        with self._lock:
            return self._data.get(code)

    def all(self):
        with self._lock:
            return list(self._data.values())

    def dropping(self, item):
        """Monsters that can drop ``item``."""
        return [m for m in self.all() if any(d.code == item for d in m.drops)]

    def lowest_providing_exp(self, level):
        """Lowest level monster still giving experience at ``level``."""
        minimum = level - 10 if level > 11 else 1
        candidates = [m for m in self.all() if minimum <= m.level <= level]
        return min(candidates, key=lambda m: m.level, default=None)

    def highest_providing_exp(self, level):
        """Highest level monster not above ``level``."""
        candidates = [m for m in self.all() if m.level <= level]
        return max(candidates, key=lambda m: m.level, default=None)

    def is_event(self, code):
        """Whether the monster only appears during an event."""
        return any(e.content.code == code for e in self._events.all())


def drop_rate(monster, item):
    """Drop rate of ``item`` from ``monster``, or None if it does not drop it."""
    return next((d.rate for d in monster.drops if d.code == item), None)


def max_drop_quantity(monster):
    """Sum of the maximum quantities of every drop."""
    return sum(d.max_quantity for d in monster.drops)