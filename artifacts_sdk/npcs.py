"""Non-player characters and the items they trade."""

import threading

from .cache import PersistedData
from .models import NpcItem, NpcSchema


class NpcsItems(PersistedData):
    """Items traded by NPCs, keyed by item code, cached on disk.

    ``api`` must expose ``npcs_items.all()``.
    """

    path = ".cache/npcs_items.json"
    schema = NpcItem

    def __init__(self, api):
        self._api = api
        self._lock = threading.RLock()
        self._data = dict(self.retrieve_data())

    def data_from_api(self):
        return {item.code: item for item in self._api.npcs_items.all()}

    def refresh_data(self):
        data = self.data_from_api()
        with self._lock:
            self._data = data

    def all(self):
        with self._lock:
            return list(self._data.values())

    def get(self, code):
        """Traded item with the given code, or None."""
        with self._lock:
            return self._data.get(code)


class Npcs(PersistedData):
    """NPCs by code, cached on disk.

    ``api`` must expose ``npcs.all()``; ``items`` is the NpcsItems catalogue.
    """

    path = ".cache/npcs.json"
    schema = NpcSchema

    def __init__(self, api, items):
        self._api = api
        self.items = items
        self._lock = threading.RLock()
        self._data = dict(self.retrieve_data())

    def data_from_api(self):
        return {npc.code: npc for npc in self._api.npcs.all()}

    def refresh_data(self):
        data = self.data_from_api()
        with self._lock:
            self._data = data

    def all(self):
        with self._lock:
            return list(self._data.values())

    def get(self, code):
        """NPC with the given code, or None."""
        with self._lock:
            return self._data.get(code)

    def selling(self, code):
        """NPCs from which the item ``code`` can be bought."""
        sellers = (
            self.get(item.npc)
            for item in self.items.all()
            if item.code == code and item.buy_price is not None
        )
        return [npc for npc in sellers if npc is not None]