"""Gatherable resources and their drops."""

import threading

from .cache import PersistedData
from .models import ResourceSchema


class Resources(PersistedData):
    """Resources by code, cached on disk.

    ``api`` must expose ``resources.all()``. ``events`` must expose ``all()``.
    """

    path = ".cache/resources.json"
    schema = ResourceSchema

    def __init__(self, api, events):
        self._api = api
        self._events = events
        self._lock = threading.RLock()
        self._data = dict(self.retrieve_data())

    def data_from_api(self):
        return {resource.code: resource for resource in self._api.resources.all()}

    def refresh_data(self):
        data = self.data_from_api()
        with self._lock:
            self._data = data

    def get(self, code):
        """Resource with the given code, or None."""
        with self._lock:
            return self._data.get(code)

    def all(self):
        with self._lock:
            return list(self._data.values())

    def dropping(self, item):
        """Resources that can drop ``item``."""
        return [r for r in self.all() if any(d.code == item for d in r.drops)]

    def is_event(self, code):
        """Whether the resource only appears during an event."""
        return any(e.content.code == code for e in self._events.all())


def drop_rate(resource, item):
    """Drop rate of ``item`` from ``resource``, or None if it does not drop it."""
    return next((d.rate for d in resource.drops if d.code == item), None)


def max_drop_quantity(resource):
    """Sum of the maximum quantities of every drop."""
    return sum(d.max_quantity for d in resource.drops)