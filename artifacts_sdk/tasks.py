"""Tasks and the rewards they can give."""

import threading

from .cache import PersistedData
from .models import DropRateSchema, TaskFullSchema


class _ListData(PersistedData):
    def __init__(self, api):
        self._api = api
        self._lock = threading.RLock()
        self._data = list(self.retrieve_data())

    def refresh_data(self):
        data = self.data_from_api()
        with self._lock:
            self._data = data

    def all(self):
        with self._lock:
            return list(self._data)


class Tasks(_ListData):
    """Every task, cached on disk. ``api`` must expose ``tasks.all()``."""

    path = ".cache/tasks.json"
    schema = TaskFullSchema

    def data_from_api(self):
        return list(self._api.tasks.all())

    def all(self):
        return super().all()

    def refresh_data(self):
        super().refresh_data()


class TasksRewards(_ListData):
    """Every task reward, cached on disk. ``api`` must expose ``tasks_reward.all()``."""

    path = ".cache/tasks_rewards.json"
    schema = DropRateSchema

    def data_from_api(self):
        return list(self._api.tasks_reward.all())

    def all(self):
        return super().all()

    def refresh_data(self):
        super().refresh_data()