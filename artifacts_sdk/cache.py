"""Local JSON cache for game data fetched from the API."""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from .models import from_dict, to_dict

log = logging.getLogger(__name__)


class PersistedData(ABC):
    """Data set kept on disk as JSON and fetched from the API when missing.

    Subclasses set ``path`` (the cache file) and ``schema`` (the schema class of
    each entry). The data is either a mapping of codes to entries or a list.
    """

    path: str = ""
    schema: type = dict

    def retrieve_data(self):
        """Load the cached data, falling back to the API and caching its answer."""
        try:
            return self.data_from_file()
        except (OSError, ValueError, TypeError, KeyError):
            data = self.data_from_api()
            try:
                self.persist_data(data)
            except (OSError, TypeError, ValueError) as e:
                log.error("failed to persist data: %s", e)
            return data

    @abstractmethod
    def data_from_api(self):
        """Fetch the full data set from the API."""

    def data_from_file(self):
        """Read the data set from the cache file."""
        raw = json.loads(Path(self.path).read_text(encoding="utf-8"))
        if isinstance(raw, dict):
            return {code: from_dict(self.schema, entry) for code, entry in raw.items()}
        if isinstance(raw, list):
            return [from_dict(self.schema, entry) for entry in raw]
        raise ValueError(f"unexpected cache content in {self.path}")

    def persist_data(self, data):
        """Write the data set to the cache file."""
        if isinstance(data, dict):
            plain = {code: to_dict(entry) for code, entry in data.items()}
        else:
            plain = [to_dict(entry) for entry in data]
        target = Path(self.path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(plain, indent=2), encoding="utf-8")

    @abstractmethod
    def refresh_data(self):
        """Replace the held data with a fresh copy from the API."""


def amount_of(items, item):
    """Quantity of the first entry with code ``item``, or 0."""
    return next((entry.quantity for entry in items if entry.code == item), 0)