"""Game events: the known event list and the currently active ones."""

import logging
import threading
from datetime import datetime, timedelta, timezone

from .cache import PersistedData
from .errors import ClientError
from .models import EventSchema

log = logging.getLogger(__name__)

REFRESH_INTERVAL = timedelta(seconds=30)


def _utcnow():
    return datetime.now(timezone.utc)


def _parse_rfc3339(text):
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp without offset: {text}")
    return parsed


class Events(PersistedData):
    """Known events, cached on disk, plus the active ones refreshed from the API.

    ``api`` must expose ``events.all()`` and ``active_events.all()``.
    ``clock`` returns the current aware UTC time.
    """

    path = ".cache/events.json"
    schema = EventSchema

    def __init__(self, api, clock=None):
        self._api = api
        self._clock = clock or _utcnow
        self._lock = threading.RLock()
        self._active = []
        self._last_refresh = datetime.min.replace(tzinfo=timezone.utc)
        self._data = list(self.retrieve_data())
        self.refresh_active()

    def data_from_api(self):
        return list(self._api.events.all())

    def refresh_data(self):
        data = self.data_from_api()
        with self._lock:
            self._data = data

    def all(self):
        with self._lock:
            return list(self._data)

    def active(self):
        with self._lock:
            return list(self._active)

    def refresh_active(self):
        """Reload active events unless they were refreshed in the last 30 seconds."""
        now = self._clock()
        if now - self.last_refresh() <= REFRESH_INTERVAL:
            return
        with self._lock:
            self._last_refresh = now
            try:
                fresh = self._api.active_events.all()
            except (ClientError, OSError, ValueError) as e:
                log.debug("failed to refresh events: %s", e)
                return
            self._active = list(fresh)
            log.debug("events refreshed.")

    def last_refresh(self):
        with self._lock:
            return self._last_refresh


def describe_event(event):
    """One-line summary of an event."""
    return f"{event.name}: '{event.content_code()}'"


def describe_active_event(event, now=None):
    """One-line summary of an active event with its remaining time."""
    now = now or _utcnow()
    try:
        remaining = str(int((_parse_rfc3339(event.expiration) - now).total_seconds()))
    except ValueError:
        remaining = "?"
    return (
        f"{event.name} ({event.map.x},{event.map.y}): '{event.content_code()}', "
        f"duration: {event.duration}, created at {event.created_at}, "
        f"expires at {event.expiration}, remaining: {remaining}s"
    )