"""Server status and clock offset."""

import logging
import threading
from datetime import datetime, timedelta, timezone

log = logging.getLogger(__name__)


def _utcnow():
    return datetime.now(timezone.utc)


def _parse_rfc3339(text):
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp without offset: {text}")
    return parsed.astimezone(timezone.utc)


class Server:
    """Game server status and the offset between local and server clocks.

    ``api`` must expose ``server.status()``, returning a StatusSchema or None.
    ``clock`` returns the current aware UTC time.
    """

    def __init__(self, api, clock=None):
        self._api = api
        self._clock = clock or _utcnow
        self._lock = threading.RLock()
        self.server_offset = timedelta(0)
        self.update_offset()

    def status(self):
        """Current server status, or None if unavailable."""
        return self._api.server.status()

    def time(self):
        """Server time in UTC, or None if unavailable or malformed."""
        status = self.status()
        if status is None:
            return None
        try:
            return _parse_rfc3339(status.server_time)
        except (ValueError, TypeError, AttributeError):
            return None

    def update_offset(self):
        """Recompute the offset of the local clock against the server."""
        now = self._clock()
        server_time = self.time()
        if server_time is None:
            log.error("failed to update time offset")
            return
        offset = now - server_time
        with self._lock:
            self.server_offset = offset
        log.debug("system time: %s", now)
        log.debug("server time: %s", server_time)
        log.debug(
            "time offset: %ss and %sms",
            int(offset.total_seconds()),
            offset.microseconds // 1000,
        )
        log.debug("synced time: %s", now - offset)