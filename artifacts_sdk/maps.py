"""World map tiles and lookups over their content."""

import threading

from .events import _parse_rfc3339, _utcnow
from .models import MapContentSchema, MapContentType, TaskType

_WORKSHOP_SKILLS = frozenset(
    {
        "weaponcrafting",
        "gearcrafting",
        "jewelrycrafting",
        "cooking",
        "woodcutting",
        "mining",
        "alchemy",
    }
)
_NO_WORKSHOP_SKILLS = frozenset({"combat", "fishing"})


def _skill_code(skill):
    return getattr(skill, "value", skill)


class Maps:
    """Map tiles indexed by coordinates, kept in sync with active events.

    ``api`` must expose ``maps.all()``. ``events`` must expose ``active()``
    and ``refresh_active()``. ``clock`` returns the current aware UTC time.
    """

    def __init__(self, api, events, clock=None):
        self._events = events
        self._clock = clock or _utcnow
        self._lock = threading.RLock()
        self._data = {(m.x, m.y): m for m in api.maps.all()}

    def get(self, x, y):
        """Tile at ``(x, y)``, or None."""
        with self._lock:
            return self._data.get((x, y))

    def _all(self):
        with self._lock:
            return list(self._data.values())

    def _replace(self, x, y, tile):
        with self._lock:
            if (x, y) in self._data:
                self._data[(x, y)] = tile

    def refresh_from_events(self):
        """Restore tiles of expired events and apply tiles of live ones."""
        for event in self._events.active():
            if _parse_rfc3339(event.expiration) < self._clock():
                self._replace(event.map.x, event.map.y, event.previous_map)
        self._events.refresh_active()
        for event in self._events.active():
            if _parse_rfc3339(event.expiration) > self._clock():
                self._replace(event.map.x, event.map.y, event.map)

    def of_type(self, content_type):
        return [m for m in self._all() if content_type_is(m, content_type)]

    def with_content_code(self, code):
        return [m for m in self._all() if content_code_is(m, code)]

    def with_content_schema(self, schema):
        return [m for m in self._all() if m.content is not None and m.content == schema]

    def with_workshop_for(self, skill):
        """Workshop tile for ``skill``, or None if the skill has no workshop."""
        code = _skill_code(skill)
        if code in _NO_WORKSHOP_SKILLS:
            return None
        if code not in _WORKSHOP_SKILLS:
            raise ValueError(f"unknown skill: {code!r}")
        return next(iter(self.with_content_code(code)), None)

    def closest_with_content_code_from(self, map_, code):
        return closest_among(map_, self.with_content_code(code))

    def closest_with_content_schema_from(self, map_, schema):
        return closest_among(map_, self.with_content_schema(schema))

    def closest_of_type_from(self, map_, content_type):
        return closest_among(map_, self.of_type(content_type))

    def closest_tasksmaster_from(self, map_, task_type=None):
        """Closest tasks master, of the given task type when one is given."""
        if task_type is None:
            return self.closest_of_type_from(map_, MapContentType.TASKS_MASTER)
        schema = MapContentSchema(
            type=MapContentType.TASKS_MASTER, code=str(TaskType(task_type))
        )
        return self.closest_with_content_schema_from(map_, schema)


def closest_from_among(x, y, maps):
    """Tile of ``maps`` nearest to ``(x, y)`` by Manhattan distance, or None."""
    return min(maps, key=lambda m: abs(x - m.x) + abs(y - m.y), default=None)


def content_code_is(map_, code):
    return map_.content is not None and map_.content.code == code


def content_type_is(map_, content_type):
    return map_.content is not None and map_.content.type == MapContentType(content_type)


def pretty(map_):
    """Human-readable name and position of a tile."""
    if map_.content is not None:
        return f"{map_.name} ({map_.x},{map_.y} [{map_.content.code}])"
    return f"{map_.name} ({map_.x},{map_.y})"


def monster(map_):
    return None if map_.content is None else map_.content.code


def resource(map_):
    return None if map_.content is None else map_.content.code


def closest_among(map_, others):
    return closest_from_among(map_.x, map_.y, others)


def is_tasksmaster(map_, task_type=None):
    """Whether the tile holds a tasks master, of ``task_type`` when given."""
    return content_type_is(map_, MapContentType.TASKS_MASTER) and (
        task_type is None or content_code_is(map_, str(TaskType(task_type)))
    )