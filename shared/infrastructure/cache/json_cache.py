"""
JSON cache wrapper over Django's cache framework.

Production settings point the ``default`` alias at Redis (django-redis);
tests run against the local-memory backend.
"""
import json
from typing import Any, Optional

from django.core.cache import caches

# Sentinel so callers can store values that never expire.
FOREVER = None


class JsonCache:
    """Prefixed cache client that stores dicts and lists as JSON text."""

    def __init__(self, prefix: str = "", alias: str = "default"):
        self.prefix = prefix
        self.alias = alias

    @property
    def _backend(self):
        return caches[self.alias]

    def _make_key(self, key: str) -> str:
        if self.prefix:
            return f"{self.prefix}:{key}"
        return key

    def get(self, key: str) -> Optional[Any]:
        value = self._backend.get(self._make_key(key))
        if value is not None and isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                return value
        return value

    def set(self, key: str, value: Any, timeout: Optional[int] = 300) -> None:
        if isinstance(value, (dict, list)):
            value = json.dumps(value)
        self._backend.set(self._make_key(key), value, timeout)

    def delete(self, key: str) -> None:
        self._backend.delete(self._make_key(key))
