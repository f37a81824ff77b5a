"""
Size of the database file backing the store.
"""
import os
from typing import Optional

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS


def database_size_bytes(alias: str = DEFAULT_DB_ALIAS) -> Optional[int]:
    """On-disk size for file-based (sqlite) databases; ``None`` when there is no file to measure."""
    name = str(settings.DATABASES[alias].get('NAME') or '')
    if not name or name == ':memory:' or not os.path.isfile(name):
        return None
    return os.path.getsize(name)
