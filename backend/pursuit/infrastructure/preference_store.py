"""SQL Preference Store — PreferenceStore port over the preferences table.

Invariants:
    - get returns None for a missing key (never raises for absence)
    - set overwrites any previous value for the key
    - Each call uses its own short-lived session (the workspace outlives requests)
"""

import logging

from pursuit.infrastructure.database import DatabaseSessionManager
from pursuit.models.preference import Preference

logger = logging.getLogger(__name__)


class SqlPreferenceStore:
    """Key-value persistence backed by the preferences table."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def get(self, key: str) -> str | None:
        async with self._manager.session() as db:
            row = await db.get(Preference, key)
            return row.value if row else None

    async def set(self, key: str, value: str) -> None:
        async with self._manager.session() as db:
            row = await db.get(Preference, key)
            if row is None:
                db.add(Preference(key=key, value=value))
            else:
                row.value = value
            await db.commit()
        logger.debug("Preference stored", extra={"storage_key": key})
