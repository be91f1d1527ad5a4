"""
Name lookup over the record store.

Matching is case-insensitive and ignores surrounding whitespace. When two
records normalize to the same name, the one earlier in the data source
wins.
"""

import logging

from greetings.models.schemas import SisterRecord
from greetings.store import RecordStore, normalize_name

logger = logging.getLogger(__name__)


class LookupService:
    """Answers "is there a page for this name?" against an injected store."""

    def __init__(self, store: RecordStore):
        self.store = store

    async def exists(self, name: str) -> bool:
        try:
            return await self._match(name) is not None
        except Exception as e:
            logger.error("Error checking sister existence for %r: %s", name, e)
            return False

    async def find(self, name: str) -> SisterRecord | None:
        try:
            return await self._match(name)
        except Exception as e:
            logger.error("Error getting sister data for %r: %s", name, e)
            return None

    async def _match(self, name: str) -> SisterRecord | None:
        records = await self.store.ensure_loaded()
        wanted = normalize_name(name)
        for record in records:
            if normalize_name(record.name) == wanted:
                return record
        return None
