"""
Record store for the greeting pages.

Holds the records of the JSON data source in memory for the lifetime of
the process. The store starts empty and is filled on demand: the first
lookup that finds it empty triggers a load, and every load replaces the
whole record list (there is no incremental merge).

A failed load never raises. The store is emptied, the reason is logged,
and the caller gets a LoadResult with ok=False, so the page can still
render its "not found" state.
"""

import asyncio
import logging
import time
from collections import Counter

import httpx
from pydantic import ValidationError

from greetings.models.schemas import LoadResult, SisterRecord

logger = logging.getLogger(__name__)


def normalize_name(name: str) -> str:
    """Lookup key for a name: trimmed and lower-cased."""
    return name.strip().lower()


class DataSourceError(Exception):
    """The data source answered with something that is not a record list."""


def parse_records(data) -> list[SisterRecord]:
    """Parse a decoded JSON document into records, all or nothing."""
    if not isinstance(data, list):
        raise DataSourceError(
            f"expected a JSON array of records, got {type(data).__name__}"
        )
    records = []
    for index, item in enumerate(data):
        try:
            records.append(SisterRecord.model_validate(item))
        except ValidationError as e:
            raise DataSourceError(
                f"record {index + 1} is malformed: {e.error_count()} error(s)"
            ) from e
    return records


class RecordStore:
    """
    In-memory, process-lifetime collection of SisterRecords.

    Args:
        source_url: URL of the JSON array to load.
        timeout: Load timeout in seconds. None disables it.
        transport: Optional httpx transport (tests pass httpx.MockTransport).
    """

    def __init__(
        self,
        source_url: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.source_url = source_url
        self.timeout = timeout
        self._transport = transport
        self._records: list[SisterRecord] = []
        self._inflight: asyncio.Future | None = None

    # ── Read access ────────────────────────────────────────────────

    @property
    def records(self) -> list[SisterRecord]:
        return list(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    def __len__(self) -> int:
        return len(self._records)

    def clear(self) -> None:
        self._records = []

    # ── Loading ────────────────────────────────────────────────────

    async def load(self) -> LoadResult:
        """
        Fetch the data source and replace the store with its records.

        Concurrent callers share one pending fetch: only the first call
        issues a request, the rest await its result. A caller that is
        cancelled stops waiting without cancelling the fetch for the others.
        """
        if self._inflight is None:
            self._inflight = asyncio.ensure_future(self._fetch())
            self._inflight.add_done_callback(self._clear_inflight)
        return await asyncio.shield(self._inflight)

    def _clear_inflight(self, future: asyncio.Future) -> None:
        if self._inflight is future:
            self._inflight = None

    async def ensure_loaded(self) -> list[SisterRecord]:
        """Return the records, loading them first if the store is empty."""
        if self.is_empty:
            await self.load()
        return self.records

    async def _fetch(self) -> LoadResult:
        start = time.monotonic()
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport,
            ) as client:
                resp = await client.get(self.source_url)
            if not resp.is_success:
                raise DataSourceError(f"HTTP {resp.status_code} from {self.source_url}")
            records = parse_records(resp.json())
        except (httpx.HTTPError, httpx.InvalidURL, ValueError, DataSourceError) as e:
            # json decode errors are ValueErrors
            reason = str(e) or type(e).__name__
            logger.error("Error loading sisters data from %s: %s", self.source_url, reason)
            self._records = []
            return LoadResult(ok=False, error=reason, source=self.source_url)

        self._records = records
        elapsed_ms = (time.monotonic() - start) * 1000
        logger.info(
            "Loaded %d records from %s in %.1f ms",
            len(records), self.source_url, elapsed_ms,
        )
        self._warn_duplicates(records)
        return LoadResult(ok=True, records=list(records), source=self.source_url)

    @staticmethod
    def _warn_duplicates(records: list[SisterRecord]) -> None:
        counts = Counter(normalize_name(r.name) for r in records)
        for key, count in counts.items():
            if count > 1:
                logger.warning(
                    "%d records share the name %r; lookups return the first one",
                    count, key,
                )
