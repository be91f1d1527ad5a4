"""
Tests for name lookup.

Names arrive from shared links, so every case/whitespace variation of a
stored name has to find the same record, and a broken data source has to
look like "not found" rather than an error.
"""

import asyncio

import httpx
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from greetings.lookup import LookupService
from greetings.store import RecordStore

RECORDS = [
    {"name": "Priya", "greeting": "Hi Priya", "message": "First"},
    {"name": "Ananya Rao", "greeting": "Dear Ananya", "message": "Second"},
    {"name": " PRIYA ", "greeting": "Shadowed", "message": "Never returned"},
]


def make_lookup(payload=RECORDS, status=200):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(status, json=payload)

    store = RecordStore("http://data.test/data.json", transport=httpx.MockTransport(handler))
    return LookupService(store), calls


class TestFind:

    @pytest.mark.parametrize("name", [
        "Priya", "priya", "PRIYA", "  priya  ", "\tPrIyA\n",
    ])
    def test_every_case_and_whitespace_variant(self, name):
        lookup, _ = make_lookup()
        record = asyncio.run(lookup.find(name))
        assert record is not None
        assert record.greeting == "Hi Priya"

    def test_inner_whitespace_is_significant(self):
        lookup, _ = make_lookup()
        assert asyncio.run(lookup.find("ananya rao")).message == "Second"
        assert asyncio.run(lookup.find("ananya  rao")) is None

    def test_first_match_in_store_order_wins(self):
        lookup, _ = make_lookup()
        assert asyncio.run(lookup.find("priya")).message == "First"

    def test_unknown_name(self):
        lookup, _ = make_lookup()
        assert asyncio.run(lookup.find("Kavya")) is None

    def test_empty_name_finds_nothing(self):
        lookup, _ = make_lookup()
        assert asyncio.run(lookup.find("")) is None
        assert asyncio.run(lookup.exists("")) is False

    def test_empty_name_matches_blank_record_name(self):
        lookup, _ = make_lookup([{"name": "   ", "greeting": "G", "message": "M"}])
        assert asyncio.run(lookup.exists("")) is True


class TestExists:

    def test_every_exact_name_exists(self):
        lookup, _ = make_lookup()
        for record in RECORDS:
            assert asyncio.run(lookup.exists(record["name"])) is True

    def test_missing_name(self):
        lookup, _ = make_lookup()
        assert asyncio.run(lookup.exists("nobody")) is False


class TestLazyLoading:

    def test_first_lookup_loads_then_reuses(self):
        lookup, calls = make_lookup()

        async def run():
            await lookup.exists("priya")
            await lookup.find("ananya rao")
            await lookup.find("nobody")

        asyncio.run(run())
        assert len(calls) == 1

    def test_concurrent_lookups_on_empty_store_load_once(self):
        lookup, calls = make_lookup()

        async def run():
            return await asyncio.gather(
                lookup.find("priya"),
                lookup.exists("ananya rao"),
                lookup.find("nobody"),
            )

        found, exists, missing = asyncio.run(run())
        assert len(calls) == 1
        assert found.name == "Priya"
        assert exists is True
        assert missing is None


class TestDegradation:

    def test_server_error_means_not_found(self):
        lookup, _ = make_lookup({"error": "down"}, status=500)
        assert asyncio.run(lookup.find("anyone")) is None
        assert asyncio.run(lookup.exists("anyone")) is False

    def test_failed_store_retries_on_next_lookup(self):
        lookup, calls = make_lookup({"error": "down"}, status=500)
        asyncio.run(lookup.find("anyone"))
        asyncio.run(lookup.find("anyone"))
        assert len(calls) == 2

    def test_non_string_name_is_absent_not_an_error(self):
        lookup, _ = make_lookup()
        assert asyncio.run(lookup.find(None)) is None
        assert asyncio.run(lookup.exists(None)) is False


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
