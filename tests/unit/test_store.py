"""Tests for the cache store repositories."""

import asyncio

import duckdb
import pytest

from app.errors import CacheInitError, ValidationError
from app.models import ListEntry, ListOutcome, WriteResult
from app.repositories import CacheStore, Database

DAY_MS = 24 * 60 * 60 * 1000


def run(coro):
    return asyncio.run(coro)


class TestInit:
    def test_concurrent_init_opens_once(self, clock):
        opened = []

        def connect(path):
            opened.append(path)
            return duckdb.connect(":memory:")

        db = Database("cache.duckdb", clock=clock, connect=connect)

        async def scenario():
            await asyncio.gather(db.init(), db.init(), db.init())
            await db.init()

        run(scenario())
        assert opened == ["cache.duckdb"]
        assert db.initialized

    def test_failure_reaches_all_waiters_then_retry(self, clock):
        attempts = []

        def connect(path):
            attempts.append(path)
            if len(attempts) == 1:
                raise duckdb.IOException("disk unavailable")
            return duckdb.connect(":memory:")

        db = Database("cache.duckdb", clock=clock, connect=connect)

        async def scenario():
            results = await asyncio.gather(db.init(), db.init(), return_exceptions=True)
            assert all(isinstance(r, CacheInitError) for r in results)
            assert not db.initialized
            await db.init()

        run(scenario())
        assert len(attempts) == 2
        assert db.initialized

    def test_store_init_raises(self, broken_store):
        with pytest.raises(CacheInitError):
            run(broken_store.init())


class TestUnavailableStore:
    def test_reads_default_and_writes_skip(self, broken_store):
        async def scenario():
            assert await broken_store.listings.get_page("fiction", 1) is None
            assert await broken_store.listings.is_page_fresh("fiction", 1, DAY_MS) is False
            assert await broken_store.listings.has_any_page("fiction") is False
            assert await broken_store.searches.search_similar_offline("fic") == []
            assert await broken_store.lists.list_all() == []
            assert await broken_store.listings.upsert_page("fiction", 1, {"works": []}) is WriteResult.SKIPPED
            assert await broken_store.covers.upsert(1, "data:") is WriteResult.SKIPPED
            assert (await broken_store.lists.create("Later")).outcome is ListOutcome.SKIPPED
            assert await broken_store.stats() == {}

        run(scenario())


    def test_reads_default_when_closed_mid_read(self, store, monkeypatch):
        async def closed(*args, **kwargs):
            raise CacheInitError("Cache store is not initialized")

        async def scenario():
            await store.init()
            monkeypatch.setattr(store.db, "execute", closed)
            return (
                await store.listings.get_page("fiction", 1),
                await store.details.is_fresh("/works/OL1W", DAY_MS),
                await store.lists.list_all(),
            )

        assert run(scenario()) == (None, False, [])


class TestListingPages:
    def test_upsert_keeps_one_record_with_latest_payload(self, store, clock):
        async def scenario():
            assert await store.listings.upsert_page("fiction", 1, {"works": ["old"]}) is WriteResult.WROTE
            first = await store.db.execute("SELECT updated_at FROM cached_listing_page", fetch="one")
            clock.advance(5)
            await store.listings.upsert_page("fiction", 1, {"works": ["new"]})
            rows = await store.db.execute("SELECT payload, updated_at FROM cached_listing_page")
            return first[0], rows

        first_ts, rows = run(scenario())
        assert len(rows) == 1
        assert '"new"' in rows[0][0]
        assert rows[0][1] >= first_ts

    def test_get_and_has_any(self, store):
        async def scenario():
            assert await store.listings.get_page("fiction", 1) is None
            assert not await store.listings.has_any_page("fiction")
            await store.listings.upsert_page("fiction", 2, {"works": [{"key": "/works/OL1W"}]})
            return (
                await store.listings.get_page("fiction", 2),
                await store.listings.has_any_page("fiction"),
                await store.listings.has_any_page("romance"),
            )

        page, has_fiction, has_romance = run(scenario())
        assert page == {"works": [{"key": "/works/OL1W"}]}
        assert has_fiction
        assert not has_romance

    def test_freshness(self, store, clock):
        async def scenario():
            assert not await store.listings.is_page_fresh("fiction", 1, DAY_MS)
            await store.listings.upsert_page("fiction", 1, {})
            assert await store.listings.is_page_fresh("fiction", 1, 0)
            clock.advance(DAY_MS)
            assert await store.listings.is_page_fresh("fiction", 1, DAY_MS)
            clock.advance(1)
            assert not await store.listings.is_page_fresh("fiction", 1, DAY_MS)

        run(scenario())


class TestDetails:
    def test_roundtrip_and_freshness(self, store, clock):
        bundle = {"work": {"title": "Dune"}, "authorNames": ["Frank Herbert"], "subjects": ["sf"]}

        async def scenario():
            assert await store.details.get("/works/OL1W") is None
            assert not await store.details.is_fresh("/works/OL1W", DAY_MS)
            await store.details.upsert("/works/OL1W", bundle)
            assert await store.details.is_fresh("/works/OL1W", DAY_MS)
            clock.advance(DAY_MS + 1)
            assert not await store.details.is_fresh("/works/OL1W", DAY_MS)
            return await store.details.get("/works/OL1W")

        assert run(scenario()) == bundle


class TestSearches:
    def test_query_is_normalized(self, store):
        async def scenario():
            await store.searches.upsert("  Fiction ", 1, [{"key": "A"}])
            return await store.searches.get("FICTION", 1)

        assert run(scenario()) == [{"key": "A"}]

    def test_similar_offline_matches_fragment(self, store):
        async def scenario():
            await store.searches.upsert("fiction", 1, [{"key": "A"}, {"key": "B"}])
            await store.searches.upsert("scifi", 1, [{"key": "B"}])
            return await store.searches.search_similar_offline("Fic")

        assert [item["key"] for item in run(scenario())] == ["A", "B"]

    def test_similar_offline_dedupes_newest_first(self, store, clock):
        async def scenario():
            await store.searches.upsert("tolkien", 1, [{"key": "A", "v": 1}, {"key": "B", "v": 1}])
            clock.advance(10)
            await store.searches.upsert("tolkien hobbit", 1, [{"key": "C"}, {"key": "A", "v": 2}])
            return await store.searches.search_similar_offline("tolkien")

        items = run(scenario())
        assert [item["key"] for item in items] == ["C", "A", "B"]
        assert items[1]["v"] == 1

    def test_similar_offline_no_match(self, store):
        async def scenario():
            await store.searches.upsert("fiction", 1, [{"key": "A"}])
            return (
                await store.searches.search_similar_offline("poetry"),
                await store.searches.search_similar_offline("   "),
            )

        assert run(scenario()) == ([], [])


class TestCovers:
    def test_upsert_and_get(self, store):
        async def scenario():
            assert await store.covers.get(42) is None
            await store.covers.upsert(42, "data:image/jpeg;base64,AAA")
            await store.covers.upsert(42, "data:image/jpeg;base64,BBB")
            return await store.covers.get(42)

        assert run(scenario()) == "data:image/jpeg;base64,BBB"


class TestLists:
    def test_create_trims_and_rejects_duplicates(self, store, clock):
        async def scenario():
            first = await store.lists.create("  To read ")
            clock.advance(1)
            again = await store.lists.create("To read")
            other = await store.lists.create("Favourites")
            return first, again, other, await store.lists.list_all()

        first, again, other, lists = run(scenario())
        assert first.outcome is ListOutcome.CREATED
        assert first.custom_list.name == "To read"
        assert again.outcome is ListOutcome.DUPLICATE
        assert again.custom_list is None
        assert other.outcome is ListOutcome.CREATED
        assert [lst.name for lst in lists] == ["To read", "Favourites"]

    def test_blank_name_rejected(self, store):
        with pytest.raises(ValidationError):
            run(store.lists.create("   "))

    def test_rename(self, store):
        async def scenario():
            a = (await store.lists.create("A")).custom_list
            await store.lists.create("B")
            return (
                await store.lists.rename(a.id, "B"),
                await store.lists.rename(a.id, "C"),
                await store.lists.rename(999, "D"),
                [lst.name for lst in await store.lists.list_all()],
            )

        assert run(scenario()) == (ListOutcome.DUPLICATE, ListOutcome.UPDATED, ListOutcome.NOT_FOUND, ["C", "B"])

    def test_entries_ordered_newest_first(self, store, clock):
        async def scenario():
            lst = (await store.lists.create("Shelf")).custom_list
            await store.lists.add_entry(lst.id, ListEntry(work_key="/works/OL1W", title="One"))
            clock.advance(10)
            await store.lists.add_entry(
                lst.id,
                ListEntry(work_key="/works/OL2W", title="Two", author="Ann", cover_id=7, first_publish_year=1999),
            )
            return await store.lists.entries_of(lst.id)

        entries = run(scenario())
        assert [e.work_key for e in entries] == ["/works/OL2W", "/works/OL1W"]
        assert entries[0].author == "Ann"
        assert entries[0].cover_id == 7
        assert entries[0].first_publish_year == 1999
        assert entries[0].added_at > entries[1].added_at

    def test_add_entry_is_a_set(self, store):
        async def scenario():
            lst = (await store.lists.create("Shelf")).custom_list
            entry = ListEntry(work_key="/works/OL1W", title="One")
            first = await store.lists.add_entry(lst.id, entry)
            second = await store.lists.add_entry(lst.id, entry)
            missing = await store.lists.add_entry(999, entry)
            return first, second, missing, await store.lists.is_member(lst.id, "/works/OL1W")

        assert run(scenario()) == (ListOutcome.ADDED, ListOutcome.DUPLICATE, ListOutcome.NOT_FOUND, True)

    def test_add_entry_without_title_fails(self, store):
        async def scenario():
            lst = (await store.lists.create("Shelf")).custom_list
            outcome = await store.lists.add_entry(lst.id, ListEntry(work_key="/works/OL1W", title=None))
            return outcome, await store.lists.is_member(lst.id, "/works/OL1W")

        assert run(scenario()) == (ListOutcome.FAILED, False)

    def test_concurrent_add_resolves_to_one_added(self, store):
        async def scenario():
            lst = (await store.lists.create("Shelf")).custom_list
            entry = ListEntry(work_key="/works/OL1W", title="One")
            outcomes = await asyncio.gather(*(store.lists.add_entry(lst.id, entry) for _ in range(4)))
            return outcomes, await store.lists.entries_of(lst.id)

        outcomes, entries = run(scenario())
        assert outcomes.count(ListOutcome.ADDED) == 1
        assert outcomes.count(ListOutcome.DUPLICATE) == 3
        assert len(entries) == 1

    def test_remove_entry(self, store):
        async def scenario():
            lst = (await store.lists.create("Shelf")).custom_list
            await store.lists.add_entry(lst.id, ListEntry(work_key="/works/OL1W", title="One"))
            await store.lists.remove_entry(lst.id, "/works/OL1W")
            return await store.lists.is_member(lst.id, "/works/OL1W")

        assert run(scenario()) is False

    def test_delete_cascades_entries(self, store):
        async def scenario():
            keep = (await store.lists.create("Keep")).custom_list
            drop = (await store.lists.create("Drop")).custom_list
            for lst in (keep, drop):
                await store.lists.add_entry(lst.id, ListEntry(work_key="/works/OL1W", title="One"))
            assert await store.lists.delete(drop.id) is WriteResult.WROTE
            return (
                [lst.name for lst in await store.lists.list_all()],
                await store.lists.entries_of(drop.id),
                await store.lists.is_member(keep.id, "/works/OL1W"),
            )

        assert run(scenario()) == (["Keep"], [], True)


class TestStats:
    def test_counts_per_table(self, store):
        async def scenario():
            await store.listings.upsert_page("fiction", 1, {})
            await store.covers.upsert(1, "data:")
            return await store.stats()

        stats = run(scenario())
        assert stats["cached_listing_page"] == 1
        assert stats["cached_cover"] == 1
        assert stats["list_entry"] == 0
        assert len(stats) == 6


def test_store_shares_one_database(store):
    assert isinstance(store, CacheStore)
    assert store.listings._db is store.details._db is store.lists._db
