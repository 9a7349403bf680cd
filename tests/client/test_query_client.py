from __future__ import annotations

import asyncio

import pytest

from school_dashboard.client import (
    ApiClient,
    ApiNotFoundError,
    ApiNotImplementedError,
    ApiServerError,
    ApiValidationError,
    QueryClient,
    QueryKey,
)

SUMMARY = QueryKey.of("/api/dashboard/attendance-summary")
ACTIVITIES = QueryKey.of("/api/dashboard/recent-activities")
ANNOUNCEMENTS = QueryKey.of("/api/announcements")
BEHAVIOR = QueryKey.of("/api/behavior")


def _run(transport, scenario):
    async def main():
        async with ApiClient("http://testserver", transport=transport) as api:
            return await scenario(api, QueryClient(api))

    return asyncio.run(main())


def test_query_key_drops_empty_params():
    assert QueryKey.of("/api/students", {"class": "", "section": None}) == QueryKey.of("/api/students")
    assert QueryKey.of("/api/students", {"section": "أ", "class": "الثالث"}) == QueryKey.of(
        "/api/students", {"class": "الثالث", "section": "أ"}
    )


def test_query_key_matches_subpaths_only():
    key = QueryKey.of("/api/reports/attendance", {"period": "week"})
    assert key.matches("/api/reports")
    assert key.matches("/api/reports/attendance")
    assert not key.matches("/api/report")


def test_second_fetch_is_served_from_cache(transport, calls):
    async def scenario(api, queries):
        first = await queries.fetch_query(SUMMARY)
        second = await queries.fetch_query(SUMMARY)
        assert queries.get_query_data(SUMMARY) is second
        return first, second

    first, second = _run(transport, scenario)

    assert first == second
    assert calls == ["GET /api/dashboard/attendance-summary"]


def test_attendance_save_refreshes_summary_and_activity(transport, calls):
    async def scenario(api, queries):
        before = await queries.fetch_query(SUMMARY)
        await queries.fetch_query(ACTIVITIES)
        await queries.fetch_query(ANNOUNCEMENTS)

        await queries.save_attendance(student_id=1, date="2025-03-12", status="present")
        assert queries.is_stale(SUMMARY)
        assert queries.is_stale(ACTIVITIES)
        assert not queries.is_stale(ANNOUNCEMENTS)

        after = await queries.fetch_query(SUMMARY)
        feed = await queries.fetch_query(ACTIVITIES)
        await queries.fetch_query(ANNOUNCEMENTS)
        return before, after, feed

    before, after, feed = _run(transport, scenario)

    assert before["presentCount"] == 0
    assert after["presentCount"] == 1
    assert feed[0]["type"] == "attendance"
    assert calls.count("GET /api/announcements") == 1
    assert calls.count("GET /api/dashboard/attendance-summary") == 2


def test_violation_delete_refreshes_list(transport):
    async def scenario(api, queries):
        created = await queries.create_violation(
            student_id=2,
            violation_type="غياب عن الحصة",
            description="...",
            date="2025-03-12",
            severity="medium",
        )
        listed = await queries.fetch_query(BEHAVIOR)
        assert await queries.delete_violation(created["id"]) is None
        return listed, await queries.fetch_query(BEHAVIOR)

    listed, after = _run(transport, scenario)

    assert len(listed) == 1
    assert after == []


def test_announcement_create_refreshes_recent(transport, clock):
    recent_key = QueryKey.of("/api/dashboard/recent-announcements")

    async def scenario(api, queries):
        await queries.fetch_query(recent_key)
        clock.advance(minutes=10)
        await queries.create_announcement(
            title="رحلة مدرسية",
            content="...",
            start_date="2025-03-20",
            end_date="2025-03-20",
            importance="normal",
        )
        return await queries.fetch_query(recent_key)

    recent = _run(transport, scenario)
    assert recent[0]["title"] == "رحلة مدرسية"


def test_failed_mutation_leaves_cache_fresh(transport):
    async def scenario(api, queries):
        await queries.fetch_query(SUMMARY)
        with pytest.raises(ApiNotFoundError):
            await queries.save_attendance(student_id=404, date="2025-03-12", status="present")
        return queries.is_stale(SUMMARY)

    assert _run(transport, scenario) is False


def test_status_codes_map_to_errors(transport):
    async def scenario(api, queries):
        with pytest.raises(ApiNotImplementedError) as not_impl:
            await api.get_report("behavior")
        with pytest.raises(ApiValidationError) as invalid:
            await api.save_attendance(student_id=1, date="2025-03-12", status="asleep")
        with pytest.raises(ApiNotFoundError):
            await api.get_student(99)
        return not_impl.value, invalid.value

    not_impl, invalid = _run(transport, scenario)

    assert not_impl.status_code == 501
    assert invalid.status_code == 400
    assert invalid.errors


def test_filtered_listing_through_client(transport):
    async def scenario(api, queries):
        return await api.list_students(class_name="الثالث", section="ب", search="")

    students = _run(transport, scenario)
    assert [s["section"] for s in students] == ["ب", "ب"]


def test_server_failure_maps_to_server_error(transport, container, monkeypatch):
    def boom():
        raise RuntimeError("disk full")

    monkeypatch.setattr(container.behavior_service, "list_violations", boom)

    async def scenario(api, queries):
        with pytest.raises(ApiServerError) as exc:
            await queries.fetch_query(BEHAVIOR)
        return exc.value, queries.is_stale(BEHAVIOR)

    err, stale = _run(transport, scenario)
    assert err.status_code == 500
    assert err.message == "Internal server error"
    assert stale


class SnapshotApi:
    """Reads snapshot the data when they start and answer once released."""

    def __init__(self):
        self.violations = ["old"]
        self.slow = True
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def get(self, path, params=None):
        snapshot = list(self.violations)
        if self.slow:
            self.started.set()
            await self.release.wait()
        return snapshot

    async def delete_violation(self, violation_id):
        self.violations.clear()


def test_read_in_flight_during_mutation_is_not_cached_as_fresh():
    async def main():
        api = SnapshotApi()
        queries = QueryClient(api)

        pending = asyncio.ensure_future(queries.fetch_query(BEHAVIOR))
        await api.started.wait()
        await queries.delete_violation(1)
        api.release.set()

        first = await pending
        stale_after_arrival = queries.is_stale(BEHAVIOR)
        api.slow = False
        return first, stale_after_arrival, await queries.fetch_query(BEHAVIOR)

    first, stale_after_arrival, second = asyncio.run(main())

    assert first == ["old"]
    assert stale_after_arrival
    assert second == []


def test_read_without_intervening_mutation_stays_fresh():
    async def main():
        api = SnapshotApi()
        api.slow = False
        queries = QueryClient(api)
        queries.invalidate_queries("/api/announcements")
        await queries.fetch_query(BEHAVIOR)
        return queries.is_stale(BEHAVIOR)

    assert asyncio.run(main()) is False
