"""Goal HTTP endpoints: status codes, bodies and completion propagation."""

from __future__ import annotations

import sys
from pathlib import Path

_backend = Path(__file__).resolve().parent.parent
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from core.dependencies import get_db_session
from main import app


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_get_goal(test_db, make_program) -> None:
    program_id, (goal_id,) = await make_program([False])
    async with _client() as client:
        r = await client.get(f"/api/v1/goals/{goal_id}")
    assert r.status_code == 200
    data = r.json()
    assert data["id"] == goal_id
    assert data["program_id"] == program_id
    assert data["completed"] is False
    assert data["program"]["id"] == program_id


@pytest.mark.asyncio
async def test_get_goal_not_found_and_invalid_id(test_db) -> None:
    async with _client() as client:
        missing = await client.get("/api/v1/goals/4242")
        invalid = await client.get("/api/v1/goals/0")
        too_large = await client.get("/api/v1/goals/99999999999999999999")
        too_large_program = await client.get("/api/v1/goals", params={"program_id": 2**64})
    assert missing.status_code == 404
    assert invalid.status_code == 400
    assert too_large.status_code == 400
    assert too_large_program.status_code == 400


@pytest.mark.asyncio
async def test_put_completing_all_goals_completes_program(test_db, make_program) -> None:
    program_id, (g1, g2) = await make_program([True, False])
    async with _client() as client:
        r = await client.put(
            f"/api/v1/goals/{g2}",
            json={"id": g2, "program_id": program_id, "subject": "Goal 2", "completed": True},
        )
        assert r.status_code == 200
        body = r.json()
        assert body["completed"] is True
        assert body["program"]["completed"] is True
        assert body["program"]["completed_on"] is not None

        program = (await client.get(f"/api/v1/programs/{program_id}")).json()
    assert program["completed"] is True
    assert program["completed_on"] is not None


@pytest.mark.asyncio
async def test_put_reopening_goal_clears_program_completion(test_db, make_program) -> None:
    program_id, (g1, g2) = await make_program([True, False])
    async with _client() as client:
        await client.put(
            f"/api/v1/goals/{g2}",
            json={"program_id": program_id, "subject": "Goal 2", "completed": True},
        )
        r = await client.put(
            f"/api/v1/goals/{g1}",
            json={"program_id": program_id, "subject": "Goal 1", "completed": False},
        )
        assert r.status_code == 200
        program = (await client.get(f"/api/v1/programs/{program_id}")).json()
    assert program["completed"] is False
    assert program["completed_on"] is None


@pytest.mark.asyncio
async def test_put_validation_errors(test_db, make_program) -> None:
    program_id, (goal_id,) = await make_program([False])
    async with _client() as client:
        mismatch = await client.put(
            f"/api/v1/goals/{goal_id}",
            json={"id": goal_id + 1, "program_id": program_id, "subject": "x"},
        )
        blank = await client.put(
            f"/api/v1/goals/{goal_id}",
            json={"program_id": program_id, "subject": "  "},
        )
        non_positive = await client.put(
            "/api/v1/goals/-3",
            json={"program_id": program_id, "subject": "x"},
        )
        missing = await client.put(
            "/api/v1/goals/999",
            json={"program_id": program_id, "subject": "x"},
        )
        malformed = await client.put(f"/api/v1/goals/{goal_id}", json={"subject": "x"})
    assert mismatch.status_code == 400
    assert blank.status_code == 400
    assert non_positive.status_code == 400
    assert missing.status_code == 404
    assert malformed.status_code == 422


@pytest.mark.asyncio
async def test_post_and_delete_goal_propagate(test_db, make_program) -> None:
    program_id, _ = await make_program()
    async with _client() as client:
        created = await client.post(
            "/api/v1/goals",
            json={"program_id": program_id, "subject": "Publish a talk", "completed": True},
        )
        assert created.status_code == 201
        goal_id = created.json()["id"]
        assert created.json()["program"]["completed"] is True

        deleted = await client.delete(f"/api/v1/goals/{goal_id}")
        assert deleted.status_code == 204

        gone = await client.get(f"/api/v1/goals/{goal_id}")
        assert gone.status_code == 404

        program = (await client.get(f"/api/v1/programs/{program_id}")).json()
    assert program["goals"] == []
    assert program["completed"] is False
    assert program["completed_on"] is None


@pytest.mark.asyncio
async def test_post_goal_for_unknown_program(test_db) -> None:
    async with _client() as client:
        r = await client.post("/api/v1/goals", json={"program_id": 55, "subject": "x"})
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_search_goals(test_db, make_program) -> None:
    program_id, _ = await make_program([True, False, False])
    await make_program([True])
    async with _client() as client:
        all_goals = (await client.get("/api/v1/goals")).json()
        open_goals = (
            await client.get("/api/v1/goals", params={"program_id": program_id, "completed": "false"})
        ).json()
        paged = (
            await client.get(
                "/api/v1/goals",
                params={"page_number": 0, "page_size": 2, "sort_column": "subject", "sort_order": "desc"},
            )
        ).json()
        bad_paging = await client.get("/api/v1/goals", params={"page_number": -1, "page_size": 2})
        bad_order = await client.get("/api/v1/goals", params={"sort_order": "sideways"})
        bad_column = await client.get("/api/v1/goals", params={"sort_column": "bogus"})
        unpaged_sorted = (
            await client.get(
                "/api/v1/goals",
                params={"program_id": program_id, "sort_column": "subject", "sort_order": "desc"},
            )
        ).json()
    assert all_goals["total"] == 4
    assert open_goals["total"] == 2
    assert {g["completed"] for g in open_goals["entities"]} == {False}
    assert paged["total"] == 4
    assert paged["total_pages"] == 2
    assert [g["subject"] for g in paged["entities"]] == ["Goal 3", "Goal 2"]
    assert bad_paging.status_code == 400
    assert bad_order.status_code == 400
    assert bad_column.status_code == 400
    assert [g["subject"] for g in unpaged_sorted["entities"]] == ["Goal 3", "Goal 2", "Goal 1"]


@pytest.mark.asyncio
async def test_database_failure_maps_to_500() -> None:
    session = MagicMock()
    session.execute = AsyncMock(side_effect=OperationalError("SELECT", {}, Exception("db down")))

    async def failing_session():
        yield session

    app.dependency_overrides[get_db_session] = failing_session
    try:
        async with _client() as client:
            single = await client.get("/api/v1/goals/1")
            search = await client.get("/api/v1/goals")
    finally:
        app.dependency_overrides.pop(get_db_session, None)
    assert single.status_code == 500
    assert single.json()["detail"] == "failed to load goal 1"
    assert search.status_code == 500
