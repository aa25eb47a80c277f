from typing import cast

import httpx
import pytest

from src.app.infrastructure.exercise_catalog import ExerciseCatalog, ExerciseCatalogSettings
from src.shared.exceptions import ExerciseCatalogError


def make_catalog(handler) -> ExerciseCatalog:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ExerciseCatalog(ExerciseCatalogSettings(base_url="https://wger.test/api/v2"), client=client)


def test_url_and_params():
    catalog = ExerciseCatalog(ExerciseCatalogSettings(base_url="https://wger.test/api/v2/", limit=20))

    assert catalog.url == "https://wger.test/api/v2/exerciseinfo/"
    assert catalog.params == {"language": 2, "limit": 20}


@pytest.mark.asyncio
async def test_fetch_exercises_parses_results():
    # Arrange
    seen_requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_requests.append(request)
        return httpx.Response(
            200,
            json={
                "count": 2,
                "results": [
                    {"id": 1, "category": {"id": 10}, "translations": [{"language": 2, "name": "Squat"}]},
                    {"id": 2, "translations": [{"language": 1, "name": "Kniebeuge"}]},
                ],
            },
        )

    catalog = make_catalog(handler)

    # Act
    exercises = await catalog.fetch_exercises()

    # Assert
    assert [e.id for e in exercises] == [1, 2]
    assert exercises[0].name_in(2) == "Squat"
    assert exercises[1].name_in(2) is None
    assert seen_requests[0].url.path == "/api/v2/exerciseinfo/"
    assert seen_requests[0].url.params["language"] == "2"
    assert seen_requests[0].url.params["limit"] == "50"


@pytest.mark.asyncio
async def test_missing_results_is_an_empty_list():
    catalog = make_catalog(lambda request: httpx.Response(200, json={"count": 0, "results": None}))

    assert await catalog.fetch_exercises() == []


@pytest.mark.asyncio
async def test_bad_status_raises_with_status_code():
    catalog = make_catalog(lambda request: httpx.Response(503))

    with pytest.raises(ExerciseCatalogError) as exc_info:
        await catalog.fetch_exercises()

    error = cast(ExerciseCatalogError, exc_info.value)
    assert error.status_code == 503
    assert error.is_network_error is False
    assert str(error) == "API request failed with status: 503 Service Unavailable"


@pytest.mark.asyncio
async def test_network_failure_raises_without_status_code():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    catalog = make_catalog(handler)

    with pytest.raises(ExerciseCatalogError) as exc_info:
        await catalog.fetch_exercises()

    error = cast(ExerciseCatalogError, exc_info.value)
    assert error.status_code is None
    assert error.is_network_error is True


@pytest.mark.asyncio
async def test_non_json_body_raises():
    catalog = make_catalog(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

    with pytest.raises(ExerciseCatalogError) as exc_info:
        await catalog.fetch_exercises()

    assert exc_info.value.status_code == 200
