import asyncio
import random
from datetime import date
from unittest.mock import AsyncMock

import pytest

from src.app.core.domain.models import Client, ExerciseFetchStatus, ExerciseInfo, ExerciseTranslation, FormMode, Page
from src.app.core.services.client_detail_service import TRAINING_HISTORY_PLACEHOLDER, ClientDetailService
from src.app.core.services.exercise_suggestions import LOADING_MESSAGE, ExerciseSuggestionService
from src.app.infrastructure.exercise_catalog import ExerciseCatalog
from src.shared.exceptions import EntityNotFound, NoClientSelected


def create_client(client_id: int, full_name: str) -> Client:
    return Client(
        id=client_id,
        full_name=full_name,
        email="someone@x.com",
        phone="55119876543",
        goal="Lose weight",
        start_date=date(2030, 1, 15),
        end_date=date(2030, 4, 15),
    )


EXERCISES = [
    ExerciseInfo(id=i, translations=[ExerciseTranslation(language=2, name=f"Exercise {i}")])
    for i in range(10)
]


@pytest.fixture
def catalog():
    catalog = AsyncMock(spec=ExerciseCatalog)
    catalog.fetch_exercises.return_value = EXERCISES
    return catalog


@pytest.fixture
def detail_service(client_service, catalog, session):
    suggestions = ExerciseSuggestionService(catalog, rng=random.Random(3))
    return ClientDetailService(client_service=client_service, suggestion_service=suggestions, session=session)


@pytest.fixture
def ana(client_repository):
    return client_repository.add(create_client(1, "Ana Silva"))


@pytest.fixture
def bruno(client_repository):
    return client_repository.add(create_client(2, "Bruno Costa"))


def test_show_selects_client_and_navigates(detail_service, session, ana):
    # Act
    detail = detail_service.show(ana.id)

    # Assert
    assert detail.client == ana
    assert detail.training_history_message == TRAINING_HISTORY_PLACEHOLDER
    assert detail.exercises_message == LOADING_MESSAGE
    assert session.current_viewed_id == ana.id
    assert session.page == Page.CLIENT_VIEW
    assert session.view_generation == 1


def test_show_unknown_client_keeps_current_view(detail_service, session, ana):
    detail_service.show(ana.id)

    with pytest.raises(EntityNotFound):
        detail_service.show(999)

    assert session.current_viewed_id == ana.id
    assert session.view_generation == 1


@pytest.mark.asyncio
async def test_load_suggestions_stores_result(detail_service, session, ana):
    detail_service.show(ana.id)

    result = await detail_service.load_suggestions(ana.id)

    assert result.status == ExerciseFetchStatus.LOADED
    assert len(result.items) == 5
    assert session.exercise_suggestions == result


@pytest.mark.asyncio
async def test_load_suggestions_opens_view_when_needed(detail_service, session, ana):
    result = await detail_service.load_suggestions(ana.id)

    assert result is not None
    assert session.current_viewed_id == ana.id
    assert session.page == Page.CLIENT_VIEW


@pytest.mark.asyncio
async def test_load_suggestions_unknown_client_raises(detail_service, catalog):
    with pytest.raises(EntityNotFound):
        await detail_service.load_suggestions(999)

    catalog.fetch_exercises.assert_not_called()


@pytest.mark.asyncio
async def test_late_result_for_previous_client_is_discarded(detail_service, catalog, session, ana, bruno):
    # Arrange
    release = asyncio.Event()
    started = asyncio.Event()

    async def slow_fetch():
        started.set()
        await release.wait()
        return EXERCISES

    catalog.fetch_exercises.side_effect = slow_fetch
    detail_service.show(ana.id)

    # Act
    pending = asyncio.create_task(detail_service.load_suggestions(ana.id))
    await started.wait()
    detail_service.show(bruno.id)
    release.set()
    result = await pending

    # Assert
    assert result is None
    assert session.current_viewed_id == bruno.id
    assert session.exercise_suggestions is None


@pytest.mark.asyncio
async def test_late_result_after_revisiting_same_client_is_discarded(detail_service, catalog, session, ana):
    # Arrange
    release = asyncio.Event()
    started = asyncio.Event()

    async def slow_fetch():
        started.set()
        await release.wait()
        return EXERCISES

    catalog.fetch_exercises.side_effect = slow_fetch
    detail_service.show(ana.id)

    # Act
    pending = asyncio.create_task(detail_service.load_suggestions(ana.id))
    await started.wait()
    detail_service.show(ana.id)
    release.set()
    result = await pending

    # Assert
    assert result is None
    assert session.view_generation == 2


def test_edit_current_without_selection_raises(detail_service):
    with pytest.raises(NoClientSelected) as exc_info:
        detail_service.edit_current()

    assert exc_info.value.message == "No client selected to edit."


def test_edit_current_switches_form_to_edit_mode(detail_service, session, ana):
    detail_service.show(ana.id)

    client = detail_service.edit_current()

    assert client == ana
    assert session.mode == FormMode.EDIT
    assert session.editing_id == ana.id
    assert session.form.full_name == "Ana Silva"
    assert session.page == Page.FORM


def test_edit_current_after_deletion_raises_not_found(detail_service, client_repository, session, ana):
    detail_service.show(ana.id)
    client_repository.remove(ana.id)

    with pytest.raises(EntityNotFound):
        detail_service.edit_current()

    assert session.mode == FormMode.ADD
    assert session.page == Page.CLIENT_VIEW
