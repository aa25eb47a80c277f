from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.client_detail_service import ClientDetailService
from src.app.core.services.client_search_service import ClientSearchService
from src.app.core.services.client_service import ClientService
from src.app.core.services.form_controller import FormController
from src.client.schemas import (
    ClientDetailResponse,
    ClientTableResponse,
    DeleteClientResponse,
    ExerciseSuggestionsResponse,
    FormStateResponse,
)
from src.app.api.mappers import (
    to_delete_response,
    to_detail_response,
    to_form_state_response,
    to_suggestions_response,
    to_table_response,
)
from src.shared.exceptions import EntityNotFound
from src.app.logging import get_logger

router = APIRouter(prefix="/clients", tags=["clients"])
logger = get_logger(__name__)


@router.get("/", response_model=ClientTableResponse)
@inject
async def list_clients(
    q: Annotated[str | None, Query(description="Case-insensitive name filter")] = None,
    service: ClientSearchService = Depends(Provide[Container.client_search_service]),
) -> ClientTableResponse:
    """
    Render the client table, optionally filtered by name.

    An empty or missing query shows every client in insertion order.
    """
    return to_table_response(service.table(q))


@router.get("/{client_id}", response_model=ClientDetailResponse)
@inject
async def view_client(
    client_id: int,
    service: ClientDetailService = Depends(Provide[Container.client_detail_service]),
) -> ClientDetailResponse:
    """Open the read-only detail view of a client."""
    try:
        detail = service.show(client_id)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return to_detail_response(detail)


@router.get("/{client_id}/exercises", response_model=ExerciseSuggestionsResponse)
@inject
async def suggest_exercises(
    client_id: int,
    service: ClientDetailService = Depends(Provide[Container.client_detail_service]),
) -> ExerciseSuggestionsResponse:
    """
    Suggest exercises for the client's next session.

    Catalog failures are reported in the body's status and message, not as
    HTTP errors. A 409 means another client was opened before the fetch
    finished and the result was dropped.
    """
    try:
        suggestions = await service.load_suggestions(client_id)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    if suggestions is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Client view changed before exercise suggestions arrived",
        )
    return to_suggestions_response(suggestions)


@router.post("/{client_id}/edit", response_model=FormStateResponse)
@inject
async def begin_edit(
    client_id: int,
    service: ClientService = Depends(Provide[Container.client_service]),
    form: FormController = Depends(Provide[Container.form_controller]),
) -> FormStateResponse:
    """Switch the form to Edit mode, pre-filled from the client."""
    try:
        service.begin_edit(client_id)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return to_form_state_response(form)


@router.delete("/{client_id}", response_model=DeleteClientResponse)
@inject
async def delete_client(
    client_id: int,
    confirm: Annotated[bool, Query(description="Answer to the deletion confirmation prompt")] = False,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> DeleteClientResponse:
    """
    Delete a client once the confirmation prompt is answered.

    Without confirm=true nothing is removed; the response carries the prompt.
    Unknown IDs are a no-op.
    """
    result = service.delete(client_id, confirm=lambda prompt: confirm)
    return to_delete_response(result)
