from fastapi import APIRouter, Depends, HTTPException, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.client_service import ClientService
from src.app.core.services.form_controller import FormController
from src.client.schemas import ClientFormRequest, FormStateResponse, SubmitClientResponse
from src.app.api.mappers import to_client_form, to_form_state_response, to_submit_response
from src.shared.exceptions import ClientValidationError
from src.app.logging import get_logger

router = APIRouter(prefix="/form", tags=["form"])
logger = get_logger(__name__)


@router.get("/", response_model=FormStateResponse)
@inject
async def get_form(
    form: FormController = Depends(Provide[Container.form_controller]),
) -> FormStateResponse:
    """Get the form fields and whether a submit adds or saves changes."""
    return to_form_state_response(form)


@router.post("/new", response_model=FormStateResponse)
@inject
async def new_client_form(
    service: ClientService = Depends(Provide[Container.client_service]),
    form: FormController = Depends(Provide[Container.form_controller]),
) -> FormStateResponse:
    """Open an empty form in Add mode."""
    service.start_new()
    return to_form_state_response(form)


@router.post("/submit", response_model=SubmitClientResponse)
@inject
async def submit_form(
    request: ClientFormRequest,
    service: ClientService = Depends(Provide[Container.client_service]),
) -> SubmitClientResponse:
    """
    Submit the client form.

    In Add mode a new client is appended; in Edit mode the record being
    edited is replaced and the form returns to Add mode.

    Raises:
        HTTPException 400: With the first violated validation rule
    """
    try:
        result = service.submit(to_client_form(request))
    except ClientValidationError as e:
        logger.error(f"Failed to save client due to validation error: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return to_submit_response(result)


@router.post("/cancel", response_model=FormStateResponse)
@inject
async def cancel_edit(
    service: ClientService = Depends(Provide[Container.client_service]),
    form: FormController = Depends(Provide[Container.form_controller]),
) -> FormStateResponse:
    """Abandon an edit: back to Add mode with a cleared form."""
    service.cancel_edit()
    return to_form_state_response(form)
