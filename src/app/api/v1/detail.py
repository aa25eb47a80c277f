"""Actions available from the client detail view, plus the session snapshot."""
from fastapi import APIRouter, Depends, HTTPException, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.domain.models import SessionState
from src.app.core.services.client_detail_service import CLIENT_MISSING_MESSAGE, ClientDetailService
from src.app.core.services.form_controller import FormController
from src.client.schemas import FormStateResponse, SessionResponse
from src.app.api.mappers import to_form_state_response, to_session_response
from src.shared.exceptions import EntityNotFound, NoClientSelected
from src.app.logging import get_logger

router = APIRouter(tags=["detail"])
logger = get_logger(__name__)


@router.post("/detail/edit", response_model=FormStateResponse)
@inject
async def edit_viewed_client(
    service: ClientDetailService = Depends(Provide[Container.client_detail_service]),
    form: FormController = Depends(Provide[Container.form_controller]),
) -> FormStateResponse:
    """
    Edit the client currently shown in the detail view.

    Raises:
        HTTPException 400: If no client has been viewed
        HTTPException 404: If the viewed client was deleted meanwhile
    """
    try:
        service.edit_current()
    except NoClientSelected as e:
        logger.error(f"Cannot edit from detail view: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except EntityNotFound as e:
        logger.error(f"Client not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CLIENT_MISSING_MESSAGE)
    return to_form_state_response(form)


@router.get("/session", response_model=SessionResponse)
@inject
async def get_session(
    session: SessionState = Depends(Provide[Container.session]),
) -> SessionResponse:
    """Get the current page, form mode and selected client."""
    return to_session_response(session)
