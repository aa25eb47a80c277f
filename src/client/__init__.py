"""Typed async client for the FitCRM API."""
from src.client.fitcrm_client import FitCRMClient
from src.client.schemas import (
    ClientDetailResponse,
    ClientFormRequest,
    ClientResponse,
    ClientTableResponse,
    DeleteClientResponse,
    ExerciseSuggestionsResponse,
    FormStateResponse,
    SessionResponse,
    SubmitClientResponse,
)

__all__ = [
    "FitCRMClient",
    "ClientDetailResponse",
    "ClientFormRequest",
    "ClientResponse",
    "ClientTableResponse",
    "DeleteClientResponse",
    "ExerciseSuggestionsResponse",
    "FormStateResponse",
    "SessionResponse",
    "SubmitClientResponse",
]
