"""API schemas for client form, table and detail requests and responses."""
from datetime import date
from enum import Enum

from pydantic import BaseModel, Field


class GenderEnum(str, Enum):
    """Gender options for API."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class FormModeEnum(str, Enum):
    """Client form mode for API."""
    ADD = "ADD"
    EDIT = "EDIT"


class PageEnum(str, Enum):
    """Page currently shown to the user."""
    LIST = "LIST"
    FORM = "FORM"
    CLIENT_VIEW = "CLIENT_VIEW"


class RowActionKindEnum(str, Enum):
    VIEW = "view"
    EDIT = "edit"
    DELETE = "delete"


class SubmitActionEnum(str, Enum):
    ADDED = "ADDED"
    UPDATED = "UPDATED"


class ExerciseFetchStatusEnum(str, Enum):
    """Outcome of an exercise suggestion fetch."""
    LOADED = "LOADED"
    EMPTY = "EMPTY"
    NO_LANGUAGE_MATCH = "NO_LANGUAGE_MATCH"
    NETWORK_ERROR = "NETWORK_ERROR"
    BAD_STATUS = "BAD_STATUS"


class ClientFormRequest(BaseModel):
    """
    Request schema carrying the raw client form fields.

    Values are sent exactly as typed; the service trims and validates them,
    so malformed values produce a 400 with the form's own message.
    """
    full_name: str = ""
    age: str = ""
    gender: str = ""
    email: str = ""
    phone: str = ""
    goal_choice: str = Field(default="", description="Goal picked from the dropdown")
    goal_free: str = Field(default="", description="Goal typed as free text; wins over goal_choice")
    start_date: str = Field(default="", description="YYYY-MM-DD")
    end_date: str = Field(default="", description="YYYY-MM-DD")


class ClientResponse(BaseModel):
    """Response schema for client data returned by the API."""
    id: int
    full_name: str
    age: int | None = None
    gender: GenderEnum | None = None
    email: str
    phone: str
    goal: str
    start_date: date
    end_date: date | None = None

    model_config = {"from_attributes": True}


class RowActionResponse(BaseModel):
    kind: RowActionKindEnum
    client_id: int
    label: str


class ClientRowResponse(BaseModel):
    """One display row of the client table."""
    client_id: int
    full_name: str
    email: str
    phone: str
    goal: str
    start_date: str
    end_date: str = Field(..., description="End date, or a dash when absent")
    actions: list[RowActionResponse]


class ClientTableResponse(BaseModel):
    """Response schema for the (possibly filtered) client table."""
    rows: list[ClientRowResponse]
    count: int
    count_text: str
    placeholder: str | None = Field(default=None, description="Shown instead of rows when empty")


class FormStateResponse(BaseModel):
    """Response schema for the client form and its mode."""
    mode: FormModeEnum
    editing_id: int | None = None
    submit_label: str
    cancel_visible: bool
    fields: ClientFormRequest
    page: PageEnum


class SubmitClientResponse(BaseModel):
    """Response schema for a successful form submission."""
    action: SubmitActionEnum
    client: ClientResponse | None = None
    message: str
    table: ClientTableResponse


class DeleteClientResponse(BaseModel):
    """Response schema for a delete request."""
    deleted: bool
    client_id: int
    prompt: str | None = Field(default=None, description="Confirmation question that was asked")
    table: ClientTableResponse


class ClientDetailResponse(BaseModel):
    """Response schema for the read-only client detail view."""
    client: ClientResponse
    training_history_message: str
    exercises_message: str


class ExerciseSuggestionResponse(BaseModel):
    exercise_id: int | None = None
    name: str


class ExerciseSuggestionsResponse(BaseModel):
    """Response schema for suggested exercises."""
    status: ExerciseFetchStatusEnum
    items: list[ExerciseSuggestionResponse]
    message: str = Field(default="", description="Placeholder text; empty when items are shown")


class SessionResponse(BaseModel):
    """Response schema for the transient session state."""
    page: PageEnum
    mode: FormModeEnum
    editing_id: int | None = None
    current_viewed_id: int | None = None
