"""Domain models used in business logic."""
from datetime import date
from enum import StrEnum

from pydantic import BaseModel, Field


class Gender(StrEnum):
    """Gender options offered by the client form."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class Client(BaseModel):
    """Domain model for Client used in business logic."""
    id: int = Field(..., description="Unique client ID derived from the creation timestamp")
    full_name: str = Field(..., min_length=1, description="Full name cannot be blank")
    age: int | None = Field(default=None, description="Age in years, optional")
    gender: Gender | None = None
    email: str = Field(..., description="Email address ending in .com or .edu")
    phone: str = Field(..., description="Phone number as typed, 11 digits once stripped")
    goal: str = Field(..., description="Fitness goal, free text or a dropdown choice")
    start_date: date = Field(..., description="Membership start date")
    end_date: date | None = Field(default=None, description="Membership end date")

    model_config = {"from_attributes": True}


class ClientForm(BaseModel):
    """
    Raw values of the client form fields.

    Every field is kept as typed; trimming and parsing happen during validation.
    The goal can come from the dropdown (goal_choice) or the free-text box
    (goal_free); free text wins when both are set.
    """
    full_name: str = ""
    age: str = ""
    gender: str = ""
    email: str = ""
    phone: str = ""
    goal_choice: str = ""
    goal_free: str = ""
    start_date: str = ""
    end_date: str = ""

    @classmethod
    def from_client(cls, client: Client) -> "ClientForm":
        """Pre-populate the form from a record; the goal goes into the free-text field."""
        return cls(
            full_name=client.full_name,
            age=str(client.age) if client.age is not None else "",
            gender=client.gender.value if client.gender else "",
            email=client.email,
            phone=client.phone,
            goal_choice="",
            goal_free=client.goal,
            start_date=client.start_date.isoformat(),
            end_date=client.end_date.isoformat() if client.end_date else "",
        )


class ClientFields(BaseModel):
    """Validated, parsed form values ready to become (or update) a Client."""
    full_name: str
    age: int | None = None
    gender: Gender | None = None
    email: str
    phone: str
    goal: str
    start_date: date
    end_date: date


class FormMode(StrEnum):
    """Whether a form submission creates or replaces a record."""
    ADD = "ADD"
    EDIT = "EDIT"


class Page(StrEnum):
    """Page currently shown to the user."""
    LIST = "LIST"
    FORM = "FORM"
    CLIENT_VIEW = "CLIENT_VIEW"


# =============================================================================
# Table projection
# =============================================================================

class RowActionKind(StrEnum):
    """Inline actions offered on every table row."""
    VIEW = "view"
    EDIT = "edit"
    DELETE = "delete"


class RowAction(BaseModel):
    """An inline row affordance keyed by the record's id."""
    kind: RowActionKind
    client_id: int
    label: str

    model_config = {"frozen": True}


class ClientRow(BaseModel):
    """Display row for one client."""
    client_id: int
    full_name: str
    email: str
    phone: str
    goal: str
    start_date: str
    end_date: str
    actions: list[RowAction] = Field(default_factory=list)


class ClientTable(BaseModel):
    """
    Projection of an ordered client sequence into display rows.

    placeholder is set (and rows empty) only when there is nothing to show.
    """
    rows: list[ClientRow] = Field(default_factory=list)
    count: int = 0
    count_text: str
    placeholder: str | None = None


class ClientDetail(BaseModel):
    """Read-only detail view of a single client."""
    client: Client
    training_history_message: str
    exercises_message: str = ""


# =============================================================================
# Exercise suggestions
# =============================================================================

class ExerciseFetchStatus(StrEnum):
    """Outcome of one exercise suggestion fetch."""
    LOADED = "LOADED"
    EMPTY = "EMPTY"
    NO_LANGUAGE_MATCH = "NO_LANGUAGE_MATCH"
    NETWORK_ERROR = "NETWORK_ERROR"
    BAD_STATUS = "BAD_STATUS"


class ExerciseTranslation(BaseModel):
    """A localized exercise name as returned by the catalog."""
    language: int | None = None
    name: str | None = None


class ExerciseInfo(BaseModel):
    """One catalog item; only the translations matter for suggestions."""
    id: int | None = None
    translations: list[ExerciseTranslation] | None = None

    model_config = {"extra": "ignore"}

    def name_in(self, language_id: int) -> str | None:
        """Return the trimmed name for a language, or None if missing or blank."""
        for translation in self.translations or []:
            if translation.language == language_id and translation.name and translation.name.strip():
                return translation.name.strip()
        return None


class ExerciseSuggestion(BaseModel):
    """A suggested exercise, shown by name only."""
    exercise_id: int | None = None
    name: str

    model_config = {"frozen": True}


class ExerciseSuggestions(BaseModel):
    """
    Result of an exercise suggestion fetch for the detail view.

    message is the placeholder text to display; it is empty once items are shown.
    """
    status: ExerciseFetchStatus
    items: list[ExerciseSuggestion] = Field(default_factory=list)
    message: str = ""


class SessionState(BaseModel):
    """
    Transient, non-persisted state of one user session.

    editing_id is None in Add mode. view_generation is bumped on every detail
    view visit so late exercise fetches can tell they are stale.
    """
    form: ClientForm = Field(default_factory=ClientForm)
    editing_id: int | None = None
    current_viewed_id: int | None = None
    page: Page = Page.LIST
    view_generation: int = 0
    exercise_suggestions: ExerciseSuggestions | None = None

    @property
    def mode(self) -> FormMode:
        return FormMode.ADD if self.editing_id is None else FormMode.EDIT


# =============================================================================
# Mutation outcomes
# =============================================================================

class SubmitAction(StrEnum):
    """What a successful form submission did."""
    ADDED = "ADDED"
    UPDATED = "UPDATED"


class SubmitResult(BaseModel):
    """
    Outcome of a successful form submission.

    client is None only when the record being edited vanished before saving.
    """
    action: SubmitAction
    client: Client | None = None
    message: str = ""
    table: ClientTable


class DeleteResult(BaseModel):
    """Outcome of a delete request; prompt is the confirmation question asked."""
    deleted: bool
    client_id: int
    prompt: str | None = None
    table: ClientTable
