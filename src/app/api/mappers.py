"""Mappers for converting between domain models and API schemas."""
from src.app.core.domain.models import (
    Client,
    ClientDetail,
    ClientForm,
    ClientTable,
    DeleteResult,
    ExerciseSuggestions,
    SessionState,
    SubmitResult,
)
from src.app.core.services.form_controller import FormController
from src.client.schemas import (
    ClientDetailResponse,
    ClientFormRequest,
    ClientResponse,
    ClientRowResponse,
    ClientTableResponse,
    DeleteClientResponse,
    ExerciseFetchStatusEnum,
    ExerciseSuggestionResponse,
    ExerciseSuggestionsResponse,
    FormModeEnum,
    FormStateResponse,
    GenderEnum,
    PageEnum,
    RowActionKindEnum,
    RowActionResponse,
    SessionResponse,
    SubmitActionEnum,
    SubmitClientResponse,
)


def to_client_form(request: ClientFormRequest) -> ClientForm:
    """Convert a ClientFormRequest API schema to the ClientForm domain model."""
    return ClientForm(**request.model_dump())


def to_client_response(client: Client) -> ClientResponse:
    """
    Convert a Client domain model to ClientResponse API schema.

    Args:
        client: Domain model

    Returns:
        API response schema
    """
    return ClientResponse(
        id=client.id,
        full_name=client.full_name,
        age=client.age,
        gender=GenderEnum(client.gender.value) if client.gender else None,
        email=client.email,
        phone=client.phone,
        goal=client.goal,
        start_date=client.start_date,
        end_date=client.end_date,
    )


def to_table_response(table: ClientTable) -> ClientTableResponse:
    return ClientTableResponse(
        rows=[
            ClientRowResponse(
                client_id=row.client_id,
                full_name=row.full_name,
                email=row.email,
                phone=row.phone,
                goal=row.goal,
                start_date=row.start_date,
                end_date=row.end_date,
                actions=[
                    RowActionResponse(
                        kind=RowActionKindEnum(action.kind.value),
                        client_id=action.client_id,
                        label=action.label,
                    )
                    for action in row.actions
                ],
            )
            for row in table.rows
        ],
        count=table.count,
        count_text=table.count_text,
        placeholder=table.placeholder,
    )


def to_form_state_response(form: FormController) -> FormStateResponse:
    """Convert the form controller's current state to FormStateResponse API schema."""
    return FormStateResponse(
        mode=FormModeEnum(form.mode.value),
        editing_id=form.editing_id,
        submit_label=form.submit_label,
        cancel_visible=form.cancel_visible,
        fields=ClientFormRequest(**form.fields.model_dump()),
        page=PageEnum(form.session.page.value),
    )


def to_submit_response(result: SubmitResult) -> SubmitClientResponse:
    return SubmitClientResponse(
        action=SubmitActionEnum(result.action.value),
        client=to_client_response(result.client) if result.client else None,
        message=result.message,
        table=to_table_response(result.table),
    )


def to_delete_response(result: DeleteResult) -> DeleteClientResponse:
    return DeleteClientResponse(
        deleted=result.deleted,
        client_id=result.client_id,
        prompt=result.prompt,
        table=to_table_response(result.table),
    )


def to_detail_response(detail: ClientDetail) -> ClientDetailResponse:
    return ClientDetailResponse(
        client=to_client_response(detail.client),
        training_history_message=detail.training_history_message,
        exercises_message=detail.exercises_message,
    )


def to_suggestions_response(suggestions: ExerciseSuggestions) -> ExerciseSuggestionsResponse:
    """
    Convert ExerciseSuggestions to the API schema.

    Args:
        suggestions: Domain model with status, items and placeholder message

    Returns:
        API response schema
    """
    return ExerciseSuggestionsResponse(
        status=ExerciseFetchStatusEnum(suggestions.status.value),
        items=[
            ExerciseSuggestionResponse(exercise_id=item.exercise_id, name=item.name)
            for item in suggestions.items
        ],
        message=suggestions.message,
    )


def to_session_response(session: SessionState) -> SessionResponse:
    return SessionResponse(
        page=PageEnum(session.page.value),
        mode=FormModeEnum(session.mode.value),
        editing_id=session.editing_id,
        current_viewed_id=session.current_viewed_id,
    )
