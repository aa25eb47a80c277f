import logging
from typing import Callable

from src.app.core.domain.models import (
    Client,
    ClientForm,
    DeleteResult,
    FormMode,
    Page,
    SessionState,
    SubmitAction,
    SubmitResult,
)
from src.app.core.services.client_table import build_client_table
from src.app.core.services.form_controller import FormController
from src.app.infrastructure.client_repository import ClientRepository
from src.shared.exceptions import EntityNotFound

logger = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]


def delete_prompt(client: Client) -> str:
    return f'Delete client "{client.full_name}"?'


class ClientService:
    """Service for handling Client business logic: add, edit and delete."""

    def __init__(self, repository: ClientRepository, form: FormController, session: SessionState):
        self.repository = repository
        self.form = form
        self.session = session

    def get_client(self, client_id: int) -> Client:
        """Get a client by ID."""
        client = self.repository.get_by_id(client_id)
        if not client:
            logger.warning("No client found for id %s", client_id)
            raise EntityNotFound("Client", client_id)
        return client

    def list_clients(self) -> list[Client]:
        return self.repository.get_all()

    def submit(self, fields: ClientForm | None = None) -> SubmitResult:
        """
        Validate the form and add or update a client depending on the form mode.

        Args:
            fields: Raw form values to submit; the values already held by the
                    form are used when omitted

        Returns:
            SubmitResult with the saved client, a confirmation message and the
            re-rendered table

        Raises:
            ClientValidationError: If validation fails; nothing else changes
        """
        if fields is not None:
            self.form.write_fields(fields)

        validated = self.form.read_validated()

        if self.form.mode == FormMode.ADD:
            client = Client(id=self.repository.next_id(), **validated.model_dump())
            self.repository.add(client)
            logger.info("Added client %s", client.id)
            result_client: Client | None = client
            action = SubmitAction.ADDED
            message = f"New client saved: {client.full_name}"
        else:
            editing_id = self.form.editing_id
            existing = self.repository.get_by_id(editing_id)
            action = SubmitAction.UPDATED
            if existing is None:
                logger.warning("Client %s disappeared while being edited", editing_id)
                result_client = None
                message = ""
            else:
                result_client = existing.model_copy(update=validated.model_dump())
                self.repository.update(result_client)
                logger.info("Updated client %s", result_client.id)
                message = f"Client updated: {validated.full_name}"

            self.form.enter_add_mode()
            self.session.page = Page.LIST

        self.form.clear()
        return SubmitResult(
            action=action,
            client=result_client,
            message=message,
            table=build_client_table(self.repository.get_all()),
        )

    def delete(self, client_id: int, confirm: ConfirmCallback) -> DeleteResult:
        """
        Delete a client after interactive confirmation.

        Args:
            client_id: ID of the client to delete
            confirm: Asked with the confirmation prompt; deletion happens only on True

        Returns:
            DeleteResult telling whether the record was removed
        """
        client = self.repository.get_by_id(client_id)
        if client is None:
            logger.warning("No client found for id %s", client_id)
            return DeleteResult(
                deleted=False,
                client_id=client_id,
                table=build_client_table(self.repository.get_all()),
            )

        prompt = delete_prompt(client)
        deleted = False
        if confirm(prompt):
            deleted = self.repository.remove(client_id)
            logger.info("Deleted client %s", client_id)
        else:
            logger.info("Deletion of client %s cancelled", client_id)

        return DeleteResult(
            deleted=deleted,
            client_id=client_id,
            prompt=prompt,
            table=build_client_table(self.repository.get_all()),
        )

    def begin_edit(self, client_id: int) -> Client:
        """
        Switch the form to Edit mode for a client and navigate to the form.

        Raises:
            EntityNotFound: If no client has this ID; the form is left untouched
        """
        client = self.get_client(client_id)
        self.form.enter_edit_mode(client)
        self.session.page = Page.FORM
        return client

    def cancel_edit(self) -> None:
        """Return to Add mode with a cleared form and navigate to the list."""
        self.form.enter_add_mode()
        self.session.page = Page.LIST

    def start_new(self) -> None:
        """Open an empty form in Add mode."""
        self.form.enter_add_mode()
        self.session.page = Page.FORM
