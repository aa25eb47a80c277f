"""Form controller: form field values and the Add/Edit mode switch."""
import logging
from datetime import date
from typing import Callable

from src.app.core.domain.models import Client, ClientFields, ClientForm, FormMode, SessionState
from src.app.core.services.validators import validate_client_form

logger = logging.getLogger(__name__)

ADD_LABEL = "Add Client"
SAVE_LABEL = "Save Changes"


class FormController:
    """
    Reads and writes the client form held in the session state.

    Add mode has no editing id; Edit mode remembers which record the form
    was filled from.
    """

    def __init__(self, session: SessionState, today: Callable[[], date] = date.today):
        self.session = session
        self.today = today

    @property
    def mode(self) -> FormMode:
        return self.session.mode

    @property
    def editing_id(self) -> int | None:
        return self.session.editing_id

    @property
    def submit_label(self) -> str:
        return ADD_LABEL if self.mode == FormMode.ADD else SAVE_LABEL

    @property
    def cancel_visible(self) -> bool:
        return self.mode == FormMode.EDIT

    @property
    def fields(self) -> ClientForm:
        return self.session.form

    def write_fields(self, form: ClientForm) -> None:
        """Replace the form field values as typed by the user."""
        self.session.form = form.model_copy()

    def clear(self) -> None:
        self.session.form = ClientForm()

    def fill_from_client(self, client: Client) -> None:
        self.session.form = ClientForm.from_client(client)

    def enter_add_mode(self) -> None:
        self.session.editing_id = None
        self.clear()

    def enter_edit_mode(self, client: Client) -> None:
        self.session.editing_id = client.id
        self.fill_from_client(client)
        logger.info("Editing client %s", client.id)

    def read_validated(self) -> ClientFields:
        """
        Validate the current form fields.

        Raises:
            ClientValidationError: If any rule is violated; the form is left as is
        """
        return validate_client_form(self.session.form, self.today())
