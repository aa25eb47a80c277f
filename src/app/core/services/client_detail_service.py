"""Detail view of a single client plus its exercise suggestions."""
import logging

from src.app.core.domain.models import Client, ClientDetail, ExerciseSuggestions, Page, SessionState
from src.app.core.services.client_service import ClientService
from src.app.core.services.exercise_suggestions import LOADING_MESSAGE, ExerciseSuggestionService
from src.shared.exceptions import EntityNotFound, NoClientSelected

logger = logging.getLogger(__name__)

TRAINING_HISTORY_PLACEHOLDER = "No training history recorded yet."
CLIENT_MISSING_MESSAGE = "Could not find this client to edit."


class ClientDetailService:
    """
    Shows the currently selected client read-only and loads exercise suggestions.

    Each visit bumps the session's view generation. A suggestion fetch that
    resolves after the user has moved to another visit is discarded.
    """

    def __init__(
        self,
        client_service: ClientService,
        suggestion_service: ExerciseSuggestionService,
        session: SessionState,
    ):
        self.client_service = client_service
        self.suggestion_service = suggestion_service
        self.session = session

    def show(self, client_id: int) -> ClientDetail:
        """
        Select a client and navigate to its detail view.

        Raises:
            EntityNotFound: If no client has this ID; the current view is kept
        """
        client = self.client_service.get_client(client_id)

        self.session.current_viewed_id = client.id
        self.session.view_generation += 1
        self.session.exercise_suggestions = None
        self.session.page = Page.CLIENT_VIEW

        return ClientDetail(
            client=client,
            training_history_message=TRAINING_HISTORY_PLACEHOLDER,
            exercises_message=LOADING_MESSAGE,
        )

    async def load_suggestions(self, client_id: int) -> ExerciseSuggestions | None:
        """
        Fetch exercise suggestions for the client's detail view.

        Opens the detail view first when another client (or none) is shown.

        Returns:
            The suggestions, or None when the view changed while the fetch was
            in flight and the result was discarded
        """
        if self.session.current_viewed_id != client_id:
            self.show(client_id)

        generation = self.session.view_generation
        suggestions = await self.suggestion_service.suggest()

        if self.session.view_generation != generation or self.session.current_viewed_id != client_id:
            logger.info("Discarding stale exercise suggestions for client %s", client_id)
            return None

        self.session.exercise_suggestions = suggestions
        return suggestions

    def edit_current(self) -> Client:
        """
        Start editing the client currently shown in the detail view.

        Raises:
            NoClientSelected: If no client has been viewed yet
            EntityNotFound: If the viewed client no longer exists
        """
        if self.session.current_viewed_id is None:
            raise NoClientSelected()

        try:
            return self.client_service.begin_edit(self.session.current_viewed_id)
        except EntityNotFound:
            logger.warning("Viewed client %s no longer exists", self.session.current_viewed_id)
            raise
