"""Suggests a handful of exercises for a client's next session."""
import logging
import random
from typing import Optional

from src.app.core.domain.models import (
    ExerciseFetchStatus,
    ExerciseInfo,
    ExerciseSuggestion,
    ExerciseSuggestions,
)
from src.app.infrastructure.exercise_catalog import ExerciseCatalog
from src.shared.exceptions import ExerciseCatalogError

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading exercises for the next session…"
EMPTY_MESSAGE = "No exercises found from the API at the moment."
NO_LANGUAGE_MATCH_MESSAGE = "No English exercises found from the API at the moment."
NETWORK_ERROR_MESSAGE = (
    "Unable to connect to the Wger exercise API. "
    "Please check your internet connection and try again."
)


def bad_status_message(error: ExerciseCatalogError) -> str:
    return f"Could not load exercises: {error}. Please try again later."


def pick_suggestions(
    exercises: list[ExerciseInfo],
    language_id: int,
    sample_size: int,
    rng: random.Random,
) -> list[ExerciseSuggestion]:
    """
    Keep exercises named in the language, shuffle once and take up to sample_size.

    Sampling is without replacement, so no exercise appears twice.
    """
    named = [
        ExerciseSuggestion(exercise_id=exercise.id, name=name)
        for exercise in exercises
        if (name := exercise.name_in(language_id)) is not None
    ]
    rng.shuffle(named)
    return named[:sample_size]


class ExerciseSuggestionService:
    """
    Turns one catalog fetch into display-ready suggestions.

    Never raises for catalog problems: each failure mode maps to its own
    status and placeholder message.
    """

    def __init__(
        self,
        catalog: ExerciseCatalog,
        language_id: int = 2,
        sample_size: int = 5,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the suggestion service.

        Args:
            catalog: Exercise catalog client
            language_id: Only names in this catalog language are shown
            sample_size: Maximum number of suggestions per fetch
            rng: Random source for sampling; a fresh unseeded one by default
        """
        self.catalog = catalog
        self.language_id = language_id
        self.sample_size = sample_size
        self.rng = rng or random.Random()

    async def suggest(self) -> ExerciseSuggestions:
        try:
            exercises = await self.catalog.fetch_exercises()
        except ExerciseCatalogError as e:
            if e.is_network_error:
                return ExerciseSuggestions(
                    status=ExerciseFetchStatus.NETWORK_ERROR,
                    message=NETWORK_ERROR_MESSAGE,
                )
            return ExerciseSuggestions(
                status=ExerciseFetchStatus.BAD_STATUS,
                message=bad_status_message(e),
            )

        if not exercises:
            return ExerciseSuggestions(status=ExerciseFetchStatus.EMPTY, message=EMPTY_MESSAGE)

        items = pick_suggestions(exercises, self.language_id, self.sample_size, self.rng)
        if not items:
            logger.warning("None of %d exercises has a name in language %d", len(exercises), self.language_id)
            return ExerciseSuggestions(
                status=ExerciseFetchStatus.NO_LANGUAGE_MATCH,
                message=NO_LANGUAGE_MATCH_MESSAGE,
            )

        logger.info("Suggesting %d exercises", len(items))
        return ExerciseSuggestions(status=ExerciseFetchStatus.LOADED, items=items)
