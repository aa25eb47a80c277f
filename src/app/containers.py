"""Dependency injection container using dependency-injector library."""
from datetime import date

from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.storage.local_store import LocalKeyValueStore, LocalStoreSettings

from src.app.core.domain.models import SessionState
from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.client_store import ClientStore
from src.app.infrastructure.client_repository import ClientRepository
from src.app.infrastructure.exercise_catalog import ExerciseCatalog, ExerciseCatalogSettings

from src.app.core.services.form_controller import FormController
from src.app.core.services.client_service import ClientService
from src.app.core.services.client_search_service import ClientSearchService
from src.app.core.services.exercise_suggestions import ExerciseSuggestionService
from src.app.core.services.client_detail_service import ClientDetailService

API_MODULES = [
    "src.app.api.v1.clients",
    "src.app.api.v1.form",
    "src.app.api.v1.detail",
]


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(modules=API_MODULES)

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # Current calendar date, overridable in tests
    today = providers.Object(date.today)

    # =========================================================================
    # SINGLETON - Local storage (one JSON document per process)
    # =========================================================================
    local_store_settings = providers.Singleton(
        LocalStoreSettings,
        path=config.provided.storage.path,
    )

    local_store = providers.Singleton(
        LocalKeyValueStore,
        settings=local_store_settings,
    )

    # =========================================================================
    # SINGLETONS - Client persistence
    # The repository reads the store once and is the working copy afterwards.
    # =========================================================================
    client_mapper = providers.Singleton(ClientMapper)

    client_store = providers.Singleton(
        ClientStore,
        store=local_store,
        mapper=client_mapper,
        key=config.provided.storage.clients_key,
    )

    client_repository = providers.Singleton(
        ClientRepository,
        store=client_store,
    )

    # =========================================================================
    # SINGLETON - Session state (editing id, viewed id, current page, form)
    # =========================================================================
    session = providers.Singleton(SessionState)

    # =========================================================================
    # SINGLETON - Exercise catalog
    # =========================================================================
    exercise_catalog_settings = providers.Singleton(
        ExerciseCatalogSettings,
        base_url=config.provided.exercise_api.base_url,
        language_id=config.provided.exercise_api.language_id,
        limit=config.provided.exercise_api.limit,
        timeout=config.provided.exercise_api.timeout,
    )

    exercise_catalog = providers.Singleton(
        ExerciseCatalog,
        settings=exercise_catalog_settings,
    )

    # =========================================================================
    # FACTORIES - Services (stateless; all state lives in the singletons above)
    # =========================================================================
    form_controller = providers.Factory(
        FormController,
        session=session,
        today=today,
    )

    client_service = providers.Factory(
        ClientService,
        repository=client_repository,
        form=form_controller,
        session=session,
    )

    client_search_service = providers.Factory(
        ClientSearchService,
        repository=client_repository,
    )

    exercise_suggestion_service = providers.Factory(
        ExerciseSuggestionService,
        catalog=exercise_catalog,
        language_id=config.provided.exercise_api.language_id,
        sample_size=config.provided.exercise_api.suggestion_count,
    )

    client_detail_service = providers.Factory(
        ClientDetailService,
        client_service=client_service,
        suggestion_service=exercise_suggestion_service,
        session=session,
    )
