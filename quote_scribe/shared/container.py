# quote_scribe\shared\container.py
from dependency_injector import containers, providers

from quote_scribe.shared.config import settings
from quote_scribe.adapters.persistence.storage_medium import build_storage_medium
from quote_scribe.adapters.persistence.json_adapter import JsonStorageAdapter
from quote_scribe.adapters.llm.openrouter_client import OpenRouterClient
from quote_scribe.core.domain.identifiers import UUIDGenerator
from quote_scribe.services.entity_store import EntityStore

from quote_scribe.core.use_cases.quotes import SaveQuote, UpdateQuote, DeleteQuote
from quote_scribe.core.use_cases.favorites import AddFavorite, RemoveFavorite, ToggleFavorite
from quote_scribe.core.use_cases.reflections import SaveReflection, UpdateReflection, DeleteReflection
from quote_scribe.core.use_cases.generate_quote import GenerateQuote
from quote_scribe.core.use_cases.credentials import SaveCredential, TestCredential, DeleteCredential
from quote_scribe.core.use_cases.data import ImportSnapshot, ResetStore, SetTheme

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Configuration
    # We load settings directly, but wrapping them allows overriding in tests.
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Persistence
    # The raw medium and the adapter are process-wide: one access point to storage.
    storage_medium = providers.Singleton(
        build_storage_medium,
        backend=config.STORAGE_BACKEND,
        base_path=config.STORAGE_PATH,
        quota_bytes=config.STORAGE_QUOTA_BYTES,
    )

    key_value_store = providers.Singleton(
        JsonStorageAdapter,
        medium=storage_medium,
    )

    entity_store = providers.Singleton(
        EntityStore,
        storage=key_value_store,
    )

    id_generator = providers.Singleton(UUIDGenerator)

    # 3. Generation Client
    # Factory, not Singleton: each call binds a fresh client to the stored key.
    # Use cases receive the provider itself and call it with api_key=...
    generation_client = providers.Factory(
        OpenRouterClient,
        base_url=config.OPENROUTER_BASE_URL,
        model=config.OPENROUTER_MODEL,
        timeout=config.OPENROUTER_TIMEOUT,
        max_tokens=config.OPENROUTER_MAX_TOKENS,
        temperature=config.OPENROUTER_TEMPERATURE,
        top_p=config.OPENROUTER_TOP_P,
        referer=config.OPENROUTER_REFERER,
        title=config.OPENROUTER_TITLE,
    )

    # 4. Use Cases (Application Controller)
    # Factory: New instance created for every request (stateless logic),
    # but with Singleton dependencies injected.

    save_quote_use_case = providers.Factory(SaveQuote, store=entity_store, id_generator=id_generator)
    update_quote_use_case = providers.Factory(UpdateQuote, store=entity_store)
    delete_quote_use_case = providers.Factory(DeleteQuote, store=entity_store)

    add_favorite_use_case = providers.Factory(AddFavorite, store=entity_store)
    remove_favorite_use_case = providers.Factory(RemoveFavorite, store=entity_store)
    toggle_favorite_use_case = providers.Factory(ToggleFavorite, store=entity_store)

    save_reflection_use_case = providers.Factory(SaveReflection, store=entity_store, id_generator=id_generator)
    update_reflection_use_case = providers.Factory(UpdateReflection, store=entity_store)
    delete_reflection_use_case = providers.Factory(DeleteReflection, store=entity_store)

    generate_quote_use_case = providers.Factory(
        GenerateQuote,
        store=entity_store,
        generator_factory=generation_client.provider,
    )

    save_credential_use_case = providers.Factory(
        SaveCredential,
        store=entity_store,
        generator_factory=generation_client.provider,
    )
    test_credential_use_case = providers.Factory(
        TestCredential,
        store=entity_store,
        generator_factory=generation_client.provider,
    )
    delete_credential_use_case = providers.Factory(DeleteCredential, store=entity_store)

    import_snapshot_use_case = providers.Factory(ImportSnapshot, store=entity_store)
    reset_store_use_case = providers.Factory(ResetStore, store=entity_store)
    set_theme_use_case = providers.Factory(SetTheme, store=entity_store)

# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
