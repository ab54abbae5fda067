# tests\conftest.py
from datetime import datetime, timezone

import pytest
from unittest.mock import AsyncMock, MagicMock
from dependency_injector import providers

from quote_scribe.shared.container import container as app_container
from quote_scribe.adapters.llm.openrouter_client import OpenRouterClient
from quote_scribe.adapters.persistence.json_adapter import JsonStorageAdapter
from quote_scribe.adapters.persistence.storage_medium import InMemoryStorageMedium
from quote_scribe.core.domain.models import Quote, Reflection
from quote_scribe.services.entity_store import EntityStore

VALID_KEY = "sk-or-v1-0123456789abcdef0123"

@pytest.fixture(scope="function")
def medium():
    """A fresh, unlimited in-memory storage medium."""
    return InMemoryStorageMedium()

@pytest.fixture(scope="function")
def storage(medium):
    return JsonStorageAdapter(medium)

@pytest.fixture(scope="function")
def store(storage):
    return EntityStore(storage)

@pytest.fixture(scope="function")
def mock_generator():
    """Returns a mock Generation Client bound to whatever key it was built with."""
    generator = MagicMock(spec=OpenRouterClient)
    # Async methods must be mocked with AsyncMock
    generator.generate_quote = AsyncMock(return_value="Be kind.")
    generator.validate_credential = AsyncMock(return_value=True)
    generator.list_models = AsyncMock(return_value=[])
    generator.get_usage = AsyncMock(return_value={})
    return generator

@pytest.fixture(scope="function")
def generator_factory(mock_generator):
    """Stands in for the container's Factory: called with api_key=..., returns the mock."""
    return MagicMock(return_value=mock_generator)

@pytest.fixture(scope="function")
def container(medium, generator_factory):
    """
    The application container with infrastructure replaced:
    storage goes to the in-memory medium, generation to the mock client.

    The global instance is overridden because the routers are wired to it.
    """
    app_container.reset_singletons()
    app_container.storage_medium.override(medium)
    app_container.generation_client.override(providers.Callable(generator_factory))

    yield app_container

    app_container.storage_medium.reset_override()
    app_container.generation_client.reset_override()
    app_container.reset_singletons()

@pytest.fixture
def created_at():
    return datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

@pytest.fixture
def sample_quote(created_at):
    return Quote(id="q1", text="Be kind.", created_at=created_at)

@pytest.fixture
def sample_reflection(created_at):
    return Reflection(id="r1", quote_id="q1", text="Kindness costs nothing.", created_at=created_at)
