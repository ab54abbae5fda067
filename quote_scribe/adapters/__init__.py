# quote_scribe\adapters\__init__.py
"""
Infrastructure Adapters.

This package contains the concrete implementations of the Ports defined in `quote_scribe.core.ports`.
These adapters connect the application to the outside world:
- `api`: The Primary Adapter (Driving) - FastAPI web server.
- `persistence`: Secondary Adapter (Driven) - storage mediums and the JSON Persistence Adapter.
- `llm`: Secondary Adapter (Driven) - the OpenRouter Generation Client.

In Hexagonal Architecture, dependencies point INWARD. These modules depend on `quote_scribe.core`,
but `quote_scribe.core` never imports from here.
"""
