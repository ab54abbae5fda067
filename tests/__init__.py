# tests\__init__.py
"""
Test Suite for Quote Scribe.

Organization:
- `core`: Domain models and use cases, run against the in-memory medium and a mocked Generation Client.
- `services`: The Entity Store and its consistency rules.
- `adapters`: Storage mediums, the Persistence Adapter, the OpenRouter client and the HTTP API.
"""
