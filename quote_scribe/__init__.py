# quote_scribe\__init__.py
"""
Quote Scribe - local quote journal with favorites and reflections.

This package follows Hexagonal Architecture (Ports & Adapters):
the Entity Store and use cases sit in the core, storage mediums, the
OpenRouter client and the HTTP API are adapters around it.
"""

__version__ = "1.0.0"
