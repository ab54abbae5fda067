# quote_scribe\core\__init__.py
"""
Core Domain Layer.

This package contains the pure business logic and entities of the system.
- No dependencies on frameworks (FastAPI).
- No dependencies on infrastructure (file system, HTTP).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
