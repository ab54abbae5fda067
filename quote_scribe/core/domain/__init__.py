# quote_scribe\core\domain\__init__.py
"""
Domain Entities and Value Objects.

This package defines the core data structures used throughout the application
(Quote, Reflection, merge patches, snapshots) and the exception taxonomy.
They are devoid of any infrastructure logic.
"""
