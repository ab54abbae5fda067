# quote_scribe\adapters\api\__init__.py
"""
Driving Adapter: the local HTTP API (FastAPI).
Build the application with `quote_scribe.adapters.api.main.create_app`.
"""
