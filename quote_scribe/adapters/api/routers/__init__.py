# quote_scribe\adapters\api\routers\__init__.py
"""
API Route Definitions.

This package contains the route handlers (controllers) organized by area.
- `quotes`, `favorites`, `reflections`: the collections.
- `generation`: quote generation through OpenRouter.
- `settings`: API key and theme.
- `data`: stats, backup, restore and reset.
- `health`: System health checks.
"""

from .quotes import router as quotes_router
from .favorites import router as favorites_router
from .reflections import router as reflections_router
from .generation import router as generation_router
from .settings import router as settings_router
from .data import router as data_router
from .health import router as health_router

__all__ = [
    "quotes_router",
    "favorites_router",
    "reflections_router",
    "generation_router",
    "settings_router",
    "data_router",
    "health_router",
]
