# quote_scribe\__main__.py
import uvicorn

from quote_scribe.shared.config import settings


def main():
    """Serves the local API (`python -m quote_scribe` or the `quote-scribe` script)."""
    uvicorn.run(
        "quote_scribe.adapters.api.main:create_app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        factory=True,
    )


if __name__ == "__main__":
    main()
