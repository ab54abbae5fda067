# quote_scribe/core/use_cases/data.py
from typing import Any, Dict
import structlog

from quote_scribe.core.domain.exceptions import StorageWriteError
from quote_scribe.core.domain.models import ImportResult, Theme
from quote_scribe.services.entity_store import EntityStore
from quote_scribe.shared.telemetry import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class ImportSnapshot:
    """
    Use Case: restores a backup. A partial import is not an exception;
    the result tells the caller which collections failed.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    def execute(self, data: Dict[str, Any]) -> ImportResult:
        with tracer.start_as_current_span("use_case.import_snapshot") as span:
            result = self.store.import_snapshot(data)
            span.set_attribute("app.import_ok", result.ok)
            return result


class ResetStore:
    """Use Case: wipes every record, including the credential and theme."""

    def __init__(self, store: EntityStore):
        self.store = store

    def execute(self) -> None:
        with tracer.start_as_current_span("use_case.reset_store"):
            if not self.store.clear_all():
                raise StorageWriteError("reset data")
            logger.warning("store_reset")


class SetTheme:
    def __init__(self, store: EntityStore):
        self.store = store

    def execute(self, theme: Theme) -> Theme:
        if not self.store.set_theme(theme):
            raise StorageWriteError("save theme")
        return self.store.get_theme()
