# quote_scribe\core\domain\models.py
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

# --- Enums ---

class StorageKey(str, Enum):
    """Namespaced record keys of the persisted state layout."""
    API_KEY = "quote_scribe_api_key"
    QUOTES = "quote_scribe_quotes"
    FAVORITES = "quote_scribe_favorites"
    REFLECTIONS = "quote_scribe_reflections"
    THEME = "quote_scribe_theme"

class Theme(str, Enum):
    """Display preference kept alongside the collections."""
    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"

# --- Entities ---

class Quote(BaseModel):
    """
    A stored text snippet, the primary entity.

    Persisted as {id, text, createdAt}. Favorite status is not a field:
    it is derived from the favorite set on read.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Opaque unique identifier")
    text: str = Field(..., description="The quote body")
    created_at: datetime = Field(..., alias="createdAt")

class Reflection(BaseModel):
    """
    User-authored commentary linked to a Quote by reference.
    The reference may dangle once the quote is deleted.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1)
    quote_id: str = Field(..., alias="quoteId")
    text: str
    created_at: datetime = Field(..., alias="createdAt")

# --- Merge Patches ---

class QuotePatch(BaseModel):
    """
    Merge-patch for a Quote. Only mutable fields exist here, so id and
    createdAt cannot be changed through a patch; unknown keys are dropped.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    text: Optional[str] = None

    def apply_to(self, quote: Quote) -> Quote:
        updates = {}
        if self.text is not None:
            updates["text"] = self.text
        return quote.model_copy(update=updates)

class ReflectionPatch(BaseModel):
    """Merge-patch for a Reflection."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    text: Optional[str] = None
    quote_id: Optional[str] = Field(None, alias="quoteId")

    def apply_to(self, reflection: Reflection) -> Reflection:
        updates = {}
        if self.text is not None:
            updates["text"] = self.text
        if self.quote_id is not None:
            updates["quote_id"] = self.quote_id
        return reflection.model_copy(update=updates)

# --- Aggregates ---

class StoreStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_quotes: int = Field(0, alias="totalQuotes")
    total_favorites: int = Field(0, alias="totalFavorites")
    total_reflections: int = Field(0, alias="totalReflections")
    has_api_key: bool = Field(False, alias="hasApiKey")

class Snapshot(BaseModel):
    """
    Backup of all three collections.
    The credential is never exported, only a mask telling whether one exists.
    """
    model_config = ConfigDict(populate_by_name=True)

    api_key: Optional[str] = Field(None, alias="apiKey")
    quotes: List[Quote] = Field(default_factory=list)
    favorites: List[str] = Field(default_factory=list)
    reflections: List[Reflection] = Field(default_factory=list)
    export_date: datetime = Field(..., alias="exportDate")

class ImportResult(BaseModel):
    """
    Outcome of a snapshot import. Collections are imported independently,
    so a partial import is possible and reported here.
    """
    imported: List[str] = Field(default_factory=list)
    failed: Dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed
