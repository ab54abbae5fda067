# quote_scribe\adapters\api\schemas.py
"""
Response views shared by several routers.

Entities never carry favorite status; the views below add it on read
from favorite-set membership.
"""
from datetime import datetime
from typing import Iterable, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from quote_scribe.core.domain.models import Quote, Reflection


class QuoteView(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    text: str
    created_at: datetime = Field(..., alias="createdAt")
    is_favorite: bool = Field(False, alias="isFavorite")

    @classmethod
    def from_quote(cls, quote: Quote, is_favorite: bool) -> "QuoteView":
        return cls(id=quote.id, text=quote.text, created_at=quote.created_at, is_favorite=is_favorite)

    @classmethod
    def from_quotes(cls, quotes: Iterable[Quote], favorite_ids: Iterable[str]) -> List["QuoteView"]:
        favorites = set(favorite_ids)
        return [cls.from_quote(q, q.id in favorites) for q in quotes]


class ReflectionView(BaseModel):
    """A reflection with its quote resolved, or null when the link dangles."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    quote_id: str = Field(..., alias="quoteId")
    text: str
    created_at: datetime = Field(..., alias="createdAt")
    quote: Optional[QuoteView] = None

    @classmethod
    def from_reflection(cls, reflection: Reflection, quote: Optional[QuoteView]) -> "ReflectionView":
        return cls(
            id=reflection.id,
            quote_id=reflection.quote_id,
            text=reflection.text,
            created_at=reflection.created_at,
            quote=quote,
        )


class FavoriteState(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    quote_id: str = Field(..., alias="quoteId")
    is_favorite: bool = Field(..., alias="isFavorite")
