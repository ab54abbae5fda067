# quote_scribe\adapters\api\routers\quotes.py
from typing import List
from fastapi import APIRouter, Depends, Response, status
from dependency_injector.wiring import inject, Provide
from pydantic import BaseModel

from quote_scribe.adapters.api.schemas import QuoteView
from quote_scribe.core.domain.exceptions import QuoteNotFoundError
from quote_scribe.core.domain.models import QuotePatch, Reflection
from quote_scribe.core.use_cases.quotes import SaveQuote, UpdateQuote, DeleteQuote
from quote_scribe.services.entity_store import EntityStore
from quote_scribe.shared.container import Container

router = APIRouter(prefix="/quotes", tags=["Quotes"])


class QuoteCreateRequest(BaseModel):
    text: str


@router.get("", response_model=List[QuoteView])
@inject
async def list_quotes(
    store: EntityStore = Depends(Provide[Container.entity_store]),
):
    """All saved quotes, newest first."""
    return QuoteView.from_quotes(store.quotes.get_all(), store.favorites.list())


@router.post("", response_model=QuoteView, status_code=status.HTTP_201_CREATED)
@inject
async def create_quote(
    request: QuoteCreateRequest,
    use_case: SaveQuote = Depends(Provide[Container.save_quote_use_case]),
):
    quote = use_case.execute(request.text)
    return QuoteView.from_quote(quote, is_favorite=False)


@router.get("/{quote_id}", response_model=QuoteView)
@inject
async def get_quote(
    quote_id: str,
    store: EntityStore = Depends(Provide[Container.entity_store]),
):
    quote = store.quotes.get(quote_id)
    if quote is None:
        raise QuoteNotFoundError(quote_id)
    return QuoteView.from_quote(quote, store.favorites.contains(quote_id))


@router.patch("/{quote_id}", response_model=QuoteView)
@inject
async def update_quote(
    quote_id: str,
    patch: QuotePatch,
    use_case: UpdateQuote = Depends(Provide[Container.update_quote_use_case]),
    store: EntityStore = Depends(Provide[Container.entity_store]),
):
    """Merge-patch: only supplied fields change; id and createdAt are never touched."""
    quote = use_case.execute(quote_id, patch)
    return QuoteView.from_quote(quote, store.favorites.contains(quote_id))


@router.delete("/{quote_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_quote(
    quote_id: str,
    use_case: DeleteQuote = Depends(Provide[Container.delete_quote_use_case]),
):
    use_case.execute(quote_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{quote_id}/reflections", response_model=List[Reflection])
@inject
async def list_quote_reflections(
    quote_id: str,
    store: EntityStore = Depends(Provide[Container.entity_store]),
):
    return store.reflections.list_for_quote(quote_id)
