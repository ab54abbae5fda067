# quote_scribe\adapters\api\routers\favorites.py
from typing import List
from fastapi import APIRouter, Depends
from dependency_injector.wiring import inject, Provide

from quote_scribe.adapters.api.schemas import FavoriteState, QuoteView
from quote_scribe.core.use_cases.favorites import AddFavorite, RemoveFavorite, ToggleFavorite
from quote_scribe.services.entity_store import EntityStore
from quote_scribe.shared.container import Container

router = APIRouter(prefix="/favorites", tags=["Favorites"])


@router.get("", response_model=List[QuoteView])
@inject
async def list_favorites(
    store: EntityStore = Depends(Provide[Container.entity_store]),
):
    """Favorite quotes in quote order. Ids that no longer name a quote are skipped."""
    return [QuoteView.from_quote(q, is_favorite=True) for q in store.favorites.resolve()]


@router.get("/ids", response_model=List[str])
@inject
async def list_favorite_ids(
    store: EntityStore = Depends(Provide[Container.entity_store]),
):
    return store.favorites.list()


@router.put("/{quote_id}", response_model=FavoriteState)
@inject
async def add_favorite(
    quote_id: str,
    use_case: AddFavorite = Depends(Provide[Container.add_favorite_use_case]),
):
    use_case.execute(quote_id)
    return FavoriteState(quote_id=quote_id, is_favorite=True)


@router.delete("/{quote_id}", response_model=FavoriteState)
@inject
async def remove_favorite(
    quote_id: str,
    use_case: RemoveFavorite = Depends(Provide[Container.remove_favorite_use_case]),
):
    use_case.execute(quote_id)
    return FavoriteState(quote_id=quote_id, is_favorite=False)


@router.post("/{quote_id}/toggle", response_model=FavoriteState)
@inject
async def toggle_favorite(
    quote_id: str,
    use_case: ToggleFavorite = Depends(Provide[Container.toggle_favorite_use_case]),
):
    state = use_case.execute(quote_id)
    return FavoriteState(quote_id=quote_id, is_favorite=state)
