# quote_scribe\adapters\api\routers\reflections.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Response, status
from dependency_injector.wiring import inject, Provide
from pydantic import BaseModel, ConfigDict, Field

from quote_scribe.adapters.api.schemas import QuoteView, ReflectionView
from quote_scribe.core.domain.models import Reflection, ReflectionPatch
from quote_scribe.core.use_cases.reflections import SaveReflection, UpdateReflection, DeleteReflection
from quote_scribe.services.entity_store import EntityStore
from quote_scribe.shared.container import Container

router = APIRouter(prefix="/reflections", tags=["Reflections"])


class ReflectionCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    quote_id: Optional[str] = Field(None, alias="quoteId")
    text: str


@router.get("", response_model=List[ReflectionView])
@inject
async def list_reflections(
    store: EntityStore = Depends(Provide[Container.entity_store]),
):
    """All reflections, newest first, each with its quote (null once the quote is deleted)."""
    quotes = {
        view.id: view
        for view in QuoteView.from_quotes(store.quotes.get_all(), store.favorites.list())
    }
    return [
        ReflectionView.from_reflection(r, quotes.get(r.quote_id))
        for r in store.reflections.get_all()
    ]


@router.post("", response_model=Reflection, status_code=status.HTTP_201_CREATED)
@inject
async def create_reflection(
    request: ReflectionCreateRequest,
    use_case: SaveReflection = Depends(Provide[Container.save_reflection_use_case]),
):
    return use_case.execute(request.quote_id, request.text)


@router.patch("/{reflection_id}", response_model=Reflection)
@inject
async def update_reflection(
    reflection_id: str,
    patch: ReflectionPatch,
    use_case: UpdateReflection = Depends(Provide[Container.update_reflection_use_case]),
):
    return use_case.execute(reflection_id, patch)


@router.delete("/{reflection_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_reflection(
    reflection_id: str,
    use_case: DeleteReflection = Depends(Provide[Container.delete_reflection_use_case]),
):
    use_case.execute(reflection_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
