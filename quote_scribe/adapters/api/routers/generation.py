# quote_scribe\adapters\api\routers\generation.py
from typing import Optional
from fastapi import APIRouter, Depends, status
from dependency_injector.wiring import inject, Provide
from pydantic import BaseModel

from quote_scribe.core.use_cases.generate_quote import GenerateQuote
from quote_scribe.shared.container import Container

router = APIRouter(prefix="/generate", tags=["Generation"])


class GenerateRequest(BaseModel):
    prompt: Optional[str] = None


class GenerateResponse(BaseModel):
    text: str


@router.post(
    "",
    response_model=GenerateResponse,
    status_code=status.HTTP_200_OK,
    summary="Generate a quote",
)
@inject
async def generate_quote(
    request: Optional[GenerateRequest] = None,
    use_case: GenerateQuote = Depends(Provide[Container.generate_quote_use_case]),
):
    """
    Asks the remote model for a new quote.

    **Body (optional):**
    * `prompt`: what the quote should be about. A default prompt is used when omitted.

    The quote is not saved; POST it to `/quotes` to keep it.
    """
    text = await use_case.execute(request.prompt if request else None)
    return GenerateResponse(text=text)
