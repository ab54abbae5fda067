# quote_scribe\adapters\api\routers\settings.py
from fastapi import APIRouter, Depends, Response, status
from dependency_injector.wiring import inject, Provide
from pydantic import BaseModel, ConfigDict, Field

from quote_scribe.core.domain.models import Theme
from quote_scribe.core.use_cases.credentials import SaveCredential, TestCredential, DeleteCredential
from quote_scribe.core.use_cases.data import SetTheme
from quote_scribe.services.entity_store import EntityStore
from quote_scribe.shared.container import Container

router = APIRouter(prefix="/settings", tags=["Settings"])


class CredentialRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(..., alias="apiKey")


class CredentialStatus(BaseModel):
    """The stored key is never returned, only its mask."""
    configured: bool
    masked: str


class CredentialTestResult(BaseModel):
    valid: bool


class ThemeSetting(BaseModel):
    theme: Theme


# --- Credential ---

@router.get("/credential", response_model=CredentialStatus)
@inject
async def get_credential_status(
    store: EntityStore = Depends(Provide[Container.entity_store]),
):
    return CredentialStatus(configured=store.credential.has(), masked=store.credential.masked())


@router.put("/credential", response_model=CredentialStatus)
@inject
async def save_credential(
    request: CredentialRequest,
    use_case: SaveCredential = Depends(Provide[Container.save_credential_use_case]),
):
    """Checks the key format, confirms it with OpenRouter, then stores it."""
    masked = await use_case.execute(request.api_key)
    return CredentialStatus(configured=True, masked=masked)


@router.delete("/credential", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_credential(
    use_case: DeleteCredential = Depends(Provide[Container.delete_credential_use_case]),
):
    use_case.execute()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/credential/test", response_model=CredentialTestResult)
@inject
async def test_credential(
    use_case: TestCredential = Depends(Provide[Container.test_credential_use_case]),
):
    return CredentialTestResult(valid=await use_case.execute())


# --- Theme ---

@router.get("/theme", response_model=ThemeSetting)
@inject
async def get_theme(
    store: EntityStore = Depends(Provide[Container.entity_store]),
):
    return ThemeSetting(theme=store.get_theme())


@router.put("/theme", response_model=ThemeSetting)
@inject
async def set_theme(
    request: ThemeSetting,
    use_case: SetTheme = Depends(Provide[Container.set_theme_use_case]),
):
    return ThemeSetting(theme=use_case.execute(request.theme))
