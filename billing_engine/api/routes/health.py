from fastapi import APIRouter, Depends

from billing_engine.api.deps import get_settings
from billing_engine.config.settings import Settings

router = APIRouter()


@router.get("/")
async def health(settings: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "message": f"{settings.APP_NAME} running",
        "cloud_sync": settings.cloud_sync_enabled,
    }
