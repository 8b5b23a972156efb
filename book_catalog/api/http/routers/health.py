from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from book_catalog.api.http.deps import get_database_service
from book_catalog.core.services import DbSessionService

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/ready")
def readiness(
    database_service: DbSessionService = Depends(get_database_service),
) -> JSONResponse:
    """Readiness check endpoint: the store must answer."""
    if database_service.health_check():
        return JSONResponse({"status": "ready"})
    return JSONResponse({"status": "unavailable"}, status_code=503)
