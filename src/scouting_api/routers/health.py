from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    # False when no model is configured and searches use keyword matching only.
    ranker_configured: bool


@router.get("/health", response_model=HealthResponse, status_code=200)
async def healthcheck(request: Request):
    ranker = getattr(request.app.state, "ranker", None)
    return {"status": "ok", "ranker_configured": ranker is not None}
