from datetime import datetime, timezone

from fastapi import APIRouter, Request

from ..config import settings
from ..limiter import limiter

router = APIRouter(tags=["health"])


@router.get("/health")
@limiter.limit(settings.rate_limit_health)
def health(request: Request):
    return {"ok": True, "timestamp": datetime.now(timezone.utc).isoformat()}
