import json
import logging
import time
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from .config import settings
from .limiter import limiter
from .routers import bazi, health


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    force=True,
)
logger = logging.getLogger("fourpillars.api")


def _truncate(text: str, limit: int = 900) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... [truncated]"


def _body_preview(raw: bytes, content_type: str) -> str:
    if not raw:
        return "-"
    if "application/json" in content_type:
        try:
            parsed = json.loads(raw.decode("utf-8"))
            return _truncate(json.dumps(parsed, ensure_ascii=False, separators=(",", ":")))
        except ValueError:
            return _truncate(raw.decode("utf-8", errors="replace"))
    return f"<{len(raw)} bytes; {content_type or 'unknown'}>"


class ApiAuditMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        request_id = uuid4().hex[:8]
        started_at = time.perf_counter()

        request_content_type = request.headers.get("content-type", "")
        content_length = int(request.headers.get("content-length", 0) or 0)
        if content_length <= settings.request_log_body_limit:
            request_body = await request.body()
        else:
            request_body = b""
        request_preview = _body_preview(request_body, request_content_type)

        method = request.method
        path = request.url.path
        query = request.url.query
        full_path = f"{path}?{query}" if query else path

        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started_at) * 1000
            logger.exception(
                "API %s %s | status=500 | t=%.1fms | req=%s | req_id=%s",
                method,
                full_path,
                elapsed_ms,
                request_preview,
                request_id,
            )
            raise

        response_content_type = response.headers.get("content-type", "")
        response_body = b""
        async for chunk in response.body_iterator:
            response_body += chunk

        response_preview = _body_preview(response_body, response_content_type)
        elapsed_ms = (time.perf_counter() - started_at) * 1000
        logger.info(
            "API %s %s | status=%s | t=%.1fms | req=%s | resp=%s | req_id=%s",
            method,
            full_path,
            response.status_code,
            elapsed_ms,
            request_preview,
            response_preview,
            request_id,
        )

        headers = {k: v for k, v in response.headers.items() if k.lower() != "content-length"}
        return Response(
            content=response_body,
            status_code=response.status_code,
            headers=headers,
            media_type=response.media_type,
        )


logging.getLogger("uvicorn.access").disabled = True


app = FastAPI(title="FourPillars API", version="0.1.0")
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.add_middleware(SlowAPIMiddleware)
app.add_middleware(ApiAuditMiddleware)

if settings.cors_origins():
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

app.include_router(health.router)
app.include_router(bazi.router)


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
