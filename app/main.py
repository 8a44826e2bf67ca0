from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .api.routers.blocks import router as blocks_router
from .api.routers.health import router as health_router
from .api.routers.tokens import router as tokens_router
from .shared.config import get_settings
from .shared.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)

app = FastAPI(title="DEX Graph API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Accept", "Authorization", "Content-Type", "X-CSRF-Token"],
    expose_headers=["Link"],
    max_age=300,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    logger.info("http: request method=%s uri=%s", request.method, request.url.path)
    response = await call_next(request)
    logger.info(
        "http: response method=%s uri=%s status=%s duration_ms=%.2f",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - started) * 1000,
    )
    return response


app.include_router(health_router)
app.include_router(tokens_router, prefix=f"/{settings.api_version}")
app.include_router(blocks_router, prefix=f"/{settings.api_version}")


def run() -> None:
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
