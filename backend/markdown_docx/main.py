from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import conversion, health
from .core.config import settings

logger = logging.getLogger("markdown_docx.backend")
logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s %(message)s")

app = FastAPI(title=settings.app_name)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Conversion-Fallback"],
)

app.include_router(health.router, prefix="/api")
app.include_router(conversion.router, prefix="/api")

logger.info(
    "%s started (environment=%s, packaged writer %s)",
    settings.app_name,
    settings.environment,
    "enabled" if settings.packaged_writer_enabled else "disabled",
)


__all__ = ["app"]
