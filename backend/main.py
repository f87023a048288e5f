"""
Todo Backend API
Endpoints for listing, creating, updating and deleting todos kept in a JSON file
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import health_router, todos_router
from config import get_settings
from repositories import StoreParseError

settings = get_settings()
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────
# Error mapping
# ─────────────────────────────────────────────

async def _corrupt_data_file(request: Request, exc: StoreParseError):
    logger.error("Todo data file unusable: %s", exc)
    return JSONResponse({"detail": "Todo data file is corrupt"}, status_code=500)


async def _storage_failure(request: Request, exc: OSError):
    logger.error("Persisting todos failed: %s", exc, exc_info=exc)
    return JSONResponse({"detail": "Failed to persist todos"}, status_code=500)


# ─────────────────────────────────────────────
# App
# ─────────────────────────────────────────────

def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StoreParseError, _corrupt_data_file)
    app.add_exception_handler(OSError, _storage_failure)
    app.include_router(health_router)
    app.include_router(todos_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
