"""Liveness check, plus where todos are being kept."""

from datetime import datetime

from fastapi import APIRouter

from config import get_settings
import store

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    settings = get_settings()
    data_path = store.get_record_store().path
    return {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "version": settings.APP_VERSION,
        "data_file": str(data_path),
        "data_file_exists": data_path.exists(),
    }
