# hexdirectory/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter
from hexdirectory.common.settings import get_settings

router = APIRouter()

@router.get("/healthz")
def healthz():
    """Liveness plus where the directory is read from; does not load it."""
    s = get_settings()
    people_file = s.source.people_file
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "people_file": str(people_file),
        "people_file_present": people_file.is_file(),
    }
