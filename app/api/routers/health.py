from __future__ import annotations

from fastapi import APIRouter


router = APIRouter()


@router.get("/up")
def health_check():
    return {"status": "ok"}
