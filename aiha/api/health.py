# aiha/api/health.py
from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def get_health() -> Dict:
    """
    Lightweight liveness probe. Does not contact the registry.
    """
    return {"description": "Service reachable."}
