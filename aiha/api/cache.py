# aiha/api/cache.py
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from ..client import RegistryClient
from ..core.errors import CacheIoError
from . import deps

router = APIRouter()


@router.delete("/cache")
def reset_cache(client: RegistryClient = Depends(deps.get_client)) -> Dict[str, str]:
    """
    Drop every locally cached config.json. The next report re-downloads.
    """
    try:
        client.cache.clear_cache()
    except CacheIoError as e:
        logger.error("Cache reset failed: {}", e)
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "Cache cleared successfully"}
