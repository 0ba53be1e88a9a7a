# aiha/api/models.py
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger

from ..client import ModelReport, RegistryClient
from ..core.errors import DecodeError, NoCredentialError, TransportError
from ..models.resolver import supported_model_types
from . import deps

router = APIRouter()


@router.get(
    "/models/{model_id:path}",
    response_model=ModelReport,
    responses={
        400: {"description": "Malformed model identifier or parameters"},
        401: {"description": "No registry token on the request or in the settings"},
        404: {"description": "The registry does not know this model or revision"},
        502: {"description": "The registry could not be reached or answered garbage"},
    },
)
def get_model(
    model_id: str,
    revision: Optional[str] = Query(default=None),
    files_metadata: bool = Query(default=False),
    client: RegistryClient = Depends(deps.get_client),
    token: Optional[str] = Depends(deps.bearer_token),
) -> ModelReport:
    """
    Fetch metadata, security verdict and resolved architecture for one model.
    """
    try:
        return client.describe(
            model_id, revision=revision, files_metadata=files_metadata, token=token
        )
    except NoCredentialError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except TransportError as e:
        logger.warning("Registry request for {} failed: {}", model_id, e)
        if e.status_code == 404:
            raise HTTPException(status_code=404, detail="Model not found")
        raise HTTPException(status_code=502, detail=str(e))
    except DecodeError as e:
        logger.warning("Registry answer for {} unreadable: {}", model_id, e)
        raise HTTPException(status_code=502, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/architectures")
def list_architectures() -> Dict[str, List[str]]:
    return {"model_types": supported_model_types()}
