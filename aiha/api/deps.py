# aiha/api/deps.py
from typing import Optional

from fastapi import Header, HTTPException

from ..client import RegistryClient

_client: Optional[RegistryClient] = None


def get_client() -> RegistryClient:
    global _client
    if _client is None:
        _client = RegistryClient()
    return _client


def bearer_token(authorization: str | None = Header(default=None)) -> Optional[str]:
    """
    Token carried on the request, if any. Without one the client falls back
    to the configured AIHA_HUB_TOKEN.
    """
    if authorization is None:
        return None
    if not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=401, detail="Malformed bearer token")
    return authorization.split(" ", 1)[1].strip() or None
