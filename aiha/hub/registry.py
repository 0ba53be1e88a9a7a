# aiha/hub/registry.py
from typing import Any, Dict, List, Optional

import requests
from loguru import logger

from ..core.errors import DecodeError
from .schemas import FileEntry, MetadataDocument
from .transport import RegistryTransport


def _decode_json(r: requests.Response, url: str) -> Any:
    try:
        return r.json()
    except ValueError as e:
        raise DecodeError(
            f"Response from {url} is not valid JSON: {e}", status_code=r.status_code
        )


def fetch_model_info(
    transport: RegistryTransport,
    repo_id: str,
    revision: Optional[str] = None,
    timeout: Optional[float] = None,
    files_metadata: bool = False,
    token: Optional[str] = None,
) -> MetadataDocument:
    """
    Retrieve the metadata document of a model repository.

    Raises TransportError on network failure or non-2xx status and
    DecodeError when the body as a whole is not a JSON object.
    """
    url = transport.model_info_url(repo_id, revision)
    params = {"securityStatus": "true"}
    if files_metadata:
        params["blobs"] = "true"

    r = transport.get(url, token=token, params=params, timeout=timeout)
    payload = _decode_json(r, url)
    if not isinstance(payload, dict):
        raise DecodeError(
            f"Expected a JSON object from {url}, got {type(payload).__name__}",
            status_code=r.status_code,
        )

    document = MetadataDocument.from_json(payload)
    logger.info(
        "Fetched metadata for {} ({} files)", document.model_id or repo_id, len(document.siblings)
    )
    return document


def list_files_info(
    transport: RegistryTransport,
    repo_id: str,
    siblings: List[FileEntry],
    revision: Optional[str] = None,
    token: Optional[str] = None,
    timeout: Optional[float] = None,
) -> int:
    """
    Enrich already-known file entries with size and hash, in place.

    Items returned by the registry that do not match an existing entry are
    ignored; this call never adds entries. Returns the number of entries
    that were updated.
    """
    url = transport.paths_info_url(repo_id, revision)
    body = {"paths": [s.path for s in siblings], "expand": True}
    r = transport.post(url, token=token, json=body, timeout=timeout)
    items = _decode_json(r, url)

    if not isinstance(items, list):
        logger.warning("paths-info for {} did not return an array; nothing to enrich", repo_id)
        return 0

    by_path: Dict[str, List[FileEntry]] = {}
    for entry in siblings:
        by_path.setdefault(entry.path, []).append(entry)

    updated = 0
    for item in items:
        if not isinstance(item, dict):
            continue
        path = item.get("path")
        if not isinstance(path, str) or path not in by_path:
            logger.debug("Ignoring paths-info item with no matching sibling: {}", path)
            continue

        enriched = FileEntry.from_json(item)
        for entry in by_path[path]:
            entry.size = enriched.size
            entry.content_hash = enriched.content_hash
            if enriched.lfs is not None:
                entry.lfs = enriched.lfs
            updated += 1

    logger.debug("Enriched {} of {} files for {}", updated, len(siblings), repo_id)
    return updated


def fetch_raw_config(
    transport: RegistryTransport,
    repo_id: str,
    revision: Optional[str] = None,
    token: Optional[str] = None,
    timeout: Optional[float] = None,
) -> requests.Response:
    """Open a streamed GET on the repository's raw ``config.json``."""
    url = transport.raw_file_url(repo_id, "config.json", revision)
    return transport.get(url, token=token, timeout=timeout, stream=True)
