# aiha/client.py
"""
client.py
=========

High-level entry point tying the registry, the architecture resolver and
the local cache together.

Typical use
-----------
    client = RegistryClient()
    report = client.describe("bert-base-uncased")
    report.config["hidden_size"]       # 768
    report.has_vulnerabilities         # False

``describe`` only fails when the metadata document itself cannot be
obtained. Problems with the architecture configuration (unsupported type,
missing field, config.json not downloadable or not cacheable) are recorded
on the report in ``config_error`` instead.
"""
from typing import Any, Dict, List, Optional

from loguru import logger
from pydantic import BaseModel

from .cache import LocalCache
from .core.config import Settings, get_settings
from .core.errors import (
    CacheIoError,
    ConfigError,
    DecodeError,
    MissingFieldError,
    TransportError,
)
from .hardware import HardwareProfile
from .hub.registry import fetch_model_info, fetch_raw_config, list_files_info
from .hub.schemas import FileEntry, MetadataDocument
from .hub.security import SecurityVerdict
from .hub.transport import RegistryTransport
from .models.base import ArchitectureConfig
from .models.resolver import resolve_config


class ModelReport(BaseModel):
    info: MetadataDocument
    config: Optional[Dict[str, Any]] = None
    config_error: Optional[str] = None
    verdict: SecurityVerdict = SecurityVerdict.UNKNOWN
    has_vulnerabilities: bool = False
    hardware: Optional[HardwareProfile] = None


class RegistryClient:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[RegistryTransport] = None,
        cache: Optional[LocalCache] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.transport = transport or RegistryTransport(settings=self.settings)
        self.cache = cache or LocalCache(settings=self.settings)

    def model_info(
        self,
        repo_id: str,
        revision: Optional[str] = None,
        timeout: Optional[float] = None,
        files_metadata: bool = False,
        token: Optional[str] = None,
    ) -> MetadataDocument:
        return fetch_model_info(
            self.transport,
            repo_id,
            revision=revision,
            timeout=timeout,
            files_metadata=files_metadata,
            token=token,
        )

    def list_files_info(
        self,
        repo_id: str,
        revision: Optional[str] = None,
        document: Optional[MetadataDocument] = None,
        siblings: Optional[List[FileEntry]] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> List[FileEntry]:
        """
        Return the repository's file entries enriched with size and hash.

        Entries come from ``siblings`` when given, else from ``document``,
        else from a fresh metadata fetch. They are updated in place.
        """
        if siblings is None:
            if document is None:
                document = self.model_info(
                    repo_id, revision=revision, timeout=timeout, token=token
                )
            siblings = document.siblings
        if not siblings:
            return siblings

        list_files_info(
            self.transport, repo_id, siblings, revision=revision, token=token, timeout=timeout
        )
        return siblings

    def model_config(
        self,
        repo_id: str,
        revision: Optional[str] = None,
        token: Optional[str] = None,
        document: Optional[MetadataDocument] = None,
        timeout: Optional[float] = None,
    ) -> ArchitectureConfig:
        """
        Resolve the architecture of ``repo_id``.

        The config block embedded in the metadata document is tried first.
        It is usually abridged, so when a field is missing the full
        ``config.json`` is downloaded into the cache and resolved instead.
        An unsupported ``model_type`` fails right away.
        """
        if document is not None and document.config:
            try:
                return resolve_config(document.config)
            except MissingFieldError as e:
                logger.debug("Metadata config block for {} not usable: {}", repo_id, e)

        raw = self._raw_config(repo_id, revision, token, timeout)
        return resolve_config(raw)

    def _raw_config(
        self,
        repo_id: str,
        revision: Optional[str],
        token: Optional[str],
        timeout: Optional[float],
    ) -> Dict[str, Any]:
        path = self.cache.download_config_if_absent(
            self.transport, repo_id, revision=revision, token=token, timeout=timeout
        )
        if path is not None:
            raw = self.cache.load_config(repo_id)
            if raw is not None:
                return raw

        # No usable cache root: read the file without persisting it
        logger.warning("Cache unavailable; reading config for {} directly", repo_id)
        r = fetch_raw_config(self.transport, repo_id, revision, token=token, timeout=timeout)
        try:
            raw = r.json()
        except ValueError as e:
            raise DecodeError(f"config.json of {repo_id} is not valid JSON: {e}")
        finally:
            r.close()
        if not isinstance(raw, dict):
            raise DecodeError(f"config.json of {repo_id} is not a JSON object")
        return raw

    def describe(
        self,
        repo_id: str,
        revision: Optional[str] = None,
        timeout: Optional[float] = None,
        files_metadata: bool = False,
        token: Optional[str] = None,
        hardware: Optional[HardwareProfile] = None,
    ) -> ModelReport:
        info = self.model_info(
            repo_id,
            revision=revision,
            timeout=timeout,
            files_metadata=files_metadata,
            token=token,
        )

        config: Optional[Dict[str, Any]] = None
        config_error: Optional[str] = None
        try:
            resolved = self.model_config(
                repo_id, revision=revision, token=token, document=info, timeout=timeout
            )
            config = resolved.summary()
        except (ConfigError, TransportError, DecodeError, CacheIoError) as e:
            logger.warning("Could not resolve architecture of {}: {}", repo_id, e)
            config_error = str(e)

        verdict = info.security_verdict()
        return ModelReport(
            info=info,
            config=config,
            config_error=config_error,
            verdict=verdict,
            has_vulnerabilities=verdict is SecurityVerdict.UNSAFE,
            hardware=hardware,
        )
