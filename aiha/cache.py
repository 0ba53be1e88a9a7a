# aiha/cache.py
"""
cache.py
========

Local on-disk cache of registry artifacts.

Layout
------
``{cache_root}/{owner}/{name}/config.json`` or ``{cache_root}/{name}/config.json``
when the identifier has no owner segment. ``cache_root`` defaults to
``~/.cache/aiha`` and can be overridden with ``AIHA_CACHE_DIR``.

Downloads happen at most once per identifier: an existing file short-circuits
the request. Freshness is the caller's concern (pin a revision). Files are
written to a temporary name in the same directory and renamed into place, so
a reader never sees a truncated ``config.json``. Concurrent downloads of the
same identifier may both transfer; the last rename wins with identical
content.
"""
import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests
from loguru import logger

from .core.config import PRODUCT_NAME, Settings, get_settings
from .core.errors import CacheIoError, DecodeError, TransportError
from .hub.registry import fetch_raw_config
from .hub.transport import RegistryTransport

CONFIG_FILENAME = "config.json"
_CHUNK_SIZE = 64 * 1024


def _split_identifier(repo_id: str) -> List[str]:
    if not repo_id or not repo_id.strip("/"):
        raise ValueError("model identifier must not be empty")
    if any(segment in (".", "..") for segment in repo_id.split("/")):
        raise ValueError(f"model identifier must not contain relative segments: {repo_id!r}")
    return [part for part in repo_id.split("/", 1) if part]


class LocalCache:
    def __init__(
        self, root: Optional[Path] = None, settings: Optional[Settings] = None
    ) -> None:
        self.settings = settings or get_settings()
        self._root = Path(root) if root is not None else None

    # ------------ paths ------------
    def cache_root(self) -> Optional[Path]:
        """
        Return the cache root, or None when no home directory can be found.
        """
        if self._root is not None:
            return self._root
        if self.settings.CACHE_DIR:
            return Path(self.settings.CACHE_DIR).expanduser()
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as e:
            logger.error("Cannot determine home directory for cache: {}", e)
            return None
        if str(home) == "~":
            logger.error("Cannot determine home directory for cache")
            return None
        return home / ".cache" / PRODUCT_NAME

    def model_dir(self, repo_id: str) -> Optional[Path]:
        root = self.cache_root()
        if root is None:
            return None
        return root.joinpath(*_split_identifier(repo_id))

    def config_path(self, repo_id: str) -> Optional[Path]:
        model_dir = self.model_dir(repo_id)
        if model_dir is None:
            return None
        return model_dir / CONFIG_FILENAME

    def ensure_model_dir(self, repo_id: str) -> Optional[Path]:
        """Create ``{root}/[owner/]name`` if needed. Safe to call repeatedly."""
        model_dir = self.model_dir(repo_id)
        if model_dir is None:
            return None
        try:
            model_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheIoError(
                f"Failed to create cache directory {model_dir}: {e}", path=str(model_dir)
            )
        return model_dir

    def has_config(self, repo_id: str) -> bool:
        path = self.config_path(repo_id)
        return path is not None and path.is_file()

    # ------------ download ------------
    def download_config_if_absent(
        self,
        transport: RegistryTransport,
        repo_id: str,
        revision: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> Optional[Path]:
        """
        Make sure ``config.json`` for ``repo_id`` is present locally.

        Returns the file path, or None when no cache root is available.
        Raises TransportError when the download fails and CacheIoError when
        the file cannot be written.
        """
        model_dir = self.ensure_model_dir(repo_id)
        if model_dir is None:
            return None

        target = model_dir / CONFIG_FILENAME
        if target.exists():
            logger.debug("Config for {} already cached at {}", repo_id, target)
            return target

        r = fetch_raw_config(transport, repo_id, revision, token=token, timeout=timeout)
        try:
            self._write_atomic(r, target)
        finally:
            r.close()

        logger.info("Cached config for {} at {}", repo_id, target)
        return target

    def _write_atomic(self, r: requests.Response, target: Path) -> None:
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
            )
        except OSError as e:
            raise CacheIoError(
                f"Failed to create temp file in {target.parent}: {e}", path=str(target)
            )

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as f:
                for chunk in r.iter_content(chunk_size=_CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
            os.replace(tmp_path, target)
        except requests.RequestException as e:
            raise TransportError(f"Download of {target.name} interrupted: {e}")
        except OSError as e:
            raise CacheIoError(f"Failed to write {target}: {e}", path=str(target))
        finally:
            # Only left behind when the rename did not happen
            tmp_path.unlink(missing_ok=True)

    # ------------ read / clear ------------
    def load_config(self, repo_id: str) -> Optional[Dict[str, Any]]:
        """Return the cached raw config, or None when nothing is cached."""
        path = self.config_path(repo_id)
        if path is None or not path.is_file():
            return None
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Cached config {path} is not valid JSON: {e}")
        except OSError as e:
            raise CacheIoError(f"Failed to read {path}: {e}", path=str(path))
        if not isinstance(data, dict):
            raise DecodeError(f"Cached config {path} is not a JSON object")
        return data

    def clear_cache(self) -> None:
        """Remove the whole cache root. Missing root is not an error."""
        root = self.cache_root()
        if root is None:
            logger.warning("No cache root available; nothing to clear")
            return
        if not root.exists():
            logger.debug("Cache root {} does not exist", root)
            return
        try:
            shutil.rmtree(root)
        except OSError as e:
            raise CacheIoError(f"Failed to clear cache {root}: {e}", path=str(root))
        logger.info("Cleared cache at {}", root)
