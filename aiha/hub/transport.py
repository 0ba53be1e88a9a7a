# aiha/hub/transport.py
"""
transport.py
============

Builds authenticated, timeout-bounded requests against the model registry.

Responsibilities
----------------
- Percent-encode revisions so they can be used as a single path segment.
- Compose and de-duplicate the client identity (user-agent) string.
- Attach the bearer token; the endpoints we call all require one.
- Translate ``requests`` failures into ``TransportError``.
"""
from typing import Any, Dict, List, Optional

import requests
from loguru import logger

from ..core.config import PRODUCT_NAME, PRODUCT_VERSION, Settings, get_settings
from ..core.errors import NoCredentialError, TransportError

# Characters escaped on top of the control characters (0x00-0x1F, 0x7F).
CUSTOM_ENCODE_SET = frozenset(" /:@")

DEFAULT_REVISION = "main"

MODEL_INFO_PATH = "{endpoint}/api/models/{repo_id}"
MODEL_INFO_REVISION_PATH = "{endpoint}/api/models/{repo_id}/revision/{revision}"
PATHS_INFO_PATH = "{endpoint}/api/models/{repo_id}/paths-info/{revision}"
RAW_FILE_PATH = "{endpoint}/{repo_id}/raw/{revision}/{filename}"


def encode_revision(revision: str) -> str:
    """
    Percent-encode a revision using the control set plus space, ``/``, ``:``
    and ``@``. Non-ASCII bytes of the UTF-8 encoding are escaped as well;
    every other printable ASCII character is kept literally.
    """
    out: List[str] = []
    for byte in revision.encode("utf-8"):
        ch = chr(byte)
        if byte < 0x20 or byte >= 0x7F or ch in CUSTOM_ENCODE_SET:
            out.append(f"%{byte:02X}")
        else:
            out.append(ch)
    return "".join(out)


def http_user_agent(
    library_name: Optional[str] = None,
    library_version: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> str:
    parts = []
    if library_name:
        parts.append(f"{library_name}-python")
    if library_version:
        parts.append(library_version)
    if user_agent:
        parts.append(user_agent)
    return "; ".join(parts)


def deduplicate_user_agent(user_agent: str) -> str:
    """Drop repeated ``;``-separated segments, keeping the first occurrence."""
    seen = set()
    deduplicated = []
    for key in (s.strip() for s in user_agent.split(";")):
        if key not in seen:
            seen.add(key)
            deduplicated.append(key)
    return "; ".join(deduplicated)


def resolve_timeout(timeout: Optional[float], default: float = 30.0) -> float:
    if timeout is None:
        timeout = default
    timeout = float(timeout)
    if timeout <= 0:
        raise ValueError(f"timeout must be a positive number of seconds, got {timeout}")
    return timeout


class RegistryTransport:
    """
    Thin wrapper over a ``requests.Session`` bound to one registry endpoint.

    The session is injectable so callers (and tests) can substitute the
    actual HTTP machinery.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
        endpoint: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.session = session or requests.Session()
        self.endpoint = (endpoint or self.settings.HUB_ENDPOINT).rstrip("/")
        self.user_agent = deduplicate_user_agent(
            http_user_agent(
                PRODUCT_NAME,
                PRODUCT_VERSION,
                user_agent or self.settings.USER_AGENT,
            )
        )

    # ------------ urls ------------
    def build_url(
        self,
        path_template: str,
        repo_id: str,
        revision: Optional[str] = None,
        **segments: str,
    ) -> str:
        if not repo_id:
            raise ValueError("model identifier must not be empty")
        return path_template.format(
            endpoint=self.endpoint,
            repo_id=repo_id,
            revision=encode_revision(revision or DEFAULT_REVISION),
            **segments,
        )

    def model_info_url(self, repo_id: str, revision: Optional[str] = None) -> str:
        if revision:
            return self.build_url(MODEL_INFO_REVISION_PATH, repo_id, revision)
        return self.build_url(MODEL_INFO_PATH, repo_id)

    def paths_info_url(self, repo_id: str, revision: Optional[str] = None) -> str:
        return self.build_url(PATHS_INFO_PATH, repo_id, revision)

    def raw_file_url(
        self, repo_id: str, filename: str, revision: Optional[str] = None
    ) -> str:
        return self.build_url(RAW_FILE_PATH, repo_id, revision, filename=filename)

    # ------------ headers ------------
    def build_headers(self, token: Optional[str] = None) -> Dict[str, str]:
        token = token or self.settings.HUB_TOKEN
        if not token:
            raise NoCredentialError()
        return {
            "user-agent": self.user_agent,
            "authorization": f"Bearer {token}",
        }

    # ------------ requests ------------
    def get(
        self,
        url: str,
        token: Optional[str] = None,
        params: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        stream: bool = False,
    ) -> requests.Response:
        return self._send(
            "GET", url, token=token, params=params, timeout=timeout, stream=stream
        )

    def post(
        self,
        url: str,
        token: Optional[str] = None,
        json: Any = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        return self._send("POST", url, token=token, json=json, timeout=timeout)

    def _send(
        self,
        method: str,
        url: str,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        **kwargs: Any,
    ) -> requests.Response:
        headers = self.build_headers(token)
        seconds = resolve_timeout(timeout, self.settings.REQUEST_TIMEOUT)
        logger.debug("{} {} (timeout={}s)", method, url, seconds)
        try:
            r = self.session.request(
                method, url, headers=headers, timeout=seconds, **kwargs
            )
        except requests.Timeout as e:
            raise TransportError(f"Request to {url} timed out after {seconds}s: {e}")
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}")

        if not 200 <= r.status_code < 300:
            logger.warning("{} {} returned HTTP {}", method, url, r.status_code)
            r.close()
            raise TransportError(
                f"{method} {url} failed", status_code=r.status_code
            )
        return r
