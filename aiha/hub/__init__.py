from .registry import fetch_model_info, fetch_raw_config, list_files_info
from .schemas import FileEntry, LfsInfo, MetadataDocument
from .security import SecurityVerdict, evaluate_security, has_vulnerabilities
from .transport import (
    CUSTOM_ENCODE_SET,
    RegistryTransport,
    deduplicate_user_agent,
    encode_revision,
    http_user_agent,
    resolve_timeout,
)

__all__ = [
    "CUSTOM_ENCODE_SET",
    "FileEntry",
    "LfsInfo",
    "MetadataDocument",
    "RegistryTransport",
    "SecurityVerdict",
    "deduplicate_user_agent",
    "encode_revision",
    "evaluate_security",
    "fetch_model_info",
    "fetch_raw_config",
    "has_vulnerabilities",
    "http_user_agent",
    "list_files_info",
    "resolve_timeout",
]
