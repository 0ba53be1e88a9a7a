from .cache import LocalCache
from .client import ModelReport, RegistryClient
from .core.config import PRODUCT_VERSION, Settings, get_settings
from .core.errors import (
    AihaError,
    CacheIoError,
    ConfigError,
    DecodeError,
    MissingFieldError,
    ModelNotImplementedError,
    NoCredentialError,
    RegistryError,
    TransportError,
)
from .hardware import GpuDevice, HardwareProfile, HardwareScanner
from .hub import (
    FileEntry,
    MetadataDocument,
    RegistryTransport,
    SecurityVerdict,
    fetch_model_info,
    has_vulnerabilities,
    list_files_info,
)
from .models import ArchitectureConfig, resolve_config

__version__ = PRODUCT_VERSION

__all__ = [
    "AihaError",
    "ArchitectureConfig",
    "CacheIoError",
    "ConfigError",
    "DecodeError",
    "FileEntry",
    "GpuDevice",
    "HardwareProfile",
    "HardwareScanner",
    "LocalCache",
    "MetadataDocument",
    "MissingFieldError",
    "ModelNotImplementedError",
    "ModelReport",
    "NoCredentialError",
    "RegistryClient",
    "RegistryError",
    "RegistryTransport",
    "SecurityVerdict",
    "Settings",
    "TransportError",
    "fetch_model_info",
    "get_settings",
    "has_vulnerabilities",
    "list_files_info",
    "resolve_config",
]
