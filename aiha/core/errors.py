# aiha/core/errors.py
"""
Error taxonomy shared by the registry client, the architecture resolver
and the local cache. Every error here is recoverable by the caller.
"""
from typing import Optional


class AihaError(Exception):
    """Base class for every error raised by aiha."""


# ---------------------------------------------------------
# Registry / transport
# ---------------------------------------------------------
class RegistryError(AihaError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        msg = super().__str__()
        if self.status_code is not None:
            return f"{msg} (HTTP {self.status_code})"
        return msg


class TransportError(RegistryError):
    """Network failure, timeout or non-2xx response."""


class DecodeError(RegistryError):
    """The response body as a whole is not the JSON document we expected."""


class NoCredentialError(RegistryError):
    def __init__(self, message: str = "No token provided"):
        super().__init__(message)


# ---------------------------------------------------------
# Architecture configuration
# ---------------------------------------------------------
class ConfigError(AihaError):
    """The raw configuration could not be resolved to a known schema."""


class MissingFieldError(ConfigError):
    def __init__(self, field: str):
        super().__init__(f"Missing field: {field}")
        self.field = field


class ModelNotImplementedError(ConfigError):
    def __init__(self, model_type: str):
        super().__init__(f"Model type not implemented: {model_type}")
        self.model_type = model_type


# ---------------------------------------------------------
# Local cache
# ---------------------------------------------------------
class CacheIoError(AihaError):
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
