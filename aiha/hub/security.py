# aiha/hub/security.py
"""
security.py
===========

Evaluates the registry's security-scan block for a repository.

Rules
-----
Any one of the following makes the repository UNSAFE:

- ``hasUnsafeFile`` is ``true``
- ``scansDone`` is present and ``null``
- ``clamAVInfectedFiles`` is present and ``null``
- ``dangerousPickles`` is present and ``null``

A ``null`` placeholder is read as "scan incomplete or failed", which is
flagged the same way as a positive finding. A missing key contributes
nothing. A missing or empty block yields UNKNOWN, which ``has_vulnerabilities``
reports as not vulnerable: there is simply no evidence either way.
"""
from enum import Enum
from typing import Any, Mapping, Optional

from loguru import logger

NULL_SIGNAL_KEYS = ("scansDone", "clamAVInfectedFiles", "dangerousPickles")


class SecurityVerdict(str, Enum):
    SAFE = "safe"
    UNSAFE = "unsafe"
    UNKNOWN = "unknown"


def evaluate_security(status: Optional[Mapping[str, Any]]) -> SecurityVerdict:
    if not status:
        return SecurityVerdict.UNKNOWN

    if status.get("hasUnsafeFile") is True:
        logger.debug("Security scan reports an unsafe file")
        return SecurityVerdict.UNSAFE

    for key in NULL_SIGNAL_KEYS:
        if key in status and status[key] is None:
            logger.debug("Security scan field {} is null", key)
            return SecurityVerdict.UNSAFE

    return SecurityVerdict.SAFE


def has_vulnerabilities(status: Optional[Mapping[str, Any]]) -> bool:
    return evaluate_security(status) is SecurityVerdict.UNSAFE
