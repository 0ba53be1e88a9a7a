# aiha/hub/schemas.py
"""
Typed views over the registry's model metadata document.

Parsing is two-phase: the body is decoded to a plain JSON tree first, then
each field is projected individually. A malformed field is defaulted to its
empty form and never aborts parsing of the rest of the document.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .security import SecurityVerdict, evaluate_security


# ------------ field readers ------------
def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_int(value: Any) -> Optional[int]:
    # bool is a subclass of int; a JSON true/false is not a size
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _as_str_list(value: Any) -> Optional[List[str]]:
    if not isinstance(value, list):
        return None
    if not all(isinstance(v, str) for v in value):
        return None
    return list(value)


def _as_dict(value: Any) -> Optional[Dict[str, Any]]:
    return dict(value) if isinstance(value, dict) else None


def _first(payload: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if payload.get(key) is not None:
            return payload[key]
    return None


class LfsInfo(BaseModel):
    size: Optional[int] = None
    sha256: Optional[str] = None
    pointer_size: Optional[int] = None

    @classmethod
    def from_json(cls, value: Any) -> Optional["LfsInfo"]:
        if not isinstance(value, dict):
            return None
        return cls(
            size=_as_int(value.get("size")),
            sha256=_as_str(_first(value, "sha256", "oid")),
            pointer_size=_as_int(_first(value, "pointer_size", "pointerSize")),
        )


class FileEntry(BaseModel):
    """
    One file ("sibling") of a model repository. Size and hash are usually
    unknown until ``list_files_info`` enriches the entry in place.
    """

    path: str
    size: Optional[int] = None
    content_hash: Optional[str] = None
    lfs: Optional[LfsInfo] = None

    @classmethod
    def from_json(cls, value: Any) -> Optional["FileEntry"]:
        if not isinstance(value, dict):
            return None
        path = _as_str(_first(value, "rfilename", "path", "name"))
        if path is None:
            return None
        return cls(
            path=path,
            size=_as_int(value.get("size")),
            content_hash=_as_str(_first(value, "blob_id", "blobId", "oid")),
            lfs=LfsInfo.from_json(value.get("lfs")),
        )

    def __str__(self) -> str:
        out = f"Model File: {self.path!r}"
        if self.size is not None:
            out += f", Size: {self.size}"
        if self.content_hash is not None:
            out += f", Blob ID: {self.content_hash!r}"
        return out


class MetadataDocument(BaseModel):
    """Immutable description of a single model repository."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_id: Optional[str] = None
    sha: Optional[str] = None
    last_modified: Optional[str] = None
    author: Optional[str] = None
    private: bool = False
    tags: Optional[List[str]] = None
    pipeline_tag: Optional[str] = None
    siblings: List[FileEntry] = Field(default_factory=list)
    config: Optional[Dict[str, Any]] = None
    security_status: Optional[Dict[str, Any]] = None

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "MetadataDocument":
        raw_siblings = payload.get("siblings")
        siblings: List[FileEntry] = []
        if isinstance(raw_siblings, list):
            for item in raw_siblings:
                entry = FileEntry.from_json(item)
                if entry is not None:
                    siblings.append(entry)

        return cls(
            model_id=_as_str(_first(payload, "id", "modelId")),
            sha=_as_str(payload.get("sha")),
            last_modified=_as_str(payload.get("lastModified")),
            author=_as_str(payload.get("author")),
            private=payload.get("private") is True,
            tags=_as_str_list(payload.get("tags")),
            pipeline_tag=_as_str(payload.get("pipeline_tag")),
            siblings=siblings,
            config=_as_dict(payload.get("config")),
            security_status=_as_dict(payload.get("securityStatus")),
        )

    # ------------ accessors ------------
    def sibling_names(self) -> List[str]:
        return [s.path for s in self.siblings]

    @property
    def model_type(self) -> Optional[str]:
        if self.config is None:
            return None
        return _as_str(self.config.get("model_type"))

    @property
    def architectures(self) -> List[str]:
        if self.config is None:
            return []
        return _as_str_list(self.config.get("architectures")) or []

    def security_verdict(self) -> SecurityVerdict:
        return evaluate_security(self.security_status)

    def has_vulnerabilities(self) -> bool:
        return self.security_verdict() is SecurityVerdict.UNSAFE

    def __str__(self) -> str:
        out = f"Model Name: {self.model_id!r}"
        if self.tags is not None:
            out += f", Tags: {self.tags!r}"
        if self.pipeline_tag is not None:
            out += f", Task: {self.pipeline_tag!r}"
        return out
