# aiha/models/resolver.py
"""
resolver.py
===========

Maps a raw configuration document onto one architecture variant.

Process
-------
1. Read ``model_type``; it must be a string (``MissingFieldError`` otherwise).
2. Look it up, exact and case-sensitive, in ``ARCHITECTURES``.
3. Let the matched variant extract its own required fields.
4. Unknown types raise ``ModelNotImplementedError`` so callers can treat an
   unsupported architecture differently from a corrupt document.
"""
from typing import Any, Dict, List, Mapping, Type

from loguru import logger

from ..core.errors import MissingFieldError, ModelNotImplementedError
from .base import ArchitectureConfig
from .bert import BertConfig
from .bloom import BloomConfig
from .gpt2 import GPT2Config
from .gpt_neo import GPTNeoConfig
from .gpt_neox import GPTNeoXConfig
from .gptj import GPTJConfig
from .llama import LlamaConfig
from .opt import OPTConfig
from .t5 import T5Config

VARIANTS: List[Type[ArchitectureConfig]] = [
    BertConfig,
    BloomConfig,
    GPT2Config,
    GPTJConfig,
    GPTNeoConfig,
    GPTNeoXConfig,
    LlamaConfig,
    OPTConfig,
    T5Config,
]

ARCHITECTURES: Dict[str, Type[ArchitectureConfig]] = {
    model_type: variant for variant in VARIANTS for model_type in variant.MODEL_TYPES
}


def supported_model_types() -> List[str]:
    return sorted(ARCHITECTURES)


def resolve_config(raw: Mapping[str, Any]) -> ArchitectureConfig:
    if not isinstance(raw, Mapping):
        raise MissingFieldError("model_type")

    model_type = raw.get("model_type")
    if not isinstance(model_type, str):
        raise MissingFieldError("model_type")

    variant = ARCHITECTURES.get(model_type)
    if variant is None:
        logger.info("No schema for model type {!r}", model_type)
        raise ModelNotImplementedError(model_type)

    config = variant.from_json(raw)
    logger.debug("Resolved {} as {}", model_type, variant.__name__)
    return config
