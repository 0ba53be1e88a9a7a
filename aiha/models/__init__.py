from .base import (
    FFN_EXPANSION,
    NO_MAX_POSITIONS,
    NORMALIZED_FIELDS,
    ArchitectureConfig,
    ModelLibrary,
)
from .bert import BertConfig
from .bloom import BloomConfig
from .gpt2 import GPT2Config
from .gpt_neo import GPTNeoConfig
from .gpt_neox import GPTNeoXConfig
from .gptj import GPTJConfig
from .llama import LlamaConfig
from .opt import OPTConfig
from .resolver import ARCHITECTURES, resolve_config, supported_model_types
from .t5 import T5Config

__all__ = [
    "ARCHITECTURES",
    "FFN_EXPANSION",
    "NORMALIZED_FIELDS",
    "NO_MAX_POSITIONS",
    "ArchitectureConfig",
    "BertConfig",
    "BloomConfig",
    "GPT2Config",
    "GPTJConfig",
    "GPTNeoConfig",
    "GPTNeoXConfig",
    "LlamaConfig",
    "ModelLibrary",
    "OPTConfig",
    "T5Config",
    "resolve_config",
    "supported_model_types",
]
