# aiha/models/gptj.py
from typing import ClassVar, Tuple

from .base import ModelLibrary
from .gpt2 import GPT2Config


class GPTJConfig(GPT2Config):
    # GPT-J reuses the GPT-2 field names, including the optional n_inner.
    MODEL_TYPES: ClassVar[Tuple[str, ...]] = ("gptj",)
    LIBRARIES: ClassVar[Tuple[ModelLibrary, ...]] = (
        ModelLibrary.TRANSFORMERS,
        ModelLibrary.PYTORCH,
        ModelLibrary.TENSORFLOW,
        ModelLibrary.JAX,
    )
