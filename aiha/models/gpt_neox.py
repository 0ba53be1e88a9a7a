# aiha/models/gpt_neox.py
from typing import ClassVar, Tuple

from .base import ModelLibrary
from .bert import BertConfig


class GPTNeoXConfig(BertConfig):
    # Same five field names as BERT; only the libraries differ.
    MODEL_TYPES: ClassVar[Tuple[str, ...]] = ("gpt_neox",)
    LIBRARIES: ClassVar[Tuple[ModelLibrary, ...]] = (
        ModelLibrary.TRANSFORMERS,
        ModelLibrary.PYTORCH,
        ModelLibrary.SAFETENSORS,
    )
