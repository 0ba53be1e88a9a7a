# aiha/models/gpt_neo.py
from typing import Any, ClassVar, Dict, Mapping, Tuple

from .base import (
    FFN_EXPANSION,
    ArchitectureConfig,
    ModelLibrary,
    optional_int,
    require_int,
)


class GPTNeoConfig(ArchitectureConfig):
    """
    GPT-Neo: ``num_heads`` / ``num_layers``, also published as
    ``num_attention_heads`` / ``num_hidden_layers``. ``intermediate_size``
    may be null.
    """

    MODEL_TYPES: ClassVar[Tuple[str, ...]] = ("gpt_neo",)
    LIBRARIES: ClassVar[Tuple[ModelLibrary, ...]] = (
        ModelLibrary.TRANSFORMERS,
        ModelLibrary.PYTORCH,
        ModelLibrary.JAX,
    )

    hidden_size: int
    intermediate_size: int
    max_position_embeddings: int
    num_heads: int
    num_layers: int

    @classmethod
    def params_from_json(cls, raw: Mapping[str, Any]) -> Dict[str, Any]:
        hidden_size = require_int(raw, "hidden_size")
        max_positions = require_int(raw, "max_position_embeddings")
        num_heads = require_int(raw, "num_heads", "num_attention_heads")
        num_layers = require_int(raw, "num_layers", "num_hidden_layers")
        intermediate = optional_int(raw, "intermediate_size")
        return {
            "hidden_size": hidden_size,
            "intermediate_size": (
                intermediate if intermediate is not None else FFN_EXPANSION * hidden_size
            ),
            "max_position_embeddings": max_positions,
            "num_heads": num_heads,
            "num_layers": num_layers,
        }

    @property
    def num_attention_heads(self) -> int:
        return self.num_heads

    @property
    def num_hidden_layers(self) -> int:
        return self.num_layers
