# aiha/models/opt.py
from typing import Any, ClassVar, Dict, Mapping, Tuple

from .base import ArchitectureConfig, ModelLibrary, require_int


class OPTConfig(ArchitectureConfig):
    MODEL_TYPES: ClassVar[Tuple[str, ...]] = ("opt",)
    LIBRARIES: ClassVar[Tuple[ModelLibrary, ...]] = (
        ModelLibrary.TRANSFORMERS,
        ModelLibrary.PYTORCH,
        ModelLibrary.TENSORFLOW,
        ModelLibrary.JAX,
    )

    hidden_size: int
    ffn_dim: int
    max_position_embeddings: int
    num_attention_heads: int
    num_hidden_layers: int

    @classmethod
    def params_from_json(cls, raw: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            "hidden_size": require_int(raw, "hidden_size"),
            "ffn_dim": require_int(raw, "ffn_dim"),
            "max_position_embeddings": require_int(raw, "max_position_embeddings"),
            "num_attention_heads": require_int(raw, "num_attention_heads"),
            "num_hidden_layers": require_int(raw, "num_hidden_layers"),
        }

    @property
    def intermediate_size(self) -> int:
        return self.ffn_dim
