# aiha/models/bert.py
from typing import Any, ClassVar, Dict, Mapping, Tuple

from .base import ArchitectureConfig, ModelLibrary, require_int


class BertConfig(ArchitectureConfig):
    """BERT stores its dimensions under the normalized names already."""

    MODEL_TYPES: ClassVar[Tuple[str, ...]] = ("bert",)
    LIBRARIES: ClassVar[Tuple[ModelLibrary, ...]] = (
        ModelLibrary.TRANSFORMERS,
        ModelLibrary.PYTORCH,
        ModelLibrary.TENSORFLOW,
        ModelLibrary.JAX,
    )

    hidden_size: int
    intermediate_size: int
    max_position_embeddings: int
    num_attention_heads: int
    num_hidden_layers: int

    @classmethod
    def params_from_json(cls, raw: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            "hidden_size": require_int(raw, "hidden_size"),
            "intermediate_size": require_int(raw, "intermediate_size"),
            "max_position_embeddings": require_int(raw, "max_position_embeddings"),
            "num_attention_heads": require_int(raw, "num_attention_heads"),
            "num_hidden_layers": require_int(raw, "num_hidden_layers"),
        }
