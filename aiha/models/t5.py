# aiha/models/t5.py
from typing import Any, ClassVar, Dict, Mapping, Tuple

from .base import (
    NO_MAX_POSITIONS,
    ArchitectureConfig,
    ModelLibrary,
    optional_int,
    require_int,
)


class T5Config(ArchitectureConfig):
    """
    T5 schema: ``d_model`` / ``d_ff`` / ``n_heads`` / ``n_layers``.

    Current configs spell the last two ``num_heads`` / ``num_layers``; both
    spellings are accepted. T5 uses relative position buckets, so
    ``n_positions`` is optional and ``max_position_embeddings`` falls back
    to 0 when it is absent.
    """

    MODEL_TYPES: ClassVar[Tuple[str, ...]] = ("t5",)
    LIBRARIES: ClassVar[Tuple[ModelLibrary, ...]] = (
        ModelLibrary.TRANSFORMERS,
        ModelLibrary.PYTORCH,
        ModelLibrary.TENSORFLOW,
        ModelLibrary.JAX,
    )

    d_model: int
    d_ff: int
    n_heads: int
    n_layers: int
    n_positions: int = NO_MAX_POSITIONS

    @classmethod
    def params_from_json(cls, raw: Mapping[str, Any]) -> Dict[str, Any]:
        params = {
            "d_model": require_int(raw, "d_model"),
            "d_ff": require_int(raw, "d_ff"),
            "n_heads": require_int(raw, "n_heads", "num_heads"),
            "n_layers": require_int(raw, "n_layers", "num_layers"),
        }
        n_positions = optional_int(raw, "n_positions")
        if n_positions is not None:
            params["n_positions"] = n_positions
        return params

    @property
    def hidden_size(self) -> int:
        return self.d_model

    @property
    def intermediate_size(self) -> int:
        return self.d_ff

    @property
    def max_position_embeddings(self) -> int:
        return self.n_positions

    @property
    def num_attention_heads(self) -> int:
        return self.n_heads

    @property
    def num_hidden_layers(self) -> int:
        return self.n_layers
