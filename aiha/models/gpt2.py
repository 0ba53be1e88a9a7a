# aiha/models/gpt2.py
from typing import Any, ClassVar, Dict, Mapping, Tuple

from .base import (
    FFN_EXPANSION,
    ArchitectureConfig,
    ModelLibrary,
    optional_int,
    require_int,
)


class GPT2Config(ArchitectureConfig):
    """
    GPT-2 family schema (``n_embd`` / ``n_positions`` / ``n_head`` /
    ``n_layer``). ``n_inner`` is optional; when it is absent or null the
    feed-forward width is ``4 * n_embd``.
    """

    MODEL_TYPES: ClassVar[Tuple[str, ...]] = ("gpt2",)
    LIBRARIES: ClassVar[Tuple[ModelLibrary, ...]] = (
        ModelLibrary.TRANSFORMERS,
        ModelLibrary.PYTORCH,
        ModelLibrary.TENSORFLOW,
        ModelLibrary.JAX,
    )

    n_embd: int
    n_inner: int
    n_positions: int
    n_head: int
    n_layer: int

    @classmethod
    def params_from_json(cls, raw: Mapping[str, Any]) -> Dict[str, Any]:
        n_embd = require_int(raw, "n_embd")
        n_positions = require_int(raw, "n_positions")
        n_head = require_int(raw, "n_head")
        n_layer = require_int(raw, "n_layer")
        n_inner = optional_int(raw, "n_inner")
        return {
            "n_embd": n_embd,
            "n_inner": n_inner if n_inner is not None else FFN_EXPANSION * n_embd,
            "n_positions": n_positions,
            "n_head": n_head,
            "n_layer": n_layer,
        }

    @property
    def hidden_size(self) -> int:
        return self.n_embd

    @property
    def intermediate_size(self) -> int:
        return self.n_inner

    @property
    def max_position_embeddings(self) -> int:
        return self.n_positions

    @property
    def num_attention_heads(self) -> int:
        return self.n_head

    @property
    def num_hidden_layers(self) -> int:
        return self.n_layer
