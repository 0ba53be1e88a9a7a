# aiha/models/bloom.py
from typing import Any, ClassVar, Dict, Mapping, Tuple

from .base import (
    FFN_EXPANSION,
    NO_MAX_POSITIONS,
    ArchitectureConfig,
    optional_int,
    require_int,
)


class BloomConfig(ArchitectureConfig):
    """
    BLOOM uses ALiBi position biases, so it has no fixed maximum sequence
    length; ``max_position_embeddings`` reports 0. The MLP width is read from
    ``n_inner`` when the config declares it and is otherwise four times the
    hidden size.

    The width is spelled ``hidden_size``, ``n_embed`` or ``n_embd`` depending
    on the checkpoint, and the head count ``n_head`` or
    ``num_attention_heads``; every spelling is accepted.
    """

    MODEL_TYPES: ClassVar[Tuple[str, ...]] = ("bloom",)

    hidden_size: int
    n_inner: int
    n_head: int
    n_layer: int

    @classmethod
    def params_from_json(cls, raw: Mapping[str, Any]) -> Dict[str, Any]:
        hidden_size = require_int(raw, "hidden_size", "n_embed", "n_embd")
        n_head = require_int(raw, "n_head", "num_attention_heads")
        n_layer = require_int(raw, "n_layer", "num_hidden_layers")
        n_inner = optional_int(raw, "n_inner")
        return {
            "hidden_size": hidden_size,
            "n_inner": n_inner if n_inner is not None else FFN_EXPANSION * hidden_size,
            "n_head": n_head,
            "n_layer": n_layer,
        }

    @property
    def intermediate_size(self) -> int:
        return self.n_inner

    @property
    def max_position_embeddings(self) -> int:
        return NO_MAX_POSITIONS

    @property
    def num_attention_heads(self) -> int:
        return self.n_head

    @property
    def num_hidden_layers(self) -> int:
        return self.n_layer
