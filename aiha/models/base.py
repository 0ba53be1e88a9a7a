# aiha/models/base.py
"""
base.py
=======

Shared pieces of the architecture schemas.

Every variant is a frozen pydantic model built by ``from_json``, which reads
the variant's own raw field names and fails with ``MissingFieldError`` on the
first required one that is absent. Because validation happens before the
model is instantiated, a partially built variant is never observable.

All variants expose the same normalized surface:

- ``hidden_size``
- ``intermediate_size``
- ``max_position_embeddings`` (0 when the architecture has no such notion)
- ``num_attention_heads``
- ``num_hidden_layers``
- ``model_type`` and ``available_libraries``
"""
from abc import abstractmethod
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from ..core.errors import MissingFieldError

# Feed-forward width used when a config leaves it implicit.
FFN_EXPANSION = 4

# Returned by max_position_embeddings when the architecture has no
# fixed maximum sequence length (ALiBi, relative attention, ...).
NO_MAX_POSITIONS = 0


class ModelLibrary(str, Enum):
    """Libraries a model can be published for on the registry."""

    ADAPTER_TRANSFORMERS = "adapter-transformers"
    ALLENNLP = "allennlp"
    ASTEROID = "asteroid"
    CORE_ML = "coreml"
    DIFFUSERS = "diffusers"
    ESPNET = "espnet"
    FAIRSEQ = "fairseq"
    FASTAI = "fastai"
    FASTTEXT = "fasttext"
    FLAIR = "flair"
    FLAX = "flax"
    GRAPHCORE = "graphcore"
    HABANA = "habana"
    JAX = "jax"
    JOBLIB = "joblib"
    KERAS = "keras"
    ML_AGENTS = "ml-agents"
    NEMO = "nemo"
    OPEN_CLIP = "open_clip"
    OPENVINO = "openvino"
    ONNX = "onnx"
    PADDLENLP = "paddlenlp"
    PADDLEPADDLE = "paddlepaddle"
    PYANNOTE_AUDIO = "pyannote-audio"
    PYTHAE = "pythae"
    PYTORCH = "pytorch"
    RUST = "rust"
    SAFETENSORS = "safetensors"
    SAMPLE_FACTORY = "sample-factory"
    SCIKIT_LEARN = "sklearn"
    SENTENCE_TRANSFORMERS = "sentence-transformers"
    SPACY = "spacy"
    SPAN_MARKER = "span-marker"
    SPEECHBRAIN = "speechbrain"
    STABLE_BASELINES3 = "stable-baselines3"
    STANZA = "stanza"
    TENSORBOARD = "tensorboard"
    TENSORFLOW = "tf"
    TENSORFLOW_TTS = "tensorflowtts"
    TFLITE = "tflite"
    TIMM = "timm"
    TRANSFORMERS = "transformers"


def _read_int(raw: Mapping[str, Any], name: str) -> Optional[int]:
    value = raw.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def require_int(raw: Mapping[str, Any], *names: str) -> int:
    """
    Return the first of ``names`` present as an integer.
    Raises MissingFieldError naming the first (canonical) name otherwise.
    """
    for name in names:
        value = _read_int(raw, name)
        if value is not None:
            return value
    raise MissingFieldError(names[0])


def optional_int(raw: Mapping[str, Any], *names: str) -> Optional[int]:
    for name in names:
        value = _read_int(raw, name)
        if value is not None:
            return value
    return None


NORMALIZED_FIELDS = (
    "hidden_size",
    "intermediate_size",
    "max_position_embeddings",
    "num_attention_heads",
    "num_hidden_layers",
)


class ArchitectureConfig(BaseModel):
    """
    Base of every architecture variant. Subclasses declare their raw fields
    and provide the normalized accessors (as fields when the raw name already
    matches, as properties otherwise).
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    MODEL_TYPES: ClassVar[Tuple[str, ...]] = ()
    LIBRARIES: ClassVar[Tuple[ModelLibrary, ...]] = (
        ModelLibrary.TRANSFORMERS,
        ModelLibrary.PYTORCH,
    )

    model_type: str

    @classmethod
    @abstractmethod
    def params_from_json(cls, raw: Mapping[str, Any]) -> Dict[str, Any]:
        """Extract this variant's fields from ``raw``, raising MissingFieldError."""

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> "ArchitectureConfig":
        model_type = raw.get("model_type")
        if not isinstance(model_type, str):
            raise MissingFieldError("model_type")
        params = cls.params_from_json(raw)
        return cls(model_type=model_type, **params)

    @property
    def available_libraries(self) -> Tuple[ModelLibrary, ...]:
        return self.LIBRARIES

    def summary(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"model_type": self.model_type}
        for name in NORMALIZED_FIELDS:
            out[name] = getattr(self, name)
        out["available_libraries"] = [lib.value for lib in self.available_libraries]
        return out
