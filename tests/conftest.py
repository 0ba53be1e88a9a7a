"""
Shared fixtures: settings isolated from the environment, a mocked
requests session, and canned registry payloads.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from aiha.cache import LocalCache
from aiha.core.config import Settings
from aiha.hub.transport import RegistryTransport


def make_response(status_code=200, payload=None, body=None):
    """Build a real requests.Response with an in-memory body."""
    r = requests.Response()
    r.status_code = status_code
    if body is None:
        body = json.dumps(payload if payload is not None else {}).encode("utf-8")
    r._content = body
    r._content_consumed = True
    r.encoding = "utf-8"
    return r


@pytest.fixture
def settings(tmp_path, monkeypatch):
    for name in ("AIHA_HUB_ENDPOINT", "AIHA_HUB_TOKEN", "AIHA_USER_AGENT", "AIHA_CACHE_DIR"):
        monkeypatch.delenv(name, raising=False)
    return Settings(
        HUB_TOKEN="hf_test",
        CACHE_DIR=str(tmp_path / "cache"),
        _env_file=None,
    )


@pytest.fixture
def session():
    s = MagicMock(spec=requests.Session)
    s.request.return_value = make_response(payload={})
    return s


@pytest.fixture
def transport(settings, session):
    return RegistryTransport(settings=settings, session=session)


@pytest.fixture
def cache(settings, tmp_path):
    return LocalCache(root=tmp_path / "cache", settings=settings)


@pytest.fixture
def bert_config():
    return {
        "model_type": "bert",
        "architectures": ["BertForMaskedLM"],
        "hidden_size": 768,
        "intermediate_size": 3072,
        "max_position_embeddings": 512,
        "num_attention_heads": 12,
        "num_hidden_layers": 12,
        "vocab_size": 30522,
    }


@pytest.fixture
def model_info_payload():
    return {
        "_id": "621ffdc036468d709f174338",
        "id": "bert-base-uncased",
        "modelId": "bert-base-uncased",
        "author": "google-bert",
        "sha": "86b5e0934494bd15c9632b12f734a8a67f723594",
        "lastModified": "2024-02-19T11:06:12.000Z",
        "private": False,
        "pipeline_tag": "fill-mask",
        "tags": ["transformers", "pytorch", "bert", "fill-mask", "en"],
        "config": {"architectures": ["BertForMaskedLM"], "model_type": "bert"},
        "siblings": [
            {"rfilename": ".gitattributes"},
            {"rfilename": "config.json"},
            {"rfilename": "model.safetensors"},
        ],
        "securityStatus": {
            "hasUnsafeFile": False,
            "scansDone": True,
            "clamAVInfectedFiles": [],
            "dangerousPickles": [],
        },
    }
