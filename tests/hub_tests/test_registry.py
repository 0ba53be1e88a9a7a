"""
Tests for the registry operations, run against a mocked session.
"""

import pytest

from aiha.core.errors import DecodeError, TransportError
from aiha.hub.registry import fetch_model_info, fetch_raw_config, list_files_info
from aiha.hub.schemas import FileEntry
from tests.conftest import make_response


class TestFetchModelInfo:
    """Tests for fetch_model_info."""

    def test_returns_document(self, transport, session, model_info_payload):
        session.request.return_value = make_response(payload=model_info_payload)

        doc = fetch_model_info(transport, "bert-base-uncased")

        assert doc.model_id == "bert-base-uncased"
        args, kwargs = session.request.call_args
        assert args == ("GET", "https://huggingface.co/api/models/bert-base-uncased")
        assert kwargs["params"] == {"securityStatus": "true"}

    def test_files_metadata_requests_blobs(self, transport, session):
        fetch_model_info(transport, "m", revision="v2", files_metadata=True)

        args, kwargs = session.request.call_args
        assert args[1] == "https://huggingface.co/api/models/m/revision/v2"
        assert kwargs["params"] == {"securityStatus": "true", "blobs": "true"}

    def test_timeout_forwarded(self, transport, session):
        fetch_model_info(transport, "m", timeout=3)
        assert session.request.call_args.kwargs["timeout"] == 3.0

    def test_invalid_json_raises_decode_error(self, transport, session):
        session.request.return_value = make_response(body=b"<html>oops</html>")

        with pytest.raises(DecodeError):
            fetch_model_info(transport, "m")

    def test_non_object_raises_decode_error(self, transport, session):
        session.request.return_value = make_response(payload=[1, 2])

        with pytest.raises(DecodeError):
            fetch_model_info(transport, "m")

    def test_not_found(self, transport, session):
        session.request.return_value = make_response(status_code=404)

        with pytest.raises(TransportError) as exc:
            fetch_model_info(transport, "nope")

        assert exc.value.status_code == 404


class TestListFilesInfo:
    """Tests for list_files_info."""

    def test_enriches_matching_entries(self, transport, session):
        siblings = [FileEntry(path="config.json"), FileEntry(path="model.bin")]
        session.request.return_value = make_response(
            payload=[
                {"type": "file", "path": "config.json", "size": 570, "oid": "c1"},
                {
                    "type": "file",
                    "path": "model.bin",
                    "size": 440473133,
                    "oid": "m1",
                    "lfs": {"oid": "sha", "size": 440473133, "pointerSize": 134},
                },
            ]
        )

        updated = list_files_info(transport, "bert-base-uncased", siblings)

        assert updated == 2
        assert siblings[0].size == 570
        assert siblings[0].content_hash == "c1"
        assert siblings[1].lfs.sha256 == "sha"

        args, kwargs = session.request.call_args
        assert args == (
            "POST",
            "https://huggingface.co/api/models/bert-base-uncased/paths-info/main",
        )
        assert kwargs["json"] == {"paths": ["config.json", "model.bin"], "expand": True}

    def test_unknown_items_ignored(self, transport, session):
        siblings = [FileEntry(path="a")]
        session.request.return_value = make_response(
            payload=[{"path": "b", "size": 1}, "junk", {"size": 2}]
        )

        assert list_files_info(transport, "m", siblings) == 0
        assert len(siblings) == 1
        assert siblings[0].size is None

    def test_duplicate_paths_all_updated(self, transport, session):
        siblings = [FileEntry(path="a"), FileEntry(path="a")]
        session.request.return_value = make_response(payload=[{"path": "a", "size": 7}])

        assert list_files_info(transport, "m", siblings) == 2
        assert [s.size for s in siblings] == [7, 7]

    def test_non_array_response_is_noop(self, transport, session):
        siblings = [FileEntry(path="a")]
        session.request.return_value = make_response(payload={"error": "x"})

        assert list_files_info(transport, "m", siblings) == 0
        assert siblings[0].size is None


class TestFetchRawConfig:
    """Tests for fetch_raw_config."""

    def test_streams_raw_config(self, transport, session):
        fetch_raw_config(transport, "org/name")

        args, kwargs = session.request.call_args
        assert args == ("GET", "https://huggingface.co/org/name/raw/main/config.json")
        assert kwargs["stream"] is True
