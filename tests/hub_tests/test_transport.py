"""
Tests for URL building, revision encoding, headers and request dispatch.
"""

import pytest
import requests

from aiha.core.config import Settings
from aiha.core.errors import NoCredentialError, TransportError
from aiha.hub.transport import (
    RegistryTransport,
    deduplicate_user_agent,
    encode_revision,
    http_user_agent,
    resolve_timeout,
)
from tests.conftest import make_response


class TestEncodeRevision:
    """Tests for encode_revision."""

    def test_escapes_reserved_characters(self):
        encoded = encode_revision("refs/pr/1 a:b@c")
        for ch in " /:@":
            assert ch not in encoded
        assert encoded == "refs%2Fpr%2F1%20a%3Ab%40c"
        assert encode_revision("abc:/@") == "abc%3A%2F%40"

    def test_keeps_plain_revision(self):
        assert encode_revision("v1.0-rc_2~x") == "v1.0-rc_2~x"
        assert encode_revision("main") == "main"

    def test_escapes_control_and_non_ascii(self):
        assert encode_revision("a\tb") == "a%09b"
        assert encode_revision("\x7f") == "%7F"
        assert encode_revision("é") == "%C3%A9"


class TestUserAgent:
    """Tests for user-agent composition."""

    def test_http_user_agent(self):
        assert http_user_agent("aiha", "0.1.0") == "aiha-python; 0.1.0"
        assert http_user_agent("aiha", "0.1.0", "tool/1") == "aiha-python; 0.1.0; tool/1"

    def test_deduplicate(self):
        assert deduplicate_user_agent("a; b; a") == "a; b"

    def test_deduplicate_idempotent(self):
        once = deduplicate_user_agent("a; b; a; c; b")
        assert deduplicate_user_agent(once) == once

    def test_transport_user_agent_includes_agent(self, settings, session):
        t = RegistryTransport(settings=settings, session=session, user_agent="tool/1")
        assert t.user_agent == "aiha-python; 0.1.0; tool/1"

    def test_transport_user_agent_no_duplicates(self, settings, session):
        t = RegistryTransport(settings=settings, session=session, user_agent="0.1.0")
        assert t.user_agent == "aiha-python; 0.1.0"


class TestResolveTimeout:
    """Tests for resolve_timeout."""

    def test_default(self):
        assert resolve_timeout(None) == 30.0
        assert resolve_timeout(None, 5) == 5.0

    def test_explicit(self):
        assert resolve_timeout(2) == 2.0

    @pytest.mark.parametrize("value", [0, -1, -0.5])
    def test_rejects_non_positive(self, value):
        with pytest.raises(ValueError):
            resolve_timeout(value)


class TestUrls:
    """Tests for URL building."""

    def test_model_info_url(self, transport):
        assert (
            transport.model_info_url("bert-base-uncased")
            == "https://huggingface.co/api/models/bert-base-uncased"
        )

    def test_model_info_url_with_revision(self, transport):
        assert (
            transport.model_info_url("org/name", "refs/pr/1")
            == "https://huggingface.co/api/models/org/name/revision/refs%2Fpr%2F1"
        )

    def test_paths_info_url_defaults_to_main(self, transport):
        assert (
            transport.paths_info_url("org/name")
            == "https://huggingface.co/api/models/org/name/paths-info/main"
        )

    def test_raw_file_url(self, transport):
        assert (
            transport.raw_file_url("org/name", "config.json", "v1")
            == "https://huggingface.co/org/name/raw/v1/config.json"
        )

    def test_custom_endpoint_trailing_slash(self, settings, session):
        t = RegistryTransport(settings=settings, session=session, endpoint="http://hub.local/")
        assert t.model_info_url("m") == "http://hub.local/api/models/m"

    def test_empty_identifier_rejected(self, transport):
        with pytest.raises(ValueError):
            transport.model_info_url("")


class TestHeaders:
    """Tests for build_headers."""

    def test_explicit_token_wins(self, transport):
        headers = transport.build_headers("hf_other")
        assert headers["authorization"] == "Bearer hf_other"
        assert headers["user-agent"] == transport.user_agent

    def test_falls_back_to_settings_token(self, transport):
        assert transport.build_headers()["authorization"] == "Bearer hf_test"

    def test_no_token_raises(self, monkeypatch, session):
        monkeypatch.delenv("AIHA_HUB_TOKEN", raising=False)
        t = RegistryTransport(settings=Settings(_env_file=None), session=session)
        with pytest.raises(NoCredentialError):
            t.build_headers()


class TestSend:
    """Tests for GET/POST dispatch and error translation."""

    def test_get_passes_headers_timeout_and_params(self, transport, session):
        transport.get("http://x/api", params={"a": "1"}, timeout=5)

        args, kwargs = session.request.call_args
        assert args == ("GET", "http://x/api")
        assert kwargs["timeout"] == 5.0
        assert kwargs["params"] == {"a": "1"}
        assert kwargs["stream"] is False
        assert kwargs["headers"]["authorization"] == "Bearer hf_test"

    def test_get_uses_settings_timeout(self, transport, session):
        transport.get("http://x/api")
        assert session.request.call_args.kwargs["timeout"] == 30.0

    def test_post_sends_json(self, transport, session):
        transport.post("http://x/api", json={"paths": []})
        args, kwargs = session.request.call_args
        assert args[0] == "POST"
        assert kwargs["json"] == {"paths": []}

    def test_non_2xx_raises_with_status(self, transport, session):
        session.request.return_value = make_response(status_code=404)

        with pytest.raises(TransportError) as exc:
            transport.get("http://x/api")

        assert exc.value.status_code == 404
        assert "HTTP 404" in str(exc.value)

    @pytest.mark.parametrize(
        "error", [requests.Timeout("slow"), requests.ConnectionError("down")]
    )
    def test_request_exceptions_translated(self, transport, session, error):
        session.request.side_effect = error

        with pytest.raises(TransportError) as exc:
            transport.get("http://x/api")

        assert exc.value.status_code is None

    def test_missing_token_does_not_hit_network(self, monkeypatch, session):
        monkeypatch.delenv("AIHA_HUB_TOKEN", raising=False)
        t = RegistryTransport(settings=Settings(_env_file=None), session=session)

        with pytest.raises(NoCredentialError):
            t.get("http://x/api")

        session.request.assert_not_called()
