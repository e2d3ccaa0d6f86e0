"""Tests for VocabWebhookClient."""

import json

import httpx
import pytest

from tests.conftest import WEBHOOK_URL, content_payload
from wordroots.domain.learning.services.suggestion_fallback import MorphemeSuggestion
from wordroots.exceptions import UpstreamError, UpstreamTransportError
from wordroots.infrastructure.ai.vocab_webhook_client import (
    VocabWebhookClient,
    build_vocab_webhook_client,
    derive_suggest_url,
)


def _client(handler) -> VocabWebhookClient:
    return VocabWebhookClient(WEBHOOK_URL, timeout=5.0, transport=httpx.MockTransport(handler))


class TestDeriveSuggestUrl:
    def test_rewrites_generate_suffix(self):
        assert derive_suggest_url("https://n8n.example/webhook/generate-vocab") == (
            "https://n8n.example/webhook/suggest-vocab"
        )

    def test_other_urls_unchanged(self):
        assert derive_suggest_url("https://hooks.example/vocab") == "https://hooks.example/vocab"

    def test_only_trailing_segment_rewritten(self):
        url = "https://n8n.example/generate-vocab/run"
        assert derive_suggest_url(url) == url


class TestBuildVocabWebhookClient:
    @pytest.mark.parametrize("url", [None, ""])
    def test_disabled_without_url(self, url):
        assert build_vocab_webhook_client(url) is None

    def test_builds_client(self):
        client = build_vocab_webhook_client(WEBHOOK_URL, timeout=12.0)

        assert client is not None
        assert client.suggest_url == "http://n8n.test/webhook/suggest-vocab"
        assert client.timeout == 12.0


class TestGenerateContent:
    @pytest.mark.asyncio
    async def test_returns_domain_content(self):
        received = []

        def handler(request):
            received.append(json.loads(request.content))
            return httpx.Response(200, json=content_payload("rupt", ["erupt", "disrupt"]))

        content = await _client(handler).generate_content("rupt", "root")

        assert received == [{"morpheme": "rupt", "type": "root"}]
        assert content.id == "rupt"
        assert [w.word for w in content.words] == ["erupt", "disrupt"]
        assert content.memory_logic.table[0].affix == "-ion"

    @pytest.mark.asyncio
    async def test_payload_without_id_gets_requested_id(self):
        payload = content_payload("rupt", ["erupt"])
        del payload["id"]

        content = await _client(lambda r: httpx.Response(200, json=payload)).generate_content(
            "rupt", "root"
        )

        assert content.id == "rupt"

    @pytest.mark.asyncio
    async def test_requested_id_and_type_override_payload(self):
        payload = content_payload("", ["erupt"])
        payload["type"] = "suffix"

        content = await _client(lambda r: httpx.Response(200, json=payload)).generate_content(
            "rupt", "root"
        )

        assert (content.id, content.type) == ("rupt", "root")

    @pytest.mark.asyncio
    async def test_error_status(self):
        client = _client(lambda r: httpx.Response(503, text="busy"))

        with pytest.raises(UpstreamError) as exc_info:
            await client.generate_content("rupt", "root")

        assert exc_info.value.status_code == 502
        assert exc_info.value.upstream_status == 503
        assert exc_info.value.message == "Vocabulary webhook failed"

    @pytest.mark.asyncio
    async def test_unreachable(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamTransportError) as exc_info:
            await _client(handler).generate_content("rupt", "root")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Failed to call vocabulary webhook"

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        client = _client(lambda r: httpx.Response(200, text="<html>ok</html>"))

        with pytest.raises(UpstreamTransportError):
            await client.generate_content("rupt", "root")

    @pytest.mark.asyncio
    async def test_content_failing_schema(self):
        payload = content_payload("rupt", ["erupt"])
        payload["memory_logic"]["table"] = [{"result": "x"}]

        with pytest.raises(UpstreamTransportError):
            await _client(lambda r: httpx.Response(200, json=payload)).generate_content(
                "rupt", "root"
            )


class TestSuggest:
    @pytest.mark.asyncio
    async def test_posts_to_suggest_url(self):
        received = []

        def handler(request):
            received.append(request)
            return httpx.Response(
                200,
                json={"suggestions": [{"id": "spect", "meaning": "look"}, {"id": "port"}]},
            )

        suggestions = await _client(handler).suggest("root", "look", ["rupt", "scrib"])

        assert suggestions == [MorphemeSuggestion("spect", "look"), MorphemeSuggestion("port", "")]
        assert str(received[0].url) == "http://n8n.test/webhook/suggest-vocab"
        assert json.loads(received[0].content) == {
            "type": "root",
            "input": "look",
            "existing": "rupt, scrib",
        }

    @pytest.mark.asyncio
    async def test_invalid_payload(self):
        client = _client(lambda r: httpx.Response(200, json=["spect"]))

        with pytest.raises(UpstreamTransportError):
            await client.suggest("root", "", [])
