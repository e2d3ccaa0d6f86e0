"""HTTP client for the vocabulary generation webhook (an n8n-style workflow)."""

import re
from typing import Any

import httpx
import structlog
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from wordroots.domain.common.exceptions import DomainError
from wordroots.domain.learning.entities.morpheme import MorphemeType
from wordroots.domain.learning.entities.morpheme_content import MorphemeContent
from wordroots.domain.learning.services.suggestion_fallback import MorphemeSuggestion
from wordroots.exceptions import UpstreamError, UpstreamTransportError
from wordroots.infrastructure.learning import schemas
from wordroots.infrastructure.learning.mappers.content_mapper import MorphemeContentMapper

logger = structlog.get_logger(__name__)

_GENERATE_SUFFIX = re.compile(r"/generate-vocab$")


def derive_suggest_url(generate_url: str) -> str:
    """
    Derive the suggestion webhook from the generation webhook.

    Only a trailing /generate-vocab is rewritten to /suggest-vocab; any other
    URL is returned unchanged.
    """
    return _GENERATE_SUFFIX.sub("/suggest-vocab", generate_url)


class _SuggestionPayload(BaseModel):
    suggestions: list[schemas.SuggestionItem]


class VocabWebhookClient:
    """
    Calls the generation and suggestion webhooks.

    Each call is a single attempt bounded by the configured timeout. Failures
    are raised as UpstreamError (non-success status) or UpstreamTransportError
    (unreachable, or a payload that does not validate).
    """

    def __init__(
        self,
        generate_url: str,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.generate_url = generate_url
        self.suggest_url = derive_suggest_url(generate_url)
        self.timeout = timeout
        self._transport = transport
        self.content_mapper = MorphemeContentMapper()

    async def generate_content(
        self, morpheme_id: str, morpheme_type: MorphemeType
    ) -> MorphemeContent:
        """
        Ask the webhook to generate lesson content for a morpheme.

        Raises:
            UpstreamError: If the webhook responds with a non-success status
            UpstreamTransportError: If the webhook is unreachable or the payload is invalid
        """
        data = await self._post(self.generate_url, {"morpheme": morpheme_id, "type": morpheme_type})
        # The requested morpheme owns the content whatever the webhook echoes back
        if isinstance(data, dict):
            data["id"] = morpheme_id
            data["type"] = morpheme_type

        try:
            schema = schemas.MorphemeContent.model_validate(data)
            return self.content_mapper.to_domain(schema)
        except (SchemaValidationError, DomainError) as e:
            logger.warning("vocab_webhook_invalid_content", morpheme_id=morpheme_id, error=str(e))
            raise UpstreamTransportError("Vocabulary webhook returned invalid content") from e

    async def suggest(
        self, category: str, query: str, existing_ids: list[str]
    ) -> list[MorphemeSuggestion]:
        """
        Ask the webhook for morpheme suggestions.

        Raises:
            UpstreamError: If the webhook responds with a non-success status
            UpstreamTransportError: If the webhook is unreachable or the payload is invalid
        """
        data = await self._post(
            self.suggest_url,
            {
                "type": category,
                "input": query,
                "existing": ", ".join(existing_ids) or "none",
            },
        )
        try:
            payload = _SuggestionPayload.model_validate(data)
        except SchemaValidationError as e:
            raise UpstreamTransportError("Suggestion webhook returned invalid payload") from e
        return [MorphemeSuggestion(id=s.id, meaning=s.meaning) for s in payload.suggestions]

    async def _post(self, url: str, body: dict[str, Any]) -> Any:  # noqa: ANN401
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=body)
        except httpx.HTTPError as e:
            logger.warning("vocab_webhook_unreachable", url=url, error=str(e))
            raise UpstreamTransportError("Failed to call vocabulary webhook") from e

        if not response.is_success:
            logger.warning("vocab_webhook_failed", url=url, status_code=response.status_code)
            raise UpstreamError("Vocabulary webhook failed", upstream_status=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamTransportError("Vocabulary webhook returned non-JSON response") from e


def build_vocab_webhook_client(
    url: str | None, timeout: float = 60.0
) -> VocabWebhookClient | None:
    """Build the webhook client, or None when no webhook is configured."""
    if not url:
        return None
    return VocabWebhookClient(url, timeout=timeout)
