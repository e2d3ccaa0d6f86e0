"""Pytest configuration and fixtures."""

import json
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import httpx
import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from wordroots.core import container
from wordroots.domain.learning.entities.morpheme import Morpheme
from wordroots.domain.learning.entities.morpheme_content import (
    MemoryLogic,
    MemoryTableRow,
    MorphemeContent,
    VocabularyWord,
    WordPart,
)
from wordroots.infrastructure.ai.vocab_webhook_client import VocabWebhookClient
from wordroots.infrastructure.learning.repositories import JsonContentStore
from wordroots.main import app

WEBHOOK_URL = "http://n8n.test/webhook/generate-vocab"


def make_word(
    word: str,
    meaning_en: str | None = None,
    breakdown: str | None = None,
    level: str = "B2",
) -> VocabularyWord:
    """Build a vocabulary word with distinct defaults derived from its spelling."""
    return VocabularyWord(
        word=word,
        level=level,
        breakdown=breakdown if breakdown is not None else f"{word[:2]} + {word[2:]}",
        logic=f"logic of {word}",
        meaning_en=meaning_en if meaning_en is not None else f"meaning of {word}",
        meaning_vi=f"nghia cua {word}",
        example=f"An example with {word}.",
        parts=[WordPart(part=word[:2], meaning="start"), WordPart(part=word[2:], meaning="end")],
    )


def make_content(
    morpheme_id: str,
    words: list[VocabularyWord],
    morpheme_type: str = "root",
    meaning: str = "break",
) -> MorphemeContent:
    """Build lesson content for a morpheme."""
    return MorphemeContent(
        id=morpheme_id,
        type=morpheme_type,  # type: ignore[arg-type]
        meaning=meaning,
        origin="Latin",
        explanation=f"**{morpheme_id}** means {meaning}.",
        level_note="B2-C1",
        words=words,
        memory_logic=MemoryLogic(
            root=morpheme_id,
            meaning=meaning,
            table=[
                MemoryTableRow(
                    result=f"inter{morpheme_id}", prefix="inter-", prefix_meaning="between"
                )
            ],
        ),
    )


def content_payload(morpheme_id: str, words: list[str], meaning: str = "break") -> dict[str, Any]:
    """Raw JSON payload of lesson content, as the webhook would return it."""
    return {
        "id": morpheme_id,
        "type": "root",
        "meaning": meaning,
        "origin": "Latin",
        "explanation": f"{morpheme_id} means {meaning}",
        "level_note": "B2",
        "words": [
            {
                "word": word,
                "level": "B2",
                "breakdown": f"{word[:2]} + {word[2:]}",
                "parts": [],
                "logic": "",
                "meaning_en": f"meaning of {word}",
                "meaning_vi": "",
                "example": "",
                "collocations": [],
                "forms": [],
            }
            for word in words
        ],
        "memory_logic": {
            "root": morpheme_id,
            "meaning": meaning,
            "table": [{"suffix": "-ion", "suffix_meaning": "act of", "result": f"{morpheme_id}ion"}],
        },
    }


RUPT_WORDS = ["interrupt", "erupt", "disrupt", "corrupt"]


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Empty data directory for one test."""
    return tmp_path / "data"


@pytest.fixture
def content_store(data_dir: Path) -> JsonContentStore:
    """Content store with an empty registry."""
    store = JsonContentStore(data_dir)
    store.ensure_layout()
    return store


@pytest.fixture
def seeded_store(content_store: JsonContentStore) -> JsonContentStore:
    """Content store holding the rupt root with four words."""
    content_store.register_morpheme(Morpheme(id="rupt", type="root", meaning="break"))
    content_store.put_content(make_content("rupt", [make_word(w) for w in RUPT_WORDS]))
    return content_store


def write_registry(store: JsonContentStore, entries: Any) -> None:  # noqa: ANN401
    store.registry_path.write_text(json.dumps(entries), encoding="utf-8")


@pytest.fixture
def client(content_store: JsonContentStore) -> Generator[TestClient, Any, None]:
    """Create a test client backed by a temporary content store and no webhook."""
    container.content_store.override(providers.Object(content_store))
    container.vocab_generator.override(providers.Object(None))

    with TestClient(app) as test_client:
        yield test_client

    container.content_store.reset_override()
    container.vocab_generator.reset_override()


WebhookHandler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def use_webhook() -> Generator[Callable[[WebhookHandler], list[httpx.Request]], None, None]:
    """
    Route webhook calls to a handler function.

    Returns a function that installs the handler and gives back the list of
    requests the webhook received.
    """

    def install(handler: WebhookHandler) -> list[httpx.Request]:
        received: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            received.append(request)
            return handler(request)

        webhook = VocabWebhookClient(
            WEBHOOK_URL, timeout=5.0, transport=httpx.MockTransport(recording_handler)
        )
        container.vocab_generator.override(providers.Object(webhook))
        return received

    yield install

    container.vocab_generator.reset_override()
