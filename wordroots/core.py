import random

from dependency_injector import containers, providers

from wordroots.application.learning.use_cases.build_practice_deck_use_case import (
    BuildPracticeDeckUseCase,
)
from wordroots.application.learning.use_cases.generate_morpheme_content_use_case import (
    GenerateMorphemeContentUseCase,
)
from wordroots.application.learning.use_cases.morpheme_catalog_use_case import (
    MorphemeCatalogUseCase,
)
from wordroots.application.learning.use_cases.suggest_morphemes_use_case import (
    SuggestMorphemesUseCase,
)
from wordroots.config import get_settings
from wordroots.domain.learning.services.quiz_generator import QuizGenerator
from wordroots.domain.learning.services.suggestion_fallback import SuggestionFallbackTable
from wordroots.infrastructure.ai.vocab_webhook_client import build_vocab_webhook_client
from wordroots.infrastructure.learning.repositories import JsonContentStore


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Shared random source so a configured seed makes decks reproducible
    rng = providers.Singleton(random.Random, settings.provided.RANDOM_SEED)

    # Repositories
    content_store = providers.Singleton(JsonContentStore, data_dir=settings.provided.DATA_DIR)

    # External services
    vocab_generator = providers.Singleton(
        build_vocab_webhook_client,
        url=settings.provided.VOCAB_WEBHOOK_URL,
        timeout=settings.provided.VOCAB_WEBHOOK_TIMEOUT_SECONDS,
    )

    # Domain services (pure domain logic, no I/O)
    quiz_generator = providers.Factory(QuizGenerator, rng=rng)
    suggestion_fallback_table = providers.Factory(SuggestionFallbackTable, rng=rng)

    # Learning module, application use cases
    morpheme_catalog_use_case = providers.Factory(
        MorphemeCatalogUseCase,
        content_store=content_store,
    )
    generate_morpheme_content_use_case = providers.Factory(
        GenerateMorphemeContentUseCase,
        content_store=content_store,
        vocab_generator=vocab_generator,
    )
    suggest_morphemes_use_case = providers.Factory(
        SuggestMorphemesUseCase,
        content_store=content_store,
        fallback_table=suggestion_fallback_table,
        vocab_generator=vocab_generator,
    )
    build_practice_deck_use_case = providers.Factory(
        BuildPracticeDeckUseCase,
        content_store=content_store,
        quiz_generator=quiz_generator,
        rng=rng,
    )


# Initialize container
container = Container()
