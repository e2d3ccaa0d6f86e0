from .build_practice_deck_use_case import BuildPracticeDeckUseCase
from .generate_morpheme_content_use_case import GenerateMorphemeContentUseCase
from .morpheme_catalog_use_case import MorphemeCatalogUseCase
from .suggest_morphemes_use_case import SuggestMorphemesUseCase

__all__ = [
    "BuildPracticeDeckUseCase",
    "GenerateMorphemeContentUseCase",
    "MorphemeCatalogUseCase",
    "SuggestMorphemesUseCase",
]
