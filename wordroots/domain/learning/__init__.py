"""
Learning bounded context - Domain layer.

This context handles morpheme-based vocabulary learning:
- Morpheme registry entries and their lesson content
- Multiple-choice practice decks and scoring
- Fallback suggestions for new morphemes
"""
