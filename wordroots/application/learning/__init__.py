"""
Learning bounded context - Application layer.

Contains use cases for vocabulary lessons:
- Commands: Generate or register morphemes
- Queries: List morphemes, get content, suggest morphemes, build practice decks
"""
