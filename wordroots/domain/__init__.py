"""
Domain layer.

The domain layer contains the core vocabulary and practice logic.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Morphemes, lesson content, quiz questions and sessions
- Domain Services: Stateless operations such as quiz generation
"""
