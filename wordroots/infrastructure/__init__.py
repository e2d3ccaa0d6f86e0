"""
Infrastructure layer.

The infrastructure layer contains implementations of ports defined
in the application layer. It handles all external concerns:

- Persistence (flat JSON files)
- Web framework (FastAPI, routers)
- External services (vocabulary generation webhook)
- Dependency injection

This layer depends on domain and application layers,
but they do not depend on it.
"""
