"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors.

This layer contains:
- Use Cases: Orchestrate domain logic
- DTOs: Data transfer objects for input/output
- Protocols: Interfaces for the content store and the vocabulary generator
"""
