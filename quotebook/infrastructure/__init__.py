"""
Infrastructure layer.

Implementations of the ports defined in the application layer:

- Persistence (SQLAlchemy repositories and mappers)
- Web framework (FastAPI routers and schemas)
- Identity (bearer token verification)

This layer depends on domain and application layers,
but they do not depend on it.
"""
