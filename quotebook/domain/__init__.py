"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Book, LibraryEntry, Quote, User
- Value Objects: strongly-typed identifiers
- Domain exceptions translated to HTTP errors by the infrastructure layer
"""
