"""
Errors raised by the domain model.

Entities and domain services raise these; quotebook.main maps each family
to an HTTP status (validation 400, authorization 403, not found 404,
business rule 409 or 500).
"""


class DomainError(Exception):
    """Root of the domain error hierarchy."""

    def __init__(self, message: str, context: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    def __str__(self) -> str:
        if not self.context:
            return self.message
        pairs = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.message} ({pairs})"


class ValidationError(DomainError):
    """An entity was given a value it cannot hold, such as a blank quote."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        context: dict[str, object] = {}
        if field is not None:
            context["field"] = field
        if value is not None:
            context["value"] = value
        super().__init__(message, context)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """A record the operation depends on does not exist."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(
            f"{entity_type} {entity_id} does not exist",
            {"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """
    The request is well formed but conflicts with the current state.

    `rule` is a stable identifier clients and logs can match on.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        super().__init__(message or f"Rule '{rule}' was violated", {"rule": rule})
        self.rule = rule


class AuthorizationError(DomainError):
    """
    The acting user may not touch the resource.

    Also raised for resources that do not exist at all.
    """

    def __init__(self, message: str = "You do not have access to this resource") -> None:
        super().__init__(message)
