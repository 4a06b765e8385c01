"""
Domain and store errors.

Store failures are tagged so callers can tell a recoverable uniqueness
violation apart from a missing row or an unexpected database failure:

- :class:`ConflictError`        unique constraint hit on create; re-fetch and use the existing row
- :class:`NotFoundError`        missing (or not owned) template, session or set log
- :class:`UnexpectedStoreError` anything else; surfaced to the user, never swallowed

Bad set input is a :class:`InvalidSetError`, raised before any store call.
"""


class StoreError(Exception):
    """Base class for failures coming out of the persistence layer."""


class ConflictError(StoreError):
    """A uniqueness constraint rejected the write."""


class NotFoundError(StoreError):
    """The requested row does not exist for this user."""

    def __init__(self, entity: str, entity_id: object = None):
        self.entity = entity
        self.entity_id = entity_id
        detail = f"{entity} not found" if entity_id is None else f"{entity} {entity_id} not found"
        super().__init__(detail)


class UnexpectedStoreError(StoreError):
    """Any other database failure."""


class InvalidSetError(ValueError):
    """Reps or weight outside the accepted domain."""
