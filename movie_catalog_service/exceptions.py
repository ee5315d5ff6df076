"""Domain errors raised by repositories and services.

Blueprints translate these into HTTP status codes.
"""


class CatalogError(Exception):
    """Base class for all catalog errors."""

    status_code = 500


class ValidationError(CatalogError):
    """Request data is invalid."""

    status_code = 400


class InvalidLimitError(ValidationError):
    """A result limit is not a positive integer."""


class AuthenticationError(CatalogError):
    """Missing or invalid API key."""

    status_code = 401


class NotFoundError(CatalogError):
    """Requested record does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} not found")


class ConfigurationError(CatalogError):
    """A required configuration value is missing."""


class DataAccessError(CatalogError):
    """The database could not be read or written."""
