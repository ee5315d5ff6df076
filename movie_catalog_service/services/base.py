"""Session handling and payload parsing shared by catalog services."""
import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Type, TypeVar

import pydantic
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from movie_catalog_service.exceptions import DataAccessError, ValidationError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=pydantic.BaseModel)


class CatalogService:
    """Base class for services that run one database session per call."""

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        """
        Args:
            session_factory: Callable returning a new Session (default: SessionLocal)
        """
        self.session_factory = session_factory

    def _new_session(self) -> Session:
        if self.session_factory is None:
            # Deferred so the engine is only built when a request needs it
            from movie_catalog_service.models.database import SessionLocal
            self.session_factory = SessionLocal
        return self.session_factory()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Open a session; database errors roll back and surface as DataAccessError."""
        db = self._new_session()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error: {e}")
            raise DataAccessError(f"Database operation failed: {e}") from e
        finally:
            db.close()

    @staticmethod
    def parse_payload(schema: Type[SchemaT], payload: Optional[dict]) -> SchemaT:
        """
        Validate a request payload.

        Raises:
            ValidationError: If the payload is missing or does not match the schema
        """
        if payload is None:
            raise ValidationError("Request body is required")
        try:
            return schema.model_validate(payload)
        except pydantic.ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            )
            raise ValidationError(f"Invalid {schema.__name__}: {details}") from e
