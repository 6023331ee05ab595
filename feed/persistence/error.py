"""Persistence layer errors."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import SQLAlchemyError


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class StoreUnavailableError(PersistenceError):
    """The document store failed to complete an operation."""

    pass


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as StoreUnavailableError.

    Args:
        operation: Name of the repository operation, for the log record
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error(
            "Document store operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise StoreUnavailableError(f"{operation} failed") from e
