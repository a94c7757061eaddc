"""Base service class for domain services."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from sqlalchemy.exc import SQLAlchemyError

from satya.domain.error import DependencyError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


@contextmanager
def row_store_errors(operation: str) -> Iterator[None]:
    """Surface row store failures as DependencyError.

    Args:
        operation: Name of the operation, for logs

    Raises:
        DependencyError: If the wrapped block raised a SQLAlchemy error
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error("Row store operation failed", operation=operation, error=str(e))
        raise DependencyError("row store", str(e)) from e
