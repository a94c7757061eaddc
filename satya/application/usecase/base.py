"""Use case base class."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One API operation: a pydantic request in, a pydantic response out.

    Use cases only orchestrate; rules live in domain services.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
