"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case for orchestrating domain services.

    Use cases take a request DTO with plain string identifiers, convert it
    to domain values and return a response DTO. Domain errors propagate to
    the caller unchanged.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
