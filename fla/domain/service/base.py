"""Base service class for domain services."""

from typing import Optional, TypeVar

import logfire

from fla.domain.error import NotFoundError

T = TypeVar("T")


class Service:
    """Base class for all domain services.

    Domain services coordinate repositories and entities for operations
    that span more than one aggregate, such as resolving category paths or
    moving posts through the publishing workflow.
    """

    @staticmethod
    def require(
        found: Optional[T],
        resource: str,
        identifier: object,
        *,
        operation: Optional[str] = None,
    ) -> T:
        """Return a repository lookup result, or raise if nothing was found.

        Raises:
            NotFoundError: If ``found`` is None
        """
        if found is None:
            logfire.warn(f"{resource} not found", identifier=str(identifier))
            raise NotFoundError(resource, str(identifier), operation=operation)
        return found
