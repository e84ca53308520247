"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from fla.domain.model.user import User
from fla.domain.value import Email, UserId, Username


class UserRepository(ABC):
    """Repository interface for User aggregate."""

    @abstractmethod
    async def save(self, user: User) -> User:
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        pass
