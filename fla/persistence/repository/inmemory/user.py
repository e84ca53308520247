"""In-memory implementation of User repository."""

from typing import Optional

from fla.domain.model.user import User
from fla.domain.repository.user import UserRepository
from fla.domain.value import Email, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def find_by_email(self, email: Email) -> Optional[User]:
        wanted = email.root.lower()
        for user in self._users.values():
            if user.email.root.lower() == wanted:
                return user
        return None
