"""User domain service."""

import logfire

from fla.domain.error import ConflictError
from fla.domain.model.user import User
from fla.domain.repository.user import UserRepository
from fla.domain.value import UserId

from .base import Service

USER_USERNAME_TAKEN = "Username is already taken."
USER_EMAIL_TAKEN = "Email is already registered."


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = self.require(
                await self.user_repository.find_by_id(user_id), "User", user_id
            )
            logfire.info("User found", user_id=str(user_id), username=user.username.root)
            return user

    async def save_user(self, user: User) -> User:
        """Save a user, keeping usernames and emails unique.

        Raises:
            ConflictError: If another user has the same username or email
        """
        op = "UserService.save_user"
        with logfire.span("user_service.save_user", user_id=str(user.id)):
            existing = await self.user_repository.find_by_username(user.username)
            if existing is not None and existing.id != user.id:
                raise ConflictError(USER_USERNAME_TAKEN, operation=op)

            existing = await self.user_repository.find_by_email(user.email)
            if existing is not None and existing.id != user.id:
                raise ConflictError(USER_EMAIL_TAKEN, operation=op)

            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id))
            return saved
