"""Tag entity."""

from datetime import datetime

from fla.domain.clock import Clock
from fla.domain.error import DomainError
from fla.domain.model.common import DomainModel
from fla.domain.value import TagId, TagName, UserId


class Tag(DomainModel):
    """Free-form label attached to posts."""

    id: TagId
    name: TagName
    created_by: UserId
    created_at: datetime

    @classmethod
    def create(
        cls, *, id: TagId, name: TagName | str, created_by: UserId, clock: Clock
    ) -> "Tag":
        try:
            return cls(id=id, name=name, created_by=created_by, created_at=clock.now())
        except DomainError as err:
            raise DomainError(operation="Tag.create") from err

    def __str__(self) -> str:
        return self.name.root
