"""Generic repository shared by all entities."""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select


ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Data access for one table model.

    Repositories never commit; the calling service owns the transaction
    (see ``atomic``).
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, entity_id: UUID) -> ModelType | None:
        """Unscoped primary-key lookup. Not used on owner-scoped request paths."""
        statement = select(self.model).where(self.model.id == entity_id)  # type: ignore[attr-defined]
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Stage a new entity; it is written at the next flush or commit."""
        self.session.add(entity)

    async def delete(self, entity: ModelType) -> None:
        """Stage deletion of an entity."""
        await self.session.delete(entity)
