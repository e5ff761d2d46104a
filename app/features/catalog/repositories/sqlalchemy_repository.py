"""PostgreSQL implementation of the catalog repositories."""

from contextlib import AbstractAsyncContextManager
from typing import Any, Callable, cast
from uuid import UUID, uuid4

from pydantic import BaseModel
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.catalog.dtos import EntityDto, IspDto, ReviewDto
from app.features.catalog.models import Accessory, Isp
from app.features.catalog.repositories.protocols import RepositoryError

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


class SqlAlchemyEntityRepository:
    """Catalog repository backed by one SQLAlchemy model."""

    def __init__(
        self,
        model: type[Isp] | type[Accessory],
        dto: type[EntityDto],
        get_db_session: SessionFactory,
    ):
        """Initialize the repository.

        Args:
            model: ORM model of the collection
            dto: DTO class rows are converted into
            get_db_session: Function to get database session
        """
        self.model = model
        self.dto = dto
        self.get_db_session = get_db_session

    def _to_dto(self, row: Isp | Accessory) -> EntityDto:
        data: dict[str, Any] = {
            column.key: getattr(row, column.key) for column in row.__table__.columns
        }
        return self.dto.model_validate(data)

    async def list_all(self) -> list[EntityDto]:
        try:
            async with self.get_db_session() as session:
                result = await session.execute(
                    select(self.model).order_by(self.model.created_at)
                )
                rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Failed to list {self.model.__tablename__}: {e}"
            ) from e

        return [self._to_dto(row) for row in rows]

    async def create(self, payload: BaseModel) -> UUID:
        entity = self.model(id=uuid4(), reviews=[], **payload.model_dump())
        try:
            async with self.get_db_session() as session:
                async with session.begin():
                    session.add(entity)
                    await session.flush()
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Failed to insert into {self.model.__tablename__}: {e}"
            ) from e

        return entity.id

    async def find_by_id(self, entity_id: UUID) -> EntityDto | None:
        try:
            async with self.get_db_session() as session:
                row = await session.get(self.model, entity_id)
                return self._to_dto(row) if row is not None else None
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Failed to read {self.model.__tablename__} {entity_id}: {e}"
            ) from e

    async def replace_reviews(self, entity_id: UUID, reviews: list[ReviewDto]) -> bool:
        stmt = (
            update(self.model)
            .where(self.model.id == entity_id)
            .values(reviews=[review.model_dump(mode="json") for review in reviews])
        )
        try:
            async with self.get_db_session() as session:
                async with session.begin():
                    result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Failed to update reviews of {self.model.__tablename__} {entity_id}: {e}"
            ) from e

        return result.rowcount > 0


class SqlAlchemyIspRepository(SqlAlchemyEntityRepository):
    """ISP repository with coverage lookups."""

    def __init__(self, get_db_session: SessionFactory):
        super().__init__(model=Isp, dto=IspDto, get_db_session=get_db_session)

    async def find_by_coverage_area(self, location: str) -> list[IspDto]:
        stmt = (
            select(Isp)
            .where(Isp.coverage_area.icontains(location, autoescape=True))
            .order_by(Isp.created_at)
        )
        try:
            async with self.get_db_session() as session:
                result = await session.execute(stmt)
                rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to search ISP coverage: {e}") from e

        return [cast(IspDto, self._to_dto(row)) for row in rows]
