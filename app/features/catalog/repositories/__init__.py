"""Catalog repositories."""

from .protocols import EntityRepository, IspRepository, RepositoryError
from .sqlalchemy_repository import SqlAlchemyEntityRepository, SqlAlchemyIspRepository

__all__ = [
    "EntityRepository",
    "IspRepository",
    "RepositoryError",
    "SqlAlchemyEntityRepository",
    "SqlAlchemyIspRepository",
]
