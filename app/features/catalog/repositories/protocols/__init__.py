"""Repository protocols for the catalog feature."""

from .entity_repository import EntityRepository, IspRepository, RepositoryError

__all__ = [
    "EntityRepository",
    "IspRepository",
    "RepositoryError",
]
