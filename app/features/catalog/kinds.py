"""Descriptions of the catalog collections exposed by the API."""

from dataclasses import dataclass

from app.features.catalog.dtos import (
    AccessoryDto,
    CreateAccessoryRequest,
    CreateIspRequest,
    EntityDto,
    IspDto,
)
from app.features.catalog.dtos.catalog_dto import CamelModel


@dataclass(frozen=True)
class EntityKind:
    """Static metadata for one catalog collection."""

    label: str
    collection: str
    # Wire (camelCase) names that must be present and non-blank on create
    required_fields: tuple[str, ...]
    create_request: type[CamelModel]
    dto: type[EntityDto]


ISP = EntityKind(
    label="ISP",
    collection="isps",
    required_fields=("name", "speed", "cost", "coverageArea"),
    create_request=CreateIspRequest,
    dto=IspDto,
)

ACCESSORY = EntityKind(
    label="Accessory",
    collection="accessories",
    required_fields=("name", "type"),
    create_request=CreateAccessoryRequest,
    dto=AccessoryDto,
)
