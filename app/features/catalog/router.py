"""Catalog API routes - one router per collection."""

from fastapi import APIRouter

from app.features.catalog import kinds
from app.features.catalog.dependencies import (
    get_accessory_repository,
    get_isp_repository,
)
from app.features.catalog.routes.entities import create_entity_router

router = APIRouter()

router.include_router(create_entity_router(kinds.ISP, get_isp_repository))
router.include_router(create_entity_router(kinds.ACCESSORY, get_accessory_repository))
