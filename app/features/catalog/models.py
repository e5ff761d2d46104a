"""Database models for the ISP and accessory catalogs."""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Float, String, Text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.db.postgres.session import Base


class CatalogEntityMixin:
    """Columns shared by every catalog collection.

    Reviews are embedded in the row as a JSON list of
    ``{"user", "feedback", "sentiment"}`` objects, kept in insertion order.
    """

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    reviews: Mapped[list[dict[str, Any]]] = mapped_column(
        JSONB, nullable=False, default=list
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )


class Isp(CatalogEntityMixin, Base):
    """Internet service provider."""

    __tablename__ = "isps"

    speed: Mapped[float] = mapped_column(Float, nullable=False)
    reliability: Mapped[float | None] = mapped_column(Float, nullable=True)
    cost: Mapped[float] = mapped_column(Float, nullable=False)
    # City or region served
    coverage_area: Mapped[str] = mapped_column(Text, nullable=False)


class Accessory(CatalogEntityMixin, Base):
    """Networking accessory such as an adapter or a cable."""

    __tablename__ = "accessories"

    type: Mapped[str] = mapped_column(String(100), nullable=False)
