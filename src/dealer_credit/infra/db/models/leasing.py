from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from dealer_credit.infra.db.models.base import Base


class LeasingPartnerRow(Base):
    __tablename__ = "leasing_partners"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    code: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    rates: Mapped[list[LeasingRateRow]] = relationship(
        back_populates="partner",
        cascade="all, delete-orphan",
    )

    @validates("code")
    def _normalise_code(self, key: str, code: str) -> str:
        # Lookups match on upper(code)
        return code.strip().upper()


# "fif" and "FIF" are the same partner
Index(
    "uq_leasing_partners_code_upper",
    func.upper(LeasingPartnerRow.__table__.c.code),
    unique=True,
)


class LeasingRateRow(Base):
    __tablename__ = "leasing_rates"
    __table_args__ = (
        UniqueConstraint(
            "leasing_partner_id",
            "vehicle_category",
            "vehicle_condition",
            "tenor",
            name="uq_leasing_rates_partner_category_condition_tenor",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    leasing_partner_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("leasing_partners.id", ondelete="CASCADE"),
        nullable=False,
    )
    vehicle_category: Mapped[str] = mapped_column(String(10), nullable=False)
    vehicle_condition: Mapped[str] = mapped_column(String(10), nullable=False)
    tenor: Mapped[int] = mapped_column(Integer, nullable=False)

    interest_rate: Mapped[Decimal] = mapped_column(
        Numeric(precision=5, scale=2), nullable=False
    )  # flat percent per year
    min_dp_percentage: Mapped[Decimal] = mapped_column(Numeric(precision=5, scale=2), nullable=False)
    max_dp_percentage: Mapped[Decimal] = mapped_column(Numeric(precision=5, scale=2), nullable=False)
    admin_fee: Mapped[Decimal] = mapped_column(
        Numeric(precision=14, scale=0), nullable=False
    )  # whole Rupiah

    partner: Mapped[LeasingPartnerRow] = relationship(back_populates="rates")
