from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition


@dataclass(frozen=True, slots=True)
class LeasingPartner:
    id: str
    code: str
    name: str
    phone: str | None = None
    is_active: bool = True


@dataclass(frozen=True, slots=True)
class LeasingRate:
    """A partner's published flat rate for one category/condition/tenor."""

    partner_code: str
    vehicle_category: VehicleCategory
    vehicle_condition: VehicleCondition
    tenor: int
    interest_rate: Decimal  # flat percent per year
    min_dp_percentage: Decimal
    max_dp_percentage: Decimal
    admin_fee: Decimal
