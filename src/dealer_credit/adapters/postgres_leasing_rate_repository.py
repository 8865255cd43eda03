"""PostgreSQL implementation of LeasingRateRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from dealer_credit.domain.leasing import LeasingPartner, LeasingRate
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition
from dealer_credit.infra.db.models.leasing import LeasingPartnerRow, LeasingRateRow
from dealer_credit.ports.leasing_rate_repository import LeasingRateRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


class PostgresLeasingRateRepository(LeasingRateRepository):
    """
    PostgreSQL implementation of LeasingRateRepository.

    - Partner code match uses upper(code) = upper(:code)
    - Rates are joined to active partners only
    - Converts rows (infrastructure) to LeasingPartner/LeasingRate (domain)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_partner(self, partner_code: str) -> LeasingPartner | None:
        query = select(LeasingPartnerRow).where(
            func.upper(LeasingPartnerRow.code) == partner_code.upper(),
            LeasingPartnerRow.is_active.is_(True),
        )
        row = self._session.execute(query).scalar_one_or_none()
        return self._partner_to_domain(row) if row else None

    def find_rate(
        self,
        partner_code: str,
        category: VehicleCategory,
        condition: VehicleCondition,
        tenor: int,
    ) -> LeasingRate | None:
        query = self._rates_query(partner_code).where(
            LeasingRateRow.vehicle_category == category.value,
            LeasingRateRow.vehicle_condition == condition.value,
            LeasingRateRow.tenor == tenor,
        )
        result = self._session.execute(query).one_or_none()
        if result is None:
            return None

        row, code = result
        return self._rate_to_domain(row, code)

    def list_rates(self, partner_code: str) -> list[LeasingRate]:
        query = self._rates_query(partner_code).order_by(
            LeasingRateRow.vehicle_category,
            LeasingRateRow.vehicle_condition,
            LeasingRateRow.tenor,
        )
        return [self._rate_to_domain(row, code) for row, code in self._session.execute(query).all()]

    def _rates_query(self, partner_code: str) -> Select[tuple[LeasingRateRow, str]]:
        return (
            select(LeasingRateRow, LeasingPartnerRow.code)
            .join(LeasingPartnerRow, LeasingRateRow.leasing_partner_id == LeasingPartnerRow.id)
            .where(
                func.upper(LeasingPartnerRow.code) == partner_code.upper(),
                LeasingPartnerRow.is_active.is_(True),
            )
        )

    def _partner_to_domain(self, row: LeasingPartnerRow) -> LeasingPartner:
        return LeasingPartner(
            id=str(row.id),
            code=row.code,
            name=row.name,
            phone=row.phone,
            is_active=row.is_active,
        )

    def _rate_to_domain(self, row: LeasingRateRow, partner_code: str) -> LeasingRate:
        return LeasingRate(
            partner_code=partner_code,
            vehicle_category=VehicleCategory(row.vehicle_category),
            vehicle_condition=VehicleCondition(row.vehicle_condition),
            tenor=row.tenor,
            interest_rate=row.interest_rate,  # Already Decimal from NUMERIC column
            min_dp_percentage=row.min_dp_percentage,
            max_dp_percentage=row.max_dp_percentage,
            admin_fee=row.admin_fee,
        )
