from __future__ import annotations

from dealer_credit.domain.leasing import LeasingPartner, LeasingRate
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition
from dealer_credit.ports.leasing_rate_repository import LeasingRateRepository


class InMemoryLeasingRateRepository(LeasingRateRepository):
    """
    Canonical contract implementation for tests.

    - Partner codes match case-insensitively
    - Rates of inactive or unknown partners are never returned
    - list_rates sorts by category, condition, tenor
    """

    def __init__(self, partners: list[LeasingPartner], rates: list[LeasingRate]) -> None:
        self._partners = {partner.code.upper(): partner for partner in partners}
        self._rates = rates

    def get_partner(self, partner_code: str) -> LeasingPartner | None:
        partner = self._partners.get(partner_code.upper())
        if partner is None or not partner.is_active:
            return None
        return partner

    def find_rate(
        self,
        partner_code: str,
        category: VehicleCategory,
        condition: VehicleCondition,
        tenor: int,
    ) -> LeasingRate | None:
        for rate in self.list_rates(partner_code):
            if (
                rate.vehicle_category == category
                and rate.vehicle_condition == condition
                and rate.tenor == tenor
            ):
                return rate
        return None

    def list_rates(self, partner_code: str) -> list[LeasingRate]:
        if self.get_partner(partner_code) is None:
            return []

        matches = [rate for rate in self._rates if rate.partner_code.upper() == partner_code.upper()]
        return sorted(
            matches,
            key=lambda rate: (rate.vehicle_category.value, rate.vehicle_condition.value, rate.tenor),
        )
