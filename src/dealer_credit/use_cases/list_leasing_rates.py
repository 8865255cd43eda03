from __future__ import annotations

from dataclasses import dataclass

from dealer_credit.domain.errors import NotFoundError
from dealer_credit.domain.leasing import LeasingPartner, LeasingRate
from dealer_credit.ports.leasing_rate_repository import LeasingRateRepository


@dataclass(frozen=True, slots=True)
class LeasingRatesResponse:
    partner: LeasingPartner
    rates: list[LeasingRate]


class ListLeasingRates:
    """Published rates of one active leasing partner."""

    def __init__(self, leasing_rate_repository: LeasingRateRepository) -> None:
        self._repository = leasing_rate_repository

    def execute(self, partner_code: str) -> LeasingRatesResponse:
        """
        Raises:
            NotFoundError: If the partner is unknown or inactive
        """
        partner = self._repository.get_partner(partner_code)
        if partner is None:
            raise NotFoundError("LeasingPartner", partner_code)

        return LeasingRatesResponse(partner=partner, rates=self._repository.list_rates(partner.code))
