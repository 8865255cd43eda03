from __future__ import annotations

from abc import ABC, abstractmethod

from dealer_credit.domain.leasing import LeasingPartner, LeasingRate
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition


class LeasingRateRepository(ABC):
    """
    Port for leasing partner rate data.

    Contract:
        - Partner codes are matched case-insensitively
        - Inactive partners are invisible (get_partner returns None, no rates)
        - list_rates orders by category, condition, tenor
    """

    @abstractmethod
    def get_partner(self, partner_code: str) -> LeasingPartner | None:
        """Return the active partner with this code, or None."""
        ...

    @abstractmethod
    def find_rate(
        self,
        partner_code: str,
        category: VehicleCategory,
        condition: VehicleCondition,
        tenor: int,
    ) -> LeasingRate | None:
        """Return the partner's published rate for the combination, or None."""
        ...

    @abstractmethod
    def list_rates(self, partner_code: str) -> list[LeasingRate]:
        """Return every published rate of the partner (empty if unknown)."""
        ...
