from __future__ import annotations

from decimal import Decimal

import pytest

from dealer_credit.adapters.in_memory_leasing_rate_repository import (
    InMemoryLeasingRateRepository,
)
from dealer_credit.domain.errors import NotFoundError
from dealer_credit.domain.leasing import LeasingPartner, LeasingRate
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition
from dealer_credit.use_cases.list_leasing_rates import ListLeasingRates


@pytest.fixture()
def use_case() -> ListLeasingRates:
    rates = [
        LeasingRate(
            partner_code="FIF",
            vehicle_category=VehicleCategory.MOTOR,
            vehicle_condition=condition,
            tenor=tenor,
            interest_rate=Decimal(rate),
            min_dp_percentage=Decimal("10"),
            max_dp_percentage=Decimal("50"),
            admin_fee=Decimal("500000"),
        )
        for condition, tenor, rate in [
            (VehicleCondition.BEKAS, 12, "18"),
            (VehicleCondition.BARU, 24, "16"),
            (VehicleCondition.BARU, 12, "14"),
        ]
    ]
    repository = InMemoryLeasingRateRepository(
        partners=[LeasingPartner(id="1", code="FIF", name="FIF Group", phone="021-1500920")],
        rates=rates,
    )
    return ListLeasingRates(leasing_rate_repository=repository)


def test_returns_partner_with_sorted_rates(use_case: ListLeasingRates):
    response = use_case.execute("fif")

    assert response.partner.name == "FIF Group"
    assert [(r.vehicle_condition.value, r.tenor) for r in response.rates] == [
        ("baru", 12),
        ("baru", 24),
        ("bekas", 12),
    ]


def test_unknown_partner_raises_not_found(use_case: ListLeasingRates):
    with pytest.raises(NotFoundError, match="LeasingPartner with identifier 'WOM' not found"):
        use_case.execute("WOM")
