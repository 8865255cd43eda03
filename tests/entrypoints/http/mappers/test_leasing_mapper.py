"""
Test suite for LeasingMapper.

Verifies:
- Partner and rate models map to DTOs with decimal strings
- A partner simulation carries every credit field plus the partner
"""

from __future__ import annotations

from decimal import Decimal

from dealer_credit.adapters.in_memory_leasing_rate_repository import (
    InMemoryLeasingRateRepository,
)
from dealer_credit.domain.leasing import LeasingPartner, LeasingRate
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition
from dealer_credit.entrypoints.http.mappers.leasing_mapper import LeasingMapper
from dealer_credit.use_cases.list_leasing_rates import LeasingRatesResponse
from dealer_credit.use_cases.simulate_credit import CreditSimulationRequest
from dealer_credit.use_cases.simulate_leasing_partner_credit import (
    SimulateLeasingPartnerCredit,
)

ADIRA = LeasingPartner(id="1", code="ADIRA", name="Adira Finance", phone="021-1500511")

RATE_24 = LeasingRate(
    partner_code="ADIRA",
    vehicle_category=VehicleCategory.MOTOR,
    vehicle_condition=VehicleCondition.BARU,
    tenor=24,
    interest_rate=Decimal("16.00"),
    min_dp_percentage=Decimal("10.00"),
    max_dp_percentage=Decimal("50.00"),
    admin_fee=Decimal("500000"),
)


def test_to_partner_drops_internal_fields() -> None:
    dto = LeasingMapper.to_partner(ADIRA)

    assert dto.model_dump(by_alias=True) == {
        "code": "ADIRA",
        "name": "Adira Finance",
        "phone": "021-1500511",
    }


def test_to_rates_response() -> None:
    dto = LeasingMapper.to_rates_response(LeasingRatesResponse(partner=ADIRA, rates=[RATE_24]))
    data = dto.model_dump(by_alias=True, mode="json")

    assert data["partner"]["code"] == "ADIRA"
    assert data["rates"] == [
        {
            "vehicleCategory": "motor",
            "vehicleCondition": "baru",
            "tenor": 24,
            "interestRate": "16.00",
            "minDpPercentage": "10.00",
            "maxDpPercentage": "50.00",
            "adminFee": "500000",
        }
    ]


def test_to_rates_response_with_no_rates() -> None:
    dto = LeasingMapper.to_rates_response(LeasingRatesResponse(partner=ADIRA, rates=[]))

    assert dto.rates == []


def test_to_simulation_response_includes_partner() -> None:
    use_case = SimulateLeasingPartnerCredit(
        leasing_rate_repository=InMemoryLeasingRateRepository(partners=[ADIRA], rates=[RATE_24])
    )
    outcome = use_case.execute(
        "ADIRA",
        CreditSimulationRequest(
            vehicle_price=Decimal("20000000"),
            down_payment=Decimal("4000000"),
            tenor=24,
        ),
    )

    data = LeasingMapper.to_simulation_response(outcome).model_dump(by_alias=True, mode="json")

    assert data["leasingPartner"] == {"code": "ADIRA", "name": "Adira Finance", "phone": "021-1500511"}
    assert data["interestRate"] == "16.00"
    assert data["monthlyPayment"] == "880000"
    assert data["adminFee"] == "500000"
    assert data["schedule"] is None
