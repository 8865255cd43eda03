"""
Test suite for CreditMapper.

This test suite verifies the mapper's responsibility to translate between
REST DTOs and use case models:
- Converts request DTOs to domain requests (str → Decimal)
- Converts results to response DTOs (Decimal → str, snake_case → camelCase)
- Collects every conversion error as a ValidationError
- No business logic, just translation
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from dealer_credit.domain.errors import ValidationError
from dealer_credit.domain.leasing_rules import get_credit_config
from dealer_credit.domain.validation import ValidationIssue
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition
from dealer_credit.entrypoints.http.dtos.credit import (
    AmortizationRequestDTO,
    CreditSimulationRequestDTO,
    SimulationTableRequestDTO,
    wire_field,
)
from dealer_credit.entrypoints.http.mappers.credit_mapper import CreditMapper
from dealer_credit.use_cases.build_credit_simulation_table import (
    BuildCreditSimulationTable,
    SimulationTableRequest,
)
from dealer_credit.use_cases.generate_amortization_table import (
    AmortizationRequest,
    GenerateAmortizationTable,
)
from dealer_credit.use_cases.simulate_credit import CreditSimulationRequest, SimulateCredit


@pytest.fixture
def mobil_baru_simulation():
    return SimulateCredit().execute(
        CreditSimulationRequest(
            vehicle_price=Decimal("150000000"),
            down_payment=Decimal("30000000"),
            tenor=36,
            vehicle_category=VehicleCategory.MOBIL,
            vehicle_condition=VehicleCondition.BARU,
            include_schedule=True,
        )
    )


# ==============================================================================
# to_domain_request() - DTO → Domain Request
# ==============================================================================


def test_to_domain_request_with_valid_input() -> None:
    """Mapper converts all fields from DTO to domain request."""
    dto = CreditSimulationRequestDTO(
        vehicle_price="150000000",
        down_payment="30000000",
        tenor=36,
        interest_rate="13.5",
        admin_fee="0",
        vehicle_category=VehicleCategory.MOBIL,
        vehicle_condition=VehicleCondition.BEKAS,
        include_schedule=True,
    )

    request = CreditMapper.to_domain_request(dto)

    assert request == CreditSimulationRequest(
        vehicle_price=Decimal("150000000"),
        down_payment=Decimal("30000000"),
        tenor=36,
        vehicle_category=VehicleCategory.MOBIL,
        vehicle_condition=VehicleCondition.BEKAS,
        interest_rate=Decimal("13.5"),
        admin_fee=Decimal("0"),
        insurance_fee=None,
        include_schedule=True,
    )


def test_to_domain_request_accepts_camel_case_payload() -> None:
    dto = CreditSimulationRequestDTO.model_validate(
        {"vehiclePrice": "20000000", "downPayment": "4000000", "tenor": 12}
    )

    request = CreditMapper.to_domain_request(dto)

    assert request.vehicle_price == Decimal("20000000")
    assert request.vehicle_category is VehicleCategory.MOTOR
    assert request.vehicle_condition is VehicleCondition.BARU
    assert request.interest_rate is None


def test_to_domain_request_collects_every_invalid_decimal() -> None:
    """Values that bypassed schema validation still fail at the boundary, all together."""
    dto = CreditSimulationRequestDTO.model_construct(
        vehicle_price="abc",
        down_payment="1,000",
        tenor=12,
        interest_rate=None,
        admin_fee=None,
        insurance_fee=None,
        vehicle_category=VehicleCategory.MOTOR,
        vehicle_condition=VehicleCondition.BARU,
        include_schedule=False,
    )

    with pytest.raises(ValidationError) as exc_info:
        CreditMapper.to_domain_request(dto)

    errors = exc_info.value.errors
    assert [e["field"] for e in errors] == ["vehiclePrice", "downPayment"]
    assert all(e["code"] == "INVALID_DECIMAL" for e in errors)
    assert errors[0]["message"] == "Must be a valid decimal: abc"


def test_to_domain_request_rejects_rate_above_100() -> None:
    dto = CreditSimulationRequestDTO(
        vehicle_price="20000000", down_payment="4000000", tenor=12, interest_rate="150"
    )

    with pytest.raises(ValidationError) as exc_info:
        CreditMapper.to_domain_request(dto)

    assert exc_info.value.errors == [
        {
            "field": "interestRate",
            "message": "Must be between 0 and 100",
            "code": "RATE_OUT_OF_RANGE",
        }
    ]


# ==============================================================================
# to_response() - Domain → Response DTO
# ==============================================================================


def test_to_response_renders_decimals_as_strings(mobil_baru_simulation) -> None:
    dto = CreditMapper.to_response(mobil_baru_simulation)

    assert dto.vehicle_price == "150000000"
    assert dto.down_payment_percentage == "20.00"
    assert dto.principal_amount == "120000000"
    assert dto.interest_rate == "13.5"
    assert dto.effective_rate == "25.11"
    assert dto.total_interest == "48600000"
    assert dto.total_credit == "168600000"
    assert dto.monthly_payment == "4683334"
    assert dto.last_payment == "4683310"
    assert dto.admin_fee == "1500000"
    assert dto.insurance_fee == "12600000"
    assert dto.upfront_payment == "44100000"
    assert dto.total_payment == "212700000"
    assert dto.tenor == 36


def test_to_response_serializes_camel_case(mobil_baru_simulation) -> None:
    data = CreditMapper.to_response(mobil_baru_simulation).model_dump(by_alias=True, mode="json")

    assert data["monthlyPayment"] == "4683334"
    assert data["vehicleCategory"] == "mobil"
    assert data["vehicleCondition"] == "baru"
    assert data["warnings"] == [
        {
            "field": "downPayment",
            "message": "Down payment of 20.00% is below the recommended 25% for mobil baru",
            "code": "DOWN_PAYMENT_BELOW_RECOMMENDED",
        }
    ]


def test_to_response_maps_schedule(mobil_baru_simulation) -> None:
    dto = CreditMapper.to_response(mobil_baru_simulation)

    assert len(dto.schedule) == 36
    assert dto.schedule[0].payment == "4683334"
    assert dto.schedule[0].interest_portion == "1350000"
    assert dto.schedule[-1].remaining_balance == "0"


def test_issue_fields_are_camel_cased() -> None:
    issue = ValidationIssue("vehicle_price", "INVALID_PRICE", "Vehicle price must be greater than 0")

    assert CreditMapper.to_issue(issue).field == "vehiclePrice"


@pytest.mark.parametrize(
    ("field", "expected"),
    [("down_payment", "downPayment"), ("tenor", "tenor"), ("interestRate", "interestRate")],
)
def test_wire_field(field: str, expected: str) -> None:
    assert wire_field(field) == expected


# ==============================================================================
# Simulation table, amortization and config
# ==============================================================================


def test_to_table_request_and_response() -> None:
    request = CreditMapper.to_table_request(
        SimulationTableRequestDTO(vehicle_price="20000000", down_payment="4000000")
    )
    assert request == SimulationTableRequest(
        vehicle_price=Decimal("20000000"), down_payment=Decimal("4000000")
    )

    dto = CreditMapper.to_table_response(BuildCreditSimulationTable().execute(request))

    assert [row.tenor for row in dto.rows] == [12, 18, 24, 30, 36]
    assert dto.rows[0].interest_rate == "15.5"
    assert dto.rows[-1].warnings[0].code == "TENOR_NEAR_MAXIMUM"


def test_to_amortization_request_and_response() -> None:
    request = CreditMapper.to_amortization_request(
        AmortizationRequestDTO(principal="12000000", interest_rate="0", tenor=12)
    )
    assert request == AmortizationRequest(
        principal=Decimal("12000000"), interest_rate=Decimal("0"), tenor=12
    )

    dto = CreditMapper.to_amortization_response(GenerateAmortizationTable().execute(request))

    assert dto.monthly_payment == "1000000"
    assert dto.total_interest == "0"
    assert len(dto.rows) == 12
    assert dto.rows[-1].closing_balance == "0"


def test_to_amortization_request_rejects_rate_above_100() -> None:
    with pytest.raises(ValidationError):
        CreditMapper.to_amortization_request(
            AmortizationRequestDTO(principal="12000000", interest_rate="101", tenor=12)
        )


def test_to_config_request_and_response() -> None:
    request = CreditMapper.to_config_request(
        "150000000", VehicleCategory.MOBIL, VehicleCondition.BARU, 36
    )
    assert request.vehicle_price == Decimal("150000000")

    dto = CreditMapper.to_config_response(
        get_credit_config(request.vehicle_price, VehicleCategory.MOBIL, VehicleCondition.BARU, 36)
    )

    assert dto.interest_rate == "13.5"
    assert dto.min_dp_percentage == "15"
    assert dto.admin_fee == "1500000"
    assert dto.insurance_rate == "2.8"
    assert dto.available_tenors == [12, 24, 36, 48, 60]
