from __future__ import annotations

from decimal import Decimal, InvalidOperation

from dealer_credit.domain.credit_calculation import InstallmentRow
from dealer_credit.domain.errors import ValidationError
from dealer_credit.domain.leasing_rules import CreditConfig
from dealer_credit.domain.validation import ValidationIssue
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition
from dealer_credit.entrypoints.http.dtos.credit import (
    AmortizationRequestDTO,
    AmortizationResponseDTO,
    AmortizationRowDTO,
    CreditConfigResponseDTO,
    CreditSimulationRequestDTO,
    CreditSimulationResponseDTO,
    InstallmentRowDTO,
    IssueDTO,
    SimulationTableRequestDTO,
    SimulationTableResponseDTO,
    SimulationTableRowDTO,
    wire_field,
)
from dealer_credit.use_cases.build_credit_simulation_table import (
    SimulationTable,
    SimulationTableRequest,
)
from dealer_credit.use_cases.generate_amortization_table import (
    AmortizationRequest,
    AmortizationSchedule,
)
from dealer_credit.use_cases.get_credit_config import CreditConfigRequest
from dealer_credit.use_cases.simulate_credit import CreditSimulation, CreditSimulationRequest

MAX_INTEREST_RATE = Decimal("100")


class _DecimalParser:
    """Collects conversion errors across fields instead of stopping at the first."""

    def __init__(self) -> None:
        self.errors: list[dict[str, str]] = []

    def money(self, field: str, value: str) -> Decimal:
        try:
            return Decimal(value)
        except (InvalidOperation, ValueError):
            self.errors.append(
                {
                    "field": field,
                    "message": f"Must be a valid decimal: {value}",
                    "code": "INVALID_DECIMAL",
                }
            )
            return Decimal("0")  # Placeholder to continue validation

    def optional_money(self, field: str, value: str | None) -> Decimal | None:
        return None if value is None else self.money(field, value)

    def rate(self, field: str, value: str | None) -> Decimal | None:
        if value is None:
            return None

        rate = self.money(field, value)
        if rate > MAX_INTEREST_RATE:
            self.errors.append(
                {
                    "field": field,
                    "message": f"Must be between 0 and {MAX_INTEREST_RATE}",
                    "code": "RATE_OUT_OF_RANGE",
                }
            )
        return rate

    def raise_if_errors(self) -> None:
        if self.errors:
            raise ValidationError(errors=self.errors)


class CreditMapper:
    """Maps between REST DTOs and domain/use case models for credit simulation."""

    @staticmethod
    def to_domain_request(dto: CreditSimulationRequestDTO) -> CreditSimulationRequest:
        """
        Converts request DTO to a CreditSimulationRequest.

        Handles string -> Decimal conversion at the boundary.

        Raises:
            ValidationError: If values cannot be converted or the rate is above 100
        """
        parser = _DecimalParser()
        vehicle_price = parser.money("vehiclePrice", dto.vehicle_price)
        down_payment = parser.money("downPayment", dto.down_payment)
        interest_rate = parser.rate("interestRate", dto.interest_rate)
        admin_fee = parser.optional_money("adminFee", dto.admin_fee)
        insurance_fee = parser.optional_money("insuranceFee", dto.insurance_fee)
        parser.raise_if_errors()

        return CreditSimulationRequest(
            vehicle_price=vehicle_price,
            down_payment=down_payment,
            tenor=dto.tenor,
            vehicle_category=dto.vehicle_category,
            vehicle_condition=dto.vehicle_condition,
            interest_rate=interest_rate,
            admin_fee=admin_fee,
            insurance_fee=insurance_fee,
            include_schedule=dto.include_schedule,
        )

    @staticmethod
    def to_response(simulation: CreditSimulation) -> CreditSimulationResponseDTO:
        """Converts a CreditSimulation to the response DTO (Decimal -> string)."""
        return CreditSimulationResponseDTO(**CreditMapper.simulation_fields(simulation))

    @staticmethod
    def simulation_fields(simulation: CreditSimulation) -> dict:
        result = simulation.result
        return {
            "vehicle_price": str(result.vehicle_price),
            "down_payment": str(result.down_payment),
            "down_payment_percentage": str(result.down_payment_percentage),
            "principal_amount": str(result.principal_amount),
            "tenor": result.tenor,
            "interest_rate": str(result.interest_rate),
            "effective_rate": str(result.effective_rate),
            "total_interest": str(result.total_interest),
            "total_credit": str(result.total_credit),
            "monthly_payment": str(result.monthly_payment),
            "last_payment": str(result.last_payment),
            "admin_fee": str(result.admin_fee),
            "insurance_fee": str(result.insurance_fee),
            "upfront_payment": str(result.upfront_payment),
            "total_payment": str(result.total_payment),
            "vehicle_category": simulation.vehicle_category,
            "vehicle_condition": simulation.vehicle_condition,
            "warnings": [CreditMapper.to_issue(issue) for issue in simulation.warnings],
            "schedule": (
                None
                if simulation.schedule is None
                else [CreditMapper.to_installment_row(row) for row in simulation.schedule]
            ),
        }

    @staticmethod
    def to_issue(issue: ValidationIssue) -> IssueDTO:
        return IssueDTO(field=wire_field(issue.field), message=issue.message, code=issue.code)

    @staticmethod
    def to_installment_row(row: InstallmentRow) -> InstallmentRowDTO:
        return InstallmentRowDTO(
            month=row.month,
            payment=str(row.payment),
            principal_portion=str(row.principal_portion),
            interest_portion=str(row.interest_portion),
            remaining_balance=str(row.remaining_balance),
        )

    # ==========================================================================
    # Simulation table
    # ==========================================================================

    @staticmethod
    def to_table_request(dto: SimulationTableRequestDTO) -> SimulationTableRequest:
        parser = _DecimalParser()
        vehicle_price = parser.money("vehiclePrice", dto.vehicle_price)
        down_payment = parser.money("downPayment", dto.down_payment)
        interest_rate = parser.rate("interestRate", dto.interest_rate)
        parser.raise_if_errors()

        return SimulationTableRequest(
            vehicle_price=vehicle_price,
            down_payment=down_payment,
            vehicle_category=dto.vehicle_category,
            vehicle_condition=dto.vehicle_condition,
            interest_rate=interest_rate,
        )

    @staticmethod
    def to_table_response(table: SimulationTable) -> SimulationTableResponseDTO:
        return SimulationTableResponseDTO(
            vehicle_category=table.vehicle_category,
            vehicle_condition=table.vehicle_condition,
            rows=[
                SimulationTableRowDTO(
                    tenor=row.result.tenor,
                    interest_rate=str(row.result.interest_rate),
                    monthly_payment=str(row.result.monthly_payment),
                    last_payment=str(row.result.last_payment),
                    total_interest=str(row.result.total_interest),
                    total_credit=str(row.result.total_credit),
                    admin_fee=str(row.result.admin_fee),
                    insurance_fee=str(row.result.insurance_fee),
                    upfront_payment=str(row.result.upfront_payment),
                    total_payment=str(row.result.total_payment),
                    warnings=[CreditMapper.to_issue(issue) for issue in row.warnings],
                )
                for row in table.rows
            ],
        )

    # ==========================================================================
    # Amortization
    # ==========================================================================

    @staticmethod
    def to_amortization_request(dto: AmortizationRequestDTO) -> AmortizationRequest:
        parser = _DecimalParser()
        principal = parser.money("principal", dto.principal)
        interest_rate = parser.rate("interestRate", dto.interest_rate)
        parser.raise_if_errors()

        return AmortizationRequest(
            principal=principal,
            interest_rate=interest_rate if interest_rate is not None else Decimal("0"),
            tenor=dto.tenor,
        )

    @staticmethod
    def to_amortization_response(schedule: AmortizationSchedule) -> AmortizationResponseDTO:
        return AmortizationResponseDTO(
            principal=str(schedule.principal),
            interest_rate=str(schedule.interest_rate),
            tenor=schedule.tenor,
            monthly_payment=str(schedule.monthly_payment),
            total_interest=str(schedule.total_interest),
            total_payment=str(schedule.total_payment),
            rows=[
                AmortizationRowDTO(
                    month=row.month,
                    opening_balance=str(row.opening_balance),
                    payment=str(row.payment),
                    principal_portion=str(row.principal_portion),
                    interest_portion=str(row.interest_portion),
                    closing_balance=str(row.closing_balance),
                )
                for row in schedule.rows
            ],
        )

    # ==========================================================================
    # Credit config
    # ==========================================================================

    @staticmethod
    def to_config_request(
        vehicle_price: str,
        vehicle_category: VehicleCategory,
        vehicle_condition: VehicleCondition,
        tenor: int,
    ) -> CreditConfigRequest:
        parser = _DecimalParser()
        price = parser.money("vehiclePrice", vehicle_price)
        parser.raise_if_errors()

        return CreditConfigRequest(
            vehicle_price=price,
            vehicle_category=vehicle_category,
            vehicle_condition=vehicle_condition,
            tenor=tenor,
        )

    @staticmethod
    def to_config_response(config: CreditConfig) -> CreditConfigResponseDTO:
        return CreditConfigResponseDTO(
            tenor=config.tenor,
            interest_rate=str(config.interest_rate),
            min_dp_percentage=str(config.min_dp_percentage),
            max_dp_percentage=str(config.max_dp_percentage),
            admin_fee=str(config.admin_fee),
            insurance_rate=str(config.insurance_rate),
            available_tenors=list(config.available_tenors),
        )
