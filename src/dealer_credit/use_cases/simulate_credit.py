from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from dealer_credit.domain.credit_calculation import (
    CreditCalculationInput,
    CreditCalculationResult,
    InstallmentRow,
    build_installment_schedule,
    calculate_credit,
)
from dealer_credit.domain.errors import ValidationError
from dealer_credit.domain.leasing_rules import (
    calculate_default_admin_fee,
    calculate_default_insurance_fee,
    get_default_interest_rate,
    validate_credit_application,
)
from dealer_credit.domain.validation import ValidationIssue, ValidationResult
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreditSimulationRequest:
    vehicle_price: Decimal
    down_payment: Decimal
    tenor: int
    vehicle_category: VehicleCategory = VehicleCategory.MOTOR
    vehicle_condition: VehicleCondition = VehicleCondition.BARU
    interest_rate: Decimal | None = None  # None: policy default
    admin_fee: Decimal | None = None  # None: policy default
    insurance_fee: Decimal | None = None  # None: policy default
    include_schedule: bool = False


@dataclass(frozen=True, slots=True)
class CreditSimulation:
    result: CreditCalculationResult
    vehicle_category: VehicleCategory
    vehicle_condition: VehicleCondition
    warnings: tuple[ValidationIssue, ...] = ()
    schedule: tuple[InstallmentRow, ...] | None = None


def raise_if_invalid(validation: ValidationResult, message: str = "Credit validation failed") -> None:
    """Turn a failed ValidationResult into a ValidationError carrying every issue."""
    if validation.is_valid:
        return

    logger.info(
        "Credit application rejected",
        extra={"errors": [issue.code for issue in validation.errors]},
    )
    raise ValidationError(message, errors=[issue.to_dict() for issue in validation.errors])


def run_simulation(
    request: CreditSimulationRequest,
    interest_rate: Decimal,
    admin_fee: Decimal,
    insurance_fee: Decimal,
    warnings: tuple[ValidationIssue, ...],
) -> CreditSimulation:
    """Calculate with fully resolved rate and fees and package the outcome."""
    result = calculate_credit(
        CreditCalculationInput(
            vehicle_price=request.vehicle_price,
            down_payment=request.down_payment,
            tenor=request.tenor,
            interest_rate=interest_rate,
            admin_fee=admin_fee,
            insurance_fee=insurance_fee,
        )
    )

    logger.info(
        "Credit simulated",
        extra={
            "vehicle_category": request.vehicle_category.value,
            "vehicle_condition": request.vehicle_condition.value,
            "tenor": result.tenor,
            "interest_rate": str(result.interest_rate),
            "monthly_payment": str(result.monthly_payment),
        },
    )

    return CreditSimulation(
        result=result,
        vehicle_category=request.vehicle_category,
        vehicle_condition=request.vehicle_condition,
        warnings=warnings,
        schedule=build_installment_schedule(result) if request.include_schedule else None,
    )


class SimulateCredit:
    """
    Credit simulation against the dealership's default leasing policy.

    Flow:
    1. Validate the application (all policy errors collected)
    2. Resolve defaults for rate, admin fee and insurance fee the caller left out
       (an explicit 0 is honoured, e.g. zero-interest promotions)
    3. Calculate with the flat-rate kernel
    """

    def execute(self, request: CreditSimulationRequest) -> CreditSimulation:
        """
        Raises:
            ValidationError: If the application breaks leasing policy
        """
        validation = validate_credit_application(
            request.vehicle_price,
            request.down_payment,
            request.tenor,
            request.vehicle_category,
            request.vehicle_condition,
        )
        raise_if_invalid(validation)

        interest_rate = request.interest_rate
        if interest_rate is None:
            interest_rate = get_default_interest_rate(
                request.vehicle_category, request.vehicle_condition, request.tenor
            )

        admin_fee = request.admin_fee
        if admin_fee is None:
            admin_fee = calculate_default_admin_fee(request.vehicle_price, request.vehicle_category)

        insurance_fee = request.insurance_fee
        if insurance_fee is None:
            insurance_fee = calculate_default_insurance_fee(
                request.vehicle_price,
                request.vehicle_category,
                request.vehicle_condition,
                request.tenor,
            )

        return run_simulation(request, interest_rate, admin_fee, insurance_fee, validation.warnings)
