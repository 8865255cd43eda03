from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from dealer_credit.domain.leasing_rules import CreditConfig, get_credit_config
from dealer_credit.domain.validation import ValidationIssue, ValidationResult
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition
from dealer_credit.use_cases.simulate_credit import raise_if_invalid


@dataclass(frozen=True, slots=True)
class CreditConfigRequest:
    vehicle_price: Decimal
    vehicle_category: VehicleCategory
    vehicle_condition: VehicleCondition
    tenor: int


class GetCreditConfig:
    """Default rate, fees and limits the simulator form should pre-fill."""

    def execute(self, request: CreditConfigRequest) -> CreditConfig:
        """
        Raises:
            ValidationError: If price is negative or tenor is not positive
        """
        errors: list[ValidationIssue] = []
        if request.vehicle_price < 0:
            errors.append(
                ValidationIssue("vehicle_price", "INVALID_PRICE", "Vehicle price cannot be negative")
            )
        if request.tenor <= 0:
            errors.append(
                ValidationIssue("tenor", "INVALID_TENOR", "Tenor must be greater than 0 months")
            )
        raise_if_invalid(ValidationResult(errors=tuple(errors)), "Credit config validation failed")

        return get_credit_config(
            request.vehicle_price,
            request.vehicle_category,
            request.vehicle_condition,
            request.tenor,
        )
