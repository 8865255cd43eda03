from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from dealer_credit.domain.credit_calculation import (
    AmortizationRow,
    calculate_monthly_payment_effective,
    generate_amortization_table,
)
from dealer_credit.domain.leasing_rules import AVAILABLE_TENORS
from dealer_credit.domain.validation import ValidationIssue, ValidationResult
from dealer_credit.use_cases.simulate_credit import raise_if_invalid

MAX_AMORTIZATION_TENOR = max(max(tenors) for tenors in AVAILABLE_TENORS.values())


@dataclass(frozen=True, slots=True)
class AmortizationRequest:
    principal: Decimal
    interest_rate: Decimal  # annual percent, reducing balance
    tenor: int


@dataclass(frozen=True, slots=True)
class AmortizationSchedule:
    principal: Decimal
    interest_rate: Decimal
    tenor: int
    monthly_payment: Decimal
    total_interest: Decimal
    total_payment: Decimal
    rows: tuple[AmortizationRow, ...]


class GenerateAmortizationTable:
    """Reducing-balance (annuity) schedule for comparing against flat offers."""

    def execute(self, request: AmortizationRequest) -> AmortizationSchedule:
        """
        Raises:
            ValidationError: If principal, rate or tenor are out of range
        """
        errors: list[ValidationIssue] = []
        if request.principal <= 0:
            errors.append(
                ValidationIssue("principal", "INVALID_PRINCIPAL", "Principal must be greater than 0")
            )
        if request.interest_rate < 0:
            errors.append(
                ValidationIssue("interest_rate", "INVALID_RATE", "Interest rate cannot be negative")
            )
        if not 0 < request.tenor <= MAX_AMORTIZATION_TENOR:
            errors.append(
                ValidationIssue(
                    "tenor",
                    "INVALID_TENOR",
                    f"Tenor must be between 1 and {MAX_AMORTIZATION_TENOR} months",
                )
            )
        raise_if_invalid(ValidationResult(errors=tuple(errors)), "Amortization validation failed")

        rows = generate_amortization_table(request.principal, request.interest_rate, request.tenor)
        total_payment = sum((row.payment for row in rows), Decimal("0"))

        return AmortizationSchedule(
            principal=request.principal,
            interest_rate=request.interest_rate,
            tenor=request.tenor,
            monthly_payment=calculate_monthly_payment_effective(
                request.principal, request.interest_rate, request.tenor
            ),
            total_interest=total_payment - request.principal,
            total_payment=total_payment,
            rows=rows,
        )
