"""
Credit installment calculation.

The single place where credit figures are computed. Everything here is a pure
function over frozen value objects and ``Decimal`` whole-Rupiah amounts.

Conventions:
- Flat rate: ``interest_rate`` is a flat percentage per year charged on the
  original principal, total interest = principal * rate/100 * tenor/12.
- Admin and insurance fees are collected upfront. They are not financed and
  bear no interest.
- Rounding happens at three points only:
    * total interest is rounded to whole Rupiah, half-up
    * the monthly installment is rounded UP to whole Rupiah
    * the last installment is reduced so installments sum to the total
      credit exactly (overcharge of the regular installments is at most
      ``tenor - 1`` Rupiah in total)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from dealer_credit.domain.errors import CreditCalculationError
from dealer_credit.domain.money import (
    HUNDRED,
    MONTHS_PER_YEAR,
    ceil_currency,
    format_rupiah,
    round_currency,
    round_percentage,
)
from dealer_credit.domain.validation import ValidationIssue, ValidationResult

ZERO = Decimal("0")

# flat -> effective rate conversion factor runs from 1.8 towards 2.0 with tenor
EFFECTIVE_FACTOR_BASE = Decimal("1.8")
EFFECTIVE_FACTOR_SPAN = Decimal("0.2")
EFFECTIVE_FACTOR_TENOR = Decimal("120")


@dataclass(frozen=True, slots=True)
class CreditCalculationInput:
    vehicle_price: Decimal
    down_payment: Decimal
    tenor: int  # months
    interest_rate: Decimal  # flat percent per year, e.g. 13.5
    admin_fee: Decimal = ZERO
    insurance_fee: Decimal = ZERO


@dataclass(frozen=True, slots=True)
class CreditCalculationResult:
    vehicle_price: Decimal
    down_payment: Decimal
    down_payment_percentage: Decimal
    principal_amount: Decimal  # vehicle_price - down_payment
    tenor: int
    interest_rate: Decimal
    effective_rate: Decimal  # approximate annual effective rate
    total_interest: Decimal
    total_credit: Decimal  # principal + interest
    monthly_payment: Decimal
    last_payment: Decimal
    admin_fee: Decimal
    insurance_fee: Decimal
    upfront_payment: Decimal  # down payment + fees
    total_payment: Decimal  # down payment + total credit + fees


@dataclass(frozen=True, slots=True)
class InstallmentRow:
    month: int
    payment: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True, slots=True)
class AmortizationRow:
    month: int
    opening_balance: Decimal
    payment: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    closing_balance: Decimal


def _require_positive_tenor(tenor: int) -> None:
    if tenor <= 0:
        raise CreditCalculationError(
            "tenor must be > 0 to spread installments", field="tenor", value=tenor
        )


def _require_non_negative(name: str, value: Decimal) -> None:
    if value < 0:
        raise CreditCalculationError(f"{name} must be >= 0", field=name, value=str(value))


# ==============================================================================
# Building blocks
# ==============================================================================


def calculate_flat_interest(principal: Decimal, annual_rate: Decimal, tenor: int) -> Decimal:
    """Total flat interest over the tenor, rounded to whole Rupiah (half-up)."""
    _require_positive_tenor(tenor)
    return round_currency(principal * annual_rate * Decimal(tenor) / (HUNDRED * MONTHS_PER_YEAR))


def calculate_monthly_payment_flat(principal: Decimal, annual_rate: Decimal, tenor: int) -> Decimal:
    """
    Flat-method installment.

    total interest = principal * rate/100 * tenor/12
    installment    = ceil((principal + total interest) / tenor)
    """
    _require_positive_tenor(tenor)
    _require_non_negative("principal", principal)
    _require_non_negative("interest_rate", annual_rate)
    if principal == 0:
        return ZERO

    total_credit = principal + calculate_flat_interest(principal, annual_rate, tenor)
    return ceil_currency(total_credit / Decimal(tenor))


def calculate_monthly_payment_effective(
    principal: Decimal, annual_rate: Decimal, tenor: int
) -> Decimal:
    """
    Reducing-balance (annuity) installment, rounded half-up.

    M = P * r(1+r)^n / ((1+r)^n - 1), with r = rate / 100 / 12
    """
    _require_positive_tenor(tenor)
    _require_non_negative("principal", principal)
    _require_non_negative("interest_rate", annual_rate)
    if principal == 0:
        return ZERO
    if annual_rate == 0:
        return round_currency(principal / Decimal(tenor))

    monthly_rate = annual_rate / (HUNDRED * MONTHS_PER_YEAR)
    factor = (1 + monthly_rate) ** tenor
    return round_currency(principal * monthly_rate * factor / (factor - 1))


def calculate_total_credit(monthly_payment: Decimal, tenor: int) -> Decimal:
    return monthly_payment * tenor


def _effective_factor(tenor: int) -> Decimal:
    return EFFECTIVE_FACTOR_BASE + Decimal(tenor) / EFFECTIVE_FACTOR_TENOR * EFFECTIVE_FACTOR_SPAN


def flat_to_effective_rate(flat_rate: Decimal, tenor: int) -> Decimal:
    """Approximate the effective annual rate of a flat rate (factor 1.8 to 2.0)."""
    return round_percentage(flat_rate * _effective_factor(tenor))


def effective_to_flat_rate(effective_rate: Decimal, tenor: int) -> Decimal:
    return round_percentage(effective_rate / _effective_factor(tenor))


def calculate_dp_percentage(vehicle_price: Decimal, down_payment: Decimal) -> Decimal:
    if vehicle_price <= 0:
        return ZERO
    return round_percentage(down_payment / vehicle_price * HUNDRED)


def calculate_dp_from_percentage(vehicle_price: Decimal, dp_percentage: Decimal) -> Decimal:
    return round_currency(vehicle_price * dp_percentage / HUNDRED)


def validate_down_payment(
    vehicle_price: Decimal,
    down_payment: Decimal,
    min_percentage: Decimal = Decimal("10"),
    max_percentage: Decimal = Decimal("50"),
) -> ValidationResult:
    """Check a down payment against an explicit min/max percentage band."""
    percentage = calculate_dp_percentage(vehicle_price, down_payment)

    if percentage < min_percentage:
        minimum = calculate_dp_from_percentage(vehicle_price, min_percentage)
        issue = ValidationIssue(
            "down_payment",
            "DOWN_PAYMENT_BELOW_MINIMUM",
            f"Minimum down payment is {min_percentage}% of the vehicle price "
            f"({format_rupiah(minimum)})",
        )
        return ValidationResult(errors=(issue,))

    if percentage > max_percentage:
        issue = ValidationIssue(
            "down_payment",
            "DOWN_PAYMENT_ABOVE_MAXIMUM",
            f"Maximum down payment is {max_percentage}% of the vehicle price",
        )
        return ValidationResult(errors=(issue,))

    return ValidationResult()


# ==============================================================================
# Credit calculation
# ==============================================================================


def calculate_credit(credit_input: CreditCalculationInput) -> CreditCalculationResult:
    """
    Compute the full credit figures for a validated application.

    Callers must run ``validate_credit_application`` first. This function only
    guards against numbers that would make the arithmetic meaningless.

    Raises:
        CreditCalculationError: On zero/negative tenor, non-positive principal,
            negative rate or fees, or a principal too small to spread over the tenor
    """
    tenor = credit_input.tenor
    _require_positive_tenor(tenor)
    _require_non_negative("interest_rate", credit_input.interest_rate)
    _require_non_negative("admin_fee", credit_input.admin_fee)
    _require_non_negative("insurance_fee", credit_input.insurance_fee)

    principal = credit_input.vehicle_price - credit_input.down_payment
    if principal <= 0:
        raise CreditCalculationError(
            "principal must be > 0 (down payment must be below vehicle price)",
            field="down_payment",
            value=str(credit_input.down_payment),
        )

    total_interest = calculate_flat_interest(principal, credit_input.interest_rate, tenor)
    total_credit = principal + total_interest
    monthly_payment = calculate_monthly_payment_flat(principal, credit_input.interest_rate, tenor)

    # The last installment absorbs the round-up of the others
    last_payment = total_credit - monthly_payment * (tenor - 1)
    if last_payment <= 0:
        raise CreditCalculationError(
            f"principal of {format_rupiah(principal)} is too small to spread over {tenor} months",
            field="tenor",
            value=tenor,
        )

    fees = credit_input.admin_fee + credit_input.insurance_fee

    return CreditCalculationResult(
        vehicle_price=credit_input.vehicle_price,
        down_payment=credit_input.down_payment,
        down_payment_percentage=calculate_dp_percentage(
            credit_input.vehicle_price, credit_input.down_payment
        ),
        principal_amount=principal,
        tenor=tenor,
        interest_rate=credit_input.interest_rate,
        effective_rate=flat_to_effective_rate(credit_input.interest_rate, tenor),
        total_interest=total_interest,
        total_credit=total_credit,
        monthly_payment=monthly_payment,
        last_payment=last_payment,
        admin_fee=credit_input.admin_fee,
        insurance_fee=credit_input.insurance_fee,
        upfront_payment=credit_input.down_payment + fees,
        total_payment=credit_input.down_payment + total_credit + fees,
    )


def build_installment_schedule(result: CreditCalculationResult) -> tuple[InstallmentRow, ...]:
    """
    Month-by-month breakdown of a flat credit.

    Interest is spread evenly (rounded half-up) until the total interest is
    used up; the principal portion is whatever the installment leaves over,
    capped at the principal still owed. The last row settles what remains of
    both, so no portion is ever negative and the remaining balance reaches
    exactly zero on the last row.
    """
    tenor = result.tenor
    _require_positive_tenor(tenor)

    interest_share = round_currency(result.total_interest / Decimal(tenor))
    interest_due = result.total_interest
    principal_due = result.principal_amount
    balance = result.total_credit
    rows: list[InstallmentRow] = []

    for month in range(1, tenor + 1):
        if month == tenor:
            payment = result.last_payment
            interest = interest_due
            principal = principal_due
        else:
            payment = result.monthly_payment
            interest = min(interest_share, interest_due)
            # Rounded-up installments can pay the principal off early
            principal = min(payment - interest, principal_due)
            interest = payment - principal

        interest_due -= interest
        principal_due -= principal
        balance -= payment
        rows.append(
            InstallmentRow(
                month=month,
                payment=payment,
                principal_portion=principal,
                interest_portion=interest,
                remaining_balance=balance,
            )
        )

    return tuple(rows)


def generate_amortization_table(
    principal: Decimal, annual_rate: Decimal, tenor: int
) -> tuple[AmortizationRow, ...]:
    """
    Reducing-balance (annuity) amortization table.

    Used to compare a flat offer against its effective-rate equivalent. Monthly
    interest is charged on the opening balance and rounded half-up; the last
    row settles whatever balance is left so the table closes at zero.

    Raises:
        CreditCalculationError: On non-positive tenor or principal, or negative rate
    """
    _require_positive_tenor(tenor)
    _require_non_negative("interest_rate", annual_rate)
    if principal <= 0:
        raise CreditCalculationError(
            "principal must be > 0", field="principal", value=str(principal)
        )

    monthly_rate = annual_rate / (HUNDRED * MONTHS_PER_YEAR)
    installment = calculate_monthly_payment_effective(principal, annual_rate, tenor)
    balance = principal
    rows: list[AmortizationRow] = []

    for month in range(1, tenor + 1):
        interest = round_currency(balance * monthly_rate)
        if month == tenor:
            principal_portion = balance
        else:
            principal_portion = min(installment - interest, balance)

        closing_balance = balance - principal_portion
        rows.append(
            AmortizationRow(
                month=month,
                opening_balance=balance,
                payment=principal_portion + interest,
                principal_portion=principal_portion,
                interest_portion=interest,
                closing_balance=closing_balance,
            )
        )
        balance = closing_balance

    return tuple(rows)
