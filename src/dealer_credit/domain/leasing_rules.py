"""
Leasing policy for vehicle credit.

Every rule the dealership applies to a credit application lives here as plain
data: offered tenors, down-payment limits, default flat rates by tenor
bracket, default admin fees and insurance premiums, and minimum prices.
Functions in this module only look values up and compare; they never
calculate installments (see ``credit_calculation``).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from dealer_credit.domain.errors import InvalidCreditInput
from dealer_credit.domain.money import (
    HUNDRED,
    MONTHS_PER_YEAR,
    format_rupiah,
    round_percentage,
    round_to_step,
)
from dealer_credit.domain.validation import ValidationIssue, ValidationResult
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition

MOTOR, MOBIL = VehicleCategory.MOTOR, VehicleCategory.MOBIL
BARU, BEKAS = VehicleCondition.BARU, VehicleCondition.BEKAS


@dataclass(frozen=True, slots=True)
class RateBracket:
    """Flat annual rate for tenors in [min_tenor, max_tenor], both inclusive."""

    min_tenor: int
    max_tenor: int
    rate: Decimal

    def contains(self, tenor: int) -> bool:
        return self.min_tenor <= tenor <= self.max_tenor


@dataclass(frozen=True, slots=True)
class AdminFeeBracket:
    """Flat admin fee for prices strictly below ``price_below``."""

    price_below: Decimal | None  # None: any price
    fee: Decimal


@dataclass(frozen=True, slots=True)
class DownPaymentLimits:
    min_percentage: Decimal
    max_percentage: Decimal
    recommended_percentage: Decimal


@dataclass(frozen=True, slots=True)
class CreditConfig:
    tenor: int
    interest_rate: Decimal
    min_dp_percentage: Decimal
    max_dp_percentage: Decimal
    admin_fee: Decimal
    insurance_rate: Decimal
    available_tenors: tuple[int, ...]


# ==============================================================================
# Policy tables
# ==============================================================================

AVAILABLE_TENORS: dict[tuple[VehicleCategory, VehicleCondition], tuple[int, ...]] = {
    (MOTOR, BARU): (12, 18, 24, 30, 36),
    (MOTOR, BEKAS): (12, 18, 24),
    (MOBIL, BARU): (12, 24, 36, 48, 60),
    (MOBIL, BEKAS): (12, 24, 36, 48),
}

MIN_DP_PERCENTAGES: dict[tuple[VehicleCategory, VehicleCondition], Decimal] = {
    (MOTOR, BARU): Decimal("10"),
    (MOTOR, BEKAS): Decimal("20"),
    (MOBIL, BARU): Decimal("15"),
    (MOBIL, BEKAS): Decimal("25"),
}
MAX_DP_PERCENTAGE = Decimal("50")
RECOMMENDED_DP_MARGIN = Decimal("10")  # points above the mandated minimum

# Valid tenors this close to the maximum get a warning
TENOR_WARNING_WINDOW = 12

MIN_VEHICLE_PRICES: dict[VehicleCategory, Decimal] = {
    MOTOR: Decimal("5000000"),
    MOBIL: Decimal("50000000"),
}

BASE_INTEREST_RATES: dict[tuple[VehicleCategory, VehicleCondition], Decimal] = {
    (MOTOR, BARU): Decimal("15"),
    (MOTOR, BEKAS): Decimal("18"),
    (MOBIL, BARU): Decimal("12"),
    (MOBIL, BEKAS): Decimal("15"),
}

# Each full year of tenor adds 0.5 points to the base rate
TENOR_PREMIUM_PER_YEAR = Decimal("0.5")
MAX_RATED_TENOR = 240


def _rate_brackets(base_rate: Decimal) -> tuple[RateBracket, ...]:
    return tuple(
        RateBracket(
            min_tenor=max(years * 12, 1),
            max_tenor=min(years * 12 + 11, MAX_RATED_TENOR),
            rate=base_rate + TENOR_PREMIUM_PER_YEAR * years,
        )
        for years in range(MAX_RATED_TENOR // 12 + 1)
    )


DEFAULT_INTEREST_RATES: dict[tuple[VehicleCategory, VehicleCondition], tuple[RateBracket, ...]] = {
    key: _rate_brackets(base_rate) for key, base_rate in BASE_INTEREST_RATES.items()
}

MOTOR_ADMIN_FEES: tuple[AdminFeeBracket, ...] = (
    AdminFeeBracket(price_below=Decimal("20000000"), fee=Decimal("500000")),
    AdminFeeBracket(price_below=Decimal("50000000"), fee=Decimal("750000")),
    AdminFeeBracket(price_below=None, fee=Decimal("1000000")),
)
MOBIL_ADMIN_FEE_PERCENTAGE = Decimal("1")
MOBIL_MIN_ADMIN_FEE = Decimal("1000000")

# Percent of vehicle price per year of coverage
INSURANCE_RATES: dict[tuple[VehicleCategory, VehicleCondition], Decimal] = {
    (MOTOR, BARU): Decimal("2.5"),
    (MOTOR, BEKAS): Decimal("3.0"),
    (MOBIL, BARU): Decimal("2.8"),
    (MOBIL, BEKAS): Decimal("3.5"),
}


# ==============================================================================
# Lookups
# ==============================================================================


def _key(
    category: VehicleCategory | str, condition: VehicleCondition | str
) -> tuple[VehicleCategory, VehicleCondition]:
    return VehicleCategory(category), VehicleCondition(condition)


def get_available_tenors(
    category: VehicleCategory | str, condition: VehicleCondition | str
) -> tuple[int, ...]:
    return AVAILABLE_TENORS[_key(category, condition)]


def get_max_tenor(category: VehicleCategory | str, condition: VehicleCondition | str) -> int:
    return max(get_available_tenors(category, condition))


def get_down_payment_limits(
    category: VehicleCategory | str, condition: VehicleCondition | str
) -> DownPaymentLimits:
    minimum = MIN_DP_PERCENTAGES[_key(category, condition)]
    return DownPaymentLimits(
        min_percentage=minimum,
        max_percentage=MAX_DP_PERCENTAGE,
        recommended_percentage=minimum + RECOMMENDED_DP_MARGIN,
    )


def get_insurance_rate(
    category: VehicleCategory | str, condition: VehicleCondition | str
) -> Decimal:
    return INSURANCE_RATES[_key(category, condition)]


def get_default_interest_rate(
    category: VehicleCategory | str,
    condition: VehicleCondition | str,
    tenor: int,
) -> Decimal:
    """
    Default flat annual rate (percent) when no leasing partner rate applies.

    The bracket list is contiguous over whole months and both bounds are
    inclusive, so a tenor sitting on an edge (12, 24, ...) belongs to the
    bracket that starts there.

    Raises:
        InvalidCreditInput: If tenor is not positive or above ``MAX_RATED_TENOR``
    """
    if tenor <= 0:
        raise InvalidCreditInput("tenor must be > 0", field="tenor", value=tenor)

    for bracket in DEFAULT_INTEREST_RATES[_key(category, condition)]:
        if bracket.contains(tenor):
            return bracket.rate

    raise InvalidCreditInput(f"no rate bracket covers tenor {tenor}", field="tenor", value=tenor)


def calculate_default_admin_fee(vehicle_price: Decimal, category: VehicleCategory | str) -> Decimal:
    """
    Motorcycles pay a flat fee by price band. Cars pay 1% of the price,
    rounded to the nearest Rp 100.000, never below Rp 1.000.000.

    Raises:
        InvalidCreditInput: If vehicle_price is negative
    """
    if vehicle_price < 0:
        raise InvalidCreditInput(
            "vehicle_price must be >= 0", field="vehicle_price", value=str(vehicle_price)
        )

    if VehicleCategory(category) is MOTOR:
        for bracket in MOTOR_ADMIN_FEES:
            if bracket.price_below is None or vehicle_price < bracket.price_below:
                return bracket.fee

    fee = round_to_step(vehicle_price * MOBIL_ADMIN_FEE_PERCENTAGE / HUNDRED)
    return max(MOBIL_MIN_ADMIN_FEE, fee)


def calculate_default_insurance_fee(
    vehicle_price: Decimal,
    category: VehicleCategory | str,
    condition: VehicleCondition | str,
    tenor: int,
) -> Decimal:
    """
    Total insurance premium for the whole credit period.

    premium = price * annual rate * (tenor / 12), rounded to the nearest
    Rp 100.000. Non-decreasing in both price and tenor.

    Raises:
        InvalidCreditInput: If tenor is not positive or vehicle_price is negative
    """
    if tenor <= 0:
        raise InvalidCreditInput("tenor must be > 0", field="tenor", value=tenor)
    if vehicle_price < 0:
        raise InvalidCreditInput(
            "vehicle_price must be >= 0", field="vehicle_price", value=str(vehicle_price)
        )

    annual_rate = get_insurance_rate(category, condition)
    premium = vehicle_price * annual_rate / HUNDRED * Decimal(tenor) / MONTHS_PER_YEAR
    return round_to_step(premium)


def get_credit_config(
    vehicle_price: Decimal,
    category: VehicleCategory | str,
    condition: VehicleCondition | str,
    tenor: int,
) -> CreditConfig:
    limits = get_down_payment_limits(category, condition)
    return CreditConfig(
        tenor=tenor,
        interest_rate=get_default_interest_rate(category, condition, tenor),
        min_dp_percentage=limits.min_percentage,
        max_dp_percentage=limits.max_percentage,
        admin_fee=calculate_default_admin_fee(vehicle_price, category),
        insurance_rate=get_insurance_rate(category, condition),
        available_tenors=get_available_tenors(category, condition),
    )


# ==============================================================================
# Validation
# ==============================================================================


def validate_credit_application(
    vehicle_price: Decimal,
    down_payment: Decimal,
    tenor: int,
    category: VehicleCategory | str,
    condition: VehicleCondition | str,
) -> ValidationResult:
    """
    Check a credit application against leasing policy.

    Every rule is evaluated and every violation reported, so the caller can
    show the applicant a complete list in one round trip. Ratio rules are
    skipped when price or down payment are already invalid, since the ratio
    is meaningless then.

    Returns:
        ValidationResult with blocking errors and non-blocking warnings
    """
    category, condition = _key(category, condition)
    label = f"{category.value} {condition.value}"
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    # Price
    if vehicle_price <= 0:
        errors.append(
            ValidationIssue("vehicle_price", "INVALID_PRICE", "Vehicle price must be greater than 0")
        )
    elif vehicle_price < MIN_VEHICLE_PRICES[category]:
        errors.append(
            ValidationIssue(
                "vehicle_price",
                "PRICE_BELOW_MINIMUM",
                f"Minimum {category.value} price is {format_rupiah(MIN_VEHICLE_PRICES[category])}",
            )
        )

    # Down payment bounds
    if down_payment < 0:
        errors.append(
            ValidationIssue("down_payment", "NEGATIVE_DOWN_PAYMENT", "Down payment cannot be negative")
        )
    if down_payment >= vehicle_price:
        errors.append(
            ValidationIssue(
                "down_payment",
                "DOWN_PAYMENT_NOT_BELOW_PRICE",
                "Down payment must be less than the vehicle price",
            )
        )

    # Tenor
    max_tenor = get_max_tenor(category, condition)
    available_tenors = get_available_tenors(category, condition)
    if tenor <= 0:
        errors.append(ValidationIssue("tenor", "INVALID_TENOR", "Tenor must be greater than 0 months"))
    elif tenor > max_tenor:
        errors.append(
            ValidationIssue(
                "tenor",
                "TENOR_ABOVE_MAXIMUM",
                f"Maximum tenor for {label} is {max_tenor} months",
            )
        )
    elif tenor not in available_tenors:
        errors.append(
            ValidationIssue(
                "tenor",
                "TENOR_NOT_OFFERED",
                f"Tenor {tenor} months is not offered for {label}; "
                f"choose one of {list(available_tenors)}",
            )
        )
    elif tenor > max_tenor - TENOR_WARNING_WINDOW:
        warnings.append(
            ValidationIssue(
                "tenor",
                "TENOR_NEAR_MAXIMUM",
                f"Tenor {tenor} months is close to the {max_tenor} month maximum for {label}",
            )
        )

    # Down payment ratio
    if vehicle_price > 0 and 0 <= down_payment < vehicle_price:
        limits = get_down_payment_limits(category, condition)
        ratio = down_payment / vehicle_price * HUNDRED

        if ratio < limits.min_percentage:
            errors.append(
                ValidationIssue(
                    "down_payment",
                    "DOWN_PAYMENT_BELOW_MINIMUM",
                    f"Minimum down payment for {label} is {limits.min_percentage}% "
                    f"(got {round_percentage(ratio)}%)",
                )
            )
        elif ratio < limits.recommended_percentage:
            warnings.append(
                ValidationIssue(
                    "down_payment",
                    "DOWN_PAYMENT_BELOW_RECOMMENDED",
                    f"Down payment of {round_percentage(ratio)}% is below the recommended "
                    f"{limits.recommended_percentage}% for {label}",
                )
            )

        if ratio > limits.max_percentage:
            warnings.append(
                ValidationIssue(
                    "down_payment",
                    "DOWN_PAYMENT_ABOVE_USUAL",
                    f"Down payment of {round_percentage(ratio)}% exceeds the usual "
                    f"{limits.max_percentage}% limit",
                )
            )

    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
