from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition

# Whole Rupiah, no separators: "150000000"
MONEY_PATTERN = r"^\d+$"
# Percent with up to 2 decimals: "13.5"
RATE_PATTERN = r"^\d+(\.\d{1,2})?$"


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class IssueDTO(CamelModel):
    field: str
    message: str
    code: str


def wire_field(field: str) -> str:
    """camelCase a snake_case domain field name; names already on the wire pass through."""
    if "_" not in field:
        return field
    return to_camel(field)


# ==============================================================================
# Credit simulation
# ==============================================================================


class CreditSimulationRequestDTO(CamelModel):
    """Request payload for a credit simulation."""

    vehicle_price: str = Field(
        description="Vehicle price in whole Rupiah, as a string",
        examples=["150000000"],
        pattern=MONEY_PATTERN,
    )
    down_payment: str = Field(
        description="Down payment in whole Rupiah, as a string",
        examples=["30000000"],
        pattern=MONEY_PATTERN,
    )
    tenor: int = Field(
        description="Credit duration in months",
        examples=[36],
        ge=1,
    )
    interest_rate: str | None = Field(
        default=None,
        description="Flat interest rate in percent per year. Omit to use the policy default",
        examples=["13.5"],
        pattern=RATE_PATTERN,
    )
    admin_fee: str | None = Field(
        default=None,
        description="Admin fee in whole Rupiah. Omit to use the policy default",
        examples=["1500000"],
        pattern=MONEY_PATTERN,
    )
    insurance_fee: str | None = Field(
        default=None,
        description="Insurance premium for the whole tenor. Omit to use the policy default",
        examples=["12600000"],
        pattern=MONEY_PATTERN,
    )
    vehicle_category: VehicleCategory = Field(
        default=VehicleCategory.MOTOR,
        description="motor (two-wheel) or mobil (four-wheel)",
    )
    vehicle_condition: VehicleCondition = Field(
        default=VehicleCondition.BARU,
        description="baru (new) or bekas (used)",
    )
    include_schedule: bool = Field(
        default=False,
        description="Include the month-by-month installment schedule",
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "vehiclePrice": "150000000",
                "downPayment": "30000000",
                "tenor": 36,
                "vehicleCategory": "mobil",
                "vehicleCondition": "baru",
            }
        },
    )


class InstallmentRowDTO(CamelModel):
    month: int
    payment: str
    principal_portion: str
    interest_portion: str
    remaining_balance: str


class CreditSimulationResponseDTO(CamelModel):
    """Calculated credit figures. Money and rates are decimal strings."""

    vehicle_price: str
    down_payment: str
    down_payment_percentage: str
    principal_amount: str
    tenor: int
    interest_rate: str
    effective_rate: str
    total_interest: str
    total_credit: str
    monthly_payment: str
    last_payment: str
    admin_fee: str
    insurance_fee: str
    upfront_payment: str
    total_payment: str
    vehicle_category: VehicleCategory
    vehicle_condition: VehicleCondition
    warnings: list[IssueDTO] = Field(default_factory=list)
    schedule: list[InstallmentRowDTO] | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "vehiclePrice": "150000000",
                "downPayment": "30000000",
                "downPaymentPercentage": "20.00",
                "principalAmount": "120000000",
                "tenor": 36,
                "interestRate": "13.5",
                "effectiveRate": "25.11",
                "totalInterest": "48600000",
                "totalCredit": "168600000",
                "monthlyPayment": "4683334",
                "lastPayment": "4683310",
                "adminFee": "1500000",
                "insuranceFee": "12600000",
                "upfrontPayment": "44100000",
                "totalPayment": "212700000",
                "vehicleCategory": "mobil",
                "vehicleCondition": "baru",
                "warnings": [
                    {
                        "field": "downPayment",
                        "message": "Down payment of 20.00% is below the recommended 25% for mobil baru",
                        "code": "DOWN_PAYMENT_BELOW_RECOMMENDED",
                    }
                ],
                "schedule": None,
            }
        },
    )


# ==============================================================================
# Simulation table
# ==============================================================================


class SimulationTableRequestDTO(CamelModel):
    vehicle_price: str = Field(examples=["20000000"], pattern=MONEY_PATTERN)
    down_payment: str = Field(examples=["4000000"], pattern=MONEY_PATTERN)
    vehicle_category: VehicleCategory = VehicleCategory.MOTOR
    vehicle_condition: VehicleCondition = VehicleCondition.BARU
    interest_rate: str | None = Field(
        default=None,
        description="Fixed flat rate for every row. Omit to use each tenor's default",
        pattern=RATE_PATTERN,
    )


class SimulationTableRowDTO(CamelModel):
    tenor: int
    interest_rate: str
    monthly_payment: str
    last_payment: str
    total_interest: str
    total_credit: str
    admin_fee: str
    insurance_fee: str
    upfront_payment: str
    total_payment: str
    warnings: list[IssueDTO] = Field(default_factory=list)


class SimulationTableResponseDTO(CamelModel):
    vehicle_category: VehicleCategory
    vehicle_condition: VehicleCondition
    rows: list[SimulationTableRowDTO]


# ==============================================================================
# Amortization (reducing balance)
# ==============================================================================


class AmortizationRequestDTO(CamelModel):
    principal: str = Field(examples=["120000000"], pattern=MONEY_PATTERN)
    interest_rate: str = Field(
        description="Annual interest rate in percent (reducing balance)",
        examples=["24"],
        pattern=RATE_PATTERN,
    )
    tenor: int = Field(examples=[36], ge=1)


class AmortizationRowDTO(CamelModel):
    month: int
    opening_balance: str
    payment: str
    principal_portion: str
    interest_portion: str
    closing_balance: str


class AmortizationResponseDTO(CamelModel):
    principal: str
    interest_rate: str
    tenor: int
    monthly_payment: str
    total_interest: str
    total_payment: str
    rows: list[AmortizationRowDTO]


# ==============================================================================
# Credit config
# ==============================================================================


class CreditConfigResponseDTO(CamelModel):
    tenor: int
    interest_rate: str
    min_dp_percentage: str
    max_dp_percentage: str
    admin_fee: str
    insurance_rate: str
    available_tenors: list[int]
