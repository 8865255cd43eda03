from fastapi import APIRouter, Depends, Query

from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition
from dealer_credit.entrypoints.http.dependencies import (
    get_amortization_table_use_case,
    get_credit_config_use_case,
    get_simulate_credit_use_case,
    get_simulation_table_use_case,
)
from dealer_credit.entrypoints.http.dtos.credit import (
    MONEY_PATTERN,
    AmortizationRequestDTO,
    AmortizationResponseDTO,
    CreditConfigResponseDTO,
    CreditSimulationRequestDTO,
    CreditSimulationResponseDTO,
    SimulationTableRequestDTO,
    SimulationTableResponseDTO,
)
from dealer_credit.entrypoints.http.error_responses import (
    UNAUTHORIZED_RESPONSE,
    VALIDATION_RESPONSE,
)
from dealer_credit.entrypoints.http.mappers.credit_mapper import CreditMapper
from dealer_credit.use_cases.build_credit_simulation_table import BuildCreditSimulationTable
from dealer_credit.use_cases.generate_amortization_table import GenerateAmortizationTable
from dealer_credit.use_cases.get_credit_config import GetCreditConfig
from dealer_credit.use_cases.simulate_credit import SimulateCredit


router = APIRouter(
    tags=["Credit"],
    responses={400: VALIDATION_RESPONSE, 401: UNAUTHORIZED_RESPONSE},
)


@router.post(
    "/credit/simulate",
    response_model=CreditSimulationResponseDTO,
    summary="Simulate vehicle credit",
    description="""
    Calculate a flat-rate installment plan for a vehicle purchase.

    ## Monetary Values
    - All monetary values are strings of whole Rupiah (e.g., "150000000")
    - Rates are strings of percent per year (e.g., "13.5")

    ## Defaults
    - `interestRate`, `adminFee` and `insuranceFee` fall back to the leasing
      policy defaults for the vehicle category, condition and tenor when omitted
    - An explicit "0" is used as given

    ## Calculation
    - Principal = vehiclePrice - downPayment
    - Total interest = principal × rate × tenor / 1200
    - Monthly payment = total credit / tenor, rounded up to the Rupiah
    - The last payment absorbs the rounding so installments sum to total credit
    - Admin and insurance fees are paid upfront with the down payment

    ## Validation
    Every failed policy rule is returned in `errors`. Non-blocking findings
    (e.g., down payment below the recommended ratio) come back in `warnings`.
    """,
)
def simulate_credit(
    payload: CreditSimulationRequestDTO,
    use_case: SimulateCredit = Depends(get_simulate_credit_use_case),
) -> CreditSimulationResponseDTO:
    """Follows the parse → map → execute → map → return pattern."""
    # 1. Map to domain request (string → Decimal)
    request = CreditMapper.to_domain_request(payload)

    # 2. Execute use case (validates and calculates)
    simulation = use_case.execute(request)

    # 3. Map to response (Decimal → string)
    return CreditMapper.to_response(simulation)


@router.post(
    "/credit/simulation-table",
    response_model=SimulationTableResponseDTO,
    summary="Compare installments across tenors",
    description="""
    One credit simulation per tenor offered for the vehicle category and
    condition, each with that tenor's default rate and fees (or the given
    `interestRate` for every row).
    """,
)
def build_simulation_table(
    payload: SimulationTableRequestDTO,
    use_case: BuildCreditSimulationTable = Depends(get_simulation_table_use_case),
) -> SimulationTableResponseDTO:
    request = CreditMapper.to_table_request(payload)
    table = use_case.execute(request)
    return CreditMapper.to_table_response(table)


@router.post(
    "/credit/amortization",
    response_model=AmortizationResponseDTO,
    summary="Reducing-balance amortization table",
    description="""
    Month-by-month annuity schedule for a principal at an annual
    reducing-balance rate. The last row settles the remaining balance.
    """,
)
def generate_amortization_table(
    payload: AmortizationRequestDTO,
    use_case: GenerateAmortizationTable = Depends(get_amortization_table_use_case),
) -> AmortizationResponseDTO:
    request = CreditMapper.to_amortization_request(payload)
    schedule = use_case.execute(request)
    return CreditMapper.to_amortization_response(schedule)


@router.get(
    "/credit/config",
    response_model=CreditConfigResponseDTO,
    summary="Policy defaults for a simulation form",
    description="""
    Default interest rate, admin fee, insurance rate, down-payment limits and
    offered tenors for a vehicle category, condition, price and tenor.

    ## Example
    ```
    GET /v1/credit/config?vehiclePrice=150000000&vehicleCategory=mobil&vehicleCondition=baru&tenor=36
    ```
    """,
)
def get_credit_config(
    vehicle_price: str = Query(alias="vehiclePrice", pattern=MONEY_PATTERN),
    vehicle_category: VehicleCategory = Query(
        default=VehicleCategory.MOTOR, alias="vehicleCategory"
    ),
    vehicle_condition: VehicleCondition = Query(
        default=VehicleCondition.BARU, alias="vehicleCondition"
    ),
    tenor: int = Query(ge=1),
    use_case: GetCreditConfig = Depends(get_credit_config_use_case),
) -> CreditConfigResponseDTO:
    request = CreditMapper.to_config_request(
        vehicle_price, vehicle_category, vehicle_condition, tenor
    )
    config = use_case.execute(request)
    return CreditMapper.to_config_response(config)
