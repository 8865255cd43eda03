from fastapi import APIRouter, Depends

from dealer_credit.entrypoints.http.dependencies import (
    get_list_leasing_rates_use_case,
    get_simulate_leasing_partner_credit_use_case,
)
from dealer_credit.entrypoints.http.dtos.credit import CreditSimulationRequestDTO
from dealer_credit.entrypoints.http.dtos.leasing import (
    LeasingPartnerSimulationResponseDTO,
    LeasingRatesResponseDTO,
)
from dealer_credit.entrypoints.http.error_responses import (
    NOT_FOUND_RESPONSE,
    UNAUTHORIZED_RESPONSE,
    VALIDATION_RESPONSE,
)
from dealer_credit.entrypoints.http.mappers.credit_mapper import CreditMapper
from dealer_credit.entrypoints.http.mappers.leasing_mapper import LeasingMapper
from dealer_credit.use_cases.list_leasing_rates import ListLeasingRates
from dealer_credit.use_cases.simulate_leasing_partner_credit import (
    SimulateLeasingPartnerCredit,
)


router = APIRouter(
    tags=["Leasing partners"],
    responses={401: UNAUTHORIZED_RESPONSE, 404: NOT_FOUND_RESPONSE},
)


@router.post(
    "/leasing-partners/{partner_code}/credit/simulate",
    response_model=LeasingPartnerSimulationResponseDTO,
    responses={400: VALIDATION_RESPONSE},
    summary="Simulate credit with a leasing partner's rate",
    description="""
    Same calculation as `POST /v1/credit/simulate`, priced with the partner's
    published flat rate and admin fee for the vehicle category, condition and
    tenor. The down payment must also respect the partner's own limits.

    ## Example
    ```
    POST /v1/leasing-partners/ADIRA/credit/simulate
    {
        "vehiclePrice": "20000000",
        "downPayment": "4000000",
        "tenor": 24,
        "vehicleCategory": "motor",
        "vehicleCondition": "baru"
    }
    ```
    """,
)
def simulate_leasing_partner_credit(
    partner_code: str,
    payload: CreditSimulationRequestDTO,
    use_case: SimulateLeasingPartnerCredit = Depends(get_simulate_leasing_partner_credit_use_case),
) -> LeasingPartnerSimulationResponseDTO:
    request = CreditMapper.to_domain_request(payload)
    result = use_case.execute(partner_code, request)
    return LeasingMapper.to_simulation_response(result)


@router.get(
    "/leasing-partners/{partner_code}/rates",
    response_model=LeasingRatesResponseDTO,
    summary="List a leasing partner's published rates",
)
def list_leasing_rates(
    partner_code: str,
    use_case: ListLeasingRates = Depends(get_list_leasing_rates_use_case),
) -> LeasingRatesResponseDTO:
    response = use_case.execute(partner_code)
    return LeasingMapper.to_rates_response(response)
