from __future__ import annotations

from dataclasses import dataclass

from dealer_credit.domain.credit_calculation import validate_down_payment
from dealer_credit.domain.errors import NotFoundError
from dealer_credit.domain.leasing import LeasingPartner, LeasingRate
from dealer_credit.domain.leasing_rules import (
    calculate_default_insurance_fee,
    validate_credit_application,
)
from dealer_credit.ports.leasing_rate_repository import LeasingRateRepository
from dealer_credit.use_cases.simulate_credit import (
    CreditSimulation,
    CreditSimulationRequest,
    raise_if_invalid,
    run_simulation,
)


@dataclass(frozen=True, slots=True)
class LeasingPartnerSimulation:
    partner: LeasingPartner
    rate: LeasingRate
    simulation: CreditSimulation


class SimulateLeasingPartnerCredit:
    """
    Credit simulation priced by a leasing partner's published rate.

    The partner's rate and admin fee replace the policy defaults (caller
    overrides still win). The application must satisfy both the dealership
    policy and the partner's own down-payment band; errors from both are
    reported together.
    """

    def __init__(self, leasing_rate_repository: LeasingRateRepository) -> None:
        self._repository = leasing_rate_repository

    def execute(self, partner_code: str, request: CreditSimulationRequest) -> LeasingPartnerSimulation:
        """
        Raises:
            NotFoundError: If the partner is unknown/inactive or publishes no
                rate for the category, condition and tenor
            ValidationError: If the application breaks policy or partner limits
        """
        partner = self._repository.get_partner(partner_code)
        if partner is None:
            raise NotFoundError("LeasingPartner", partner_code)

        rate = self._repository.find_rate(
            partner.code, request.vehicle_category, request.vehicle_condition, request.tenor
        )
        if rate is None:
            raise NotFoundError(
                "LeasingRate",
                f"{partner.code}/{request.vehicle_category.value}/"
                f"{request.vehicle_condition.value}/{request.tenor}",
            )

        validation = validate_credit_application(
            request.vehicle_price,
            request.down_payment,
            request.tenor,
            request.vehicle_category,
            request.vehicle_condition,
        )
        if request.vehicle_price > 0:
            validation = validation.merge(
                validate_down_payment(
                    request.vehicle_price,
                    request.down_payment,
                    min_percentage=rate.min_dp_percentage,
                    max_percentage=rate.max_dp_percentage,
                )
            )
        raise_if_invalid(validation)

        interest_rate = request.interest_rate
        if interest_rate is None:
            interest_rate = rate.interest_rate

        admin_fee = request.admin_fee
        if admin_fee is None:
            admin_fee = rate.admin_fee

        insurance_fee = request.insurance_fee
        if insurance_fee is None:
            insurance_fee = calculate_default_insurance_fee(
                request.vehicle_price,
                request.vehicle_category,
                request.vehicle_condition,
                request.tenor,
            )

        simulation = run_simulation(
            request, interest_rate, admin_fee, insurance_fee, validation.warnings
        )
        return LeasingPartnerSimulation(partner=partner, rate=rate, simulation=simulation)
