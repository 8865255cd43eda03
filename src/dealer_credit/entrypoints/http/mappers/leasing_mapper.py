from __future__ import annotations

from dealer_credit.domain.leasing import LeasingPartner, LeasingRate
from dealer_credit.entrypoints.http.dtos.leasing import (
    LeasingPartnerDTO,
    LeasingPartnerSimulationResponseDTO,
    LeasingRateDTO,
    LeasingRatesResponseDTO,
)
from dealer_credit.entrypoints.http.mappers.credit_mapper import CreditMapper
from dealer_credit.use_cases.list_leasing_rates import LeasingRatesResponse
from dealer_credit.use_cases.simulate_leasing_partner_credit import LeasingPartnerSimulation


class LeasingMapper:
    """Maps leasing partner models to REST DTOs."""

    @staticmethod
    def to_partner(partner: LeasingPartner) -> LeasingPartnerDTO:
        return LeasingPartnerDTO(code=partner.code, name=partner.name, phone=partner.phone)

    @staticmethod
    def to_rate(rate: LeasingRate) -> LeasingRateDTO:
        return LeasingRateDTO(
            vehicle_category=rate.vehicle_category,
            vehicle_condition=rate.vehicle_condition,
            tenor=rate.tenor,
            interest_rate=str(rate.interest_rate),
            min_dp_percentage=str(rate.min_dp_percentage),
            max_dp_percentage=str(rate.max_dp_percentage),
            admin_fee=str(rate.admin_fee),
        )

    @staticmethod
    def to_rates_response(response: LeasingRatesResponse) -> LeasingRatesResponseDTO:
        return LeasingRatesResponseDTO(
            partner=LeasingMapper.to_partner(response.partner),
            rates=[LeasingMapper.to_rate(rate) for rate in response.rates],
        )

    @staticmethod
    def to_simulation_response(
        result: LeasingPartnerSimulation,
    ) -> LeasingPartnerSimulationResponseDTO:
        """Credit figures plus the partner that priced them."""
        return LeasingPartnerSimulationResponseDTO(
            **CreditMapper.simulation_fields(result.simulation),
            leasing_partner=LeasingMapper.to_partner(result.partner),
        )
