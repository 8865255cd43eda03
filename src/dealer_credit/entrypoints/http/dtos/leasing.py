from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition
from dealer_credit.entrypoints.http.dtos.credit import CamelModel, CreditSimulationResponseDTO


class LeasingPartnerDTO(CamelModel):
    code: str
    name: str
    phone: str | None = None


class LeasingRateDTO(CamelModel):
    vehicle_category: VehicleCategory
    vehicle_condition: VehicleCondition
    tenor: int
    interest_rate: str
    min_dp_percentage: str
    max_dp_percentage: str
    admin_fee: str


class LeasingRatesResponseDTO(CamelModel):
    partner: LeasingPartnerDTO
    rates: list[LeasingRateDTO]


class LeasingPartnerSimulationResponseDTO(CreditSimulationResponseDTO):
    """Credit simulation priced with a leasing partner's published rate."""

    leasing_partner: LeasingPartnerDTO
