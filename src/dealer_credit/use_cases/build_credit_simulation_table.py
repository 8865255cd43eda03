from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from dealer_credit.domain.leasing_rules import get_available_tenors
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition
from dealer_credit.use_cases.simulate_credit import (
    CreditSimulation,
    CreditSimulationRequest,
    SimulateCredit,
)


@dataclass(frozen=True, slots=True)
class SimulationTableRequest:
    vehicle_price: Decimal
    down_payment: Decimal
    vehicle_category: VehicleCategory = VehicleCategory.MOTOR
    vehicle_condition: VehicleCondition = VehicleCondition.BARU
    interest_rate: Decimal | None = None  # None: default rate per tenor


@dataclass(frozen=True, slots=True)
class SimulationTable:
    vehicle_category: VehicleCategory
    vehicle_condition: VehicleCondition
    rows: tuple[CreditSimulation, ...]


class BuildCreditSimulationTable:
    """
    One simulation per offered tenor, so a customer can compare installments.

    Each row uses the default rate and fees for its tenor unless the caller
    fixes the rate. Price and down-payment violations fail the whole table
    (they would fail every row alike).
    """

    def __init__(self, simulate_credit: SimulateCredit | None = None) -> None:
        self._simulate_credit = simulate_credit or SimulateCredit()

    def execute(self, request: SimulationTableRequest) -> SimulationTable:
        """
        Raises:
            ValidationError: If price or down payment break leasing policy
        """
        rows = tuple(
            self._simulate_credit.execute(
                CreditSimulationRequest(
                    vehicle_price=request.vehicle_price,
                    down_payment=request.down_payment,
                    tenor=tenor,
                    vehicle_category=request.vehicle_category,
                    vehicle_condition=request.vehicle_condition,
                    interest_rate=request.interest_rate,
                )
            )
            for tenor in get_available_tenors(request.vehicle_category, request.vehicle_condition)
        )

        return SimulationTable(
            vehicle_category=request.vehicle_category,
            vehicle_condition=request.vehicle_condition,
            rows=rows,
        )
