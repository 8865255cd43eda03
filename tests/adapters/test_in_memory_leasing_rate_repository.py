"""
Test suite for InMemoryLeasingRateRepository.

This test suite is the reference for the LeasingRateRepository contract:
- Partner codes match case-insensitively
- Inactive partners are invisible, and so are their rates
- list_rates orders by category, condition, tenor
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from dealer_credit.adapters.in_memory_leasing_rate_repository import (
    InMemoryLeasingRateRepository,
)
from dealer_credit.domain.leasing import LeasingPartner, LeasingRate
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition

MOTOR, MOBIL = VehicleCategory.MOTOR, VehicleCategory.MOBIL
BARU, BEKAS = VehicleCondition.BARU, VehicleCondition.BEKAS


def rate(
    partner_code: str,
    category: VehicleCategory,
    condition: VehicleCondition,
    tenor: int,
    interest_rate: str,
) -> LeasingRate:
    return LeasingRate(
        partner_code=partner_code,
        vehicle_category=category,
        vehicle_condition=condition,
        tenor=tenor,
        interest_rate=Decimal(interest_rate),
        min_dp_percentage=Decimal("10"),
        max_dp_percentage=Decimal("50"),
        admin_fee=Decimal("500000"),
    )


@pytest.fixture()
def repo() -> InMemoryLeasingRateRepository:
    partners = [
        LeasingPartner(id="1", code="ADIRA", name="Adira Finance", phone="021-1500511"),
        LeasingPartner(id="2", code="WOM", name="WOM Finance", phone="021-1500366"),
        LeasingPartner(id="3", code="OLD", name="Closed Finance", is_active=False),
    ]
    rates = [
        rate("ADIRA", MOTOR, BEKAS, 12, "18"),
        rate("ADIRA", MOTOR, BARU, 24, "16"),
        rate("ADIRA", MOBIL, BARU, 36, "11"),
        rate("ADIRA", MOTOR, BARU, 12, "14"),
        rate("WOM", MOTOR, BARU, 12, "13.75"),
        rate("OLD", MOTOR, BARU, 12, "10"),
    ]
    return InMemoryLeasingRateRepository(partners, rates)


# ==============================================================================
# get_partner
# ==============================================================================


@pytest.mark.parametrize("code", ["ADIRA", "adira", "Adira"])
def test_get_partner_is_case_insensitive(repo: InMemoryLeasingRateRepository, code: str) -> None:
    partner = repo.get_partner(code)

    assert partner is not None
    assert partner.name == "Adira Finance"


def test_get_partner_unknown_returns_none(repo: InMemoryLeasingRateRepository) -> None:
    assert repo.get_partner("BAF") is None


def test_get_partner_inactive_returns_none(repo: InMemoryLeasingRateRepository) -> None:
    assert repo.get_partner("OLD") is None


# ==============================================================================
# find_rate
# ==============================================================================


def test_find_rate_exact_combination(repo: InMemoryLeasingRateRepository) -> None:
    found = repo.find_rate("adira", MOTOR, BARU, 24)

    assert found is not None
    assert found.interest_rate == Decimal("16")


def test_find_rate_does_not_cross_partners(repo: InMemoryLeasingRateRepository) -> None:
    found = repo.find_rate("WOM", MOTOR, BARU, 12)

    assert found is not None
    assert found.interest_rate == Decimal("13.75")
    assert repo.find_rate("WOM", MOTOR, BARU, 24) is None


def test_find_rate_distinguishes_condition(repo: InMemoryLeasingRateRepository) -> None:
    assert repo.find_rate("ADIRA", MOTOR, BEKAS, 24) is None


def test_find_rate_of_inactive_partner_returns_none(repo: InMemoryLeasingRateRepository) -> None:
    assert repo.find_rate("OLD", MOTOR, BARU, 12) is None


# ==============================================================================
# list_rates
# ==============================================================================


def test_list_rates_sorted_by_category_condition_tenor(
    repo: InMemoryLeasingRateRepository,
) -> None:
    rates = repo.list_rates("ADIRA")

    assert [(r.vehicle_category.value, r.vehicle_condition.value, r.tenor) for r in rates] == [
        ("mobil", "baru", 36),
        ("motor", "baru", 12),
        ("motor", "baru", 24),
        ("motor", "bekas", 12),
    ]


def test_list_rates_unknown_or_inactive_partner_is_empty(
    repo: InMemoryLeasingRateRepository,
) -> None:
    assert repo.list_rates("BAF") == []
    assert repo.list_rates("OLD") == []


def test_empty_repository() -> None:
    repo = InMemoryLeasingRateRepository(partners=[], rates=[])

    assert repo.get_partner("ADIRA") is None
    assert repo.list_rates("ADIRA") == []
