"""
Unit test suite for PostgresLeasingRateRepository.

This test suite verifies the PostgreSQL implementation using mocks.
Tests verify:
- One query per repository call
- Partner code filters use upper() on both sides
- Missing rows map to None / empty lists
- Type conversions (UUID → string, NUMERIC → Decimal, str → enums) work
"""

from __future__ import annotations

import uuid
from decimal import Decimal
from unittest.mock import MagicMock, Mock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import Session

from dealer_credit.adapters.postgres_leasing_rate_repository import (
    PostgresLeasingRateRepository,
)
from dealer_credit.domain.leasing import LeasingPartner, LeasingRate
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition
from dealer_credit.infra.db.models.leasing import LeasingPartnerRow, LeasingRateRow

PARTNER_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")


@pytest.fixture()
def mock_session() -> Mock:
    """Mock SQLAlchemy session."""
    return Mock(spec=Session)


@pytest.fixture()
def partner_row() -> LeasingPartnerRow:
    row = LeasingPartnerRow(
        id=PARTNER_ID,
        code="ADIRA",
        name="Adira Finance",
        phone="021-1500511",
        is_active=True,
    )
    # Prevent SQLAlchemy from trying to persist this
    row._sa_instance_state = MagicMock()  # type: ignore
    return row


def make_rate_row(tenor: int, interest_rate: str, condition: str = "baru") -> LeasingRateRow:
    row = LeasingRateRow(
        id=uuid.uuid4(),
        leasing_partner_id=PARTNER_ID,
        vehicle_category="motor",
        vehicle_condition=condition,
        tenor=tenor,
        interest_rate=Decimal(interest_rate),
        min_dp_percentage=Decimal("10.00"),
        max_dp_percentage=Decimal("50.00"),
        admin_fee=Decimal("500000"),
    )
    row._sa_instance_state = MagicMock()  # type: ignore
    return row


def compiled_sql(mock_session: Mock) -> str:
    query = mock_session.execute.call_args[0][0]
    return str(query.compile(dialect=postgresql.dialect()))


# ==============================================================================
# get_partner
# ==============================================================================


def test_get_partner_converts_row_to_domain(mock_session: Mock, partner_row: LeasingPartnerRow) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = partner_row

    partner = PostgresLeasingRateRepository(mock_session).get_partner("adira")

    assert partner == LeasingPartner(
        id="00000000-0000-0000-0000-000000000001",
        code="ADIRA",
        name="Adira Finance",
        phone="021-1500511",
        is_active=True,
    )
    mock_session.execute.assert_called_once()


def test_get_partner_missing_returns_none(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = None

    assert PostgresLeasingRateRepository(mock_session).get_partner("XYZ") is None


def test_get_partner_query_is_case_insensitive_and_active_only(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = None

    PostgresLeasingRateRepository(mock_session).get_partner("adira")

    sql = compiled_sql(mock_session)
    assert "upper(leasing_partners.code)" in sql
    assert "leasing_partners.is_active IS true" in sql


# ==============================================================================
# find_rate
# ==============================================================================


def test_find_rate_converts_row_to_domain(mock_session: Mock) -> None:
    mock_session.execute.return_value.one_or_none.return_value = (make_rate_row(24, "16.00"), "ADIRA")

    found = PostgresLeasingRateRepository(mock_session).find_rate(
        "adira", VehicleCategory.MOTOR, VehicleCondition.BARU, 24
    )

    assert found == LeasingRate(
        partner_code="ADIRA",
        vehicle_category=VehicleCategory.MOTOR,
        vehicle_condition=VehicleCondition.BARU,
        tenor=24,
        interest_rate=Decimal("16.00"),
        min_dp_percentage=Decimal("10.00"),
        max_dp_percentage=Decimal("50.00"),
        admin_fee=Decimal("500000"),
    )
    assert isinstance(found.interest_rate, Decimal)


def test_find_rate_missing_returns_none(mock_session: Mock) -> None:
    mock_session.execute.return_value.one_or_none.return_value = None

    found = PostgresLeasingRateRepository(mock_session).find_rate(
        "ADIRA", VehicleCategory.MOTOR, VehicleCondition.BARU, 18
    )

    assert found is None


def test_find_rate_query_joins_partner_and_filters_combination(mock_session: Mock) -> None:
    mock_session.execute.return_value.one_or_none.return_value = None

    PostgresLeasingRateRepository(mock_session).find_rate(
        "ADIRA", VehicleCategory.MOTOR, VehicleCondition.BEKAS, 12
    )

    sql = compiled_sql(mock_session)
    assert "JOIN leasing_partners" in sql
    assert "leasing_rates.vehicle_category" in sql
    assert "leasing_rates.vehicle_condition" in sql
    assert "leasing_rates.tenor" in sql


# ==============================================================================
# list_rates
# ==============================================================================


def test_list_rates_converts_all_rows(mock_session: Mock) -> None:
    mock_session.execute.return_value.all.return_value = [
        (make_rate_row(12, "14.00"), "ADIRA"),
        (make_rate_row(24, "16.00"), "ADIRA"),
        (make_rate_row(12, "18.00", condition="bekas"), "ADIRA"),
    ]

    rates = PostgresLeasingRateRepository(mock_session).list_rates("ADIRA")

    assert [(r.vehicle_condition, r.tenor) for r in rates] == [
        (VehicleCondition.BARU, 12),
        (VehicleCondition.BARU, 24),
        (VehicleCondition.BEKAS, 12),
    ]
    assert all(r.partner_code == "ADIRA" for r in rates)


def test_list_rates_empty(mock_session: Mock) -> None:
    mock_session.execute.return_value.all.return_value = []

    assert PostgresLeasingRateRepository(mock_session).list_rates("XYZ") == []


def test_list_rates_query_is_ordered(mock_session: Mock) -> None:
    mock_session.execute.return_value.all.return_value = []

    PostgresLeasingRateRepository(mock_session).list_rates("ADIRA")

    sql = compiled_sql(mock_session)
    assert (
        "ORDER BY leasing_rates.vehicle_category, leasing_rates.vehicle_condition, leasing_rates.tenor"
        in sql
    )
