"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
The credit use cases are stateless and need no session at all; only the
leasing partner routes open one.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from dealer_credit.adapters.postgres_leasing_rate_repository import (
    PostgresLeasingRateRepository,
)
from dealer_credit.infra.db.session import get_session
from dealer_credit.ports.leasing_rate_repository import LeasingRateRepository
from dealer_credit.use_cases.build_credit_simulation_table import BuildCreditSimulationTable
from dealer_credit.use_cases.generate_amortization_table import GenerateAmortizationTable
from dealer_credit.use_cases.get_credit_config import GetCreditConfig
from dealer_credit.use_cases.list_leasing_rates import ListLeasingRates
from dealer_credit.use_cases.simulate_credit import SimulateCredit
from dealer_credit.use_cases.simulate_leasing_partner_credit import (
    SimulateLeasingPartnerCredit,
)


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() is a context manager that handles:
    - Session creation
    - Auto-commit on success
    - Auto-rollback on exception
    - Session cleanup

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


# ==============================================================================
# Credit kernel (no database)
# ==============================================================================


def get_simulate_credit_use_case() -> SimulateCredit:
    return SimulateCredit()


def get_simulation_table_use_case() -> BuildCreditSimulationTable:
    return BuildCreditSimulationTable()


def get_amortization_table_use_case() -> GenerateAmortizationTable:
    return GenerateAmortizationTable()


def get_credit_config_use_case() -> GetCreditConfig:
    return GetCreditConfig()


# ==============================================================================
# Leasing partners (database-backed)
# ==============================================================================


def get_leasing_rate_repository(db: Session = Depends(get_db)) -> LeasingRateRepository:
    """
    Per-request repository bound to the request's session.

    Args:
        db: Database session (injected by FastAPI via Depends(get_db))
    """
    return PostgresLeasingRateRepository(session=db)


def get_simulate_leasing_partner_credit_use_case(
    repository: LeasingRateRepository = Depends(get_leasing_rate_repository),
) -> SimulateLeasingPartnerCredit:
    return SimulateLeasingPartnerCredit(leasing_rate_repository=repository)


def get_list_leasing_rates_use_case(
    repository: LeasingRateRepository = Depends(get_leasing_rate_repository),
) -> ListLeasingRates:
    return ListLeasingRates(leasing_rate_repository=repository)
