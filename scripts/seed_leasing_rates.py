#!/usr/bin/env python3
"""
Seed the leasing_partners and leasing_rates tables.

Features:
- Deterministic: the same partners and rate sheet every run
- Idempotent: safe to run multiple times (clears before seeding)

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_leasing_rates.py
"""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition
from dealer_credit.infra.db.models.leasing import LeasingPartnerRow, LeasingRateRow
from dealer_credit.infra.db.session import get_session


# ==============================================================================
# Partners
# ==============================================================================

PARTNERS = [
    {"code": "FIF", "name": "FIF Group", "phone": "021-1500920"},
    {"code": "ADIRA", "name": "Adira Finance", "phone": "021-1500511"},
    {"code": "WOM", "name": "WOM Finance", "phone": "021-1500366"},
    {"code": "BAF", "name": "BAF (Bussan Auto Finance)", "phone": "021-29619000"},
]


# ==============================================================================
# Rate sheet (shared by every partner)
# ==============================================================================

# (category, condition, min DP %, max DP %, admin fee, {tenor: flat rate % per year})
RATE_SHEET = [
    (
        VehicleCategory.MOTOR,
        VehicleCondition.BARU,
        Decimal("10"),
        Decimal("50"),
        Decimal("500000"),
        {12: Decimal("14"), 18: Decimal("15"), 24: Decimal("16"), 30: Decimal("17"), 36: Decimal("18")},
    ),
    (
        VehicleCategory.MOTOR,
        VehicleCondition.BEKAS,
        Decimal("20"),
        Decimal("50"),
        Decimal("750000"),
        {12: Decimal("18"), 18: Decimal("20"), 24: Decimal("22")},
    ),
]


def build_rates() -> list[LeasingRateRow]:
    """One unattached rate row per sheet entry; the caller assigns the partner."""
    rows = []
    for category, condition, min_dp, max_dp, admin_fee, rates in RATE_SHEET:
        for tenor, interest_rate in rates.items():
            rows.append(
                LeasingRateRow(
                    vehicle_category=category.value,
                    vehicle_condition=condition.value,
                    tenor=tenor,
                    interest_rate=interest_rate,
                    min_dp_percentage=min_dp,
                    max_dp_percentage=max_dp,
                    admin_fee=admin_fee,
                )
            )
    return rows


def seed_leasing_rates() -> None:
    print(f"🌱 Seeding {len(PARTNERS)} leasing partners...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent). Rates go with their partner.
        print("🗑️  Clearing existing leasing data...")
        deleted_rates = session.query(LeasingRateRow).delete()
        deleted_partners = session.query(LeasingPartnerRow).delete()
        print(f"   Deleted {deleted_partners} partners and {deleted_rates} rates")

        # Step 2: Insert partners with their rate sheet
        partners = []
        for data in PARTNERS:
            partner = LeasingPartnerRow(**data, is_active=True)
            partner.rates = build_rates()
            partners.append(partner)

        session.add_all(partners)
        session.flush()

        print(f"✅ Successfully seeded {len(partners)} partners!")

        print("\n📊 Partners:")
        for partner in partners:
            print(f"   {partner.code:<6} {partner.name} ({len(partner.rates)} rates)")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_leasing_rates()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
