from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from dealer_credit.domain.errors import ValidationError
from dealer_credit.domain.vehicle import VehicleCategory, VehicleCondition
from dealer_credit.use_cases.get_credit_config import CreditConfigRequest, GetCreditConfig


def test_returns_policy_defaults_for_vehicle():
    config = GetCreditConfig().execute(
        CreditConfigRequest(
            vehicle_price=Decimal("20000000"),
            vehicle_category=VehicleCategory.MOTOR,
            vehicle_condition=VehicleCondition.BEKAS,
            tenor=18,
        )
    )

    assert config.interest_rate == Decimal("18.5")
    assert config.min_dp_percentage == Decimal("20")
    assert config.admin_fee == Decimal("750000")
    assert config.insurance_rate == Decimal("3.0")
    assert config.available_tenors == (12, 18, 24)


def test_rejects_negative_price_and_non_positive_tenor():
    request = CreditConfigRequest(
        vehicle_price=Decimal("-1"),
        vehicle_category=VehicleCategory.MOTOR,
        vehicle_condition=VehicleCondition.BARU,
        tenor=0,
    )

    with pytest.raises(ValidationError) as exc_info:
        GetCreditConfig().execute(request)

    assert [e["code"] for e in exc_info.value.errors] == ["INVALID_PRICE", "INVALID_TENOR"]


def test_rejection_is_logged_with_issue_codes(caplog):
    request = CreditConfigRequest(
        vehicle_price=Decimal("20000000"),
        vehicle_category=VehicleCategory.MOTOR,
        vehicle_condition=VehicleCondition.BARU,
        tenor=0,
    )

    with caplog.at_level(logging.INFO), pytest.raises(ValidationError) as exc_info:
        GetCreditConfig().execute(request)

    assert exc_info.value.message == "Credit config validation failed"
    assert exc_info.value.errors == [
        {"field": "tenor", "message": "Tenor must be greater than 0 months", "code": "INVALID_TENOR"}
    ]
    assert "Credit application rejected" in caplog.messages
