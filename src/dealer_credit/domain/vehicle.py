from __future__ import annotations

from enum import Enum


class VehicleCategory(str, Enum):
    MOTOR = "motor"  # two-wheel
    MOBIL = "mobil"  # four-wheel


class VehicleCondition(str, Enum):
    BARU = "baru"  # new
    BEKAS = "bekas"  # used
