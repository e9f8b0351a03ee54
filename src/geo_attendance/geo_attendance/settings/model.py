from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Setting:
    """Domain entity: one row of the key-value settings table."""

    setting_key: str
    setting_value: str
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class OfficeLocation:
    latitude: float
    longitude: float
    radius: float
    address: str

    def to_dict(self) -> dict:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radius": self.radius,
            "address": self.address,
        }
