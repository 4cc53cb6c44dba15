"""Generator configuration."""
from dataclasses import dataclass
from typing import Dict, Optional

from .rules import RULES


@dataclass
class RotaConfig:
    """Configuration for a rota generation run."""

    # Soft cap applied during the primary pass
    max_assignments_per_employee: int = RULES.max_assignments_per_employee

    # Fixed seed for reproducible runs; None draws from the process RNG
    seed: Optional[int] = None

    # Holiday feed
    fetch_holidays: bool = True
    holidays_url: str = RULES.holidays_url
    holiday_division: str = RULES.holiday_division
    holiday_timeout_seconds: int = RULES.holiday_timeout_seconds

    def to_dict(self) -> Dict:
        """Serialize to dictionary."""
        return {
            "max_assignments_per_employee": self.max_assignments_per_employee,
            "seed": self.seed,
            "fetch_holidays": self.fetch_holidays,
            "holidays_url": self.holidays_url,
            "holiday_division": self.holiday_division,
            "holiday_timeout_seconds": self.holiday_timeout_seconds,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "RotaConfig":
        """Create from dictionary, ignoring unknown keys."""
        cfg = cls()
        for key, value in d.items():
            if hasattr(cfg, key):
                setattr(cfg, key, value)
        return cfg
