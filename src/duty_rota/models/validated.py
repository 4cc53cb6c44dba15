"""
Pydantic Validated Models
=========================
Validation layer for configuration and range input at the UI/CLI boundary.

Usage:
    from duty_rota.models.validated import ValidatedRotaConfig, RangeInput

    config = ValidatedRotaConfig(max_assignments_per_employee=3).to_dataclass()
    date_range = RangeInput(start="2024-04-01", end="2024-04-05").to_range()

Note: the engine works on the plain dataclasses; these models only guard
the edges.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from duty_rota.errors import InvalidRange
from duty_rota.models.config import RotaConfig
from duty_rota.models.rules import HOLIDAY_DIVISIONS, RULES
from duty_rota.models.unavailability import DateRange


class ValidatedRotaConfig(BaseModel):
    """
    Pydantic-validated generator configuration.

    Use this for strict validation at API boundaries.
    Can be converted to/from the dataclass RotaConfig.
    """
    model_config = ConfigDict(validate_assignment=True)

    max_assignments_per_employee: int = Field(
        default=RULES.max_assignments_per_employee, ge=1, le=31,
        description="Soft cap per employee in the primary pass",
    )
    seed: Optional[int] = Field(default=None, ge=0)
    fetch_holidays: bool = Field(default=True)
    holidays_url: str = Field(default=RULES.holidays_url, min_length=1)
    holiday_division: str = Field(default=RULES.holiday_division)
    holiday_timeout_seconds: int = Field(default=RULES.holiday_timeout_seconds, ge=1, le=120)

    @field_validator("holiday_division")
    @classmethod
    def validate_division(cls, v: str) -> str:
        """Ensure the division is one the holiday feed publishes."""
        if v not in HOLIDAY_DIVISIONS:
            raise ValueError(f"holiday_division must be one of {HOLIDAY_DIVISIONS}")
        return v

    @field_validator("holidays_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("holidays_url must be an http(s) URL")
        return v

    def to_dataclass(self) -> RotaConfig:
        """Convert to dataclass RotaConfig for the engine."""
        return RotaConfig(**self.model_dump())

    @classmethod
    def from_dataclass(cls, config: RotaConfig) -> "ValidatedRotaConfig":
        """Create from dataclass RotaConfig."""
        return cls(**config.to_dict())


class RangeInput(BaseModel):
    """Raw start/end strings as typed into a form."""
    start: Optional[str] = None
    end: Optional[str] = None

    def to_range(self) -> DateRange:
        """Convert to a DateRange. Raises InvalidRange on missing or inverted bounds."""
        return DateRange.from_keys(self.start, self.end)

    @classmethod
    def parse(cls, start: Optional[str], end: Optional[str]) -> DateRange:
        try:
            return cls(start=start, end=end).to_range()
        except ValidationError as e:
            raise InvalidRange() from e
