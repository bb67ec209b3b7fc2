"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, numfield.toml only contains
overrides. An empty file (or no file) yields the default field policy.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

from numfield.domain.types import (
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_MAX_DECIMALS,
    SanitizationConfig,
)

UNBOUNDED = "none"


class FieldConfig(BaseModel):
    """[field] section.

    Values are only range-checked when converted with
    :meth:`to_sanitization_config`, so a bad separator in the TOML file
    surfaces as a structured INVALID_CONFIG result rather than a crash
    during settings discovery.
    """

    model_config = {"frozen": True}

    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR
    allow_negative: bool = False
    max_decimals: int | None = DEFAULT_MAX_DECIMALS
    min_decimals: int = 0
    allow_leading_zeros: bool = True

    @field_validator("max_decimals", mode="before")
    @classmethod
    def _parse_unbounded(cls, value: Any) -> Any:
        """Accept ``"none"`` or ``-1`` (TOML has no null) as unbounded."""
        if isinstance(value, str) and value.strip().lower() == UNBOUNDED:
            return None
        if value == -1 or value == "-1":
            return None
        return value

    def to_sanitization_config(self) -> SanitizationConfig:
        """Build the domain config (raises ValidationError on bad values)."""
        return SanitizationConfig.model_validate(self.model_dump())
