"""ParamConfig: Expert defaults for recur.

This module defines the complete default configuration. ALL parameters must
have defaults here; runtime code never defines fallback values.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from recur.schemas.base import RecurBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class MatchingConfig(RecurBaseModel):
    """Shape matching used by clustering."""
    equality_mapper: Literal["binary", "exact"] = "binary"
    require_same_dimensions: bool = True

    @field_validator("equality_mapper", mode="before")
    @classmethod
    def normalize_mapper_name(cls, v):
        """Normalize mapper names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class PeriodicityConfig(RecurBaseModel):
    """Periodic run discovery."""
    min_occurrences: int = Field(4, ge=2, description="Occurrences a run must fit before end")
    check_rotations: bool = False
    rotation_comparator: Literal["none"] = "none"


class IOConfig(RecurBaseModel):
    """Example file locations, relative to data_dir."""
    data_dir: str = "."
    input_pattern: str = "level-{level}/lvl{level}-{example}.inp"
    output_pattern: str = "level-{level}/lev{level}-{example}.out"


class LevelsConfig(RecurBaseModel):
    """Number of example files per level."""
    examples: dict[int, int] = Field(default_factory=lambda: {1: 5, 2: 5, 3: 6, 4: 8})


class LoggingConfig(RecurBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Optional[str] = None

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v):
        if isinstance(v, str):
            return v.upper().strip()
        return v


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(RecurBaseModel):
    """Complete expert configuration with defaults for every parameter."""

    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    periodicity: PeriodicityConfig = Field(default_factory=PeriodicityConfig)
    io: IOConfig = Field(default_factory=IOConfig)
    levels: LevelsConfig = Field(default_factory=LevelsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
