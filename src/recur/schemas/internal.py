"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and frozen. No .get() calls or fallback defaults in runtime code.
"""

from typing import Literal, Optional
from pydantic import ConfigDict, Field
from recur.schemas.base import RecurBaseModel


class InternalMatchingConfig(RecurBaseModel):
    """Runtime matching configuration."""
    equality_mapper: Literal["binary", "exact"]
    require_same_dimensions: bool


class InternalPeriodicityConfig(RecurBaseModel):
    """Runtime periodicity configuration."""
    min_occurrences: int = Field(ge=2)
    check_rotations: bool
    rotation_comparator: Literal["none"]


class InternalIOConfig(RecurBaseModel):
    """Runtime file locations."""
    data_dir: str
    input_pattern: str
    output_pattern: str


class InternalLevelsConfig(RecurBaseModel):
    """Runtime example counts."""
    examples: dict[int, int]


class InternalLoggingConfig(RecurBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    log_file: Optional[str]


class InternalConfig(RecurBaseModel):
    """Authoritative runtime configuration.

    Usage
    -----
    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.min_occurrences = config.periodicity.min_occurrences  # NOT .get()
    """

    matching: InternalMatchingConfig
    periodicity: InternalPeriodicityConfig
    io: InternalIOConfig
    levels: InternalLevelsConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,
    )
