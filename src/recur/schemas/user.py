"""UserConfig: Forgiving, minimal user-facing configuration.

Accepts flat upper-case aliases (DATA_DIR, EQUALITY_MAPPER, ...) as well as
nested sections. Users only specify what they want to override.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from recur.schemas.base import RecurBaseModel


class UserMatchingConfig(RecurBaseModel):
    """User-facing matching config."""
    equality_mapper: Optional[str] = None
    require_same_dimensions: Optional[bool] = None

    @field_validator("equality_mapper", mode="before")
    @classmethod
    def normalize_mapper(cls, v):
        if isinstance(v, str):
            return v.lower().strip()
        return v


class UserPeriodicityConfig(RecurBaseModel):
    """User-facing periodicity config."""
    min_occurrences: Optional[int] = None
    check_rotations: Optional[bool] = None
    rotation_comparator: Optional[str] = None


class UserIOConfig(RecurBaseModel):
    """User-facing file locations."""
    data_dir: Optional[str] = None
    input_pattern: Optional[str] = None
    output_pattern: Optional[str] = None


class UserConfig(RecurBaseModel):
    """User-facing configuration schema.

    Usage
    -----
        user_cfg = UserConfig(
            DATA_DIR="/data/frames",
            EQUALITY_MAPPER="exact",
            MIN_OCCURRENCES=5,
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    # Flat aliases
    data_dir: Optional[str] = Field(None, alias="DATA_DIR")
    equality_mapper: Optional[str] = Field(None, alias="EQUALITY_MAPPER")
    require_same_dimensions: Optional[bool] = Field(None, alias="REQUIRE_SAME_DIMENSIONS")
    min_occurrences: Optional[int] = Field(None, alias="MIN_OCCURRENCES")
    check_rotations: Optional[bool] = Field(None, alias="CHECK_ROTATIONS")
    examples: Optional[dict[int, int]] = Field(None, alias="EXAMPLES")
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(
        None, alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, alias="LOG_FILE")

    # Nested overrides (advanced users)
    matching: Optional[UserMatchingConfig] = None
    periodicity: Optional[UserPeriodicityConfig] = None
    io: Optional[UserIOConfig] = None

    model_config = RecurBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("equality_mapper", mode="before")
    @classmethod
    def normalize_mapper(cls, v):
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure."""
        overrides = {}

        matching = {}
        if self.equality_mapper is not None:
            matching["equality_mapper"] = self.equality_mapper
        if self.require_same_dimensions is not None:
            matching["require_same_dimensions"] = self.require_same_dimensions
        if self.matching is not None:
            matching.update(self.matching.model_dump(exclude_none=True))
        if matching:
            overrides["matching"] = matching

        periodicity = {}
        if self.min_occurrences is not None:
            periodicity["min_occurrences"] = self.min_occurrences
        if self.check_rotations is not None:
            periodicity["check_rotations"] = self.check_rotations
        if self.periodicity is not None:
            periodicity.update(self.periodicity.model_dump(exclude_none=True))
        if periodicity:
            overrides["periodicity"] = periodicity

        io = {}
        if self.data_dir is not None:
            io["data_dir"] = str(self.data_dir)
        if self.io is not None:
            io.update(self.io.model_dump(exclude_none=True))
        if io:
            overrides["io"] = io

        if self.examples is not None:
            overrides["levels"] = {"examples": self.examples}

        logging_cfg = {}
        if self.log_level is not None:
            logging_cfg["level"] = self.log_level
        if self.log_file is not None:
            logging_cfg["log_file"] = self.log_file
        if logging_cfg:
            overrides["logging"] = logging_cfg

        return overrides
