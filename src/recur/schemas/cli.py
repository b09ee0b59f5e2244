"""CLIConfig: Command-line operational overrides.

Operational settings that commonly change between runs: data directory,
levels to process, verbosity. Highest priority in config resolution.
"""

from typing import Literal, Optional
from pydantic import field_validator
from recur.schemas.base import RecurBaseModel


class CLIConfig(RecurBaseModel):
    """Command-line configuration overrides.

    Usage
    -----
        cli_cfg = CLIConfig(data_dir="./examples", levels=[3], log_level="DEBUG")
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    data_dir: Optional[str] = None
    levels: Optional[list[int]] = None
    check_rotations: Optional[bool] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    @field_validator("levels")
    @classmethod
    def levels_are_positive(cls, v):
        if v is not None and any(level < 1 for level in v):
            raise ValueError(f"Levels must be >= 1, got {v}")
        return v

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        ``levels`` is not an override of its own: resolve_config() uses it to
        restrict the resolved example counts.
        """
        overrides = {}

        if self.data_dir is not None:
            overrides["io"] = {"data_dir": str(self.data_dir)}

        if self.check_rotations is not None:
            overrides["periodicity"] = {"check_rotations": self.check_rotations}

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
