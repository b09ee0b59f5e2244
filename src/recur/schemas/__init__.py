"""Pydantic configuration schemas for recur.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
CLIConfig : class
    Command-line operational overrides
"""

from recur.schemas.resolve import resolve_config
from recur.schemas.internal import InternalConfig
from recur.schemas.param import ParamConfig
from recur.schemas.user import UserConfig
from recur.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
