"""Root-level pytest fixtures for the recur test suite.

Provides shared configuration fixtures following the Pydantic-based
configuration layers. Tests use these instead of building raw dict configs.
"""

import logging

import pytest

from recur.schemas import ParamConfig, UserConfig, CLIConfig, resolve_config
from recur.pipeline.levels import LevelProcessor


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Examples
    --------
    >>> def test_exact_matching(make_config):
    ...     config = make_config(EQUALITY_MAPPER="exact")
    ...     assert config.matching.equality_mapper == "exact"
    """
    def _make(cli=None, **user_overrides):
        user = UserConfig(**user_overrides) if user_overrides else None
        cli_cfg = CLIConfig(**cli) if cli else None
        return resolve_config(param_config, user, cli_cfg)

    return _make


@pytest.fixture
def processor(internal_config):
    return LevelProcessor(internal_config)


# =============================================================================
# Logging
# =============================================================================

@pytest.fixture
def restore_root_logging():
    """Undo root logger changes made by setup_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


# =============================================================================
# Example files
# =============================================================================

@pytest.fixture
def write_example(tmp_path):
    """Write ``text`` as example ``example`` of ``level`` under tmp_path."""
    def _write(level, example, text):
        path = tmp_path / f"level-{level}" / f"lvl{level}-{example}.inp"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        return path

    return _write
