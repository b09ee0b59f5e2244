"""Command-line entry point for level processing.

Usage::

    recur-levels
    recur-levels scripts/user_config.py --data-dir ./data
    recur-levels --level 3 --level 4 --check -v
"""

import argparse
import importlib.util
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from recur.pipeline.runner import run_levels, setup_logging
from recur.schemas import CLIConfig, ParamConfig, UserConfig, resolve_config

logger = logging.getLogger(__name__)


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from a Python file.

    Returns the raw dict before Pydantic validation.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load config module from {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def run_level_files(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    check: bool = False,
    verbose: bool = False,
) -> Dict[int, List[Path]]:
    """Resolve configuration and process the example files of every level.

    Parameters
    ----------
    user_config_path : str, optional
        Python file with a CONFIG dict. Expert defaults only if omitted.
    cli_args : dict, optional
        CLI overrides. Keys: data_dir, levels, check_rotations, log_level.
    check : bool
        Run the reference checks on example 0 first.
    verbose : bool
        Enable DEBUG logging and print the resolved config.
    """
    param_cfg = ParamConfig()

    user_cfg = None
    if user_config_path:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))

    cli_args = dict(cli_args or {})
    if verbose and "log_level" not in cli_args:
        cli_args["log_level"] = "DEBUG"
    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    config = resolve_config(param_cfg, user_cfg, cli_cfg)
    setup_logging(config)

    if verbose:
        print(json.dumps(config.model_dump(), indent=2))

    return run_levels(config, check=check)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Process recurring-object example files")
    parser.add_argument("config", nargs="?", help="Path to user config file")
    parser.add_argument("--data-dir", help="Directory holding the level-N folders")
    parser.add_argument("--level", type=int, action="append", dest="levels",
                        help="Level to process (repeatable, default: all)")
    parser.add_argument("--check-rotations", action="store_true", default=None,
                        help="Require constant rotation along periodic runs")
    parser.add_argument("--check", action="store_true",
                        help="Compare example 0 of each level with its reference output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    run_level_files(
        args.config,
        cli_args={
            "data_dir": args.data_dir,
            "levels": args.levels,
            "check_rotations": args.check_rotations,
        },
        check=args.check,
        verbose=args.verbose,
    )


if __name__ == "__main__":
    main()
