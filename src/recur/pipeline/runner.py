"""Batch processing of example files and reference self-checks.

For every configured level, example ``n`` is read from
``<data_dir>/<input_pattern>`` and its output written to
``<data_dir>/<output_pattern>`` (both formatted with ``level`` and
``example``).
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union, TYPE_CHECKING

from recur.frames.loader import TokenReader
from recur.pipeline.levels import LevelProcessor

if TYPE_CHECKING:
    from recur.schemas import InternalConfig
    from recur.schemas.internal import InternalIOConfig

__all__ = ['REFERENCE_OUTPUTS', 'setup_logging', 'example_paths', 'process_files',
           'check_reference', 'run_reference_checks', 'run_levels']

logger = logging.getLogger(__name__)

# Known outputs of example 0 of each level
REFERENCE_OUTPUTS: Dict[int, str] = {
    1: "3505\n4352",
    2: "4260 7263 2\n6547 6547 1",
    3: "1 19 4\n4 16 4",
    4: "1 19 4\n4 16 4",
}


def setup_logging(config: "InternalConfig") -> None:
    """Configure the root logger with a console handler and optional file handler."""
    log_level = getattr(logging, config.logging.level, logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    if config.logging.log_file:
        log_path = Path(config.logging.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    logger.info("Logging: level=%s, file=%s", config.logging.level, config.logging.log_file)


def example_paths(io_config: "InternalIOConfig", level: int, example: int) -> tuple:
    """Input and output paths of one example."""
    data_dir = Path(io_config.data_dir)
    input_path = data_dir / io_config.input_pattern.format(level=level, example=example)
    output_path = data_dir / io_config.output_pattern.format(level=level, example=example)
    return input_path, output_path


def process_files(processor: LevelProcessor, level: int, examples: int,
                  io_config: "InternalIOConfig") -> List[Path]:
    """Process examples ``0..examples-1`` of ``level`` and write their outputs.

    Returns
    -------
    list of Path
        Written output files, in example order.

    Raises
    ------
    FileNotFoundError
        If an input file is missing.
    FrameParseError
        If an input file is malformed.
    """
    written = []
    for example in range(examples):
        input_path, output_path = example_paths(io_config, level, example)
        output = processor.run(level, TokenReader.from_file(input_path))

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output, encoding="utf-8")
        written.append(output_path)
        logger.info("Level %d example %d: %s -> %s", level, example, input_path, output_path)

    return written


def check_reference(processor: LevelProcessor, level: int,
                    source: Union[str, TokenReader], expected: str) -> bool:
    """Compare a level's output with its expected text, ignoring outer whitespace.

    ``source`` is either raw input text or a TokenReader. A mismatch is
    logged as an error, never raised.
    """
    reader = source if isinstance(source, TokenReader) else TokenReader.from_string(source)
    actual = processor.run(level, reader).strip()
    expected = expected.strip()

    if actual != expected:
        logger.error("Level %d reference check failed\nExpected: %s\nActual: %s",
                     level, expected, actual)
        return False
    return True


def run_reference_checks(processor: LevelProcessor, levels: List[int],
                         io_config: "InternalIOConfig") -> Dict[int, bool]:
    """Check example 0 of each level that has a reference output."""
    results = {}
    for level in levels:
        expected = REFERENCE_OUTPUTS.get(level)
        if expected is None:
            logger.warning("No reference output for level %d", level)
            continue
        input_path, _ = example_paths(io_config, level, 0)
        results[level] = check_reference(processor, level, TokenReader.from_file(input_path), expected)
    return results


def run_levels(config: "InternalConfig", check: bool = False,
               processor: Optional[LevelProcessor] = None) -> Dict[int, List[Path]]:
    """Run reference checks (optional) and process every configured level.

    Returns
    -------
    dict
        Written output files per level.
    """
    processor = processor or LevelProcessor(config)
    levels = sorted(config.levels.examples)

    if check:
        results = run_reference_checks(processor, levels, config.io)
        passed = sum(results.values())
        logger.info("Reference checks: %d/%d passed", passed, len(results))

    outputs = {}
    for level in levels:
        outputs[level] = process_files(processor, level, config.levels.examples[level], config.io)
    return outputs
