"""Stage contracts - fail-fast enforcement of processing invariants.

Contracts fail immediately and loudly when a stage does not produce the
invariants it promised.

Key principle:
- Pydantic validates config correctness
- The token reader validates input correctness
- Contracts validate processing correctness
"""

from recur.contracts.failure import ContractViolation
from recur.contracts.base import require
from recur.contracts.grid import assert_grid
from recur.contracts.clustering import assert_clustered
from recur.contracts.periodicity import assert_runs

__all__ = [
    "ContractViolation",
    "require",
    "assert_grid",
    "assert_clustered",
    "assert_runs",
]
