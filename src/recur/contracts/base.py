"""Base contract enforcement utility.

require() is the single enforcement mechanism for all contracts.
"""

from recur.contracts.failure import ContractViolation


def require(condition: bool, message: str) -> None:
    """Enforce a stage contract.

    Parameters
    ----------
    condition : bool
        The invariant that must hold. If False, ContractViolation is raised.
    message : str
        Explanation of the violated invariant.

    Raises
    ------
    ContractViolation
        If condition is False.

    Examples
    --------
    >>> require(len(cluster) > 0, "Cluster contract: empty cluster")
    """
    if not condition:
        raise ContractViolation(message)
