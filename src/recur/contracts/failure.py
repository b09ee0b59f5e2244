"""Failure type for contract violations.

All violations raise the same exception type, so callers can handle
processing bugs uniformly.
"""


class ContractViolation(RuntimeError):
    """Raised when a processing stage breaks an invariant it promised.

    This indicates a bug in processing logic, not bad input.

    Key distinction:
    - FrameParseError (ValueError): malformed input record
    - ValidationError: bad configuration (handled by Pydantic)
    - ContractViolation: processing bug (programmer error)
    """
    pass
