"""
Error types for the telluris core.

The core has a single failure class: contract violations. They signal a
programmer error in the caller (out-of-domain coordinates, negative shrink
amounts, undersized grid buffers) and are never meant to be caught and
retried.
"""


class ContractViolation(AssertionError):
    """Raised when a caller breaks a documented precondition."""
    pass


def require(condition: bool, message: str) -> None:
    """Check a precondition, regardless of interpreter optimisation flags.

    Args:
        condition: Value that must hold
        message: Description of the broken contract

    Raises:
        ContractViolation: If ``condition`` is false
    """
    if not condition:
        raise ContractViolation(message)


def debug_require(condition: bool, message: str) -> None:
    """Check a precondition only while ``__debug__`` is set.

    Running Python with ``-O`` disables these checks; callers on optimised
    paths are expected to pre-clamp their inputs.
    """
    if __debug__ and not condition:
        raise ContractViolation(message)
