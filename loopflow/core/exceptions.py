"""
Exception hierarchy for LoopFlow
"""


class LoopFlowError(Exception):
    """Base class for all LoopFlow errors"""


class InvariantViolation(LoopFlowError, ValueError):
    """Raised when loops data would break row/column alignment or index range"""


class InvalidArgument(LoopFlowError, ValueError):
    """Raised when an operation receives a parameter it cannot use"""


class ConfigurationError(LoopFlowError, ValueError):
    """Raised when a configuration file cannot be read or applied"""
