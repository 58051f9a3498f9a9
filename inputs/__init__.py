"""
Calculation inputs: the params record, failure kinds, and validation.
"""

from .params import ProjectionFailure, ProjectionParams
from .validators import FAILURE_MESSAGES, ValidationResult, blocking_failures, validate_params

__all__ = [
    "ProjectionFailure",
    "ProjectionParams",
    "FAILURE_MESSAGES",
    "ValidationResult",
    "blocking_failures",
    "validate_params",
]
