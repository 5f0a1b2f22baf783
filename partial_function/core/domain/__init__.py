"""
Domain models and value objects.

Contains segment records and the exception hierarchy.
"""

from partial_function.core.domain.errors import (
    BuilderConsumedError,
    ContractViolation,
    DefinitionError,
    DuplicateLowerBoundViolation,
    FunctionDomainViolation,
    InvalidBoundsViolation,
    PartialFunctionError,
    SegmentOverlapViolation,
    UndefinedInputError,
)
from partial_function.core.domain.segment import DualBoundedSegment, LowerBoundedSegment

__all__ = [
    # Errors
    "PartialFunctionError",
    "ContractViolation",
    "SegmentOverlapViolation",
    "DuplicateLowerBoundViolation",
    "InvalidBoundsViolation",
    "BuilderConsumedError",
    "UndefinedInputError",
    "FunctionDomainViolation",
    "DefinitionError",
    # Segments
    "DualBoundedSegment",
    "LowerBoundedSegment",
]
