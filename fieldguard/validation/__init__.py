"""Validation package - predicates and result types for validated holders.

Predicates are pure checks; holders decide what a rejection does to their
state. Nothing here transforms a value.
"""

from . import predicates
from .base import ValidationResult, ValidationViolation
from .predicates import Predicate

__all__ = [
    "Predicate",
    "ValidationResult",
    "ValidationViolation",
    "predicates",
]
