"""
Data preparation — building the memorandum configuration and validating it at startup.
"""

from .loader import load_memorandum, load_default_memorandum
from .validators import ValidationResult, validate_constants, validate_scenarios

__all__ = [
    "load_memorandum",
    "load_default_memorandum",
    "ValidationResult",
    "validate_constants",
    "validate_scenarios",
]
