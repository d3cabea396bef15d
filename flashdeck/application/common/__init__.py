"""
Application common module.

- Result: explicit success/failure values for expected outcomes
"""

from .result import Failure, Result, Success

__all__ = [
    "Failure",
    "Result",
    "Success",
]
