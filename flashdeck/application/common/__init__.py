"""
Application common module.

Contains building blocks shared by the application layer:
- Result: Success/Failure type for operation outcomes
"""

from .result import Failure, Result, Success

__all__ = [
    "Failure",
    "Result",
    "Success",
]
