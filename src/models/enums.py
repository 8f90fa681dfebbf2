"""
Enum definitions for the Social Media Backend
"""

from enum import Enum

class ErrorType(str, Enum):
    """
    Failure categories returned by the service layer.

    - VALIDATION_ERROR: malformed input (blank/too-long text, weak password, blank username)
    - DUPLICATE_ERROR: uniqueness violation (username already registered)
    - REFERENCE_ERROR: dangling foreign reference (message author does not exist)
    - AUTH_ERROR: credential mismatch or unknown user
    - NOT_FOUND_ERROR: operation targets a nonexistent entity where absence is an error
    """
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE_ERROR = "DUPLICATE_ERROR"
    REFERENCE_ERROR = "REFERENCE_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    NOT_FOUND_ERROR = "NOT_FOUND_ERROR"
