"""
Result contract shared by the service layer
"""

from dataclasses import dataclass
from typing import Any, Optional

from models.enums import ErrorType

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[Any] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[ErrorType] = None


def ok(data: Any = None, count: int = 0) -> ServiceResult:
    return ServiceResult(success=True, data=data, count=count)


def fail(error_type: ErrorType, error: str) -> ServiceResult:
    return ServiceResult(success=False, error=error, error_type=error_type)
