"""
Account-related Pydantic models
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class Account(BaseModel):
    """Stored account row, serialized with the camelCase wire names"""
    model_config = ConfigDict(populate_by_name=True)

    account_id: int = Field(alias="accountId")
    username: str
    password: str


class AccountRequest(BaseModel):
    """Registration and login payload. Fields stay optional so the service decides what is invalid."""
    username: Optional[str] = None
    password: Optional[str] = None
