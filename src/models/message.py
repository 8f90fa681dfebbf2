"""
Message-related Pydantic models
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class Message(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message_id: int = Field(alias="messageId")
    posted_by: int = Field(alias="postedBy")
    message_text: str = Field(alias="messageText")
    time_posted_epoch: Optional[int] = Field(None, alias="timePostedEpoch")


class MessageCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    posted_by: Optional[int] = Field(None, alias="postedBy")
    message_text: Optional[str] = Field(None, alias="messageText")
    time_posted_epoch: Optional[int] = Field(None, alias="timePostedEpoch")


class MessageUpdateRequest(BaseModel):
    """PATCH payload - only the text can change"""
    model_config = ConfigDict(populate_by_name=True)

    message_text: Optional[str] = Field(None, alias="messageText")
