"""
Message API routes
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends, Response

from api.dependencies import get_messages_service
from models.message import Message, MessageCreateRequest, MessageUpdateRequest
from services.messages_service import MessagesService

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/messages", response_model=Message)
async def create_message(
    request: MessageCreateRequest,
    messages_service: MessagesService = Depends(get_messages_service)
):
    """Create a new message"""
    result = await messages_service.create_message(
        posted_by=request.posted_by,
        message_text=request.message_text,
        time_posted_epoch=request.time_posted_epoch
    )

    if not result.success:
        logger.info(f"Message creation rejected: {result.error}")
        raise HTTPException(status_code=400, detail=result.error)

    return result.data

@router.get("/messages", response_model=List[Message])
async def get_all_messages(
    messages_service: MessagesService = Depends(get_messages_service)
):
    """List every message, oldest first"""
    result = await messages_service.get_all_messages()
    return result.data

@router.get("/messages/{message_id}", response_model=Message)
async def get_message(
    message_id: int,
    messages_service: MessagesService = Depends(get_messages_service)
):
    """Get a message by id. An unknown id answers 200 with an empty body."""
    result = await messages_service.get_message_by_id(message_id)

    if result.data is None:
        return Response(status_code=200)

    return result.data

@router.delete("/messages/{message_id}")
async def delete_message(
    message_id: int,
    messages_service: MessagesService = Depends(get_messages_service)
):
    """Delete a message. Answers 1 when a row was removed, an empty body otherwise."""
    result = await messages_service.delete_message(message_id)

    if result.count == 0:
        return Response(status_code=200)

    return result.count

@router.patch("/messages/{message_id}")
async def update_message(
    message_id: int,
    request: MessageUpdateRequest,
    messages_service: MessagesService = Depends(get_messages_service)
):
    """Replace the text of a message"""
    result = await messages_service.update_message_text(message_id, request.message_text)

    if not result.success:
        logger.info(f"Message update rejected for {message_id}: {result.error}")
        raise HTTPException(status_code=400, detail=result.error)

    return result.count

@router.get("/accounts/{account_id}/messages", response_model=List[Message])
async def get_messages_by_account(
    account_id: int,
    messages_service: MessagesService = Depends(get_messages_service)
):
    """List the messages posted by one account"""
    result = await messages_service.get_messages_by_account(account_id)
    return result.data
