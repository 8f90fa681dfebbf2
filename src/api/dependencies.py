"""
FastAPI dependency providers wiring the application store into services
"""

from fastapi import Depends, Request

from database.repositories import Store
from services.accounts_service import AccountsService
from services.messages_service import MessagesService

def get_store(request: Request) -> Store:
    """Get the store created by the application lifespan"""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store not initialized")
    return store


def get_accounts_service(store: Store = Depends(get_store)) -> AccountsService:
    return AccountsService(store.accounts)


def get_messages_service(store: Store = Depends(get_store)) -> MessagesService:
    return MessagesService(store.messages, store.accounts)
