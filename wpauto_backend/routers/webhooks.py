"""
Webhook management endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from wpauto_backend.core.security import get_current_user_id
from wpauto_backend.db.session import get_db
from wpauto_backend.schemas.webhook import (
    WebhookCreate,
    WebhookDeleteResponse,
    WebhookResponse,
    WebhookUpdate,
)
from wpauto_backend.services.webhook_service import WebhookService

router = APIRouter()


@router.get("", response_model=List[WebhookResponse])
async def list_webhooks(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return WebhookService(db).list_for_user(user_id)


@router.get("/{webhook_id}", response_model=WebhookResponse)
async def get_webhook(
    webhook_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    webhook = WebhookService(db).get(webhook_id, user_id)
    if not webhook:
        raise HTTPException(status_code=404, detail="Webhook not found")
    return webhook


@router.post("", response_model=WebhookResponse, status_code=201)
async def create_webhook(
    request: WebhookCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return await WebhookService(db).create_webhook(user_id, request)


@router.put("/{webhook_id}", response_model=WebhookResponse)
async def update_webhook(
    webhook_id: int,
    request: WebhookUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    webhook = await WebhookService(db).update_webhook(webhook_id, user_id, request)
    if not webhook:
        raise HTTPException(status_code=404, detail="Webhook not found")
    return webhook


@router.delete("/{webhook_id}", response_model=WebhookDeleteResponse)
async def delete_webhook(
    webhook_id: int,
    force: bool = False,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Delete a webhook.

    Answers 409 with the affected articles when the webhook is still in use,
    unless ``force`` is set.
    """
    result = await WebhookService(db).delete_webhook(webhook_id, user_id, force=force)
    if result is None:
        raise HTTPException(status_code=404, detail="Webhook not found")
    if result.requires_confirmation:
        return JSONResponse(status_code=409, content=result.model_dump())
    return result
