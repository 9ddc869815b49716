"""
Website management endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from wpauto_backend.core.security import get_current_user_id
from wpauto_backend.db.session import get_db
from wpauto_backend.schemas.website import (
    ConnectionTestResponse,
    WebsiteCreate,
    WebsiteResponse,
    WebsiteUpdate,
)
from wpauto_backend.services.website_service import WebsiteService, WordPressConnectionError

router = APIRouter()


@router.get("", response_model=List[WebsiteResponse])
async def list_websites(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return WebsiteService(db).list_for_user(user_id)


@router.get("/{website_id}", response_model=WebsiteResponse)
async def get_website(
    website_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    website = WebsiteService(db).get(website_id, user_id)
    if not website:
        raise HTTPException(status_code=404, detail="Website not found")
    return website


@router.post("", response_model=WebsiteResponse, status_code=201)
async def create_website(
    request: WebsiteCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return await WebsiteService(db).create_website(user_id, request)


@router.put("/{website_id}", response_model=WebsiteResponse)
async def update_website(
    website_id: int,
    request: WebsiteUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    website = await WebsiteService(db).update_website(website_id, user_id, request)
    if not website:
        raise HTTPException(status_code=404, detail="Website not found")
    return website


@router.delete("/{website_id}")
async def delete_website(
    website_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    if not await WebsiteService(db).delete_website(website_id, user_id):
        raise HTTPException(status_code=404, detail="Website not found")
    return {"success": True, "id": website_id}


@router.post("/{website_id}/test-connection", response_model=ConnectionTestResponse)
async def test_connection(
    website_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Probe the website's WordPress REST API and record its health."""
    service = WebsiteService(db)
    website = service.get(website_id, user_id)
    if not website:
        raise HTTPException(status_code=404, detail="Website not found")

    try:
        return await service.test_connection(website)
    except WordPressConnectionError as e:
        raise HTTPException(status_code=502, detail=str(e))
