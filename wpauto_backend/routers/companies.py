"""
Company management endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from wpauto_backend.core.security import get_current_user_id
from wpauto_backend.db.session import get_db
from wpauto_backend.schemas.company import (
    CompanyCreate,
    CompanyResponse,
    CompanyStatusUpdate,
    CompanyUpdate,
    CompanyWithStats,
)
from wpauto_backend.services.company_service import CompanyService

router = APIRouter()


@router.get("", response_model=List[CompanyWithStats])
async def list_companies(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List companies with website and article counts."""
    return CompanyService(db).list_with_stats()


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(
    company_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    company = CompanyService(db).get(company_id)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    return company


@router.post("", response_model=CompanyResponse, status_code=201)
async def create_company(
    request: CompanyCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a company owned by the caller."""
    return await CompanyService(db).create_company(user_id, request)


@router.put("/{company_id}", response_model=CompanyResponse)
async def update_company(
    company_id: int,
    request: CompanyUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    company = await CompanyService(db).update_company(company_id, user_id, request)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    return company


@router.patch("/{company_id}/status", response_model=CompanyResponse)
async def update_company_status(
    company_id: int,
    request: CompanyStatusUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Activate, deactivate or suspend a company."""
    company = await CompanyService(db).update_status(company_id, user_id, request.status)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    return company


@router.delete("/{company_id}")
async def delete_company(
    company_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    if not await CompanyService(db).delete_company(company_id, user_id):
        raise HTTPException(status_code=404, detail="Company not found")
    return {"success": True, "id": company_id}
