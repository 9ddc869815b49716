"""
Workflow endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from wpauto_backend.core.security import get_current_user_id
from wpauto_backend.db.session import get_db
from wpauto_backend.schemas.workflow import WorkflowCreate, WorkflowResponse, WorkflowUpdate
from wpauto_backend.services.workflow_service import WorkflowReferenceError, WorkflowService

router = APIRouter()


@router.get("", response_model=List[WorkflowResponse])
async def list_workflows(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return WorkflowService(db).list_for_user(user_id)


@router.get("/{workflow_id}", response_model=WorkflowResponse)
async def get_workflow(
    workflow_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    workflow = WorkflowService(db).get(workflow_id, user_id)
    if not workflow:
        raise HTTPException(status_code=404, detail="Workflow not found")
    return workflow


@router.post("", response_model=WorkflowResponse, status_code=201)
async def create_workflow(
    request: WorkflowCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        return await WorkflowService(db).create_workflow(user_id, request)
    except WorkflowReferenceError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{workflow_id}", response_model=WorkflowResponse)
async def update_workflow(
    workflow_id: int,
    request: WorkflowUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        workflow = await WorkflowService(db).update_workflow(workflow_id, user_id, request)
    except WorkflowReferenceError as e:
        raise HTTPException(status_code=404, detail=str(e))
    if not workflow:
        raise HTTPException(status_code=404, detail="Workflow not found")
    return workflow


@router.delete("/{workflow_id}")
async def delete_workflow(
    workflow_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    if not await WorkflowService(db).delete_workflow(workflow_id, user_id):
        raise HTTPException(status_code=404, detail="Workflow not found")
    return {"success": True, "id": workflow_id}
