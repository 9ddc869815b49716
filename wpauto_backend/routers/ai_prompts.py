"""
AI prompt template endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from wpauto_backend.core.security import get_current_user_id
from wpauto_backend.db.session import get_db
from wpauto_backend.schemas.ai_prompt import AIPromptCreate, AIPromptResponse, AIPromptUpdate
from wpauto_backend.services.ai_prompt_service import AIPromptService

router = APIRouter()


@router.get("", response_model=List[AIPromptResponse])
async def list_prompts(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return AIPromptService(db).list_for_user(user_id)


@router.get("/{prompt_id}", response_model=AIPromptResponse)
async def get_prompt(
    prompt_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    prompt = AIPromptService(db).get(prompt_id, user_id)
    if not prompt:
        raise HTTPException(status_code=404, detail="AI prompt not found")
    return prompt


@router.post("", response_model=AIPromptResponse, status_code=201)
async def create_prompt(
    request: AIPromptCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return await AIPromptService(db).create_prompt(user_id, request)


@router.put("/{prompt_id}", response_model=AIPromptResponse)
async def update_prompt(
    prompt_id: int,
    request: AIPromptUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    prompt = await AIPromptService(db).update_prompt(prompt_id, user_id, request)
    if not prompt:
        raise HTTPException(status_code=404, detail="AI prompt not found")
    return prompt


@router.delete("/{prompt_id}")
async def delete_prompt(
    prompt_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    if not await AIPromptService(db).delete_prompt(prompt_id, user_id):
        raise HTTPException(status_code=404, detail="AI prompt not found")
    return {"success": True, "id": prompt_id}
