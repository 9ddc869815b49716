"""
Article endpoints: CRUD, n8n generation requests and direct composition.
"""
import logging
from typing import Optional

import openai
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from wpauto_backend.core.security import get_current_user_id
from wpauto_backend.db.session import get_db
from wpauto_backend.schemas.article import (
    ArticleComposeRequest,
    ArticleCreate,
    ArticleGenerateRequest,
    ArticleListResponse,
    ArticleResponse,
    ArticleUpdate,
)
from wpauto_backend.services.article_service import ArticleReferenceError, ArticleService
from wpauto_backend.services.content_generator import ContentGenerator, MissingAPIKeyError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    status: Optional[str] = None,
    generation_type: Optional[str] = None,
    search: Optional[str] = None,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Paginated article listing. ``all`` disables a filter."""
    return ArticleService(db).list_articles(
        user_id,
        page=page,
        limit=limit,
        status=status,
        generation_type=generation_type,
        search=search
    )


@router.post("/generate", response_model=ArticleResponse, status_code=201)
async def generate_article(
    request: ArticleGenerateRequest,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Queue an article for generation by an n8n workflow."""
    service = ArticleService(db)
    try:
        article = await service.queue_generation(user_id, request)
    except ArticleReferenceError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return service.get(article.id, user_id)


@router.post("/compose", response_model=ArticleResponse, status_code=201)
async def compose_article(
    request: ArticleComposeRequest,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Write an article directly with OpenAI and store it."""
    try:
        article = await ContentGenerator(db).compose_article(user_id, request)
    except MissingAPIKeyError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except ArticleReferenceError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        logger.error(f"Article composition failed: {e}")
        raise HTTPException(status_code=502, detail=f"Article generation failed: {e}")
    except openai.OpenAIError as e:
        logger.error(f"OpenAI request failed during composition: {e}")
        raise HTTPException(status_code=502, detail=f"Article generation failed: {e}")
    return ArticleService(db).get(article.id, user_id)


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    article = ArticleService(db).get(article_id, user_id)
    if not article:
        raise HTTPException(status_code=404, detail="Article not found")
    return article


@router.post("", response_model=ArticleResponse, status_code=201)
async def create_article(
    request: ArticleCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    service = ArticleService(db)
    try:
        article = await service.create_article(user_id, request)
    except ArticleReferenceError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return service.get(article.id, user_id)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: int,
    request: ArticleUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    try:
        article = await ArticleService(db).update_article(article_id, user_id, request)
    except ArticleReferenceError as e:
        raise HTTPException(status_code=404, detail=str(e))
    if not article:
        raise HTTPException(status_code=404, detail="Article not found")
    return article


@router.delete("/{article_id}")
async def delete_article(
    article_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    if not await ArticleService(db).delete_article(article_id, user_id):
        raise HTTPException(status_code=404, detail="Article not found")
    return {"success": True, "id": article_id}
