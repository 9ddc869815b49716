"""
Article-related Pydantic schemas.
"""
from pydantic import BaseModel, ConfigDict, Field, AliasChoices
from typing import Optional, List, Dict, Any, Literal
from datetime import datetime

ArticleStatus = Literal["draft", "pending", "scheduled", "processing", "posted", "published", "failed"]
GenerationType = Literal["manual", "scheduled"]


class ArticleCreate(BaseModel):
    """Request schema for manual article creation."""
    title: str
    website_id: int
    content: Optional[str] = None
    excerpt: Optional[str] = None
    status: ArticleStatus = "draft"
    category: Optional[str] = None
    tags: List[str] = []
    webhook_id: Optional[int] = None
    workflow_id: Optional[int] = None


class ArticleUpdate(BaseModel):
    """Partial update for an article."""
    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    status: Optional[ArticleStatus] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    webhook_id: Optional[int] = None
    scheduled_at: Optional[datetime] = None


class ArticleGenerateRequest(BaseModel):
    """Queue an article for generation by an n8n workflow."""
    website_id: int
    webhook_id: int
    topic: str
    scheduled_datetime: Optional[datetime] = None
    generation_type: GenerationType = "manual"
    workflow_id: Optional[int] = None


class ArticleComposeRequest(BaseModel):
    """Generate article content directly with OpenAI."""
    website_id: int
    topic: str
    style: str = "informative"
    tone: str = "professional"
    language: str = "English"
    target_audience: Optional[str] = None
    prompt_id: Optional[int] = None  # AI prompt template to use instead of the default
    auto_publish: bool = False


class WebsiteSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    url: str


class ArticleResponse(BaseModel):
    """Article as returned by the API."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    user_id: str
    website_id: int
    webhook_id: Optional[int] = None
    workflow_id: Optional[int] = None
    title: str
    slug: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    status: str
    generation_type: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    generation_progress: Optional[int] = None
    generation_message: Optional[str] = None
    error_message: Optional[str] = None
    failed_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    wp_post_id: Optional[int] = None
    wp_post_url: Optional[str] = None
    word_count: Optional[int] = None
    generation_time_seconds: Optional[int] = None
    ai_model: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = Field(
        default=None, validation_alias=AliasChoices("extra_metadata", "metadata")
    )
    website: Optional[WebsiteSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ArticleListResponse(BaseModel):
    """Paginated article listing."""
    articles: List[ArticleResponse]
    page: int
    limit: int
    total: int
    total_pages: int
