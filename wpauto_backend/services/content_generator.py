"""
Direct article composition with OpenAI, for articles that bypass n8n.
"""
from __future__ import annotations

import logging
import re
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from wpauto_backend.core.config import settings
from wpauto_backend.core.openai_client import run_text_structured
from wpauto_backend.db.base import AIPrompt, Article, Website
from wpauto_backend.schemas.article import ArticleComposeRequest
from wpauto_backend.services.activity_service import ActivityService
from wpauto_backend.services.article_service import ArticleReferenceError, count_words, slugify

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = (
    "You are an experienced web editor writing articles for WordPress sites. "
    "Write clean HTML with <h2>/<h3> headings, short paragraphs and lists where "
    "useful. No inline CSS, no scripts. Reply with a single valid JSON object only."
)

DEFAULT_TEMPLATE = """Write a {style} article about "{topic}" in {language} language with a {tone} tone.{audience}

Requirements:
- Write a comprehensive, well-structured article
- Include an engaging introduction
- Use clear headings and subheadings
- Provide valuable insights and information
- End with a strong conclusion
- Aim for 800-1200 words

Format the output as JSON with these fields:
{{
  "title": "Article title",
  "excerpt": "Brief 2-3 sentence summary",
  "content": "Full article content with HTML formatting"
}}"""


class MissingAPIKeyError(RuntimeError):
    """Raised when composition is requested without an OpenAI key."""


class _TemplateValues(dict):
    def __missing__(self, key):
        return "{" + key + "}"


def render_prompt(request: ArticleComposeRequest, template: Optional[str] = None) -> str:
    """Fill a prompt template with the request's parameters.

    Unknown placeholders are left untouched. A template that is not a valid
    format string is used verbatim.
    """
    audience = f" Target audience: {request.target_audience}." if request.target_audience else ""
    values = _TemplateValues(
        topic=request.topic,
        style=request.style,
        tone=request.tone,
        language=request.language,
        target_audience=request.target_audience or "",
        audience=audience,
    )
    template = template or DEFAULT_TEMPLATE
    try:
        return template.format_map(values)
    except (ValueError, IndexError):
        return template


def _strip_tags(html: str) -> str:
    return re.sub(r"<[^>]+>", " ", html or "")


def normalize_result(raw: Dict[str, Any], topic: str) -> Dict[str, str]:
    """Pull title/excerpt/content out of the model's JSON, tolerating wrappers."""
    candidate = raw
    for wrap in ("article", "result", "data"):
        if isinstance(candidate.get(wrap), dict):
            candidate = candidate[wrap]
            break

    lower_map = {k.lower(): k for k in candidate.keys()}

    def get_ci(*names: str) -> Optional[Any]:
        for name in names:
            key = lower_map.get(name.lower())
            if key is not None:
                return candidate[key]
        return None

    content = get_ci("content", "article_html", "html")
    if not isinstance(content, str) or not content.strip():
        raise ValueError("Missing or invalid 'content'.")

    title = get_ci("title", "headline")
    if not isinstance(title, str) or not title.strip():
        title = f"{topic} - AI Generated Article"

    excerpt = get_ci("excerpt", "summary")
    if not isinstance(excerpt, str) or not excerpt.strip():
        words: List[str] = _strip_tags(content).split()
        excerpt = " ".join(words[:40])

    return {"title": title.strip(), "excerpt": excerpt.strip(), "content": content}


class ContentGenerator:
    """Composes and stores an article in a single OpenAI call."""

    def __init__(self, db: Session):
        self.db = db
        self.activity = ActivityService(db)

    async def compose_article(self, user_id: str, request: ArticleComposeRequest) -> Article:
        """
        Generate and save an article.

        Raises:
            MissingAPIKeyError: if no OpenAI key is configured
            ArticleReferenceError: if the website or prompt is not the user's
            ValueError: if the model output cannot be used
        """
        if not settings.OPENAI_API_KEY:
            raise MissingAPIKeyError("OpenAI API key not configured")

        website = self.db.query(Website).filter(
            Website.id == request.website_id, Website.user_id == user_id
        ).first()
        if not website:
            raise ArticleReferenceError(f"Website {request.website_id} not found")

        template = None
        if request.prompt_id is not None:
            prompt = self.db.query(AIPrompt).filter(
                AIPrompt.id == request.prompt_id, AIPrompt.user_id == user_id
            ).first()
            if not prompt:
                raise ArticleReferenceError(f"AI prompt {request.prompt_id} not found")
            template = prompt.template

        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": render_prompt(request, template)},
        ]

        started = time.monotonic()
        logger.info("Calling OpenAI for article composition", extra={"topic": request.topic})
        raw = await run_text_structured(messages, context=f"article '{request.topic}'")
        payload = normalize_result(raw, request.topic)
        generation_time = int(time.monotonic() - started)

        article = Article(
            user_id=user_id,
            website_id=website.id,
            title=payload["title"],
            slug=slugify(payload["title"]),
            content=payload["content"],
            excerpt=payload["excerpt"],
            status="published" if request.auto_publish else "draft",
            generation_type="manual",
            ai_model=settings.OPENAI_TEXT_MODEL,
            generation_time_seconds=generation_time,
            word_count=count_words(_strip_tags(payload["content"])),
            extra_metadata={
                "generation_params": {
                    "style": request.style,
                    "tone": request.tone,
                    "language": request.language,
                    "target_audience": request.target_audience,
                    "prompt_id": request.prompt_id,
                }
            }
        )
        if request.auto_publish:
            article.published_at = datetime.now(timezone.utc)

        try:
            self.db.add(article)
            self.db.commit()
            self.db.refresh(article)
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Article composed: {article.title} (ID: {article.id}) in {generation_time}s")
        self.activity.log(
            user_id, "article_generated", "article", article.id,
            metadata={
                "title": article.title,
                "ai_model": article.ai_model,
                "auto_publish": request.auto_publish
            }
        )
        return article
