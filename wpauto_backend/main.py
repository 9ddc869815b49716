"""
FastAPI main application for the WP Auto dashboard backend.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
import logging

from wpauto_backend.core.config import settings
from wpauto_backend.db.init_db import init_db
from wpauto_backend.db.session import SessionLocal
from wpauto_backend.routers import (
    ai_prompts,
    articles,
    companies,
    dashboard,
    force_process,
    n8n,
    scheduled_articles,
    system_logs,
    webhooks,
    websites,
    workflows,
)
from wpauto_backend.services.processing_service import ArticleProcessingService

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

job_scheduler = AsyncIOScheduler()

app = FastAPI(
    title="WP Auto Backend API",
    description="Backend API for the WordPress content automation dashboard",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# n8n must be registered before the webhook CRUD routes so /api/webhooks/n8n
# is not captured by /api/webhooks/{webhook_id}
app.include_router(n8n.router, prefix="/api/webhooks/n8n", tags=["n8n"])
app.include_router(force_process.router, prefix="/api/force-process", tags=["orchestration"])
app.include_router(scheduled_articles.router, prefix="/api/scheduled-articles", tags=["orchestration"])
app.include_router(articles.router, prefix="/api/articles", tags=["articles"])
app.include_router(websites.router, prefix="/api/websites", tags=["websites"])
app.include_router(webhooks.router, prefix="/api/webhooks", tags=["webhooks"])
app.include_router(companies.router, prefix="/api/companies", tags=["companies"])
app.include_router(ai_prompts.router, prefix="/api/ai-prompts", tags=["ai-prompts"])
app.include_router(workflows.router, prefix="/api/workflows", tags=["workflows"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["dashboard"])
app.include_router(system_logs.router, prefix="/api/system-logs", tags=["system-logs"])


async def process_due_scheduled_articles():
    """Background task to process due scheduled articles."""
    try:
        db = SessionLocal()
        try:
            service = ArticleProcessingService(db)
            result = await service.process_due_articles()
            logger.info(f"[SCHEDULER] Processed scheduled articles: {result}")
        finally:
            db.close()
    except Exception as e:
        logger.exception(f"[SCHEDULER] Error processing scheduled articles: {e}")


@app.on_event("startup")
async def startup_event():
    """Initialize database and scheduler on startup."""
    init_db()

    if not settings.SCHEDULER_ENABLED:
        logger.info("APScheduler disabled - scheduled articles are only processed on demand")
        return

    job_scheduler.add_job(
        process_due_scheduled_articles,
        trigger=IntervalTrigger(minutes=settings.SCHEDULER_INTERVAL_MINUTES),
        id="process_scheduled_articles",
        name="Process due scheduled articles",
        replace_existing=True
    )

    job_scheduler.start()
    logger.info(
        f"APScheduler started - scheduled articles are processed every "
        f"{settings.SCHEDULER_INTERVAL_MINUTES} minutes"
    )


@app.on_event("shutdown")
async def shutdown_event():
    """Shutdown scheduler on application shutdown."""
    if job_scheduler.running:
        job_scheduler.shutdown(wait=False)
        logger.info("APScheduler stopped")


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "WP Auto Backend API", "version": "1.0.0"}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
