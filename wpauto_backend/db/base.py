"""
Database models for the content automation dashboard.
"""
from sqlalchemy import Column, Integer, String, DateTime, Boolean, Text, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from wpauto_backend.db.session import Base


class Company(Base):
    """Company that owns websites."""
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    logo_url = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    website_url = Column(String, nullable=True)
    owner_id = Column(String, nullable=False, index=True)
    status = Column(String, default="active")  # active, inactive, suspended
    settings = Column(JSON, nullable=True, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    websites = relationship("Website", back_populates="company")


class Website(Base):
    """WordPress website model."""
    __tablename__ = "websites"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="SET NULL"), nullable=True)
    name = Column(String, nullable=False)
    url = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String, default="active")  # active, inactive, maintenance
    wp_username = Column(String, nullable=True)
    wp_password = Column(String, nullable=True)  # WordPress application password
    wordpress_version = Column(String, nullable=True)
    last_health_check = Column(DateTime(timezone=True), nullable=True)
    health_status = Column(String, default="unknown")  # healthy, warning, error, unknown
    settings = Column(JSON, nullable=True, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    company = relationship("Company", back_populates="websites")
    articles = relationship("Article", back_populates="website", cascade="all, delete-orphan")
    workflows = relationship("Workflow", back_populates="website", cascade="all, delete-orphan")


class Webhook(Base):
    """Outbound webhook integration, typically an n8n workflow trigger."""
    __tablename__ = "webhooks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    url = Column(String, nullable=False)
    active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    articles = relationship("Article", back_populates="webhook")


class AIPrompt(Base):
    """Reusable AI prompt template."""
    __tablename__ = "ai_prompts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    template = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class Workflow(Base):
    """Binding of a website, prompt template and webhook."""
    __tablename__ = "workflows"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    website_id = Column(Integer, ForeignKey("websites.id", ondelete="CASCADE"), nullable=False)
    prompt_template_id = Column(Integer, ForeignKey("ai_prompts.id", ondelete="SET NULL"), nullable=True)
    webhook_id = Column(Integer, ForeignKey("webhooks.id", ondelete="SET NULL"), nullable=True)
    is_active = Column(Boolean, default=True)
    schedule_type = Column(String, nullable=True)  # manual, cron, interval
    schedule_config = Column(JSON, nullable=True)
    settings = Column(JSON, nullable=True, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    website = relationship("Website", back_populates="workflows")
    prompt_template = relationship("AIPrompt")
    webhook = relationship("Webhook")


class Article(Base):
    """Article tracked through generation and publishing."""
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    website_id = Column(Integer, ForeignKey("websites.id", ondelete="CASCADE"), nullable=False)
    webhook_id = Column(Integer, ForeignKey("webhooks.id", ondelete="SET NULL"), nullable=True)
    workflow_id = Column(Integer, ForeignKey("workflows.id", ondelete="SET NULL"), nullable=True)
    title = Column(String, nullable=False)
    slug = Column(String, nullable=True)
    content = Column(Text, nullable=True)
    excerpt = Column(Text, nullable=True)
    category = Column(String, nullable=True)
    tags = Column(JSON, nullable=True, default=list)
    # draft, pending, scheduled, processing, posted, published, failed
    status = Column(String, nullable=False, default="draft", index=True)
    generation_type = Column(String, nullable=True)  # manual, scheduled
    scheduled_at = Column(DateTime(timezone=True), nullable=True, index=True)
    generation_progress = Column(Integer, nullable=True)
    generation_message = Column(Text, nullable=True)
    error_message = Column(Text, nullable=True)
    failed_at = Column(DateTime(timezone=True), nullable=True)
    published_at = Column(DateTime(timezone=True), nullable=True)
    wp_post_id = Column(Integer, nullable=True)
    wp_post_url = Column(String, nullable=True)
    word_count = Column(Integer, nullable=True)
    generation_time_seconds = Column(Integer, nullable=True)
    ai_model = Column(String, nullable=True)
    extra_metadata = Column("metadata", JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    website = relationship("Website", back_populates="articles")
    webhook = relationship("Webhook", back_populates="articles")
    workflow = relationship("Workflow")


class ExecutionLog(Base):
    """One row per workflow trigger or n8n callback."""
    __tablename__ = "execution_logs"

    id = Column(Integer, primary_key=True, index=True)
    article_id = Column(Integer, ForeignKey("articles.id", ondelete="CASCADE"), nullable=True, index=True)
    status = Column(String, nullable=False)  # success, failed
    trigger_type = Column(String, nullable=False)  # webhook, manual_force_process, scheduled
    extra_metadata = Column("metadata", JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class SystemLog(Base):
    """Application-level log entry persisted for operators."""
    __tablename__ = "system_logs"

    id = Column(Integer, primary_key=True, index=True)
    level = Column(String, nullable=False, index=True)  # info, warn, error, debug
    message = Column(Text, nullable=False)
    source = Column(String, nullable=False, index=True)
    user_id = Column(String, nullable=True)
    extra_metadata = Column("metadata", JSON, nullable=True)
    details = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)


class UserActivityLog(Base):
    """Audit trail of user actions."""
    __tablename__ = "user_activity_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    action = Column(String, nullable=False)
    entity_type = Column(String, nullable=True)
    entity_id = Column(Integer, nullable=True)
    company_id = Column(Integer, nullable=True)
    extra_metadata = Column("metadata", JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
