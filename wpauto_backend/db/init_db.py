"""
Initialize database tables.
"""
from wpauto_backend.db.session import engine
from wpauto_backend.db.base import Base  # Import all models


def init_db() -> None:
    """Initialize database tables."""
    # Create all tables
    Base.metadata.create_all(bind=engine)
