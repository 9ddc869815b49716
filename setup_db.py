"""
Database setup script - creates tables and seeds a default AI prompt.

Usage: python setup_db.py [user_id]
"""
import os
import sys

# Add the current directory to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from wpauto_backend.db.base import AIPrompt
from wpauto_backend.db.init_db import init_db
from wpauto_backend.db.session import SessionLocal
from wpauto_backend.services.content_generator import DEFAULT_TEMPLATE

DEFAULT_PROMPT_NAME = "Default article"


def create_tables():
    """Create all database tables."""
    print("Creating database tables...")
    init_db()
    print("Tables created successfully")


def seed_default_prompt(user_id: str):
    """Give the user the built-in article prompt if they have none with that name."""
    db = SessionLocal()
    try:
        existing = db.query(AIPrompt).filter(
            AIPrompt.user_id == user_id,
            AIPrompt.name == DEFAULT_PROMPT_NAME
        ).first()
        if existing:
            print(f"Default prompt already exists for {user_id}, skipping seed")
            return

        db.add(AIPrompt(user_id=user_id, name=DEFAULT_PROMPT_NAME, template=DEFAULT_TEMPLATE))
        db.commit()
        print(f"Default prompt seeded for {user_id}")

    finally:
        db.close()


def main():
    """Main setup function."""
    print("Setting up WP Auto database...")

    try:
        create_tables()

        if len(sys.argv) > 1:
            seed_default_prompt(sys.argv[1])

        print("Database setup completed successfully!")
        print("\nNext step: uvicorn wpauto_backend.main:app --reload")

    except Exception as e:
        print(f"Database setup failed: {e}")
        print("\nCheck that DATABASE_URL points at a reachable database.")
        sys.exit(1)


if __name__ == "__main__":
    main()
