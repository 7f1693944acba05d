# reset_db.py
from moodjournal.models import database  # Make sure this imports your Base
from moodjournal.models import User, JournalEntry  # noqa: F401  registers all models
from moodjournal.models.database import engine

if __name__ == "__main__":
    print("⚠️ Dropping all existing tables...")
    database.Base.metadata.drop_all(bind=engine)

    print("✅ Recreating tables from models...")
    database.Base.metadata.create_all(bind=engine)

    print("✅ Database reset complete.")
