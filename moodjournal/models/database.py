# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

# ✅ Only load .env in local/dev
if os.environ.get("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

# ✅ Load required env variable
SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]


def _engine_options(url: str) -> dict:
    # SQLite is used for local dev and tests; it has no server-side pool
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": 10,          # Keep 10 connections open
        "max_overflow": 20,       # Allow 20 extra if under load
        "pool_recycle": 1800,     # Recycle every 30 mins
        "pool_pre_ping": True,    # Validate before using connection
    }


engine = create_engine(SQLALCHEMY_DATABASE_URL, **_engine_options(SQLALCHEMY_DATABASE_URL))

# ✅ Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ Base model
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
