# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.

"""
Data access for journal entries.

Every function takes the requesting user's id and filters on it inside the
same query, so an entry owned by someone else is indistinguishable from one
that does not exist.
"""

import logging
import math
from collections import defaultdict
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session

from moodjournal.models.journal import JournalEntry
from moodjournal.services.sentiment_analyzer import analyze_sentiment

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "date": JournalEntry.date,
    "createdAt": JournalEntry.created_at,
    "moodScore": JournalEntry.mood_score,
}

MOOD_TREND_DAYS = 7

MAX_PAGE = 100_000
MAX_LIMIT = 100


def to_naive_utc(value: datetime) -> datetime:
    """Entry dates are stored as naive UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def create_entry(db: Session, user_id: int, content: str, date: Optional[datetime] = None) -> JournalEntry:
    mood_score = analyze_sentiment(content)
    now = datetime.utcnow()

    new_entry = JournalEntry(
        user_id=user_id,
        content=content,
        mood_score=mood_score,
        date=to_naive_utc(date) if date else now,
        created_at=now,
    )
    db.add(new_entry)
    db.commit()
    db.refresh(new_entry)

    logger.info(f"📝 Journal entry {new_entry.id} saved for user {user_id} (mood {mood_score})")
    return new_entry


def list_entries(db: Session, user_id: int, page: int, limit: int, sort: str = "date") -> Tuple[List[JournalEntry], int]:
    column = SORT_COLUMNS[sort]
    query = db.query(JournalEntry).filter(JournalEntry.user_id == user_id)

    entries = (
        query.order_by(column.desc(), JournalEntry.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    total = query.count()
    return entries, total


def build_pagination(page: int, limit: int, total: int) -> dict:
    return {
        "currentPage": page,
        "totalPages": math.ceil(total / limit),
        "totalEntries": total,
        "hasNext": page * limit < total,
        "hasPrev": page > 1,
    }


def get_mood_trend(db: Session, user_id: int, days: int = MOOD_TREND_DAYS, now: Optional[datetime] = None) -> List[dict]:
    """
    Average mood per UTC calendar day over the trailing window, oldest day first.
    """
    now = now or datetime.utcnow()
    since = now - timedelta(days=days)

    entries = (
        db.query(JournalEntry.date, JournalEntry.mood_score)
        .filter(JournalEntry.user_id == user_id, JournalEntry.date >= since)
        .order_by(JournalEntry.date.asc())
        .all()
    )

    # dicts keep insertion order, and rows arrive sorted by date
    mood_by_date = defaultdict(list)
    for entry_date, mood_score in entries:
        mood_by_date[entry_date.date().isoformat()].append(mood_score)

    return [
        {"date": date_key, "averageMood": sum(scores) / len(scores)}
        for date_key, scores in mood_by_date.items()
    ]


def delete_entry(db: Session, user_id: int, entry_id: int) -> bool:
    entry = (
        db.query(JournalEntry)
        .filter(JournalEntry.id == entry_id, JournalEntry.user_id == user_id)
        .first()
    )
    if not entry:
        return False

    db.delete(entry)
    db.commit()

    logger.info(f"🗑️ Journal entry {entry_id} deleted by user {user_id}")
    return True
