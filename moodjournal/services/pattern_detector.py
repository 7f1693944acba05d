# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from datetime import datetime, timedelta
from typing import Optional
from sqlalchemy.orm import Session

from moodjournal.models.journal import JournalEntry
from moodjournal.utils.support_messages import NEGATIVE_PATTERN_MESSAGE

logger = logging.getLogger(__name__)

STREAK_WINDOW_DAYS = 3
STREAK_LENGTH = 3


def check_negative_pattern(db: Session, user_id: int, now: Optional[datetime] = None) -> dict:
    """
    Flags a negative streak: the user's three most recent entries from the
    last three days all scored exactly -1.

    Storage failures never reach the caller. They are logged and reported as
    "no pattern" so the chatbot reply is never blocked by this check.
    """
    now = now or datetime.utcnow()
    window_start = now - timedelta(days=STREAK_WINDOW_DAYS)

    try:
        recent_entries = (
            db.query(JournalEntry)
            .filter(
                JournalEntry.user_id == user_id,
                JournalEntry.date >= window_start,
            )
            .order_by(JournalEntry.date.desc())
            .limit(STREAK_LENGTH)
            .all()
        )
    except Exception:
        logger.exception(f"⚠️ Negative pattern check failed for user {user_id}; reporting no pattern.")
        return {"pattern": False}

    if len(recent_entries) < STREAK_LENGTH:
        return {"pattern": False}

    if all(entry.mood_score == -1 for entry in recent_entries[:STREAK_LENGTH]):
        logger.warning(f"😔 Negative streak detected for user {user_id}")
        return {"pattern": True, "message": NEGATIVE_PATTERN_MESSAGE}

    return {"pattern": False}
