# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.

import random
from sqlalchemy.orm import Session

from moodjournal.services.sentiment_analyzer import analyze_sentiment, mood_category
from moodjournal.services.pattern_detector import check_negative_pattern
from moodjournal.utils.support_messages import MENTAL_HEALTH_TIPS, MOOD_INSIGHTS

_rng = random.Random()


def get_rng() -> random.Random:
    """Randomness source for tip selection. Tests override this dependency."""
    return _rng


def pick_tip(category: str, rng: random.Random) -> str:
    return rng.choice(MENTAL_HEALTH_TIPS[category])


def build_chatbot_reply(db: Session, user_id: int, journal_text: str, rng: random.Random) -> dict:
    """
    Scores the text, checks the user's recent entries for a negative streak
    and assembles tip, insight and optional pattern alert. Nothing is saved.
    """
    mood_score = analyze_sentiment(journal_text)
    pattern_check = check_negative_pattern(db, user_id)
    category = mood_category(mood_score)

    return {
        "moodScore": mood_score,
        "moodCategory": category,
        "suggestion": pick_tip(category, rng),
        "patternAlert": pattern_check["message"] if pattern_check["pattern"] else None,
        "insight": MOOD_INSIGHTS[category],
    }
