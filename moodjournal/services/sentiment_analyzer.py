# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.

"""
Keyword-count sentiment scoring for journal text.

Every token is lowercased, stripped of punctuation and looked up in two fixed
word sets. The balance of positive vs negative hits is squashed into a
tri-state mood score: 1 (positive), 0 (neutral) or -1 (negative).
There is no negation handling, so "not happy" still counts as positive.
"""

import re

from moodjournal.utils.support_messages import NEGATIVE, NEUTRAL, POSITIVE

POSITIVE_WORDS = frozenset({
    "happy", "joy", "excited", "great", "wonderful", "amazing", "fantastic", "excellent",
    "good", "positive", "love", "like", "enjoy", "pleased", "satisfied", "content",
    "peaceful", "calm", "relaxed", "grateful", "blessed", "lucky", "fortunate",
    "success", "achievement", "progress", "improvement", "growth", "learning",
    "smile", "laugh", "fun", "enjoyable", "beautiful", "perfect", "awesome",
})

NEGATIVE_WORDS = frozenset({
    "sad", "depressed", "angry", "frustrated", "anxious", "worried", "scared", "afraid",
    "terrible", "awful", "horrible", "bad", "negative", "hate", "dislike", "upset",
    "disappointed", "hurt", "pain", "suffering", "struggle", "difficult", "hard",
    "stress", "pressure", "overwhelmed", "exhausted", "tired", "lonely", "alone",
    "hopeless", "helpless", "worthless", "useless", "failure", "defeat", "loss",
    "cry", "tears", "sadness", "grief", "sorrow", "misery", "despair",
})

# Ratios inside (-0.2, 0.2) are treated as neutral
SCORE_THRESHOLD = 0.2

_NON_WORD = re.compile(r"[^\w]", re.ASCII)


def analyze_sentiment(text) -> int:
    """
    Returns 1, 0 or -1 for the given text. Anything that is not a string
    scores neutral instead of raising.
    """
    if not text or not isinstance(text, str):
        return 0

    positive_count = 0
    negative_count = 0

    for word in text.lower().split():
        clean_word = _NON_WORD.sub("", word)
        if clean_word in POSITIVE_WORDS:
            positive_count += 1
        elif clean_word in NEGATIVE_WORDS:
            negative_count += 1

    if positive_count == 0 and negative_count == 0:
        return 0

    score = (positive_count - negative_count) / (positive_count + negative_count)

    if score > SCORE_THRESHOLD:
        return 1
    if score < -SCORE_THRESHOLD:
        return -1
    return 0


def mood_category(mood_score: int) -> str:
    if mood_score == 1:
        return POSITIVE
    if mood_score == -1:
        return NEGATIVE
    return NEUTRAL
