# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.

from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime

from moodjournal.services.journal_service import to_naive_utc

MIN_TEXT_LENGTH = 10


def clean_journal_text(value: str, label: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{label} is required")
    if len(value) < MIN_TEXT_LENGTH:
        raise ValueError(f"{label} must be at least {MIN_TEXT_LENGTH} characters long")
    return value


class JournalCreateRequest(BaseModel):
    content: str
    date: Optional[datetime] = None

    @field_validator("content")
    @classmethod
    def content_long_enough(cls, value: str) -> str:
        return clean_journal_text(value, "Journal content")

    @field_validator("date")
    @classmethod
    def date_in_utc_range(cls, value: Optional[datetime]) -> Optional[datetime]:
        # offsets near year 1 or 9999 cannot be shifted to UTC
        if value is None:
            return value
        try:
            return to_naive_utc(value)
        except OverflowError:
            raise ValueError("Journal date is out of range")
