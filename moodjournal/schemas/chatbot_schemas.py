# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.

from pydantic import BaseModel, field_validator

from moodjournal.schemas.journal_schemas import clean_journal_text


class ChatbotRequest(BaseModel):
    journalText: str

    @field_validator("journalText")
    @classmethod
    def text_long_enough(cls, value: str) -> str:
        return clean_journal_text(value, "Journal text")
