# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from moodjournal.models.database import Base
from moodjournal.utils.encryption import EncryptedText  # 🔐 Encryption utils


class JournalEntry(Base):
    __tablename__ = "journal_entries"
    __table_args__ = (
        CheckConstraint("mood_score IN (-1, 0, 1)", name="ck_journal_entries_mood_score"),
        Index("ix_journal_entries_user_date", "user_id", "date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    content = Column(EncryptedText, nullable=False)  # 🔐 Encrypted
    mood_score = Column(Integer, nullable=False, default=0)

    date = Column(DateTime, default=datetime.utcnow, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="journal_entries")

    def to_public_dict(self) -> dict:
        return {
            "id": self.id,
            "content": self.content,
            "moodScore": self.mood_score,
            "date": self.date.isoformat() + "Z",
            "createdAt": self.created_at.isoformat() + "Z",
        }

    def __repr__(self):
        return f"<JournalEntry id={self.id} user_id={self.user_id} mood_score={self.mood_score}>"
