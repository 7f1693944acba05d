# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from moodjournal.auth import get_current_user
from moodjournal.models.database import get_db
from moodjournal.models.user import User
from moodjournal.schemas.journal_schemas import JournalCreateRequest
from moodjournal.services import journal_service

router = APIRouter(prefix="/api/journal", tags=["Journal"])


@router.post("", status_code=201)
def save_journal_entry(
    payload: JournalCreateRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    """
    Scores the entry text and saves it for the logged-in user.
    """
    entry = journal_service.create_entry(db, user.id, payload.content, payload.date)
    return {
        "message": "Journal entry saved successfully",
        "entry": entry.to_public_dict()
    }


@router.get("")
def list_journal_entries(
    page: int = Query(1, ge=1, le=journal_service.MAX_PAGE),
    limit: int = Query(10, ge=1, le=journal_service.MAX_LIMIT),
    sort: str = Query("date"),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    if sort not in journal_service.SORT_COLUMNS:
        raise HTTPException(status_code=400, detail=f"Invalid sort field '{sort}'")

    entries, total = journal_service.list_entries(db, user.id, page, limit, sort)
    return {
        "entries": [entry.to_public_dict() for entry in entries],
        "pagination": journal_service.build_pagination(page, limit, total)
    }


@router.get("/mood-trend")
def mood_trend(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    """
    Average mood per day for the last 7 days.
    """
    return {"moodTrend": journal_service.get_mood_trend(db, user.id)}


@router.delete("/{entry_id}")
def delete_journal_entry(
    entry_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user)
):
    if not journal_service.delete_entry(db, user.id, entry_id):
        raise HTTPException(status_code=404, detail="Journal entry not found")

    return {"message": "Journal entry deleted successfully"}
