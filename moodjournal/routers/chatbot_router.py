# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.

import random
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from moodjournal.auth import get_current_user
from moodjournal.models.database import get_db
from moodjournal.models.user import User
from moodjournal.schemas.chatbot_schemas import ChatbotRequest
from moodjournal.services.chatbot_service import build_chatbot_reply, get_rng, pick_tip
from moodjournal.utils.rate_limit_utils import limiter, CHATBOT_RATE_LIMIT
from moodjournal.utils.support_messages import MENTAL_HEALTH_TIPS, NEUTRAL

router = APIRouter(prefix="/api/chatbot", tags=["Chatbot"])


@router.post("")
@limiter.limit(CHATBOT_RATE_LIMIT)
def chatbot_reply(
    request: Request,
    payload: ChatbotRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    rng: random.Random = Depends(get_rng)
):
    """
    Mood score, a matching tip and insight, plus a streak alert when the
    user's last three entries were all negative.
    """
    return build_chatbot_reply(db, user.id, payload.journalText, rng)


@router.get("/tips")
def random_tip(
    category: str = Query(NEUTRAL),
    user: User = Depends(get_current_user),
    rng: random.Random = Depends(get_rng)
):
    if category not in MENTAL_HEALTH_TIPS:
        raise HTTPException(status_code=400, detail="Invalid category")

    return {"tip": pick_tip(category, rng), "category": category}
