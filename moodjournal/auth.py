# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MoodJournal - Your Reflective Journal project.
# Licensed under the MIT License - see the LICENSE file for details.

from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from moodjournal.utils.jwt_utils import decode_user_id
from moodjournal.models.database import get_db
from moodjournal.models.user import User

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")  # JSON login, header extraction only


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    """
    Resolves the caller from the bearer token. User ids sent in request
    bodies are never consulted.
    """
    user_id = decode_user_id(token)

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=401, detail="❌ User not found")

    return user
